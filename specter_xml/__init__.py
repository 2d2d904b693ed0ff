"""
SpecterXml - concurrent time-based blind SQLi probe.

Every target gets a baseline GET and, if it answers quickly, a second GET with
a SLEEP(9) payload appended. Response times are written to an append-only
result file as soon as each target finishes.

IMPORTANT: Use only on systems you own or have explicit permission to test.
"""

__version__ = "1.0.0"
