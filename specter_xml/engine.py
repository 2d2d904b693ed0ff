"""
Two-stage timing decision for a single target.

    baseline GET --(fail)--> nothing
        |--(> 3s)--> SKIPPED (line only outside silent mode)
    payload GET --(fail)--> nothing
        |--silent--> SUSPICIOUS if > 8s, else SILENT_SUPPRESSED
        |--normal--> REPORTED with both timings
"""

import enum
from collections import namedtuple

from specter_xml.config import REPORT_THRESHOLD, SKIP_THRESHOLD
from specter_xml.payload import build_payload_url
from specter_xml.prober import measure_response_time


class Verdict(enum.Enum):
    SKIPPED = "skipped"
    SUSPICIOUS = "suspicious"
    REPORTED = "reported"
    SILENT_SUPPRESSED = "silent-suppressed"


Assessment = namedtuple("Assessment", ["verdict", "line"])


def format_skip(url):
    return f"{url} [SKIPPED: Response time exceeded 3 seconds]"


def format_report(url, original_time, modified_url, modified_time):
    return f"{url} [{original_time:.3f} sec] -> {modified_url} [{modified_time:.3f} sec]"


class ProbeEngine:
    def __init__(self, prober=None, silent=False):
        self.prober = prober or measure_response_time
        self.silent = silent

    def assess(self, url):
        """
        Run both probes for url and return an Assessment, or None when the
        target is blank or a probe failed.
        """
        url = url.strip()
        if not url:
            return None

        original = self.prober(url)
        if not original.ok:
            return None

        if original.elapsed > SKIP_THRESHOLD:
            line = None if self.silent else format_skip(url)
            return Assessment(Verdict.SKIPPED, line)

        modified_url = build_payload_url(url)
        modified = self.prober(modified_url)
        if not modified.ok:
            return None

        if self.silent:
            if modified.elapsed > REPORT_THRESHOLD:
                return Assessment(Verdict.SUSPICIOUS, modified_url)
            return Assessment(Verdict.SILENT_SUPPRESSED, None)
        return Assessment(
            Verdict.REPORTED,
            format_report(url, original.elapsed, modified_url, modified.elapsed),
        )

    def evaluate(self, url):
        """Return the output line for url, or None if nothing should be written."""
        result = self.assess(url)
        if result is None:
            return None
        return result.line


def evaluate(url, silent=False, prober=None):
    return ProbeEngine(prober=prober, silent=silent).evaluate(url)
