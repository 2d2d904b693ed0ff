import threading

import pytest

from specter_xml.prober import ProbeResult

PAYLOAD = "/sitemap.xml?offset=1;SELECT%20IF((8303%3E8302),SLEEP(9),2356)#"


class FakeProber:
    """Answers baseline and payload URLs with canned timings and records calls."""

    def __init__(self, baseline=ProbeResult(0.5, True), payload=ProbeResult(9.2, True)):
        self.baseline = baseline
        self.payload = payload
        self.calls = []
        self._lock = threading.Lock()

    def __call__(self, url):
        with self._lock:
            self.calls.append(url)
        if url.endswith(PAYLOAD):
            return self.payload
        return self.baseline


@pytest.fixture
def fake_prober():
    return FakeProber()


@pytest.fixture
def output_path(tmp_path):
    return tmp_path / "results.txt"
