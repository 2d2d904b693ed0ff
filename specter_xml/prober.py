import time
from collections import namedtuple

import requests
import urllib3

from specter_xml.config import DEFAULT_TIMEOUT, USER_AGENT

# Targets are often lab hosts with self-signed certificates
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

ProbeResult = namedtuple("ProbeResult", ["elapsed", "ok"])

FAILED = ProbeResult(0.0, False)

CHUNK_SIZE = 8192


def measure_response_time(url, timeout=DEFAULT_TIMEOUT):
    """
    Send one GET to url and return how long it took.

    A fresh session is used per call so every probe opens and closes its own
    connection. The body is read and thrown away; only latency matters.
    `timeout` bounds the whole call (redirects and body included), not just
    each socket operation. Going over it, or any transport problem (refused
    connection, DNS, bad URL), gives FAILED. HTTP error statuses still count
    as a measured response.
    """
    with requests.Session() as session:
        session.headers.update({"User-Agent": USER_AGENT})
        try:
            t0 = time.perf_counter()
            r = session.get(url, timeout=timeout, verify=False, stream=True)
            try:
                for _ in r.iter_content(chunk_size=CHUNK_SIZE):
                    if time.perf_counter() - t0 > timeout:
                        return FAILED
            finally:
                r.close()
            dt = time.perf_counter() - t0
        except requests.exceptions.RequestException:
            return FAILED
    if dt > timeout:
        return FAILED
    return ProbeResult(dt, True)
