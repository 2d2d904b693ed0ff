from specter_xml.config import PAYLOAD_SUFFIX


def build_payload_url(url):
    """Append the time-delay payload to an already trimmed target URL."""
    return url + PAYLOAD_SUFFIX
