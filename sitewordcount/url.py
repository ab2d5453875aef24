"""Cheap syntactic validation of the URLs given on the command line."""

_SCHEMES = ("http://", "https://")


def is_valid_url(url: str) -> bool:
    """Return True if *url* is an http(s) URL with a dot somewhere after the scheme.

    The check is deliberately crude: it only requires the scheme prefix and
    something that looks like a domain.
    """
    if not url or not url.startswith(_SCHEMES):
        return False
    protocol_end = url.find("://")
    if protocol_end < 0:
        return False
    return url.find(".", protocol_end + 3) >= 0