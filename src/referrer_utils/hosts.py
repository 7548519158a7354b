"""
Host extraction that keeps the host exactly as written.

``SplitResult.hostname`` lowercases, but referrer hosts and the site's own
domain are compared case-sensitively, so both sides go through these.
"""

from urllib.parse import urlsplit


def host_from_netloc(netloc: str) -> str:
    """Host part of a netloc: credentials and port dropped, case preserved."""
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        end = host.find("]")
        return host[:end + 1] if end != -1 else host
    return host.partition(":")[0]


def host_of(url: str | None) -> str:
    """Return the host portion of a URL, or "" when it has none."""
    if not url:
        return ""
    try:
        netloc = urlsplit(url).netloc
    except ValueError:
        return ""
    return host_from_netloc(netloc)
