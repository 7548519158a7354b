"""
URL validation and parsing for referrer analysis.

A referrer is only analyzed once it passes ``is_valid``: an absolute URL
with a scheme and a host, no whitespace or control characters. Everything
else here builds on that check and returns None (or an empty dict) for
anything that fails it - nothing in this module raises on bad input.

Each function takes an optional URL; omit it to use the current request's
referrer (see ``referrer_utils.context``).
"""

import ipaddress
import re
from urllib.parse import SplitResult, parse_qsl, urlsplit

from .context import resolve_referrer
from .hosts import host_from_netloc

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_HOST_RE = re.compile(r"^[A-Za-z0-9_](?:[A-Za-z0-9_.\-]*[A-Za-z0-9_])?$")
_INVALID_CHARS_RE = re.compile(r"[\s\x00-\x1f\x7f]")


def _is_valid_host(host: str) -> bool:
    if host.startswith("[") and host.endswith("]"):
        try:
            ipaddress.IPv6Address(host[1:-1])
        except ValueError:
            return False
        return True
    if ".." in host:
        return False
    # Fully qualified form: "www.google.com."
    if host.endswith("."):
        host = host[:-1]
    return bool(_HOST_RE.match(host))


def _split(url: str | None) -> SplitResult | None:
    """Parse a URL, or None if it isn't a structurally valid absolute URL."""
    if not url or not isinstance(url, str):
        return None
    if _INVALID_CHARS_RE.search(url):
        return None

    try:
        parts = urlsplit(url)
        # Raises ValueError for a non-numeric or out-of-range port
        parts.port
    except ValueError:
        return None

    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        return None
    if not parts.netloc or not _is_valid_host(host_from_netloc(parts.netloc)):
        return None

    return parts


def is_valid(url: str | None = None) -> bool:
    """
    Check whether a referrer is a well-formed absolute URL.

    Purely structural: no DNS lookup, no network access.

    Examples:
        >>> is_valid("https://www.google.com/search?q=test")
        True

        >>> is_valid("not-a-valid-url")
        False
    """
    return _split(resolve_referrer(url)) is not None


def get_domain(url: str | None = None) -> str | None:
    """
    The referrer's host, verbatim (subdomains and case as given).

    Examples:
        >>> get_domain("https://www.google.com/search?q=test")
        'www.google.com'
    """
    parts = _split(resolve_referrer(url))
    if parts is None:
        return None
    return host_from_netloc(parts.netloc)


def get_root_domain(url: str | None = None) -> str | None:
    """
    The referrer's domain without subdomains.

    A leading ``www.`` is dropped, then the last two labels are kept. This
    is deliberately naive about multi-label public suffixes:
    ``google.co.uk`` becomes ``co.uk``. Callers depend on that output, so it
    stays.

    Examples:
        >>> get_root_domain("https://blog.example.com/post")
        'example.com'

        >>> get_root_domain("https://www.google.co.uk/")
        'co.uk'
    """
    domain = get_domain(url)
    if not domain:
        return None

    if domain.startswith("www."):
        domain = domain[4:]

    labels = domain.split(".")
    if len(labels) >= 2:
        return ".".join(labels[-2:])

    return domain


def parse_query(url: str | None = None) -> dict[str, str]:
    """
    Parse the referrer's query string into a dict.

    Values are URL-decoded (``+`` becomes a space). When a key repeats, the
    first occurrence wins.

    Examples:
        >>> parse_query("https://example.com/?a=1&b=two+words&a=2")
        {'a': '1', 'b': 'two words'}
    """
    parts = _split(resolve_referrer(url))
    if parts is None or not parts.query:
        return {}

    params: dict[str, str] = {}
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        params.setdefault(key, value)
    return params
