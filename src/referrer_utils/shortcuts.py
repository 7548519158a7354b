"""
Shortcut functions for templates and simple call sites.

These return plain strings/dicts (empty string rather than None) so they
can be dropped straight into a template.
"""

from .context import get_referrer
from .referrer import get_search_terms, get_traffic_source, is_search_engine
from .utm import get_utm_parameters


def get_referrer_url() -> str:
    """The current request's referrer, or ""."""
    return get_referrer() or ""


def get_referrer_source(url: str | None = None) -> str:
    """Traffic source value: "search", "social", "direct", ..."""
    return get_traffic_source(url).value


def get_referrer_utm_params(url: str | None = None) -> dict[str, str | None]:
    """All five UTM fields (source, medium, campaign, term, content)."""
    return get_utm_parameters(url).to_dict()


def is_referrer_from_search(url: str | None = None) -> bool:
    return is_search_engine(url)


def get_referrer_search_terms(url: str | None = None) -> str:
    """Search terms, or "" when the referrer isn't a search engine."""
    return get_search_terms(url) or ""
