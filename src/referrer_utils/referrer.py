"""
Referrer classification for traffic source analysis.

This module classifies an incoming referrer into exactly one source:
- Campaign: Tagged with utm_source, utm_medium or utm_campaign
- Search: A recognized search engine (Google, Bing, DuckDuckGo, etc.)
- Social: A recognized social platform (Facebook, Twitter/X, Reddit, etc.)
- Direct: No referrer at all, or navigation within the site itself
- Referral: Any other website linking to yours
- Unknown: A referrer that isn't a valid URL

Rules are checked in that order and the first match wins. Campaign tagging
beats search and social detection: a Google Ads click carrying UTM
parameters is a campaign visit, not an organic search.

Nothing here raises for bad input. Omit the ``url`` argument to classify
the current request's referrer (see ``referrer_utils.context``).
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .context import get_current_domain, resolve_referrer
from .domains import SEARCH_PARAMS, match_search_engine, match_social_platform
from .sanitize import sanitize_text
from .urls import get_domain, get_root_domain, is_valid, parse_query
from .utm import UTMParams, get_utm_parameters

logger = logging.getLogger(__name__)


class TrafficSource(str, Enum):
    """Traffic source classification."""

    SEARCH = "search"        # Search engine results
    SOCIAL = "social"        # Social media platforms
    DIRECT = "direct"        # No referrer, or same-site navigation
    REFERRAL = "referral"    # Other websites
    CAMPAIGN = "campaign"    # UTM-tagged links
    UNKNOWN = "unknown"      # Referrer present but not a valid URL


@dataclass(frozen=True)
class ReferrerInfo:
    """
    Everything known about a referrer.

    Each field is computed independently from the same URL.

    Attributes:
        url: The referrer as received (None when there was none)
        is_valid: Whether it's a well-formed absolute URL
        domain: Host, verbatim
        root_domain: Host without www./subdomains (naive last-two-labels)
        is_external: Whether the host differs from the current site
        search_engine: Search engine key, e.g. "google"
        social_platform: Social platform key, e.g. "twitter"
        search_terms: Sanitized search phrase (search engines only)
        utm_parameters: Sanitized UTM values
        traffic_source: The single classification
    """
    url: str | None = None
    is_valid: bool = False
    domain: str | None = None
    root_domain: str | None = None
    is_external: bool = False
    search_engine: str | None = None
    social_platform: str | None = None
    search_terms: str | None = None
    utm_parameters: UTMParams = field(default_factory=UTMParams)
    traffic_source: TrafficSource = TrafficSource.DIRECT

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form, with the traffic source as its string value."""
        return {
            "url": self.url,
            "is_valid": self.is_valid,
            "domain": self.domain,
            "root_domain": self.root_domain,
            "is_external": self.is_external,
            "search_engine": self.search_engine,
            "social_platform": self.social_platform,
            "search_terms": self.search_terms,
            "utm_parameters": self.utm_parameters.to_dict(),
            "traffic_source": self.traffic_source.value,
        }


def get_search_engine(url: str | None = None) -> str | None:
    """Search engine key for the referrer, e.g. "google"."""
    return match_search_engine(get_domain(url))


def get_social_platform(url: str | None = None) -> str | None:
    """Social platform key for the referrer, e.g. "facebook"."""
    return match_social_platform(get_domain(url))


def is_search_engine(url: str | None = None) -> bool:
    return get_search_engine(url) is not None


def is_social(url: str | None = None) -> bool:
    return get_social_platform(url) is not None


def get_search_terms(url: str | None = None) -> str | None:
    """
    The search phrase a visitor used, if they came from a search engine.

    Only recognized search engines count: ``https://example.com/?q=test``
    yields None. Parameters are tried in ``SEARCH_PARAMS`` order and the
    first one with a non-empty (post-sanitizing) value wins.

    Examples:
        >>> get_search_terms("https://www.google.com/search?q=wordpress+plugins")
        'wordpress plugins'
    """
    url = resolve_referrer(url)
    if not is_valid(url) or not is_search_engine(url):
        return None

    params = parse_query(url)
    for name in SEARCH_PARAMS:
        terms = sanitize_text(params.get(name))
        if terms:
            return terms

    return None


def is_external(url: str | None = None, current_domain: str | None = None) -> bool:
    """
    Whether the referrer comes from another domain.

    A referrer without a domain (missing or invalid) is not external. The
    comparison is exact and case-sensitive, so ``blog.mysite.com`` is
    external to ``mysite.com``.

    Args:
        url: Referrer URL; omit to use the current request's referrer
        current_domain: The site's own domain; defaults to the context's
    """
    domain = get_domain(url)
    if not domain:
        return False

    if current_domain is None:
        current_domain = get_current_domain()

    return domain != current_domain


def is_internal(url: str | None = None, current_domain: str | None = None) -> bool:
    """Negation of ``is_external``; a missing referrer counts as internal."""
    return not is_external(url, current_domain)


def get_traffic_source(
    url: str | None = None,
    current_domain: str | None = None
) -> TrafficSource:
    """
    Classify a referrer into a traffic source.

    Args:
        url: Referrer URL; omit to use the current request's referrer
        current_domain: The site's own domain; defaults to the context's

    Returns:
        The first matching TrafficSource, checked in this order: direct (no
        referrer), unknown (invalid URL), campaign, search, social, direct
        (internal), referral.

    Examples:
        >>> get_traffic_source("https://t.co/abc123")
        <TrafficSource.SOCIAL: 'social'>

        >>> get_traffic_source(None)
        <TrafficSource.DIRECT: 'direct'>
    """
    url = resolve_referrer(url)

    if not url:
        source = TrafficSource.DIRECT
    elif not is_valid(url):
        source = TrafficSource.UNKNOWN
    elif get_utm_parameters(url).is_campaign:
        source = TrafficSource.CAMPAIGN
    elif is_search_engine(url):
        source = TrafficSource.SEARCH
    elif is_social(url):
        source = TrafficSource.SOCIAL
    elif is_internal(url, current_domain):
        source = TrafficSource.DIRECT
    else:
        source = TrafficSource.REFERRAL

    logger.debug(f"Classified referrer {url!r} as {source.value}")
    return source


def get_referrer_info(
    url: str | None = None,
    current_domain: str | None = None
) -> ReferrerInfo:
    """
    Get comprehensive information about a referrer.

    Never raises; fields that don't apply are None (or False).

    Examples:
        >>> info = get_referrer_info("https://www.google.com/search?q=wordpress+plugins")
        >>> info.search_engine, info.search_terms, info.traffic_source.value
        ('google', 'wordpress plugins', 'search')
    """
    url = resolve_referrer(url)

    return ReferrerInfo(
        url=url,
        is_valid=is_valid(url),
        domain=get_domain(url),
        root_domain=get_root_domain(url),
        is_external=is_external(url, current_domain),
        search_engine=get_search_engine(url),
        social_platform=get_social_platform(url),
        search_terms=get_search_terms(url),
        utm_parameters=get_utm_parameters(url),
        traffic_source=get_traffic_source(url, current_domain),
    )


def is_match(criteria: str | Iterable[str], url: str | None = None) -> bool:
    """
    Check a referrer against search engine, social platform or traffic
    source keys.

    Criteria are trimmed and lowercased. Anything that isn't a string or a
    list/tuple/set of strings never matches.

    Examples:
        >>> is_match(["google", "bing"], "https://www.google.com/search?q=x")
        True

        >>> is_match("social", "https://www.google.com/search?q=x")
        False
    """
    if isinstance(criteria, str):
        criteria = [criteria]
    elif not isinstance(criteria, (list, tuple, set, frozenset)):
        return False

    url = resolve_referrer(url)
    candidates = {
        get_search_engine(url),
        get_social_platform(url),
        get_traffic_source(url).value,
    }
    candidates.discard(None)

    for criterion in criteria:
        if not isinstance(criterion, str):
            continue
        if criterion.strip().lower() in candidates:
            return True

    return False
