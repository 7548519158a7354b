"""
Referrer classification for traffic analytics.

Usage:
    from referrer_utils import get_referrer_info, get_traffic_source

    get_traffic_source("https://www.google.com/search?q=wordpress+plugins")
    # TrafficSource.SEARCH

    info = get_referrer_info("https://t.co/abc123")
    info.social_platform   # "twitter"

In a FastAPI app, install the middleware and omit the URL to classify the
current request's Referer header:

    from referrer_utils import ReferrerConfig, ReferrerContextMiddleware

    app.add_middleware(
        ReferrerContextMiddleware,
        config=ReferrerConfig(site_url="https://mysite.com"),
    )

    # In a route: get_traffic_source(), is_internal(), ...
"""

from .config import ReferrerConfig
from .context import (
    ReferrerContext,
    ReferrerContextMiddleware,
    RequestContext,
    StaticContext,
    get_current_domain,
    get_referrer,
    use_context,
)
from .domains import (
    SEARCH_ENGINES,
    SEARCH_PARAMS,
    SOCIAL_PLATFORMS,
    DomainTable,
    match_search_engine,
    match_social_platform,
)
from .exceptions import (
    ConfigError,
    DuplicateHostnameError,
    ReferrerError,
    UnknownOptionGroupError,
)
from .referrer import (
    ReferrerInfo,
    TrafficSource,
    get_referrer_info,
    get_search_engine,
    get_search_terms,
    get_social_platform,
    get_traffic_source,
    is_external,
    is_internal,
    is_match,
    is_search_engine,
    is_social,
)
from .urls import get_domain, get_root_domain, is_valid, parse_query
from .utm import UTMParams, get_campaign_source, get_utm_parameters

__version__ = "1.0.0"
__all__ = [
    "ReferrerConfig",
    "ReferrerContext", "ReferrerContextMiddleware", "RequestContext", "StaticContext",
    "get_current_domain", "get_referrer", "use_context",
    "SEARCH_ENGINES", "SEARCH_PARAMS", "SOCIAL_PLATFORMS", "DomainTable",
    "match_search_engine", "match_social_platform",
    "ConfigError", "DuplicateHostnameError", "ReferrerError", "UnknownOptionGroupError",
    "ReferrerInfo", "TrafficSource",
    "get_referrer_info", "get_search_engine", "get_search_terms", "get_social_platform",
    "get_traffic_source", "is_external", "is_internal", "is_match",
    "is_search_engine", "is_social",
    "get_domain", "get_root_domain", "is_valid", "parse_query",
    "UTMParams", "get_campaign_source", "get_utm_parameters",
]
