"""
Where the referrer comes from when the caller doesn't pass one.

Every classification function accepts an optional URL. When it's omitted the
function asks the active *context provider* for the current request's raw
referrer (and, for the internal/external check, the site's own domain).

The active provider lives in a ContextVar, so concurrent requests - threads
or asyncio tasks - each see their own. In a FastAPI app the middleware below
installs one per request; elsewhere use ``use_context``:

    with use_context(StaticContext("https://t.co/abc", "mysite.com")):
        get_traffic_source()   # TrafficSource.SOCIAL
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from .config import ReferrerConfig
from .sanitize import clean_header

logger = logging.getLogger(__name__)


@runtime_checkable
class ReferrerContext(Protocol):
    """Supplies the raw referrer and the current site's domain."""

    def get_raw_referrer(self) -> str | None:
        ...

    def get_current_domain(self) -> str:
        ...


@dataclass(frozen=True)
class StaticContext:
    """A fixed referrer and domain, for scripts, jobs and tests."""

    referrer: str | None = None
    current_domain: str = ""

    def get_raw_referrer(self) -> str | None:
        return self.referrer or None

    def get_current_domain(self) -> str:
        return self.current_domain


class RequestContext:
    """Reads the referrer from a Starlette/FastAPI request.

    The header value is cleaned (entities unescaped, tags and control
    characters stripped) before the classifier sees it. The current domain
    is the configured one, falling back to the host the request was made to.
    """

    def __init__(self, request: Request, config: ReferrerConfig | None = None):
        self.request = request
        self.config = config or ReferrerConfig()

    def get_raw_referrer(self) -> str | None:
        raw = self.request.headers.get(self.config.header_name)
        if not raw:
            return None
        return clean_header(raw) or None

    def get_current_domain(self) -> str:
        return self.config.current_domain or self.request.url.hostname or ""


_active_context: ContextVar[ReferrerContext | None] = ContextVar(
    "referrer_context", default=None
)


def get_context() -> ReferrerContext | None:
    """Return the active provider, if any."""
    return _active_context.get()


@contextmanager
def use_context(context: ReferrerContext | None) -> Iterator[ReferrerContext | None]:
    """Install ``context`` as the active provider for the enclosed block."""
    token = _active_context.set(context)
    try:
        yield context
    finally:
        _active_context.reset(token)


def get_referrer() -> str | None:
    """The active provider's raw referrer; None when there is no provider.

    A provider that raises is logged and treated as "no referrer".
    """
    context = _active_context.get()
    if context is None:
        return None

    try:
        referrer = context.get_raw_referrer()
    except Exception:
        logger.warning("Referrer context failed to supply a referrer", exc_info=True)
        return None

    return referrer or None


def get_current_domain() -> str:
    """The active provider's site domain; "" when unavailable."""
    context = _active_context.get()
    if context is None:
        return ""

    try:
        return context.get_current_domain() or ""
    except Exception:
        logger.warning("Referrer context failed to supply the current domain", exc_info=True)
        return ""


def resolve_referrer(url: str | None) -> str | None:
    """An explicit URL wins; otherwise fetch the referrer fresh."""
    return url if url is not None else get_referrer()


class ReferrerContextMiddleware(BaseHTTPMiddleware):
    """Makes each request's referrer available to the classifier.

    Usage:
        app.add_middleware(ReferrerContextMiddleware, config=ReferrerConfig(site_url=...))
    """

    def __init__(self, app, config: ReferrerConfig | None = None):
        super().__init__(app)
        self.config = config or ReferrerConfig()

    async def dispatch(self, request: Request, call_next):
        with use_context(RequestContext(request, self.config)):
            return await call_next(request)
