"""
Configuration for referrer-utils.
"""
import logging
import os
from dataclasses import dataclass

from .exceptions import ConfigError
from .hosts import host_of

logger = logging.getLogger(__name__)

DEFAULT_HEADER_NAME = "referer"


@dataclass
class ReferrerConfig:
    """Settings for reading referrers out of incoming requests.

    Usage:
        config = ReferrerConfig(site_url="https://mysite.com")
        app.add_middleware(ReferrerContextMiddleware, config=config)
    """

    # The application's own base URL; its host is the "current domain"
    site_url: str | None = None

    # Explicit current domain, wins over site_url
    site_domain: str | None = None

    # Request header carrying the referrer
    header_name: str = DEFAULT_HEADER_NAME

    @property
    def current_domain(self) -> str:
        """Domain used to tell internal navigation from external referrers."""
        if self.site_domain:
            return self.site_domain
        return host_of(self.site_url)

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.header_name or not self.header_name.strip():
            raise ConfigError("header_name must be a non-empty header name")
        self.header_name = self.header_name.strip().lower()

        if self.site_url and not host_of(self.site_url):
            logger.warning(
                f"site_url {self.site_url!r} has no host; "
                f"every referrer will be treated as external"
            )

    @classmethod
    def from_env(cls, prefix: str = "REFERRER_") -> "ReferrerConfig":
        """Build a config from environment variables.

        Reads ``{prefix}SITE_URL``, ``{prefix}SITE_DOMAIN`` and
        ``{prefix}HEADER_NAME``. Unset variables fall back to the defaults.
        """
        return cls(
            site_url=os.environ.get(f"{prefix}SITE_URL") or None,
            site_domain=os.environ.get(f"{prefix}SITE_DOMAIN") or None,
            header_name=os.environ.get(f"{prefix}HEADER_NAME", DEFAULT_HEADER_NAME),
        )
