"""
Labels for search engines, social platforms and traffic sources.

The classifier only ever returns machine keys ("google", "social"). This
module maps those keys to display labels for pickers and reports, in one of
two shapes:

    get_search_engine_options()
    # {"google": "Google", "bing": "Bing", ...}

    get_search_engine_options(as_value_label=True)
    # [{"value": "google", "label": "Google"}, ...]

Host applications can add or relabel entries with ``register_options``.
That only changes labels; it never teaches the classifier new domains.
"""

import logging
from collections.abc import Mapping
from threading import Lock

from .exceptions import UnknownOptionGroupError
from .referrer import TrafficSource

logger = logging.getLogger(__name__)

SEARCH_ENGINE = "search_engine"
SOCIAL_PLATFORM = "social_platform"
TRAFFIC_SOURCE = "traffic_source"

SEARCH_ENGINE_LABELS = {
    "google": "Google",
    "bing": "Bing",
    "yahoo": "Yahoo",
    "duckduckgo": "DuckDuckGo",
    "baidu": "Baidu",
    "yandex": "Yandex",
    "ask": "Ask",
    "aol": "AOL",
    "ecosia": "Ecosia",
    "startpage": "Startpage",
    "searx": "Searx",
    "qwant": "Qwant",
    "brave": "Brave Search",
    "perplexity": "Perplexity",
    "you": "You.com",
    "phind": "Phind",
    "kagi": "Kagi",
    "searchgpt": "SearchGPT",
    "andi": "Andi",
    "deepseek": "DeepSeek",
}

SOCIAL_PLATFORM_LABELS = {
    "facebook": "Facebook",
    "twitter": "Twitter/X",
    "instagram": "Instagram",
    "linkedin": "LinkedIn",
    "pinterest": "Pinterest",
    "reddit": "Reddit",
    "youtube": "YouTube",
    "tiktok": "TikTok",
    "snapchat": "Snapchat",
    "discord": "Discord",
    "telegram": "Telegram",
    "whatsapp": "WhatsApp",
    "mastodon": "Mastodon",
    "threads": "Threads",
}

TRAFFIC_SOURCE_LABELS = {
    TrafficSource.SEARCH.value: "Search Engine",
    TrafficSource.SOCIAL.value: "Social Media",
    TrafficSource.DIRECT.value: "Direct",
    TrafficSource.REFERRAL.value: "Referral",
    TrafficSource.CAMPAIGN.value: "Campaign",
    TrafficSource.UNKNOWN.value: "Unknown",
}

BUILTIN_OPTIONS = {
    SEARCH_ENGINE: SEARCH_ENGINE_LABELS,
    SOCIAL_PLATFORM: SOCIAL_PLATFORM_LABELS,
    TRAFFIC_SOURCE: TRAFFIC_SOURCE_LABELS,
}


def to_value_label(options: Mapping[str, str]) -> list[dict[str, str]]:
    """Convert {key: label} into [{"value": key, "label": label}, ...]."""
    return [{"value": key, "label": label} for key, label in options.items()]


class OptionRegistry:
    """Built-in labels plus whatever the host application registers.

    Registrations are applied in order after the built-ins, so they can add
    keys or relabel existing ones. A registration made with a ``context``
    only shows up when options are requested with that same context.
    """

    def __init__(self):
        self._lock = Lock()
        self._extra: dict[str, list[tuple[str | None, dict[str, str]]]] = {
            group: [] for group in BUILTIN_OPTIONS
        }

    def _check_group(self, group: str) -> None:
        if group not in BUILTIN_OPTIONS:
            raise UnknownOptionGroupError(group)

    def register(
        self,
        group: str,
        labels: Mapping[str, str],
        context: str | None = None
    ) -> None:
        """Add or relabel options in ``group``."""
        self._check_group(group)
        with self._lock:
            self._extra[group].append((context, dict(labels)))
        logger.debug(f"Registered {len(labels)} {group} option(s) for context {context!r}")

    def clear(self) -> None:
        """Forget every registration."""
        with self._lock:
            for registrations in self._extra.values():
                registrations.clear()

    def get_options(
        self,
        group: str,
        as_value_label: bool = False,
        context: str | None = None
    ) -> dict[str, str] | list[dict[str, str]]:
        """Options for ``group``, as a dict or as value/label pairs."""
        self._check_group(group)

        options = dict(BUILTIN_OPTIONS[group])
        with self._lock:
            registrations = list(self._extra[group])
        for registered_context, labels in registrations:
            if registered_context is None or registered_context == context:
                options.update(labels)

        return to_value_label(options) if as_value_label else options


default_registry = OptionRegistry()


def register_options(group: str, labels: Mapping[str, str], context: str | None = None) -> None:
    """Register extra labels on the default registry."""
    default_registry.register(group, labels, context)


def get_search_engine_options(as_value_label: bool = False, context: str | None = None):
    return default_registry.get_options(SEARCH_ENGINE, as_value_label, context)


def get_social_platform_options(as_value_label: bool = False, context: str | None = None):
    return default_registry.get_options(SOCIAL_PLATFORM, as_value_label, context)


def get_traffic_source_options(as_value_label: bool = False, context: str | None = None):
    return default_registry.get_options(TRAFFIC_SOURCE, as_value_label, context)
