"""
Search engine and social platform domain tables.

Each table maps a stable, lowercase key ("google", "facebook") to the exact
hostnames that identify it, including www, mobile and short-link variants.
Matching is an exact, case-sensitive lookup of the full host: an unlisted
subdomain of a listed domain does not match.

Tables are immutable and built once at import. A reverse index
(hostname -> key) gives O(1) lookups; building it rejects a hostname listed
under two keys, so declaration order never has to break a tie.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping

from .exceptions import DuplicateHostnameError

logger = logging.getLogger(__name__)


class DomainTable(Mapping[str, frozenset[str]]):
    """An immutable, declaration-ordered key -> hostnames table."""

    def __init__(self, name: str, entries: Mapping[str, Iterable[str]]):
        self.name = name
        self._entries: dict[str, frozenset[str]] = {}
        self._index: dict[str, str] = {}

        for key, hostnames in entries.items():
            hostnames = frozenset(hostnames)
            for hostname in hostnames:
                owner = self._index.setdefault(hostname, key)
                if owner != key:
                    raise DuplicateHostnameError(name, hostname, owner, key)
            self._entries[key] = hostnames

        logger.debug(
            f"Loaded {name} table: {len(self._entries)} keys, "
            f"{len(self._index)} hostnames"
        )

    def __getitem__(self, key: str) -> frozenset[str]:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DomainTable({self.name!r}, keys={list(self._entries)!r})"

    @property
    def hostnames(self) -> frozenset[str]:
        """Every hostname in the table."""
        return frozenset(self._index)

    def match(self, domain: str | None) -> str | None:
        """Key whose hostname set contains ``domain`` exactly, else None."""
        if not domain:
            return None
        return self._index.get(domain)


def _with_www(*hostnames: str) -> list[str]:
    """Each hostname plus its www. variant."""
    return [h for hostname in hostnames for h in (hostname, f"www.{hostname}")]


# =============================================================================
# SEARCH ENGINES
# =============================================================================

SEARCH_ENGINES = DomainTable("search_engines", {
    # Traditional search engines
    "google": _with_www(
        "google.com",
        "google.co.uk",
        "google.ca",
        "google.de",
        "google.fr",
        "google.it",
        "google.es",
        "google.com.au",
        "google.co.jp",
        "google.co.in",
        "google.com.br",
        "google.com.mx",
        "google.nl",
        "google.com.tr",
        "google.com.ar",
        "google.pl",
        "google.com.sa",
        "google.ch",
        "google.be",
        "google.se",
    ),
    "bing": ["bing.com", "www.bing.com", "cn.bing.com"],
    "yahoo": [
        "yahoo.com",
        "www.yahoo.com",
        "search.yahoo.com",
        "yahoo.co.uk",
        "yahoo.co.jp",
        "search.yahoo.co.jp",
        "yahoo.de",
        "yahoo.fr",
        "yahoo.it",
        "yahoo.es",
        "yahoo.com.au",
        "yahoo.com.br",
        "yahoo.com.mx",
        "yahoo.ca",
        "yahoo.in",
    ],
    "duckduckgo": ["duckduckgo.com", "www.duckduckgo.com", "html.duckduckgo.com"],
    "baidu": ["baidu.com", "www.baidu.com", "m.baidu.com"],
    "yandex": ["yandex.com", "yandex.ru", "www.yandex.com", "www.yandex.ru", "ya.ru"],
    "ask": ["ask.com", "www.ask.com"],
    "aol": ["aol.com", "search.aol.com"],
    "ecosia": ["ecosia.org", "www.ecosia.org"],
    "startpage": ["startpage.com", "www.startpage.com"],
    "searx": ["searx.org", "www.searx.org"],
    "qwant": ["qwant.com", "www.qwant.com"],
    "brave": ["search.brave.com"],

    # AI search engines
    "perplexity": ["perplexity.ai", "www.perplexity.ai"],
    "you": ["you.com", "www.you.com"],
    "phind": ["phind.com", "www.phind.com"],
    "kagi": ["kagi.com", "www.kagi.com"],
    "searchgpt": ["chatgpt.com", "www.chatgpt.com"],
    "andi": ["andisearch.com", "www.andisearch.com"],
    "deepseek": ["chat.deepseek.com", "www.deepseek.com"],
})

# Query parameters holding the search phrase, in priority order
SEARCH_PARAMS = (
    "q",      # Google, Bing, DuckDuckGo, Baidu (mobile), Ecosia, Startpage, ...
    "query",  # Generic alternative
    "p",      # Yahoo
    "wd",     # Baidu
    "text",   # Yandex
)


# =============================================================================
# SOCIAL PLATFORMS
# =============================================================================

SOCIAL_PLATFORMS = DomainTable("social_platforms", {
    "facebook": [
        "facebook.com",
        "www.facebook.com",
        "m.facebook.com",
        "l.facebook.com",
        "lm.facebook.com",
        "business.facebook.com",
        "free.facebook.com",
        "web.facebook.com",
        "mtouch.facebook.com",
        "mbasic.facebook.com",
        "apps.facebook.com",
        "mobile.facebook.com",
        "fb.me",
        "fb.com",
        "m.me",
    ],
    "twitter": [
        "twitter.com",
        "www.twitter.com",
        "t.co",
        "x.com",
        "www.x.com",
        "mobile.twitter.com",
        "tweetdeck.twitter.com",
    ],
    "instagram": [
        "instagram.com",
        "www.instagram.com",
        "l.instagram.com",
        "web.instagram.com",
        "touch.instagram.com",
        "mobile.instagram.com",
        "ig.me",
    ],
    "linkedin": ["linkedin.com", "www.linkedin.com", "m.linkedin.com", "lnkd.in"],
    "pinterest": ["pinterest.com", "www.pinterest.com", "pin.it"],
    "reddit": [
        "reddit.com",
        "www.reddit.com",
        "m.reddit.com",
        "old.reddit.com",
        "new.reddit.com",
        "out.reddit.com",
        "redd.it",
    ],
    "youtube": [
        "youtube.com",
        "www.youtube.com",
        "youtu.be",
        "m.youtube.com",
        "music.youtube.com",
        "gaming.youtube.com",
    ],
    "tiktok": ["tiktok.com", "www.tiktok.com", "m.tiktok.com", "vm.tiktok.com"],
    "snapchat": ["snapchat.com", "www.snapchat.com", "story.snapchat.com", "snap.com"],
    "discord": ["discord.com", "www.discord.com", "discord.gg", "discordapp.com"],
    "telegram": ["telegram.org", "www.telegram.org", "t.me", "telegram.me"],
    "whatsapp": ["whatsapp.com", "www.whatsapp.com", "wa.me", "web.whatsapp.com", "api.whatsapp.com"],
    "mastodon": [
        "mastodon.social",
        "mastodon.online",
        "fosstodon.org",
        "mastodon.world",
        "mstdn.social",
    ],
    "threads": ["threads.net", "www.threads.net"],
})


def match_search_engine(domain: str | None) -> str | None:
    """
    Search engine key for an exact hostname.

    Examples:
        >>> match_search_engine("www.google.com")
        'google'

        >>> match_search_engine("images.google.com") is None
        True
    """
    return SEARCH_ENGINES.match(domain)


def match_social_platform(domain: str | None) -> str | None:
    """Social platform key for an exact hostname, e.g. "t.co" -> "twitter"."""
    return SOCIAL_PLATFORMS.match(domain)


def search_engine_keys() -> tuple[str, ...]:
    """Recognized search engine keys, in declaration order."""
    return tuple(SEARCH_ENGINES)


def social_platform_keys() -> tuple[str, ...]:
    """Recognized social platform keys, in declaration order."""
    return tuple(SOCIAL_PLATFORMS)
