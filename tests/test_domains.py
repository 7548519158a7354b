"""Tests for the search engine and social platform tables."""

import pytest

from referrer_utils.domains import (
    SEARCH_ENGINES,
    SOCIAL_PLATFORMS,
    DomainTable,
    match_search_engine,
    match_social_platform,
    search_engine_keys,
    social_platform_keys,
)
from referrer_utils.exceptions import DuplicateHostnameError


class TestSearchEngineMatching:
    """Test exact hostname lookup in the search engine table."""

    @pytest.mark.parametrize("key", list(SEARCH_ENGINES))
    def test_every_listed_hostname_matches_its_key(self, key):
        for hostname in SEARCH_ENGINES[key]:
            assert match_search_engine(hostname) == key

    def test_www_google(self):
        assert match_search_engine("www.google.com") == "google"

    def test_google_country_domain(self):
        assert match_search_engine("google.co.uk") == "google"

    def test_unlisted_subdomain_does_not_match(self):
        assert match_search_engine("images.google.com") is None

    def test_match_is_case_sensitive(self):
        assert match_search_engine("WWW.GOOGLE.COM") is None

    def test_none_and_empty(self):
        assert match_search_engine(None) is None
        assert match_search_engine("") is None


class TestSocialPlatformMatching:
    """Test exact hostname lookup in the social platform table."""

    @pytest.mark.parametrize("key", list(SOCIAL_PLATFORMS))
    def test_every_listed_hostname_matches_its_key(self, key):
        for hostname in SOCIAL_PLATFORMS[key]:
            assert match_social_platform(hostname) == key

    def test_short_links(self):
        assert match_social_platform("t.co") == "twitter"
        assert match_social_platform("lnkd.in") == "linkedin"
        assert match_social_platform("youtu.be") == "youtube"

    def test_unknown_domain(self):
        assert match_social_platform("random-blog.com") is None
        assert match_search_engine("random-blog.com") is None


class TestDomainTable:
    """Test table construction and immutability."""

    def test_tables_are_disjoint(self):
        assert not SEARCH_ENGINES.hostnames & SOCIAL_PLATFORMS.hostnames

    def test_declaration_order_is_kept(self):
        keys = search_engine_keys()
        assert keys[0] == "google"
        assert keys.index("bing") < keys.index("yahoo")
        assert social_platform_keys()[0] == "facebook"

    def test_duplicate_hostname_rejected(self):
        with pytest.raises(DuplicateHostnameError) as exc_info:
            DomainTable("test", {
                "one": ["a.example"],
                "two": ["b.example", "a.example"],
            })
        assert exc_info.value.hostname == "a.example"
        assert exc_info.value.first_key == "one"
        assert exc_info.value.second_key == "two"

    def test_repeat_within_one_key_is_allowed(self):
        table = DomainTable("test", {"one": ["a.example", "a.example"]})
        assert table["one"] == frozenset({"a.example"})

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            SEARCH_ENGINES["evil"] = frozenset({"evil.example"})
        assert isinstance(SEARCH_ENGINES["google"], frozenset)
