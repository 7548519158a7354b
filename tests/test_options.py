"""Tests for option labels and the registration hook."""

import pytest

from referrer_utils.domains import search_engine_keys, social_platform_keys
from referrer_utils.exceptions import UnknownOptionGroupError
from referrer_utils.options import (
    SEARCH_ENGINE,
    SOCIAL_PLATFORM,
    TRAFFIC_SOURCE,
    OptionRegistry,
    default_registry,
    get_search_engine_options,
    get_social_platform_options,
    get_traffic_source_options,
    register_options,
    to_value_label,
)
from referrer_utils.referrer import TrafficSource


class TestBuiltinOptions:
    """Built-in labels cover exactly the classifier's keys."""

    def test_search_engine_keys_match_table(self):
        assert tuple(get_search_engine_options()) == search_engine_keys()

    def test_social_platform_keys_match_table(self):
        assert tuple(get_social_platform_options()) == social_platform_keys()

    def test_traffic_source_keys_match_enum(self):
        assert set(get_traffic_source_options()) == {source.value for source in TrafficSource}

    def test_labels(self):
        assert get_search_engine_options()["you"] == "You.com"
        assert get_social_platform_options()["twitter"] == "Twitter/X"
        assert get_traffic_source_options()["search"] == "Search Engine"

    def test_value_label_format(self):
        options = get_traffic_source_options(as_value_label=True)
        assert options[0] == {"value": "search", "label": "Search Engine"}
        assert len(options) == 6


class TestOptionRegistry:
    """Test the extension hook on a private registry."""

    def test_register_adds_option(self):
        registry = OptionRegistry()
        registry.register(SEARCH_ENGINE, {"mojeek": "Mojeek"})
        options = registry.get_options(SEARCH_ENGINE)
        assert options["mojeek"] == "Mojeek"
        assert list(options)[-1] == "mojeek"

    def test_register_relabels(self):
        registry = OptionRegistry()
        registry.register(SOCIAL_PLATFORM, {"twitter": "X"})
        assert registry.get_options(SOCIAL_PLATFORM)["twitter"] == "X"

    def test_context_scoped_registration(self):
        registry = OptionRegistry()
        registry.register(TRAFFIC_SOURCE, {"direct": "Typed / Bookmarked"}, context="reports")
        assert registry.get_options(TRAFFIC_SOURCE)["direct"] == "Direct"
        assert registry.get_options(TRAFFIC_SOURCE, context="reports")["direct"] == "Typed / Bookmarked"

    def test_registry_is_isolated(self):
        registry = OptionRegistry()
        registry.register(SEARCH_ENGINE, {"mojeek": "Mojeek"})
        assert "mojeek" not in get_search_engine_options()

    def test_clear(self):
        registry = OptionRegistry()
        registry.register(SEARCH_ENGINE, {"mojeek": "Mojeek"})
        registry.clear()
        assert "mojeek" not in registry.get_options(SEARCH_ENGINE)

    def test_registration_does_not_touch_builtins(self):
        registry = OptionRegistry()
        registry.register(SEARCH_ENGINE, {"google": "Alphabet"})
        assert get_search_engine_options()["google"] == "Google"

    def test_unknown_group(self):
        registry = OptionRegistry()
        with pytest.raises(UnknownOptionGroupError):
            registry.get_options("browsers")
        with pytest.raises(KeyError):
            registry.register("browsers", {"chrome": "Chrome"})


class TestToValueLabel:

    def test_keeps_order(self):
        assert to_value_label({"b": "B", "a": "A"}) == [
            {"value": "b", "label": "B"},
            {"value": "a", "label": "A"},
        ]


class TestRegisterOptions:
    """Test registration on the module-level registry."""

    @pytest.fixture(autouse=True)
    def clean_default_registry(self):
        yield
        default_registry.clear()

    def test_register_through_default_registry(self):
        register_options(SEARCH_ENGINE, {"mojeek": "Mojeek"}, context="reports")
        assert get_search_engine_options(context="reports")["mojeek"] == "Mojeek"
        assert "mojeek" not in get_search_engine_options()

    def test_value_label_includes_registration(self):
        register_options(SOCIAL_PLATFORM, {"bluesky": "Bluesky"})
        options = get_social_platform_options(as_value_label=True)
        assert options[-1] == {"value": "bluesky", "label": "Bluesky"}

    def test_unknown_group(self):
        with pytest.raises(UnknownOptionGroupError):
            register_options("browsers", {"chrome": "Chrome"})
