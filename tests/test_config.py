"""Tests for LinkerConfig and its option normalisers."""

import dataclasses

import pytest

from autolinker.config import (
    LinkerConfig,
    StripPrefixConfig,
    TruncateConfig,
    UrlsConfig,
    normalize_strip_prefix,
    normalize_truncate,
    normalize_urls,
)
from autolinker.errors import ConfigError


class TestDefaults:
    """Default configuration values."""

    def test_defaults(self):
        config = LinkerConfig()
        assert config.urls == UrlsConfig(True, True, True)
        assert config.email is True
        assert config.phone is True
        assert config.hashtag is None
        assert config.mention is None
        assert config.strip_prefix == StripPrefixConfig(True, True)
        assert config.strip_trailing_slash is True
        assert config.decode_percent_encoding is True
        assert config.new_window is True
        assert config.truncate == TruncateConfig(None, "end")
        assert config.truncate.enabled is False
        assert config.class_name == ""

    def test_frozen(self):
        config = LinkerConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.email = False  # type: ignore[misc]

    def test_false_service_means_disabled(self):
        config = LinkerConfig(hashtag=False, mention=False)  # type: ignore[arg-type]
        assert config.hashtag is None
        assert config.mention is None

    def test_shorthand_forms_normalised_on_construction(self):
        config = LinkerConfig(urls=False, strip_prefix={"www": False}, truncate=10)  # type: ignore[arg-type]
        assert config.urls == UrlsConfig(False, False, False)
        assert config.strip_prefix == StripPrefixConfig(scheme=True, www=False)
        assert config.truncate == TruncateConfig(10, "end")


class TestValidation:
    """Invalid values fail at construction."""

    @pytest.mark.parametrize("service", ["myspace", "Twitter", ""])
    def test_unknown_hashtag_service(self, service):
        with pytest.raises(ConfigError) as exc_info:
            LinkerConfig(hashtag=service)
        assert exc_info.value.option == "hashtag"

    def test_facebook_mentions_unsupported(self):
        with pytest.raises(ConfigError, match="mention"):
            LinkerConfig(mention="facebook")

    def test_unknown_truncate_location(self):
        with pytest.raises(ConfigError, match="location"):
            LinkerConfig(truncate=TruncateConfig(10, "start"))  # type: ignore[arg-type]

    def test_negative_truncate_length(self):
        with pytest.raises(ConfigError, match="negative"):
            LinkerConfig(truncate=TruncateConfig(-1))


class TestFromDict:
    """LinkerConfig.from_dict() option mapping."""

    def test_camel_case_aliases(self):
        config = LinkerConfig.from_dict({
            "stripPrefix": False,
            "stripTrailingSlash": False,
            "decodePercentEncoding": False,
            "newWindow": False,
            "className": "auto",
        })
        assert config.strip_prefix == StripPrefixConfig(False, False)
        assert config.strip_trailing_slash is False
        assert config.decode_percent_encoding is False
        assert config.new_window is False
        assert config.class_name == "auto"

    def test_snake_case_keys(self):
        config = LinkerConfig.from_dict({"new_window": False, "hashtag": "instagram"})
        assert config.new_window is False
        assert config.hashtag == "instagram"

    def test_ignores_unknown_keys(self, caplog):
        with caplog.at_level("DEBUG", logger="autolinker"):
            config = LinkerConfig.from_dict({"email": False, "sparkle": True})
        assert config.email is False
        assert "sparkle" in caplog.text

    def test_empty_dict_is_default(self):
        assert LinkerConfig.from_dict({}) == LinkerConfig()

    def test_nested_urls_mapping(self):
        config = LinkerConfig.from_dict({"urls": {"tldMatches": False}, "truncate": 25})
        assert config.urls == UrlsConfig(scheme_matches=True, www_matches=True, tld_matches=False)
        assert config.truncate.length == 25

    def test_none_class_name(self):
        assert LinkerConfig.from_dict({"className": None}).class_name == ""


class TestNormalisers:
    """Shorthand option forms."""

    def test_urls_bool(self):
        assert normalize_urls(False) == UrlsConfig(False, False, False)
        assert normalize_urls(True) == UrlsConfig()

    def test_urls_mapping_non_bool_defaults_true(self):
        assert normalize_urls({"schemeMatches": "yes", "www_matches": False}) == UrlsConfig(
            True, False, True
        )

    def test_strip_prefix(self):
        assert normalize_strip_prefix(False) == StripPrefixConfig(False, False)
        assert normalize_strip_prefix({"scheme": False}) == StripPrefixConfig(False, True)
        assert normalize_strip_prefix(None) == StripPrefixConfig()

    def test_truncate_number(self):
        assert normalize_truncate(10) == TruncateConfig(10, "end")
        assert normalize_truncate(0) == TruncateConfig(None, "end")

    def test_truncate_mapping(self):
        assert normalize_truncate({"length": 20, "location": "middle"}) == TruncateConfig(20, "middle")
        assert normalize_truncate({"location": "smart"}) == TruncateConfig(None, "smart")
        assert normalize_truncate({"length": float("inf")}) == TruncateConfig(None, "end")

    def test_truncate_none(self):
        assert normalize_truncate(None) == TruncateConfig()

    def test_truncate_bool_rejected(self):
        with pytest.raises(ConfigError):
            normalize_truncate(True)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (25.0, TruncateConfig(25, "end")),
            (25.9, TruncateConfig(25, "end")),
            (0.0, TruncateConfig(None, "end")),
            (float("inf"), TruncateConfig(None, "end")),
            ({"length": 12.0, "location": "smart"}, TruncateConfig(12, "smart")),
        ],
    )
    def test_truncate_float(self, value, expected):
        assert normalize_truncate(value) == expected

    @pytest.mark.parametrize(
        "value",
        ["ten", ["x"], float("nan"), float("-inf"), {"length": "25"}, {"length": True}],
    )
    def test_truncate_invalid_values_rejected(self, value):
        with pytest.raises(ConfigError) as exc_info:
            normalize_truncate(value)
        assert exc_info.value.option == "truncate"

    def test_infinite_truncate_links_untouched(self):
        from autolinker import Autolinker, link

        text = "see yahoo.com/some/long/path/to/a/file"
        assert Autolinker(truncate=float("inf")).link(text) == link(text)
        assert LinkerConfig(truncate=25.0).truncate == TruncateConfig(25, "end")  # type: ignore[arg-type]
