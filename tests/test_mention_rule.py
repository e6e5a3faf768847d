"""Tests for @-mention detection."""

import pytest

from autolinker.errors import ConfigError
from autolinker.matches import MatchKind
from autolinker.rules.mention import MENTION_PATTERNS, MentionRule


def mentions(text: str, service: str = "twitter") -> list[str]:
    return [m.matched_text for m in MentionRule(service).parse_matches(text)]


class TestMentionRule:
    """Mention matching per service."""

    def test_twitter_mention(self):
        (m,) = MentionRule("twitter").parse_matches("Thanks @alice!")
        assert m.kind is MatchKind.MENTION
        assert m.offset == 7
        assert m.matched_text == "@alice"
        assert m.details.mention == "alice"
        assert m.anchor_href == "https://twitter.com/alice"
        assert m.css_class_suffixes == ("mention", "twitter")

    def test_twitter_stops_at_dot(self):
        assert mentions("@some.one") == ["@some"]

    def test_instagram_allows_dots(self):
        (m,) = MentionRule("instagram").parse_matches("ask @some.one.")
        assert m.matched_text == "@some.one"
        assert m.anchor_href == "https://instagram.com/some.one"

    def test_twitter_length_limit(self):
        (m,) = MentionRule("twitter").parse_matches("@" + "a" * 25)
        assert len(m.details.mention) == 20

    def test_email_at_sign_rejected(self):
        assert mentions("mail asdf@asdf.com") == []

    def test_only_dots_rejected(self):
        assert mentions("@...", "instagram") == []

    def test_unknown_service(self):
        with pytest.raises(ConfigError) as exc_info:
            MentionRule("facebook")
        assert exc_info.value.option == "mention"

    def test_pattern_table_is_read_only(self):
        with pytest.raises(TypeError):
            MENTION_PATTERNS["x"] = MENTION_PATTERNS["twitter"]  # type: ignore[index]
