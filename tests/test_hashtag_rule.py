"""Tests for hashtag detection."""

from autolinker.matches import MatchKind
from autolinker.rules.hashtag import HashtagRule


def hashtags(text: str, service: str | None = "twitter") -> list[str]:
    return [m.matched_text for m in HashtagRule(service).parse_matches(text)]


class TestHashtagRule:
    """Hashtag matching and boundaries."""

    def test_basic_hashtag(self):
        (m,) = HashtagRule("twitter").parse_matches("Loving #Python today")
        assert m.kind is MatchKind.HASHTAG
        assert m.offset == 7
        assert m.matched_text == "#Python"
        assert m.details.hashtag == "Python"
        assert m.service_name == "twitter"
        assert m.anchor_href == "https://twitter.com/hashtag/Python"

    def test_hashtag_at_start(self):
        assert hashtags("#first post") == ["#first"]

    def test_underscores_and_digits(self):
        assert hashtags("#rust_lang #py3") == ["#rust_lang", "#py3"]

    def test_unicode_letters(self):
        assert hashtags("#café ok") == ["#café"]

    def test_glued_to_word_rejected(self):
        assert hashtags("issue#12") == []

    def test_after_punctuation_accepted(self):
        assert hashtags("(#tag)") == ["#tag"]

    def test_max_length(self):
        long_tag = "a" * 150
        (m,) = HashtagRule("twitter").parse_matches(f"#{long_tag}")
        assert len(m.details.hashtag) == 139

    def test_runs_without_service(self):
        (m,) = HashtagRule(None).parse_matches("#tag")
        assert m.service_name is None

    def test_service_hrefs(self):
        facebook = HashtagRule("facebook").parse_matches("#x")[0]
        instagram = HashtagRule("instagram").parse_matches("#x")[0]
        assert facebook.anchor_href == "https://www.facebook.com/hashtag/x"
        assert instagram.anchor_href == "https://instagram.com/explore/tags/x"
