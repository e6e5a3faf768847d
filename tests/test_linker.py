"""End-to-end tests for Autolinker.parse() and Autolinker.link()."""

import pytest

from autolinker import Autolinker, HtmlTag, LinkerConfig, MatchKind, link, link_with_config, parse
from autolinker.replacement import CustomTag, LiteralText, UseDefault


class TestParse:
    """Match discovery across whole documents."""

    def test_url_and_email(self):
        matches = parse("Hello google.com, I am asdf@asdf.com")
        assert [(m.kind, m.matched_text, m.offset) for m in matches] == [
            (MatchKind.URL, "google.com", 6),
            (MatchKind.EMAIL, "asdf@asdf.com", 23),
        ]

    def test_offsets_are_document_absolute(self):
        html = "<p>Visit <b>google.com</b></p>"
        (m,) = parse(html)
        assert m.offset == html.index("google.com")
        assert html[m.offset : m.end] == m.matched_text

    def test_text_inside_anchor_skipped(self):
        assert parse('<a href="http://x.com">google.com</a>') == []

    def test_nested_anchor_depth(self):
        html = "<a><a>x.com</a>y.com</a> z.com"
        assert [m.matched_text for m in parse(html)] == ["z.com"]

    def test_uppercase_anchor_tag_skipped(self):
        assert parse("<A HREF='x'>google.com</A> yahoo.com")[0].matched_text == "yahoo.com"

    def test_stray_closing_anchor_does_not_go_negative(self):
        assert [m.matched_text for m in parse("</a> google.com")] == ["google.com"]

    def test_attributes_and_comments_not_matched(self):
        html = '<img src="http://a.com/x.png"><!-- b.com --> c.com'
        assert [m.matched_text for m in parse(html)] == ["c.com"]

    def test_entities_split_text(self):
        assert [m.matched_text for m in parse("&lt;google.com&gt;")] == ["google.com"]

    def test_url_fragment_wins_over_hashtag(self):
        matches = parse("google.com/#link", hashtag="twitter")
        assert [(m.kind, m.matched_text) for m in matches] == [(MatchKind.URL, "google.com/#link")]

    def test_no_matches(self):
        assert parse("nothing to see here") == []


class TestLink:
    """Output splicing and default anchors."""

    def test_basic_link(self):
        assert link("Go to google.com", new_window=False) == (
            'Go to <a href="http://google.com">google.com</a>'
        )

    def test_new_window_default(self):
        assert link("google.com") == (
            '<a href="http://google.com" target="_blank" rel="noopener noreferrer">google.com</a>'
        )

    def test_empty_input(self):
        assert link("") == ""
        assert link(None) == ""

    def test_all_kinds_disabled_returns_input(self):
        text = "google.com a@b.com (123) 456-7890 #tag @user"
        assert link(text, urls=False, email=False, phone=False) == text

    def test_existing_anchor_untouched(self):
        html = '<a href="http://google.com">google.com</a> and yahoo.com'
        assert link(html, new_window=False) == (
            '<a href="http://google.com">google.com</a> and '
            '<a href="http://yahoo.com">yahoo.com</a>'
        )

    def test_scheme_and_www_stripped_from_label(self):
        assert link("http://www.google.com/", new_window=False) == (
            '<a href="http://www.google.com/">google.com</a>'
        )

    def test_strip_prefix_disabled(self):
        assert link("http://www.google.com/", new_window=False, strip_prefix=False) == (
            '<a href="http://www.google.com/">http://www.google.com</a>'
        )

    def test_keep_trailing_slash(self):
        assert link("google.com/", new_window=False, strip_trailing_slash=False) == (
            '<a href="http://google.com/">google.com/</a>'
        )

    def test_amp_entity_decoded_in_href(self):
        assert link("google.com/?a=1&amp;b=2", new_window=False) == (
            '<a href="http://google.com/?a=1&b=2">google.com/?a=1&amp;b=2</a>'
        )

    def test_email_and_phone(self):
        assert link("a@b.com or (123) 456-7890", new_window=False) == (
            '<a href="mailto:a@b.com">a@b.com</a> or '
            '<a href="tel:1234567890">(123) 456-7890</a>'
        )

    def test_hashtag_and_mention_with_class(self):
        result = link("#py @guido", hashtag="twitter", mention="twitter", class_name="al", new_window=False)
        assert result == (
            '<a href="https://twitter.com/hashtag/py" class="al al-hashtag">#py</a> '
            '<a href="https://twitter.com/guido" class="al al-mention al-twitter">@guido</a>'
        )

    def test_hashtags_off_by_default(self):
        assert link("#py") == "#py"

    def test_truncate_adds_title(self):
        result = link("yahoo.com/some/long/path/to/a/file", truncate=25, new_window=False)
        assert result == (
            '<a href="http://yahoo.com/some/long/path/to/a/file" '
            'title="http://yahoo.com/some/long/path/to/a/file">yahoo.com/some/long/pa&hellip;</a>'
        )

    def test_link_many(self):
        linker = Autolinker(new_window=False)
        assert linker.link_many(["a.com", "", "plain"]) == [
            '<a href="http://a.com">a.com</a>',
            "",
            "plain",
        ]


class TestReplaceFn:
    """Replacement hook results."""

    def test_string_result_used_verbatim(self):
        assert link("google.com", replace_fn=lambda m: "[link]") == "[link]"

    def test_false_keeps_original_text(self):
        assert link("google.com a@b.com", replace_fn=lambda m: False) == "google.com a@b.com"

    def test_true_uses_default(self):
        assert link("a.com", new_window=False, replace_fn=lambda m: True) == (
            '<a href="http://a.com">a.com</a>'
        )

    def test_none_uses_default(self):
        assert link("a.com", new_window=False, replace_fn=lambda m: None) == (
            '<a href="http://a.com">a.com</a>'
        )

    def test_unrecognised_result_uses_default(self):
        assert link("a.com", new_window=False, replace_fn=lambda m: 42) == (
            '<a href="http://a.com">a.com</a>'
        )

    def test_tag_result_rendered(self):
        holder: dict[str, Autolinker] = {}

        def nofollow(match):
            tag = holder["linker"].tag_builder.build(match)
            return tag.set_attr("rel", "nofollow")

        linker = Autolinker(new_window=False, replace_fn=nofollow)
        holder["linker"] = linker
        assert linker.link("a.com") == '<a href="http://a.com" rel="nofollow">a.com</a>'

    def test_variant_results_accepted(self):
        results = iter([LiteralText("X"), UseDefault(), CustomTag(HtmlTag("b", None, "bold"))])
        linker = Autolinker(new_window=False, replace_fn=lambda m: next(results))
        assert linker.link("a.com b.com c.com") == 'X <a href="http://b.com">b.com</a> <b>bold</b>'

    def test_hook_sees_each_match(self):
        seen = []
        link("a.com and x@y.com", replace_fn=lambda m: seen.append(m.kind) or False)
        assert seen == [MatchKind.URL, MatchKind.EMAIL]


class TestConstruction:
    """Constructors and accessors."""

    def test_from_config(self):
        config = LinkerConfig.from_dict({"newWindow": False, "className": "x"})
        linker = Autolinker.from_config(config)
        assert linker.config is config
        assert linker.link("a.com") == '<a href="http://a.com" class="x x-url">a.com</a>'

    def test_link_with_mapping(self):
        assert link_with_config("a.com", {"newWindow": False}) == '<a href="http://a.com">a.com</a>'

    def test_mention_rule_only_built_when_enabled(self):
        assert MatchKind.MENTION not in {r.kind for r in Autolinker().rules}
        assert MatchKind.MENTION in {r.kind for r in Autolinker(mention="instagram").rules}

    def test_invalid_option_raises_at_construction(self):
        from autolinker.errors import ConfigError

        with pytest.raises(ConfigError):
            Autolinker(hashtag="myspace")
