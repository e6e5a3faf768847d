"""Property-based tests for autolinker using Hypothesis.

These tests verify invariants that hold for any input:
1. Matches never overlap and always point at their exact text
2. Text between matches is copied byte for byte
3. Reconciliation does not depend on the order rules run in
4. Scanner nodes tile the input exactly

"""

import itertools

from hypothesis import given, settings
from hypothesis import strategies as st

from autolinker import Autolinker, parse
from autolinker.config import LinkerConfig
from autolinker.reconcile import reconcile
from autolinker.rules import build_rules
from autolinker.scanner import scan

# Fragments that exercise every rule and the scanner
fragments = st.sampled_from([
    "google.com",
    "www.python.org",
    "http://localhost:8000/path?q=1",
    "//cdn.example.net/x.js",
    "asdf@asdf.com",
    "(123) 456-7890",
    "+44 20 7946 0958",
    "#hashtag",
    "@mention",
    "site.com/page#section",
    "<a href='http://x.com'>",
    "</a>",
    "<b>",
    "<!-- c.com -->",
    "&nbsp;",
    "&amp;",
    " ",
    ", ",
    ".",
    "(",
    ")",
    "javascript:alert(1)",
])
documents = st.lists(fragments, max_size=12).map("".join)
mixed_text = st.one_of(documents, st.text(max_size=80))

FULL_CONFIG = LinkerConfig(hashtag="twitter", mention="twitter")


class TestMatchProperties:
    """Invariants of parse()."""

    @given(text=mixed_text)
    @settings(max_examples=200)
    def test_matches_point_at_their_text(self, text: str) -> None:
        for m in parse(text, hashtag="twitter", mention="instagram"):
            assert 0 <= m.offset
            assert m.end <= len(text)
            assert text[m.offset : m.end] == m.matched_text

    @given(text=mixed_text)
    @settings(max_examples=200)
    def test_matches_sorted_and_disjoint(self, text: str) -> None:
        matches = parse(text, hashtag="twitter", mention="twitter")
        for current, following in itertools.pairwise(matches):
            assert current.end < following.offset


class TestLinkProperties:
    """Invariants of link()."""

    @given(text=st.text(alphabet=st.characters(blacklist_characters="<>&"), max_size=80))
    @settings(max_examples=200)
    def test_unmatched_text_is_unchanged(self, text: str) -> None:
        linker = Autolinker(hashtag="twitter", mention="twitter")
        matches = linker.parse(text)
        result = linker.link(text)

        position = 0
        cursor = 0
        for m in matches:
            gap = text[cursor : m.offset]
            found = result.index(gap, position) if gap else position
            assert found == position
            position = found + len(gap)
            position = result.index("</a>", position) + len("</a>")
            cursor = m.end
        assert result[position:] == text[cursor:]

    @given(text=documents)
    @settings(max_examples=100)
    def test_all_kinds_disabled_is_identity(self, text: str) -> None:
        assert Autolinker(urls=False, email=False, phone=False).link(text) == text


class TestReconcileProperties:
    """Rule order does not matter."""

    @given(text=documents)
    @settings(max_examples=50)
    def test_rule_order_independent(self, text: str) -> None:
        rules = build_rules(FULL_CONFIG)
        per_rule = [list(rule.parse_matches(text)) for rule in rules]
        expected = reconcile(itertools.chain.from_iterable(per_rule), FULL_CONFIG)
        for order in itertools.permutations(per_rule):
            assert reconcile(itertools.chain.from_iterable(order), FULL_CONFIG) == expected


class TestScannerProperties:
    """Scanner nodes tile the input."""

    @given(text=mixed_text)
    @settings(max_examples=200)
    def test_nodes_tile_input(self, text: str) -> None:
        position = 0
        for node in scan(text):
            assert node.offset == position
            assert text[node.offset : node.end] == node.text
            position = node.end
        assert position == len(text)
