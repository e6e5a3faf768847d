"""The Autolinker orchestrator.

Drives the pipeline for one input string:

    scan     split the input into text, entity, comment and element nodes
    match    run every rule over each text node outside an existing <a>
    reconcile  drop overlaps, then disabled kinds
    splice   copy the input, swapping each match for its replacement

All collaborators (scanner, rules, tag builder) are built once in the
constructor from the frozen configuration, so an Autolinker is immutable
after construction.

Example:
    >>> linker = Autolinker(new_window=False)
    >>> linker.link("Go to google.com")
    'Go to <a href="http://google.com">google.com</a>'
    >>> [(m.kind.value, m.offset) for m in linker.parse("Hello google.com, I am asdf@asdf.com")]
    [('url', 6), ('email', 23)]

Thread Safety:
    Safe to share one instance across threads; parse() and link() only read
    instance state. A replace_fn must be thread-safe itself.

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from autolinker.config import LinkerConfig, StripPrefixConfig, TruncateConfig, UrlsConfig
from autolinker.matches import Match
from autolinker.nodes import ElementNode, TextNode
from autolinker.reconcile import reconcile
from autolinker.renderers.anchor import AnchorTagBuilder
from autolinker.replacement import CustomTag, LiteralText, ReplaceFn, to_replacement
from autolinker.rules import MatchRule, build_rules
from autolinker.scanner import TagScanner
from autolinker.stringbuilder import StringBuilder
from autolinker.utils.logger import get_logger

logger = get_logger(__name__)


class Autolinker:
    """Finds and links URLs, emails, phone numbers, hashtags and mentions.

    Usage:
        >>> linker = Autolinker(hashtag="twitter", class_name="auto")
        >>> linker.link("#python")
        '<a href="https://twitter.com/hashtag/python" class="auto auto-hashtag" target="_blank" rel="noopener noreferrer">#python</a>'

        >>> # Keep emails as plain text
        >>> linker = Autolinker(replace_fn=lambda m: m.kind.value != "email")

    Thread Safety:
        Immutable after construction. Safe to share.

    """

    __slots__ = ("_config", "_replace_fn", "_rules", "_scanner", "_tag_builder")

    def __init__(
        self,
        *,
        urls: bool | Mapping[str, Any] | UrlsConfig | None = None,
        email: bool | None = None,
        phone: bool | None = None,
        hashtag: str | bool | None = None,
        mention: str | bool | None = None,
        strip_prefix: bool | Mapping[str, Any] | StripPrefixConfig | None = None,
        strip_trailing_slash: bool | None = None,
        decode_percent_encoding: bool | None = None,
        new_window: bool | None = None,
        truncate: int | Mapping[str, Any] | TruncateConfig | None = None,
        class_name: str | None = None,
        replace_fn: ReplaceFn | None = None,
    ) -> None:
        """Initialize the linker.

        Options left as None take their LinkerConfig default. Nested options
        accept the same shorthand forms as LinkerConfig.from_dict.

        Args:
            urls: Link URLs; a mapping enables scheme / www / tld matches
                individually
            email: Link email addresses
            phone: Link phone numbers
            hashtag: "twitter", "facebook" or "instagram"; False to skip
            mention: "twitter" or "instagram"; False to skip
            strip_prefix: Hide "http://" and "www." in URL labels
            strip_trailing_slash: Hide a trailing "/" in URL labels
            decode_percent_encoding: Percent-decode URL labels
            new_window: Open links in a new window
            truncate: Maximum label length, or {"length", "location"}
            class_name: Base CSS class for generated anchors
            replace_fn: Hook deciding what each match becomes

        Raises:
            ConfigError: If an option value is invalid.
        """
        options = {
            "urls": urls,
            "email": email,
            "phone": phone,
            "hashtag": hashtag,
            "mention": mention,
            "strip_prefix": strip_prefix,
            "strip_trailing_slash": strip_trailing_slash,
            "decode_percent_encoding": decode_percent_encoding,
            "new_window": new_window,
            "truncate": truncate,
            "class_name": class_name,
        }
        config = LinkerConfig.from_dict({k: v for k, v in options.items() if v is not None})
        self._setup(config, replace_fn)

    @classmethod
    def from_config(cls, config: LinkerConfig, replace_fn: ReplaceFn | None = None) -> Autolinker:
        """Build a linker from a prepared configuration.

        Example:
            >>> config = LinkerConfig.from_dict({"newWindow": False, "truncate": 20})
            >>> linker = Autolinker.from_config(config)
        """
        linker = cls.__new__(cls)
        linker._setup(config, replace_fn)
        return linker

    def _setup(self, config: LinkerConfig, replace_fn: ReplaceFn | None) -> None:
        self._config = config
        self._replace_fn = replace_fn
        self._scanner = TagScanner()
        self._rules: tuple[MatchRule, ...] = build_rules(config)
        self._tag_builder = AnchorTagBuilder(config)

    @property
    def config(self) -> LinkerConfig:
        return self._config

    @property
    def rules(self) -> tuple[MatchRule, ...]:
        return self._rules

    @property
    def tag_builder(self) -> AnchorTagBuilder:
        """The builder used for default anchors, for use inside a replace_fn."""
        return self._tag_builder

    def parse(self, text_or_html: str) -> list[Match]:
        """Find every linkable match in text or HTML.

        Text inside existing ``<a>`` elements, tags, comments and entities
        is never matched.

        Args:
            text_or_html: Input to scan

        Returns:
            Reconciled matches with offsets into text_or_html, in ascending
            offset order.
        """
        anchor_depth = 0
        candidates: list[Match] = []

        for node in self._scanner.iter_nodes(text_or_html):
            if isinstance(node, ElementNode):
                if node.tag_name == "a":
                    if node.closing:
                        anchor_depth = max(anchor_depth - 1, 0)
                    else:
                        anchor_depth += 1
            elif isinstance(node, TextNode) and anchor_depth == 0:
                candidates.extend(self._parse_text(node.text, node.offset))

        return reconcile(candidates, self._config)

    def _parse_text(self, text: str, offset: int = 0) -> list[Match]:
        """Run every rule over one text node, shifting matches by offset."""
        matches: list[Match] = []
        for rule in self._rules:
            matches.extend(m.shifted(offset) for m in rule.parse_matches(text))
        return matches

    def link(self, text_or_html: str | None) -> str:
        """Replace every match in text or HTML with a link.

        Args:
            text_or_html: Input to link; None or "" gives ""

        Returns:
            The input with each match replaced. Everything else is copied
            unchanged.

        Raises:
            RenderError: If a replace_fn hands back a match the default
                builder cannot render.
        """
        if not text_or_html:
            return ""

        matches = self.parse(text_or_html)
        sb = StringBuilder()
        last_index = 0
        for match in matches:
            sb.append_span(text_or_html, last_index, match.offset)
            sb.append(self._replacement_text(match))
            last_index = match.end
        sb.append_span(text_or_html, last_index)
        logger.debug(
            "Linked %d matches: %d chars in, %d chars out", len(matches), len(text_or_html), len(sb)
        )
        return sb.build()

    def link_many(self, texts: Iterable[str | None]) -> list[str]:
        """Link several inputs with the same configuration."""
        return [self.link(text) for text in texts]

    def _replacement_text(self, match: Match) -> str:
        if self._replace_fn is not None:
            replacement = to_replacement(self._replace_fn(match), match)
            match replacement:
                case LiteralText(text=text):
                    return text
                case CustomTag(tag=tag):
                    return tag.to_anchor_string()
        return self._tag_builder.build(match).to_anchor_string()

    def __repr__(self) -> str:
        return f"Autolinker({self._config!r})"


__all__ = ["Autolinker"]
