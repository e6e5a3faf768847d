"""Default anchor tag construction.

Turns a Match into an ``<a>`` HtmlTag according to the display options of a
LinkerConfig: which URL prefixes to hide, whether to percent-decode the
label, new-window attributes, CSS classes and truncation.

Attribute order is fixed: href, class, target, rel, title.

Example:
    >>> builder = AnchorTagBuilder(LinkerConfig(class_name="auto"))
    >>> builder.build(match).to_anchor_string()
    '<a href="http://google.com" class="auto auto-url" target="_blank" rel="noopener noreferrer">google.com</a>'

Thread Safety:
The builder is immutable after construction and may be shared; every
build() call returns a new HtmlTag.

"""

from __future__ import annotations

import re
from urllib.parse import unquote

from autolinker.config import LinkerConfig
from autolinker.matches import Match, UrlDetails
from autolinker.renderers.tag import HtmlTag
from autolinker.renderers.truncate import TRUNCATORS

_PROTOCOL_RELATIVE_RE = re.compile(r"^//")
_SCHEME_PREFIX_RE = re.compile(r"^(https?://)?", re.IGNORECASE)
_WWW_PREFIX_RE = re.compile(r"^(https?://)?(www\.)?", re.IGNORECASE)

# Characters that must stay escaped once the label is decoded into HTML
_HTML_SENSITIVE_ESCAPES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile("%22", re.IGNORECASE), "&quot;"),
    (re.compile("%26", re.IGNORECASE), "&amp;"),
    (re.compile("%27", re.IGNORECASE), "&#39;"),
    (re.compile("%3C", re.IGNORECASE), "&lt;"),
    (re.compile("%3E", re.IGNORECASE), "&gt;"),
)


def decode_percent_encoding(text: str) -> str:
    """Percent-decode a URL label for display.

    Encoded HTML-significant characters become entities rather than raw
    characters. Labels that do not decode to valid UTF-8 are returned
    unchanged.

    Example:
        >>> decode_percent_encoding("site.com/caf%C3%A9?q=%3Cb%3E")
        'site.com/café?q=&lt;b&gt;'
    """
    escaped = text
    for pattern, entity in _HTML_SENSITIVE_ESCAPES:
        escaped = pattern.sub(entity, escaped)
    try:
        return unquote(escaped, errors="strict")
    except UnicodeDecodeError:
        return text


class AnchorTagBuilder:
    """Builds the default ``<a>`` tag for a match.

    Args:
        config: Linker configuration; only its display options are read

    """

    __slots__ = ("_config", "_truncator")

    def __init__(self, config: LinkerConfig | None = None) -> None:
        self._config = config or LinkerConfig()
        truncate = self._config.truncate
        self._truncator = TRUNCATORS[truncate.location] if truncate.enabled else None

    @property
    def config(self) -> LinkerConfig:
        return self._config

    def build(self, match: Match) -> HtmlTag:
        """Create the anchor tag for match.

        Raises:
            RenderError: If a hashtag or mention has no linkable service.
        """
        anchor_text = self.anchor_text(match)
        return HtmlTag(
            "a",
            self._create_attrs(match, anchor_text),
            self._truncate(anchor_text),
        )

    def anchor_text(self, match: Match) -> str:
        """Untruncated link label for match."""
        if isinstance(match.details, UrlDetails):
            return self._url_anchor_text(match.matched_text, match.details)
        return match.matched_text

    def css_class(self, match: Match) -> str:
        """``"base base-kind [base-service]"``, or "" when no base class is set."""
        base = self._config.class_name
        if not base:
            return ""
        return " ".join([base, *(f"{base}-{suffix}" for suffix in match.css_class_suffixes)])

    def _create_attrs(self, match: Match, anchor_text: str) -> dict[str, str]:
        attrs = {"href": match.anchor_href}

        css_class = self.css_class(match)
        if css_class:
            attrs["class"] = css_class

        if self._config.new_window:
            attrs["target"] = "_blank"
            attrs["rel"] = "noopener noreferrer"

        length = self._config.truncate.length
        if self._truncator is not None and length is not None and len(anchor_text) > length:
            attrs["title"] = attrs["href"]

        return attrs

    def _truncate(self, anchor_text: str) -> str:
        if self._truncator is None:
            return anchor_text
        return self._truncator(anchor_text, self._config.truncate.length)

    def _url_anchor_text(self, text: str, details: UrlDetails) -> str:
        config = self._config
        if details.protocol_relative_match:
            text = _PROTOCOL_RELATIVE_RE.sub("", text)
        if config.strip_prefix.scheme:
            text = _SCHEME_PREFIX_RE.sub("", text, count=1)
        if config.strip_prefix.www:
            # Keep any scheme that survived the previous step
            text = _WWW_PREFIX_RE.sub(r"\1", text, count=1)
        if config.strip_trailing_slash and text.endswith("/"):
            text = text[:-1]
        if config.decode_percent_encoding:
            text = decode_percent_encoding(text)
        return text


__all__ = ["AnchorTagBuilder", "decode_percent_encoding"]
