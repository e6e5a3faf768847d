"""
autolinker — Link URLs, emails, phone numbers, hashtags and mentions

Finds linkable spans in plain text or HTML and wraps each one in an anchor
tag. Existing markup, and text already inside ``<a>`` elements, is left
untouched. Zero runtime dependencies.

Quick Start:
    >>> from autolinker import link, parse
    >>> link("Go to google.com", new_window=False)
    'Go to <a href="http://google.com">google.com</a>'

    >>> [m.matched_text for m in parse("Call (123) 456-7890 or mail a@b.com")]
    ['(123) 456-7890', 'a@b.com']

    >>> # Reuse one configured instance
    >>> from autolinker import Autolinker
    >>> linker = Autolinker(mention="twitter", truncate={"length": 30, "location": "smart"})
    >>> html = linker.link("<p>Thanks @alice, see http://example.com/docs</p>")

Installation:
    pip install autolinker

"""

from collections.abc import Mapping
from typing import Any

from autolinker.config import (
    LinkerConfig,
    StripPrefixConfig,
    TruncateConfig,
    UrlsConfig,
)
from autolinker.errors import AutolinkerError, ConfigError, RenderError
from autolinker.linker import Autolinker
from autolinker.matches import (
    EmailDetails,
    HashtagDetails,
    Match,
    MatchKind,
    MentionDetails,
    PhoneDetails,
    UrlDetails,
    UrlMatchType,
)
from autolinker.nodes import CommentNode, ElementNode, EntityNode, HtmlNode, NodeKind, TextNode
from autolinker.renderers.anchor import AnchorTagBuilder
from autolinker.renderers.tag import HtmlTag
from autolinker.replacement import CustomTag, LiteralText, Replacement, UseDefault
from autolinker.rules import MatchRule
from autolinker.scanner import TagScanner

__version__ = "1.6.2"


def link(text_or_html: str | None, **options: Any) -> str:
    """Link text or HTML with a one-off Autolinker.

    Args:
        text_or_html: Input to link
        **options: Autolinker keyword options (``new_window=False``,
            ``hashtag="twitter"``, ...)

    Returns:
        The linked string.

    Example:
        >>> link("www.python.org", class_name="auto", new_window=False)
        '<a href="http://www.python.org" class="auto auto-url">python.org</a>'
    """
    return Autolinker(**options).link(text_or_html)


def parse(text_or_html: str, **options: Any) -> list[Match]:
    """Return the matches a one-off Autolinker would link."""
    return Autolinker(**options).parse(text_or_html)


def link_with_config(text_or_html: str | None, config: LinkerConfig | Mapping[str, Any]) -> str:
    """Link using a LinkerConfig or a camelCase/snake_case option mapping."""
    if not isinstance(config, LinkerConfig):
        config = LinkerConfig.from_dict(config)
    return Autolinker.from_config(config).link(text_or_html)


__all__ = [
    # Entry points
    "Autolinker",
    "link",
    "link_with_config",
    "parse",
    # Configuration
    "LinkerConfig",
    "StripPrefixConfig",
    "TruncateConfig",
    "UrlsConfig",
    # Errors
    "AutolinkerError",
    "ConfigError",
    "RenderError",
    # Matches
    "EmailDetails",
    "HashtagDetails",
    "Match",
    "MatchKind",
    "MatchRule",
    "MentionDetails",
    "PhoneDetails",
    "UrlDetails",
    "UrlMatchType",
    # Scanning
    "CommentNode",
    "ElementNode",
    "EntityNode",
    "HtmlNode",
    "NodeKind",
    "TagScanner",
    "TextNode",
    # Rendering
    "AnchorTagBuilder",
    "CustomTag",
    "HtmlTag",
    "LiteralText",
    "Replacement",
    "UseDefault",
    "__version__",
]
