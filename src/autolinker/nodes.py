"""HTML nodes produced by the tag scanner.

The scanner only needs enough structure to tell text apart from markup, so
there is no tree: a document is a flat, ordered tuple of nodes whose
``text`` values concatenate back to the exact input.

Node Hierarchy:
HtmlNode (base)
├── TextNode      plain text between tags
├── EntityNode    one of the recognised character entities (&nbsp; ...)
├── CommentNode   <!-- ... -->
└── ElementNode   opening, closing or self-closing tag, or <!DOCTYPE>

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NodeKind(Enum):
    """Discriminator for HtmlNode subclasses."""

    TEXT = "text"
    ENTITY = "entity"
    COMMENT = "comment"
    ELEMENT = "element"


@dataclass(frozen=True, slots=True)
class HtmlNode:
    """Base class for scanned nodes.

    Attributes:
        offset: Index of the node's first character in the scanned input
        text: Exact source text of the node

    """

    offset: int
    text: str

    @property
    def kind(self) -> NodeKind:
        raise NotImplementedError

    @property
    def end(self) -> int:
        """Index one past the node's last character."""
        return self.offset + len(self.text)


@dataclass(frozen=True, slots=True)
class TextNode(HtmlNode):
    """Plain text. The only node kind the match rules ever see."""

    @property
    def kind(self) -> NodeKind:
        return NodeKind.TEXT


@dataclass(frozen=True, slots=True)
class EntityNode(HtmlNode):
    """A recognised HTML character entity such as ``&quot;``."""

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ENTITY


@dataclass(frozen=True, slots=True)
class CommentNode(HtmlNode):
    """An HTML comment.

    Attributes:
        comment: Text between ``<!--`` and ``-->`` with surrounding
            whitespace removed

    """

    comment: str = ""

    @property
    def kind(self) -> NodeKind:
        return NodeKind.COMMENT


@dataclass(frozen=True, slots=True)
class ElementNode(HtmlNode):
    """An HTML tag.

    Attributes:
        tag_name: Lower-cased tag name ("a", "img", "!doctype")
        closing: True for ``</tag>``

    """

    tag_name: str = ""
    closing: bool = False

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ELEMENT


__all__ = [
    "CommentNode",
    "ElementNode",
    "EntityNode",
    "HtmlNode",
    "NodeKind",
    "TextNode",
]
