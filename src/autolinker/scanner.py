"""Best-effort HTML tag scanner.

Walks a string once and splits it into text, entity, comment and element
nodes so that only text is offered to the match rules. This is not an HTML5
parser: anything the tag pattern does not recognise (an unterminated ``<a``,
a stray ``<``) simply stays in the surrounding text node. Scanning never
raises.

Offsets are indices into the original string, and concatenating the
``text`` of every node reproduces the input exactly.

Example:
    >>> [n.kind.value for n in scan('Hi <b>there</b> &quot;you&quot;')]
    ['text', 'element', 'text', 'element', 'text', 'entity', 'text', 'entity']

Thread Safety:
    Stateless; compiled patterns are module-level constants.

"""

from __future__ import annotations

import re
from collections.abc import Iterator

from autolinker.nodes import CommentNode, ElementNode, EntityNode, HtmlNode, TextNode

_ATTR_NAME = r"""[^\s"'>/=\x00-\x1F\x7F]+"""
_ATTR_VALUE = r"""(?:"[^"]*?"|'[^']*?'|[^'"=<>`\s]+)"""
# Atomic name group keeps the attribute loop from backtracking into names
_ATTR = rf"(?>{_ATTR_NAME})(?:\s*?=\s*?{_ATTR_VALUE})?"
_TAG_NAME = r"[0-9a-zA-Z][0-9a-zA-Z:]*"

# Handles namespaced tag and attribute names as described by
# http://www.w3.org/TR/html-markup/syntax.html
HTML_TAG_RE: re.Pattern[str] = re.compile(
    rf"<(?P<doctype>!DOCTYPE)(?:\s+(?:{_ATTR}|{_ATTR_VALUE}))*>"
    r"|<(?P<closing>/)?"
    r"(?:"
    r"!--(?P<comment>[\s\S]+?)--"
    rf"|(?P<tag>{_TAG_NAME})\s*/?"
    rf"|(?P<tag_with_attrs>{_TAG_NAME})\s+(?:(?:\s+|\b){_ATTR})*\s*/?"
    r")>",
    re.IGNORECASE,
)

# &amp; is left in text nodes: it is usually part of a URL query string
HTML_ENTITY_RE: re.Pattern[str] = re.compile(
    r"&nbsp;|&#160;|&lt;|&#60;|&gt;|&#62;|&quot;|&#34;|&#39;",
    re.IGNORECASE,
)


class TagScanner:
    """Splits text-or-HTML into a flat sequence of HtmlNodes.

    Usage:
        >>> scanner = TagScanner()
        >>> nodes = scanner.scan("<a href='x'>x</a>")
        >>> [(n.kind.value, n.offset) for n in nodes]
        [('element', 0), ('text', 12), ('element', 13)]

    """

    __slots__ = ()

    def scan(self, html: str) -> tuple[HtmlNode, ...]:
        """Scan the whole input and return its nodes in document order."""
        return tuple(self.iter_nodes(html))

    def iter_nodes(self, html: str) -> Iterator[HtmlNode]:
        """Yield nodes lazily; restartable, since it is a pure function of html."""
        last_index = 0

        for m in HTML_TAG_RE.finditer(html):
            start = m.start()
            if start > last_index:
                yield from self._text_and_entity_nodes(last_index, html[last_index:start])

            tag_text = m.group(0)
            comment = m.group("comment")
            if comment:
                yield CommentNode(offset=start, text=tag_text, comment=comment.strip())
            else:
                tag_name = m.group("doctype") or m.group("tag") or m.group("tag_with_attrs")
                yield ElementNode(
                    offset=start,
                    text=tag_text,
                    tag_name=tag_name.lower(),
                    closing=m.group("closing") is not None,
                )
            last_index = m.end()

        # Remaining text after the last tag (all of it if there were no tags)
        if last_index < len(html):
            yield from self._text_and_entity_nodes(last_index, html[last_index:])

    def _text_and_entity_nodes(self, offset: int, text: str) -> Iterator[HtmlNode]:
        """Split tag-free text into alternating Text and Entity nodes.

        Args:
            offset: Position of text within the scanned input
            text: Text from between two tags
        """
        last_index = 0
        for m in HTML_ENTITY_RE.finditer(text):
            start = m.start()
            if start > last_index:
                yield TextNode(offset=offset + last_index, text=text[last_index:start])
            yield EntityNode(offset=offset + start, text=m.group(0))
            last_index = m.end()
        if last_index < len(text):
            yield TextNode(offset=offset + last_index, text=text[last_index:])


_DEFAULT_SCANNER = TagScanner()


def scan(html: str) -> tuple[HtmlNode, ...]:
    """Scan text-or-HTML with the shared scanner instance."""
    return _DEFAULT_SCANNER.scan(html)


__all__ = ["HTML_ENTITY_RE", "HTML_TAG_RE", "TagScanner", "scan"]
