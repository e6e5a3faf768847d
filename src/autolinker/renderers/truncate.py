"""Anchor text truncation strategies.

Three ways to fit a long label into ``length`` characters:

    end      "yahoo.com/some/long/pa&hellip;"
    middle   "yahoo.&hellip;g/path"
    smart    drops the least useful URL parts first (a second "?" and
             anything after it, "www.", then the scheme), and only then
             elides inside the path, query or fragment

The default ellipsis is the ``&hellip;`` entity. It renders as a single
glyph but is budgeted as 3 characters, and slices that must keep the whole
entity allow for its 8 source characters.

Example:
    >>> truncate_end("yahoo.com/some/long/path/to/a/file", 25)
    'yahoo.com/some/long/pa&hellip;'
    >>> truncate_smart("http://www.yahoo.com/some/long/path", 20)
    'yahoo.com/som&hellip;path'

"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from types import MappingProxyType

DEFAULT_ELLIPSIS = "&hellip;"
DEFAULT_ELLIPSIS_LENGTH = 3

_SCHEME_RE = re.compile(r"^([a-z]+)://", re.IGNORECASE)
_HOST_RE = re.compile(r"^(.*?)(?=[?#/]|$)")
_PATH_RE = re.compile(r"^/(.*?)(?=[?#]|$)")
_QUERY_RE = re.compile(r"^\?(.*?)(?=#|$)")
_FRAGMENT_RE = re.compile(r"^#(.*)$")
_SECOND_QUERY_RE = re.compile(r"^(.*?)(?=[?#])")
_WWW_RE = re.compile(r"^www\.")


def _ellipsis_lengths(ellipsis: str) -> tuple[int, int]:
    """(display length, source length) of an ellipsis string."""
    if ellipsis == DEFAULT_ELLIPSIS:
        return DEFAULT_ELLIPSIS_LENGTH, len(DEFAULT_ELLIPSIS)
    return len(ellipsis), len(ellipsis)


def _elide_middle(text: str, available: int, ellipsis: str) -> str:
    """Keep ceil(available/2) leading and floor(available/2) trailing chars."""
    head = max(math.ceil(available / 2), 0)
    tail = max(math.floor(available / 2), 0)
    end = text[len(text) - tail :] if tail else ""
    return text[:head] + ellipsis + end


def truncate_end(text: str, length: int, ellipsis: str = DEFAULT_ELLIPSIS) -> str:
    """Cut text at the end so that it fits in length characters."""
    if len(text) <= length:
        return text
    display_len, _ = _ellipsis_lengths(ellipsis)
    return text[: max(length - display_len, 0)] + ellipsis


def truncate_middle(text: str, length: int, ellipsis: str = DEFAULT_ELLIPSIS) -> str:
    """Elide the middle of text, keeping its start and end."""
    if len(text) <= length:
        return text
    display_len, source_len = _ellipsis_lengths(ellipsis)
    available = length - display_len
    return _elide_middle(text, available, ellipsis)[: max(available + source_len, 0)]


@dataclass(frozen=True, slots=True)
class UrlParts:
    """Loose split of a URL-ish label; every part may be empty."""

    scheme: str = ""
    host: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""

    @classmethod
    def parse(cls, url: str) -> UrlParts:
        rest = url
        parts: dict[str, str] = {}
        for name, pattern in (
            ("scheme", _SCHEME_RE),
            ("host", _HOST_RE),
            ("path", _PATH_RE),
            ("query", _QUERY_RE),
            ("fragment", _FRAGMENT_RE),
        ):
            m = pattern.match(rest)
            if m is not None:
                parts[name] = m.group(1)
                rest = rest[m.end() :]
        return cls(**parts)

    def build(self) -> str:
        url = ""
        if self.scheme and self.host:
            url += f"{self.scheme}://"
        url += self.host
        if self.path:
            url += f"/{self.path}"
        if self.query:
            url += f"?{self.query}"
        if self.fragment:
            url += f"#{self.fragment}"
        return url


def truncate_smart(url: str, length: int, ellipsis: str = DEFAULT_ELLIPSIS) -> str:
    """Shorten a URL label by dropping, then eliding, its least useful parts.

    Args:
        url: Anchor text, usually a URL
        length: Maximum display length
        ellipsis: Marker inserted where text was removed

    Returns:
        The shortened label, or url unchanged if it already fits.
    """
    if len(url) <= length:
        return url

    display_len, source_len = _ellipsis_lengths(ellipsis)
    available = length - display_len
    limit = max(available + source_len, 0)
    parts = UrlParts.parse(url)

    # Malformed: two or more "?". Drop everything from the second on
    if parts.query:
        m = _SECOND_QUERY_RE.match(parts.query)
        if m is not None:
            parts = replace(parts, query=m.group(1))
            url = parts.build()
    if len(url) <= length:
        return url

    if parts.host:
        parts = replace(parts, host=_WWW_RE.sub("", parts.host))
        url = parts.build()
    if len(url) <= length:
        return url

    label = parts.host
    if len(label) >= available:
        if len(parts.host) == length:
            return (parts.host[: length - display_len] + ellipsis)[:limit]
        return _elide_middle(label, available, ellipsis)[:limit]

    path_and_query = ""
    if parts.path:
        path_and_query += f"/{parts.path}"
    if parts.query:
        path_and_query += f"?{parts.query}"
    if path_and_query:
        if len(label + path_and_query) >= available:
            if len(label + path_and_query) == length:
                return (label + path_and_query)[:length]
            remaining = available - len(label)
            return (label + _elide_middle(path_and_query, remaining, ellipsis))[:limit]
        label += path_and_query

    if parts.fragment:
        fragment = f"#{parts.fragment}"
        if len(label + fragment) >= available:
            if len(label + fragment) == length:
                return (label + fragment)[:length]
            remaining = available - len(label)
            return (label + _elide_middle(fragment, remaining, ellipsis))[:limit]
        label += fragment

    if parts.scheme and parts.host:
        scheme = f"{parts.scheme}://"
        if len(label + scheme) < available:
            return (scheme + label)[:length]

    if len(label) <= length:
        return label
    return _elide_middle(label, available, ellipsis)[:limit]


TRUNCATORS: MappingProxyType[str, Callable[[str, int], str]] = MappingProxyType(
    {
        "end": truncate_end,
        "middle": truncate_middle,
        "smart": truncate_smart,
    }
)


__all__ = [
    "DEFAULT_ELLIPSIS",
    "TRUNCATORS",
    "UrlParts",
    "truncate_end",
    "truncate_middle",
    "truncate_smart",
]
