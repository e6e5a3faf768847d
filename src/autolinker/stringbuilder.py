"""StringBuilder for splicing replacements into a source string.

link() rebuilds its input as alternating runs of untouched source text and
generated anchors. Appending to a list and joining once keeps that O(n).

Thread Safety:
Instances are local to each link() call.

"""

from __future__ import annotations


class StringBuilder:
    """List-backed string accumulator.

    Usage:
        >>> sb = StringBuilder()
        >>> source = "Go to google.com now"
        >>> _ = sb.append_span(source, 0, 6).append("<a>google.com</a>").append_span(source, 16)
        >>> sb.build()
        'Go to <a>google.com</a> now'

    """

    __slots__ = ("_parts", "_length")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> StringBuilder:
        """Append a string; empty strings are skipped.

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def append_span(self, source: str, start: int, end: int | None = None) -> StringBuilder:
        """Append ``source[start:end]`` verbatim.

        Args:
            source: String to copy from
            start: First index to copy
            end: Index to stop before, None for the rest of source

        Returns:
            self for method chaining
        """
        return self.append(source[start:end])

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Total number of characters appended so far."""
        return self._length
