"""Small string helpers shared by the renderers."""

from __future__ import annotations


def escape_attr(value: str) -> str:
    """Escape a value for use inside a double-quoted HTML attribute.

    Only the quote is escaped: hrefs keep their literal ``&`` so query strings
    survive unchanged (``&amp;`` in the source was already decoded).

    Examples:
        >>> escape_attr('say "hi"')
        'say &quot;hi&quot;'
        >>> escape_attr("a=1&b=2")
        'a=1&b=2'
    """
    return value.replace('"', "&quot;")
