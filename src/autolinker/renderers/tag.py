"""Mutable HTML tag model.

HtmlTag is what the anchor builder produces and what a replacement hook may
tweak before handing it back (add ``rel="nofollow"``, another CSS class, a
shortened label).

Attributes keep insertion order, so the rendered string is deterministic.
Attribute values are escaped for double quotes; inner HTML is emitted as
given.

Example:
    >>> tag = HtmlTag("a", {"href": "http://google.com"}, "google.com")
    >>> tag.add_class("external").to_anchor_string()
    '<a href="http://google.com" class="external">google.com</a>'

Thread Safety:
Not thread-safe. Each link() call creates fresh tags.

"""

from __future__ import annotations

import re
from collections.abc import Mapping

from autolinker.utils.text import escape_attr

_WHITESPACE_RE = re.compile(r"\s+")


class HtmlTag:
    """An element with a name, ordered attributes and inner HTML.

    Args:
        tag_name: Element name, e.g. "a"
        attrs: Initial attributes
        inner_html: Content placed between the opening and closing tags

    """

    __slots__ = ("tag_name", "_attrs", "_inner_html")

    def __init__(
        self,
        tag_name: str = "",
        attrs: Mapping[str, str] | None = None,
        inner_html: str = "",
    ) -> None:
        self.tag_name = tag_name
        self._attrs: dict[str, str] = dict(attrs or {})
        self._inner_html = inner_html

    def set_attr(self, name: str, value: str) -> HtmlTag:
        self._attrs[name] = value
        return self

    def get_attr(self, name: str) -> str | None:
        return self._attrs.get(name)

    def set_attrs(self, attrs: Mapping[str, str]) -> HtmlTag:
        """Set several attributes at once, keeping existing ones."""
        self._attrs.update(attrs)
        return self

    def get_attrs(self) -> dict[str, str]:
        """Return a copy of the attributes."""
        return dict(self._attrs)

    def set_class(self, css_class: str) -> HtmlTag:
        """Replace the class attribute."""
        self._attrs["class"] = css_class
        return self

    def add_class(self, css_class: str) -> HtmlTag:
        """Add one or more whitespace-separated classes, skipping duplicates."""
        classes = self._classes()
        for name in _split_classes(css_class):
            if name not in classes:
                classes.append(name)
        self._attrs["class"] = " ".join(classes)
        return self

    def remove_class(self, css_class: str) -> HtmlTag:
        """Remove classes if present; drops the attribute once it is empty."""
        remove = set(_split_classes(css_class))
        remaining = [c for c in self._classes() if c not in remove]
        if remaining:
            self._attrs["class"] = " ".join(remaining)
        else:
            self._attrs.pop("class", None)
        return self

    def get_class(self) -> str:
        return self._attrs.get("class") or ""

    def has_class(self, css_class: str) -> bool:
        return css_class in self._classes()

    def set_inner_html(self, html: str) -> HtmlTag:
        self._inner_html = html
        return self

    def get_inner_html(self) -> str:
        return self._inner_html

    def to_anchor_string(self) -> str:
        """Render as ``<name attr="value" ...>inner</name>``."""
        attrs = "".join(f' {name}="{escape_attr(str(value))}"' for name, value in self._attrs.items())
        return f"<{self.tag_name}{attrs}>{self._inner_html}</{self.tag_name}>"

    def _classes(self) -> list[str]:
        return _split_classes(self.get_class())

    def __repr__(self) -> str:
        return f"HtmlTag({self.tag_name!r}, {self._attrs!r}, {self._inner_html!r})"


def _split_classes(value: str) -> list[str]:
    return [c for c in _WHITESPACE_RE.split(value) if c]


__all__ = ["HtmlTag"]
