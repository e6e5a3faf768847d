"""Anchor rendering for autolinker.

Components:
- HtmlTag: mutable tag model with attribute and class helpers
- AnchorTagBuilder: builds the default ``<a>`` tag for a match
- truncate_end / truncate_middle / truncate_smart: label truncation

"""

from autolinker.renderers.anchor import AnchorTagBuilder, decode_percent_encoding
from autolinker.renderers.tag import HtmlTag
from autolinker.renderers.truncate import (
    TRUNCATORS,
    truncate_end,
    truncate_middle,
    truncate_smart,
)

__all__ = [
    "TRUNCATORS",
    "AnchorTagBuilder",
    "HtmlTag",
    "decode_percent_encoding",
    "truncate_end",
    "truncate_middle",
    "truncate_smart",
]
