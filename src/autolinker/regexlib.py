"""Shared regular expression building blocks.

Every match rule draws on the same character classes and domain grammar.
They are built once at import time and only read afterwards.

Character classes are exposed as the *body* of a ``[...]`` class so rules
can combine them with extra characters (``[_{ALPHA_NUMERIC_CHARS}]``).

Usage:
    from autolinker.regexlib import ALPHA_NUMERIC_CHARS, DOMAIN_NAME, TLD

    pattern = re.compile(rf"{DOMAIN_NAME}\\.{TLD}", re.IGNORECASE)
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Callable

from autolinker.tlds import KNOWN_TLDS


def _class_body(predicate: Callable[[str], bool]) -> str:
    """Collapse every BMP code point accepted by predicate into class ranges."""
    parts: list[str] = []
    start: int | None = None
    for cp in range(0x10000):
        if predicate(chr(cp)):
            if start is None:
                start = cp
            continue
        if start is not None:
            parts.append(_range(start, cp - 1))
            start = None
    if start is not None:
        parts.append(_range(start, 0xFFFF))
    return "".join(parts)


def _range(first: int, last: int) -> str:
    if first == last:
        return f"\\u{first:04x}"
    return f"\\u{first:04x}-\\u{last:04x}"


def _is_alpha(char: str) -> bool:
    # Letters plus combining marks, so accented text stays one word
    return unicodedata.category(char)[0] in "LM"


def _is_decimal(char: str) -> bool:
    return unicodedata.category(char) == "Nd"


# Unicode letters and marks
ALPHA_CHARS: str = _class_body(_is_alpha)

# Unicode decimal digits
DECIMAL_CHARS: str = _class_body(_is_decimal)

ALPHA_NUMERIC_CHARS: str = ALPHA_CHARS + DECIMAL_CHARS

# A domain label run: may contain dots and hyphens, must not end in a dot
DOMAIN_NAME: str = rf"[{ALPHA_NUMERIC_CHARS}.\-]*[{ALPHA_NUMERIC_CHARS}\-]"

# Domain names start at the beginning of a label run, never inside one
DOMAIN_START: str = rf"(?<![{ALPHA_NUMERIC_CHARS}.\-])"

# Longest alternatives first so "community" wins over "com"
TLD: str = "(?:" + "|".join(sorted(KNOWN_TLDS, key=lambda t: (-len(t), t))) + ")"

# TLD must not run on into more letters or digits
TLD_BOUNDARY: str = rf"(?![-{ALPHA_NUMERIC_CHARS}])"

ALPHA_NUMERIC_RE: re.Pattern[str] = re.compile(f"[{ALPHA_NUMERIC_CHARS}]")

NON_WORD_CHAR_RE: re.Pattern[str] = re.compile(f"[^{ALPHA_NUMERIC_CHARS}]")

DIGIT_RE: re.Pattern[str] = re.compile(r"\d")

NON_DIGIT_RE: re.Pattern[str] = re.compile(r"\D")


__all__ = [
    "ALPHA_CHARS",
    "ALPHA_NUMERIC_CHARS",
    "ALPHA_NUMERIC_RE",
    "DECIMAL_CHARS",
    "DIGIT_RE",
    "DOMAIN_NAME",
    "DOMAIN_START",
    "NON_DIGIT_RE",
    "NON_WORD_CHAR_RE",
    "TLD",
    "TLD_BOUNDARY",
]
