"""Phone number match rule.

Two grammars share one pattern:

    (123) 456-7890, 123.456.7890, +1 (800) 444 1234   3-3-4 numbers with an
                                                      optional country code
    +44 20 7946 0958, +7-495-123-45-67               international numbers:
                                                      "+", a known country
                                                      code, 7 to 13 more digits

Either may carry dialling extensions (``,,;1234#``).

A bare run of digits is never a phone number: the match must contain at
least one delimiter, and must not sit inside a longer run of digits.

Example:
    >>> m = PhoneRule().parse_matches("call (123) 456-7890 now")[0]
    >>> m.details.number, m.details.plus_sign
    ('1234567890', False)

"""

from __future__ import annotations

import re
from typing import ClassVar

from autolinker.matches import Match, MatchKind, PhoneDetails
from autolinker.regexlib import DIGIT_RE, NON_DIGIT_RE

# Country calling codes, longest-first within each leading digit
COUNTRY_CODE_PREFIXES: tuple[str, ...] = (
    "9[976]\\d", "8[987530]\\d", "6[987]\\d", "5[90]\\d", "42\\d", "3[875]\\d",
    "2[98654321]\\d", "9[8543210]", "8[6421]", "6[6543210]", "5[87654321]",
    "4[987654310]", "3[9643210]", "2[70]", "7", "1",
)

_SEP = r"[- .]"

PHONE_RE: re.Pattern[str] = re.compile(
    r"(?:"
    rf"(?:(?:(?P<plus>\+)?[0-9]{{1,3}}{_SEP}?)?\(?[0-9]{{3}}\)?{_SEP}?[0-9]{{3}}{_SEP}?[0-9]{{4}})"
    rf"|(?:(?P<intl_plus>\+)(?:{'|'.join(COUNTRY_CODE_PREFIXES)}){_SEP}?(?:[0-9]{_SEP}?){{6,12}}[0-9]+)"
    r")"
    r"(?P<extension>(?:[,;]+[0-9]+#?)*)"
)

_NOT_DIALABLE_RE: re.Pattern[str] = re.compile(r"[^0-9,;#]")


class PhoneRule:
    """Finds phone numbers in plain text."""

    kind: ClassVar[MatchKind] = MatchKind.PHONE

    __slots__ = ()

    def parse_matches(self, text: str) -> list[Match]:
        matches: list[Match] = []

        for m in PHONE_RE.finditer(text):
            matched_text = m.group(0)
            extension = m.group("extension")

            if not (has_delimiter(matched_text) or has_delimiter(extension)):
                continue
            if not _context_clear(text, m.start(), m.end()):
                continue

            matches.append(
                Match(
                    kind=MatchKind.PHONE,
                    offset=m.start(),
                    matched_text=matched_text,
                    details=PhoneDetails(
                        number=_NOT_DIALABLE_RE.sub("", matched_text),
                        plus_sign=bool(m.group("plus") or m.group("intl_plus")),
                    ),
                )
            )
        return matches


def has_delimiter(text: str) -> bool:
    """True if text contains anything besides digits."""
    return bool(text) and NON_DIGIT_RE.search(text) is not None


def _context_clear(text: str, start: int, end: int) -> bool:
    # A digit on either side means we matched a slice of a longer number
    before = text[start - 1] if start > 0 else ""
    after = text[end] if end < len(text) else ""
    return not DIGIT_RE.match(before) and not DIGIT_RE.match(after)


__all__ = ["COUNTRY_CODE_PREFIXES", "PHONE_RE", "PhoneRule", "has_delimiter"]
