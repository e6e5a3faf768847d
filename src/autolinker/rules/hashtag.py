"""Hashtag match rule.

A hashtag is ``#`` followed by up to 139 letters, digits or underscores, and
must not be glued to a preceding word ("issue#12" is not a hashtag).

Example:
    >>> [m.details.hashtag for m in HashtagRule("twitter").parse_matches("#Python and #rust_lang")]
    ['Python', 'rust_lang']

"""

from __future__ import annotations

import re
from typing import ClassVar

from autolinker.matches import HashtagDetails, Match, MatchKind
from autolinker.regexlib import ALPHA_NUMERIC_CHARS, NON_WORD_CHAR_RE

HASHTAG_RE: re.Pattern[str] = re.compile(rf"#[_{ALPHA_NUMERIC_CHARS}]{{1,139}}")


class HashtagRule:
    """Finds hashtags in plain text.

    The rule runs even while hashtag linking is disabled (service_name is
    None) so that a URL fragment such as ``page#section`` still claims its
    span during reconciliation; disabled hashtags are filtered out after.

    Args:
        service_name: Service hashtags link to, or None

    """

    kind: ClassVar[MatchKind] = MatchKind.HASHTAG

    __slots__ = ("_service_name",)

    def __init__(self, service_name: str | None = None) -> None:
        self._service_name = service_name

    @property
    def service_name(self) -> str | None:
        return self._service_name

    def parse_matches(self, text: str) -> list[Match]:
        matches: list[Match] = []
        for m in HASHTAG_RE.finditer(text):
            offset = m.start()
            if not preceded_by_boundary(text, offset):
                continue
            matched_text = m.group(0)
            matches.append(
                Match(
                    kind=MatchKind.HASHTAG,
                    offset=offset,
                    matched_text=matched_text,
                    details=HashtagDetails(hashtag=matched_text[1:], service_name=self._service_name),
                )
            )
        return matches


def preceded_by_boundary(text: str, offset: int) -> bool:
    """True at the start of text or after a non-word character."""
    if offset == 0:
        return True
    return NON_WORD_CHAR_RE.match(text[offset - 1]) is not None


__all__ = ["HASHTAG_RE", "HashtagRule", "preceded_by_boundary"]
