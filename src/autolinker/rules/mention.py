"""@-mention match rule.

Handle grammar depends on the service:

    twitter     @ + 1-20 letters, digits or underscores
    instagram   @ + 1-50 letters, digits, underscores or dots

Like hashtags, a mention must not be glued to a preceding word, which keeps
the ``@`` of an email address from starting one. Trailing dots are dropped
so a sentence-ending period stays outside the link.

Example:
    >>> [m.matched_text for m in MentionRule("instagram").parse_matches("ask @some.one.")]
    ['@some.one']

"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import ClassVar

from autolinker.errors import ConfigError
from autolinker.matches import Match, MatchKind, MentionDetails
from autolinker.regexlib import ALPHA_NUMERIC_CHARS
from autolinker.rules.hashtag import preceded_by_boundary

MENTION_PATTERNS: MappingProxyType[str, re.Pattern[str]] = MappingProxyType(
    {
        "twitter": re.compile(rf"@[_{ALPHA_NUMERIC_CHARS}]{{1,20}}"),
        "instagram": re.compile(rf"@[_.{ALPHA_NUMERIC_CHARS}]{{1,50}}"),
    }
)


class MentionRule:
    """Finds @-mentions for one service in plain text.

    Args:
        service_name: Key of MENTION_PATTERNS

    Raises:
        ConfigError: If the service has no mention grammar.

    """

    kind: ClassVar[MatchKind] = MatchKind.MENTION

    __slots__ = ("_pattern", "_service_name")

    def __init__(self, service_name: str) -> None:
        pattern = MENTION_PATTERNS.get(service_name)
        if pattern is None:
            raise ConfigError(
                "mention", f"{service_name!r} is not one of {', '.join(sorted(MENTION_PATTERNS))}"
            )
        self._service_name = service_name
        self._pattern = pattern

    @property
    def service_name(self) -> str:
        return self._service_name

    def parse_matches(self, text: str) -> list[Match]:
        matches: list[Match] = []
        for m in self._pattern.finditer(text):
            offset = m.start()
            if not preceded_by_boundary(text, offset):
                continue

            matched_text = m.group(0).rstrip(".")
            mention = matched_text[1:]
            if not mention:
                continue

            matches.append(
                Match(
                    kind=MatchKind.MENTION,
                    offset=offset,
                    matched_text=matched_text,
                    details=MentionDetails(mention=mention, service_name=self._service_name),
                )
            )
        return matches


__all__ = ["MENTION_PATTERNS", "MentionRule"]
