"""Email address match rule.

Example:
    >>> [m.matched_text for m in EmailRule().parse_matches("mail me: joe.bloggs@example.co.uk.")]
    ['joe.bloggs@example.co.uk']

"""

from __future__ import annotations

import re
from typing import ClassVar

from autolinker.matches import EmailDetails, Match, MatchKind
from autolinker.regexlib import ALPHA_NUMERIC_CHARS, DOMAIN_NAME, TLD, TLD_BOUNDARY

_SPECIAL_CHARS = r"!#$%&'*+\-/=?^_`{|}~"
_RESTRICTED_SPECIAL_CHARS = r'\s"(),:;<>@\[\]'
_VALID_CHARS = ALPHA_NUMERIC_CHARS + _SPECIAL_CHARS
_VALID_RESTRICTED_CHARS = _VALID_CHARS + _RESTRICTED_SPECIAL_CHARS

# Unquoted local parts may not contain ".." or end in "."; quoted ones may
# contain nearly anything. An unquoted part starts where no earlier
# character of the same word could start it.
_LOCAL_PART = (
    rf"(?:(?<![{_VALID_CHARS}])(?<![{_VALID_CHARS}]\.)[{_VALID_CHARS}](?:[{_VALID_CHARS}]|\.(?!\.|@))*"
    rf'|"[{_VALID_RESTRICTED_CHARS}.]+")'
)

EMAIL_RE: re.Pattern[str] = re.compile(
    rf"{_LOCAL_PART}@{DOMAIN_NAME}\.{TLD}{TLD_BOUNDARY}",
    re.IGNORECASE,
)


class EmailRule:
    """Finds email addresses in plain text."""

    kind: ClassVar[MatchKind] = MatchKind.EMAIL

    __slots__ = ()

    def parse_matches(self, text: str) -> list[Match]:
        return [
            Match(
                kind=MatchKind.EMAIL,
                offset=m.start(),
                matched_text=m.group(0),
                details=EmailDetails(email=m.group(0)),
            )
            for m in EMAIL_RE.finditer(text)
        ]


__all__ = ["EMAIL_RE", "EmailRule"]
