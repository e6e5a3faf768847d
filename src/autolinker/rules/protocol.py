"""MatchRule protocol.

A match rule finds one kind of linkable span in a fragment of plain text
(never HTML; the linker feeds rules only the text nodes of its input).

Thread Safety:
Rules hold only immutable configuration chosen at construction. Multiple
threads may call the same rule instance concurrently.

Example:
    >>> class TicketRule:
    ...     kind = MatchKind.URL
    ...
    ...     def parse_matches(self, text):
    ...         return [
    ...             Match(self.kind, m.start(), m.group(0), ...)
    ...             for m in re.finditer(r"T-\\d+", text)
    ...         ]

"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from autolinker.matches import Match, MatchKind


@runtime_checkable
class MatchRule(Protocol):
    """Protocol for match rule implementations.

    Attributes:
        kind: The MatchKind every produced match carries.

    """

    kind: ClassVar[MatchKind]

    def parse_matches(self, text: str) -> Sequence[Match]:
        """Find candidate matches in text.

        Offsets are relative to the start of ``text``. Implausible candidates
        are dropped rather than reported as errors.

        Args:
            text: A plain-text fragment

        Returns:
            Candidate matches in the order found.
        """
        ...
