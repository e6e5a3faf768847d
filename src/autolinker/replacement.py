"""Replacement hook results.

A replacement hook is called once per accepted match and decides what the
match turns into. Its loosely typed return value is normalised into one of
three variants:

    LiteralText(text)   emit text as-is (a str return, or False for the
                        original matched text)
    UseDefault()        build the default anchor (True, None, anything else)
    CustomTag(tag)      render the returned HtmlTag

Hooks may also return the variants directly.

Example:
    >>> def hook(match):
    ...     if match.kind is MatchKind.EMAIL:
    ...         return False  # leave emails alone
    ...     tag = linker.tag_builder.build(match)
    ...     return tag.set_attr("rel", "nofollow")

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from autolinker.matches import Match
from autolinker.renderers.tag import HtmlTag
from autolinker.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LiteralText:
    text: str


@dataclass(frozen=True, slots=True)
class UseDefault:
    pass


@dataclass(frozen=True, slots=True)
class CustomTag:
    tag: HtmlTag


Replacement = LiteralText | UseDefault | CustomTag

ReplaceFn = Callable[[Match], Any]

USE_DEFAULT = UseDefault()


def to_replacement(result: object, match: Match) -> Replacement:
    """Normalise a hook's return value.

    Args:
        result: Whatever the hook returned
        match: The match the hook was called with

    Returns:
        The Replacement variant result stands for.
    """
    match result:
        case LiteralText() | UseDefault() | CustomTag():
            return result
        case str():
            return LiteralText(result)
        case False:
            return LiteralText(match.matched_text)
        case HtmlTag():
            return CustomTag(result)
        case True | None:
            return USE_DEFAULT
    logger.debug(
        "Replacement hook returned unsupported %s for %r; using default anchor",
        type(result).__name__,
        match.matched_text,
    )
    return USE_DEFAULT


__all__ = [
    "USE_DEFAULT",
    "CustomTag",
    "LiteralText",
    "ReplaceFn",
    "Replacement",
    "UseDefault",
    "to_replacement",
]
