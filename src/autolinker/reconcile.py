"""Match reconciliation.

Rules run independently and happily report overlapping candidates: the
``#section`` of ``site.com/page#section`` is both a URL tail and a hashtag,
and ``asdf.com`` inside ``x@asdf.com`` looks like a URL. Reconciliation
settles this in two stages:

1. compact: sort by offset and drop every candidate that collides with an
   earlier (or same-offset longer) one
2. filter: drop candidates whose kind, or URL match type, is disabled

The order matters. Filtering first would let a disabled URL resurrect its
own fragment as a hashtag.

Thread Safety:
Pure functions over immutable matches.

"""

from __future__ import annotations

from collections.abc import Iterable

from autolinker.config import LinkerConfig
from autolinker.matches import Match, MatchKind, UrlMatchType
from autolinker.utils.logger import get_logger

logger = get_logger(__name__)

# Breaks ties between same-offset, same-length candidates so the outcome does
# not depend on the order rules ran in
KIND_PRIORITY: dict[MatchKind, int] = {
    MatchKind.HASHTAG: 0,
    MatchKind.EMAIL: 1,
    MatchKind.PHONE: 2,
    MatchKind.MENTION: 3,
    MatchKind.URL: 4,
}


def compact_matches(matches: Iterable[Match]) -> list[Match]:
    """Sort matches by offset and remove overlaps.

    When two matches start at the same offset the longer one is kept. When
    a match starts inside (or right at the end of) the one before it, the
    later match is removed, however long it is.

    Args:
        matches: Candidates with document-absolute offsets

    Returns:
        Non-overlapping matches in ascending offset order.
    """
    ordered = sorted(matches, key=lambda m: (m.offset, KIND_PRIORITY[m.kind]))

    i = 0
    while i < len(ordered) - 1:
        current, following = ordered[i], ordered[i + 1]

        if current.offset == following.offset:
            if len(following.matched_text) > len(current.matched_text):
                del ordered[i]
            else:
                del ordered[i + 1]
            continue

        if following.offset <= current.end:
            del ordered[i + 1]
            continue

        i += 1
    return ordered


def remove_unwanted_matches(matches: Iterable[Match], config: LinkerConfig) -> list[Match]:
    """Drop matches whose kind or URL match type the config disables."""
    return [m for m in matches if is_enabled(m, config)]


def is_enabled(match: Match, config: LinkerConfig) -> bool:
    match match.kind:
        case MatchKind.URL:
            urls = config.urls
            match match.url_match_type:
                case UrlMatchType.SCHEME:
                    return urls.scheme_matches
                case UrlMatchType.WWW:
                    return urls.www_matches
                case _:
                    return urls.tld_matches
        case MatchKind.EMAIL:
            return config.email
        case MatchKind.PHONE:
            return config.phone
        case MatchKind.HASHTAG:
            return config.hashtag is not None
        case MatchKind.MENTION:
            return config.mention is not None
    return False


def reconcile(candidates: Iterable[Match], config: LinkerConfig) -> list[Match]:
    """Compact, then filter, a document's worth of candidate matches.

    Args:
        candidates: Matches from every rule and every text node
        config: Configuration deciding which kinds survive

    Returns:
        The final matches in ascending offset order.

    Example:
        >>> url = Match(MatchKind.URL, 0, "google.com/#link", ...)
        >>> tag = Match(MatchKind.HASHTAG, 11, "#link", ...)
        >>> [m.kind.value for m in reconcile([tag, url], config)]
        ['url']

    """
    candidates = list(candidates)
    compacted = compact_matches(candidates)
    wanted = remove_unwanted_matches(compacted, config)
    logger.debug(
        "Reconciled %d candidate matches: %d after overlap removal, %d enabled",
        len(candidates),
        len(compacted),
        len(wanted),
    )
    return wanted


__all__ = [
    "KIND_PRIORITY",
    "compact_matches",
    "is_enabled",
    "reconcile",
    "remove_unwanted_matches",
]
