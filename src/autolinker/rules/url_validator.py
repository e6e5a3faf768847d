"""Filters false positives out of raw URL pattern hits.

A regular expression alone cannot tell ``http://localhost`` (a link) from
``git:d`` (not a link) or ``javascript:alert(1)`` (never a link). These
checks run on every raw hit of the URL pattern before it becomes a match.

Example:
    >>> is_valid_match("http://localhost", "http://localhost")
    True
    >>> is_valid_match("git:d", "git:d")
    False
"""

from __future__ import annotations

import re

from autolinker.regexlib import ALPHA_CHARS

# Full protocol with the two trailing slashes, e.g. "http://"
HAS_FULL_PROTOCOL_RE: re.Pattern[str] = re.compile(r"^[A-Za-z][-.+A-Za-z0-9]*://")

URI_SCHEME_RE: re.Pattern[str] = re.compile(r"^[A-Za-z][-.+A-Za-z0-9]*:")

IP_URL_RE: re.Pattern[str] = re.compile(
    r"^[A-Za-z][-.+A-Za-z0-9]*://"
    r"[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}"
    r"(?::[0-9]*)?/?$"
)

# A letter somewhere after the scheme separator
_WORD_CHAR_AFTER_SCHEME_RE: re.Pattern[str] = re.compile(rf":[^\s]*?[{ALPHA_CHARS}]")

_BLOCKED_SCHEMES: frozenset[str] = frozenset(("javascript:", "vbscript:"))


def is_valid_match(url_match: str, scheme_url_match: str) -> bool:
    """Decide whether a raw URL pattern hit is worth linking.

    Rejects, in order:
    1. ``javascript:`` and ``vbscript:`` URLs
    2. matches with neither a full protocol nor a dot ("git:d")
    3. scheme matches with no letter after the scheme ("git:1.0"), unless
       the host is an IPv4 literal
    4. hosts containing ".."

    Args:
        url_match: The whole raw match
        scheme_url_match: The scheme-prefixed portion, "" when the match
            was a www or TLD match

    Returns:
        True if the match should be processed further.
    """
    if scheme_url_match and not is_valid_uri_scheme(scheme_url_match):
        return False
    if _lacks_protocol_and_dot(url_match, scheme_url_match):
        return False
    if _lacks_word_char_after_scheme(url_match, scheme_url_match) and not is_valid_ip_address(
        url_match
    ):
        return False
    return not contains_multiple_dots(url_match)


def is_valid_uri_scheme(scheme_url_match: str) -> bool:
    """False for schemes that must never be linked."""
    m = URI_SCHEME_RE.match(scheme_url_match)
    if m is None:
        return True
    return m.group(0).lower() not in _BLOCKED_SCHEMES


def is_valid_ip_address(url_match: str) -> bool:
    """True for scheme URLs whose whole host is an IPv4 literal."""
    return IP_URL_RE.match(url_match) is not None


def contains_multiple_dots(url_match: str) -> bool:
    """True if the host part (before the first "/") contains ".."."""
    host = url_match
    if HAS_FULL_PROTOCOL_RE.match(url_match):
        host = url_match.split("://", 1)[1]
    return ".." in host.split("/", 1)[0]


def _lacks_protocol_and_dot(url_match: str, scheme_url_match: str) -> bool:
    has_full_protocol = bool(scheme_url_match) and HAS_FULL_PROTOCOL_RE.match(scheme_url_match)
    return bool(url_match) and not has_full_protocol and "." not in url_match


def _lacks_word_char_after_scheme(url_match: str, scheme_url_match: str) -> bool:
    if url_match and scheme_url_match:
        return _WORD_CHAR_AFTER_SCHEME_RE.search(url_match) is None
    return False


__all__ = [
    "contains_multiple_dots",
    "is_valid_ip_address",
    "is_valid_match",
    "is_valid_uri_scheme",
]
