"""URL match rule.

Finds three flavours of URL with one composite pattern:

    scheme   http://google.com, ftp://host/file, http://localhost
    www      www.google.com, //www.google.com
    tld      google.com/path?q=1#frag, //google.com

Every raw hit is then validated (see url_validator), checked for context
(not part of an email or username, not a ``//`` glued to a word), and
trimmed (trailing ``?``, an unbalanced closing parenthesis, or junk after
the host).

Example:
    >>> [m.matched_text for m in UrlRule().parse_matches("see (google.com/a_(b)) now")]
    ['google.com/a_(b)']

"""

from __future__ import annotations

import re
from typing import ClassVar

from autolinker.matches import Match, MatchKind, UrlDetails, UrlMatchType
from autolinker.regexlib import (
    ALPHA_NUMERIC_CHARS,
    ALPHA_NUMERIC_RE,
    DOMAIN_NAME,
    DOMAIN_START,
    TLD,
    TLD_BOUNDARY,
)
from autolinker.rules.url_validator import is_valid_match

# Matches "http:", "mailto:" or "http://", but not "link:" in "link:http://x"
# and not "google.com:" in "google.com:8000"
_SCHEME = r"(?:[A-Za-z][-.+A-Za-z0-9]*:(?![A-Za-z][-.+A-Za-z0-9]*://)(?!\d+/?)(?://)?)"

# No scheme starts within a letter run: the run start yields the same match
_SCHEME_START = r"(?<![A-Za-z])(?<![A-Za-z][-.+0-9])"

# Path, query string and fragment; may not end in "?!:,.;"
# http://blog.codinghorror.com/the-problem-with-urls/
_SUFFIX_CHARS = rf"{ALPHA_NUMERIC_CHARS}\-+&@#/%=~_()|'$*\[\]✓"
_URL_SUFFIX = rf"[/?#](?:[{_SUFFIX_CHARS}?!:,.;]*[{_SUFFIX_CHARS}])?"

URL_RE: re.Pattern[str] = re.compile(
    r"(?:"
    rf"(?P<scheme_url>{_SCHEME_START}{_SCHEME}{DOMAIN_NAME})"
    rf"|(?P<www_url>(?P<www_protocol_relative>//)?www\.{DOMAIN_NAME})"
    rf"|(?P<tld_url>(?P<tld_protocol_relative>//)?{DOMAIN_START}{DOMAIN_NAME}\.{TLD}{TLD_BOUNDARY})"
    r")"
    r"(?::[0-9]+)?"
    rf"(?:{_URL_SUFFIX})?",
    re.IGNORECASE,
)

# Host up to and including its last label, optionally after "//" or "://"
_HOST_PREFIX_RE: re.Pattern[str] = re.compile(
    rf"^((?:.?//)?[-.{ALPHA_NUMERIC_CHARS}]*[-{ALPHA_NUMERIC_CHARS}]\.[-{ALPHA_NUMERIC_CHARS}]+)"
)

_INVALID_AFTER_HOST_RE: re.Pattern[str] = re.compile(r"^[^-.A-Za-z0-9:/?#]")


class UrlRule:
    """Finds URLs in plain text.

    Thread Safety:
        Stateless; safe to share.

    """

    kind: ClassVar[MatchKind] = MatchKind.URL

    __slots__ = ()

    def parse_matches(self, text: str) -> list[Match]:
        matches: list[Match] = []

        for m in URL_RE.finditer(text):
            match_str = m.group(0)
            scheme_url_match = m.group("scheme_url") or ""
            protocol_relative = bool(
                m.group("www_protocol_relative") or m.group("tld_protocol_relative")
            )
            offset = m.start()
            prev_char = text[offset - 1] if offset > 0 else ""

            if not is_valid_match(match_str, scheme_url_match):
                continue

            # Part of an email address or a username
            if prev_char == "@":
                continue

            # "abc//google.com": the // sits in the middle of a word
            if protocol_relative and prev_char and ALPHA_NUMERIC_RE.match(prev_char):
                continue

            if match_str.endswith("?"):
                match_str = match_str[:-1]

            if has_unbalanced_closing_paren(match_str):
                # The paren closes one opened before the URL
                match_str = match_str[:-1]
            else:
                pos = invalid_char_after_tld(match_str, scheme_url_match)
                if pos > -1:
                    match_str = match_str[:pos]

            protocol_url_match = bool(scheme_url_match)
            if protocol_url_match:
                url_match_type = UrlMatchType.SCHEME
            elif m.group("www_url"):
                url_match_type = UrlMatchType.WWW
            else:
                url_match_type = UrlMatchType.TLD

            url = match_str
            if not protocol_relative and not protocol_url_match:
                url = f"http://{url}"

            matches.append(
                Match(
                    kind=MatchKind.URL,
                    offset=offset,
                    matched_text=match_str,
                    details=UrlDetails(
                        url=url,
                        url_match_type=url_match_type,
                        protocol_url_match=protocol_url_match,
                        protocol_relative_match=protocol_relative,
                    ),
                )
            )
        return matches


def has_unbalanced_closing_paren(match_str: str) -> bool:
    """True if match_str ends in a ")" that no "(" inside it opened.

    "wikipedia.com/something_(disambiguation)" keeps its paren, while the
    outer one in "(wikipedia.com/something_(disambiguation))" does not
    belong to the URL.
    """
    if not match_str.endswith(")"):
        return False
    return match_str.count("(") < match_str.count(")")


def invalid_char_after_tld(url_match: str, scheme_url_match: str) -> int:
    """Find where junk starts right after the host.

    Valid characters after the host are letters, digits and ``-.:/?#``.

    Returns:
        Index in url_match of the first invalid character, or -1.
    """
    if not url_match:
        return -1

    offset = 0
    if scheme_url_match:
        offset = url_match.find(":")
        url_match = url_match[offset:]

    m = _HOST_PREFIX_RE.match(url_match)
    if m is None:
        return -1

    host_len = len(m.group(1))
    if _INVALID_AFTER_HOST_RE.match(url_match[host_len:]):
        return offset + host_len
    return -1


__all__ = ["URL_RE", "UrlRule", "has_unbalanced_closing_paren", "invalid_char_after_tld"]
