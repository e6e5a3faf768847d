"""Match values produced by the match rules.

A Match is a single frozen type: a kind discriminator, the span it covers in
the input, and a kind-specific ``details`` payload. Everything a renderer
needs (target URL, display text, CSS class suffixes) can be derived from
the match alone.

Example:
    >>> m = Match(MatchKind.EMAIL, 6, "a@b.com", EmailDetails("a@b.com"))
    >>> m.end, m.anchor_href
    (13, 'mailto:a@b.com')

Thread Safety:
    All types here are frozen and safe to share across threads.

"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum

from autolinker.errors import RenderError


class MatchKind(Enum):
    """What a match links to. Values double as CSS class suffixes."""

    URL = "url"
    EMAIL = "email"
    PHONE = "phone"
    HASHTAG = "hashtag"
    MENTION = "mention"


class UrlMatchType(Enum):
    """How a URL match was recognised."""

    SCHEME = "scheme"  # http://google.com, mailto:x@y.com
    WWW = "www"  # www.google.com
    TLD = "tld"  # google.com


@dataclass(frozen=True, slots=True)
class UrlDetails:
    """URL payload.

    Attributes:
        url: Link target; ``http://`` is prepended when the match had
            neither a scheme nor a protocol-relative ``//``
        url_match_type: scheme / www / tld
        protocol_url_match: The match carried an explicit scheme
        protocol_relative_match: The match started with ``//``

    """

    url: str
    url_match_type: UrlMatchType
    protocol_url_match: bool
    protocol_relative_match: bool


@dataclass(frozen=True, slots=True)
class EmailDetails:
    email: str


@dataclass(frozen=True, slots=True)
class PhoneDetails:
    """Phone payload.

    Attributes:
        number: Digits of the number, keeping extension separators ``,;#``
        plus_sign: The number was written with a leading ``+``

    """

    number: str
    plus_sign: bool


@dataclass(frozen=True, slots=True)
class HashtagDetails:
    hashtag: str
    service_name: str | None


@dataclass(frozen=True, slots=True)
class MentionDetails:
    mention: str
    service_name: str | None


MatchDetails = UrlDetails | EmailDetails | PhoneDetails | HashtagDetails | MentionDetails

_HASHTAG_HREFS: dict[str, str] = {
    "twitter": "https://twitter.com/hashtag/{}",
    "facebook": "https://www.facebook.com/hashtag/{}",
    "instagram": "https://instagram.com/explore/tags/{}",
}

_MENTION_HREFS: dict[str, str] = {
    "twitter": "https://twitter.com/{}",
    "instagram": "https://instagram.com/{}",
}


@dataclass(frozen=True, slots=True)
class Match:
    """A located, linkable span of the input.

    Attributes:
        kind: Which rule produced the match
        offset: Index of the first matched character in the input
        matched_text: Exact input text at ``offset``
        details: Kind-specific payload

    """

    kind: MatchKind
    offset: int
    matched_text: str
    details: MatchDetails

    @property
    def end(self) -> int:
        """Index one past the last matched character."""
        return self.offset + len(self.matched_text)

    @property
    def service_name(self) -> str | None:
        if isinstance(self.details, (HashtagDetails, MentionDetails)):
            return self.details.service_name
        return None

    @property
    def url_match_type(self) -> UrlMatchType | None:
        if isinstance(self.details, UrlDetails):
            return self.details.url_match_type
        return None

    def shifted(self, delta: int) -> Match:
        """Return a copy moved ``delta`` characters to the right.

        Rules report offsets relative to the text node they scanned; the
        linker shifts each match once to make it document-absolute.
        """
        if not delta:
            return self
        return dataclasses.replace(self, offset=self.offset + delta)

    @property
    def anchor_href(self) -> str:
        """Target of the generated link.

        Raises:
            RenderError: If a hashtag or mention has no linkable service.
        """
        match self.details:
            case UrlDetails(url=url):
                # &amp; in the source is a literal & in the link target
                return url.replace("&amp;", "&")
            case EmailDetails(email=email):
                return f"mailto:{email}"
            case PhoneDetails(number=number, plus_sign=plus_sign):
                return f"tel:{'+' if plus_sign else ''}{number}"
            case HashtagDetails(hashtag=hashtag, service_name=service):
                template = _HASHTAG_HREFS.get(service or "")
                if template is None:
                    raise RenderError(f"Unknown service name to point hashtag to: {service!r}")
                return template.format(hashtag)
            case MentionDetails(mention=mention, service_name=service):
                template = _MENTION_HREFS.get(service or "")
                if template is None:
                    raise RenderError(f"Unknown service name to point mention to: {service!r}")
                return template.format(mention)
        raise RenderError(f"Unsupported match details: {self.details!r}")

    @property
    def css_class_suffixes(self) -> tuple[str, ...]:
        """Suffixes appended to the base CSS class, e.g. ("mention", "twitter")."""
        if self.kind is MatchKind.MENTION and self.service_name:
            return (self.kind.value, self.service_name)
        return (self.kind.value,)


__all__ = [
    "EmailDetails",
    "HashtagDetails",
    "Match",
    "MatchDetails",
    "MatchKind",
    "MentionDetails",
    "PhoneDetails",
    "UrlDetails",
    "UrlMatchType",
]
