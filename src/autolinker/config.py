"""Immutable linker configuration for autolinker.

All option normalisation happens once, when a LinkerConfig is created. The
linker and its collaborators only ever read the resulting frozen values.

Option forms:
    urls: bool, or a mapping with schemeMatches / wwwMatches / tldMatches
    strip_prefix: bool, or a mapping with scheme / www
    truncate: number (length, ellipsis at the end; 0 or inf for none), or a mapping with
        length / location ("end", "middle", "smart")
    hashtag: False or one of "twitter", "facebook", "instagram"
    mention: False or one of "twitter", "instagram"

Usage:
    >>> config = LinkerConfig.from_dict({"newWindow": False, "hashtag": "twitter"})
    >>> config.new_window
    False
    >>> config.hashtag
    'twitter'

Thread Safety:
    Frozen dataclasses; safe to share between threads.

"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from autolinker.errors import ConfigError
from autolinker.utils.logger import get_logger

logger = get_logger(__name__)

TruncateLocation = Literal["end", "middle", "smart"]

HASHTAG_SERVICES: frozenset[str] = frozenset(("twitter", "facebook", "instagram"))
MENTION_SERVICES: frozenset[str] = frozenset(("twitter", "instagram"))
TRUNCATE_LOCATIONS: frozenset[str] = frozenset(("end", "middle", "smart"))


@dataclass(frozen=True, slots=True)
class UrlsConfig:
    """Which flavours of URL match are linked.

    Attributes:
        scheme_matches: URLs with an explicit scheme (``http://...``)
        www_matches: URLs starting with ``www.``
        tld_matches: bare domains recognised by their top-level domain
    """

    scheme_matches: bool = True
    www_matches: bool = True
    tld_matches: bool = True


@dataclass(frozen=True, slots=True)
class StripPrefixConfig:
    """Which URL prefixes are removed from the displayed anchor text."""

    scheme: bool = True
    www: bool = True


@dataclass(frozen=True, slots=True)
class TruncateConfig:
    """Display-text truncation policy.

    Attributes:
        length: Maximum anchor text length, None for unlimited
        location: Where the ellipsis goes ("end", "middle" or "smart")
    """

    length: int | None = None
    location: TruncateLocation = "end"

    @property
    def enabled(self) -> bool:
        return bool(self.length)


@dataclass(frozen=True, slots=True)
class LinkerConfig:
    """Immutable autolinker configuration.

    Attributes:
        urls: URL match flavours to link
        email: Link email addresses
        phone: Link phone numbers
        hashtag: Service hashtags point to, None to leave hashtags alone
        mention: Service mentions point to, None to leave mentions alone
        strip_prefix: Prefixes removed from URL anchor text
        strip_trailing_slash: Remove one trailing "/" from URL anchor text
        decode_percent_encoding: Percent-decode URL anchor text
        new_window: Add target="_blank" and rel="noopener noreferrer"
        truncate: Anchor text truncation policy
        class_name: Base CSS class; "" adds no class attribute

    """

    urls: UrlsConfig = field(default_factory=UrlsConfig)
    email: bool = True
    phone: bool = True
    hashtag: str | None = None
    mention: str | None = None
    strip_prefix: StripPrefixConfig = field(default_factory=StripPrefixConfig)
    strip_trailing_slash: bool = True
    decode_percent_encoding: bool = True
    new_window: bool = True
    truncate: TruncateConfig | float | Mapping[str, Any] | None = field(default_factory=TruncateConfig)
    class_name: str = ""

    def __post_init__(self) -> None:
        # Shorthand forms (bools, numbers, mappings) are accepted here too
        if not isinstance(self.urls, UrlsConfig):
            object.__setattr__(self, "urls", normalize_urls(self.urls))
        if not isinstance(self.strip_prefix, StripPrefixConfig):
            object.__setattr__(self, "strip_prefix", normalize_strip_prefix(self.strip_prefix))
        if not isinstance(self.truncate, TruncateConfig):
            object.__setattr__(self, "truncate", normalize_truncate(self.truncate))

        # False is accepted as the documented "disabled" value
        if self.hashtag is False:
            object.__setattr__(self, "hashtag", None)
        if self.mention is False:
            object.__setattr__(self, "mention", None)

        if self.hashtag is not None and self.hashtag not in HASHTAG_SERVICES:
            raise ConfigError(
                "hashtag",
                f"{self.hashtag!r} is not one of {', '.join(sorted(HASHTAG_SERVICES))}",
            )
        if self.mention is not None and self.mention not in MENTION_SERVICES:
            raise ConfigError(
                "mention",
                f"{self.mention!r} is not one of {', '.join(sorted(MENTION_SERVICES))}",
            )
        if self.truncate.location not in TRUNCATE_LOCATIONS:
            raise ConfigError(
                "truncate",
                f"location {self.truncate.location!r} is not one of end, middle, smart",
            )
        if self.truncate.length is not None and self.truncate.length < 0:
            raise ConfigError("truncate", f"length must not be negative, got {self.truncate.length}")

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> LinkerConfig:
        """Create LinkerConfig from a dictionary of options.

        Accepts the snake_case field names as well as the camelCase option
        names (``newWindow``, ``stripPrefix``, ...). Nested options may be given
        in their bool / number / mapping shorthand forms. Unknown keys are
        ignored.

        Args:
            config_dict: Dictionary with option values.

        Returns:
            New LinkerConfig instance.

        Raises:
            ConfigError: If a service name or truncate location is unknown.

        Example:
            >>> config = LinkerConfig.from_dict({
            ...     "urls": {"tldMatches": False},
            ...     "truncate": 25,
            ... })
            >>> config.urls.tld_matches, config.truncate.length
            (False, 25)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        options: dict[str, Any] = {}
        for key, value in config_dict.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in valid_fields:
                logger.debug("Ignoring unknown option %r", key)
                continue
            options[name] = value

        if "urls" in options:
            options["urls"] = normalize_urls(options["urls"])
        if "strip_prefix" in options:
            options["strip_prefix"] = normalize_strip_prefix(options["strip_prefix"])
        if "truncate" in options:
            options["truncate"] = normalize_truncate(options["truncate"])
        if "class_name" in options:
            options["class_name"] = options["class_name"] or ""
        return cls(**options)


_OPTION_ALIASES: dict[str, str] = {
    "stripPrefix": "strip_prefix",
    "stripTrailingSlash": "strip_trailing_slash",
    "decodePercentEncoding": "decode_percent_encoding",
    "newWindow": "new_window",
    "className": "class_name",
}


def _flag(mapping: Mapping[str, Any], *keys: str) -> bool:
    """Read a sub-flag by any of its spellings; non-bools fall back to True."""
    for key in keys:
        value = mapping.get(key)
        if isinstance(value, bool):
            return value
    return True


def normalize_urls(urls: bool | Mapping[str, Any] | UrlsConfig | None) -> UrlsConfig:
    """Normalise the ``urls`` option.

    Examples:
        >>> normalize_urls(False)
        UrlsConfig(scheme_matches=False, www_matches=False, tld_matches=False)
        >>> normalize_urls({"wwwMatches": False}).www_matches
        False
    """
    if isinstance(urls, UrlsConfig):
        return urls
    if isinstance(urls, bool):
        return UrlsConfig(urls, urls, urls)
    if urls is None:
        return UrlsConfig()
    return UrlsConfig(
        scheme_matches=_flag(urls, "schemeMatches", "scheme_matches"),
        www_matches=_flag(urls, "wwwMatches", "www_matches"),
        tld_matches=_flag(urls, "tldMatches", "tld_matches"),
    )


def normalize_strip_prefix(
    strip_prefix: bool | Mapping[str, Any] | StripPrefixConfig | None,
) -> StripPrefixConfig:
    """Normalise the ``strip_prefix`` option."""
    if isinstance(strip_prefix, StripPrefixConfig):
        return strip_prefix
    if isinstance(strip_prefix, bool):
        return StripPrefixConfig(strip_prefix, strip_prefix)
    if strip_prefix is None:
        return StripPrefixConfig()
    return StripPrefixConfig(
        scheme=_flag(strip_prefix, "scheme"),
        www=_flag(strip_prefix, "www"),
    )


def normalize_truncate(
    truncate: int | Mapping[str, Any] | TruncateConfig | None,
) -> TruncateConfig:
    """Normalise the ``truncate`` option.

    A bare number truncates at the end; a mapping may omit either key.
    0 and infinity disable truncation.

    Examples:
        >>> normalize_truncate(10)
        TruncateConfig(length=10, location='end')
        >>> normalize_truncate(float("inf"))
        TruncateConfig(length=None, location='end')
        >>> normalize_truncate({"location": "smart"})
        TruncateConfig(length=None, location='smart')
    """
    if isinstance(truncate, TruncateConfig):
        return truncate
    if truncate is None:
        return TruncateConfig()
    if isinstance(truncate, bool):
        raise ConfigError("truncate", "expected a length or a mapping, got a bool")
    if isinstance(truncate, (int, float)):
        return TruncateConfig(length=_truncate_length(truncate), location="end")
    if not isinstance(truncate, Mapping):
        raise ConfigError(
            "truncate", f"expected a length or a mapping, got {type(truncate).__name__}"
        )
    return TruncateConfig(
        length=_truncate_length(truncate.get("length")),
        location=truncate.get("location") or "end",
    )


def _truncate_length(length: Any) -> int | None:
    """Coerce a truncate length; None, 0 and infinity mean no truncation."""
    if length is None:
        return None
    if isinstance(length, bool) or not isinstance(length, (int, float)):
        raise ConfigError("truncate", f"length must be a number, got {length!r}")
    if length == math.inf or length == 0:
        return None
    if not math.isfinite(length):
        raise ConfigError("truncate", f"length must be a number, got {length!r}")
    # Negative lengths are rejected by LinkerConfig
    return int(length)


__all__ = [
    "HASHTAG_SERVICES",
    "MENTION_SERVICES",
    "LinkerConfig",
    "StripPrefixConfig",
    "TruncateConfig",
    "TruncateLocation",
    "UrlsConfig",
    "normalize_strip_prefix",
    "normalize_truncate",
    "normalize_urls",
]
