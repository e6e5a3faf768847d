"""Match rules for autolinker.

One rule per MatchKind, each scanning a plain-text fragment for its own
grammar:

- UrlRule: scheme, www and bare-domain URLs
- EmailRule: email addresses
- PhoneRule: phone numbers
- HashtagRule: ``#tags``
- MentionRule: ``@handles``

Rules are selected through the fixed RULE_FACTORIES table rather than by
subclassing. Any object satisfying the MatchRule protocol can be passed to
the linker in their place.

Thread Safety:
Rules are immutable after construction. Safe to share.

Example:
    >>> from autolinker.config import LinkerConfig
    >>> [rule.kind.value for rule in build_rules(LinkerConfig())]
    ['hashtag', 'email', 'phone', 'url']

"""

from __future__ import annotations

from collections.abc import Callable
from types import MappingProxyType

from autolinker.config import LinkerConfig
from autolinker.matches import MatchKind
from autolinker.rules.email import EmailRule
from autolinker.rules.hashtag import HashtagRule
from autolinker.rules.mention import MentionRule
from autolinker.rules.phone import PhoneRule
from autolinker.rules.protocol import MatchRule
from autolinker.rules.url import UrlRule

# Evaluation order; reconciliation makes the result independent of it
RULE_FACTORIES: MappingProxyType[MatchKind, Callable[[LinkerConfig], MatchRule | None]] = (
    MappingProxyType(
        {
            MatchKind.HASHTAG: lambda config: HashtagRule(config.hashtag),
            MatchKind.EMAIL: lambda config: EmailRule(),
            MatchKind.PHONE: lambda config: PhoneRule(),
            MatchKind.MENTION: lambda config: (
                MentionRule(config.mention) if config.mention is not None else None
            ),
            MatchKind.URL: lambda config: UrlRule(),
        }
    )
)


def build_rules(config: LinkerConfig) -> tuple[MatchRule, ...]:
    """Instantiate the rules a configuration needs.

    Every kind is detected even when its linking is disabled, so that
    overlap resolution sees the whole picture; the reconciler drops disabled
    kinds afterwards. Mentions are the exception: without a service there
    is no handle grammar to apply.

    Args:
        config: Linker configuration

    Returns:
        Rules in evaluation order.
    """
    rules: list[MatchRule] = []
    for factory in RULE_FACTORIES.values():
        rule = factory(config)
        if rule is not None:
            rules.append(rule)
    return tuple(rules)


__all__ = [
    "RULE_FACTORIES",
    "EmailRule",
    "HashtagRule",
    "MatchRule",
    "MentionRule",
    "PhoneRule",
    "UrlRule",
    "build_rules",
]
