"""Ordered registry of token classification rules."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Iterable

from .ruleset import RuleSet
from .types import TokenCategory

TokenPredicate = Callable[[str, RuleSet], bool]


@dataclass(slots=True)
class TokenRule:
    category: TokenCategory
    matches: TokenPredicate
    description: str = ""


class TokenRuleRegistry:
    """Rules tried in registration order.

    ``match`` returns the category of the first rule whose predicate accepts the
    token, or the given default when none does.
    """

    def __init__(self) -> None:
        self._rules: list[TokenRule] = []

    def register(
        self,
        category: TokenCategory,
        predicate: TokenPredicate,
        *,
        description: str = "",
    ) -> TokenPredicate:
        self._rules.append(TokenRule(category, predicate, description))
        return predicate

    def rule(
        self,
        category: TokenCategory,
        *,
        description: str = "",
    ) -> Callable[[TokenPredicate], TokenPredicate]:
        """Decorator variant for registering token rules."""

        def decorator(func: TokenPredicate) -> TokenPredicate:
            return self.register(category, func, description=description)

        return decorator

    def iter_rules(self) -> Iterable[TokenRule]:
        return tuple(self._rules)

    def match(self, token: str, rules: RuleSet, default: TokenCategory) -> TokenCategory:
        for rule in self._rules:
            if rule.matches(token, rules):
                return rule.category
        return default


TOKEN_RULES = TokenRuleRegistry()


__all__ = ["TOKEN_RULES", "TokenPredicate", "TokenRule", "TokenRuleRegistry"]
