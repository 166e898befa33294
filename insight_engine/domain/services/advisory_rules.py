"""
Advisory rule cascade.

Suggestions and recommendations are produced by an ordered list of
rules. Each rule pairs a predicate over an analysis context with a
builder that emits zero or more advisory items; the cascade evaluates
the rules in sequence and ranks the combined output by priority.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from insight_engine.domain.value_objects.advisory import AdvisoryPriority


class Prioritized(Protocol):
    priority: AdvisoryPriority


ContextT = TypeVar("ContextT")
ItemT = TypeVar("ItemT", bound=Prioritized)


@dataclass(frozen=True)
class AdvisoryRule(Generic[ContextT, ItemT]):
    """A named ``when -> build`` pair."""

    name: str
    when: Callable[[ContextT], bool]
    build: Callable[[ContextT], Iterable[ItemT]]

    def apply(self, context: ContextT) -> list[ItemT]:
        if not self.when(context):
            return []
        return list(self.build(context))


def sort_by_priority(items: Iterable[ItemT]) -> list[ItemT]:
    """Order items by descending priority weight, keeping generation order within a priority."""
    return sorted(items, key=lambda item: item.priority.weight, reverse=True)


class RuleCascade(Generic[ContextT, ItemT]):
    """Evaluates rules in a fixed order and ranks what they produce."""

    def __init__(self, rules: Sequence[AdvisoryRule[ContextT, ItemT]]):
        names = [rule.name for rule in rules]
        if len(names) != len(set(names)):
            raise ValueError("Rule names must be unique within a cascade")
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[AdvisoryRule[ContextT, ItemT], ...]:
        return self._rules

    def rule(self, name: str) -> AdvisoryRule[ContextT, ItemT]:
        for rule in self._rules:
            if rule.name == name:
                return rule
        raise KeyError(name)

    def without(self, *names: str) -> "RuleCascade[ContextT, ItemT]":
        """Copy of the cascade with the named rules removed."""
        return RuleCascade([rule for rule in self._rules if rule.name not in names])

    def evaluate(self, context: ContextT) -> list[ItemT]:
        items: list[ItemT] = []
        for rule in self._rules:
            items.extend(rule.apply(context))
        return sort_by_priority(items)
