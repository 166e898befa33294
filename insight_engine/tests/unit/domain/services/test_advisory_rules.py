"""
Unit tests for the advisory rule cascade.
"""

from dataclasses import dataclass

import pytest

from insight_engine.domain.services.advisory_rules import AdvisoryRule, RuleCascade, sort_by_priority
from insight_engine.domain.value_objects import AdvisoryPriority


@dataclass(frozen=True)
class Item:
    label: str
    priority: AdvisoryPriority


def _rule(name: str, fires: bool, *items: Item) -> AdvisoryRule:
    return AdvisoryRule(name=name, when=lambda ctx: fires, build=lambda ctx: list(items))


class TestSortByPriority:
    def test_orders_by_weight_and_keeps_ties_in_order(self):
        items = [
            Item("a", AdvisoryPriority.LOW),
            Item("b", AdvisoryPriority.HIGH),
            Item("c", AdvisoryPriority.MEDIUM),
            Item("d", AdvisoryPriority.HIGH),
            Item("e", AdvisoryPriority.CRITICAL),
        ]

        assert [i.label for i in sort_by_priority(items)] == ["e", "b", "d", "c", "a"]


class TestRuleCascade:
    def test_only_firing_rules_contribute(self):
        cascade = RuleCascade(
            [
                _rule("first", True, Item("a", AdvisoryPriority.MEDIUM)),
                _rule("second", False, Item("b", AdvisoryPriority.CRITICAL)),
                _rule("third", True, Item("c", AdvisoryPriority.HIGH), Item("d", AdvisoryPriority.MEDIUM)),
            ]
        )

        result = cascade.evaluate(context=None)

        assert [i.label for i in result] == ["c", "a", "d"]

    def test_rule_can_be_evaluated_in_isolation(self):
        rule = AdvisoryRule(
            name="threshold",
            when=lambda score: score < 60,
            build=lambda score: [Item(f"low {score}", AdvisoryPriority.HIGH)],
        )

        assert rule.apply(40) == [Item("low 40", AdvisoryPriority.HIGH)]
        assert rule.apply(75) == []

    def test_duplicate_names_are_rejected(self):
        with pytest.raises(ValueError):
            RuleCascade([_rule("same", True), _rule("same", False)])

    def test_without_removes_named_rules(self):
        cascade = RuleCascade(
            [
                _rule("keep", True, Item("a", AdvisoryPriority.LOW)),
                _rule("drop", True, Item("b", AdvisoryPriority.HIGH)),
            ]
        )

        trimmed = cascade.without("drop")

        assert [r.name for r in trimmed.rules] == ["keep"]
        assert [i.label for i in trimmed.evaluate(None)] == ["a"]
        assert len(cascade.rules) == 2

    def test_rule_lookup(self):
        cascade = RuleCascade([_rule("keep", True)])

        assert cascade.rule("keep").name == "keep"
        with pytest.raises(KeyError):
            cascade.rule("missing")
