from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Union

from .models import RuleOutcome


class Rule(ABC):
    rule_id: str
    rule_title: str = ""
    # Reason reported when the rule fails; empty when it varies with the input.
    failure_reason: str = ""

    def __init__(self):
        if not getattr(self, "rule_id", None):
            raise ValueError("Rule must define rule_id")

    @abstractmethod
    def evaluate(self, value: Any) -> RuleOutcome:  # pragma: no cover
        raise NotImplementedError


class FunctionRule(Rule):
    """Adapts a plain ``fn(value) -> RuleOutcome`` callable to the Rule interface."""

    def __init__(self, fn: Callable[[Any], RuleOutcome], *, rule_id: str | None = None):
        self.rule_id = rule_id or getattr(fn, "__name__", "") or repr(fn)
        self.rule_title = (getattr(fn, "__doc__", None) or "").strip()
        self._fn = fn
        super().__init__()

    def evaluate(self, value: Any) -> RuleOutcome:
        return self._fn(value)

    def __repr__(self) -> str:
        return f"FunctionRule({self.rule_id!r})"


RuleLike = Union[Rule, Callable[[Any], RuleOutcome]]


def as_rule(rule: RuleLike) -> Rule:
    if isinstance(rule, Rule):
        return rule
    if callable(rule):
        return FunctionRule(rule)
    raise TypeError(f"Expected a Rule or callable, got {type(rule).__name__}")
