from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Union

from .models import RuleOutcome
from .rule import FunctionRule, Rule

RuleSource = Union[type, Callable[[Any], RuleOutcome]]


class RuleRegistry:
    """Named rules kept in registration order, which is also their default run order.

    Entries are either ``Rule`` subclasses or plain rule functions; each
    ``create`` call builds fresh instances so verifiers never share rule objects.
    """

    def __init__(self):
        self._sources: Dict[str, RuleSource] = {}

    def register(self, source: RuleSource, *, rule_id: Optional[str] = None) -> None:
        if isinstance(source, type):
            if not issubclass(source, Rule):
                raise TypeError(f"{source.__name__} is not a Rule subclass")
            if rule_id is not None:
                raise ValueError("rule_id is taken from the Rule class itself")
            rule_id = getattr(source, "rule_id", None)
        elif callable(source):
            rule_id = rule_id or getattr(source, "__name__", None)
        else:
            raise TypeError(f"Expected a Rule subclass or callable, got {type(source).__name__}")

        if not rule_id:
            raise ValueError("Rule missing rule_id")
        if rule_id in self._sources:
            raise ValueError(f"Duplicate rule_id registered: {rule_id}")
        self._sources[rule_id] = source

    def build(self, rule_id: str) -> Rule:
        try:
            source = self._sources[rule_id]
        except KeyError:
            raise KeyError(f"Unknown rule_id: {rule_id}") from None
        if isinstance(source, type):
            return source()
        return FunctionRule(source, rule_id=rule_id)

    def create(self, rule_ids: Optional[Iterable[str]] = None) -> list[Rule]:
        """Build rules in the order given, or in registration order when omitted."""
        return [self.build(rule_id) for rule_id in (self.ids() if rule_ids is None else rule_ids)]

    def source(self, rule_id: str) -> RuleSource:
        return self._sources[rule_id]

    def ids(self) -> list[str]:
        return list(self._sources)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._sources

    def __iter__(self) -> Iterator[str]:
        return iter(self.ids())


registry = RuleRegistry()


def register_rule(source: RuleSource) -> RuleSource:
    registry.register(source)
    return source
