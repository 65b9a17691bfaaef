from __future__ import annotations

from ..models import RuleOutcome
from ..registry import register_rule
from ..rule import Rule


@register_rule
class PW_UPPER_CASE(Rule):
    rule_id = "PW-UPPER-CASE"
    rule_title = "Password contains at least one upper case character"
    failure_reason = "at least one upper case needed"

    def evaluate(self, value: str) -> RuleOutcome:
        if value.lower() != value:
            return RuleOutcome.ok()
        return RuleOutcome.fail(self.failure_reason)
