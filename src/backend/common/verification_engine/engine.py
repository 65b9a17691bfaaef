from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from .config import VerifierConfig
from .models import VerificationResult
from .probes import TimeProbe
from .reporter import Reporter, ReporterLike, as_reporter
from .rule import Rule, RuleLike, as_rule

logger = logging.getLogger(__name__)


def _collect_failures(rules: Iterable[Rule], value: Any) -> VerificationResult:
    failures: VerificationResult = []
    for rule in rules:
        outcome = rule.evaluate(value)
        if not outcome.passed:
            failures.append(outcome.reason)
    return failures


def _report(reporter: Optional[Reporter], failures: VerificationResult, config: VerifierConfig) -> None:
    if reporter is None:
        return
    message = config.failed_message if failures else config.passed_message
    logger.debug("Verification %s with %d failure(s)", message, len(failures))
    try:
        reporter.record(message)
    except Exception:
        # A broken sink must not turn into a verification failure.
        logger.exception("Reporter %r failed to record %r", reporter, message)


def verify_input(
    value: Any,
    rules: Iterable[RuleLike],
    reporter: Optional[ReporterLike] = None,
    *,
    config: Optional[VerifierConfig] = None,
) -> VerificationResult:
    """Run every rule against ``value`` and report the aggregate verdict.

    No precondition is consulted; see ``Verifier`` for the probe-aware variant.
    """
    cfg = config or VerifierConfig()
    failures = _collect_failures([as_rule(r) for r in rules], value)
    _report(as_reporter(reporter), failures, cfg)
    return failures


class Verifier:
    """
    Ordered rule list plus optional environment probe and verdict reporter.

    Verification stages:
    1. Precondition - if a time probe is set and reports a blocked day, return the
       blocked reason alone. Rules are skipped and nothing is reported.
    2. Rule evaluation - every rule runs in order; failing reasons are collected
       in the same order.
    3. Reporting - the reporter receives only the aggregate verdict.

    Instances are not safe for concurrent use; build one per caller.
    """

    def __init__(
        self,
        rules: Optional[Iterable[RuleLike]] = None,
        *,
        time_probe: Optional[TimeProbe] = None,
        reporter: Optional[ReporterLike] = None,
        config: Optional[VerifierConfig] = None,
    ):
        self._rules: List[Rule] = [as_rule(r) for r in rules] if rules is not None else []
        self.time_probe = time_probe
        self.reporter = as_reporter(reporter)
        self.config = config or VerifierConfig()

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def add_rule(self, rule: RuleLike) -> None:
        self._rules.append(as_rule(rule))

    def is_blocked(self) -> bool:
        if self.time_probe is None:
            return False
        return self.time_probe.current_weekday() in self.config.blocked_days

    def verify(self, value: Any) -> VerificationResult:
        if self.is_blocked():
            logger.debug("Verification refused: %s", self.config.blocked_reason)
            return [self.config.blocked_reason]

        failures = _collect_failures(self._rules, value)
        _report(self.reporter, failures, self.config)
        return failures
