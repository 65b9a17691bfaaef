from __future__ import annotations

from typing import Iterable, Optional

from .config import VerifierConfig
from .engine import Verifier
from .probes import TimeProbe
from .registry import RuleRegistry, registry as default_registry
from .reporter import ReporterLike
from .rule import RuleLike


class VerifierFactory:
    """Builds verifiers that all observe the same time probe instance."""

    def __init__(
        self,
        time_probe: TimeProbe,
        *,
        config: Optional[VerifierConfig] = None,
        registry: Optional[RuleRegistry] = None,
    ):
        self.time_probe = time_probe
        self.config = config or VerifierConfig()
        self._registry = registry or default_registry

    def create(self, rules: Iterable[RuleLike], *, reporter: Optional[ReporterLike] = None) -> Verifier:
        return Verifier(rules, time_probe=self.time_probe, reporter=reporter, config=self.config)

    def create_from_registry(
        self,
        rule_ids: Optional[Iterable[str]] = None,
        *,
        reporter: Optional[ReporterLike] = None,
    ) -> Verifier:
        return self.create(self._registry.create(rule_ids), reporter=reporter)
