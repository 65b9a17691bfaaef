"""Pluggable verification engine.

This package intentionally contains only domain logic:
- Rules are pure checks over a single input value.
- Clock and network access are injected through probes.
- The real network transport lives in `connectors.http`.
"""

from .config import LivenessConfig, VerifierConfig
from .engine import Verifier, verify_input
from .factory import VerifierFactory
from .liveness import LivenessCheck, check_liveness
from .models import RuleOutcome, Verdict, VerificationResult, Weekday
from .probes import FetchError, FixedTimeProbe, StaticFetcher, SystemTimeProbe
from .reporter import ConsoleReporter, LoggingReporter, MemoryReporter
from .rule import FunctionRule, Rule

# Import built-in rules so they self-register with the global registry.
from . import rules as _builtin_rules  # noqa: F401
