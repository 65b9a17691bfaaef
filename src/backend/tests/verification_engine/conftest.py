import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import common...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest

from common.verification_engine.engine import Verifier
from common.verification_engine.models import RuleOutcome, Weekday
from common.verification_engine.probes import FixedTimeProbe
from common.verification_engine.reporter import MemoryReporter


def _failing(reason: str = "fake reason"):
    def _rule(value):
        return RuleOutcome.fail(reason)

    return _rule


def _passing(value):
    return RuleOutcome.ok()


@pytest.fixture
def failing_rule():
    return _failing()


@pytest.fixture
def make_failing_rule():
    return _failing


@pytest.fixture
def passing_rule():
    return _passing


@pytest.fixture
def weekday_probe() -> FixedTimeProbe:
    return FixedTimeProbe(Weekday.WED)


@pytest.fixture
def weekend_probe() -> FixedTimeProbe:
    return FixedTimeProbe(Weekday.SUN)


@pytest.fixture
def memory_reporter() -> MemoryReporter:
    return MemoryReporter()


@pytest.fixture
def make_verifier(weekday_probe, memory_reporter):
    def _make(*, rules=(), time_probe=None, reporter=None) -> Verifier:
        return Verifier(
            list(rules),
            time_probe=time_probe or weekday_probe,
            reporter=reporter or memory_reporter,
        )

    return _make
