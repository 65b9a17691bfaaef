import io
import logging
from datetime import date

import pytest

from common.verification_engine.models import Verdict, Weekday
from common.verification_engine.probes import (
    FixedTimeProbe,
    SystemTimeProbe,
    get_time_probe,
)
from common.verification_engine.reporter import (
    CallbackReporter,
    ConsoleReporter,
    LoggingReporter,
    MemoryReporter,
    as_reporter,
    get_reporter,
)


def test_weekday_from_date():
    assert Weekday.from_date(date(2025, 12, 27)) == Weekday.SAT
    assert Weekday.from_date(date(2025, 12, 29)) == Weekday.MON


@pytest.mark.parametrize("text, expected", [("sun", Weekday.SUN), ("Saturday", Weekday.SAT), (" wed ", Weekday.WED)])
def test_weekday_parse(text, expected):
    assert Weekday.parse(text) == expected


def test_weekday_parse_rejects_unknown():
    with pytest.raises(ValueError, match="Unknown weekday"):
        Weekday.parse("someday")


def test_verdict_for_failures():
    assert Verdict.for_failures([]) == Verdict.PASSED
    assert Verdict.for_failures(["x"]) == Verdict.FAILED


def test_system_time_probe_returns_a_weekday():
    assert isinstance(SystemTimeProbe().current_weekday(), Weekday)


def test_get_time_probe_resolves_names():
    assert isinstance(get_time_probe("system"), SystemTimeProbe)
    assert isinstance(get_time_probe(""), SystemTimeProbe)
    assert get_time_probe("fri") == FixedTimeProbe(Weekday.FRI)
    with pytest.raises(ValueError, match="Unknown time probe"):
        get_time_probe("tomorrow")


def test_console_reporter_prints_message():
    stream = io.StringIO()

    ConsoleReporter(stream).record("PASSED")

    assert stream.getvalue() == "PASSED\n"


def test_logging_reporter_logs_at_info(caplog):
    with caplog.at_level(logging.INFO, logger="verification_engine.verdict"):
        LoggingReporter().record("FAILED")

    assert caplog.records[-1].getMessage() == "FAILED"


def test_memory_reporter_keeps_last_message():
    reporter = MemoryReporter()
    assert reporter.last == ""

    reporter.record("PASSED")
    reporter.record("FAILED")

    assert reporter.last == "FAILED"
    assert reporter.messages == ["PASSED", "FAILED"]


def test_as_reporter_wraps_callables_and_keeps_reporters():
    reporter = MemoryReporter()
    written = []

    assert as_reporter(reporter) is reporter
    assert as_reporter(None) is None
    wrapped = as_reporter(written.append)
    assert isinstance(wrapped, CallbackReporter)
    wrapped.record("PASSED")
    assert written == ["PASSED"]
    with pytest.raises(TypeError):
        as_reporter(42)


def test_get_reporter_resolves_names():
    assert isinstance(get_reporter("console"), ConsoleReporter)
    assert isinstance(get_reporter("logging"), LoggingReporter)
    assert isinstance(get_reporter("memory"), MemoryReporter)
    with pytest.raises(ValueError):
        get_reporter("carrier-pigeon")


@pytest.mark.parametrize("text", ["sunny", "thursdayX", "mo", ""])
def test_weekday_parse_rejects_partial_and_padded_names(text):
    with pytest.raises(ValueError, match="Unknown weekday"):
        Weekday.parse(text)
