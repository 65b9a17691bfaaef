from __future__ import annotations

from datetime import date
from enum import Enum
from typing import List, Optional, Sequence

from pydantic import BaseModel, model_validator


class Weekday(str, Enum):
    MON = "MON"
    TUE = "TUE"
    WED = "WED"
    THU = "THU"
    FRI = "FRI"
    SAT = "SAT"
    SUN = "SUN"

    @classmethod
    def from_date(cls, value: date) -> "Weekday":
        # date.weekday(): Monday == 0
        return list(cls)[value.weekday()]

    @classmethod
    def parse(cls, text: str) -> "Weekday":
        key = (text or "").strip().upper()
        for day, name in zip(cls, _DAY_NAMES):
            if key in (day.value, name):
                return day
        expected = ", ".join(d.value for d in cls)
        raise ValueError(f"Unknown weekday '{text}' (expected one of {expected} or a full day name).")


_DAY_NAMES = ("MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY", "SUNDAY")

WEEKEND: frozenset[Weekday] = frozenset({Weekday.SAT, Weekday.SUN})


class Verdict(str, Enum):
    PASSED = "PASSED"
    FAILED = "FAILED"

    @classmethod
    def for_failures(cls, failures: Sequence[str]) -> "Verdict":
        return cls.FAILED if failures else cls.PASSED


class RuleOutcome(BaseModel):
    passed: bool
    reason: Optional[str] = None

    @model_validator(mode="after")
    def _check_reason(self) -> "RuleOutcome":
        if self.passed:
            if self.reason is not None:
                raise ValueError("A passing outcome carries no reason")
        elif not (self.reason or "").strip():
            raise ValueError("A failing outcome requires a non-empty reason")
        return self

    @classmethod
    def ok(cls) -> "RuleOutcome":
        return cls(passed=True)

    @classmethod
    def fail(cls, reason: str) -> "RuleOutcome":
        return cls(passed=False, reason=reason)


# Ordered failure reasons; an empty list means the input verified.
VerificationResult = List[str]
