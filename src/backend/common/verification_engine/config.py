from __future__ import annotations

from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from .models import WEEKEND, Verdict, Weekday

DEFAULT_LIVENESS_URL = "http://example.com"
DEFAULT_LIVENESS_MARKER = "illustrative"
DEFAULT_MISSING_REASON = "missing text"
DEFAULT_TIMEOUT_SECONDS = 10.0


class VerifierConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Days on which verification is refused outright; no rule runs and nothing is reported.
    blocked_days: FrozenSet[Weekday] = Field(default_factory=lambda: WEEKEND)
    blocked_reason: str = Field(default="It's the weekend!", min_length=1)
    passed_message: str = Verdict.PASSED.value
    failed_message: str = Verdict.FAILED.value

    @field_serializer("blocked_days")
    def _dump_blocked_days(self, days: FrozenSet[Weekday]) -> list[str]:
        order = list(Weekday)
        return [day.value for day in sorted(days, key=order.index)]


class LivenessConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = DEFAULT_LIVENESS_URL
    marker: str = Field(default=DEFAULT_LIVENESS_MARKER, min_length=1)
    missing_reason: str = Field(default=DEFAULT_MISSING_REASON, min_length=1)
    # Upper bound for the whole fetch; a stalled transport is reported as "timeout".
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
