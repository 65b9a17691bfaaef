from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from common.verification_engine.config import (
    DEFAULT_LIVENESS_MARKER,
    DEFAULT_LIVENESS_URL,
    DEFAULT_TIMEOUT_SECONDS,
    LivenessConfig,
)


load_dotenv()

DEFAULT_USER_AGENT = "verification-engine/0.1"


@dataclass(frozen=True)
class HttpConfig:
    liveness_url: str
    liveness_marker: str
    timeout_seconds: float
    user_agent: str

    def liveness_config(self) -> LivenessConfig:
        return LivenessConfig(
            url=self.liveness_url,
            marker=self.liveness_marker,
            timeout_seconds=self.timeout_seconds,
        )


def get_http_config() -> HttpConfig:
    """
    Load HTTP connector configuration from environment variables.

    Reads (all optional):
      LIVENESS_URL, LIVENESS_MARKER, LIVENESS_TIMEOUT_SECONDS, HTTP_USER_AGENT
    """
    return HttpConfig(
        liveness_url=_env("LIVENESS_URL", DEFAULT_LIVENESS_URL),
        liveness_marker=_env("LIVENESS_MARKER", DEFAULT_LIVENESS_MARKER),
        timeout_seconds=_timeout_from_env("LIVENESS_TIMEOUT_SECONDS"),
        user_agent=_env("HTTP_USER_AGENT", DEFAULT_USER_AGENT),
    )


def _env(name: str, default: str) -> str:
    value = os.getenv(name, "").strip()
    return value or default


def _timeout_from_env(name: str) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value
