"""Liveness check: fetch a page and verify it still carries an expected marker.

This is a verifier with exactly one implicit rule; the fetched text is the
input. Transport failures are returned as the single reason, unchanged, so a
caller can only tell "could not check" from "checked and failed" by the text.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .config import (
    DEFAULT_LIVENESS_MARKER,
    DEFAULT_LIVENESS_URL,
    DEFAULT_MISSING_REASON,
    DEFAULT_TIMEOUT_SECONDS,
    LivenessConfig,
)
from .models import VerificationResult
from .probes import FetchError, Fetcher, resolve_fetch

logger = logging.getLogger(__name__)

TIMEOUT_REASON = "timeout"


def process_fetch_content(
    text: str,
    marker: str = DEFAULT_LIVENESS_MARKER,
    *,
    missing_reason: str = DEFAULT_MISSING_REASON,
) -> VerificationResult:
    if marker in text:
        return []
    return [missing_reason]


def process_fetch_error(error: FetchError | str) -> str:
    return str(error)


async def check_liveness(
    fetcher: Fetcher,
    *,
    url: str = DEFAULT_LIVENESS_URL,
    marker: str = DEFAULT_LIVENESS_MARKER,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    missing_reason: str = DEFAULT_MISSING_REASON,
) -> VerificationResult:
    fetch_text = resolve_fetch(fetcher)
    try:
        text = await asyncio.wait_for(fetch_text(url), timeout=timeout_seconds)
    except asyncio.TimeoutError:
        logger.warning("Fetching %s exceeded %.1fs", url, timeout_seconds)
        return [TIMEOUT_REASON]
    except FetchError as exc:
        logger.info("Fetching %s failed: %s", url, exc)
        return [process_fetch_error(exc)]

    return process_fetch_content(text, marker, missing_reason=missing_reason)


class LivenessCheck:
    def __init__(self, fetcher: Fetcher, config: Optional[LivenessConfig] = None):
        self.fetcher = fetcher
        self.config = config or LivenessConfig()

    async def run(self) -> VerificationResult:
        return await check_liveness(
            self.fetcher,
            url=self.config.url,
            marker=self.config.marker,
            timeout_seconds=self.config.timeout_seconds,
            missing_reason=self.config.missing_reason,
        )
