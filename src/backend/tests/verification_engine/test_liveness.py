import asyncio

import pytest

from common.verification_engine.config import LivenessConfig
from common.verification_engine.liveness import (
    LivenessCheck,
    check_liveness,
    process_fetch_content,
    process_fetch_error,
)
from common.verification_engine.probes import FetchError, StaticFetcher


def test_process_fetch_content_with_marker_is_ok():
    assert process_fetch_content("illustrative") == []


def test_process_fetch_content_without_marker_fails():
    assert process_fetch_content("hello") == ["missing text"]


def test_process_fetch_error_passes_text_through():
    assert process_fetch_error("error text") == "error text"
    assert process_fetch_error(FetchError("connection refused")) == "connection refused"


@pytest.mark.parametrize(
    "fetcher, expected",
    [
        (StaticFetcher(text="This domain is for use in illustrative examples"), []),
        (StaticFetcher(text="hello"), ["missing text"]),
        (StaticFetcher(error="timeout"), ["timeout"]),
    ],
)
def test_check_liveness_with_stub_fetcher(fetcher, expected):
    assert asyncio.run(check_liveness(fetcher)) == expected


def test_check_liveness_accepts_async_callable():
    requested = []

    async def _fetch(url):
        requested.append(url)
        return "illustrative text"

    result = asyncio.run(check_liveness(_fetch))

    assert result == []
    assert requested == ["http://example.com"]


def test_check_liveness_with_bad_content_from_callable():
    async def _fetch(url):
        return "hello"

    assert asyncio.run(check_liveness(_fetch)) == ["missing text"]


def test_check_liveness_bounds_a_stalled_fetch():
    async def _stalled(url):
        await asyncio.sleep(10)
        return "illustrative"

    result = asyncio.run(check_liveness(_stalled, timeout_seconds=0.01))

    assert result == ["timeout"]


def test_liveness_check_uses_config():
    config = LivenessConfig(url="http://status.internal", marker="ok", missing_reason="text missing")
    requested = []

    async def _fetch(url):
        requested.append(url)
        return "not good"

    result = asyncio.run(LivenessCheck(_fetch, config).run())

    assert result == ["text missing"]
    assert requested == ["http://status.internal"]


def test_liveness_config_rejects_non_positive_timeout():
    with pytest.raises(ValueError):
        LivenessConfig(timeout_seconds=0)


def test_check_liveness_rejects_non_fetcher():
    with pytest.raises(TypeError):
        asyncio.run(check_liveness(object()))
