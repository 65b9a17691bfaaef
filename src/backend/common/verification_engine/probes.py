"""Environment probes injected into verifiers.

A probe hides where environment facts come from (the local clock, a remote
page) so verifiers can be exercised with deterministic stand-ins.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Awaitable, Callable, Optional, Protocol, Union

from .models import Weekday


class TimeProbe(Protocol):
    def current_weekday(self) -> Weekday:
        """Return the day of week as seen by this probe."""
        ...


class SystemTimeProbe:
    def current_weekday(self) -> Weekday:
        return Weekday.from_date(datetime.now().astimezone())


@dataclass(frozen=True)
class FixedTimeProbe:
    day: Weekday

    def current_weekday(self) -> Weekday:
        return self.day


def get_time_probe(name: str) -> TimeProbe:
    """Resolve a time probe by name (system|<weekday>)."""
    source = (name or "").strip().lower()
    if source in ("system", ""):
        return SystemTimeProbe()
    try:
        return FixedTimeProbe(Weekday.parse(source))
    except ValueError:
        raise ValueError(f"Unknown time probe '{name}' (expected 'system' or a weekday).") from None


class FetchError(RuntimeError):
    """Transport failure while fetching remote text.

    ``str(error)`` is the transport description and is reported unchanged.
    """

    def __init__(self, message: str, *, status: int = 0, body: str | None = None):
        super().__init__(message)
        self.status = status
        self.body = body


class FetchProbe(Protocol):
    async def fetch_text(self, url: str) -> str:
        """Return the body of ``url`` as text or raise ``FetchError``."""
        ...


FetchCallable = Callable[[str], Awaitable[str]]
Fetcher = Union[FetchProbe, FetchCallable]


@dataclass(frozen=True)
class StaticFetcher:
    """Deterministic fetcher returning fixed text or failing with a fixed error."""

    text: str = ""
    error: Optional[str] = None

    async def fetch_text(self, url: str) -> str:
        if self.error is not None:
            raise FetchError(self.error)
        return self.text


def resolve_fetch(fetcher: Fetcher) -> FetchCallable:
    fetch_text = getattr(fetcher, "fetch_text", None)
    if fetch_text is not None:
        return fetch_text
    if callable(fetcher):
        return fetcher
    raise TypeError(f"Expected a fetch probe or async callable, got {type(fetcher).__name__}")
