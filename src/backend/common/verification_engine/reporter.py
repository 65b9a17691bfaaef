from __future__ import annotations

import logging
import sys
from typing import Callable, List, Optional, Protocol, TextIO, Union


class Reporter(Protocol):
    def record(self, message: str) -> None:
        """Receive the aggregate verdict of a verification."""
        ...


class ConsoleReporter:
    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def record(self, message: str) -> None:
        print(message, file=self._stream or sys.stdout)


class LoggingReporter:
    def __init__(self, logger: Optional[logging.Logger] = None, *, level: int = logging.INFO) -> None:
        self._logger = logger or logging.getLogger("verification_engine.verdict")
        self._level = level

    def record(self, message: str) -> None:
        self._logger.log(self._level, message)


class MemoryReporter:
    """Keeps every verdict it receives; ``last`` is the most recent one."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    @property
    def last(self) -> str:
        return self.messages[-1] if self.messages else ""

    def record(self, message: str) -> None:
        self.messages.append(message)


class CallbackReporter:
    def __init__(self, callback: Callable[[str], None]) -> None:
        self._callback = callback

    def record(self, message: str) -> None:
        self._callback(message)


ReporterLike = Union[Reporter, Callable[[str], None]]


def as_reporter(reporter: Optional[ReporterLike]) -> Optional[Reporter]:
    if reporter is None:
        return None
    if callable(getattr(reporter, "record", None)):
        return reporter  # type: ignore[return-value]
    if callable(reporter):
        return CallbackReporter(reporter)
    raise TypeError(f"Expected a Reporter or callable, got {type(reporter).__name__}")


def get_reporter(name: str) -> Reporter:
    """Resolve a reporter implementation by name (console|logging|memory)."""
    kind = (name or "").strip().lower()
    if kind in ("console", ""):
        return ConsoleReporter()
    if kind == "logging":
        return LoggingReporter()
    if kind == "memory":
        return MemoryReporter()
    raise ValueError(f"Unknown reporter '{name}' (expected 'console', 'logging' or 'memory').")
