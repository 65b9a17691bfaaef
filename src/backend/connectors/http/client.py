from __future__ import annotations

import asyncio
import codecs
import socket
import time
from http.client import HTTPException
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from common.verification_engine.probes import FetchError

from .config import DEFAULT_USER_AGENT, HttpConfig

CHUNK_SIZE = 8192


def _resolve_charset(charset: str | None) -> str:
    if not charset:
        return "utf-8"
    try:
        return codecs.lookup(charset).name
    except LookupError:
        return "utf-8"


def fetch_text_sync(url: str, *, timeout_seconds: float, user_agent: str = DEFAULT_USER_AGENT) -> str:
    """
    Perform a plain GET and return the decoded body.

    Single attempt, no retry; every transport failure becomes a ``FetchError``.
    ``timeout_seconds`` is a deadline for the whole exchange: the body is read
    in chunks and a server trickling bytes is cut off once it passes.
    """
    deadline = time.monotonic() + timeout_seconds
    req = Request(url, method="GET")
    req.add_header("Accept", "text/html, text/plain;q=0.9, */*;q=0.5")
    req.add_header("User-Agent", user_agent)

    try:
        with urlopen(req, timeout=timeout_seconds) as resp:
            charset = _resolve_charset(resp.headers.get_content_charset())
            chunks: list[bytes] = []
            while True:
                if time.monotonic() >= deadline:
                    raise FetchError("timeout")
                chunk = resp.read1(CHUNK_SIZE)
                if not chunk:
                    break
                chunks.append(chunk)
            return b"".join(chunks).decode(charset, errors="replace")
    except HTTPError as exc:
        body = exc.read().decode("utf-8", errors="replace") if exc.fp else None
        raise FetchError(f"HTTP {exc.code}: {exc.reason}", status=exc.code, body=body) from exc
    except URLError as exc:
        if isinstance(exc.reason, socket.timeout):
            raise FetchError("timeout") from exc
        raise FetchError(str(exc.reason)) from exc
    except (socket.timeout, TimeoutError) as exc:
        raise FetchError("timeout") from exc
    except (OSError, HTTPException) as exc:
        # Dropped connections and malformed responses surface here.
        raise FetchError(str(exc) or type(exc).__name__) from exc


class UrllibFetcher:
    """Fetch probe backed by stdlib urllib, run off the event loop."""

    def __init__(self, *, timeout_seconds: float = 10.0, user_agent: str = DEFAULT_USER_AGENT) -> None:
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent

    @classmethod
    def from_config(cls, config: HttpConfig) -> "UrllibFetcher":
        return cls(timeout_seconds=config.timeout_seconds, user_agent=config.user_agent)

    async def fetch_text(self, url: str) -> str:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(
                    fetch_text_sync,
                    url,
                    timeout_seconds=self.timeout_seconds,
                    user_agent=self.user_agent,
                ),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            raise FetchError("timeout") from exc
