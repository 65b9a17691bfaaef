"""HTTP connector (the only network access; verifiers receive it as a fetch probe)."""

from .client import UrllibFetcher, fetch_text_sync
from .config import HttpConfig, get_http_config

__all__ = ["HttpConfig", "UrllibFetcher", "fetch_text_sync", "get_http_config"]
