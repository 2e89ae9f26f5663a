"""Runtime settings for the history client, resolved from DASHHISTORY_* env vars."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigError
from .transport import DEFAULT_HTTP_TIMEOUT, DEFAULT_MAX_WORKERS

__all__ = ["Settings", "load_settings", "DEFAULT_API_URL"]

DEFAULT_API_URL = "http://localhost:3000/"


@dataclass(slots=True, frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_HTTP_TIMEOUT
    max_workers: int = DEFAULT_MAX_WORKERS
    debug: bool = False
    log_file: str | None = None


def _number(env: Mapping[str, str], name: str, default, cast):
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{name} must be a finite number > 0, got {raw!r}")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from the environment.

    DASHHISTORY_API_URL   API root (default http://localhost:3000/)
    DASHHISTORY_TIMEOUT   seconds per request (float)
    DASHHISTORY_WORKERS   transport thread pool size
    DASHHISTORY_DEBUG     "1" turns on DEBUG logging
    DASHHISTORY_LOG_FILE  rotating log file; unset means console only
    """
    env = os.environ if environ is None else environ

    return Settings(
        api_url=env.get("DASHHISTORY_API_URL") or DEFAULT_API_URL,
        timeout=_number(env, "DASHHISTORY_TIMEOUT", float(DEFAULT_HTTP_TIMEOUT), float),
        max_workers=_number(env, "DASHHISTORY_WORKERS", DEFAULT_MAX_WORKERS, int),
        debug=env.get("DASHHISTORY_DEBUG") == "1",
        log_file=env.get("DASHHISTORY_LOG_FILE") or None,
    )
