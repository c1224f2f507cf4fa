"""Environment driven settings shared by the runtime services.

Every knob is read from a ``LINE_RANGES_*`` variable so that embedding
applications can tune logging and debug checks without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "LINE_RANGES_"

_TRUTHY = {"1", "true", "yes", "on"}

_CACHED: Optional["Settings"] = None


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True, slots=True)
class Settings:
    """Snapshot of the runtime configuration."""

    logger_name: str = "line_ranges"
    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False
    console: bool = False
    colored: bool = True
    check_invariants: bool = False


def load_settings() -> Settings:
    """Build a fresh :class:`Settings` from the current environment."""

    return Settings(
        logger_name=_env("LOGGER") or "line_ranges",
        log_level=(_env("LOG_LEVEL") or "WARNING").upper(),
        log_file=_env("LOG_FILE") or "",
        log_json=_env_flag("LOG_JSON", False),
        console=_env_flag("CONSOLE", False),
        colored=not _env_flag("NO_COLOR", False),
        check_invariants=_env_flag("CHECK_INVARIANTS", False),
    )


def get_settings() -> Settings:
    global _CACHED
    if _CACHED is None:
        _CACHED = load_settings()
    return _CACHED


def reset_settings() -> None:
    """Drop the cached settings so the next lookup re-reads the environment."""

    global _CACHED
    _CACHED = None


__all__ = [
    "ENV_PREFIX",
    "Settings",
    "get_settings",
    "load_settings",
    "reset_settings",
]
