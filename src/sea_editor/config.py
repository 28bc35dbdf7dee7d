"""Editor settings resolved from ``SEA_EDITOR_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

ENV_PREFIX = "SEA_EDITOR_"
TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_float(env: Mapping[str, str], key: str, fallback: float) -> float:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return float(value)
    except ValueError:
        return fallback


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _env_flag(env: Mapping[str, str], key: str, fallback: bool) -> bool:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    return value.lower() in TRUTHY


@dataclass(frozen=True, slots=True)
class EditorSettings:
    """Tunables for a single editor session.

    The ``log_*`` fields feed :func:`sea_editor.runtime.telemetry.configure`.
    Console logging is off by default because the editor owns the screen.
    """

    message_timeout: float = 5.0
    reserved_rows: int = 2
    fallback_size: Tuple[int, int] = (80, 24)
    log_level: str = "INFO"
    log_file: str = ""
    log_console: bool = False

    def __post_init__(self) -> None:
        if self.message_timeout < 0:
            raise ValueError("message_timeout cannot be negative")
        if self.reserved_rows < 0:
            raise ValueError("reserved_rows cannot be negative")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EditorSettings":
        source = os.environ if env is None else env
        return cls(
            message_timeout=_env_float(source, "MESSAGE_TIMEOUT", 5.0),
            reserved_rows=_env_int(source, "RESERVED_ROWS", 2),
            fallback_size=(
                _env_int(source, "COLUMNS", 80),
                _env_int(source, "LINES", 24),
            ),
            log_level=source.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper(),
            log_file=source.get(f"{ENV_PREFIX}LOG_FILE", ""),
            log_console=_env_flag(source, "LOG_CONSOLE", False),
        )


__all__ = ["EditorSettings"]
