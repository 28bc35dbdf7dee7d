"""Telemetry for the editor, built on telelog.

``configure(settings)`` builds the telelog configuration from
:class:`~sea_editor.config.EditorSettings`; the CLI calls it once after it
resolves settings. Until then the first logger request configures from the
environment.

``record_event(name, ...)`` emits one structured ``event::<name>`` line.
``span(name, ...)`` wraps a block in a telelog profile and, optionally, a
tracked component.
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

from sea_editor.config import EditorSettings

tl = cast(Any, telelog)

LOGGER_NAME = "sea_editor"

_loggers: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def _pairs(data: Dict[str, Any]) -> List[Tuple[str, str]]:
    return [(str(key), _text(value)) for key, value in data.items()]


def build_config(settings: EditorSettings) -> Any:
    """Translate editor settings into a ``telelog.Config``."""

    config = tl.Config()
    config.with_min_level(settings.log_level)
    config.with_console_output(settings.log_console)
    if settings.log_console:
        config.with_colored_output(True)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    # spans report timings through the profiler
    config.with_profiling(True)
    return config


def configure(settings: Optional[EditorSettings] = None) -> None:
    """Adopt ``settings`` (or the environment's) and drop cached loggers."""

    global _config
    _config = build_config(settings or EditorSettings.from_env())
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached ``telelog.Logger`` for ``name``."""

    global _config
    if _config is None:
        _config = build_config(EditorSettings.from_env())
    logger_name = name or LOGGER_NAME
    logger = _loggers.get(logger_name)
    if logger is None:
        logger = _loggers[logger_name] = tl.Logger.with_config(logger_name, _config)
    return logger


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    name = level.lower()
    with_data = getattr(logger, f"{name}_with", None)
    if with_data is not None:
        with_data(message, _pairs(payload))
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Yielded by :func:`span`; metadata added here lands on the failure line."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block as ``name``; track it under ``component`` if given.

    ``metadata`` is pushed as logger context for the duration of the block.
    An exception escaping the block is logged through :meth:`SpanHandle.fail`
    and re-raised.
    """

    log = get_logger(logger_name)
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    handle = SpanHandle(
        logger=log, span_name=name, component_name=component, metadata=dict(context)
    )
    try:
        with ExitStack() as stack:
            if component:
                stack.enter_context(log.track_component(component))
            stack.enter_context(log.profile(name))
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = [
    "LOGGER_NAME",
    "SpanHandle",
    "build_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
