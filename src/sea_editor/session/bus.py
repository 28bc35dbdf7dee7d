"""Synchronous event bus shared by the session, its prompt, and hosts."""

from __future__ import annotations

from typing import Callable, Dict

Subscriber = Callable[[object], None]


class SessionBus:
    """Minimal event bus letting the core notify hosts with structured payloads."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Subscriber]] = {}

    def subscribe(self, event: str, callback: Subscriber) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Subscriber) -> bool:
        callbacks = self._subscribers.get(event, [])
        if callback not in callbacks:
            return False
        callbacks.remove(callback)
        return True

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


__all__ = ["SessionBus", "Subscriber"]
