"""Dataclasses describing key bindings and the actions they trigger."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, MutableMapping


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named, callable editor action (``handler(session, event)``)."""

    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


def _normalize_token(token: str) -> str:
    # Single characters (space included) keep their case: "Q" and "q" differ.
    if len(token) == 1:
        return token
    return token.strip().lower()


def _normalize_tags(tags: Iterable[str]) -> tuple[str, ...]:
    seen: MutableMapping[str, None] = {}
    for tag in tags:
        cleaned = tag.strip()
        if cleaned:
            seen.setdefault(cleaned, None)
    return tuple(seen)


@dataclass(frozen=True, slots=True)
class Binding:
    """Maps one key token (see ``KeyEvent.token``) to an action id."""

    id: str
    token: str
    action_id: str
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        token = _normalize_token(self.token)
        if not token:
            raise ValueError("binding token cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        object.__setattr__(self, "token", token)
        object.__setattr__(self, "tags", _normalize_tags(self.tags))


@dataclass(frozen=True, slots=True)
class BindingMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


__all__ = ["ActionRef", "Binding", "BindingMatch"]
