"""Result type shared by every action and the prompt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class ActionResult:
    """Outcome of handling one key event."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None


__all__ = ["ActionResult"]
