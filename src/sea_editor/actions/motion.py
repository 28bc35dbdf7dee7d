"""Cursor movement actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sea_editor.buffer import Direction
from sea_editor.input import KeyEvent

from .base import ActionResult

if TYPE_CHECKING:
    from sea_editor.session import EditorSession


def _move(session: "EditorSession", direction: Direction) -> ActionResult:
    before = session.cursor.as_tuple()
    session.cursor.move(session.document, direction)
    status = "move" if session.cursor.as_tuple() != before else "noop"
    return ActionResult(consumed=True, status=status)


def _page(session: "EditorSession", direction: Direction) -> ActionResult:
    before = session.cursor.as_tuple()
    session.cursor.page(session.document, direction, session.viewport.dim_y)
    status = "page" if session.cursor.as_tuple() != before else "noop"
    return ActionResult(consumed=True, status=status)


def move_up(session: "EditorSession", event: KeyEvent) -> ActionResult:
    del event
    return _move(session, Direction.UP)


def move_down(session: "EditorSession", event: KeyEvent) -> ActionResult:
    del event
    return _move(session, Direction.DOWN)


def move_left(session: "EditorSession", event: KeyEvent) -> ActionResult:
    del event
    return _move(session, Direction.LEFT)


def move_right(session: "EditorSession", event: KeyEvent) -> ActionResult:
    del event
    return _move(session, Direction.RIGHT)


def page_up(session: "EditorSession", event: KeyEvent) -> ActionResult:
    del event
    return _page(session, Direction.UP)


def page_down(session: "EditorSession", event: KeyEvent) -> ActionResult:
    del event
    return _page(session, Direction.DOWN)


__all__ = [
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "page_up",
    "page_down",
]
