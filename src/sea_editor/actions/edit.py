"""Text-mutating actions: typing, Enter, Backspace, Delete."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sea_editor.input import KeyEvent

from .base import ActionResult

if TYPE_CHECKING:
    from sea_editor.session import EditorSession


def _edited(session: "EditorSession", changed: bool, status: str) -> ActionResult:
    if not changed:
        return ActionResult(consumed=True, status="noop")
    session.mark_modified()
    return ActionResult(consumed=True, status=status)


def insert_byte(session: "EditorSession", event: KeyEvent) -> ActionResult:
    if event.byte is None:
        return ActionResult(consumed=False, status="ignored")
    changed = session.document.insert_char(session.cursor, event.byte)
    return _edited(session, changed, "insert")


def insert_newline(session: "EditorSession", event: KeyEvent) -> ActionResult:
    del event
    return _edited(session, session.document.split_line(session.cursor), "newline")


def delete_backward(session: "EditorSession", event: KeyEvent) -> ActionResult:
    del event
    return _edited(session, session.document.delete_char(session.cursor), "delete")


def delete_forward(session: "EditorSession", event: KeyEvent) -> ActionResult:
    del event
    return _edited(session, session.document.delete_forward(session.cursor), "delete")


__all__ = ["insert_byte", "insert_newline", "delete_backward", "delete_forward"]
