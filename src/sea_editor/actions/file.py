"""Save and quit actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sea_editor.input import KeyEvent
from sea_editor.runtime import telemetry
from sea_editor.syntax import profile_for_filename
from sea_editor.terminal.files import write_document

from .base import ActionResult

if TYPE_CHECKING:
    from sea_editor.session import EditorSession

SAVE_AS_PROMPT = "Save as: {}"
UNSAVED_WARNING = "There are unsaved changes, press CTRL-Q again to force quit."


def save_file(session: "EditorSession", event: KeyEvent) -> ActionResult:
    del event
    if session.document.file_name:
        return write_buffer(session)

    session.prompt_for(
        SAVE_AS_PROMPT,
        on_submit=lambda name: save_as(session, name),
        on_cancel=lambda: session.set_message("Did not save"),
    )
    return ActionResult(consumed=True, status="prompt", message="save_as")


def save_as(session: "EditorSession", file_name: str) -> ActionResult:
    """Name the buffer, adopt the matching profile, then write it."""

    document = session.document
    document.file_name = file_name
    document.apply_profile(profile_for_filename(file_name))
    telemetry.record_event(
        "file.named", data={"file": file_name, "profile": document.profile.name}
    )
    return write_buffer(session)


def write_buffer(session: "EditorSession") -> ActionResult:
    document = session.document
    with telemetry.span(
        "file::save", component="files", metadata={"file": document.file_name}
    ) as handle:
        try:
            written = write_document(document)
        except OSError as exc:
            handle.add_metadata("error", exc)
            session.set_message(f"Unable to save file. Error: {exc}")
            session.bus.emit("file.save_failed", {"file": document.file_name, "error": exc})
            return ActionResult(consumed=True, status="save_failed", message=str(exc))
        handle.add_metadata("bytes", written)

    document.mark_saved()
    session.set_message(f"File saved. {written} bytes written")
    session.bus.emit("file.saved", {"file": document.file_name, "bytes": written})
    return ActionResult(consumed=True, status="saved", message=document.file_name)


def quit_editor(session: "EditorSession", event: KeyEvent) -> ActionResult:
    del event
    if session.document.clean or session.quit_armed:
        session.stop()
        return ActionResult(consumed=True, status="quit")
    session.quit_armed = True
    session.set_message(UNSAVED_WARNING)
    return ActionResult(consumed=True, status="quit_pending")


def noop_action(session: "EditorSession", event: KeyEvent) -> ActionResult:
    del session, event
    return ActionResult(consumed=True, status="noop")


__all__ = ["save_file", "save_as", "write_buffer", "quit_editor", "noop_action"]
