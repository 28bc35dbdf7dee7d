"""Editor session: the state one host drives with key events."""

from __future__ import annotations

import time
from typing import Callable, Optional

from sea_editor.actions.base import ActionResult
from sea_editor.buffer import Cursor, Document, Viewport
from sea_editor.config import EditorSettings
from sea_editor.input import KeyEvent
from sea_editor.keymaps import KeymapRegistry, load_default_keymaps
from sea_editor.render import FrameState, Renderer
from sea_editor.runtime import telemetry

from .bus import SessionBus
from .prompt import CancelFn, KeystrokeFn, Prompt, SubmitFn

MODIFIED_HINT = "CTRL-S to save"

Clock = Callable[[], float]


class EditorSession:
    """Owns the document, cursor, viewport, keymaps, and status message.

    Hosts feed :meth:`handle_key` with decoded events and paint whatever
    :meth:`frame` returns. The session never touches the terminal itself.
    """

    def __init__(
        self,
        document: Optional[Document] = None,
        *,
        viewport: Optional[Viewport] = None,
        registry: Optional[KeymapRegistry] = None,
        settings: Optional[EditorSettings] = None,
        bus: Optional[SessionBus] = None,
        renderer: Optional[Renderer] = None,
        clock: Clock = time.monotonic,
    ) -> None:
        self.settings = settings or EditorSettings()
        self.document = document if document is not None else Document()
        self.cursor = Cursor()
        if viewport is None:
            columns, rows = self.settings.fallback_size
            viewport = Viewport.for_terminal(
                columns, rows, reserved_rows=self.settings.reserved_rows
            )
        self.viewport = viewport
        if registry is None:
            registry = KeymapRegistry(logger_name="sea_editor.keymaps")
            load_default_keymaps(registry)
        self.registry = registry
        self.bus = bus or SessionBus()
        self.renderer = renderer or Renderer()
        self._clock = clock
        self.message = ""
        self.message_time = float("-inf")
        self.quit_armed = False
        self.running = True
        self.prompt: Optional[Prompt] = None

    # ------------------------------------------------------------------
    # Status message
    # ------------------------------------------------------------------
    def set_message(self, text: str) -> None:
        self.message = text
        self.message_time = self._clock()

    def visible_message(self, now: Optional[float] = None) -> Optional[str]:
        """Return the message while it is fresh, or the prompt text if prompting."""

        if self.prompt is not None and self.prompt.active:
            return self.prompt.message
        if not self.message:
            return None
        current = self._clock() if now is None else now
        if current - self.message_time >= self.settings.message_timeout:
            return None
        return self.message

    # ------------------------------------------------------------------
    # Hooks used by actions
    # ------------------------------------------------------------------
    def prompt_for(
        self,
        template: str,
        *,
        on_submit: SubmitFn,
        on_cancel: Optional[CancelFn] = None,
        callback: Optional[KeystrokeFn] = None,
    ) -> Prompt:
        prompt = Prompt(
            template,
            bus=self.bus,
            on_submit=on_submit,
            on_cancel=on_cancel,
            callback=callback,
        )
        self.prompt = prompt
        prompt.start()
        return prompt

    def mark_modified(self) -> None:
        self.quit_armed = False
        self.set_message(MODIFIED_HINT)
        self.bus.emit(
            "document.modified",
            {"file": self.document.file_name, "version": self.document.version},
        )

    def stop(self) -> None:
        if not self.running:
            return
        self.running = False
        telemetry.record_event(
            "session.quit",
            data={"file": self.document.file_name, "clean": self.document.clean},
        )
        self.bus.emit("session.quit", {"clean": self.document.clean})

    def resize(self, columns: int, rows: int) -> None:
        """Resize the viewport for a new host size, keeping the scroll offset.

        Only the Textual host calls this. The raw terminal host reads the
        window size once at startup and never resizes.
        """

        resized = Viewport.for_terminal(
            columns, rows, reserved_rows=self.settings.reserved_rows
        )
        resized.offset_x = self.viewport.offset_x
        resized.offset_y = self.viewport.offset_y
        resized.scroll(self.cursor)
        self.viewport = resized

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def handle_key(self, event: KeyEvent) -> ActionResult:
        with telemetry.span(
            "session::handle_key",
            component="session",
            metadata={"token": event.token},
        ) as handle:
            result = self._dispatch(event)
            handle.add_metadata("status", result.status)
        return result

    def _dispatch(self, event: KeyEvent) -> ActionResult:
        prompt = self.prompt
        if prompt is not None and prompt.active:
            result = prompt.handle_key(event)
            if not prompt.active and self.prompt is prompt:
                self.prompt = None
            return result

        match = self.registry.lookup(event.token)
        if match is not None:
            outcome = match.action(self, event)
            if isinstance(outcome, ActionResult):
                return outcome
            return ActionResult(consumed=True)

        if event.insertable:
            return self.registry.get_action("edit.insert_byte")(self, event)

        return ActionResult(consumed=False, status="unbound", message=event.token)

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------
    def frame(self, now: Optional[float] = None) -> FrameState:
        """Scroll the viewport to the cursor and snapshot what to paint."""

        self.cursor.clamp(self.document)
        self.viewport.scroll(self.cursor)
        viewport = self.viewport
        document = self.document
        start = viewport.offset_y
        return FrameState(
            lines=tuple(document.lines[start : start + viewport.dim_y]),
            used_rows=document.used_rows,
            cursor=self.cursor.as_tuple(),
            dim=(viewport.dim_x, viewport.dim_y),
            offset=(viewport.offset_x, viewport.offset_y),
            highlighted=document.profile.is_highlighted,
            file_name=document.file_name,
            new_file=document.new_file,
            clean=document.clean,
            message=self.visible_message(now),
        )

    def render(self, now: Optional[float] = None) -> bytes:
        return self.renderer.render(self.frame(now))


__all__ = ["EditorSession", "MODIFIED_HINT"]
