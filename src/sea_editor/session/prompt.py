"""Single-line prompt drawn in the message area (used for "Save as")."""

from __future__ import annotations

from typing import Callable, Optional

from sea_editor.actions.base import ActionResult
from sea_editor.input import Key, KeyEvent

from .bus import SessionBus

ENTER = 0x0D
ERASE_BYTES = frozenset({0x08, 0x7F})

SubmitFn = Callable[[str], object]
CancelFn = Callable[[], object]
KeystrokeFn = Callable[[str, KeyEvent], None]


class Prompt:
    """Collects a reply one key event at a time.

    The prompt never blocks: the owning session forwards every key to
    :meth:`handle_key` while :attr:`active` is true. ``callback`` runs after
    each keystroke with the current text and the event, including the one
    that confirmed or cancelled the prompt.
    """

    def __init__(
        self,
        template: str,
        *,
        bus: SessionBus,
        on_submit: SubmitFn,
        on_cancel: Optional[CancelFn] = None,
        callback: Optional[KeystrokeFn] = None,
    ) -> None:
        self.template = template
        self.bus = bus
        self.on_submit = on_submit
        self.on_cancel = on_cancel
        self.callback = callback
        self._typed = bytearray()
        self.active = False

    @property
    def text(self) -> str:
        return self._typed.decode("ascii")

    @property
    def message(self) -> str:
        return self.template.format(self.text)

    def start(self) -> None:
        self._typed.clear()
        self.active = True
        self.bus.emit("prompt.start", self.template)

    def handle_key(self, event: KeyEvent) -> ActionResult:
        if not self.active:
            return ActionResult(consumed=False, status="inactive")

        if event.key is Key.DELETE or (event.key is Key.CHAR and event.byte in ERASE_BYTES):
            if self._typed:
                self._typed.pop()
            self._notify(event)
            return ActionResult(consumed=True, status="editing")

        if event.key is Key.ESCAPE:
            self._finish(event, submitted=False)
            if self.on_cancel is not None:
                self.on_cancel()
            return ActionResult(consumed=True, status="prompt_cancel")

        if event.key is Key.CHAR and event.byte == ENTER:
            if not self._typed:
                self._notify(event)
                return ActionResult(consumed=True, status="editing")
            reply = self.text
            self._finish(event, submitted=True)
            outcome = self.on_submit(reply)
            if isinstance(outcome, ActionResult):
                return outcome
            return ActionResult(consumed=True, status="prompt_submit", message=reply)

        if event.printable and event.byte is not None:
            self._typed.append(event.byte)
        self._notify(event)
        return ActionResult(consumed=True, status="editing")

    def _finish(self, event: KeyEvent, *, submitted: bool) -> None:
        self.active = False
        self._notify(event)
        self.bus.emit("prompt.end", {"text": self.text, "submitted": submitted})

    def _notify(self, event: KeyEvent) -> None:
        if self.callback is not None:
            self.callback(self.text, event)


__all__ = ["Prompt"]
