"""Minimal Textual adapter that wires an EditorSession into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional, Tuple

from sea_editor.actions.base import ActionResult
from sea_editor.input import Key, KeyEvent
from sea_editor.render import FrameState
from sea_editor.session import EditorSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


NAMED_KEYS: Mapping[str, Key] = MappingProxyType(
    {
        "up": Key.UP,
        "down": Key.DOWN,
        "left": Key.LEFT,
        "right": Key.RIGHT,
        "delete": Key.DELETE,
        "pageup": Key.PAGE_UP,
        "page_up": Key.PAGE_UP,
        "pagedown": Key.PAGE_DOWN,
        "page_down": Key.PAGE_DOWN,
        "escape": Key.ESCAPE,
    }
)

CONTROL_KEYS: Mapping[str, int] = MappingProxyType(
    {
        "enter": 0x0D,
        "return": 0x0D,
        "tab": 0x09,
        "backspace": 0x7F,
    }
)

SESSION_EVENTS = (
    "document.modified",
    "file.saved",
    "file.save_failed",
    "prompt.start",
    "prompt.end",
    "session.quit",
)


def translate_key(key: str, text: Optional[str] = None) -> Tuple[KeyEvent, ...]:
    """Map a Textual key name (plus its character) onto decoder key events.

    Characters outside ASCII become one event per UTF-8 byte, matching what
    the raw terminal decoder would have produced for the same keystroke.
    """

    name = key.lower()
    named = NAMED_KEYS.get(name)
    if named is not None:
        return (KeyEvent(named),)
    control = CONTROL_KEYS.get(name)
    if control is not None:
        return (KeyEvent.char(control),)
    if name.startswith("ctrl+") and len(name) == 6 and "a" <= name[-1] <= "z":
        return (KeyEvent.char(ord(name[-1]) - 0x60),)
    if text:
        return tuple(KeyEvent.char(byte) for byte in text.encode("utf-8"))
    return ()


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_frame: Callable[[FrameState], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    request_exit: Callable[[], None] = _noop
    # Optional debug line sink
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges EditorSession + bus events to a Textual-friendly surface."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._subscribe_events()
        self.refresh()

    def handle_textual_key(
        self, key: str, *, text: Optional[str] = None
    ) -> Optional[ActionResult]:
        """Translate a Textual key event and dispatch it; ``None`` if unmapped."""

        events = translate_key(key, text)
        if not events:
            self._log_state("key ->", key=key, text=text, mapped=False)
            return None

        result: Optional[ActionResult] = None
        for event in events:
            self._log_state("key ->", key=key, token=event.token)
            result = self.session.handle_key(event)
            self._log_state(
                "result <-",
                consumed=result.consumed,
                status=result.status,
                message=result.message,
            )
        if result is not None:
            self._after_result(result)
        return result

    def resize(self, columns: int, rows: int) -> None:
        self.session.resize(columns, rows)
        self.refresh()

    def refresh(self) -> FrameState:
        """Push a fresh frame; also called periodically so messages expire."""

        frame = self.session.frame()
        self.hooks.update_frame(frame)
        return frame

    def _after_result(self, result: ActionResult) -> None:
        status = result.message or result.status
        if status:
            self.hooks.update_status(status)
        self.refresh()
        if not self.session.running:
            self.hooks.request_exit()

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in SESSION_EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        session = self.session
        prompt = session.prompt
        return {
            "cursor": session.cursor.as_tuple(),
            "file": session.document.file_name,
            "version": session.document.version,
            "clean": session.document.clean,
            "prompt": prompt.text if prompt is not None and prompt.active else "",
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "translate_key"]
