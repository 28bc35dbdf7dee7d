"""Executable Textual app that hosts an editor session."""

from __future__ import annotations

from typing import Mapping, Optional

try:  # pragma: no cover - imported only when the Textual host is used
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' extra to use sea_editor.adapters.textual.app"
    ) from exc

from sea_editor.buffer import Line
from sea_editor.render import FrameState, Renderer, format_status, iter_color_runs
from sea_editor.session import EditorSession
from sea_editor.syntax import Highlight

from .controller import TextualEditorAdapter, TextualUIHooks

HIGHLIGHT_STYLES: Mapping[int, str] = {
    Highlight.STRING: "green",
    Highlight.KEYWORD_ALT: "yellow",
    Highlight.NUMBER: "blue",
    Highlight.KEYWORD: "magenta",
    Highlight.COMMENT: "cyan",
}
BANNER_STYLES: Mapping[int, str] = {32: "green", 36: "cyan"}
CURSOR_STYLE = "reverse"
REFRESH_INTERVAL = 0.5


def _decode(chunk: bytes) -> str:
    return chunk.decode("utf-8", errors="replace")


def _append_line(text: Text, line: Line, frame: FrameState, with_cursor: bool) -> None:
    offset_x = frame.offset[0]
    row_start = len(text)
    for chunk, code in iter_color_runs(
        line.text, line.highlight, offset_x, offset_x + frame.dim[0]
    ):
        style = HIGHLIGHT_STYLES.get(code, "") if frame.highlighted else ""
        text.append(_decode(chunk), style=style)
    if not with_cursor:
        return
    cursor_x = frame.cursor[0]
    column = row_start + len(_decode(bytes(line.text[offset_x:cursor_x])))
    if column >= len(text):
        text.append(" ", style=CURSOR_STYLE)
    else:
        text.stylize(CURSOR_STYLE, column, column + 1)


def frame_text(frame: FrameState, renderer: Optional[Renderer] = None) -> Text:
    """Paint the text area of ``frame`` as Rich text (rows, banner, cursor)."""

    renderer = renderer or Renderer()
    dim_x, dim_y = frame.dim
    offset_y = frame.offset[1]
    cursor_row = frame.cursor[1] - offset_y
    banner = list(renderer.banner()) if frame.used_rows == 0 else []
    banner_row = dim_y // 4

    text = Text(no_wrap=True, overflow="crop")
    for screen_row in range(dim_y):
        if screen_row:
            text.append("\n")
        if screen_row + offset_y < frame.used_rows:
            _append_line(
                text, frame.lines[screen_row], frame, screen_row == cursor_row
            )
            continue

        if screen_row == cursor_row:
            text.append(" ", style=CURSOR_STYLE)
            continue
        banner_index = screen_row - banner_row
        parts = banner[banner_index] if banner and 0 <= banner_index < len(banner) else ()
        if not parts:
            text.append("~")
            continue
        width = sum(len(part) for part, _ in parts)
        padding = max(dim_x - width, 0) // 2
        if padding:
            text.append("~" + " " * (padding - 1))
        for part, code in parts:
            text.append(part, style=BANNER_STYLES.get(code, ""))
    return text


class SeaEditorApp(App[int]):
    """Textual UI embedding an :class:`EditorSession`."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#text-area {
		height: 1fr;
		content-align: left top;
	}

	#status-line {
		height: 1;
	}

	#message-line {
		height: 1;
	}
	"""

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session
        self.adapter: TextualEditorAdapter | None = None
        self._text_widget: Static | None = None
        self._status_widget: Static | None = None
        self._message_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._text_widget = Static("", id="text-area")
        self._status_widget = Static("", id="status-line")
        self._message_widget = Static("", id="message-line")
        yield self._text_widget
        yield self._status_widget
        yield self._message_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_frame=self._update_frame,
            request_exit=self._request_exit,
            log=self.log,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        self.adapter.resize(self.size.width, self.size.height)
        self.set_interval(REFRESH_INTERVAL, self.adapter.refresh)

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(event.size.width, event.size.height)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        result = self.adapter.handle_textual_key(event.key, text=event.character)
        if result is not None:
            event.stop()
            event.prevent_default()

    async def action_quit(self) -> None:
        # ctrl+q goes through the session so unsaved changes ask for confirmation
        if self.adapter:
            self.adapter.handle_textual_key("ctrl+q")
        else:
            self.exit(0)

    def _update_frame(self, frame: FrameState) -> None:
        if self._text_widget:
            self._text_widget.update(frame_text(frame, self.session.renderer))
        if self._status_widget:
            self._status_widget.update(Text(format_status(frame), style="reverse"))
        if self._message_widget:
            self._message_widget.update(Text(frame.message or ""))

    def _request_exit(self) -> None:
        self.exit(0)


def run_textual(session: EditorSession) -> int:
    """Run the Textual host until the session quits; returns the exit code."""

    result = SeaEditorApp(session).run()
    return 0 if result is None else result


__all__ = ["SeaEditorApp", "frame_text", "run_textual"]
