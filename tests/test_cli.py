from typing import List

from sea_editor.buffer import Document, Viewport
from sea_editor.cli import build_parser, main, resolve_settings, run_terminal
from sea_editor.config import EditorSettings
from sea_editor.render import ansi
from sea_editor.runtime import telemetry
from sea_editor.session import EditorSession


class FakeTerminal:
    """Replays a keystroke stream and records every repaint."""

    def __init__(self, keys: bytes) -> None:
        self._pending = bytearray(keys)
        self.frames: List[bytes] = []
        self.idle_reads = 0
        self.cleared = False

    def read(self, count: int) -> bytes:
        if not self._pending:
            self.idle_reads += 1
            return b""
        chunk = bytes(self._pending[:count])
        del self._pending[:count]
        return chunk

    def write(self, data: bytes) -> None:
        self.frames.append(data)

    def clear(self) -> None:
        self.cleared = True


def make_session(document: Document | None = None) -> EditorSession:
    return EditorSession(document, viewport=Viewport(dim_x=40, dim_y=5))


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])

    assert args.path is None
    assert args.ui == "terminal"
    assert args.message_timeout is None
    assert args.log_file is None


def test_message_timeout_flag_overrides_environment(monkeypatch) -> None:
    monkeypatch.setenv("SEA_EDITOR_MESSAGE_TIMEOUT", "9")

    from_env = resolve_settings(build_parser().parse_args([]))
    from_flag = resolve_settings(
        build_parser().parse_args(["--message-timeout", "1.5"])
    )

    assert from_env.message_timeout == 9.0
    assert from_flag.message_timeout == 1.5


def test_run_terminal_edits_saves_and_quits(tmp_path) -> None:
    target = tmp_path / "out.py"
    session = make_session(Document(file_name=str(target)))
    terminal = FakeTerminal(b"ab\x1b[D\x7f\x13\x11")

    code = run_terminal(session, terminal)

    assert code == 0
    assert target.read_bytes() == b"b\n"
    assert terminal.cleared
    assert all(frame.startswith(ansi.HIDE_CURSOR) for frame in terminal.frames)
    assert not session.running


def test_run_terminal_repaints_on_idle_reads() -> None:
    session = make_session()

    class QuitAfterIdle(FakeTerminal):
        def read(self, count: int) -> bytes:
            data = super().read(count)
            if self.idle_reads == 2:
                self._pending.extend(b"\x11")
            return data

    terminal = QuitAfterIdle(b"")

    run_terminal(session, terminal)

    assert terminal.idle_reads == 2
    assert len(terminal.frames) == 3


def test_fatal_open_error_exits_with_one(tmp_path, capsys) -> None:
    code = main([str(tmp_path)])

    captured = capsys.readouterr()
    assert code == 1
    assert "Couldn't open file" in captured.err


def test_settings_from_env() -> None:
    settings = EditorSettings.from_env(
        {
            "SEA_EDITOR_MESSAGE_TIMEOUT": "2.5",
            "SEA_EDITOR_RESERVED_ROWS": "3",
            "SEA_EDITOR_COLUMNS": "100",
            "SEA_EDITOR_LINES": "not-a-number",
            "SEA_EDITOR_LOG_LEVEL": "debug",
            "SEA_EDITOR_LOG_CONSOLE": "yes",
        }
    )

    assert settings.message_timeout == 2.5
    assert settings.reserved_rows == 3
    assert settings.fallback_size == (100, 24)
    assert settings.log_level == "DEBUG"
    assert settings.log_console
    assert settings.log_file == ""


def test_run_terminal_ignores_unknown_function_keys() -> None:
    session = make_session()
    terminal = FakeTerminal(b"\x1b[15~\x1b[9~x\x11\x11")

    run_terminal(session, terminal)

    assert session.document.snapshot() == (b"x",)


def test_log_file_flag_overrides_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SEA_EDITOR_LOG_FILE", "from-env.log")
    target = str(tmp_path / "sea.log")

    settings = resolve_settings(build_parser().parse_args(["--log-file", target]))

    assert settings.log_file == target


def test_main_configures_telemetry_from_settings(monkeypatch, tmp_path) -> None:
    seen: List[EditorSettings] = []
    monkeypatch.setattr(telemetry, "configure", seen.append)
    target = str(tmp_path / "sea.log")

    main(["--log-file", target, "--message-timeout", "2", str(tmp_path)])

    assert len(seen) == 1
    assert seen[0].log_file == target
    assert seen[0].message_timeout == 2.0
