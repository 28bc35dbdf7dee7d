"""Command line entry point: ``sea [path]``."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from typing import Optional, Sequence

from sea_editor import __version__
from sea_editor.buffer import Document, Viewport
from sea_editor.config import EditorSettings
from sea_editor.errors import FatalEnvironmentError
from sea_editor.input import InputDecoder
from sea_editor.render import ansi
from sea_editor.runtime import telemetry
from sea_editor.session import EditorSession
from sea_editor.terminal import RawTerminal, load_document

QUIT_HINT = "CTRL-Q to quit"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sea", description="Small terminal text editor with syntax highlighting."
    )
    parser.add_argument("path", nargs="?", help="File to open or create")
    parser.add_argument(
        "--ui",
        choices=("terminal", "textual"),
        default="terminal",
        help="Front end to run (default: terminal)",
    )
    parser.add_argument(
        "--message-timeout",
        type=float,
        default=None,
        metavar="SECONDS",
        help="How long status messages stay visible (default: 5)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        metavar="PATH",
        help="Write the telemetry log to PATH",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_settings(args: argparse.Namespace) -> EditorSettings:
    settings = EditorSettings.from_env()
    if args.message_timeout is not None:
        settings = dataclasses.replace(settings, message_timeout=args.message_timeout)
    if args.log_file is not None:
        settings = dataclasses.replace(settings, log_file=args.log_file)
    return settings


def run_terminal(session: EditorSession, terminal: RawTerminal) -> int:
    """Render, read one key, dispatch; repeat until the session stops."""

    decoder = InputDecoder(terminal.read)
    while session.running:
        terminal.write(session.render())
        event = decoder.read_key()
        if event is None:
            continue
        session.handle_key(event)
    terminal.clear()
    return 0


def _open_document(path: Optional[str]) -> Document:
    return load_document(path) if path else Document()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args)
    telemetry.configure(settings)
    telemetry.record_event(
        "cli.start", data={"file": args.path or "", "ui": args.ui}
    )

    try:
        document = _open_document(args.path)
        if args.ui == "textual":
            from sea_editor.adapters.textual.app import run_textual

            session = EditorSession(document, settings=settings)
            session.set_message(QUIT_HINT)
            return run_textual(session)

        with RawTerminal() as terminal:
            columns, rows = terminal.size()
            viewport = Viewport.for_terminal(
                columns, rows, reserved_rows=settings.reserved_rows
            )
            session = EditorSession(document, viewport=viewport, settings=settings)
            session.set_message(QUIT_HINT)
            return run_terminal(session, terminal)
    except FatalEnvironmentError as exc:
        telemetry.record_event("cli.fatal", level="error", data={"error": exc})
        if sys.stdout.isatty():
            sys.stdout.buffer.write(ansi.CLEAR_SCREEN + ansi.CURSOR_HOME)
            sys.stdout.flush()
        print(f"sea: {exc}", file=sys.stderr)
        return 1


def run() -> None:
    sys.exit(main())


__all__ = ["build_parser", "main", "resolve_settings", "run", "run_terminal"]
