"""Exception types raised across the editor."""

from __future__ import annotations


class EditorError(RuntimeError):
    """Base class for editor failures."""


class FatalEnvironmentError(EditorError):
    """The environment (terminal, input stream, file system) is unusable.

    The CLI restores the terminal, clears the screen and exits non-zero when
    one of these escapes the main loop.
    """

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        detail = f"{message}: {cause}" if cause is not None else message
        super().__init__(detail)
        self.cause = cause


__all__ = ["EditorError", "FatalEnvironmentError"]
