"""Editing verbs bound to keys by the default keymap."""

from .base import ActionResult
from .edit import delete_backward, delete_forward, insert_byte, insert_newline
from .file import noop_action, quit_editor, save_as, save_file, write_buffer
from .motion import move_down, move_left, move_right, move_up, page_down, page_up

__all__ = [
    "ActionResult",
    "insert_byte",
    "insert_newline",
    "delete_backward",
    "delete_forward",
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "page_up",
    "page_down",
    "save_file",
    "save_as",
    "write_buffer",
    "quit_editor",
    "noop_action",
]
