"""Built-in actions and the key bindings that seed every session."""

from __future__ import annotations

from typing import Iterable, Sequence

from sea_editor.actions import edit as edit_actions
from sea_editor.actions import file as file_actions
from sea_editor.actions import motion as motion_actions

from .models import ActionRef, Binding
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="edit.insert_byte",
        handler=edit_actions.insert_byte,
        description="Insert the typed byte",
    ),
    ActionRef(
        id="edit.newline",
        handler=edit_actions.insert_newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=edit_actions.delete_backward,
        description="Delete the byte before the cursor",
    ),
    ActionRef(
        id="edit.delete_forward",
        handler=edit_actions.delete_forward,
        description="Delete the byte under the cursor",
    ),
    ActionRef(id="motion.up", handler=motion_actions.move_up, description="Cursor up"),
    ActionRef(
        id="motion.down", handler=motion_actions.move_down, description="Cursor down"
    ),
    ActionRef(
        id="motion.left", handler=motion_actions.move_left, description="Cursor left"
    ),
    ActionRef(
        id="motion.right", handler=motion_actions.move_right, description="Cursor right"
    ),
    ActionRef(
        id="motion.page_up", handler=motion_actions.page_up, description="Page up"
    ),
    ActionRef(
        id="motion.page_down", handler=motion_actions.page_down, description="Page down"
    ),
    ActionRef(
        id="file.save",
        handler=file_actions.save_file,
        description="Write the buffer, prompting for a name if needed",
    ),
    ActionRef(
        id="file.quit",
        handler=file_actions.quit_editor,
        description="Quit; asks twice when there are unsaved changes",
    ),
    ActionRef(
        id="core.noop", handler=file_actions.noop_action, description="Do nothing"
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(id="quit", token="ctrl+q", action_id="file.quit", description="Quit"),
    Binding(id="save", token="ctrl+s", action_id="file.save", description="Save"),
    Binding(
        id="newline", token="enter", action_id="edit.newline", description="New line"
    ),
    Binding(
        id="backspace",
        token="backspace",
        action_id="edit.delete_backward",
        description="Delete backwards",
    ),
    Binding(
        id="backspace_ctrl_h",
        token="ctrl+h",
        action_id="edit.delete_backward",
        description="Delete backwards",
    ),
    Binding(
        id="delete",
        token="delete",
        action_id="edit.delete_forward",
        description="Delete forwards",
    ),
    Binding(id="up", token="up", action_id="motion.up"),
    Binding(id="down", token="down", action_id="motion.down"),
    Binding(id="left", token="left", action_id="motion.left"),
    Binding(id="right", token="right", action_id="motion.right"),
    Binding(id="page_up", token="pageup", action_id="motion.page_up"),
    Binding(id="page_down", token="pagedown", action_id="motion.page_down"),
    Binding(
        id="escape",
        token="escape",
        action_id="core.noop",
        description="Swallow bare or unknown escape sequences",
    ),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and bindings, then any ``extra_bindings``.

    Extra bindings replace defaults that claim the same token.
    """

    excluded = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=True)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
