"""Declarative keymap registry and default bindings."""

from .models import ActionRef, Binding, BindingMatch
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import DEFAULT_ACTIONS, DEFAULT_BINDINGS, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "BindingMatch",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
]
