"""UI-agnostic core of the SEA terminal text editor."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "input",
    "keymaps",
    "render",
    "runtime",
    "session",
    "syntax",
    "terminal",
]

__version__ = "0.1.0"
