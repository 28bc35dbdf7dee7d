"""Screen painting: escape sequences, frame snapshots, and the renderer."""

from . import ansi
from .frame import FrameState, iter_color_runs
from .renderer import PLACEHOLDER, Renderer, format_status

__all__ = [
    "ansi",
    "FrameState",
    "iter_color_runs",
    "PLACEHOLDER",
    "Renderer",
    "format_status",
]
