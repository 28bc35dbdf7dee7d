"""Line buffer, cursor, and viewport model."""

from .cursor import Cursor, Direction
from .document import Document
from .line import Line
from .viewport import Viewport

__all__ = [
    "Cursor",
    "Direction",
    "Document",
    "Line",
    "Viewport",
]
