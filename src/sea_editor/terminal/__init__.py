"""Terminal and file system collaborators of the editor core."""

from .files import load_document, write_document
from .raw import RawTerminal

__all__ = ["load_document", "write_document", "RawTerminal"]
