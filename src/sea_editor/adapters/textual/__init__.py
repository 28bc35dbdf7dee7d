"""Textual host for the editor session.

Only the controller is imported here; ``app`` needs the optional ``textual``
extra and is loaded on demand.
"""

from .controller import TextualEditorAdapter, TextualUIHooks, translate_key

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "translate_key"]
