"""Editor session, its event bus, and the inline prompt."""

from .bus import SessionBus
from .prompt import Prompt
from .session import MODIFIED_HINT, EditorSession

__all__ = ["EditorSession", "MODIFIED_HINT", "Prompt", "SessionBus"]
