"""Session state and interactive input for shellbelt."""

from .context import SessionContext
from .prompt import ConsolePrompter, FzfSelector, Prompter, Selector

__all__ = [
    "SessionContext",
    "ConsolePrompter",
    "FzfSelector",
    "Prompter",
    "Selector",
]
