"""Shell helper commands."""

from .clipboard import open_clipboard
from .elevate import run_elevated
from .line_endings import convert_line_endings
from .links import create_symlink
from .perforce import select_workspace
from .pipe import pipe_to_command
from .remove import force_remove
from .repos import choose_repository
from .search import search_and_open
from .ssh import copy_ssh_key
from .verbs import find_verbs

# Lazy imports for modules with external dependencies
def __getattr__(name):
    if name == "find_processes":
        from .processes import find_processes
        return find_processes
    if name == "start_transcript":
        from .transcript import start_transcript
        return start_transcript
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "open_clipboard",
    "run_elevated",
    "convert_line_endings",
    "create_symlink",
    "select_workspace",
    "pipe_to_command",
    "find_processes",
    "force_remove",
    "choose_repository",
    "search_and_open",
    "copy_ssh_key",
    "start_transcript",
    "find_verbs",
]
