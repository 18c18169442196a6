"""Git repository discovery and selection."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

from ..errors import ValidationError
from ..session.context import SessionContext
from ..session.prompt import Prompter
from ..utils.files import tail_segments

MARKER = ".git"


@dataclass
class RepoSelection:
    """Outcome of a repository selection."""
    context: SessionContext
    repos: dict[int, Path] = field(default_factory=dict)
    selected: Optional[Path] = None


def find_repositories(root: Union[str, Path]) -> list[Path]:
    """Directories under ``root`` holding a ``.git`` marker, in walk order."""
    found = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        if MARKER in dirnames or MARKER in filenames:
            found.append(Path(dirpath))
        if MARKER in dirnames:
            dirnames.remove(MARKER)
    return found


def index_repositories(repos: list[Path]) -> dict[int, Path]:
    """Number repositories from 1."""
    return {i: path for i, path in enumerate(repos, 1)}


def display_path(path: Path, full: bool = False) -> str:
    return str(path) if full else tail_segments(path, 2)


def choose_repository(
    context: SessionContext,
    prompter: Prompter,
    root: Union[str, Path],
    full: bool = False,
    show: Optional[Callable[[int, str], None]] = None,
) -> RepoSelection:
    """
    List repositories under ``root`` and move into the chosen one.

    An unknown index, or a path that no longer exists, leaves the
    context unchanged.
    """
    if not Path(root).is_dir():
        raise ValidationError(f"Not a directory: {root}")

    repos = index_repositories(find_repositories(root))
    for index, path in repos.items():
        if show:
            show(index, display_path(path, full))

    if not repos:
        return RepoSelection(context=context)

    choice = prompter.ask_int("Select repository")
    path = repos.get(choice) if choice is not None else None
    if path is None or not path.exists():
        return RepoSelection(context=context, repos=repos)

    return RepoSelection(context=context.with_cwd(path), repos=repos, selected=path)
