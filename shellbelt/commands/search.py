"""Search files with rg, pick one with a fuzzy selector, open it."""

import logging
import os
import shlex
from dataclasses import dataclass
from typing import Optional

from ..errors import ToolError
from ..session.prompt import Selector
from ..utils.process import CommandRunner, Invocation

logger = logging.getLogger(__name__)

# rg: 0 = matches, 1 = no matches, 2 = error
RG_NO_MATCH = 1


@dataclass
class SearchResult:
    """What was chosen and opened."""
    selection: Optional[str] = None
    path: Optional[str] = None
    editor: Optional[str] = None


def resolve_editor(
    override: Optional[str] = None,
    env: Optional[dict[str, str]] = None,
    default: str = "vim",
) -> str:
    """Editor from the override, then $EDITOR, then the default."""
    env = env if env is not None else dict(os.environ)
    return override or env.get("EDITOR") or default


def path_from_match(line: str) -> str:
    """File path of an ``rg --line-number`` line: everything before the first colon."""
    return line.split(":", 1)[0]


class RipGrep:
    """Thin wrapper around the rg command line."""

    def __init__(self, runner: Optional[CommandRunner] = None, binary: str = "rg"):
        self.runner = runner or CommandRunner()
        self.binary = binary

    def _lines(self, invocation: Invocation, input: Optional[str] = None) -> list[str]:
        result = self.runner.run(invocation, input=input)
        if result.returncode == RG_NO_MATCH:
            return []
        if not result.ok:
            raise ToolError(str(invocation), result.returncode, result.stderr)
        return result.lines

    def search_contents(self, pattern: str) -> list[str]:
        return self._lines(Invocation(
            self.binary,
            ["--line-number", "--no-heading", "--color", "never", "--", pattern],
        ))

    def list_files(self) -> list[str]:
        return self._lines(Invocation(self.binary, ["--files"]))

    def find_files(self, pattern: str) -> list[str]:
        """File names matching ``pattern``, filtered by a second rg pass."""
        files = self.list_files()
        if not files:
            return []
        return self._lines(
            Invocation(self.binary, ["--color", "never", "--", pattern]),
            input="\n".join(files) + "\n",
        )


def search_and_open(
    pattern: str,
    selector: Selector,
    editor: str,
    files_only: bool = False,
    rg: Optional[RipGrep] = None,
) -> SearchResult:
    """
    Fuzzy-pick a search hit and open it in ``editor``.

    In content mode the chosen line's text before the first colon is
    taken as the path; it is not checked before opening.
    """
    rg = rg or RipGrep()
    candidates = rg.find_files(pattern) if files_only else rg.search_contents(pattern)
    if not candidates:
        logger.info("No matches for %r", pattern)
        return SearchResult()

    selection = selector.select(candidates, prompt=pattern)
    if not selection:
        return SearchResult()

    path = selection if files_only else path_from_match(selection)
    parts = shlex.split(editor)
    rg.runner.run(Invocation(parts[0], parts[1:] + [path]), capture=False, check=True)
    return SearchResult(selection=selection, path=path, editor=editor)
