"""Interactive selection abstractions."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console
from rich.prompt import Prompt

from ..errors import ToolError
from ..utils.process import CommandRunner, Invocation

logger = logging.getLogger(__name__)

# fzf: 1 = no match, 130 = aborted with Esc/Ctrl-C
FZF_CANCEL_CODES = (1, 130)


class Selector(ABC):
    """Narrows a list of lines to one chosen line."""

    @abstractmethod
    def select(self, items: list[str], prompt: str = "") -> Optional[str]:
        """Return the chosen line, or None if nothing was chosen."""


class Prompter(ABC):
    """Reads a single answer from the user."""

    @abstractmethod
    def ask_int(self, message: str) -> Optional[int]:
        """Return the entered integer, or None for anything else."""


class FzfSelector(Selector):
    """Selector backed by an external fuzzy finder."""

    def __init__(
        self,
        runner: Optional[CommandRunner] = None,
        binary: str = "fzf",
        extra_args: Optional[list[str]] = None,
    ):
        self.runner = runner or CommandRunner()
        self.binary = binary
        self.extra_args = extra_args or []

    def select(self, items: list[str], prompt: str = "") -> Optional[str]:
        if not items:
            return None

        args = list(self.extra_args)
        if prompt:
            args.extend(["--prompt", f"{prompt}> "])

        # fzf draws on the terminal itself, so capturing its output streams is safe
        invocation = Invocation(self.binary, args)
        result = self.runner.run(invocation, input="\n".join(items) + "\n")

        if result.returncode in FZF_CANCEL_CODES:
            logger.debug("Selection cancelled (status %d)", result.returncode)
            return None
        if not result.ok:
            raise ToolError(str(invocation), result.returncode, result.stderr)

        choice = result.stdout.rstrip("\r\n")
        return choice or None


class ConsolePrompter(Prompter):
    """Prompter reading from the terminal through rich."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console

    def ask_int(self, message: str) -> Optional[int]:
        answer = Prompt.ask(message, console=self.console, default="", show_default=False)
        try:
            return int(answer.strip())
        except ValueError:
            return None
