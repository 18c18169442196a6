"""External process helpers."""

import logging
import shlex
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from ..errors import ToolError, ToolNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class Invocation:
    """A program name plus its ordered argument list."""
    program: str
    args: list[str] = field(default_factory=list)

    @property
    def argv(self) -> list[str]:
        return [self.program] + list(self.args)

    def __str__(self) -> str:
        return shlex.join(self.argv)


@dataclass
class CommandResult:
    """Outcome of a finished invocation."""
    invocation: Invocation
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def lines(self) -> list[str]:
        """Non-empty stdout lines."""
        return [line for line in self.stdout.splitlines() if line.strip()]


class CommandRunner:
    """Runs external programs synchronously."""

    def __init__(
        self,
        cwd: Optional[Union[str, Path]] = None,
        env: Optional[dict[str, str]] = None,
    ):
        self.cwd = cwd
        self.env = env

    def run(
        self,
        invocation: Invocation,
        input: Optional[Union[str, bytes]] = None,
        capture: bool = True,
        check: bool = False,
        cwd: Optional[Union[str, Path]] = None,
        env: Optional[dict[str, str]] = None,
    ) -> CommandResult:
        """
        Run an invocation and wait for it to exit.

        Args:
            invocation: Program and arguments
            input: Data written to the child's stdin
            capture: Capture stdout/stderr instead of inheriting them
            check: Raise ToolError on a non-zero exit status
            cwd: Working directory override
            env: Full environment override

        Returns:
            CommandResult for the finished process

        Raises:
            ToolNotFoundError: If the program does not exist
            ToolError: If check is set and the program failed
        """
        logger.debug("Running: %s", invocation)
        binary = isinstance(input, bytes)

        try:
            proc = subprocess.run(
                invocation.argv,
                input=input,
                capture_output=capture,
                text=not binary,
                cwd=cwd or self.cwd,
                env=env or self.env,
            )
        except FileNotFoundError as e:
            raise ToolNotFoundError(invocation.program) from e

        stdout = proc.stdout or ""
        stderr = proc.stderr or ""
        if isinstance(stdout, bytes):
            stdout = stdout.decode("utf-8", errors="replace")
        if isinstance(stderr, bytes):
            stderr = stderr.decode("utf-8", errors="replace")

        result = CommandResult(
            invocation=invocation,
            returncode=proc.returncode,
            stdout=stdout,
            stderr=stderr,
        )
        logger.debug("Exit status %d: %s", result.returncode, invocation.program)

        if check and not result.ok:
            raise ToolError(str(invocation), result.returncode, result.stderr)
        return result

    def launch(
        self,
        invocation: Invocation,
        cwd: Optional[Union[str, Path]] = None,
    ) -> subprocess.Popen:
        """Start an invocation without waiting for it."""
        logger.debug("Launching: %s", invocation)
        try:
            return subprocess.Popen(invocation.argv, cwd=cwd or self.cwd, env=self.env)
        except FileNotFoundError as e:
            raise ToolNotFoundError(invocation.program) from e
