"""Forward piped lines as arguments to another command."""

from typing import Iterable, Optional

from ..utils.process import CommandRunner, Invocation


def read_arguments(lines: Iterable[str]) -> list[str]:
    """One argument per non-empty input line, line endings stripped."""
    return [line.rstrip("\r\n") for line in lines if line.strip()]


def pipe_to_command(
    command: str,
    lines: Iterable[str],
    extra_args: Optional[list[str]] = None,
    runner: Optional[CommandRunner] = None,
) -> int:
    """
    Run a command with piped input appended to its arguments.

    Output goes straight to the caller's streams.

    Returns:
        The child's exit status
    """
    runner = runner or CommandRunner()
    args = list(extra_args or []) + read_arguments(lines)
    result = runner.run(Invocation(command, args), capture=False)
    return result.returncode
