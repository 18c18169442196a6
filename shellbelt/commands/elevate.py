"""Run commands in an elevated shell."""

import sys
from typing import Optional

from ..errors import ToolError, UnsupportedPlatformError, ValidationError
from ..utils.process import CommandResult, CommandRunner, Invocation


def join_commands(commands: list[str]) -> str:
    """Join commands into one compound statement."""
    return "; ".join(c.strip() for c in commands if c.strip())


def _ps_quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def build_elevation(statement: str, shell: str = "pwsh") -> Invocation:
    """Invocation that re-launches ``shell`` elevated and waits for it."""
    script = (
        f"$p = Start-Process -FilePath {_ps_quote(shell)} -Verb RunAs -Wait -PassThru "
        f"-ArgumentList '-NoProfile','-Command',{_ps_quote(statement)}; "
        "exit $p.ExitCode"
    )
    return Invocation("powershell", ["-NoProfile", "-NonInteractive", "-Command", script])


def run_elevated(
    commands: list[str],
    shell: str = "pwsh",
    runner: Optional[CommandRunner] = None,
    platform: Optional[str] = None,
) -> CommandResult:
    """
    Run commands as administrator and wait for them to finish.

    Raises:
        ValidationError: If no command was given
        UnsupportedPlatformError: On anything but Windows
        ToolError: If the elevated shell exits non-zero
    """
    platform = platform or sys.platform
    statement = join_commands(commands)
    if not statement:
        raise ValidationError("No command to run")

    if platform != "win32":
        raise UnsupportedPlatformError("Elevated execution", platform)

    runner = runner or CommandRunner()
    invocation = build_elevation(statement, shell=shell)
    result = runner.run(invocation, capture=False)
    if not result.ok:
        raise ToolError(
            statement,
            result.returncode,
            message=f"Elevated command failed with status {result.returncode}",
        )
    return result
