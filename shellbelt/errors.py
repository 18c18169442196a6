"""Error types raised by shellbelt operations."""

from typing import Optional


class BeltError(Exception):
    """Base class for every error an operation reports to the CLI."""


class ValidationError(BeltError):
    """Input failed a precondition check before any side effect."""


class AlreadyExistsError(BeltError):
    """Destination already exists and overwriting was not requested."""

    def __init__(self, path: str):
        super().__init__(f"Already exists: {path}")
        self.path = path


class ConfigError(BeltError):
    """Configuration file could not be read."""


class UnsupportedPlatformError(BeltError):
    """Operation has no implementation on the running platform."""

    def __init__(self, operation: str, platform: str):
        super().__init__(f"{operation} is not supported on {platform}")
        self.operation = operation
        self.platform = platform


class ToolNotFoundError(BeltError):
    """External program could not be started."""

    def __init__(self, program: str):
        super().__init__(f"Command not found: {program}")
        self.program = program


class ToolError(BeltError):
    """External program exited with a non-zero status."""

    def __init__(
        self,
        command: str,
        returncode: int,
        stderr: str = "",
        message: Optional[str] = None,
    ):
        text = message or f"{command} exited with status {returncode}"
        if stderr:
            text = f"{text}: {stderr.strip()}"
        super().__init__(text)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
