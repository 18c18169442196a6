"""Record an interactive shell session to a log file."""

import logging
import os
import shlex
import shutil
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import pexpect  # type: ignore[import-untyped]

from ..errors import (
    BeltError,
    ToolNotFoundError,
    UnsupportedPlatformError,
    ValidationError,
)
from ..utils.files import ensure_dir, timestamped_name

logger = logging.getLogger(__name__)


@dataclass
class TranscriptResult:
    """Where a transcript was written and what started it."""
    path: Path
    invoked_by: str
    exit_status: Optional[int] = None


def transcript_path(log_dir: Union[str, Path], now: Optional[datetime] = None) -> Path:
    """Create the log directory and return a fresh timestamped file path."""
    return ensure_dir(log_dir) / timestamped_name("transcript", ".log", now=now)


def default_shell() -> str:
    return os.environ.get("SHELL") or "/bin/sh"

def _has_terminal() -> bool:
    return sys.stdin.isatty()


def start_transcript(
    log_dir: Union[str, Path],
    shell: Optional[str] = None,
    invoked_by: Optional[str] = None,
) -> TranscriptResult:
    """
    Spawn an interactive shell whose output is copied into a log file.

    Blocks until the user leaves the shell.

    Raises:
        UnsupportedPlatformError: Where pexpect cannot spawn a pty
        ToolNotFoundError: If the shell cannot be found
        ValidationError: If stdin is not a terminal
        BeltError: If the shell could not be started
    """
    if not hasattr(pexpect, "spawn"):
        raise UnsupportedPlatformError("Session transcripts", sys.platform)

    shell = shell or default_shell()
    executable = shutil.which(shell)
    if not executable:
        raise ToolNotFoundError(shell)
    if not _has_terminal():
        raise ValidationError("Session transcripts need an interactive terminal")

    path = transcript_path(log_dir)
    invoked_by = invoked_by or shlex.join(sys.argv)

    try:
        child = pexpect.spawn(executable, env=dict(os.environ, SHELLBELT_TRANSCRIPT=str(path)))
    except pexpect.ExceptionPexpect as e:
        raise BeltError(f"Could not start {shell}: {e}") from e
    logger.info("Transcript started, output file is %s", path)

    with open(path, "wb") as log:
        header = f"Transcript start: {datetime.now().isoformat()}\nCommand: {invoked_by}\n"
        log.write(header.encode("utf-8"))

        child.logfile_read = log
        try:
            child.interact()
        finally:
            child.close()

        log.write(f"\nTranscript end: {datetime.now().isoformat()}\n".encode("utf-8"))

    return TranscriptResult(path=path, invoked_by=invoked_by, exit_status=child.exitstatus)
