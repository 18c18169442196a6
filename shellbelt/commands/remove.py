"""Recursive forced removal."""

import logging
import os
import shutil
import stat
import sys
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


def _make_writable_and_retry(func, path, _exc) -> None:
    # Read-only entries block removal on Windows
    os.chmod(path, stat.S_IWRITE | stat.S_IREAD | stat.S_IEXEC)
    func(path)


def force_remove(path: Union[str, Path]) -> Path:
    """
    Delete a path and everything below it without prompting.

    Returns:
        The resolved absolute path that was removed

    Raises:
        FileNotFoundError: If nothing exists at the path
        OSError: If removal is blocked
    """
    target = Path(os.path.abspath(path))
    if not os.path.lexists(target):
        raise FileNotFoundError(f"No such file or directory: '{target}'")

    if target.is_dir() and not target.is_symlink():
        logger.debug("Removing tree %s", target)
        if sys.version_info >= (3, 12):
            shutil.rmtree(target, onexc=_make_writable_and_retry)
        else:
            shutil.rmtree(target, onerror=_make_writable_and_retry)
    else:
        logger.debug("Removing %s", target)
        try:
            target.unlink()
        except PermissionError:
            os.chmod(target, stat.S_IWRITE | stat.S_IREAD)
            target.unlink()

    return target
