"""Symbolic link creation."""

import logging
import os
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..errors import AlreadyExistsError, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class LinkResult:
    """A created link."""
    link: Path
    target: Path
    replaced: bool = False


def _exists(path: Path) -> bool:
    # lexists: a dangling link still occupies the name
    return os.path.lexists(path)


def _remove_existing(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def _check_not_containing(link: Path, target: Path) -> None:
    """Refuse to replace a path that is, or holds, the link target."""
    link_real = link.resolve()
    target_real = target.resolve()
    if link_real == target_real:
        raise ValidationError(f"Link and target are the same path: {link}")
    if link_real in target_real.parents:
        raise ValidationError(f"Target {target} is inside {link}, refusing to replace it")


def create_symlink(
    link: Union[str, Path],
    target: Union[str, Path],
    force: bool = False,
) -> LinkResult:
    """
    Create ``link`` pointing at ``target``.

    Raises:
        ValidationError: If the target does not exist
        AlreadyExistsError: If the link path exists and force is unset
        OSError: From the underlying link call
    """
    link = Path(link)
    target = Path(target)

    if not target.exists():
        raise ValidationError(f"Target does not exist: {target}")

    replaced = False
    if _exists(link):
        if not force:
            raise AlreadyExistsError(str(link))
        if not link.is_symlink():
            _check_not_containing(link, target)
        logger.info("Replacing existing %s", link)
        _remove_existing(link)
        replaced = True

    is_dir = target.is_dir()
    if sys.platform == "win32":
        os.symlink(target, link, target_is_directory=is_dir)
    else:
        os.symlink(target, link)

    logger.debug("Linked %s -> %s", link, target)
    return LinkResult(link=link, target=target, replaced=replaced)
