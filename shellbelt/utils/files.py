"""File utility functions."""

from datetime import datetime
from pathlib import Path
from typing import Optional, Union


def ensure_dir(path: Union[str, Path]) -> Path:
    """Ensure a directory exists, creating it if necessary."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def timestamped_name(
    prefix: str,
    suffix: str = ".log",
    now: Optional[datetime] = None,
) -> str:
    """Build a file name like ``prefix-20240131-235959.log``."""
    stamp = (now or datetime.now()).strftime("%Y%m%d-%H%M%S")
    return f"{prefix}-{stamp}{suffix}"


def tail_segments(path: Union[str, Path], count: int = 2) -> str:
    """Return the last ``count`` segments of a path joined with '/'."""
    p = Path(path)
    parts = list(p.parts)
    if parts and parts[0] == p.anchor:
        parts = parts[1:]
    return "/".join(parts[-count:])
