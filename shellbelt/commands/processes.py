"""Find running processes by name."""

import re
from dataclasses import dataclass
from typing import Iterable, Optional

import psutil

from ..errors import ValidationError


@dataclass
class ProcessInfo:
    """Snapshot of one running process."""
    pid: int
    name: str
    username: Optional[str] = None
    memory_rss: int = 0


def _snapshot(proc: psutil.Process) -> Optional[ProcessInfo]:
    info = proc.info
    name = info.get("name")
    if not name:
        return None
    memory = info.get("memory_info")
    return ProcessInfo(
        pid=info["pid"],
        name=name,
        username=info.get("username"),
        memory_rss=memory.rss if memory else 0,
    )


def find_processes(
    pattern: str,
    processes: Optional[Iterable[psutil.Process]] = None,
) -> list[ProcessInfo]:
    """Running processes whose name matches ``pattern``, ignoring case."""
    try:
        regex = re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise ValidationError(f"Invalid pattern {pattern!r}: {e}") from e

    if processes is None:
        # Entries we may not read come back as None instead of raising
        processes = psutil.process_iter(["pid", "name", "username", "memory_info"])

    matches = []
    for proc in processes:
        try:
            snapshot = _snapshot(proc)
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            continue
        if snapshot and regex.search(snapshot.name):
            matches.append(snapshot)

    return sorted(matches, key=lambda p: (p.name.lower(), p.pid))
