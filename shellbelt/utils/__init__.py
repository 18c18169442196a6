"""Utility functions for shellbelt."""

from .files import ensure_dir, tail_segments, timestamped_name
from .process import CommandResult, CommandRunner, Invocation

__all__ = [
    "ensure_dir",
    "tail_segments",
    "timestamped_name",
    "CommandResult",
    "CommandRunner",
    "Invocation",
]
