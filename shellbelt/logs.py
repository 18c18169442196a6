"""Logging setup for the belt CLI."""

import logging
from typing import Optional

from rich.logging import RichHandler

from .ui import ui

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Route log records to the stderr console and an optional file."""
    root = logging.getLogger("shellbelt")
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
    root.propagate = False

    console_handler = RichHandler(
        console=ui.err_console,
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)
