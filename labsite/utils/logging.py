"""Simple logging utilities for labsite."""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_cli_logging(verbose: bool = False) -> None:
    """Route package logs to stderr for CLI runs."""
    root = logging.getLogger("labsite")
    root.setLevel(logging.INFO if verbose else logging.WARNING)
    stream_handlers = [
        h
        for h in root.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]
    for handler in stream_handlers:
        # sys.stderr may have been swapped since the handler was created
        handler.setStream(sys.stderr)
    if not stream_handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)


def setup_tui_logging(log_dir: Optional[Path] = None) -> Path:
    """Send package logs to a file while the TUI owns the terminal.

    Returns:
        Path of the log file
    """
    from labsite.config.constants import LABSITE_CONFIG_DIR

    log_dir = log_dir or LABSITE_CONFIG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "tui_debug.log"

    root = logging.getLogger("labsite")
    root.setLevel(logging.DEBUG)
    # Console output would corrupt the TUI display
    for handler in list(root.handlers):
        if not isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
    if not any(
        isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_file
        for h in root.handlers
    ):
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)
    return log_file
