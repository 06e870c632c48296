"""
Logging setup for tools that drive the generator.

Library modules only call logging.getLogger(__name__); handlers are attached
here, once, by whichever entry point runs first.

Usage:
    from tilecollapse.logging_config import setup_logging
    setup_logging(logging.INFO)
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

ROOT_LOGGER = "tilecollapse"
MAX_LOG_SIZE = 5 * 1024 * 1024
BACKUP_COUNT = 3


def setup_logging(
    console_level: int = logging.WARNING,
    log_file: Optional[Union[Path, str]] = None,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """
    Attach a stderr handler (and optionally a rotating file handler) to the
    package logger. Safe to call again: existing handlers are replaced.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter("%(levelname)-8s | %(name)-30s | %(message)s"))
    root.addHandler(console)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(path, maxBytes=MAX_LOG_SIZE, backupCount=BACKUP_COUNT, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-30s | %(funcName)-20s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        root.addHandler(fh)

    root.propagate = False
    return root
