"""Diagnostic logging for ruledocs.

Command output (tables, ``configEmoji`` tuples, rewritten docs) goes to stdout.
Everything logged here goes to stderr, and optionally to a log file that keeps
a timestamped DEBUG trace of provider requests regardless of ``--verbose``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "ruledocs"
CONSOLE_HANDLER = "ruledocs.console"
FILE_HANDLER = "ruledocs.file"

CONSOLE_FORMAT = "[ruledocs] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``ruledocs.<name>``, or the root ruledocs logger when no name is given."""
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(*, verbose: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """Install the console handler and, when ``log_file`` is given, a file handler.

    Only handlers installed by a previous call are replaced, so repeated CLI
    invocations in one process do not duplicate output.
    """
    console_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.propagate = False

    for handler in list(logger.handlers):
        if handler.get_name() in {CONSOLE_HANDLER, FILE_HANDLER}:
            logger.removeHandler(handler)
            handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.set_name(CONSOLE_HANDLER)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is None:
        logger.setLevel(console_level)
        return logger

    log_file = log_file.expanduser()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    trace = logging.FileHandler(log_file, encoding="utf-8")
    trace.set_name(FILE_HANDLER)
    trace.setLevel(logging.DEBUG)
    trace.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(trace)
    logger.setLevel(logging.DEBUG)
    return logger


__all__ = ["configure_logging", "get_logger"]
