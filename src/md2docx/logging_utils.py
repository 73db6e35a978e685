#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/logging_utils.py
"""Logging setup for the command-line interface.

The library itself only creates module loggers; handlers are installed here
and nowhere else.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install stderr (and optionally file) handlers on the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g. "INFO")
    log_file : str, optional
        Path of a log file that receives the same records as stderr
    trace_mode : bool, default False
        Include timestamps and logger names in every record

    Returns
    -------
    logging.Logger
        The configured root logger

    """
    level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.INFO)
    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            sys.stderr.write(f"WARNING: could not open log file {log_file}: {exc}\n")
            log_file = None

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if log_file:
        root_logger.info("Logging to file: %s", log_file)
    return root_logger


def resolve_log_level(log_level: str = "WARNING", verbose: bool = False, trace: bool = False) -> int:
    """Pick the effective level from the CLI flags.

    ``trace`` wins over everything. ``verbose`` lowers the level to DEBUG
    unless an explicit ``log_level`` other than the WARNING default was given.

    Parameters
    ----------
    log_level : str, default "WARNING"
        Level name from ``--log-level``
    verbose : bool, default False
        Whether ``--verbose`` was passed
    trace : bool, default False
        Whether ``--trace`` was passed

    Returns
    -------
    int
        Numeric logging level

    """
    if trace:
        return logging.DEBUG
    if verbose and log_level.upper() == "WARNING":
        return logging.DEBUG
    return getattr(logging, log_level.upper(), logging.WARNING)
