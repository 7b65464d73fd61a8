"""Logging configuration for the grading run."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    verbose: bool = False,
    quiet: bool = False,
    debug_file: Path | None = None,
    logger_name: str = "gradebot",
) -> logging.Logger:
    """
    Configure and return the grading logger.

    Check modules log through children of this logger, so configuring it
    once covers the whole pipeline.

    Args:
        verbose: If True, stderr shows DEBUG messages instead of INFO and up.
        quiet: If True, nothing is logged to stderr (totals-only output).
        debug_file: Optional path to a log file that always receives DEBUG.
        logger_name: Name of the logger instance.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    # Clear any existing handlers for this specific logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    logger.disabled = False
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S"
    )

    if not quiet:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(debug_file, mode="a")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
