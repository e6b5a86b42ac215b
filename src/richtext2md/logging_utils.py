"""Logging helpers for applications embedding richtext2md.

The library itself only emits records through module-level loggers under the
``richtext2md`` namespace; the package installs a ``NullHandler`` so nothing is
printed unless the host application opts in through :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "richtext2md"

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def resolve_log_level(log_level: int | str) -> int:
    """Map a numeric level or level name to a logging level, defaulting to INFO."""
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the package logger.

    Only the ``richtext2md`` logger is touched; handlers already installed on it
    are replaced so repeated calls do not duplicate output.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "DEBUG").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.

    Returns
    -------
    logging.Logger
        The configured package logger.

    """
    resolved_level = resolve_log_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(resolved_level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        if not isinstance(handler, logging.NullHandler):
            handler.close()
    package_logger.propagate = False

    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(TRACE_FORMAT if trace_mode else PLAIN_FORMAT, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:  # pragma: no cover - handled at runtime
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.debug("Logging to file: %s", log_file)

    return package_logger


__all__ = ["PACKAGE_LOGGER_NAME", "configure_logging", "resolve_log_level"]
