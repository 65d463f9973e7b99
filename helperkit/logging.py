"""Opt-in logging for helperkit.

The package disables its loguru records on import. configure_logging() adds a
handler that only receives helperkit records, so handlers the application
already set up are left alone.
"""

import sys
from typing import TextIO

from loguru import logger

from helperkit.config import get_settings


LOG_FORMAT = "{time:HH:mm:ss} | {level: <8} | {name}:{function} - {message} | {extra}"


def configure_logging(level: str | None = None, sink: TextIO | None = None) -> int:
    """Start emitting helperkit log records.

    Args:
        level: Minimum log level. Defaults to the configured HELPERKIT_LOG_LEVEL.
        sink: Stream to write to. Defaults to stderr.

    Returns:
        The loguru handler id, for logger.remove().
    """
    handler_id = logger.add(
        sink or sys.stderr,
        level=level or get_settings().log_level,
        format=LOG_FORMAT,
        filter="helperkit",
        colorize=False,
    )
    logger.enable("helperkit")
    return handler_id
