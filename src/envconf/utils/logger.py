from __future__ import annotations

import logging
import sys
from typing import IO

import structlog

PACKAGE_LOGGER = "envconf"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_cli_handler: logging.Handler | None = None


def get_logger(name: str = __name__):
    # backed by stdlib logging so the package stays quiet until the host configures it
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(level: str = "WARNING", stream: IO[str] | None = None) -> None:
    """Send package log events at ``level`` and above to ``stream`` (stderr by default)."""
    global _cli_handler
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level '{level}'")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _cli_handler is not None:
        package_logger.removeHandler(_cli_handler)
    _cli_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    package_logger.addHandler(_cli_handler)
    package_logger.setLevel(numeric)
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(numeric))


def reset_logging() -> None:
    global _cli_handler
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _cli_handler is not None:
        package_logger.removeHandler(_cli_handler)
        _cli_handler = None
    package_logger.setLevel(logging.NOTSET)
    structlog.reset_defaults()
