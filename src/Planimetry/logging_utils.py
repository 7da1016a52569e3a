# ============================================================================
# Planimetry - Logging Utilities
#
# Purpose: Apply LoggingConfig to the package's diagnostic loggers
# Inputs: LoggingConfig
# Outputs: Configured "Planimetry" logger hierarchy
# Dependencies: logging (stdlib), config
# Usage: setup_logging(config.logging); logger = get_logger(__name__)
#
# Changelog:
#   2026-03-02: Initial logging setup
#   2026-03-14: setup_logging takes the LoggingConfig model; the level is
#               applied to the package logger on every call
# ============================================================================

import logging
import sys
from typing import Optional

from Planimetry.config import LoggingConfig

PACKAGE_LOGGER = "Planimetry"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: Optional[logging.StreamHandler] = None


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Route Planimetry diagnostics to stderr using ``config``.

    The handler is attached once to the package logger; later calls only
    change its level and format, so the CLI can reconfigure after loading
    a config file.

    Args:
        config: Logging settings (defaults to LoggingConfig())

    Returns:
        The package logger
    """
    global _handler

    config = config or LoggingConfig()
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    if _handler is None:
        _handler = logging.StreamHandler()
        package_logger.addHandler(_handler)
    else:
        _handler.setStream(sys.stderr)

    _handler.setFormatter(logging.Formatter(config.format, datefmt=DATE_FORMAT))
    package_logger.setLevel(config.level)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module inside the package (pass ``__name__``)."""
    return logging.getLogger(name)
