"""
Shared logging configuration for the Cells model layer.

This module centralizes logging setup so that all components
(core, conversion utility, Swagger loader, CLI) can log in a
consistent way.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import LoggingConfig


CONVERSION_LOGGER = "cells.api_client"


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Configure application-wide logging.

    Writes error.log, warning.log and debug.log under ``log_dir`` plus
    the console, and conversion.log for the ``cells.api_client`` logger.

    This function is idempotent: calling it multiple times will not
    re-add handlers if they already exist.
    """

    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger()

    # Avoid configuring logging twice.
    if getattr(root_logger, "_cells_logging_configured", False):
        return

    log_dir = config.log_dir
    os.makedirs(log_dir, exist_ok=True)

    root_logger.setLevel(config.log_level.upper())

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s [%(message)s]",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Error log
    error_handler = logging.FileHandler(os.path.join(log_dir, "error.log"))
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)

    # Warning log
    warning_handler = logging.FileHandler(os.path.join(log_dir, "warning.log"))
    warning_handler.setLevel(logging.WARNING)
    warning_handler.setFormatter(formatter)

    # Debug log
    debug_handler = logging.FileHandler(os.path.join(log_dir, "debug.log"))
    debug_handler.setLevel(logging.DEBUG)
    debug_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level.upper())
    console_handler.setFormatter(formatter)

    root_logger.addHandler(error_handler)
    root_logger.addHandler(warning_handler)
    root_logger.addHandler(debug_handler)
    root_logger.addHandler(console_handler)

    root_logger._cells_logging_configured = True  # type: ignore[attr-defined]

    # Dedicated log for the conversion utility: coercion fallbacks are
    # logged at DEBUG and must be kept even when the root level is higher.
    try:
        conversion_logger = logging.getLogger(CONVERSION_LOGGER)

        if not getattr(conversion_logger, "_cells_conversion_logging_configured", False):
            conversion_handler = logging.FileHandler(os.path.join(log_dir, "conversion.log"))
            conversion_handler.setLevel(logging.DEBUG)
            conversion_handler.setFormatter(formatter)

            conversion_logger.addHandler(conversion_handler)
            conversion_logger.setLevel(logging.DEBUG)
            # Root handlers still get the records (warnings, errors).
            conversion_logger.propagate = True

            conversion_logger._cells_conversion_logging_configured = True  # type: ignore[attr-defined]
    except OSError:
        root_logger.exception("Failed to configure the conversion log handler")


def get_logger(name: str) -> logging.Logger:
    """
    Convenience helper to get a logger for a given module or subsystem.
    """

    return logging.getLogger(name)
