"""
Configuration models and loading logic for the Cells model layer.

The goal of this module is to provide a single place where runtime
configuration (logging settings, extra Swagger definitions, etc.)
is defined and loaded from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional

from .errors import ConfigError


_TRUE_VALUES = ("true", "1", "yes")


@dataclass
class LoggingConfig:
    """
    Logging-related configuration.
    """

    log_dir: str = "logs"
    log_level: str = "INFO"


@dataclass
class SwaggerConfig:
    """
    Extra Swagger definitions to load on top of the built-in models.
    """

    definitions_file: str
    replace_builtin: bool = False


@dataclass
class CellsConfig:
    """
    Top-level configuration.
    """

    logging: Optional[LoggingConfig] = None
    swagger: Optional[SwaggerConfig] = None


def parse_bool(value: Optional[str], default: bool = False) -> bool:
    """
    Interpret an environment-style flag ("true", "1", "yes").
    """

    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def load_config() -> CellsConfig:
    """
    Load configuration from environment variables.

    Environment variables:
        CELLS_LOG_DIR: Directory for log files (default: "logs").
        CELLS_LOG_LEVEL: Root log level (default: "INFO").

        CELLS_SWAGGER_FILE: Swagger 2.0 document with extra definitions.
        CELLS_SWAGGER_REPLACE: Let loaded definitions replace built-in
            models of the same name (default: false).

    If CELLS_SWAGGER_FILE is not set, ``swagger`` is None and only the
    built-in models are available.
    """

    log_dir = os.getenv("CELLS_LOG_DIR", "logs")
    log_level = os.getenv("CELLS_LOG_LEVEL", "INFO")
    if not log_level.strip():
        raise ConfigError("CELLS_LOG_LEVEL must not be empty")
    logging_cfg = LoggingConfig(log_dir=log_dir, log_level=log_level)

    swagger_file = os.getenv("CELLS_SWAGGER_FILE")
    swagger_replace_raw = os.getenv("CELLS_SWAGGER_REPLACE")

    swagger_cfg: Optional[SwaggerConfig]
    if swagger_file:
        swagger_cfg = SwaggerConfig(
            definitions_file=swagger_file,
            replace_builtin=parse_bool(swagger_replace_raw),
        )
    elif swagger_replace_raw:
        raise ConfigError(
            "CELLS_SWAGGER_FILE must be set when CELLS_SWAGGER_REPLACE is provided"
        )
    else:
        swagger_cfg = None

    return CellsConfig(
        logging=logging_cfg,
        swagger=swagger_cfg,
    )
