"""
Configuration storage and loading for the Cells model layer.

This module provides functions to save and load configuration from both JSON
and .env files, supporting manual file editing next to the environment.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .config import CellsConfig, LoggingConfig, SwaggerConfig, load_config, parse_bool
from .errors import ConfigError


CONFIG_FILE = os.getenv("CELLS_CONFIG_FILE", "config.json")
ENV_FILE = os.getenv("CELLS_ENV_FILE", ".env")


def _config_to_dict(config: CellsConfig) -> Dict[str, Any]:
    """Convert CellsConfig to a dictionary."""
    result: Dict[str, Any] = {
        "logging": {
            "log_dir": config.logging.log_dir if config.logging else "logs",
            "log_level": config.logging.log_level if config.logging else "INFO",
        },
    }

    if config.swagger:
        result["swagger"] = {
            "definitions_file": config.swagger.definitions_file,
            "replace_builtin": config.swagger.replace_builtin,
        }

    return result


def _dict_to_config(data: Dict[str, Any]) -> CellsConfig:
    """Convert a dictionary to CellsConfig."""
    logging_data = data.get("logging", {})
    logging_cfg = LoggingConfig(
        log_dir=logging_data.get("log_dir", "logs"),
        log_level=logging_data.get("log_level", "INFO"),
    ) if logging_data else LoggingConfig()

    swagger_cfg: Optional[SwaggerConfig] = None
    if "swagger" in data and data["swagger"]:
        sw_data = data["swagger"]
        if sw_data.get("definitions_file"):
            swagger_cfg = SwaggerConfig(
                definitions_file=sw_data["definitions_file"],
                replace_builtin=bool(sw_data.get("replace_builtin", False)),
            )

    return CellsConfig(
        logging=logging_cfg,
        swagger=swagger_cfg,
    )


def load_config_from_env_file(env_path: str = ENV_FILE) -> Dict[str, Any]:
    """
    Load configuration from a .env file.

    Args:
        env_path: Path to the .env file.

    Returns:
        Dictionary with configuration values.

    Raises:
        ConfigError: If the file cannot be read.
    """
    env_file = Path(env_path)
    config_dict: Dict[str, Any] = {}

    if not env_file.exists():
        return config_dict

    try:
        with open(env_file, "r") as f:
            for line in f:
                line = line.strip()
                # Skip comments and empty lines
                if not line or line.startswith("#"):
                    continue
                if "=" in line:
                    key, value = line.split("=", 1)
                    key = key.strip()
                    value = value.strip()
                    if value.startswith('"') and value.endswith('"'):
                        value = value[1:-1]
                    elif value.startswith("'") and value.endswith("'"):
                        value = value[1:-1]
                    config_dict[key] = value
        return config_dict
    except OSError as e:
        raise ConfigError(f"Failed to load .env file: {e}") from e


def _env_dict_to_config(env_dict: Dict[str, Any]) -> CellsConfig:
    """Convert .env dictionary to CellsConfig."""
    logging_cfg = LoggingConfig(
        log_dir=env_dict.get("CELLS_LOG_DIR", "logs"),
        log_level=env_dict.get("CELLS_LOG_LEVEL", "INFO"),
    )

    swagger_cfg: Optional[SwaggerConfig] = None
    swagger_file = env_dict.get("CELLS_SWAGGER_FILE")
    if swagger_file:
        swagger_cfg = SwaggerConfig(
            definitions_file=swagger_file,
            replace_builtin=parse_bool(env_dict.get("CELLS_SWAGGER_REPLACE")),
        )

    return CellsConfig(
        logging=logging_cfg,
        swagger=swagger_cfg,
    )


def load_config_from_file(config_path: str = CONFIG_FILE, env_path: str = ENV_FILE) -> CellsConfig:
    """
    Load configuration from files. Tries .env file first, then JSON file.

    Priority: .env file > JSON file > environment variables (CELLS_*)

    Args:
        config_path: Path to the JSON configuration file.
        env_path: Path to the .env file.

    Returns:
        CellsConfig instance.

    Raises:
        ConfigError: If the files cannot be read or parsed.
    """
    config_file = Path(config_path)

    env_dict = load_config_from_env_file(env_path)
    if env_dict:
        return _env_dict_to_config(env_dict)

    if config_file.exists():
        try:
            with open(config_file, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load config file: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a JSON object")
        return _dict_to_config(data)

    return load_config()


def save_config_to_file(config: CellsConfig, config_path: str = CONFIG_FILE) -> None:
    """
    Save configuration to a JSON file.

    Args:
        config: CellsConfig instance to save.
        config_path: Path to the JSON configuration file.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_file = Path(config_path)
    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w") as f:
            json.dump(_config_to_dict(config), f, indent=2)
    except OSError as e:
        raise ConfigError(f"Failed to save config file: {e}") from e
