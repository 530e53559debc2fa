# setup/config_loader.py
# -*- coding: utf-8 -*-
"""
Configuration loader for the bootstrap tooling.

Handles loading settings from Pydantic model defaults, environment variables,
a YAML file, and command-line arguments, applying a specific order of
precedence:
1. Pydantic Model Defaults
2. Environment Variables (via Pydantic's BaseSettings)
3. YAML Configuration File
4. Command-Line Arguments
"""

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .config_models import AppSettings

module_logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config.yaml"

# CLI destination -> (settings section or None for top level, field name)
CLI_SETTING_MAP: Dict[str, Any] = {
    "log_prefix": (None, "log_prefix"),
    "log_file": (None, "log_file"),
    "allow_unsupported": ("linux_deps", "allow_unsupported"),
    "search_path": ("linux_deps", "search_path"),
    "skip_linux_deps": ("bootstrap", "skip_linux_deps"),
    "skip_database": ("bootstrap", "skip_database"),
}


def _deep_update(
    source: Dict[str, Any], overrides: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Recursively updates a dictionary `source` with values from another dictionary
    `overrides`. Nested dictionaries are merged; None values in `overrides` never
    replace an existing value.

    Parameters:
        source: Dict[str, Any]
            The dictionary to be updated. This dictionary gets modified in place.
        overrides: Dict[str, Any]
            The dictionary containing values to update or add to the `source`.

    Returns:
        Dict[str, Any]:
            The updated dictionary after applying all `overrides` to the input `source`.
    """
    for key, value in overrides.items():
        if (
            isinstance(value, dict)
            and key in source
            and isinstance(source[key], dict)
        ):
            source[key] = _deep_update(source[key], value)
        elif value is not None:
            source[key] = value
        elif key not in source:
            source[key] = value
    return source


def read_yaml_config(
    config_path: Path, current_logger: Optional[logging.Logger] = None
) -> Dict[str, Any]:
    """
    Reads a YAML mapping from ``config_path``.

    A missing, unreadable or malformed file is logged and treated as empty so
    the defaults and environment still apply.
    """
    logger_to_use = current_logger if current_logger else module_logger

    if not (config_path.exists() and config_path.is_file()):
        logger_to_use.debug(
            f"Configuration file '{config_path}' not found. Using defaults, environment variables, and CLI args."
        )
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger_to_use.warning(
            f"Could not parse YAML config file '{config_path}': {e}. Using defaults and environment variables."
        )
        return {}
    except IOError as e:
        logger_to_use.warning(
            f"Could not read config file '{config_path}': {e}. Using defaults and environment variables."
        )
        return {}

    if yaml_data is None:
        return {}
    if not isinstance(yaml_data, dict):
        logger_to_use.warning(
            f"Config file '{config_path}' does not contain a valid YAML dictionary. Ignoring."
        )
        return {}

    logger_to_use.info(f"Loaded configuration from {config_path}")
    return yaml_data


def cli_overrides(cli_args: argparse.Namespace) -> Dict[str, Any]:
    """Maps parsed CLI arguments onto the nested settings structure."""
    overrides: Dict[str, Any] = {}
    cli_arg_dict = vars(cli_args)

    if cli_arg_dict.get("verbose"):
        overrides["log_level"] = "DEBUG"

    for cli_key, (section, field_name) in CLI_SETTING_MAP.items():
        cli_value = cli_arg_dict.get(cli_key)
        if cli_value is None:
            continue
        if section is None:
            overrides[field_name] = cli_value
        else:
            overrides.setdefault(section, {})[field_name] = cli_value
    return overrides


def load_app_settings(
    cli_args: Optional[argparse.Namespace] = None,
    config_file_path: Optional[str] = None,
    current_logger: Optional[logging.Logger] = None,
) -> AppSettings:
    """
    Loads application settings with the following precedence:
    1. Pydantic Model Defaults.
    2. Environment Variables (``LOG_LEVEL``, ``LINUX_DEPS_*``, ``BOOTSTRAP_*``).
    3. Values from the YAML configuration file.
    4. Command-Line Arguments (highest precedence, overrides all else).

    Args:
        cli_args: Parsed command-line arguments (from argparse). A ``config``
            attribute, when set, names the YAML file.
        config_file_path: Path to the YAML configuration file. Relative paths
            are resolved against the working directory.
        current_logger: Optional logger to use instead of the module logger.

    Returns:
        An instance of AppSettings with the fully resolved configuration.

    Raises:
        SystemExit: The merged configuration failed validation.
    """
    logger_to_use = current_logger if current_logger else module_logger

    if config_file_path is None:
        cli_config = getattr(cli_args, "config", None) if cli_args else None
        config_file_path = cli_config or DEFAULT_CONFIG_FILE

    # BaseSettings reads the environment here, so this dict already holds
    # Model Defaults < Environment Variables.
    try:
        settings_after_env_and_defaults = AppSettings()
    except ValidationError as e:
        logger_to_use.error(f"Configuration validation failed: {e}")
        raise SystemExit(f"Configuration error: {e}") from e
    current_values_dict = settings_after_env_and_defaults.model_dump(
        exclude_defaults=False
    )

    yaml_config_path = Path(config_file_path)
    if not yaml_config_path.is_absolute():
        yaml_config_path = Path.cwd() / yaml_config_path

    yaml_data = read_yaml_config(yaml_config_path, logger_to_use)
    if yaml_data:
        current_values_dict = _deep_update(current_values_dict, yaml_data)

    if cli_args:
        current_values_dict = _deep_update(
            current_values_dict, cli_overrides(cli_args)
        )

    try:
        final_settings = AppSettings(**current_values_dict)
    except ValidationError as e:
        logger_to_use.error(f"Configuration validation failed: {e}")
        raise SystemExit(f"Configuration error: {e}") from e

    logger_to_use.debug("Successfully loaded and validated application settings")

    return final_settings
