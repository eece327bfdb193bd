# settings/config_loader.py
# -*- coding: utf-8 -*-
"""
Configuration loader for the bootstrap.

Handles loading settings from Pydantic model defaults, a YAML file,
environment variables, and command-line arguments, applying a specific
order of precedence:
1. Pydantic Model Defaults
2. Environment Variables (NB_BOOTSTRAP_*, via Pydantic's BaseSettings)
3. YAML Configuration File
4. Command-Line Arguments
"""

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .config_models import CONFIG_FILE_DEFAULT, AppSettings

module_logger = logging.getLogger(__name__)

# argparse destinations that map one-to-one onto AppSettings fields.
CLI_SETTING_KEYS = (
    "install_mode",
    "venv_name",
    "package",
    "python_command",
    "pip_command",
    "verify_installs",
    "log_level",
)


class ConfigurationError(Exception):
    """Raised when the resolved configuration does not validate."""


def _deep_update(
    source: Dict[str, Any], overrides: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Recursively updates `source` with the non-None values of `overrides`.

    Nested dictionaries are merged key by key; any other value replaces the
    one in `source`.
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
    return source


def load_yaml_config(
    config_file_path: Path, current_logger: Optional[logging.Logger] = None
) -> Dict[str, Any]:
    """
    Reads a YAML mapping from `config_file_path`.

    A missing file, an unreadable file, or a document that is not a mapping
    yields an empty dict; the last two are logged as warnings.
    """
    logger_to_use = current_logger if current_logger else module_logger

    if not (config_file_path.exists() and config_file_path.is_file()):
        logger_to_use.debug(
            f"Configuration file '{config_file_path}' not found. Using defaults, environment variables, and CLI args."
        )
        return {}

    try:
        with open(config_file_path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger_to_use.warning(
            f"Could not parse YAML config file '{config_file_path}': {e}. Using defaults and environment variables."
        )
        return {}
    except (IOError, UnicodeDecodeError) as e:
        logger_to_use.warning(
            f"Could not read config file '{config_file_path}': {e}. Using defaults and environment variables."
        )
        return {}

    if yaml_data is None:
        return {}
    if not isinstance(yaml_data, dict):
        logger_to_use.warning(
            f"Config file '{config_file_path}' does not contain a valid YAML dictionary. Ignoring."
        )
        return {}

    logger_to_use.info(f"Loaded configuration from {config_file_path}")
    return yaml_data


def load_app_settings(
    cli_args: Optional[argparse.Namespace] = None,
    config_file_path: Optional[str] = None,
    current_logger: Optional[logging.Logger] = None,
) -> AppSettings:
    """
    Loads the bootstrap settings with the precedence
    defaults < environment < YAML file < command line.

    Args:
        cli_args: Parsed command-line arguments. Attributes that are None
            are treated as "not given".
        config_file_path: Path to the YAML configuration file. Falls back to
            `cli_args.config` and then to CONFIG_FILE_DEFAULT in the working
            directory.
        current_logger: Optional logger to use instead of the module logger.

    Returns:
        A validated AppSettings instance.

    Raises:
        ConfigurationError: If the merged values do not validate.
    """
    logger_to_use = current_logger if current_logger else module_logger

    if config_file_path is None:
        config_file_path = getattr(cli_args, "config", None) or CONFIG_FILE_DEFAULT

    try:
        # BaseSettings reads NB_BOOTSTRAP_* here, on top of the model defaults.
        current_values_dict = AppSettings().model_dump(mode="json")
    except ValidationError as e:
        logger_to_use.error(f"Configuration validation failed: {e}")
        raise ConfigurationError(str(e)) from e

    yaml_data = load_yaml_config(Path(config_file_path), logger_to_use)
    current_values_dict = _deep_update(current_values_dict, yaml_data)

    if cli_args is not None:
        cli_arg_dict = vars(cli_args)
        mapped_cli_values = {
            key: cli_arg_dict[key]
            for key in CLI_SETTING_KEYS
            if cli_arg_dict.get(key) is not None
        }
        current_values_dict = _deep_update(
            current_values_dict, mapped_cli_values
        )

    try:
        final_settings = AppSettings(**current_values_dict)
    except ValidationError as e:
        logger_to_use.error(f"Configuration validation failed: {e}")
        raise ConfigurationError(str(e)) from e

    logger_to_use.debug("Successfully loaded and validated bootstrap settings")
    return final_settings


def dump_settings_yaml(app_settings: AppSettings) -> str:
    """Renders the effective settings as a YAML document."""
    return yaml.safe_dump(
        app_settings.model_dump(mode="json"),
        sort_keys=False,
        allow_unicode=True,
    )
