# settings/config_models.py
# -*- coding: utf-8 -*-
"""
Pydantic models for the bootstrap configuration.

This module defines the structured settings for a bootstrap run, including
defaults, type annotations, and descriptions. It utilizes Pydantic for data
validation and settings management.
"""

from enum import Enum
from typing import Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Default Static Values (can be overridden by config file/env/cli) ---
VENV_NAME_DEFAULT: str = "jupyter_env"
PACKAGE_DEFAULT: str = "notebook"
PYTHON_COMMAND_DEFAULT: str = "python3"
PIP_COMMAND_DEFAULT: str = "pip3"
LOG_LEVEL_DEFAULT: str = "INFO"
CONFIG_FILE_DEFAULT: str = "notebook_bootstrap.yaml"

SYMBOLS_DEFAULT: Dict[str, str] = {
    "success": "✅",
    "error": "❌",
    "warning": "⚠️",
    "info": "ℹ️",
    "step": "➡️",
    "gear": "⚙️",
    "package": "📦",
    "rocket": "🚀",
    "sparkles": "✨",
    "critical": "🔥",
    "debug": "🐛",
}


class InstallMode(str, Enum):
    """Where the notebook package ends up."""

    VENV = "venv"
    SYSTEM = "system"


class AppSettings(BaseSettings):
    """Main bootstrap settings."""

    model_config = SettingsConfigDict(
        env_prefix="NB_BOOTSTRAP_", extra="ignore"
    )

    install_mode: InstallMode = Field(
        default=InstallMode.VENV,
        description="'venv' installs into an isolated environment, 'system' uses pip3 directly.",
    )
    venv_name: str = Field(
        default=VENV_NAME_DEFAULT,
        description="Directory name of the virtual environment, relative to the working directory.",
    )
    package: str = Field(
        default=PACKAGE_DEFAULT,
        description="Python package installed at the end of the run.",
    )
    python_command: str = Field(
        default=PYTHON_COMMAND_DEFAULT,
        description="Interpreter looked up on PATH and used to create the environment.",
    )
    pip_command: str = Field(
        default=PIP_COMMAND_DEFAULT,
        description="Package manager looked up on PATH in system mode.",
    )
    verify_installs: bool = Field(
        default=False,
        description="Re-check PATH after installing the interpreter and fail if it is still missing.",
    )
    log_level: str = Field(
        default=LOG_LEVEL_DEFAULT, description="Logging level for stderr output."
    )

    symbols: Dict[str, str] = Field(
        default_factory=lambda: dict(SYMBOLS_DEFAULT)
    )

    @field_validator("venv_name")
    @classmethod
    def _venv_name_is_plain_directory(cls, value: str) -> str:
        value = value.strip()
        if not value or value in (".", ".."):
            raise ValueError("venv_name must name a directory")
        if value.startswith("-"):
            raise ValueError(
                f"venv_name '{value}' must not start with '-'"
            )
        if "/" in value or "\\" in value:
            raise ValueError(
                f"venv_name '{value}' must be a plain directory name without path separators"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def use_venv(self) -> bool:
        return self.install_mode == InstallMode.VENV
