# bootstrap_installer/bs_venv.py
# -*- coding: utf-8 -*-
"""
Creation of the isolated environment the notebook is installed into.
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from bootstrap_installer.bs_os import PlatformProfile
from bootstrap_installer.bs_reporter import Reporter
from bootstrap_installer.bs_results import StepResult
from common.command_utils import get_symbols, run_command
from settings.config_models import AppSettings

module_logger = logging.getLogger(__name__)

CREATE_VENV_STEP = "create_virtual_env"


def venv_executable(venv_dir: Path, name: str) -> Path:
    """Path of an executable inside the environment's bin directory."""
    return venv_dir / "bin" / name


def create_virtual_env(
    profile: PlatformProfile,
    app_settings: AppSettings,
    reporter: Reporter,
    current_logger: Optional[logging.Logger] = None,
    base_dir: Optional[Path] = None,
) -> StepResult:
    """
    Creates `venv_name` with `python -m venv` unless the directory exists.

    An existing directory is taken as a finished environment without further
    checks, which makes re-runs skip straight to the install step.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    venv_name = app_settings.venv_name
    venv_dir = (base_dir or Path.cwd()) / venv_name

    if venv_dir.is_dir():
        reporter.status(f"Virtual environment '{venv_name}' already exists.")
        return StepResult.skipped(
            CREATE_VENV_STEP,
            f"Virtual environment '{venv_name}' already exists.",
            venv_dir=str(venv_dir),
        )

    try:
        result = run_command(
            [app_settings.python_command, "-m", "venv", venv_name],
            app_settings,
            check=True,
            capture_output=True,
            current_logger=logger_to_use,
            cwd=str(base_dir) if base_dir else None,
        )
        returncode = result.returncode
    except subprocess.CalledProcessError as e:
        returncode = e.returncode
    except FileNotFoundError:
        returncode = None

    if returncode != 0:
        reporter.status("Failed to create virtual environment.")
        logger_to_use.error(
            f"{symbols.get('error', '❌')} '{app_settings.python_command} -m venv {venv_name}' did not succeed (rc {returncode})."
        )
        return StepResult.failure(
            CREATE_VENV_STEP,
            "Failed to create virtual environment.",
            returncode=returncode,
            venv_dir=str(venv_dir),
        )

    reporter.status(f"Successfully created '{venv_name}'.")
    return StepResult.success(
        CREATE_VENV_STEP,
        f"Successfully created '{venv_name}'.",
        venv_dir=str(venv_dir),
    )
