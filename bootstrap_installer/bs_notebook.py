# bootstrap_installer/bs_notebook.py
# -*- coding: utf-8 -*-
import logging
from pathlib import Path
from typing import List, Optional

from bootstrap_installer.bs_os import PlatformProfile
from bootstrap_installer.bs_reporter import Reporter
from bootstrap_installer.bs_results import StepResult
from bootstrap_installer.bs_venv import venv_executable
from common.command_utils import get_symbols, run_command
from settings.config_models import AppSettings

module_logger = logging.getLogger(__name__)

INSTALL_NOTEBOOK_STEP = "install_notebook"
INSTALL_FAILED_MESSAGE = "Jupyter installation failed."


def notebook_install_command(
    app_settings: AppSettings, base_dir: Optional[Path] = None
) -> List[str]:
    """
    The pip invocation that installs the package.

    In venv mode this is always the environment's own pip, which is not
    subject to the externally-managed-environment restriction of the system
    interpreter.
    """
    if app_settings.use_venv:
        venv_dir = (base_dir or Path(".")) / app_settings.venv_name
        pip_path = venv_executable(venv_dir, "pip")
        pip = str(pip_path) if base_dir else f"./{pip_path.as_posix()}"
    else:
        pip = app_settings.pip_command
    return [pip, "install", app_settings.package]


def install_notebook(
    profile: PlatformProfile,
    app_settings: AppSettings,
    reporter: Reporter,
    current_logger: Optional[logging.Logger] = None,
    base_dir: Optional[Path] = None,
) -> StepResult:
    """Installs the notebook package and reports the outcome."""
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    command = notebook_install_command(app_settings, base_dir)

    try:
        returncode = run_command(
            command, app_settings, check=False, current_logger=logger_to_use
        ).returncode
    except FileNotFoundError:
        returncode = None

    if returncode != 0:
        reporter.status(INSTALL_FAILED_MESSAGE)
        logger_to_use.error(
            f"{symbols.get('error', '❌')} `{' '.join(command)}` did not succeed (rc {returncode})."
        )
        return StepResult.failure(
            INSTALL_NOTEBOOK_STEP,
            INSTALL_FAILED_MESSAGE,
            returncode=returncode,
            command=command,
        )

    if app_settings.use_venv:
        message = f"Jupyter Notebook successfully installed in '{app_settings.venv_name}'."
    else:
        message = "Jupyter Notebook successfully installed."
    reporter.status(message)
    logger_to_use.info(f"{symbols.get('package', '📦')} {app_settings.package} installed.")
    return StepResult.success(INSTALL_NOTEBOOK_STEP, message, command=command)
