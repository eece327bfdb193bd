# bootstrap_installer/bs_python.py
# -*- coding: utf-8 -*-
"""
Ensures a Python 3 interpreter, and in venv mode the OS venv support package.
"""

import logging
from typing import Optional

from bootstrap_installer.bs_os import OsFamily, PlatformProfile
from bootstrap_installer.bs_reporter import Reporter
from bootstrap_installer.bs_results import StepResult
from common.command_utils import (
    check_package_installed,
    command_exists,
    get_symbols,
    run_command,
)
from settings.config_models import AppSettings

module_logger = logging.getLogger(__name__)

ENSURE_PYTHON_STEP = "ensure_python"


def _run_unverified(
    command, app_settings: AppSettings, logger: logging.Logger
) -> Optional[int]:
    """
    Runs a package manager command once without checking its outcome.

    Returns the exit code, or None when the executable itself is missing.
    """
    try:
        return run_command(
            command, app_settings, check=False, current_logger=logger
        ).returncode
    except FileNotFoundError:
        return None


def ensure_python(
    profile: PlatformProfile,
    app_settings: AppSettings,
    reporter: Reporter,
    current_logger: Optional[logging.Logger] = None,
) -> StepResult:
    """
    Makes sure `python_command` resolves on PATH.

    When it is missing the platform's update command runs, followed by an
    install of the interpreter package. The install is not re-checked unless
    `verify_installs` is set, so a failed package manager run still lets the
    bootstrap continue.

    In venv mode on Linux the venv support package is looked up in the dpkg
    database and installed when absent, again without re-checking.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    python_cmd = app_settings.python_command
    detail = {"python_install_attempted": False, "venv_install_attempted": False}

    if command_exists(python_cmd):
        if app_settings.use_venv:
            reporter.status("Python 3 is installed.")
        else:
            reporter.status("Python 3 is already installed.")
            _run_unverified([python_cmd, "--version"], app_settings, logger_to_use)
    else:
        reporter.status("Python 3 not found. Installing...")
        detail["python_install_attempted"] = True
        detail["update_rc"] = _run_unverified(
            list(profile.update_command), app_settings, logger_to_use
        )
        detail["install_rc"] = _run_unverified(
            profile.install_args("python3"), app_settings, logger_to_use
        )
        if app_settings.verify_installs and not command_exists(python_cmd):
            message = f"'{python_cmd}' is still not available after the install attempt."
            reporter.status(message)
            logger_to_use.error(f"{symbols.get('error', '❌')} {message}")
            return StepResult.failure(ENSURE_PYTHON_STEP, message, **detail)
        if detail["install_rc"] != 0:
            logger_to_use.warning(
                f"{symbols.get('warning', '!')} Installing python3 did not succeed "
                f"(rc {detail['install_rc']}). Continuing without verification."
            )

    if app_settings.use_venv and profile.os_family == OsFamily.LINUX:
        if not check_package_installed(
            profile.venv_package, app_settings, logger_to_use
        ):
            reporter.status(f"Installing {profile.venv_package}...")
            detail["venv_install_attempted"] = True
            detail["venv_install_rc"] = _run_unverified(
                profile.install_args(profile.venv_package),
                app_settings,
                logger_to_use,
            )

    if detail["python_install_attempted"] or detail["venv_install_attempted"]:
        return StepResult.installed(
            ENSURE_PYTHON_STEP, "Python 3 install attempted.", **detail
        )
    return StepResult.success(
        ENSURE_PYTHON_STEP, "Python 3 is installed.", **detail
    )
