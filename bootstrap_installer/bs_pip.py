# bootstrap_installer/bs_pip.py
# -*- coding: utf-8 -*-
import logging
from typing import Optional

from bootstrap_installer.bs_os import OsFamily, PlatformProfile
from bootstrap_installer.bs_reporter import Reporter
from bootstrap_installer.bs_results import StepResult
from common.command_utils import command_exists, get_symbols, run_command
from settings.config_models import AppSettings

module_logger = logging.getLogger(__name__)

ENSURE_PIP_STEP = "ensure_pip"
MANUAL_PIP_HINT = "Please install pip manually for your system."


def ensure_pip(
    profile: PlatformProfile,
    app_settings: AppSettings,
    reporter: Reporter,
    current_logger: Optional[logging.Logger] = None,
) -> StepResult:
    """
    Checks that `pip_command` resolves on PATH, for system mode.

    Linux installs the distribution pip package when it is missing. macOS has
    no automatic remedy: the user is told to install pip and the step fails
    without running anything.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    pip_cmd = app_settings.pip_command

    if command_exists(pip_cmd):
        reporter.status("Pip is available.")
        run_command(
            [pip_cmd, "--version"],
            app_settings,
            check=False,
            current_logger=logger_to_use,
        )
        return StepResult.success(ENSURE_PIP_STEP, "Pip is available.")

    reporter.status("Pip is missing. Attempting to install pip...")
    if profile.os_family != OsFamily.LINUX or not profile.pip_package:
        reporter.status(MANUAL_PIP_HINT)
        logger_to_use.error(
            f"{symbols.get('error', '❌')} '{pip_cmd}' not found and no automatic install exists on {profile.display_name}."
        )
        return StepResult.failure(ENSURE_PIP_STEP, MANUAL_PIP_HINT)

    try:
        result = run_command(
            profile.install_args(profile.pip_package),
            app_settings,
            check=False,
            current_logger=logger_to_use,
        )
        install_rc = result.returncode
    except FileNotFoundError:
        install_rc = None
    return StepResult.installed(
        ENSURE_PIP_STEP,
        f"Install of {profile.pip_package} attempted.",
        install_rc=install_rc,
    )
