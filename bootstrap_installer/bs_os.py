# bootstrap_installer/bs_os.py
# -*- coding: utf-8 -*-
"""
Operating system detection.

The OS type signal is classified into a family, and the family decides which
package manager commands the later steps use. The result is an immutable
PlatformProfile that is handed to every step explicitly.
"""

import logging
import os
import sys
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel

from bootstrap_installer.bs_reporter import Reporter
from bootstrap_installer.bs_results import StepResult
from common.command_utils import get_elevated_command_prefix, get_symbols
from settings.config_models import AppSettings

module_logger = logging.getLogger(__name__)

DETECT_OS_STEP = "detect_os"
UNSUPPORTED_OS_HINT = "This script supports Linux (apt) and macOS (brew)."


class OsFamily(str, Enum):
    LINUX = "linux"
    MACOS = "macos"
    UNKNOWN = "unknown"


class PlatformProfile(BaseModel):
    """Package manager invocations for the detected OS family."""

    model_config = {"frozen": True}

    os_family: OsFamily
    os_type: str
    install_command: Tuple[str, ...]
    update_command: Tuple[str, ...]
    venv_package: str
    # Distribution package that provides pip3, where one exists.
    pip_package: Optional[str] = None

    @property
    def display_name(self) -> str:
        return "macOS" if self.os_family == OsFamily.MACOS else "Linux"

    def install_args(self, *packages: str) -> List[str]:
        return list(self.install_command) + list(packages)


def current_os_type() -> str:
    """
    The OS type signal of this process.

    Bash exports OSTYPE only when asked to, so sys.platform stands in when
    the variable is absent. An exported but empty OSTYPE counts as absent
    too, rather than being classified as an unknown OS.
    """
    return os.environ.get("OSTYPE") or sys.platform


def classify_os_type(os_type: str) -> OsFamily:
    """Maps an OSTYPE / sys.platform value onto an OS family."""
    value = (os_type or "").strip()
    if value.startswith("linux-gnu") or value == "linux":
        return OsFamily.LINUX
    if value.startswith("darwin"):
        return OsFamily.MACOS
    return OsFamily.UNKNOWN


def build_platform_profile(
    os_family: OsFamily, os_type: str = ""
) -> Optional[PlatformProfile]:
    """Returns the profile of a supported family, None for UNKNOWN."""
    if os_family == OsFamily.LINUX:
        sudo_prefix = tuple(get_elevated_command_prefix())
        return PlatformProfile(
            os_family=os_family,
            os_type=os_type,
            install_command=sudo_prefix + ("apt-get", "install", "-y"),
            update_command=sudo_prefix + ("apt-get", "update"),
            venv_package="python3-venv",
            pip_package="python3-pip",
        )
    if os_family == OsFamily.MACOS:
        return PlatformProfile(
            os_family=os_family,
            os_type=os_type,
            install_command=("brew", "install"),
            update_command=("brew", "update"),
            # Homebrew's python formula ships the venv module.
            venv_package="python3",
        )
    return None


def detect_os(
    os_type: Optional[str],
    app_settings: AppSettings,
    reporter: Reporter,
    current_logger: Optional[logging.Logger] = None,
) -> Tuple[StepResult, Optional[PlatformProfile]]:
    """
    Classifies the OS type and builds the matching PlatformProfile.

    Args:
        os_type: The OS type signal. None reads it from the process.
        app_settings: Settings of the current run.
        reporter: Destination of the user-facing lines.
        current_logger: Optional logger.

    Returns:
        The step result and, when the platform is supported, its profile.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    if os_type is None:
        os_type = current_os_type()

    family = classify_os_type(os_type)
    profile = build_platform_profile(family, os_type)
    if profile is None:
        reporter.status(f"Unknown OS: {os_type}")
        reporter.status(UNSUPPORTED_OS_HINT)
        return (
            StepResult.failure(
                DETECT_OS_STEP, f"Unknown OS: {os_type}", os_type=os_type
            ),
            None,
        )

    reporter.status(f"OS Detected: {profile.display_name}")
    logger_to_use.debug(
        f"{symbols.get('info', 'ℹ️')} OS type '{os_type}' -> {family.value}; "
        f"install: {' '.join(profile.install_command)}; update: {' '.join(profile.update_command)}"
    )
    return (
        StepResult.success(
            DETECT_OS_STEP,
            f"OS Detected: {profile.display_name}",
            os_family=family.value,
        ),
        profile,
    )
