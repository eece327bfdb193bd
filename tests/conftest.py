# tests/conftest.py
import io
import logging
import os
from unittest.mock import MagicMock

import pytest

from bootstrap_installer.bs_os import OsFamily, PlatformProfile
from bootstrap_installer.bs_reporter import Reporter
from settings.config_models import AppSettings, InstallMode


@pytest.fixture(autouse=True)
def _clean_bootstrap_env(monkeypatch):
    """Keep NB_BOOTSTRAP_* and OSTYPE from the developer shell out of tests."""
    for key in list(os.environ):
        if key.startswith("NB_BOOTSTRAP_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("OSTYPE", raising=False)


@pytest.fixture
def venv_settings():
    return AppSettings(install_mode=InstallMode.VENV)


@pytest.fixture
def system_settings():
    return AppSettings(install_mode=InstallMode.SYSTEM)


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def reporter(output):
    return Reporter(stream=output)


@pytest.fixture
def mock_logger():
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def linux_profile():
    return PlatformProfile(
        os_family=OsFamily.LINUX,
        os_type="linux-gnu",
        install_command=("sudo", "apt-get", "install", "-y"),
        update_command=("sudo", "apt-get", "update"),
        venv_package="python3-venv",
        pip_package="python3-pip",
    )


@pytest.fixture
def macos_profile():
    return PlatformProfile(
        os_family=OsFamily.MACOS,
        os_type="darwin23",
        install_command=("brew", "install"),
        update_command=("brew", "update"),
        venv_package="python3",
    )

