# -*- coding: utf-8 -*-
from unittest.mock import MagicMock

import pytest

from bootstrap_installer.bs_pip import MANUAL_PIP_HINT, ensure_pip
from bootstrap_installer.bs_results import StepStatus


@pytest.fixture
def mock_run_command(mocker):
    return mocker.patch(
        "bootstrap_installer.bs_pip.run_command",
        return_value=MagicMock(returncode=0),
    )


def test_available_pip_prints_version(
    mocker, mock_run_command, linux_profile, system_settings, reporter, output
):
    mocker.patch("bootstrap_installer.bs_pip.command_exists", return_value=True)

    result = ensure_pip(linux_profile, system_settings, reporter)

    assert result.status == StepStatus.OK
    assert output.getvalue() == "Pip is available.\n"
    assert mock_run_command.call_args.args[0] == ["pip3", "--version"]


def test_missing_pip_on_linux_installs_distribution_package(
    mocker, mock_run_command, linux_profile, system_settings, reporter, output
):
    mocker.patch("bootstrap_installer.bs_pip.command_exists", return_value=False)

    result = ensure_pip(linux_profile, system_settings, reporter)

    assert result.status == StepStatus.INSTALLED
    assert output.getvalue() == "Pip is missing. Attempting to install pip...\n"
    # A direct install, without refreshing the package index first.
    mock_run_command.assert_called_once()
    assert mock_run_command.call_args.args[0] == [
        "sudo",
        "apt-get",
        "install",
        "-y",
        "python3-pip",
    ]


def test_missing_pip_on_macos_fails_without_installing(
    mocker, mock_run_command, macos_profile, system_settings, reporter, output
):
    mocker.patch("bootstrap_installer.bs_pip.command_exists", return_value=False)

    result = ensure_pip(macos_profile, system_settings, reporter)

    assert result.status == StepStatus.FAILED
    assert output.getvalue().splitlines()[-1] == MANUAL_PIP_HINT
    mock_run_command.assert_not_called()


def test_custom_pip_command_is_looked_up(
    mocker, mock_run_command, linux_profile, reporter
):
    from settings.config_models import AppSettings, InstallMode

    settings = AppSettings(install_mode=InstallMode.SYSTEM, pip_command="pip3.12")
    command_exists = mocker.patch(
        "bootstrap_installer.bs_pip.command_exists", return_value=True
    )

    ensure_pip(linux_profile, settings, reporter)

    command_exists.assert_called_once_with("pip3.12")
