# -*- coding: utf-8 -*-
"""
Tests for the bootstrap_notebook command-line entry point.
"""

import logging

import pytest
import yaml

import bootstrap_notebook
from bootstrap_installer.bootstrap_process import BootstrapOutcome
from settings.config_models import InstallMode


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def mock_run(mocker):
    return mocker.patch(
        "bootstrap_notebook.run_bootstrap_orchestration",
        return_value=BootstrapOutcome(ok=True, results=[]),
    )


def test_parse_args_defaults():
    args = bootstrap_notebook.parse_args([])
    assert args.install_mode is None
    assert args.venv_name is None
    assert args.verify_installs is None
    assert args.verbose is False


def test_parse_args_modes_are_exclusive():
    with pytest.raises(SystemExit):
        bootstrap_notebook.parse_args(["--venv", "--system"])


def test_system_flag_selects_system_mode(isolated_cwd, mock_run):
    assert bootstrap_notebook.main(["--system"]) == 0

    settings = mock_run.call_args.args[0]
    assert settings.install_mode == InstallMode.SYSTEM


def test_options_reach_the_settings(isolated_cwd, mock_run):
    bootstrap_notebook.main(
        ["--venv-name", "lab_env", "--package", "jupyterlab", "--verify-installs", "--os-type", "darwin23"]
    )

    settings = mock_run.call_args.args[0]
    assert settings.venv_name == "lab_env"
    assert settings.package == "jupyterlab"
    assert settings.verify_installs is True
    assert mock_run.call_args.kwargs["os_type"] == "darwin23"


def test_config_file_is_read_from_working_directory(isolated_cwd, mock_run):
    (isolated_cwd / "notebook_bootstrap.yaml").write_text("venv_name: from_file\n")

    bootstrap_notebook.main([])

    assert mock_run.call_args.args[0].venv_name == "from_file"


def test_failed_outcome_exits_1(isolated_cwd, mocker):
    mocker.patch(
        "bootstrap_notebook.run_bootstrap_orchestration",
        return_value=BootstrapOutcome(ok=False, results=[]),
    )
    assert bootstrap_notebook.main([]) == 1


def test_invalid_configuration_exits_1(isolated_cwd, mock_run, capsys):
    assert bootstrap_notebook.main(["--venv-name", "a/b"]) == 1

    mock_run.assert_not_called()
    assert "Configuration error" in capsys.readouterr().err


def test_view_config_prints_yaml_and_skips_the_run(isolated_cwd, mock_run, capsys):
    assert bootstrap_notebook.main(["--view-config", "--system"]) == 0

    mock_run.assert_not_called()
    printed = yaml.safe_load(capsys.readouterr().out)
    assert printed["install_mode"] == "system"
    assert printed["venv_name"] == "jupyter_env"


def test_unknown_os_end_to_end(isolated_cwd, capsys):
    assert bootstrap_notebook.main(["--os-type", "msys"]) == 1

    out = capsys.readouterr().out
    assert "Unknown OS: msys\n" in out
    assert "This script supports Linux (apt) and macOS (brew).\n" in out


def test_non_utf8_config_file_does_not_abort_the_run(isolated_cwd, mock_run):
    (isolated_cwd / "notebook_bootstrap.yaml").write_bytes(b"venv_name: caf\xe9_env\n")

    assert bootstrap_notebook.main([]) == 0

    assert mock_run.call_args.args[0].venv_name == "jupyter_env"


def test_option_like_venv_name_exits_1(isolated_cwd, mock_run):
    assert bootstrap_notebook.main(["--venv-name=-h"]) == 1

    mock_run.assert_not_called()
