# bootstrap_installer/bootstrap_process.py
# -*- coding: utf-8 -*-
"""
This module assembles the notebook bootstrap out of its steps and runs it.

A run detects the operating system, makes sure a Python 3 interpreter is
present and then follows one of two tails depending on the install mode:

* venv mode creates an isolated environment and installs the notebook
  package with that environment's own pip;
* system mode makes sure pip3 is present and installs the package with it.

Every step returns a StepResult. The first failed step ends the run and
nothing done before it is rolled back.
"""

import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from bootstrap_installer.bs_notebook import install_notebook
from bootstrap_installer.bs_os import PlatformProfile, detect_os
from bootstrap_installer.bs_pip import ensure_pip
from bootstrap_installer.bs_python import ensure_python
from bootstrap_installer.bs_reporter import Reporter
from bootstrap_installer.bs_results import StepResult
from bootstrap_installer.bs_venv import create_virtual_env
from common.command_utils import get_symbols
from common.orchestrator import Orchestrator
from settings.config_models import AppSettings

module_logger = logging.getLogger(__name__)


class BootstrapOutcome(BaseModel):
    """Everything a finished run produced."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    results: List[StepResult]
    profile: Optional[PlatformProfile] = None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    @property
    def failed_step(self) -> Optional[StepResult]:
        return next((r for r in self.results if not r.ok), None)


def build_orchestrator(
    app_settings: AppSettings,
    reporter: Reporter,
    logger: Optional[logging.Logger] = None,
    base_dir: Optional[Path] = None,
) -> Orchestrator:
    """Queues the steps that follow OS detection for the configured mode."""
    orchestrator = Orchestrator(app_settings, reporter, logger)

    if app_settings.use_venv:
        orchestrator.add_task(
            "Python 3 and venv support",
            ensure_python,
            banner="Checking for Python 3 and Venv support...",
        )
        orchestrator.add_task(
            "Virtual environment",
            create_virtual_env,
            banner=f"Creating Virtual Environment ({app_settings.venv_name})...",
            kwargs={"base_dir": base_dir},
        )
        orchestrator.add_task(
            "Jupyter Notebook",
            install_notebook,
            banner="Installing Jupyter Notebook inside Virtual Environment...",
            kwargs={"base_dir": base_dir},
        )
    else:
        orchestrator.add_task(
            "Python 3",
            ensure_python,
            banner="Checking for Python 3...",
        )
        orchestrator.add_task(
            "Pip",
            ensure_pip,
            banner="Checking for Pip (Python Package Manager)...",
        )
        orchestrator.add_task(
            "Jupyter Notebook",
            install_notebook,
            banner="Installing Jupyter Notebook...",
        )
    return orchestrator


def run_bootstrap_orchestration(
    app_settings: AppSettings,
    os_type: Optional[str] = None,
    reporter: Optional[Reporter] = None,
    logger: Optional[logging.Logger] = None,
    base_dir: Optional[Path] = None,
) -> BootstrapOutcome:
    """
    Runs the whole bootstrap and reports its progress.

    Args:
        app_settings: The settings of the run.
        os_type: OS type signal to classify. None reads OSTYPE, falling back
            to sys.platform.
        reporter: Destination of the user-facing output. Defaults to stdout.
        logger: An optional logger instance.
        base_dir: Directory the environment is created in. Defaults to the
            current working directory.

    Returns:
        The BootstrapOutcome. Callers exit with `outcome.exit_code`.
    """
    effective_logger = logger or module_logger
    reporter = reporter or Reporter()
    symbols = get_symbols(app_settings)

    if app_settings.use_venv:
        reporter.banner("Starting Setup (Safe Mode)")
    else:
        reporter.banner("Starting Environment Setup")

    reporter.banner("Detecting Operating System...")
    detect_result, profile = detect_os(
        os_type, app_settings, reporter, effective_logger
    )
    if profile is None:
        effective_logger.error(
            f"{symbols.get('error', '❌')} {detect_result.message}"
        )
        return BootstrapOutcome(ok=False, results=[detect_result])

    orchestrator = build_orchestrator(
        app_settings, reporter, effective_logger, base_dir
    )
    ok = orchestrator.run(profile)
    results = [detect_result] + orchestrator.results

    if not ok:
        return BootstrapOutcome(ok=False, results=results, profile=profile)

    reporter.banner("Setup Complete!")
    if app_settings.use_venv:
        reporter.activation_hint(app_settings.venv_name)
    effective_logger.info(
        f"{symbols.get('sparkles', '✨')} Bootstrap finished ({app_settings.install_mode.value} mode)."
    )
    return BootstrapOutcome(ok=True, results=results, profile=profile)
