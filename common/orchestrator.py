# common/orchestrator.py
# -*- coding: utf-8 -*-
"""
Centralized orchestrator for managing and executing sequences of steps.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from bootstrap_installer.bs_reporter import Reporter
from bootstrap_installer.bs_results import StepResult
from common.command_utils import get_symbols
from settings.config_models import AppSettings


class Orchestrator:
    """Runs a series of bootstrap steps against one platform profile."""

    def __init__(
        self,
        app_settings: AppSettings,
        reporter: Reporter,
        orchestrator_logger: Optional[logging.Logger] = None,
    ):
        """
        Initializes the Orchestrator.

        Args:
            app_settings: The settings of the run.
            reporter: Destination of banners and status lines.
            orchestrator_logger: An optional logger instance.
        """
        self.app_settings = app_settings
        self.reporter = reporter
        self.logger = orchestrator_logger or logging.getLogger(__name__)
        self.tasks: List[Dict[str, Any]] = []
        self.results: List[StepResult] = []

    def add_task(
        self,
        name: str,
        func: Callable[..., StepResult],
        banner: Optional[str] = None,
        kwargs: Optional[Dict[str, Any]] = None,
        fatal: bool = True,
    ):
        """
        Adds a step to the execution list.

        Args:
            name: A human-readable name for the step.
            func: Called as func(profile, app_settings, reporter, **kwargs)
                and returning a StepResult.
            banner: Heading printed before the step runs.
            kwargs: Extra keyword arguments for the function.
            fatal: If True, a failed step halts the remaining ones.
        """
        self.tasks.append({
            "name": name,
            "func": func,
            "banner": banner,
            "kwargs": kwargs or {},
            "fatal": fatal,
        })
        self.logger.debug(f"Task '{name}' added to the queue.")

    def run(self, profile: Any) -> bool:
        """
        Executes all added steps in sequence.

        Returns:
            True if no fatal step failed, False otherwise. The individual
            outcomes are collected in `self.results`.
        """
        symbols = get_symbols(self.app_settings)
        self.logger.debug("Orchestration started.")
        for i, task in enumerate(self.tasks):
            task_name = task["name"]
            self.logger.debug(
                f"--- Stage {i + 1}: Running task '{task_name}' ---"
            )
            if task["banner"]:
                self.reporter.banner(task["banner"])

            try:
                result = task["func"](
                    profile,
                    self.app_settings,
                    self.reporter,
                    **task["kwargs"],
                )
            except Exception as e:
                self.logger.critical(
                    f"{symbols.get('critical', '🔥')} Task '{task_name}' failed: {e}", exc_info=True
                )
                result = StepResult.failure(task_name, str(e))

            self.results.append(result)

            if result.ok:
                self.logger.debug(
                    f"{symbols.get('success', '✅')} Task '{task_name}' completed ({result.status.value})."
                )
                continue

            if task["fatal"]:
                self.logger.error(
                    f"A fatal error occurred in '{task_name}'. Halting orchestration."
                )
                return False
            self.logger.warning(
                f"Task '{task_name}' was non-fatal. Continuing orchestration."
            )

        self.logger.debug(
            f"{symbols.get('sparkles', '✨')} Orchestration finished successfully."
        )
        return True
