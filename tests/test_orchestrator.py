# -*- coding: utf-8 -*-
"""
Tests for the centralized orchestrator module.
"""

from unittest.mock import MagicMock

from bootstrap_installer.bs_results import StepResult
from common.orchestrator import Orchestrator
from settings.config_models import AppSettings


class TestOrchestrator:
    """Tests for the Orchestrator class."""

    def test_init(self, venv_settings, reporter):
        logger = MagicMock()

        orchestrator = Orchestrator(venv_settings, reporter, logger)

        assert orchestrator.app_settings == venv_settings
        assert orchestrator.reporter is reporter
        assert orchestrator.logger == logger
        assert orchestrator.tasks == []
        assert orchestrator.results == []

    def test_add_task(self, venv_settings, reporter):
        orchestrator = Orchestrator(venv_settings, reporter, MagicMock())
        task_func = MagicMock()

        orchestrator.add_task(
            "Test Task", task_func, "Banner", {"kwarg1": "value1"}, False
        )

        assert orchestrator.tasks == [
            {
                "name": "Test Task",
                "func": task_func,
                "banner": "Banner",
                "kwargs": {"kwarg1": "value1"},
                "fatal": False,
            }
        ]

    def test_run_success(self, venv_settings, reporter, linux_profile):
        orchestrator = Orchestrator(venv_settings, reporter, MagicMock())
        task1 = MagicMock(return_value=StepResult.success("one"))
        task2 = MagicMock(return_value=StepResult.skipped("two"))
        orchestrator.add_task("Task 1", task1)
        orchestrator.add_task("Task 2", task2, kwargs={"base_dir": None})

        assert orchestrator.run(linux_profile) is True

        task1.assert_called_once_with(linux_profile, venv_settings, reporter)
        task2.assert_called_once_with(
            linux_profile, venv_settings, reporter, base_dir=None
        )
        assert [r.step for r in orchestrator.results] == ["one", "two"]

    def test_banners_are_printed_before_each_task(
        self, venv_settings, reporter, output, linux_profile
    ):
        orchestrator = Orchestrator(venv_settings, reporter, MagicMock())

        def task(profile, app_settings, reporter):
            reporter.status("working")
            return StepResult.success("task")

        orchestrator.add_task("Task", task, banner="Doing the thing...")
        orchestrator.run(linux_profile)

        assert output.getvalue() == "\n>>> Doing the thing...\n\nworking\n"

    def test_fatal_failure_halts(self, venv_settings, reporter, linux_profile):
        logger = MagicMock()
        orchestrator = Orchestrator(venv_settings, reporter, logger)
        task1 = MagicMock(return_value=StepResult.failure("one", "broken"))
        task2 = MagicMock()
        orchestrator.add_task("Task 1", task1)
        orchestrator.add_task("Task 2", task2)

        assert orchestrator.run(linux_profile) is False

        task2.assert_not_called()
        assert len(orchestrator.results) == 1
        logger.error.assert_called_once_with(
            "A fatal error occurred in 'Task 1'. Halting orchestration."
        )

    def test_exception_becomes_failed_result(
        self, venv_settings, reporter, linux_profile
    ):
        logger = MagicMock()
        orchestrator = Orchestrator(venv_settings, reporter, logger)
        task1 = MagicMock(side_effect=RuntimeError("Task 1 failed"))
        task2 = MagicMock()
        orchestrator.add_task("Task 1", task1)
        orchestrator.add_task("Task 2", task2)

        assert orchestrator.run(linux_profile) is False

        task2.assert_not_called()
        assert orchestrator.results[0].message == "Task 1 failed"
        logger.critical.assert_called_once_with(
            "🔥 Task 'Task 1' failed: Task 1 failed", exc_info=True
        )

    def test_non_fatal_failure_continues(
        self, venv_settings, reporter, linux_profile
    ):
        orchestrator = Orchestrator(venv_settings, reporter, MagicMock())
        task1 = MagicMock(return_value=StepResult.failure("one", "meh"))
        task2 = MagicMock(return_value=StepResult.success("two"))
        orchestrator.add_task("Task 1", task1, fatal=False)
        orchestrator.add_task("Task 2", task2)

        assert orchestrator.run(linux_profile) is True

        task2.assert_called_once()
        assert [r.ok for r in orchestrator.results] == [False, True]

    def test_log_symbols_come_from_settings(self, reporter, linux_profile):
        settings = AppSettings(
            symbols={"critical": "!!", "success": "OK", "sparkles": "**"}
        )
        logger = MagicMock()
        orchestrator = Orchestrator(settings, reporter, logger)
        orchestrator.add_task("Task 1", MagicMock(return_value=StepResult.success("one")))
        orchestrator.add_task("Task 2", MagicMock(side_effect=RuntimeError("boom")))

        orchestrator.run(linux_profile)

        logger.debug.assert_any_call("OK Task 'Task 1' completed (ok).")
        logger.critical.assert_called_once_with(
            "!! Task 'Task 2' failed: boom", exc_info=True
        )

    def test_finish_message_uses_sparkles_symbol(self, reporter, linux_profile):
        settings = AppSettings(symbols={"sparkles": "**"})
        logger = MagicMock()
        orchestrator = Orchestrator(settings, reporter, logger)

        assert orchestrator.run(linux_profile) is True

        logger.debug.assert_any_call("** Orchestration finished successfully.")
