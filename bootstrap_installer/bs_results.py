# bootstrap_installer/bs_results.py
# -*- coding: utf-8 -*-
"""
StepResult, the value every bootstrap step returns.

Steps report expected failures (a non-zero exit code, a missing tool with no
remedy) through a failed StepResult instead of exiting the process. The
orchestrator stops at the first fatal failure and the CLI turns the outcome
into the exit status.
"""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field


class StepStatus(str, Enum):
    OK = "ok"
    SKIPPED = "skipped"
    INSTALLED = "installed"
    FAILED = "failed"


class StepResult(BaseModel):
    """Outcome of a single bootstrap step.

    Attributes:
        step: Name of the step (e.g. ``"create_virtual_env"``).
        status: What happened.
        message: Human-readable summary, already printed to the user.
        detail: Extra facts such as return codes or paths.
    """

    model_config = {"frozen": True}

    step: str
    status: StepStatus
    message: str = ""
    detail: Dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status != StepStatus.FAILED

    @classmethod
    def success(cls, step: str, message: str = "", **detail: Any) -> "StepResult":
        return cls(step=step, status=StepStatus.OK, message=message, detail=detail)

    @classmethod
    def skipped(cls, step: str, message: str = "", **detail: Any) -> "StepResult":
        return cls(
            step=step, status=StepStatus.SKIPPED, message=message, detail=detail
        )

    @classmethod
    def installed(cls, step: str, message: str = "", **detail: Any) -> "StepResult":
        return cls(
            step=step, status=StepStatus.INSTALLED, message=message, detail=detail
        )

    @classmethod
    def failure(cls, step: str, message: str, **detail: Any) -> "StepResult":
        return cls(
            step=step, status=StepStatus.FAILED, message=message, detail=detail
        )
