# bootstrap_installer/bs_reporter.py
# -*- coding: utf-8 -*-
"""
User-facing output of a bootstrap run.

Everything the user is meant to read goes through Reporter and lands on
stdout; diagnostics go through logging to stderr.
"""

import sys
from pathlib import PurePosixPath
from typing import Optional, TextIO

BANNER_PREFIX = ">>>"


def activation_command(venv_name: str) -> str:
    """The shell command that activates the environment and starts Jupyter."""
    activate_script = PurePosixPath(venv_name) / "bin" / "activate"
    return f"source {activate_script} && jupyter notebook"


class Reporter:
    """Writes banners and status lines for the user."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved per write so a replaced sys.stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def banner(self, message: str) -> None:
        """A step heading, set apart by a blank line on either side."""
        self.stream.write(f"\n{BANNER_PREFIX} {message}\n\n")
        self.stream.flush()

    def status(self, message: str) -> None:
        self.stream.write(f"{message}\n")
        self.stream.flush()

    def activation_hint(self, venv_name: str) -> None:
        self.status("To use Jupyter, run this command:")
        self.status(activation_command(venv_name))
