#!/usr/bin/env python3
# filename: bootstrap_notebook.py
# -*- coding: utf-8 -*-
"""
Entry point for the Jupyter Notebook bootstrap.
"""

import argparse
import sys
from typing import List, Optional

from bootstrap_installer.bootstrap_process import run_bootstrap_orchestration
from common.logging_config import setup_logging
from settings.config_loader import (
    ConfigurationError,
    dump_settings_yaml,
    load_app_settings,
)
from settings.config_models import (
    CONFIG_FILE_DEFAULT,
    VENV_NAME_DEFAULT,
    InstallMode,
)


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Detects the operating system, ensures Python 3 is present and installs Jupyter Notebook."
    )
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--venv",
        dest="install_mode",
        action="store_const",
        const=InstallMode.VENV.value,
        help="Install into an isolated virtual environment (default).",
    )
    mode_group.add_argument(
        "--system",
        dest="install_mode",
        action="store_const",
        const=InstallMode.SYSTEM.value,
        help="Install with the system pip3 instead of a virtual environment.",
    )
    parser.add_argument(
        "--venv-name",
        metavar="NAME",
        help=f"Directory name of the virtual environment (default: {VENV_NAME_DEFAULT}).",
    )
    parser.add_argument(
        "--package", help="Package to install (default: notebook)."
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help=f"YAML configuration file (default: {CONFIG_FILE_DEFAULT}).",
    )
    parser.add_argument(
        "--verify-installs",
        action="store_const",
        const=True,
        help="Fail if the interpreter is still missing after installing it.",
    )
    parser.add_argument(
        "--os-type",
        metavar="VALUE",
        help="OS type to classify instead of $OSTYPE / the running platform.",
    )
    parser.add_argument(
        "--view-config",
        action="store_true",
        help="Print the effective configuration as YAML and exit.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    return parser.parse_args(args)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the bootstrap and return the process exit code."""
    parsed_args = parse_args(argv)
    logger = setup_logging(verbose=parsed_args.verbose)

    try:
        app_settings = load_app_settings(parsed_args, current_logger=logger)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if not parsed_args.verbose:
        logger = setup_logging(log_level=app_settings.log_level)

    if parsed_args.view_config:
        print(dump_settings_yaml(app_settings), end="")
        return 0

    outcome = run_bootstrap_orchestration(
        app_settings, os_type=parsed_args.os_type, logger=logger
    )
    return outcome.exit_code


if __name__ == "__main__":
    sys.exit(main())
