#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Entry point for bootstrapping a developer machine.

On Linux installs the native build dependencies, elsewhere installs the
process manager; then creates, migrates and seeds the development database.
Exits with the status of the first failing step.
"""

import argparse
import logging
import sys
from typing import List, Optional

from common.core_utils import setup_logging
from common.orchestrator import OrchestrationError
from dev_bootstrap.orchestrator import run_dev_bootstrap
from setup.cli_handler import view_configuration
from setup.config_loader import load_app_settings


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Bootstrap a developer machine: dependencies and database."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML configuration file (default: ./config.yaml)",
    )
    parser.add_argument(
        "--skip-linux-deps",
        action="store_true",
        default=None,
        help="Do not install native Linux dependencies",
    )
    parser.add_argument(
        "--skip-database",
        action="store_true",
        default=None,
        help="Do not create, migrate or seed the database",
    )
    parser.add_argument(
        "--search-path",
        default=None,
        help="Search path used to detect installed tools instead of $PATH",
    )
    parser.add_argument(
        "--log-file", default=None, help="Also append log output to this file"
    )
    parser.add_argument(
        "--log-prefix", default=None, help="Prefix for every log line"
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Log the effective configuration before running",
    )
    return parser.parse_args(args)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    app_settings = load_app_settings(cli_args=args)
    setup_logging(
        log_level=app_settings.log_level,
        log_file=app_settings.log_file,
        log_prefix=app_settings.log_prefix,
        symbols=app_settings.symbols,
    )
    logger = logging.getLogger("bootstrap")

    if args.show_config:
        view_configuration(app_settings, logger)

    try:
        run_dev_bootstrap(app_settings, logger)
    except OrchestrationError as e:
        logger.error(
            f"{app_settings.symbols.get('error', '❌')} Bootstrap halted at '{e.task_name}' (exit status {e.exit_code})."
        )
        return e.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
