#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Entry point for installing the native Linux build dependencies.

Detects apt-get, dnf, zypper, pacman or xbps-install (in that order) and
installs the matching package list through sudo or doas when available.

Exit status:
    0   dependencies installed (or --dry-run / --list-profiles)
    3   no supported package manager found (0 with --allow-unsupported)
    N   the package manager's own non-zero exit status
"""

import argparse
import logging
import sys
from typing import List, Optional

from common.core_utils import setup_logging
from common.orchestrator import exit_code_for
from linux_deps.errors import InstallFailure, UnsupportedPlatformError
from linux_deps.installer import DependencyInstaller
from linux_deps.profiles import PROFILES, get_profile
from setup.cli_handler import format_profiles, view_configuration
from setup.config_loader import load_app_settings

EXIT_SUCCESS = 0
EXIT_UNSUPPORTED_PLATFORM = 3


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Install the native libraries needed to build on Linux."
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
        "--profile",
        default=None,
        choices=[profile.name for profile in PROFILES],
        help="Only consider this package manager (default: probe all in order)",
    )
    parser.add_argument(
        "--search-path",
        default=None,
        help="Search path for package managers and escalators instead of $PATH",
    )
    parser.add_argument(
        "--allow-unsupported",
        action="store_true",
        default=None,
        help="Exit successfully when no supported package manager is found",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the install command instead of running it",
    )
    parser.add_argument(
        "--list-profiles",
        action="store_true",
        help="List the supported package managers and exit",
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

    if args.list_profiles:
        print(format_profiles())
        return EXIT_SUCCESS

    app_settings = load_app_settings(cli_args=args)
    setup_logging(
        log_level=app_settings.log_level,
        log_file=app_settings.log_file,
        log_prefix=app_settings.log_prefix,
        symbols=app_settings.symbols,
    )
    logger = logging.getLogger("install_linux_deps")
    symbols = app_settings.symbols

    if args.show_config:
        view_configuration(app_settings, logger)

    profiles = (get_profile(args.profile),) if args.profile else PROFILES
    installer = DependencyInstaller(app_settings, profiles=profiles, logger=logger)
    try:
        if args.dry_run:
            print(installer.describe(installer.plan()))
            return EXIT_SUCCESS
        installer.install()
    except UnsupportedPlatformError as e:
        if app_settings.linux_deps.allow_unsupported:
            logger.warning(f"{symbols.get('warning', '⚠️')} {e}")
            return EXIT_SUCCESS
        logger.error(f"{symbols.get('error', '❌')} {e}")
        return EXIT_UNSUPPORTED_PLATFORM
    except InstallFailure as e:
        logger.error(f"{symbols.get('error', '❌')} {e}")
        return exit_code_for(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
