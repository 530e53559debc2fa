# setup/cli_handler.py
# -*- coding: utf-8 -*-
"""
Handles Command Line Interface (CLI) output for the bootstrap scripts.
"""

import logging
from typing import Optional, Sequence

from common.command_utils import format_command, log_bootstrap
from linux_deps.profiles import PROFILES, PackageManagerProfile
from setup.config_models import AppSettings

module_logger = logging.getLogger(__name__)


def format_profiles(
    profiles: Sequence[PackageManagerProfile] = PROFILES,
) -> str:
    """
    Renders the package manager profiles in probe order, one block per profile.
    """
    lines = []
    for position, profile in enumerate(profiles, start=1):
        lines.append(
            f"{position}. {profile.name} ({profile.distribution}) - detected by '{profile.detection_command}'"
        )
        lines.append(
            f"   command: {format_command(profile.command_template())}"
        )
    return "\n".join(lines)


def format_configuration(app_config: AppSettings) -> str:
    """
    Renders the effective configuration values, after CLI, YAML, environment
    and default values have been merged.
    """
    symbols = app_config.symbols
    bootstrap = app_config.bootstrap
    linux_deps = app_config.linux_deps

    config_text = f"{symbols.get('info', 'ℹ️')} Current effective configuration values (CLI > YAML > ENV > Defaults):\n\n"
    config_text += f"  Log Prefix:                    {app_config.log_prefix}\n"
    config_text += f"  Log Level:                     {app_config.log_level}\n"
    config_text += f"  Log File:                      {app_config.log_file or '[console only]'}\n\n"

    config_text += "  Linux Dependency Settings (linux_deps.*):\n"
    config_text += f"    Escalators:                  {', '.join(linux_deps.escalators) or '[none]'}\n"
    config_text += f"    Allow Unsupported:           {linux_deps.allow_unsupported}\n"
    config_text += f"    Search Path:                 {linux_deps.search_path or '[$PATH]'}\n\n"

    config_text += "  Bootstrap Settings (bootstrap.*):\n"
    config_text += f"    Process Manager:             {bootstrap.process_manager}\n"
    config_text += f"    Process Manager Install:     {format_command(bootstrap.process_manager_install_command)}\n"
    config_text += f"    Database Create:             {format_command(bootstrap.database_create_command)}\n"
    config_text += f"    Database Migrate:            {format_command(bootstrap.database_migrate_command)}\n"
    config_text += f"    Database Seed:               {format_command(bootstrap.database_seed_command)}\n"
    config_text += f"    Skip Linux Dependencies:     {bootstrap.skip_linux_deps}\n"
    config_text += f"    Skip Database:               {bootstrap.skip_database}\n"
    return config_text


def view_configuration(
    app_config: AppSettings, current_logger: Optional[logging.Logger] = None
) -> None:
    """
    Logs the current effective configuration values.

    Parameters:
        app_config (AppSettings): Application's configuration object.
        current_logger (Optional[logging.Logger]): A logger instance to use for
            logging output. If not provided, the module's default logger is used.
    """
    logger_to_use = current_logger if current_logger else module_logger
    log_bootstrap("Displaying current configuration:", "info", logger_to_use)
    log_bootstrap(
        f"\n{format_configuration(app_config)}\n", "info", logger_to_use
    )
