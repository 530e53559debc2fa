# dev_bootstrap/steps.py
# -*- coding: utf-8 -*-
"""
Individual bootstrap steps.

Each step is a task for common.orchestrator.Orchestrator: it receives the
shared ``context`` and ``app_settings`` as keyword arguments and raises on
failure. Apart from the Linux dependency step, every step is a single
external command whose exit status is the only result consumed.
"""

import logging
import sys
from typing import Any, Dict, List, Optional

from common.command_utils import get_symbols, run_command
from linux_deps.errors import UnsupportedPlatformError
from linux_deps.installer import DependencyInstaller
from linux_deps.probe import EnvironmentProbe, PathEnvironmentProbe
from setup.config_models import AppSettings

module_logger = logging.getLogger(__name__)


def is_linux(platform: Optional[str] = None) -> bool:
    """True when running on (or asked about) a Linux host."""
    return (platform if platform is not None else sys.platform).startswith(
        "linux"
    )


def ensure_linux_dependencies(
    context: Dict[str, Any],
    app_settings: AppSettings,
    probe: Optional[EnvironmentProbe] = None,
    logger: Optional[logging.Logger] = None,
    **kwargs,
) -> Optional[int]:
    """
    Installs the native Linux dependencies.

    An unsupported distribution is reported and skipped so the database steps
    still run. Sets ``context['linux_deps_status']`` to ``installed`` or
    ``unsupported``.

    Returns:
        The package manager's exit status, or None when skipped.

    Raises:
        InstallFailure: The package manager exited non-zero.
    """
    logger_to_use = logger or module_logger
    symbols = get_symbols(app_settings)
    installer = DependencyInstaller(app_settings, probe=probe, logger=logger_to_use)
    try:
        result = installer.install()
    except UnsupportedPlatformError as e:
        logger_to_use.warning(f"{symbols.get('warning', '⚠️')} {e}. Skipping.")
        context["linux_deps_status"] = "unsupported"
        return None
    context["linux_deps_status"] = "installed"
    return result.returncode


def ensure_process_manager(
    context: Dict[str, Any],
    app_settings: AppSettings,
    probe: Optional[EnvironmentProbe] = None,
    logger: Optional[logging.Logger] = None,
    **kwargs,
) -> Optional[int]:
    """
    Installs the process manager (foreman by default) if it is not on PATH.

    Sets ``context['process_manager_installed']`` when an install ran.
    """
    logger_to_use = logger or module_logger
    symbols = get_symbols(app_settings)
    settings = app_settings.bootstrap
    effective_probe = probe or PathEnvironmentProbe(
        path=app_settings.linux_deps.search_path, logger=logger_to_use
    )

    if effective_probe.is_executable_available(settings.process_manager):
        logger_to_use.info(
            f"{symbols.get('success', '✅')} '{settings.process_manager}' already available."
        )
        context["process_manager_installed"] = False
        return None

    logger_to_use.info(f"Installing {settings.process_manager}...")
    result = run_command(
        settings.process_manager_install_command,
        app_settings,
        current_logger=logger_to_use,
    )
    context["process_manager_installed"] = True
    return result.returncode


def run_collaborator(
    command: List[str],
    label: str,
    context: Dict[str, Any],
    app_settings: AppSettings,
    logger: Optional[logging.Logger] = None,
    **kwargs,
) -> int:
    """
    Runs one external collaborator command (database create, migrate, seed).

    Raises:
        subprocess.CalledProcessError: The command exited non-zero.
        FileNotFoundError: The command does not exist.
    """
    logger_to_use = logger or module_logger
    logger_to_use.info(f"{label}...")
    result = run_command(command, app_settings, current_logger=logger_to_use)
    context.setdefault("collaborators_run", []).append(label)
    return result.returncode
