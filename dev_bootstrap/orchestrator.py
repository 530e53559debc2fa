# dev_bootstrap/orchestrator.py
# -*- coding: utf-8 -*-
"""
Orchestration of the developer machine bootstrap.

`run_dev_bootstrap` queues the bootstrap steps on the shared Orchestrator:
native Linux dependencies (on Linux) or the process manager (elsewhere),
then database creation, migration and seeding. The first failing step halts
the run and its exit status is reported through OrchestrationError.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from common.command_utils import get_symbols
from common.orchestrator import Orchestrator
from dev_bootstrap.steps import (
    ensure_linux_dependencies,
    ensure_process_manager,
    is_linux,
    run_collaborator,
)
from linux_deps.probe import EnvironmentProbe
from setup.config_models import AppSettings

module_logger = logging.getLogger(__name__)


def build_orchestrator(
    app_settings: AppSettings,
    logger: Optional[logging.Logger] = None,
    probe: Optional[EnvironmentProbe] = None,
    platform: Optional[str] = None,
) -> Orchestrator:
    """
    Creates an Orchestrator with the bootstrap steps queued in order.

    Args:
        app_settings: The application settings.
        logger: An optional logger instance.
        probe: Environment probe handed to the steps that inspect PATH.
        platform: Platform string to decide on; defaults to ``sys.platform``.
    """
    effective_logger = logger or module_logger
    settings = app_settings.bootstrap
    orchestrator = Orchestrator(app_settings, effective_logger)
    step_kwargs = {"probe": probe, "logger": effective_logger}

    if is_linux(platform):
        if settings.skip_linux_deps:
            effective_logger.info("Skipping Linux dependencies as requested.")
        else:
            orchestrator.add_task(
                "Linux Dependencies",
                ensure_linux_dependencies,
                kwargs=dict(step_kwargs),
            )
    else:
        orchestrator.add_task(
            "Process Manager", ensure_process_manager, kwargs=dict(step_kwargs)
        )

    if settings.skip_database:
        effective_logger.info("Skipping database steps as requested.")
        return orchestrator

    for name, label, command in (
        ("Database Create", "Creating database", settings.database_create_command),
        ("Database Migrate", "Migrating database", settings.database_migrate_command),
        ("Database Seed", "Seeding database", settings.database_seed_command),
    ):
        orchestrator.add_task(
            name,
            run_collaborator,
            args=[list(command), label],
            kwargs={"logger": effective_logger},
        )
    return orchestrator


def run_dev_bootstrap(
    app_settings: AppSettings,
    logger: Optional[logging.Logger] = None,
    probe: Optional[EnvironmentProbe] = None,
    platform: Optional[str] = None,
) -> Tuple[bool, Dict[str, Any]]:
    """
    Runs every bootstrap step in sequence.

    Returns:
        A tuple containing:
        - success (bool): True if every step completed.
        - context (dict): The orchestration context, e.g. whether Linux
          dependencies were installed or skipped as unsupported.

    Raises:
        OrchestrationError: A step failed; ``exit_code`` carries its status.
    """
    effective_logger = logger or module_logger
    symbols = get_symbols(app_settings)
    effective_logger.info(
        f"{symbols.get('rocket', '🚀')} Starting developer machine bootstrap..."
    )

    orchestrator = build_orchestrator(
        app_settings, effective_logger, probe=probe, platform=platform
    )
    success = orchestrator.run()

    if orchestrator.context.get("linux_deps_status") == "unsupported":
        effective_logger.warning(
            f"{symbols.get('warning', '⚠️')} Bootstrap finished without installing native "
            "Linux dependencies; install them manually."
        )
    else:
        effective_logger.info(
            f"{symbols.get('success', '✅')} Bootstrap finished."
        )
    return success, orchestrator.context
