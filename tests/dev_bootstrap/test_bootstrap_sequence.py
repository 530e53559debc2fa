# tests/dev_bootstrap/test_bootstrap_sequence.py
# -*- coding: utf-8 -*-
"""
Tests for the ordering and failure handling of the bootstrap sequence.
"""

import subprocess
from unittest.mock import MagicMock

import pytest

from common.orchestrator import OrchestrationError
from dev_bootstrap.orchestrator import build_orchestrator, run_dev_bootstrap
from setup.config_models import AppSettings, BootstrapSettings


@pytest.fixture
def recorded_commands(mocker):
    """Patches every command runner and records the command lines in order."""
    calls = []

    def _record(command, *args, **kwargs):
        calls.append(list(command))
        return MagicMock(returncode=0)

    mocker.patch("dev_bootstrap.steps.run_command", side_effect=_record)
    mocker.patch("linux_deps.installer.run_command", side_effect=_record)
    return calls


def _task_names(orchestrator):
    return [task["name"] for task in orchestrator.tasks]


def test_linux_sequence(app_settings):
    orchestrator = build_orchestrator(app_settings, platform="linux")

    assert _task_names(orchestrator) == [
        "Linux Dependencies",
        "Database Create",
        "Database Migrate",
        "Database Seed",
    ]


def test_non_linux_sequence_installs_process_manager(app_settings):
    orchestrator = build_orchestrator(app_settings, platform="darwin")

    assert _task_names(orchestrator)[0] == "Process Manager"
    assert "Linux Dependencies" not in _task_names(orchestrator)


def test_skip_flags():
    settings = AppSettings(
        bootstrap=BootstrapSettings(skip_linux_deps=True, skip_database=True)
    )

    orchestrator = build_orchestrator(settings, platform="linux")

    assert orchestrator.tasks == []


def test_run_on_linux_executes_in_order(fake_probe, app_settings, recorded_commands):
    success, context = run_dev_bootstrap(
        app_settings, probe=fake_probe("sudo", "pacman"), platform="linux"
    )

    assert success is True
    assert context["linux_deps_status"] == "installed"
    assert [c[:2] for c in recorded_commands] == [
        ["sudo", "pacman"],
        ["script/sqlx", "database"],
        ["cargo", "run"],
        ["script/seed-db"],
    ]
    assert context["collaborators_run"] == [
        "Creating database",
        "Migrating database",
        "Seeding database",
    ]


def test_unsupported_distribution_continues_with_database(
    fake_probe, app_settings, recorded_commands, mock_logger
):
    success, context = run_dev_bootstrap(
        app_settings, logger=mock_logger, probe=fake_probe("sudo"), platform="linux"
    )

    assert success is True
    assert context["linux_deps_status"] == "unsupported"
    assert len(recorded_commands) == 3
    assert "install them manually" in mock_logger.warning.call_args.args[0]


def test_non_linux_skips_present_process_manager(
    fake_probe, app_settings, recorded_commands
):
    success, context = run_dev_bootstrap(
        app_settings, probe=fake_probe("foreman"), platform="darwin"
    )

    assert success is True
    assert context["process_manager_installed"] is False
    assert recorded_commands[0] == ["script/sqlx", "database", "create"]


def test_failing_step_halts_with_its_status(mocker, fake_probe, app_settings):
    def _run(command, *args, **kwargs):
        if command[0] == "cargo":
            raise subprocess.CalledProcessError(101, command)
        return MagicMock(returncode=0)

    steps_run = mocker.patch("dev_bootstrap.steps.run_command", side_effect=_run)

    with pytest.raises(OrchestrationError) as excinfo:
        run_dev_bootstrap(app_settings, probe=fake_probe("foreman"), platform="darwin")

    assert excinfo.value.task_name == "Database Migrate"
    assert excinfo.value.exit_code == 101
    # Seeding never ran.
    assert steps_run.call_count == 2


def test_linux_install_failure_halts_before_database(
    mocker, fake_probe, app_settings
):
    mocker.patch(
        "linux_deps.installer.run_command",
        side_effect=subprocess.CalledProcessError(100, "apt-get"),
    )
    steps_run = mocker.patch("dev_bootstrap.steps.run_command")

    with pytest.raises(OrchestrationError) as excinfo:
        run_dev_bootstrap(app_settings, probe=fake_probe("apt-get"), platform="linux")

    assert excinfo.value.task_name == "Linux Dependencies"
    assert excinfo.value.exit_code == 100
    steps_run.assert_not_called()
