# setup/config_models.py
# -*- coding: utf-8 -*-
"""
Pydantic models for application configuration.

This module defines the structured settings for the bootstrap tooling,
including defaults, type annotations, and descriptions.
It utilizes Pydantic for data validation and settings management.
"""

from typing import Dict, List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Default Static Values (can be overridden by config file/env/cli) ---
LOG_PREFIX_DEFAULT: str = "[DEV-BOOTSTRAP]"
LOG_LEVEL_DEFAULT: str = "INFO"

ESCALATORS_DEFAULT: List[str] = ["sudo", "doas"]

PROCESS_MANAGER_DEFAULT: str = "foreman"
PROCESS_MANAGER_INSTALL_COMMAND_DEFAULT: List[str] = [
    "brew",
    "install",
    "foreman",
]
DATABASE_CREATE_COMMAND_DEFAULT: List[str] = [
    "script/sqlx",
    "database",
    "create",
]
DATABASE_MIGRATE_COMMAND_DEFAULT: List[str] = [
    "cargo",
    "run",
    "-p",
    "collab",
    "--",
    "migrate",
]
DATABASE_SEED_COMMAND_DEFAULT: List[str] = ["script/seed-db"]

SYMBOLS_DEFAULT: Dict[str, str] = {
    "success": "✅",
    "error": "❌",
    "warning": "⚠️",
    "info": "ℹ️",
    "step": "➡️",
    "gear": "⚙️",
    "package": "📦",
    "rocket": "🚀",
    "sparkles": "✨",
    "critical": "🔥",
    "debug": "🐛",
}


class LinuxDepsSettings(BaseSettings):
    """Settings for the Linux native dependency installer."""

    model_config = SettingsConfigDict(env_prefix="LINUX_DEPS_", extra="ignore")

    escalators: List[str] = Field(
        default_factory=lambda: list(ESCALATORS_DEFAULT),
        description="Privilege escalation commands to probe for, in order.",
    )
    allow_unsupported: bool = Field(
        default=False,
        description="Exit successfully when no supported package manager is found.",
    )
    search_path: Optional[str] = Field(
        default=None,
        description="Executable search path to probe instead of $PATH.",
    )


class BootstrapSettings(BaseSettings):
    """External collaborator commands run by the bootstrap sequence."""

    model_config = SettingsConfigDict(env_prefix="BOOTSTRAP_", extra="ignore")

    process_manager: str = Field(
        default=PROCESS_MANAGER_DEFAULT,
        description="Executable of the process manager used to run services.",
    )
    process_manager_install_command: List[str] = Field(
        default_factory=lambda: list(PROCESS_MANAGER_INSTALL_COMMAND_DEFAULT),
        description="Command installing the process manager on non-Linux hosts.",
    )
    database_create_command: List[str] = Field(
        default_factory=lambda: list(DATABASE_CREATE_COMMAND_DEFAULT),
        description="Command creating the development database.",
    )
    database_migrate_command: List[str] = Field(
        default_factory=lambda: list(DATABASE_MIGRATE_COMMAND_DEFAULT),
        description="Command running the database migrations.",
    )
    database_seed_command: List[str] = Field(
        default_factory=lambda: list(DATABASE_SEED_COMMAND_DEFAULT),
        description="Command seeding the development database.",
    )
    skip_linux_deps: bool = Field(
        default=False, description="Skip the Linux dependency step."
    )
    skip_database: bool = Field(
        default=False,
        description="Skip the database create, migrate and seed steps.",
    )


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(extra="ignore")

    log_prefix: str = Field(
        default=LOG_PREFIX_DEFAULT,
        description="Prefix for log messages from the bootstrap scripts.",
    )
    log_level: str = Field(
        default=LOG_LEVEL_DEFAULT,
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    log_file: Optional[str] = Field(
        default=None, description="Optional file to append log output to."
    )

    linux_deps: LinuxDepsSettings = Field(default_factory=LinuxDepsSettings)
    bootstrap: BootstrapSettings = Field(default_factory=BootstrapSettings)

    symbols: Dict[str, str] = Field(
        default_factory=lambda: dict(SYMBOLS_DEFAULT)
    )
