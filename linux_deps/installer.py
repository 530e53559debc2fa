# linux_deps/installer.py
# -*- coding: utf-8 -*-
"""
Installs the native libraries needed to build the editor on Linux.

The installer picks the first package manager found on the search path
(apt-get, dnf, zypper, pacman, xbps-install), prefixes the invocation with
sudo or doas when one is available, and installs that distribution's
dependency list in a single non-interactive call.
"""

import logging
import subprocess
from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from common.command_utils import format_command, get_symbols, run_command
from linux_deps.errors import InstallFailure, UnsupportedPlatformError
from linux_deps.escalation import resolve_privilege_escalator
from linux_deps.probe import EnvironmentProbe, PathEnvironmentProbe
from linux_deps.profiles import PROFILES, PackageManagerProfile
from setup.config_models import AppSettings

module_logger = logging.getLogger(__name__)

# Conventional shell status for "command not found".
COMMAND_NOT_FOUND_STATUS = 127


class InstallPlan(BaseModel):
    """The resolved profile and command line, before execution."""

    model_config = ConfigDict(frozen=True)

    profile: PackageManagerProfile
    escalator: Optional[str]
    command: Tuple[str, ...]


class InstallResult(BaseModel):
    """Outcome of a completed install invocation."""

    model_config = ConfigDict(frozen=True)

    profile: PackageManagerProfile
    command: Tuple[str, ...]
    returncode: int


def detect_profile(
    probe: EnvironmentProbe,
    profiles: Sequence[PackageManagerProfile] = PROFILES,
    current_logger: Optional[logging.Logger] = None,
) -> Optional[PackageManagerProfile]:
    """Returns the first profile whose package manager is available, in priority order."""
    logger_to_use = current_logger if current_logger else module_logger
    for profile in profiles:
        if probe.is_executable_available(profile.detection_command):
            logger_to_use.info(
                f"Detected '{profile.detection_command}' ({profile.distribution})."
            )
            return profile
    return None


def build_install_command(
    profile: PackageManagerProfile, escalator: Optional[str]
) -> List[str]:
    """Builds the single install invocation for ``profile``."""
    prefix = [escalator] if escalator and profile.requires_escalation else []
    return prefix + list(profile.command_template())


class DependencyInstaller:
    """
    Detects the host package manager and installs its dependency list.
    """

    def __init__(
        self,
        app_settings: Optional[AppSettings] = None,
        probe: Optional[EnvironmentProbe] = None,
        profiles: Sequence[PackageManagerProfile] = PROFILES,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            app_settings: The application settings. Defaults are used when omitted.
            probe: Environment probe; defaults to the process search path, or
                ``linux_deps.search_path`` when configured.
            profiles: Profiles in priority order.
            logger: An optional logging object.
        """
        self.app_settings = app_settings or AppSettings()
        self.logger = logger or module_logger
        self.probe = probe or PathEnvironmentProbe(
            path=self.app_settings.linux_deps.search_path, logger=self.logger
        )
        self.profiles: Tuple[PackageManagerProfile, ...] = tuple(profiles)

    @property
    def escalator_candidates(self) -> Tuple[str, ...]:
        return tuple(self.app_settings.linux_deps.escalators)

    def plan(self) -> InstallPlan:
        """
        Resolves the escalator and package manager without running anything.

        Raises:
            UnsupportedPlatformError: No profile's package manager is available.
        """
        escalator = resolve_privilege_escalator(
            self.probe, self.escalator_candidates, current_logger=self.logger
        )
        profile = detect_profile(self.probe, self.profiles, self.logger)
        if profile is None:
            raise UnsupportedPlatformError(
                [p.detection_command for p in self.profiles]
            )
        return InstallPlan(
            profile=profile,
            escalator=escalator,
            command=tuple(build_install_command(profile, escalator)),
        )

    def install(self) -> InstallResult:
        """
        Installs the detected profile's dependencies in one invocation.

        Raises:
            UnsupportedPlatformError: No supported package manager was found;
                nothing was run.
            InstallFailure: The package manager exited non-zero.
        """
        symbols = get_symbols(self.app_settings)
        plan = self.plan()
        self.logger.info(
            f"{symbols.get('package', '📦')} Installing {len(plan.profile.packages)} "
            f"{plan.profile.name} packages: {', '.join(plan.profile.packages)}"
        )
        try:
            result = run_command(
                plan.command,
                self.app_settings,
                check=True,
                current_logger=self.logger,
            )
        except subprocess.CalledProcessError as e:
            raise InstallFailure(plan.profile.name, plan.command, e.returncode) from e
        except FileNotFoundError as e:
            raise InstallFailure(
                plan.profile.name, plan.command, COMMAND_NOT_FOUND_STATUS
            ) from e

        self.logger.info(
            f"{symbols.get('success', '✅')} {plan.profile.name} dependencies installed."
        )
        return InstallResult(
            profile=plan.profile,
            command=plan.command,
            returncode=result.returncode,
        )

    def describe(self, plan: InstallPlan) -> str:
        """One-line rendering of a plan for dry runs."""
        return f"[{plan.profile.name}] {format_command(plan.command)}"
