# linux_deps/__init__.py
# -*- coding: utf-8 -*-
"""
Linux native dependency installer.

Detects the distribution's package manager and installs the libraries the
editor needs, using sudo or doas when available.
"""

from linux_deps.errors import (
    InstallFailure,
    LinuxDepsError,
    UnsupportedPlatformError,
)
from linux_deps.installer import (
    DependencyInstaller,
    InstallPlan,
    InstallResult,
    build_install_command,
    detect_profile,
)
from linux_deps.probe import EnvironmentProbe, PathEnvironmentProbe
from linux_deps.profiles import PROFILES, PackageManagerProfile

__all__ = [
    "DependencyInstaller",
    "EnvironmentProbe",
    "InstallFailure",
    "InstallPlan",
    "InstallResult",
    "LinuxDepsError",
    "PROFILES",
    "PackageManagerProfile",
    "PathEnvironmentProbe",
    "UnsupportedPlatformError",
    "build_install_command",
    "detect_profile",
]
