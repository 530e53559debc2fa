# linux_deps/errors.py
# -*- coding: utf-8 -*-
"""
Exceptions raised by the Linux dependency installer.
"""

from typing import List, Sequence

from common.command_utils import format_command


class LinuxDepsError(Exception):
    """Base class for dependency installer errors."""


class UnsupportedPlatformError(LinuxDepsError):
    """No supported package manager was found on the executable search path."""

    def __init__(self, probed_commands: Sequence[str]):
        self.probed_commands: List[str] = list(probed_commands)
        super().__init__(
            "Unsupported Linux distribution: none of "
            f"{', '.join(self.probed_commands)} found on PATH"
        )


class InstallFailure(LinuxDepsError):
    """The package manager ran but exited with a non-zero status."""

    def __init__(self, profile_name: str, command: Sequence[str], returncode: int):
        self.profile_name = profile_name
        self.command: List[str] = list(command)
        self.returncode = returncode
        super().__init__(
            f"{profile_name} install failed with exit status {returncode}: "
            f"{format_command(self.command)}"
        )
