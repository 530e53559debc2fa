# linux_deps/probe.py
# -*- coding: utf-8 -*-
"""
Executable search path probing.

Detection of package managers and privilege escalators goes through an
EnvironmentProbe so it can be exercised without touching the real PATH.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import List, Optional

from common.command_utils import command_exists

module_logger = logging.getLogger(__name__)


class EnvironmentProbe(ABC):
    """Read-only view of the executables available to the current process."""

    @abstractmethod
    def list_executables(self) -> List[str]:
        """Returns the sorted names of every executable on the search path."""

    @abstractmethod
    def is_executable_available(self, name: str) -> bool:
        """Returns True if ``name`` resolves to an executable."""


class PathEnvironmentProbe(EnvironmentProbe):
    """Probe backed by the process search path (``$PATH``)."""

    def __init__(
        self,
        path: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            path: Search path to use instead of ``$PATH``, in the same
                ``os.pathsep`` separated format.
            logger: An optional logging object.
        """
        self.path = path
        self.logger = logger or module_logger

    def _search_dirs(self) -> List[str]:
        raw_path = self.path if self.path is not None else os.environ.get("PATH", "")
        dirs: List[str] = []
        for entry in raw_path.split(os.pathsep):
            if entry and entry not in dirs:
                dirs.append(entry)
        return dirs

    def list_executables(self) -> List[str]:
        names = set()
        for directory in self._search_dirs():
            try:
                entries = os.listdir(directory)
            except OSError as e:
                self.logger.debug(f"Skipping unreadable PATH entry '{directory}': {e}")
                continue
            for entry in entries:
                full_path = os.path.join(directory, entry)
                if os.path.isfile(full_path) and os.access(full_path, os.X_OK):
                    names.add(entry)
        return sorted(names)

    def is_executable_available(self, name: str) -> bool:
        found = command_exists(name, path=self.path)
        self.logger.debug(f"Probe for '{name}': {'found' if found else 'not found'}")
        return found
