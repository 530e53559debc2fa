# tests/conftest.py
import logging
from typing import Iterable, List
from unittest.mock import MagicMock

import pytest

from linux_deps.probe import EnvironmentProbe
from setup.config_models import AppSettings


class FakeEnvironmentProbe(EnvironmentProbe):
    """Probe exposing a fixed set of executables and recording lookups."""

    def __init__(self, executables: Iterable[str] = ()):
        self.executables = set(executables)
        self.lookups: List[str] = []

    def list_executables(self) -> List[str]:
        return sorted(self.executables)

    def is_executable_available(self, name: str) -> bool:
        self.lookups.append(name)
        return name in self.executables


@pytest.fixture
def fake_probe():
    """Factory building a FakeEnvironmentProbe from executable names."""

    def _make(*executables: str) -> FakeEnvironmentProbe:
        return FakeEnvironmentProbe(executables)

    return _make


@pytest.fixture
def app_settings(monkeypatch):
    """AppSettings built from defaults only."""
    for var in ("LOG_LEVEL", "LOG_FILE", "LOG_PREFIX"):
        monkeypatch.delenv(var, raising=False)
    return AppSettings()


@pytest.fixture
def mock_logger():
    """Fixture to create a mock logger for testing."""
    return MagicMock(spec=logging.Logger)
