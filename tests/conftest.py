"""
Pytest configuration and shared fixtures.

Provides fixed instants, a deterministic clock and an isolated configuration
environment used across the test suite.
"""

import os
from pathlib import Path

import pytest

from nsid.core.config import clear_cache
from nsid.core.ids import Timestamp

# ==============================================================================
# Instant Fixtures
# ==============================================================================

AS_OF_TEXT = "1977-11-13T14:18:00Z"
AS_AT_TEXT = "2008-01-05T22:00:00Z"

AS_OF_TIME = Timestamp.of(248278680)
AS_AT_TIME = Timestamp.of(1199570400)


@pytest.fixture
def as_of_time() -> Timestamp:
    """Valid time used by the canonical examples: 1977-11-13T14:18:00Z."""
    return AS_OF_TIME


@pytest.fixture
def as_at_time() -> Timestamp:
    """Transaction time used by the canonical examples: 2008-01-05T22:00:00Z."""
    return AS_AT_TIME


class StepClock:
    """Clock returning consecutive seconds from a starting instant."""

    def __init__(self, start: int = 1_000_000_000):
        self.next_seconds = start
        self.calls = 0

    def __call__(self) -> Timestamp:
        value = Timestamp.of(self.next_seconds)
        self.next_seconds += 1
        self.calls += 1
        return value


@pytest.fixture
def step_clock() -> StepClock:
    """Deterministic clock; each read is one second after the previous."""
    return StepClock()


# ==============================================================================
# Configuration Isolation
# ==============================================================================


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    Keep every test away from real user/project configuration.

    Points XDG_CONFIG_HOME into tmp_path, runs from an empty project
    directory, drops NSID_* variables and resets the config cache. Variables
    set by .env loading during the test are discarded afterwards.
    """
    xdg = tmp_path / "xdg"
    project = tmp_path / "project"
    xdg.mkdir()
    project.mkdir()

    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    monkeypatch.chdir(project)
    for name in ("NSID_DEFAULT_ID_TYPE", "NSID_OUTPUT_FORMAT", "NSID_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    saved_env = dict(os.environ)
    clear_cache()
    yield
    clear_cache()
    os.environ.clear()
    os.environ.update(saved_env)
