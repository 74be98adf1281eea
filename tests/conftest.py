"""Shared pytest configuration and fixtures for all tests."""

import io
import json
from decimal import Decimal
from pathlib import Path

import pytest

from reporttime.api.config.ReportTimeConfig import ENV_OVERRIDES, ReportTimeConfig
from reporttime.api.timing.ClockSampler import ClockSampler
from reporttime.api.timing.CommandTimer import CommandTimer
from reporttime.utils.logger import reset_logging


def pytest_configure(config):
    for marker in ("unit", "smoke", "timing", "config", "shell", "repl", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Test Helpers
# =============================================================================


class FakeClock(ClockSampler):
    """Clock that returns the given timestamps in order."""

    def __init__(self, *timestamps):
        self.timestamps = [Decimal(str(t)) for t in timestamps]
        super().__init__(source=lambda: 0)

    def now(self) -> Decimal:
        return self.timestamps.pop(0)


def make_timer(*timestamps, stream=None, overhead="0", **config) -> CommandTimer:
    """CommandTimer on a FakeClock with a fixed overhead."""
    return CommandTimer(
        ReportTimeConfig(**config),
        clock=FakeClock(*timestamps),
        overhead=Decimal(overhead),
        stream=stream if stream is not None else io.StringIO(),
    )


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reporttime_home(tmp_path: Path, monkeypatch) -> Path:
    """Isolate REPORTTIME_HOME and the REPORTTIME* variables for every test."""
    home = tmp_path / ".reporttime"
    monkeypatch.setenv("REPORTTIME_HOME", str(home))
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)
    yield home
    reset_logging()


@pytest.fixture
def config_file(reporttime_home: Path):
    """Write a config.json into the isolated home and return a writer."""

    def write(data) -> Path:
        reporttime_home.mkdir(parents=True, exist_ok=True)
        path = reporttime_home / "config.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path

    return write
