"""
Pytest configuration og shared fixtures.
"""

import pytest

from filesteps.config import Settings
from filesteps.dependencies import reset_singletons
from filesteps.services.reporting import RecordingReporter


@pytest.fixture(autouse=True)
def clean_singletons():
    """Automatically reset singletons before each test."""
    reset_singletons()
    yield
    reset_singletons()


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        output_directory=str(tmp_path / "out"),
        count_poll_sleep_ms=0,
        log_file_path=str(tmp_path / "logs" / "filesteps.log"),
    )


class FakeClock:
    """Monotonic clock that only advances when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    async def async_sleep(self, seconds: float) -> None:
        self.sleep(seconds)


@pytest.fixture
def fake_clock():
    return FakeClock()
