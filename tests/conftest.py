"""Shared pytest fixtures for Focus Minion tests."""

import pytest

from focus_minion.core import console as console_module
from focus_minion.domain.timer.scheduler import CycleScheduler


class FakeClock:
    """Virtual clock: sleeping advances time instantly."""

    def __init__(self, start: float = 0.0):
        self.now = start
        self.sleeps: list[float] = []

    def time(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(fake_clock: FakeClock) -> CycleScheduler:
    """Scheduler driven by the virtual clock."""
    return CycleScheduler(timefunc=fake_clock.time, delayfunc=fake_clock.sleep)


@pytest.fixture(autouse=True)
def fresh_console():
    """Give every test its own Rich console bound to the captured streams."""
    console_module.set_console(None)
    console_module.set_error_console(None)
    yield
    console_module.set_console(None)
    console_module.set_error_console(None)


@pytest.fixture
def isolated_dirs(tmp_path, monkeypatch):
    """Point config/data directories and cwd at a temp directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("FOCUS_MINION_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
