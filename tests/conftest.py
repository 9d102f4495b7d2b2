import pytest

from simple_timer.utils import clock


class FakeClock:
    """Stands in for ``clock.now``; returns whatever ``value`` holds."""

    def __init__(self, value=0):
        self.value = value

    def advance(self, seconds):
        self.value += seconds

    def __call__(self, hires):
        return float(self.value) if hires else int(self.value)


@pytest.fixture
def hires(monkeypatch):
    monkeypatch.setattr(clock, "_HIRES", True)


@pytest.fixture
def no_hires(monkeypatch):
    monkeypatch.setattr(clock, "_HIRES", False)


@pytest.fixture
def fake_clock(monkeypatch):
    fake = FakeClock(1000)
    monkeypatch.setattr(clock, "now", fake)
    return fake
