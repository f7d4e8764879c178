import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from engine import PlaybackEngine


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms / 1000.0


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def engine(clock) -> PlaybackEngine:
    return PlaybackEngine(clock=clock)


@pytest.fixture
def client(monkeypatch):
    """Flask test client bound to a fresh in-process engine."""
    import main

    monkeypatch.setattr(main, "engine", PlaybackEngine())
    main.app.config["TESTING"] = True
    with main.app.test_client() as test_client:
        yield test_client
