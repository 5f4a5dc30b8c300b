import pytest

from symlayer.clock import ManualClock
from symlayer.sink import RecordingSink


@pytest.fixture
def clock():
    """Deterministic clock; starts well away from zero."""
    return ManualClock(start_ms=1_000_000)


@pytest.fixture
def sink():
    return RecordingSink()
