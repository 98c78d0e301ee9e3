from datetime import UTC, datetime

import pytest

from timeshape.domain.entities import Instant
from timeshape.infrastructure.environment import FixedClock, FixedZoneProvider


@pytest.fixture(autouse=True)
def _isolate_timeshape_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host configuration out of the tests.

    Every test sees UTC as the host zone and no TIMESHAPE_* overrides.
    """
    monkeypatch.setenv("TZ", "UTC")
    for name in (
        "TIMESHAPE_FALLBACK_ZONE",
        "TIMESHAPE_SMART_CUTOFF_DAYS",
        "TIMESHAPE_INVALID_MARKER",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def christmas_morning() -> Instant:
    """2023-12-25T10:30:00Z."""
    return Instant.from_datetime(datetime(2023, 12, 25, 10, 30, tzinfo=UTC))


@pytest.fixture
def fixed_clock(christmas_morning: Instant) -> FixedClock:
    return FixedClock(christmas_morning)


@pytest.fixture
def new_york_zones() -> FixedZoneProvider:
    return FixedZoneProvider("America/New_York")
