"""Conversions between instants and Unix timestamps."""

from __future__ import annotations

from ....constants import Durations
from ...entities.instant import Instant


def to_millis(instant: Instant) -> int:
    """Epoch milliseconds of a valid instant.

    The invalid instant has no numeric value: this and ``to_seconds`` raise
    ``InvalidInstantError`` for it rather than returning NaN.
    """
    return instant.require_epoch_ms()


def to_seconds(instant: Instant) -> int:
    return to_millis(instant) // Durations.MS_PER_SECOND


def from_millis(value: int | float) -> Instant:
    """Build an instant from epoch milliseconds.

    Never raises: non-finite or out-of-range values give the invalid instant.
    """
    return Instant.from_epoch_ms(value)


def from_seconds(value: int | float) -> Instant:
    return from_millis(value * Durations.MS_PER_SECOND)


def from_timestamp(value: int | float, *, is_seconds: bool = False) -> Instant:
    return from_seconds(value) if is_seconds else from_millis(value)
