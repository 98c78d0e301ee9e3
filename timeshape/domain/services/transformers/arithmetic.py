"""Day arithmetic on the instant axis.

Days are fixed 24-hour spans of elapsed time, not zone-aware calendar days:
across a DST transition the local wall-clock hour of the result shifts.
"""

from __future__ import annotations

from ....constants import Durations
from ...entities.instant import INVALID_INSTANT, Instant


def shift_days(instant: Instant, days: int) -> Instant:
    if instant.epoch_ms is None:
        return INVALID_INSTANT
    return Instant.from_epoch_ms(instant.epoch_ms + days * Durations.MS_PER_DAY)
