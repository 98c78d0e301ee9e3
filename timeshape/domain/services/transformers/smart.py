"""Choice between relative and absolute presentation by recency."""

from __future__ import annotations

from ....constants import Durations
from ...entities.instant import Instant
from .date import DateTransformer
from .relative import RelativeOptions, relative_phrase


def is_recent(instant: Instant, now: Instant, cutoff_days: float) -> bool:
    elapsed_days = (
        abs(now.require_epoch_ms() - instant.require_epoch_ms()) / Durations.MS_PER_DAY
    )
    return elapsed_days <= cutoff_days


def smart_format(
    instant: Instant,
    now: Instant,
    cutoff_days: float,
    zone_id: str,
    transformer: DateTransformer,
) -> str:
    if not instant.is_valid:
        return transformer.invalid_marker
    if is_recent(instant, now, cutoff_days):
        return relative_phrase(instant, now, RelativeOptions())
    return transformer.format_human(instant, zone_id, full=False)
