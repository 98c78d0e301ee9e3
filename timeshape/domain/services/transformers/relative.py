"""Relative ("3 days ago", "in 2 hours") phrasing of an instant against now."""

from __future__ import annotations

from dataclasses import dataclass

from ....constants import Durations, Labels
from ...entities.instant import Instant

_UNITS: tuple[tuple[str, int], ...] = (
    ("year", Durations.MS_PER_YEAR),
    ("month", Durations.MS_PER_MONTH),
    ("day", Durations.MS_PER_DAY),
    ("hour", Durations.MS_PER_HOUR),
    ("minute", Durations.MS_PER_MINUTE),
    ("second", Durations.MS_PER_SECOND),
)


@dataclass(frozen=True, slots=True)
class RelativeOptions:
    add_suffix: bool = True


def describe_distance(distance_ms: int) -> str:
    """Coarse English duration for an absolute distance, e.g. ``2 hours``.

    Returns an empty string below one second.
    """
    distance_ms = abs(distance_ms)
    for index, (unit, unit_ms) in enumerate(_UNITS):
        if distance_ms < unit_ms:
            continue
        magnitude = (distance_ms + unit_ms // 2) // unit_ms
        if index > 0:
            larger_unit, larger_ms = _UNITS[index - 1]
            if magnitude * unit_ms >= larger_ms:
                unit, magnitude = larger_unit, 1
        return f"{magnitude} {unit}" if magnitude == 1 else f"{magnitude} {unit}s"
    return ""


def relative_phrase(
    instant: Instant, now: Instant, options: RelativeOptions | None = None
) -> str:
    """Phrase ``instant`` relative to an already-sampled ``now``."""
    options = options or RelativeOptions()
    delta = now.require_epoch_ms() - instant.require_epoch_ms()
    phrase = describe_distance(delta)
    if not phrase:
        return Labels.JUST_NOW
    if not options.add_suffix:
        return phrase
    if delta < 0:
        return f"{Labels.FUTURE_PREFIX}{phrase}"
    return f"{phrase}{Labels.PAST_SUFFIX}"
