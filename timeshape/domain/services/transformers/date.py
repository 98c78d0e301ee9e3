"""Zoned rendering of instants and wall-clock conversion."""

from __future__ import annotations

from datetime import datetime

from ....constants import Defaults, Patterns
from ...entities.instant import Instant
from .pattern import render_pattern
from .zone import resolve_zone, zone_abbreviation, zone_full_name


class DateTransformer:
    """Renders instants as wall-clock text observed in a named zone.

    The UTC offset is looked up for the instant itself, so DST applies.
    Invalid instants render ``invalid_marker`` instead of raising.
    """

    def __init__(self, invalid_marker: str = Defaults.INVALID_MARKER) -> None:
        super().__init__()
        self.invalid_marker = invalid_marker

    def format(self, instant: Instant, pattern: str, zone_id: str) -> str:
        zone = resolve_zone(zone_id)
        if not instant.is_valid:
            return self.invalid_marker
        try:
            local_dt = instant.to_datetime().astimezone(zone)
        except OverflowError:
            return self.invalid_marker
        return render_pattern(local_dt, pattern, zone_id)

    def format_human(self, instant: Instant, zone_id: str, *, full: bool) -> str:
        zone = resolve_zone(zone_id)
        if not instant.is_valid:
            return self.invalid_marker
        try:
            local_dt = instant.to_datetime().astimezone(zone)
        except OverflowError:
            return self.invalid_marker
        date_part = render_pattern(local_dt, Patterns.HUMAN_DATE_TIME, zone_id)
        suffix = (
            zone_full_name(local_dt, zone_id) if full else zone_abbreviation(local_dt)
        )
        return f"{date_part} {suffix}"

    @staticmethod
    def wall_clock(instant: Instant, zone_id: str) -> datetime:
        """Naive local date/time a clock in ``zone_id`` shows at ``instant``."""
        zone = resolve_zone(zone_id)
        return instant.to_datetime().astimezone(zone).replace(tzinfo=None)

    @staticmethod
    def from_wall_clock(local: datetime, zone_id: str) -> Instant:
        """Instant at which a clock in ``zone_id`` shows the naive ``local``.

        Repeated times resolve to the earlier occurrence (``fold=0``); skipped
        times use the offset in effect before the transition.
        """
        zone = resolve_zone(zone_id)
        return Instant.from_datetime(local.replace(tzinfo=zone, fold=0))
