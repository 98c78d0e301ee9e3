"""Date and timezone transformers for presenting API timestamps.

Each factory returns a one-argument transformer, so formatters can be built
once and applied to many values::

    >>> from timeshape.dates import format_us_date, iso_date_to_instant
    >>> format_us_date()(iso_date_to_instant("2023-12-25T10:30:00Z"))
    '12/25/2023'

Two inputs are ambient: the current instant and the host timezone. Both
are read per call through ``clock=`` (a ``ClockPort``) and ``zones=`` (a
``ZoneProviderPort``), which default to the system clock and the host
environment. Pass fixed implementations to make output reproducible.

An explicitly named zone that the tz database does not know raises
``UnknownTimezoneError`` when the transformer is built. Invalid instants
never raise in a formatter; they render as ``"Invalid Date"``.

Factories read ``TimeshapeConfig`` (environment plus ``timeshape.toml``) once
when they are built, unless ``config=`` is passed. It supplies the fallback
zone, the US/EU preset zones, the smart cutoff and the invalid marker.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from .application.ports.services import ClockPort, ZoneProviderPort
from .config import ConfigLoader, TimeshapeConfig
from .constants import Patterns
from .domain.entities.instant import Instant
from .domain.services.transformers import (
    DateTransformer,
    RelativeOptions,
    from_millis,
    from_seconds,
    from_timestamp,
    iso_date_to_instant,
    parse_instant,
    relative_phrase,
    resolve_zone,
    shift_days,
    smart_format,
    to_millis,
    to_seconds,
)
from .infrastructure.environment import EnvironmentZoneProvider, SystemClock


def resolve_default_zone(
    zones: ZoneProviderPort | None = None,
    *,
    config: TimeshapeConfig | None = None,
) -> str:
    """Timezone identifier to use when none is given; never fails.

    Without a provider the host environment is read, falling back to the
    configured ``fallback_zone``.
    """
    provider = zones or EnvironmentZoneProvider(_settings(config).fallback_zone)
    return provider.default_zone()


def is_valid_date(instant: Instant) -> bool:
    return instant.is_valid


def format_instant(
    instant: Instant,
    pattern: str,
    zone: str | None = None,
    *,
    zones: ZoneProviderPort | None = None,
    config: TimeshapeConfig | None = None,
) -> str:
    settings = _settings(config)
    zone_id = zone
    if zone_id is None:
        zone_id = resolve_default_zone(zones, config=settings)
    return _transformer(settings).format(instant, pattern, zone_id)


def format_date(
    pattern: str | None = None,
    zone: str | None = None,
    *,
    zones: ZoneProviderPort | None = None,
    config: TimeshapeConfig | None = None,
) -> Callable[[Instant], str]:
    settings = _settings(config)
    fmt = pattern or Patterns.US_DATE
    transformer = _transformer(settings)
    zone_for_call = _zone_source(zone, zones, settings)

    def transform(instant: Instant) -> str:
        return transformer.format(instant, fmt, zone_for_call())

    return transform


def format_us_date(
    zone: str | None = None, *, config: TimeshapeConfig | None = None
) -> Callable[[Instant], str]:
    settings = _settings(config)
    return format_date(Patterns.US_DATE, zone or settings.us_zone, config=settings)


def format_eu_date(
    zone: str | None = None, *, config: TimeshapeConfig | None = None
) -> Callable[[Instant], str]:
    settings = _settings(config)
    return format_date(Patterns.EU_DATE, zone or settings.eu_zone, config=settings)


def format_date_local(
    pattern: str | None = None,
    *,
    zones: ZoneProviderPort | None = None,
    config: TimeshapeConfig | None = None,
) -> Callable[[Instant], str]:
    return format_date(pattern or Patterns.US_DATE, zones=zones, config=config)


def format_timestamp_local(
    pattern: str | None = None,
    is_seconds: bool = False,
    *,
    zones: ZoneProviderPort | None = None,
    config: TimeshapeConfig | None = None,
) -> Callable[[int | float], str]:
    formatter = format_date(
        pattern or Patterns.LOCAL_TIMESTAMP, zones=zones, config=config
    )

    def transform(timestamp: int | float) -> str:
        return formatter(from_timestamp(timestamp, is_seconds=is_seconds))

    return transform


def format_date_human(
    zone: str | None = None,
    *,
    zones: ZoneProviderPort | None = None,
    config: TimeshapeConfig | None = None,
) -> Callable[[Instant], str]:
    """``April 14, 1988 10:00 AM PST``: zoned date and time with the abbreviation."""
    settings = _settings(config)
    transformer = _transformer(settings)
    zone_for_call = _zone_source(zone, zones, settings)

    def transform(instant: Instant) -> str:
        return transformer.format_human(instant, zone_for_call(), full=False)

    return transform


def format_date_human_full(
    zone: str | None = None,
    *,
    zones: ZoneProviderPort | None = None,
    config: TimeshapeConfig | None = None,
) -> Callable[[Instant], str]:
    """``April 14, 1988 10:00 AM Pacific Standard Time``."""
    settings = _settings(config)
    transformer = _transformer(settings)
    zone_for_call = _zone_source(zone, zones, settings)

    def transform(instant: Instant) -> str:
        return transformer.format_human(instant, zone_for_call(), full=True)

    return transform


def format_relative(
    options: RelativeOptions | None = None,
    *,
    clock: ClockPort | None = None,
    config: TimeshapeConfig | None = None,
) -> Callable[[Instant], str]:
    """``2 hours ago`` / ``in 3 days``, measured against the clock at call time.

    The output depends on when it is called; tests should pass a fixed clock.
    """
    invalid_marker = _settings(config).invalid_marker
    source = clock or SystemClock()
    resolved = options or RelativeOptions()

    def transform(instant: Instant) -> str:
        if not instant.is_valid:
            return invalid_marker
        return relative_phrase(instant, source.now(), resolved)

    return transform


def format_timestamp_relative(
    is_seconds: bool = False,
    *,
    clock: ClockPort | None = None,
    config: TimeshapeConfig | None = None,
) -> Callable[[int | float], str]:
    formatter = format_relative(clock=clock, config=config)

    def transform(timestamp: int | float) -> str:
        return formatter(from_timestamp(timestamp, is_seconds=is_seconds))

    return transform


def format_date_smart(
    cutoff_days: float | None = None,
    zone: str | None = None,
    *,
    clock: ClockPort | None = None,
    zones: ZoneProviderPort | None = None,
    config: TimeshapeConfig | None = None,
) -> Callable[[Instant], str]:
    """Relative text up to ``cutoff_days`` (inclusive) away from now, else human format.

    ``cutoff_days`` defaults to the configured ``smart_cutoff_days``.
    """
    settings = _settings(config)
    cutoff = settings.smart_cutoff_days if cutoff_days is None else cutoff_days
    if cutoff < 0:
        raise ValueError(f"cutoff_days must not be negative, got {cutoff}")
    source = clock or SystemClock()
    transformer = _transformer(settings)
    zone_for_call = _zone_source(zone, zones, settings)

    def transform(instant: Instant) -> str:
        now = source.now()
        return smart_format(instant, now, cutoff, zone_for_call(), transformer)

    return transform


def add_days(days: int) -> Callable[[Instant], Instant]:
    def transform(instant: Instant) -> Instant:
        return shift_days(instant, days)

    return transform


def subtract_days(days: int) -> Callable[[Instant], Instant]:
    return add_days(-days)


def to_utc(zone: str) -> Callable[[datetime], Instant]:
    """Read naive wall-clock datetimes as local time in ``zone``."""
    resolve_zone(zone)

    def transform(local: datetime) -> Instant:
        return DateTransformer.from_wall_clock(local, zone)

    return transform


def from_utc(zone: str) -> Callable[[Instant], datetime]:
    """Naive wall-clock datetime shown in ``zone`` at each instant."""
    resolve_zone(zone)

    def transform(instant: Instant) -> datetime:
        return DateTransformer.wall_clock(instant, zone)

    return transform


def _settings(config: TimeshapeConfig | None) -> TimeshapeConfig:
    return config if config is not None else ConfigLoader.load()


def _transformer(config: TimeshapeConfig) -> DateTransformer:
    return DateTransformer(invalid_marker=config.invalid_marker)


def _zone_source(
    zone: str | None, zones: ZoneProviderPort | None, config: TimeshapeConfig
) -> Callable[[], str]:
    if zone is not None:
        resolve_zone(zone)
        return lambda: zone
    provider = zones or EnvironmentZoneProvider(config.fallback_zone)
    return provider.default_zone


__all__ = [
    "RelativeOptions",
    "add_days",
    "format_date",
    "format_date_human",
    "format_date_human_full",
    "format_date_local",
    "format_date_smart",
    "format_eu_date",
    "format_instant",
    "format_relative",
    "format_timestamp_local",
    "format_timestamp_relative",
    "format_us_date",
    "from_millis",
    "from_seconds",
    "from_utc",
    "is_valid_date",
    "iso_date_to_instant",
    "parse_instant",
    "resolve_default_zone",
    "subtract_days",
    "to_millis",
    "to_seconds",
    "to_utc",
]
