"""Timeshape package.

Date and timezone transformers for presenting API timestamps to people.

Features:
- Epoch millisecond/second and ISO 8601 conversion
- Pattern, human, relative and smart formatting in any IANA timezone
- Host timezone detection with a safe fallback
- DataFrame timestamp column formatting
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("timeshape")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from timeshape.dates import (
    RelativeOptions,
    add_days,
    format_date,
    format_date_human,
    format_date_human_full,
    format_date_local,
    format_date_smart,
    format_eu_date,
    format_instant,
    format_relative,
    format_timestamp_local,
    format_timestamp_relative,
    format_us_date,
    from_millis,
    from_seconds,
    from_utc,
    is_valid_date,
    iso_date_to_instant,
    parse_instant,
    resolve_default_zone,
    subtract_days,
    to_millis,
    to_seconds,
    to_utc,
)
from timeshape.domain.entities import INVALID_INSTANT, Instant, Invalid, Valid
from timeshape.domain.exceptions import (
    InvalidInstantError,
    TimeshapeError,
    UnknownTimezoneError,
)

__all__ = [
    "INVALID_INSTANT",
    "Instant",
    "Invalid",
    "InvalidInstantError",
    "RelativeOptions",
    "TimeshapeError",
    "UnknownTimezoneError",
    "Valid",
    "__version__",
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
