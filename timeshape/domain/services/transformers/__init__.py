"""Domain-level time transformers.

Pure functions of their arguments: the zone and "now" are always passed in.
"""

from .arithmetic import shift_days
from .date import DateTransformer
from .iso8601 import iso_date_to_instant, parse_instant
from .pattern import render_pattern, tokenize
from .relative import RelativeOptions, describe_distance, relative_phrase
from .smart import is_recent, smart_format
from .timestamp import from_millis, from_seconds, from_timestamp, to_millis, to_seconds
from .zone import is_known_zone, resolve_zone, zone_abbreviation, zone_full_name

__all__ = [
    "DateTransformer",
    "RelativeOptions",
    "describe_distance",
    "from_millis",
    "from_seconds",
    "from_timestamp",
    "is_known_zone",
    "is_recent",
    "iso_date_to_instant",
    "parse_instant",
    "relative_phrase",
    "render_pattern",
    "resolve_zone",
    "shift_days",
    "smart_format",
    "to_millis",
    "to_seconds",
    "tokenize",
    "zone_abbreviation",
    "zone_full_name",
]
