"""Timezone lookup and naming against the tz database."""

from __future__ import annotations

from datetime import datetime, timedelta
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ...exceptions import UnknownTimezoneError

_FULL_NAMES: dict[str, str] = {
    "UTC": "Coordinated Universal Time",
    "GMT": "Greenwich Mean Time",
    "BST": "British Summer Time",
    "WET": "Western European Standard Time",
    "WEST": "Western European Summer Time",
    "CET": "Central European Standard Time",
    "CEST": "Central European Summer Time",
    "EET": "Eastern European Standard Time",
    "EEST": "Eastern European Summer Time",
    "MSK": "Moscow Standard Time",
    "EST": "Eastern Standard Time",
    "EDT": "Eastern Daylight Time",
    "CST": "Central Standard Time",
    "CDT": "Central Daylight Time",
    "MST": "Mountain Standard Time",
    "MDT": "Mountain Daylight Time",
    "PST": "Pacific Standard Time",
    "PDT": "Pacific Daylight Time",
    "AKST": "Alaska Standard Time",
    "AKDT": "Alaska Daylight Time",
    "HST": "Hawaii-Aleutian Standard Time",
    "HDT": "Hawaii-Aleutian Daylight Time",
    "AST": "Atlantic Standard Time",
    "ADT": "Atlantic Daylight Time",
    "NST": "Newfoundland Standard Time",
    "NDT": "Newfoundland Daylight Time",
    "SST": "Samoa Standard Time",
    "ChST": "Chamorro Standard Time",
    "JST": "Japan Standard Time",
    "KST": "Korean Standard Time",
    "HKT": "Hong Kong Standard Time",
    "PKT": "Pakistan Standard Time",
    "WIB": "Western Indonesia Time",
    "AEST": "Australian Eastern Standard Time",
    "AEDT": "Australian Eastern Daylight Time",
    "ACST": "Australian Central Standard Time",
    "ACDT": "Australian Central Daylight Time",
    "AWST": "Australian Western Standard Time",
    "NZST": "New Zealand Standard Time",
    "NZDT": "New Zealand Daylight Time",
    "SAST": "South Africa Standard Time",
    "WAT": "West Africa Standard Time",
    "CAT": "Central Africa Time",
    "EAT": "East Africa Time",
}

# Abbreviations the tz database reuses for unrelated zones.
_ZONE_FULL_NAME_OVERRIDES: dict[str, dict[str, str]] = {
    "Asia/Kolkata": {"IST": "India Standard Time"},
    "Asia/Calcutta": {"IST": "India Standard Time"},
    "Europe/Dublin": {"IST": "Irish Standard Time", "GMT": "Greenwich Mean Time"},
    "Asia/Jerusalem": {"IST": "Israel Standard Time", "IDT": "Israel Daylight Time"},
    "Asia/Tel_Aviv": {"IST": "Israel Standard Time", "IDT": "Israel Daylight Time"},
    "Asia/Shanghai": {"CST": "China Standard Time"},
    "Asia/Taipei": {"CST": "Taipei Standard Time"},
    "America/Havana": {"CST": "Cuba Standard Time", "CDT": "Cuba Daylight Time"},
    "Asia/Manila": {"PST": "Philippine Standard Time"},
}


@lru_cache(maxsize=256)
def resolve_zone(zone: str) -> ZoneInfo:
    """Return the tz database entry for ``zone`` or raise ``UnknownTimezoneError``.

    An unrecognized identifier is a caller error; no substitute zone is used.
    """
    candidate = zone.strip()
    if not candidate:
        raise UnknownTimezoneError(zone)
    try:
        return ZoneInfo(candidate)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise UnknownTimezoneError(zone) from exc


def is_known_zone(zone: str) -> bool:
    try:
        resolve_zone(zone)
    except UnknownTimezoneError:
        return False
    return True


def zone_abbreviation(local_dt: datetime) -> str:
    """Short name in effect for an aware datetime, e.g. ``EST`` or ``GMT+3``."""
    name = local_dt.tzname() or ""
    if name and name[0].isalpha():
        return name
    return _gmt_label(local_dt.utcoffset(), long_form=False)


def zone_full_name(local_dt: datetime, zone_id: str) -> str:
    """English long name in effect for an aware datetime, e.g. ``Eastern Daylight Time``."""
    abbreviation = local_dt.tzname() or ""
    override = _ZONE_FULL_NAME_OVERRIDES.get(zone_id, {}).get(abbreviation)
    if override:
        return override
    if full := _FULL_NAMES.get(abbreviation):
        return full
    return _gmt_label(local_dt.utcoffset(), long_form=True)


def format_offset(offset: timedelta | None, *, separator: str, minutes: str) -> str:
    """Render a UTC offset as ``+HH:MM`` (``minutes`` = "always"/"optional"/"never")."""
    total_minutes = int((offset or timedelta()).total_seconds() // 60)
    sign = "-" if total_minutes < 0 else "+"
    hours, mins = divmod(abs(total_minutes), 60)
    if minutes == "never" or (minutes == "optional" and mins == 0):
        return f"{sign}{hours:02d}"
    return f"{sign}{hours:02d}{separator}{mins:02d}"


def _gmt_label(offset: timedelta | None, *, long_form: bool) -> str:
    total_minutes = int((offset or timedelta()).total_seconds() // 60)
    if total_minutes == 0:
        return "GMT"
    if long_form:
        return "GMT" + format_offset(offset, separator=":", minutes="always")
    sign = "-" if total_minutes < 0 else "+"
    hours, mins = divmod(abs(total_minutes), 60)
    return f"GMT{sign}{hours}" + (f":{mins:02d}" if mins else "")
