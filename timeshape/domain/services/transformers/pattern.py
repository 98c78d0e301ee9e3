"""Rendering of LDML-style date format patterns (``yyyy-MM-dd HH:mm``)."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import datetime
import re

from ....constants import Labels
from .zone import format_offset, zone_abbreviation, zone_full_name

_TOKEN_PATTERN = re.compile(r"'(?:[^']|'')*'?|([A-Za-z])\1*|[^A-Za-z']+")


def _year(dt: datetime, width: int) -> str:
    if width == 2:
        return f"{dt.year % 100:02d}"
    return f"{dt.year:0{width}d}"


def _month(dt: datetime, width: int) -> str:
    if width >= 4:
        return Labels.MONTH_NAMES[dt.month - 1]
    if width == 3:
        return Labels.MONTH_NAMES[dt.month - 1][:3]
    return f"{dt.month:0{width}d}"


def _weekday(dt: datetime, width: int) -> str:
    name = Labels.WEEKDAY_NAMES[dt.weekday()]
    return name if width >= 4 else name[:3]


def _hour12(dt: datetime, width: int) -> str:
    return f"{(dt.hour % 12) or 12:0{width}d}"


def _offset_iso(dt: datetime, width: int, *, zulu: bool) -> str:
    offset = dt.utcoffset()
    if zulu and not offset:
        return "Z"
    if width == 1:
        return format_offset(offset, separator="", minutes="optional")
    if width == 2:
        return format_offset(offset, separator="", minutes="always")
    return format_offset(offset, separator=":", minutes="always")


_FieldRenderer = Callable[[datetime, int, str], str]

_FIELDS: dict[str, _FieldRenderer] = {
    "y": lambda dt, width, _zone: _year(dt, width),
    "M": lambda dt, width, _zone: _month(dt, width),
    "d": lambda dt, width, _zone: f"{dt.day:0{min(width, 2)}d}",
    "E": lambda dt, width, _zone: _weekday(dt, width),
    "H": lambda dt, width, _zone: f"{dt.hour:0{min(width, 2)}d}",
    "h": lambda dt, width, _zone: _hour12(dt, min(width, 2)),
    "m": lambda dt, width, _zone: f"{dt.minute:0{min(width, 2)}d}",
    "s": lambda dt, width, _zone: f"{dt.second:0{min(width, 2)}d}",
    "S": lambda dt, width, _zone: f"{dt.microsecond // 1000:03d}"[:width].ljust(
        width, "0"
    ),
    "a": lambda dt, _width, _zone: "AM" if dt.hour < 12 else "PM",
    "z": lambda dt, width, zone: (
        zone_full_name(dt, zone) if width >= 4 else zone_abbreviation(dt)
    ),
    "X": lambda dt, width, _zone: _offset_iso(dt, width, zulu=True),
    "x": lambda dt, width, _zone: _offset_iso(dt, width, zulu=False),
}


def tokenize(pattern: str) -> Iterator[tuple[str, str]]:
    """Split a pattern into ``("field", run)`` and ``("literal", text)`` parts."""
    for match in _TOKEN_PATTERN.finditer(pattern):
        text = match.group(0)
        if text.startswith("'"):
            if text == "''":
                yield "literal", "'"
                continue
            body = text[1:-1] if len(text) > 1 and text.endswith("'") else text[1:]
            yield "literal", body.replace("''", "'")
        elif match.group(1) and match.group(1) in _FIELDS:
            yield "field", text
        else:
            yield "literal", text


def render_pattern(local_dt: datetime, pattern: str, zone_id: str) -> str:
    """Substitute pattern fields with values read from an aware local datetime.

    Letters with no field meaning are emitted unchanged.
    """
    parts: list[str] = []
    for kind, text in tokenize(pattern):
        if kind == "field":
            parts.append(_FIELDS[text[0]](local_dt, len(text), zone_id))
        else:
            parts.append(text)
    return "".join(parts)
