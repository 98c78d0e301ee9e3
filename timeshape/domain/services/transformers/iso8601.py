"""ISO 8601 (and looser) text parsing into instants."""

from __future__ import annotations

from datetime import UTC, datetime
import re

import pandas as pd

from ...entities.instant import Instant, Invalid, ParsedInstant, Valid

_DATE_ONLY = re.compile(r"^[+-]?\d{4,6}-\d{2}-\d{2}$")
# pandas reads these as the current time
_CLOCK_KEYWORDS = frozenset({"now", "today"})


def parse_instant(raw_value: object) -> ParsedInstant:
    """Parse text into ``Valid(instant)`` or ``Invalid(source, reason)``.

    Strict ISO 8601 is tried first; naive text is read as UTC and a trailing
    ``Z`` is accepted. Anything else goes through ``pandas.to_datetime``.
    """
    if isinstance(raw_value, datetime):
        return _checked(raw_value, Instant.from_datetime(raw_value))
    if not isinstance(raw_value, str):
        return Invalid(raw_value, f"expected text, got {type(raw_value).__name__}")

    text = raw_value.strip()
    if not text:
        return Invalid(raw_value, "empty text")

    normalized = text[:-1] + "+00:00" if text[-1] in "zZ" else text
    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError:
        return _parse_loose(raw_value, text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return _checked(raw_value, Instant.from_datetime(parsed))


def iso_date_to_instant(raw_value: object) -> Instant:
    return parse_instant(raw_value).to_instant()


def _parse_loose(raw_value: str, text: str) -> ParsedInstant:
    if _DATE_ONLY.match(text):
        return Invalid(raw_value, "calendar date out of range")
    if text.casefold() in _CLOCK_KEYWORDS:
        return Invalid(raw_value, "unrecognized date/time text")
    try:
        parsed = pd.to_datetime(text, errors="coerce", utc=True)
    except (TypeError, ValueError, OverflowError):
        parsed = pd.NaT
    if not isinstance(parsed, pd.Timestamp) or pd.isna(parsed):
        return Invalid(raw_value, "unrecognized date/time text")
    return _checked(raw_value, Instant.from_epoch_ms(int(parsed.value) // 1_000_000))


def _checked(raw_value: object, instant: Instant) -> ParsedInstant:
    if not instant.is_valid:
        return Invalid(raw_value, "outside the representable range")
    return Valid(instant)
