"""Unit tests for ISO 8601 text parsing."""

from datetime import UTC, datetime

import pytest

from timeshape.domain.entities import INVALID_INSTANT, Invalid, Valid
from timeshape.domain.services.transformers import iso_date_to_instant, parse_instant


class TestParseInstant:
    def test_zulu_timestamp(self):
        result = parse_instant("2023-12-25T10:30:00Z")
        assert isinstance(result, Valid)
        assert result.instant.epoch_ms == 1_703_500_200_000

    def test_offset_timestamp(self):
        result = parse_instant("2023-12-25T05:30:00-05:00")
        assert result == parse_instant("2023-12-25T10:30:00Z")

    def test_fractional_seconds(self):
        result = parse_instant("1970-01-01T00:00:00.250Z")
        assert result.to_instant().epoch_ms == 250

    def test_naive_text_reads_as_utc(self):
        assert parse_instant("1970-01-02").to_instant().epoch_ms == 86_400_000
        assert parse_instant("1970-01-01T00:01:00").to_instant().epoch_ms == 60_000

    def test_surrounding_whitespace_is_ignored(self):
        assert parse_instant("  1970-01-01T00:00:00Z ").to_instant().epoch_ms == 0

    def test_datetime_input(self):
        value = datetime(2000, 1, 1, tzinfo=UTC)
        assert parse_instant(value).to_instant().to_datetime() == value

    @pytest.mark.parametrize("text", ["not-a-date", "", "   "])
    def test_unreadable_text(self, text):
        result = parse_instant(text)
        assert isinstance(result, Invalid)
        assert result.source == text

    @pytest.mark.parametrize("text", ["now", "today", "NOW", " Today "])
    def test_clock_keywords_are_not_dates(self, text):
        result = parse_instant(text)
        assert isinstance(result, Invalid)
        assert result.reason == "unrecognized date/time text"
        assert iso_date_to_instant(text) is INVALID_INSTANT

    def test_impossible_calendar_date(self):
        result = parse_instant("2023-02-30")
        assert isinstance(result, Invalid)
        assert "out of range" in result.reason

    @pytest.mark.parametrize("value", [None, 12, 3.5])
    def test_non_text_input(self, value):
        result = parse_instant(value)
        assert isinstance(result, Invalid)
        assert "expected text" in result.reason


class TestIsoDateToInstant:
    def test_valid_text(self):
        assert iso_date_to_instant("2023-01-01T00:00:00Z").is_valid

    def test_invalid_text_gives_sentinel(self):
        assert iso_date_to_instant("not-a-date") is INVALID_INSTANT
