"""Unit tests for DateTransformer."""

from datetime import datetime

import pytest

from timeshape.domain.entities import INVALID_INSTANT, Instant
from timeshape.domain.exceptions import InvalidInstantError, UnknownTimezoneError
from timeshape.domain.services.transformers import DateTransformer, iso_date_to_instant


@pytest.fixture
def transformer() -> DateTransformer:
    return DateTransformer()


class TestFormat:
    def test_epoch_in_utc(self, transformer):
        result = transformer.format(Instant.from_epoch_ms(0), "yyyy-MM-dd'T'HH:mm", "UTC")
        assert result == "1970-01-01T00:00"

    def test_offset_follows_dst(self, transformer):
        before = iso_date_to_instant("2024-03-10T06:59:00Z")
        after = iso_date_to_instant("2024-03-10T07:00:00Z")
        assert transformer.format(before, "HH:mm zzz", "America/New_York") == "01:59 EST"
        assert transformer.format(after, "HH:mm zzz", "America/New_York") == "03:00 EDT"

    def test_invalid_renders_marker(self, transformer):
        assert transformer.format(INVALID_INSTANT, "yyyy", "UTC") == "Invalid Date"

    def test_custom_marker(self):
        transformer = DateTransformer(invalid_marker="-")
        assert transformer.format(INVALID_INSTANT, "yyyy", "UTC") == "-"

    def test_unknown_zone_raises_even_for_invalid(self, transformer):
        with pytest.raises(UnknownTimezoneError):
            transformer.format(INVALID_INSTANT, "yyyy", "Nowhere/Land")

    def test_range_edge_in_zone_east_of_utc(self, transformer):
        latest = iso_date_to_instant("9999-12-31T23:00:00Z")
        assert transformer.format(latest, "yyyy", "Asia/Tokyo") == "Invalid Date"


class TestFormatHuman:
    def test_abbreviation(self, transformer):
        instant = iso_date_to_instant("2023-12-25T10:30:00Z")
        result = transformer.format_human(instant, "America/New_York", full=False)
        assert result == "December 25, 2023 5:30 AM EST"

    def test_full_name(self, transformer):
        instant = iso_date_to_instant("1988-04-14T18:00:00Z")
        result = transformer.format_human(instant, "America/Los_Angeles", full=True)
        assert result == "April 14, 1988 10:00 AM Pacific Standard Time"

    def test_invalid(self, transformer):
        assert transformer.format_human(INVALID_INSTANT, "UTC", full=True) == "Invalid Date"


class TestWallClock:
    def test_wall_clock(self):
        instant = iso_date_to_instant("2023-12-25T10:30:00Z")
        assert DateTransformer.wall_clock(instant, "Europe/Berlin") == datetime(
            2023, 12, 25, 11, 30
        )

    def test_wall_clock_requires_valid_instant(self):
        with pytest.raises(InvalidInstantError):
            DateTransformer.wall_clock(INVALID_INSTANT, "UTC")

    def test_from_wall_clock(self):
        instant = DateTransformer.from_wall_clock(datetime(2023, 12, 25, 11, 30), "Europe/Berlin")
        assert instant == iso_date_to_instant("2023-12-25T10:30:00Z")

    def test_repeated_time_uses_earlier_occurrence(self):
        instant = DateTransformer.from_wall_clock(
            datetime(2024, 11, 3, 1, 30), "America/New_York"
        )
        assert instant == iso_date_to_instant("2024-11-03T05:30:00Z")

    def test_skipped_time_uses_offset_before_transition(self):
        instant = DateTransformer.from_wall_clock(
            datetime(2024, 3, 10, 2, 30), "America/New_York"
        )
        assert instant == iso_date_to_instant("2024-03-10T07:30:00Z")
