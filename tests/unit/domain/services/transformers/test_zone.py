"""Unit tests for timezone resolution and naming."""

from datetime import UTC, datetime, timedelta

import pytest

from timeshape.domain.exceptions import UnknownTimezoneError
from timeshape.domain.services.transformers import (
    is_known_zone,
    resolve_zone,
    zone_abbreviation,
    zone_full_name,
)
from timeshape.domain.services.transformers.zone import format_offset


def _local(zone: str, *args: int) -> datetime:
    return datetime(*args, tzinfo=UTC).astimezone(resolve_zone(zone))


class TestResolveZone:
    def test_known_zone(self):
        assert resolve_zone("Europe/Berlin").key == "Europe/Berlin"

    def test_surrounding_whitespace(self):
        assert resolve_zone(" UTC ").key == "UTC"

    @pytest.mark.parametrize("zone", ["Not/AZone", "", "../etc/passwd"])
    def test_unknown_zone_raises(self, zone):
        with pytest.raises(UnknownTimezoneError) as exc_info:
            resolve_zone(zone)
        assert exc_info.value.zone == zone

    def test_unknown_zone_is_value_error(self):
        with pytest.raises(ValueError, match="Unknown timezone identifier"):
            resolve_zone("Mars/Olympus_Mons")

    def test_is_known_zone(self):
        assert is_known_zone("Asia/Tokyo")
        assert not is_known_zone("Asia/Atlantis")


class TestZoneNames:
    def test_abbreviation_follows_dst(self):
        assert zone_abbreviation(_local("America/New_York", 2024, 1, 15, 12)) == "EST"
        assert zone_abbreviation(_local("America/New_York", 2024, 7, 15, 12)) == "EDT"

    def test_numeric_abbreviation_becomes_gmt_label(self):
        assert zone_abbreviation(_local("Europe/Istanbul", 2024, 1, 1)) == "GMT+3"
        assert zone_abbreviation(_local("Asia/Kathmandu", 2024, 1, 1)) == "GMT+5:45"

    def test_full_names(self):
        assert (
            zone_full_name(_local("America/Los_Angeles", 2024, 1, 1), "America/Los_Angeles")
            == "Pacific Standard Time"
        )
        assert (
            zone_full_name(_local("Europe/Berlin", 2024, 7, 1), "Europe/Berlin")
            == "Central European Summer Time"
        )

    def test_ambiguous_abbreviation_uses_zone_override(self):
        assert (
            zone_full_name(_local("Asia/Kolkata", 2024, 1, 1), "Asia/Kolkata")
            == "India Standard Time"
        )
        assert (
            zone_full_name(_local("Asia/Shanghai", 2024, 1, 1), "Asia/Shanghai")
            == "China Standard Time"
        )

    def test_unnamed_zone_falls_back_to_offset(self):
        assert (
            zone_full_name(_local("Europe/Istanbul", 2024, 1, 1), "Europe/Istanbul")
            == "GMT+03:00"
        )


class TestFormatOffset:
    def test_variants(self):
        offset = timedelta(hours=-3, minutes=-30)
        assert format_offset(offset, separator=":", minutes="always") == "-03:30"
        assert format_offset(offset, separator="", minutes="always") == "-0330"
        assert format_offset(timedelta(hours=2), separator="", minutes="optional") == "+02"

    def test_zero_offset(self):
        assert format_offset(timedelta(0), separator=":", minutes="always") == "+00:00"
