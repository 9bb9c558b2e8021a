"""
Unit tests for the watch-page value normalizers.

Covers three-valued flags, the family-friendly default, hours-less duration
tokens, region lists and locale-formatted counts.
"""

from __future__ import annotations

import pytest

from youtube_video_info.services.watch.normalizers import (
    parse_duration,
    parse_family_friendly,
    parse_flag,
    parse_regions,
    parse_view_count,
    parse_votes,
)


class TestParseFlag:
    """Flags keep 'unknown' distinct from 'false'."""

    def test_true_string(self) -> None:
        assert parse_flag("True") is True

    def test_false_string(self) -> None:
        assert parse_flag("False") is False

    def test_other_string_is_false(self) -> None:
        assert parse_flag("yes") is False
        assert parse_flag("true") is False

    def test_absent_stays_absent(self) -> None:
        assert parse_flag(None) is None

    def test_already_parsed_value_passes_through(self) -> None:
        assert parse_flag(parse_flag("True")) is True
        assert parse_flag(parse_flag("False")) is False


class TestParseFamilyFriendly:
    """The family-friendly flag always resolves to a concrete bool."""

    def test_true_string(self) -> None:
        assert parse_family_friendly("True") is True

    def test_false_string(self) -> None:
        assert parse_family_friendly("False") is False

    def test_absent_is_false(self) -> None:
        assert parse_family_friendly(None) is False

    def test_already_parsed_value_passes_through(self) -> None:
        assert parse_family_friendly(True) is True


class TestParseDuration:
    """Duration tokens of the form [prefix](<m>M)?<s>S."""

    def test_minutes_and_seconds(self) -> None:
        assert parse_duration("PT4M13S") == 253

    def test_seconds_only(self) -> None:
        assert parse_duration("PT45S") == 45

    @pytest.mark.parametrize("raw", ["4M13S", "XY4M13S", "pt4m13s"])
    def test_prefix_is_arbitrary_and_case_insensitive(self, raw: str) -> None:
        assert parse_duration(raw) == 253

    def test_hours_are_not_supported(self) -> None:
        assert parse_duration("PT1H2M3S") is None

    @pytest.mark.parametrize("raw", ["", "PT4M", "four minutes", "PT4M13"])
    def test_non_matching_input_is_absent(self, raw: str) -> None:
        assert parse_duration(raw) is None

    def test_absent_stays_absent(self) -> None:
        assert parse_duration(None) is None

    def test_already_parsed_value_passes_through(self) -> None:
        assert parse_duration(parse_duration("PT4M13S")) == 253


class TestParseRegions:
    """Region lists are comma-split in order."""

    def test_splits_in_order(self) -> None:
        assert parse_regions("US,GB,CA") == ["US", "GB", "CA"]

    def test_single_region(self) -> None:
        assert parse_regions("DE") == ["DE"]

    def test_absent_is_absent_not_empty(self) -> None:
        assert parse_regions(None) is None

    def test_empty_string_is_absent(self) -> None:
        assert parse_regions("") is None

    def test_already_parsed_value_passes_through(self) -> None:
        regions = parse_regions("US,GB")
        assert parse_regions(regions) == ["US", "GB"]


class TestParseViewCount:
    """View counts are plain digit strings."""

    def test_digits(self) -> None:
        assert parse_view_count("1400000000") == 1400000000

    def test_leading_digits_are_used(self) -> None:
        assert parse_view_count("123 views") == 123

    def test_non_numeric_is_absent(self) -> None:
        assert parse_view_count("many") is None

    def test_absent_stays_absent(self) -> None:
        assert parse_view_count(None) is None

    def test_already_parsed_value_passes_through(self) -> None:
        assert parse_view_count(parse_view_count("42")) == 42


class TestParseVotes:
    """Vote counts tolerate locale grouping characters."""

    def test_comma_grouping(self) -> None:
        assert parse_votes("1,234") == 1234

    def test_space_grouping(self) -> None:
        assert parse_votes("12 345") == 12345

    def test_dot_grouping(self) -> None:
        assert parse_votes("2.510") == 2510

    def test_non_breaking_space_grouping(self) -> None:
        assert parse_votes("2\u00a0510") == 2510

    def test_empty_string_is_absent(self) -> None:
        assert parse_votes("") is None

    def test_no_digits_is_absent(self) -> None:
        assert parse_votes("Like") is None

    def test_absent_stays_absent(self) -> None:
        assert parse_votes(None) is None

    def test_already_parsed_value_passes_through(self) -> None:
        assert parse_votes(parse_votes("1,234")) == 1234
