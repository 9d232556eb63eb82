import pytest

from fantasy_football_manager.domain.week import (
    DEFAULT_WEEK,
    normalize_week,
    parse_week_number,
    sort_weeks,
    week_key,
)


class TestNormalizeWeek:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("week1", "week1"),
            ("Week3", "week3"),
            ("  WEEK12 ", "week12"),
            ("week0", "week0"),
        ],
    )
    def test_valid_keys_are_canonicalized(self, raw: str, expected: str) -> None:
        assert normalize_week(raw) == expected

    @pytest.mark.parametrize("raw", ["", "week", "week-1", "wk3", "week 3", "3", "week3a", "week1.5"])
    def test_invalid_strings_rejected(self, raw: str) -> None:
        assert normalize_week(raw) is None

    @pytest.mark.parametrize("raw", [None, 3, 3.0, True, ["week1"], {"week": 1}])
    def test_non_strings_rejected(self, raw: object) -> None:
        assert normalize_week(raw) is None

    def test_default_week_is_valid(self) -> None:
        assert normalize_week(DEFAULT_WEEK) == "week1"


class TestWeekNumbers:
    def test_parse_week_number(self) -> None:
        assert parse_week_number("week12") == 12

    def test_parse_week_number_invalid(self) -> None:
        assert parse_week_number("playoffs") is None

    def test_week_key_round_trip(self) -> None:
        assert parse_week_number(week_key(7)) == 7


class TestSortWeeks:
    def test_numeric_order_not_lexical(self) -> None:
        assert sort_weeks(["week10", "week2", "week1"]) == ["week1", "week2", "week10"]

    def test_invalid_keys_sort_last(self) -> None:
        assert sort_weeks(["bogus", "week3", "week1"]) == ["week1", "week3", "bogus"]

    def test_empty(self) -> None:
        assert sort_weeks([]) == []
