from __future__ import annotations

import datetime

import pendulum
import pytest
import typer

from habitual.terminal.parse import parse_date
from habitual.time import (
    add_days,
    date_from_str,
    date_to_display_header_str,
    date_to_display_str,
    date_to_str,
    dates_in_range,
    to_date,
    today_local,
    week_range_for_date,
    week_start,
    weekday_index,
)


class TestDateConversion:
    def test_round_trip_string(self):
        assert date_to_str(date_from_str("2024-02-29")) == "2024-02-29"

    @pytest.mark.parametrize("value", ["2024-13-01", "2024/01/01", "yesterday", ""])
    def test_malformed_string_raises(self, value):
        with pytest.raises(ValueError):
            date_from_str(value)

    def test_to_date_accepts_all_date_kinds(self):
        expected = pendulum.Date(2024, 1, 7)
        assert to_date("2024-01-07") == expected
        assert to_date(datetime.date(2024, 1, 7)) == expected
        assert to_date(pendulum.date(2024, 1, 7)) == expected
        assert to_date(datetime.datetime(2024, 1, 7, 23, 59)) == expected
        assert isinstance(to_date(datetime.datetime(2024, 1, 7, 23, 59)), pendulum.Date)

    def test_datetime_keeps_its_calendar_day(self):
        late = pendulum.datetime(2024, 1, 7, 23, 30, tz="America/New_York")
        assert date_to_str(late) == "2024-01-07"


class TestCalendar:
    def test_add_days_crosses_month_and_year(self):
        assert add_days(pendulum.Date(2023, 12, 31), 1) == pendulum.Date(2024, 1, 1)
        assert add_days(pendulum.Date(2024, 3, 1), -1) == pendulum.Date(2024, 2, 29)
        assert add_days(pendulum.Date(2023, 3, 1), -1) == pendulum.Date(2023, 2, 28)

    def test_add_days_over_dst_change(self):
        assert add_days(pendulum.Date(2024, 3, 9), 2) == pendulum.Date(2024, 3, 11)
        assert add_days(pendulum.Date(2024, 11, 4), -2) == pendulum.Date(2024, 11, 2)

    @pytest.mark.parametrize(
        "date, index",
        [("2024-01-07", 0), ("2024-01-08", 1), ("2024-01-10", 3), ("2024-01-13", 6)],
    )
    def test_weekday_index_starts_on_sunday(self, date, index):
        assert weekday_index(to_date(date)) == index

    def test_week_start_and_range(self):
        assert week_start(pendulum.Date(2024, 1, 4)) == pendulum.Date(2023, 12, 31)
        assert week_start(pendulum.Date(2024, 1, 7)) == pendulum.Date(2024, 1, 7)
        assert week_range_for_date(pendulum.Date(2024, 1, 13)) == (
            pendulum.Date(2024, 1, 7),
            pendulum.Date(2024, 1, 13),
        )

    def test_dates_in_range_is_inclusive(self):
        dates = dates_in_range(pendulum.Date(2024, 2, 27), pendulum.Date(2024, 3, 1))
        assert [date_to_str(d) for d in dates] == [
            "2024-02-27",
            "2024-02-28",
            "2024-02-29",
            "2024-03-01",
        ]
        assert dates_in_range(pendulum.Date(2024, 3, 2), pendulum.Date(2024, 3, 1)) == []

    def test_display_strings(self):
        assert date_to_display_header_str(pendulum.Date(2023, 12, 31)) == "SUN 31"
        assert date_to_display_str(pendulum.Date(2024, 1, 1)) == "2024-01-01 Mon"


class TestParseDate:
    def test_none_passes_through(self):
        assert parse_date(None) is None

    def test_iso_date(self):
        assert parse_date("2024-01-04") == pendulum.Date(2024, 1, 4)

    @pytest.mark.parametrize(
        "value, offset",
        [
            ("today", 0),
            ("t", 0),
            ("yesterday", -1),
            ("y", -1),
            ("tomorrow", 1),
            ("o", 1),
            ("-3", -3),
            ("+2", 2),
        ],
    )
    def test_relative_dates(self, value, offset):
        assert parse_date(value) == add_days(today_local(), offset)

    @pytest.mark.parametrize("value", ["2024-02-30", "next week", "01/04/2024"])
    def test_invalid_dates_raise_bad_parameter(self, value):
        with pytest.raises(typer.BadParameter):
            parse_date(value)
