# SPDX-License-Identifier: MIT

import datetime
from typing import Union

import pendulum

DateLike = Union[str, datetime.date]

DATE_FORMAT = "YYYY-MM-DD"


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string into a pendulum.Date. Raises ValueError when malformed."""
    return pendulum.from_format(date_str, DATE_FORMAT).date()


def date_to_str(date: datetime.date) -> str:
    """Format a date as 'YYYY-MM-DD'."""
    return to_date(date).to_date_string()


def to_date(value: DateLike) -> pendulum.Date:
    """
    Normalize a 'YYYY-MM-DD' string, datetime.date or datetime.datetime to a
    pendulum.Date. Datetimes keep their own calendar day; no timezone shift is applied.
    """
    if isinstance(value, str):
        return date_from_str(value)
    if isinstance(value, pendulum.Date) and not isinstance(value, datetime.datetime):
        return value
    return pendulum.Date(value.year, value.month, value.day)


def add_days(date: pendulum.Date, days: int) -> pendulum.Date:
    # Civil-day arithmetic, never seconds, so DST transitions cannot skip a day
    return date.add(days=days)


def dates_in_range(start: pendulum.Date, end: pendulum.Date) -> list[pendulum.Date]:
    """All dates from start to end inclusive."""
    dates: list[pendulum.Date] = []
    current = start
    while current <= end:
        dates.append(current)
        current = add_days(current, 1)
    return dates


def weekday_index(date: datetime.date) -> int:
    """Day of week with Sunday = 0 ... Saturday = 6."""
    return date.isoweekday() % 7


def week_start(date: pendulum.Date) -> pendulum.Date:
    """Sunday that starts the week containing the given date."""
    return add_days(date, -weekday_index(date))


def week_range_for_date(date: pendulum.Date) -> tuple[pendulum.Date, pendulum.Date]:
    start = week_start(date)
    return start, add_days(start, 6)


def date_to_display_header_str(date: pendulum.Date) -> str:
    """Column header for a date, e.g. 'SUN 8'."""
    return f"{date.format('ddd').upper()} {date.day}"


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")
