# SPDX-License-Identifier: MIT

"""
Habit streaks derived purely from an entry log.

Daily habits: only completed days count. A single skipped or open day between
completed days is tolerated; two consecutive gaps break the streak.

Weekly habits: a week is complete when every selected weekday in it is completed.
Streaks are counted in complete weeks and allow no gaps inside a week.
"""

from collections.abc import Iterable, Mapping
from typing import Optional, Union

import pendulum

from habitual.model.entry import EntryStatus, StreakEntry
from habitual.model.streak import StreakResult
from habitual.time import (
    DateLike,
    add_days,
    date_to_str,
    to_date,
    week_start,
    weekday_index,
)

StreakEntries = Union[Mapping[DateLike, EntryStatus], Iterable[StreakEntry]]
StatusMap = dict[pendulum.Date, EntryStatus]

WEEKDAY_MASK_MIN = 1
WEEKDAY_MASK_MAX = 127


def build_status_map(entries: StreakEntries) -> StatusMap:
    """
    Copy entries into a date -> status map. Accepts either a mapping of
    date -> status or an iterable of {"date", "status"} records; a later record
    for the same date wins.
    """
    status_map: StatusMap = {}
    if isinstance(entries, Mapping):
        for entry_date, status in entries.items():
            status_map[to_date(entry_date)] = status
    else:
        for entry in entries:
            status_map[to_date(entry["date"])] = entry["status"]
    return status_map


def is_gap(status: Optional[EntryStatus]) -> bool:
    return status != "completed"


def _count_streak_backward(
    status_map: StatusMap, end_date: pendulum.Date
) -> list[pendulum.Date]:
    """Completed dates walking back from end_date until two consecutive gaps, oldest first."""
    dates: list[pendulum.Date] = []
    day = end_date
    consecutive_gaps = 0
    while consecutive_gaps < 2:
        if is_gap(status_map.get(day)):
            consecutive_gaps += 1
        else:
            consecutive_gaps = 0
            dates.append(day)
        day = add_days(day, -1)
    dates.reverse()
    return dates


def _current_streak_end(
    status_map: StatusMap, today: pendulum.Date
) -> Optional[pendulum.Date]:
    # Today if completed; yesterday if today is a single gap after a completed day
    if not is_gap(status_map.get(today)):
        return today
    yesterday = add_days(today, -1)
    if not is_gap(status_map.get(yesterday)):
        return yesterday
    return None


def _longest_daily_streak(status_map: StatusMap, today: pendulum.Date) -> int:
    if not status_map:
        return 0

    start = min(status_map)
    end = max(max(status_map), today)

    longest = 0
    run = 0
    consecutive_gaps = 0
    day = start
    while day <= end:
        if is_gap(status_map.get(day)):
            consecutive_gaps += 1
            if consecutive_gaps >= 2:
                longest = max(longest, run)
                run = 0
                consecutive_gaps = 1
        else:
            run += 1
            consecutive_gaps = 0
        day = add_days(day, 1)
    return max(longest, run)


def compute_daily_streaks(entries: StreakEntries, today: DateLike) -> StreakResult:
    """Current and longest streak in days for a daily habit."""
    status_map = build_status_map(entries)
    today_date = to_date(today)

    end_date = _current_streak_end(status_map, today_date)
    current = 0
    if end_date is not None:
        current = len(_count_streak_backward(status_map, end_date))

    return {
        "current": current,
        "longest": _longest_daily_streak(status_map, today_date),
    }


def compute_daily_current_streak_dates(
    entries: StreakEntries, today: DateLike
) -> list[str]:
    """
    Dates (YYYY-MM-DD) forming the current daily streak, oldest first.
    Only completed days are included; index in the list is the streak age used for shading.
    """
    status_map = build_status_map(entries)
    end_date = _current_streak_end(status_map, to_date(today))
    if end_date is None:
        return []
    return [date_to_str(d) for d in _count_streak_backward(status_map, end_date)]


def is_valid_weekday_mask(weekday_mask: int) -> bool:
    return WEEKDAY_MASK_MIN <= weekday_mask <= WEEKDAY_MASK_MAX


def is_selected_weekday(date: DateLike, weekday_mask: int) -> bool:
    """Whether the date falls on a weekday selected by the mask (bit 0 = Sunday ... bit 6 = Saturday)."""
    if not is_valid_weekday_mask(weekday_mask):
        return False
    return (weekday_mask & (1 << weekday_index(to_date(date)))) != 0


def selected_dates_in_week(
    start: pendulum.Date, weekday_mask: int
) -> list[pendulum.Date]:
    """Selected weekdays of the week starting on the given Sunday."""
    if not is_valid_weekday_mask(weekday_mask):
        return []
    return [
        add_days(start, i) for i in range(7) if (weekday_mask & (1 << i)) != 0
    ]


def is_week_complete(
    start: pendulum.Date, status_map: StatusMap, weekday_mask: int
) -> bool:
    """A week is complete if every selected weekday has a completed entry."""
    selected = selected_dates_in_week(start, weekday_mask)
    if not selected:
        return False
    return all(status_map.get(d) == "completed" for d in selected)


def _current_streak_weeks(
    status_map: StatusMap, today: pendulum.Date, weekday_mask: int
) -> list[pendulum.Date]:
    """
    Week starts of the current weekly streak, newest first. If this week is not
    complete yet, counting starts from last week so a finished week still shows.
    """
    weeks: list[pendulum.Date] = []
    week = week_start(today)
    if not is_week_complete(week, status_map, weekday_mask):
        week = add_days(week, -7)
    while is_week_complete(week, status_map, weekday_mask):
        weeks.append(week)
        week = add_days(week, -7)
    return weeks


def compute_weekly_streaks(
    entries: StreakEntries, today: DateLike, weekday_mask: int
) -> StreakResult:
    """Current and longest streak in complete weeks for a weekly habit."""
    status_map = build_status_map(entries)
    current = len(_current_streak_weeks(status_map, to_date(today), weekday_mask))

    if not status_map:
        return {"current": current, "longest": 0}

    # Only weeks that hold at least one entry are scanned; silent weeks in between
    # do not break a run.
    week_starts = sorted({week_start(d) for d in status_map})
    longest = 0
    run = 0
    for week in week_starts:
        if is_week_complete(week, status_map, weekday_mask):
            run += 1
            longest = max(longest, run)
        else:
            run = 0

    return {"current": current, "longest": longest}


def compute_weekly_current_streak_dates(
    entries: StreakEntries, today: DateLike, weekday_mask: int
) -> list[str]:
    """Completed selected days of the weeks in the current weekly streak, oldest first."""
    status_map = build_status_map(entries)
    dates: list[pendulum.Date] = []
    for week in _current_streak_weeks(status_map, to_date(today), weekday_mask):
        dates.extend(
            d
            for d in selected_dates_in_week(week, weekday_mask)
            if status_map.get(d) == "completed"
        )
    return [date_to_str(d) for d in sorted(dates)]
