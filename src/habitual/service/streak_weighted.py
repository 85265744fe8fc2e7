# SPDX-License-Identifier: MIT

"""
Weighted streaks: completed (green) = 1, minimum (yellow) = 0.1, skipped or
open (red) = 0 and ends the streak. No gap tolerance.
"""

from typing import Optional, Union

import pendulum

from habitual.model.entry import EntryStatus
from habitual.model.streak import WeightedStreakResult
from habitual.service.streak import (
    StatusMap,
    StreakEntries,
    build_status_map,
    is_selected_weekday,
    selected_dates_in_week,
)
from habitual.time import DateLike, add_days, date_to_str, to_date, week_start

WEIGHT_COMPLETED = 1.0
WEIGHT_MINIMUM = 0.1


def get_weight(status: Optional[EntryStatus]) -> float:
    if status == "completed":
        return WEIGHT_COMPLETED
    if status == "minimum":
        return WEIGHT_MINIMUM
    return 0.0


def is_red(status: Optional[EntryStatus]) -> bool:
    return get_weight(status) == 0


def _round(value: float) -> float:
    # Weights are tenths; drop float noise such as 0.30000000000000004
    return round(value, 1)


def _current_weighted_dates(
    status_map: StatusMap, today: pendulum.Date
) -> list[pendulum.Date]:
    dates: list[pendulum.Date] = []
    day = today
    while not is_red(status_map.get(day)):
        dates.append(day)
        day = add_days(day, -1)
    dates.reverse()
    return dates


def compute_weighted_streaks(
    entries: StreakEntries, today: DateLike
) -> WeightedStreakResult:
    """Current and longest weighted streak for a daily habit, walking back from today."""
    status_map = build_status_map(entries)
    today_date = to_date(today)

    current = sum(
        get_weight(status_map.get(d))
        for d in _current_weighted_dates(status_map, today_date)
    )

    if not status_map:
        return {"current": _round(current), "longest": _round(current)}

    end = max(max(status_map), today_date)
    longest = current
    run = 0.0
    day = min(status_map)
    while day <= end:
        status = status_map.get(day)
        if is_red(status):
            run = 0.0
        else:
            run += get_weight(status)
            longest = max(longest, run)
        day = add_days(day, 1)

    return {"current": _round(current), "longest": _round(longest)}


def compute_weighted_current_streak_dates(
    entries: StreakEntries, today: DateLike
) -> list[str]:
    """Dates in the current weighted streak, oldest first."""
    status_map = build_status_map(entries)
    return [date_to_str(d) for d in _current_weighted_dates(status_map, to_date(today))]


def get_week_weight(
    start: pendulum.Date, status_map: StatusMap, weekday_mask: int
) -> float:
    """Sum of selected-day weights in the week; a red selected day zeroes the week."""
    total = 0.0
    for day in selected_dates_in_week(start, weekday_mask):
        status = status_map.get(day)
        if is_red(status):
            return 0.0
        total += get_weight(status)
    return total


def _current_weighted_weeks(
    status_map: StatusMap, today: pendulum.Date, weekday_mask: int
) -> list[tuple[pendulum.Date, float]]:
    weeks: list[tuple[pendulum.Date, float]] = []
    week = week_start(today)
    weight = get_week_weight(week, status_map, weekday_mask)
    if weight == 0:
        week = add_days(week, -7)
        weight = get_week_weight(week, status_map, weekday_mask)
    while weight > 0:
        weeks.append((week, weight))
        week = add_days(week, -7)
        weight = get_week_weight(week, status_map, weekday_mask)
    return weeks


def compute_weekly_weighted_streaks(
    entries: StreakEntries, today: DateLike, weekday_mask: int
) -> WeightedStreakResult:
    """Weighted streak for a weekly habit: sum of week weights over consecutive non-red weeks."""
    status_map = build_status_map(entries)
    current = sum(
        weight
        for _, weight in _current_weighted_weeks(
            status_map, to_date(today), weekday_mask
        )
    )

    if not status_map:
        return {"current": _round(current), "longest": _round(current)}

    week_starts = sorted(
        {week_start(d) for d in status_map if is_selected_weekday(d, weekday_mask)}
    )
    longest = current
    run = 0.0
    for week in week_starts:
        weight = get_week_weight(week, status_map, weekday_mask)
        if weight == 0:
            run = 0.0
        else:
            run += weight
            longest = max(longest, run)

    return {"current": _round(current), "longest": _round(longest)}


def compute_weekly_weighted_current_streak_dates(
    entries: StreakEntries, today: DateLike, weekday_mask: int
) -> list[str]:
    """All selected days of the weeks in the current weighted streak, oldest first."""
    status_map = build_status_map(entries)
    dates: list[pendulum.Date] = []
    for week, _ in _current_weighted_weeks(status_map, to_date(today), weekday_mask):
        dates.extend(selected_dates_in_week(week, weekday_mask))
    return [date_to_str(d) for d in sorted(dates)]


def format_streak_value(value: Union[int, float]) -> str:
    """Whole numbers render plain, fractions with one decimal."""
    if value % 1 == 0:
        return str(int(value))
    return f"{value:.1f}"
