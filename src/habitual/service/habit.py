# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from habitual.model.entry import EntryStatus, HabitEntry, StreakEntry
from habitual.model.habit import Habit, HabitWithStreaks
from habitual.model.streak import StreakVariant
from habitual.service.streak import (
    compute_daily_current_streak_dates,
    compute_daily_streaks,
    compute_weekly_current_streak_dates,
    compute_weekly_streaks,
    is_valid_weekday_mask,
)
from habitual.service.streak_weighted import (
    compute_weekly_weighted_current_streak_dates,
    compute_weekly_weighted_streaks,
    compute_weighted_current_streak_dates,
    compute_weighted_streaks,
)
from habitual.time import DateLike, add_days, date_to_str, to_date

# Streaks are computed over a wide window; older history is not considered
HISTORY_DAYS_BACK = 730
HISTORY_DAYS_FORWARD = 7


def resolve_weekday_mask(habit: Habit) -> Optional[int]:
    """
    Weekday mask for a weekly habit with a valid target (1-127), otherwise None.
    Habits without a usable mask are treated as daily.
    """
    target = habit["frequency_target"]
    if (
        habit["frequency"] == "weekly"
        and isinstance(target, int)
        and is_valid_weekday_mask(target)
    ):
        return target
    return None


def to_streak_entries(entries: list[HabitEntry]) -> list[StreakEntry]:
    return [{"date": e["entry_date"], "status": e["status"]} for e in entries]


def get_habit_streaks(
    habit: Habit,
    entries: list[HabitEntry],
    today: DateLike,
    variant: StreakVariant = "standard",
) -> HabitWithStreaks:
    """Derive current/longest streak and current streak dates for one habit."""
    streak_entries = to_streak_entries(entries)
    mask = resolve_weekday_mask(habit)

    if variant == "weighted":
        if mask is not None:
            weighted = compute_weekly_weighted_streaks(streak_entries, today, mask)
            dates = compute_weekly_weighted_current_streak_dates(
                streak_entries, today, mask
            )
        else:
            weighted = compute_weighted_streaks(streak_entries, today)
            dates = compute_weighted_current_streak_dates(streak_entries, today)
        current: float = weighted["current"]
        longest: float = weighted["longest"]
    else:
        if mask is not None:
            result = compute_weekly_streaks(streak_entries, today, mask)
            dates = compute_weekly_current_streak_dates(streak_entries, today, mask)
        else:
            result = compute_daily_streaks(streak_entries, today)
            dates = compute_daily_current_streak_dates(streak_entries, today)
        current = result["current"]
        longest = result["longest"]

    return {
        **habit,
        "current_streak": current,
        "longest_streak": longest,
        "current_streak_dates": dates,
    }


def get_habits_with_streaks(
    habits: list[Habit],
    entries_by_habit: dict[str, list[HabitEntry]],
    today: DateLike,
    variant: StreakVariant = "standard",
) -> list[HabitWithStreaks]:
    return [
        get_habit_streaks(habit, entries_by_habit.get(habit["id"], []), today, variant)
        for habit in habits
    ]


def history_window(
    today: DateLike,
    days_back: int = HISTORY_DAYS_BACK,
    days_forward: int = HISTORY_DAYS_FORWARD,
) -> tuple[pendulum.Date, pendulum.Date]:
    """Date range of entries the streak calculation should be given."""
    today_date = to_date(today)
    return add_days(today_date, -days_back), add_days(today_date, days_forward)


def next_status(current: Optional[EntryStatus]) -> Optional[EntryStatus]:
    """Cell cycle: open -> completed -> skipped -> open. Minimum cycles back to open."""
    if current is None:
        return "completed"
    if current == "completed":
        return "skipped"
    return None


def _sorted_by_date(entries: list[HabitEntry]) -> list[HabitEntry]:
    return sorted(entries, key=lambda e: e["entry_date"])


def set_entry_status(
    entries: list[HabitEntry],
    habit_id: str,
    entry_date: DateLike,
    status: Optional[EntryStatus],
) -> list[HabitEntry]:
    """
    Return a new entry list with the status for entry_date replaced.
    A status of None removes the entry (open). The input list is not modified.
    """
    date_str = date_to_str(to_date(entry_date))
    existing = next((e for e in entries if e["entry_date"] == date_str), None)
    without_date = [e for e in entries if e["entry_date"] != date_str]
    if status is None:
        return without_date

    new_entry: HabitEntry = {
        "id": existing["id"] if existing is not None else None,
        "habit_id": habit_id,
        "entry_date": date_str,
        "status": status,
    }
    return _sorted_by_date(without_date + [new_entry])


def cycle_entry(
    entries: list[HabitEntry], habit_id: str, entry_date: DateLike
) -> list[HabitEntry]:
    date_str = date_to_str(to_date(entry_date))
    current = next(
        (e["status"] for e in entries if e["entry_date"] == date_str), None
    )
    return set_entry_status(entries, habit_id, date_str, next_status(current))


def merge_entries(
    existing: list[HabitEntry], incoming: list[HabitEntry]
) -> list[HabitEntry]:
    """Union keyed by date; incoming entries replace existing ones for the same date."""
    by_date = {e["entry_date"]: e for e in existing}
    for entry in incoming:
        by_date[entry["entry_date"]] = entry
    return _sorted_by_date(list(by_date.values()))


def entries_in_range(
    entries: list[HabitEntry], start: DateLike, end: DateLike
) -> list[HabitEntry]:
    start_str = date_to_str(to_date(start))
    end_str = date_to_str(to_date(end))
    return [e for e in entries if start_str <= e["entry_date"] <= end_str]


def get_shade_index(
    entry_date: DateLike,
    status: Optional[EntryStatus],
    streak_dates: list[str],
) -> int:
    """
    Shade index for a calendar cell:
    - completed: position in the current streak (0 if not part of it)
    - skipped: previous day's position so a tolerated gap keeps the streak color
    - anything else: -1 (unshaded)
    """
    day = to_date(entry_date)
    if status == "completed":
        date_str = date_to_str(day)
        return streak_dates.index(date_str) if date_str in streak_dates else 0
    if status == "skipped":
        previous = date_to_str(add_days(day, -1))
        return streak_dates.index(previous) if previous in streak_dates else 0
    return -1
