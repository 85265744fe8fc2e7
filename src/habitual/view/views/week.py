# SPDX-License-Identifier: MIT

from typing import Callable, Optional

import pendulum
from rich.console import Console
from rich.text import Text

from habitual.color import (
    NOT_TRACKED_STYLE,
    TODAY_STYLE,
    get_shade_color,
    get_weighted_status_color,
)
from habitual.model.entry import EntryStatus, HabitEntry
from habitual.model.habit import HabitColorId, HabitWithStreaks
from habitual.model.streak import StreakVariant
from habitual.service.habit import get_shade_index, resolve_weekday_mask
from habitual.service.streak import is_selected_weekday
from habitual.service.streak_weighted import format_streak_value
from habitual.time import date_to_display_header_str, date_to_str, dates_in_range
from habitual.view.views.header import header

LEFT_COLUMN_WIDTH = 18
SLOT_WIDTH = 7


def build_week_header(
    dates: list[pendulum.Date],
    today: pendulum.Date,
    left_column_width: int = LEFT_COLUMN_WIDTH,
    slot_width: int = SLOT_WIDTH,
) -> Text:
    row = Text()
    row.append("habit".ljust(left_column_width), style="bold")
    for date in dates:
        label = date_to_display_header_str(date).ljust(slot_width)
        row.append(label, style=TODAY_STYLE if date == today else "bold")
    row.append("streak", style="bold")
    return row


def build_week_row(
    left_column_text: str,
    left_column_style: str,
    dates: list[pendulum.Date],
    get_symbol: Callable[[pendulum.Date], tuple[str, str]],
    streak_text: str,
    left_column_width: int = LEFT_COLUMN_WIDTH,
    slot_width: int = SLOT_WIDTH,
) -> Text:
    """
    Build one habit row of the week grid.

    Args:
        left_column_text: Habit name
        left_column_style: Rich style for the name column
        dates: Dates of the visible range, one slot each
        get_symbol: Callback date -> (symbol, style) for a slot
        streak_text: Text for the trailing streak column
        left_column_width: Width of the name column
        slot_width: Width of each date slot

    Returns:
        Rich Text object with the row
    """
    row = Text()

    left_col = left_column_text
    if len(left_col) > left_column_width - 1:
        left_col = left_col[: left_column_width - 4] + "..."
    row.append(left_col.ljust(left_column_width), style=left_column_style)

    for date in dates:
        symbol, symbol_style = get_symbol(date)
        # Symbol centered in a short colored block, rest of the slot blank
        cell = f" {symbol} "
        if symbol_style:
            row.append(cell, style=symbol_style)
        else:
            row.append(cell)
        row.append(" " * (slot_width - len(cell)))

    row.append(streak_text)
    return row


def get_standard_symbol(
    date: pendulum.Date,
    status: Optional[EntryStatus],
    is_tracked: bool,
    is_future: bool,
    streak_dates: list[str],
    color: HabitColorId,
) -> tuple[str, str]:
    """Symbol and style for a slot: completed X, skipped /, open blank; shaded by streak age."""
    if not is_tracked:
        return ("·", NOT_TRACKED_STYLE)
    if is_future and status is None:
        return ("-", "dim")

    shade_index = get_shade_index(date, status, streak_dates)
    symbol = " "
    if status == "completed":
        symbol = "X"
    elif status == "skipped":
        symbol = "/"
    elif status == "minimum":
        symbol = "x"

    if shade_index < 0:
        return (symbol, "")
    return (symbol, f"black on {get_shade_color(color, shade_index)}")


def get_weighted_symbol(
    status: Optional[EntryStatus],
    is_tracked: bool,
    is_future: bool,
) -> tuple[str, str]:
    """Symbol and style for a weighted slot: green completed, yellow minimum, red anything else."""
    if not is_tracked:
        return ("·", NOT_TRACKED_STYLE)
    if is_future and status is None:
        return ("-", "dim")

    symbol = {"completed": "X", "minimum": "x", "skipped": "/"}.get(status or "", " ")
    return (symbol, f"black on {get_weighted_status_color(status)}")


def week_view(
    habits: list[HabitWithStreaks],
    entries_by_habit: dict[str, list[HabitEntry]],
    start: pendulum.Date,
    end: pendulum.Date,
    today: pendulum.Date,
    variant: StreakVariant,
) -> None:
    """
    Display a calendar grid of the given range, one row per habit.

    habit             SUN 7   MON 8   TUE 9   ...  streak
    Read               X       X       /      ...  🔥 3 (9)
    """
    console = Console()
    header(console, date_to_str(today), f"week {date_to_str(start)}")

    dates = dates_in_range(start, end)
    console.print(build_week_header(dates, today), no_wrap=True, crop=False)

    for habit in habits:
        statuses = {
            e["entry_date"]: e["status"] for e in entries_by_habit.get(habit["id"], [])
        }
        mask = resolve_weekday_mask(habit)

        def get_symbol(date: pendulum.Date) -> tuple[str, str]:
            status = statuses.get(date_to_str(date))
            is_tracked = mask is None or is_selected_weekday(date, mask)
            is_future = date > today
            if variant == "weighted":
                return get_weighted_symbol(status, is_tracked, is_future)
            return get_standard_symbol(
                date,
                status,
                is_tracked,
                is_future,
                habit["current_streak_dates"],
                habit["color"],
            )

        streak_text = (
            f"🔥 {format_streak_value(habit['current_streak'])}"
            f" ({format_streak_value(habit['longest_streak'])})"
        )
        console.print(
            build_week_row(habit["name"], "bold", dates, get_symbol, streak_text),
            no_wrap=True,
            crop=False,
        )
