# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from habitual.color import get_shade_color
from habitual.model.habit import HabitWithStreaks
from habitual.model.streak import StreakVariant
from habitual.service.habit import resolve_weekday_mask
from habitual.service.streak_weighted import format_streak_value
from habitual.time import date_from_str, date_to_display_str
from habitual.view.views.header import header

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def format_frequency(habit: HabitWithStreaks) -> str:
    """'daily', or 'weekly (Mon, Wed, Fri)' for weekly habits with a valid mask."""
    mask = resolve_weekday_mask(habit)
    if mask is None:
        return "daily"
    days = [name for i, name in enumerate(WEEKDAY_NAMES) if mask & (1 << i)]
    return f"weekly ({', '.join(days)})"


def streak_unit(habit: HabitWithStreaks) -> str:
    return "wk" if resolve_weekday_mask(habit) is not None else "days"


def streaks_view(
    today: str,
    habits: list[HabitWithStreaks],
    variant: StreakVariant,
) -> None:
    """
    Display current and longest streak for every habit.

    Habit        Frequency           Current    Longest
    ──────────────────────────────────────────────────
    Read         daily               🔥 4 days  9 days
    Gym          weekly (Mon, Fri)   🔥 2 wk    5 wk
    """
    console = Console()
    header(console, today, f"streaks ({variant})")

    table = Table(box=box.SIMPLE)
    table.add_column("habit")
    table.add_column("frequency")
    table.add_column("current", justify="right")
    table.add_column("longest", justify="right")

    for habit in habits:
        unit = streak_unit(habit)
        color = get_shade_color(habit["color"], len(habit["current_streak_dates"]))
        table.add_row(
            f"[{color}]{escape(habit['name'])}[/]",
            format_frequency(habit),
            f"🔥 {format_streak_value(habit['current_streak'])} {unit}",
            f"{format_streak_value(habit['longest_streak'])} {unit}",
        )

    if not habits:
        console.print("[dim]No habits in log[/dim]")
        return
    console.print(table)


def single_habit_view(today: str, habit: HabitWithStreaks) -> None:
    """Display detail of a single habit including the dates of its current streak."""
    console = Console()
    header(console, today, "habit")

    habit_table = Table(box=box.SIMPLE)
    habit_table.add_column("property")
    habit_table.add_column("value")

    unit = streak_unit(habit)
    habit_table.add_row("id", habit["id"])
    habit_table.add_row("name", habit["name"])
    habit_table.add_row("description", habit["description"] or "")
    habit_table.add_row("frequency", format_frequency(habit))
    habit_table.add_row("desired_action", habit["desired_action"] or "")
    habit_table.add_row("minimum_action", habit["minimum_action"] or "")
    habit_table.add_row("color", habit["color"])
    habit_table.add_row(
        "current_streak", f"{format_streak_value(habit['current_streak'])} {unit}"
    )
    habit_table.add_row(
        "longest_streak", f"{format_streak_value(habit['longest_streak'])} {unit}"
    )
    console.print(habit_table)

    if not habit["current_streak_dates"]:
        return

    dates_table = Table(box=box.SIMPLE, title="current streak")
    dates_table.add_column("#", justify="right")
    dates_table.add_column("date")
    for index, date_str in enumerate(habit["current_streak_dates"]):
        color = get_shade_color(habit["color"], index)
        dates_table.add_row(
            str(index + 1),
            f"[{color}]{date_to_display_str(date_from_str(date_str))}[/]",
        )
    console.print(dates_table)
