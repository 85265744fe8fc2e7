# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional, cast, get_args

import pendulum
import typer
from rich.console import Console
from rich.markup import escape

from habitual import configuration
from habitual.model.entry import HabitEntry
from habitual.model.streak import StreakVariant
from habitual.repository.configuration import CONFIGURATION_REPO
from habitual.repository.habit import HabitLogError, HabitLogRepository
from habitual.service.habit import (
    entries_in_range,
    get_habit_streaks,
    get_habits_with_streaks,
    history_window,
)
from habitual.terminal.parse import parse_date
from habitual.time import add_days, date_to_str, today_local, week_range_for_date
from habitual.view.views import streak as streak_report
from habitual.view.views import week as week_report

VALID_VARIANTS: tuple[str, ...] = get_args(StreakVariant)

TodayOption = Annotated[
    Optional[str],
    typer.Option(
        "--today",
        "-d",
        help="Date to compute streaks for: YYYY-MM-DD, today, yesterday or a day offset",
    ),
]
LogOption = Annotated[
    Optional[Path],
    typer.Option("--log", "-l", help="Habit log YAML file (defaults to config)"),
]
VariantOption = Annotated[
    Optional[str],
    typer.Option("--variant", "-v", help="standard, weighted"),
]


def _error(message: str) -> typer.Exit:
    Console().print(f"[red]Error: {escape(message)}[/red]")
    return typer.Exit(1)


def _resolve_variant(variant: Optional[str]) -> StreakVariant:
    if variant is None:
        return CONFIGURATION_REPO.get_config()["streak_variant"]
    if variant not in VALID_VARIANTS:
        raise _error(
            f"Invalid variant: {variant}. Valid options: {', '.join(VALID_VARIANTS)}"
        )
    return cast(StreakVariant, variant)


def _load_log(
    log: Optional[Path], today: pendulum.Date
) -> tuple[HabitLogRepository, dict[str, list[HabitEntry]]]:
    """Load the habit log and keep only the history window the streaks are computed over."""
    config = CONFIGURATION_REPO.get_config()
    path = log if log is not None else configuration.resolve_log_path(config)
    repository = HabitLogRepository(path)

    try:
        entries_by_habit = repository.get_entries_by_habit()
    except HabitLogError as e:
        raise _error(str(e))

    start, end = history_window(today, config["history_days"])
    return repository, {
        habit_id: entries_in_range(entries, start, end)
        for habit_id, entries in entries_by_habit.items()
    }


def streaks(
    today: TodayOption = None,
    log: LogOption = None,
    variant: VariantOption = None,
) -> None:
    """Show current and longest streak for every habit."""
    today_date = parse_date(today) or today_local()
    streak_variant = _resolve_variant(variant)
    repository, entries_by_habit = _load_log(log, today_date)

    habits = get_habits_with_streaks(
        repository.get_habits(), entries_by_habit, today_date, streak_variant
    )
    streak_report.streaks_view(date_to_str(today_date), habits, streak_variant)


def week(
    today: TodayOption = None,
    log: LogOption = None,
    variant: VariantOption = None,
    offset: Annotated[
        int,
        typer.Option(
            "--offset",
            "-o",
            help="Weeks relative to the current week, e.g. -1 for last week",
        ),
    ] = 0,
) -> None:
    """Show a Sunday-started week grid with streak shading."""
    today_date = parse_date(today) or today_local()
    streak_variant = _resolve_variant(variant)
    repository, entries_by_habit = _load_log(log, today_date)

    start, end = week_range_for_date(today_date)
    start = add_days(start, 7 * offset)
    end = add_days(end, 7 * offset)

    habits = get_habits_with_streaks(
        repository.get_habits(), entries_by_habit, today_date, streak_variant
    )
    week_report.week_view(
        habits,
        {
            habit_id: entries_in_range(entries, start, end)
            for habit_id, entries in entries_by_habit.items()
        },
        start,
        end,
        today_date,
        streak_variant,
    )


def habit(
    name: str,
    today: TodayOption = None,
    log: LogOption = None,
    variant: VariantOption = None,
) -> None:
    """Show a single habit and the dates of its current streak."""
    today_date = parse_date(today) or today_local()
    streak_variant = _resolve_variant(variant)
    repository, entries_by_habit = _load_log(log, today_date)

    try:
        found = repository.get_habit_by_name(name)
    except HabitLogError as e:
        raise _error(str(e))

    habit_with_streaks = get_habit_streaks(
        found, entries_by_habit.get(found["id"], []), today_date, streak_variant
    )
    streak_report.single_habit_view(date_to_str(today_date), habit_with_streaks)
