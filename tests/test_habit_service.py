"""Tests for the habit service: streak dispatch per habit and entry helpers."""

from __future__ import annotations

import pendulum
import pytest

from habitual.color import get_shade_color, get_weighted_status_color
from habitual.service.habit import (
    cycle_entry,
    entries_in_range,
    get_habit_streaks,
    get_habits_with_streaks,
    get_shade_index,
    history_window,
    merge_entries,
    next_status,
    resolve_weekday_mask,
    set_entry_status,
)
from habitual.template.habit import get_habit_template


def make_habit(**overrides):
    habit = get_habit_template()
    habit.update({"id": "read", "name": "Read"})
    habit.update(overrides)
    return habit


def make_entry(entry_date: str, status: str, habit_id: str = "read", entry_id=None):
    return {"id": entry_id, "habit_id": habit_id, "entry_date": entry_date, "status": status}


class TestResolveWeekdayMask:
    @pytest.mark.parametrize(
        "frequency, target, expected",
        [
            ("weekly", 42, 42),
            ("weekly", 127, 127),
            ("weekly", 0, None),
            ("weekly", 128, None),
            ("weekly", None, None),
            ("daily", 42, None),
            ("times_per_day", 3, None),
            ("every_x_days", 2, None),
        ],
    )
    def test_resolve(self, frequency, target, expected):
        habit = make_habit(frequency=frequency, frequency_target=target)
        assert resolve_weekday_mask(habit) == expected


class TestGetHabitStreaks:
    ENTRIES = [
        make_entry("2024-01-01", "completed"),
        make_entry("2024-01-02", "completed"),
        make_entry("2024-01-03", "skipped"),
        make_entry("2024-01-04", "completed"),
    ]

    def test_daily_habit(self):
        result = get_habit_streaks(make_habit(), self.ENTRIES, "2024-01-04")
        assert result["current_streak"] == 3
        assert result["longest_streak"] == 3
        assert result["current_streak_dates"] == ["2024-01-01", "2024-01-02", "2024-01-04"]
        assert result["name"] == "Read"

    def test_does_not_modify_habit(self):
        habit = make_habit()
        get_habit_streaks(habit, self.ENTRIES, "2024-01-04")
        assert "current_streak" not in habit

    def test_weekly_habit(self):
        habit = make_habit(frequency="weekly", frequency_target=42)
        entries = [
            make_entry("2024-01-08", "completed"),
            make_entry("2024-01-10", "completed"),
            make_entry("2024-01-12", "completed"),
        ]
        result = get_habit_streaks(habit, entries, pendulum.Date(2024, 1, 16))
        assert result["current_streak"] == 1
        assert result["current_streak_dates"] == ["2024-01-08", "2024-01-10", "2024-01-12"]

    def test_weekly_with_invalid_mask_falls_back_to_daily(self):
        habit = make_habit(frequency="weekly", frequency_target=0)
        result = get_habit_streaks(habit, self.ENTRIES, "2024-01-04")
        assert result["current_streak"] == 3

    def test_weighted_variant(self):
        result = get_habit_streaks(make_habit(), self.ENTRIES, "2024-01-04", "weighted")
        assert result["current_streak"] == 1
        assert result["longest_streak"] == 2
        assert result["current_streak_dates"] == ["2024-01-04"]

    def test_habits_without_entries(self):
        habits = [make_habit(), make_habit(id="walk", name="Walk")]
        results = get_habits_with_streaks(habits, {"read": self.ENTRIES}, "2024-01-04")
        assert [r["current_streak"] for r in results] == [3, 0]
        assert results[1]["current_streak_dates"] == []


class TestHistoryWindow:
    def test_default_window(self):
        assert history_window("2024-01-01") == (
            pendulum.Date(2022, 1, 1),
            pendulum.Date(2024, 1, 8),
        )

    def test_custom_window(self):
        assert history_window(pendulum.Date(2024, 3, 1), 1, 0) == (
            pendulum.Date(2024, 2, 29),
            pendulum.Date(2024, 3, 1),
        )


class TestEntryEditing:
    def test_next_status_cycle(self):
        assert next_status(None) == "completed"
        assert next_status("completed") == "skipped"
        assert next_status("skipped") is None
        assert next_status("minimum") is None

    def test_set_entry_status_adds_sorted_without_mutating(self):
        entries = [make_entry("2024-01-03", "completed")]
        updated = set_entry_status(entries, "read", "2024-01-01", "skipped")
        assert [e["entry_date"] for e in updated] == ["2024-01-01", "2024-01-03"]
        assert len(entries) == 1

    def test_set_entry_status_keeps_existing_id(self):
        entries = [make_entry("2024-01-03", "completed", entry_id=7)]
        updated = set_entry_status(entries, "read", pendulum.Date(2024, 1, 3), "skipped")
        assert updated == [make_entry("2024-01-03", "skipped", entry_id=7)]

    def test_set_entry_status_none_removes(self):
        entries = [make_entry("2024-01-03", "completed")]
        assert set_entry_status(entries, "read", "2024-01-03", None) == []

    def test_cycle_entry(self):
        entries = cycle_entry([], "read", "2024-01-03")
        assert entries[0]["status"] == "completed"
        entries = cycle_entry(entries, "read", "2024-01-03")
        assert entries[0]["status"] == "skipped"
        assert cycle_entry(entries, "read", "2024-01-03") == []

    def test_merge_entries_incoming_wins(self):
        existing = [make_entry("2024-01-02", "completed"), make_entry("2024-01-01", "completed")]
        incoming = [make_entry("2024-01-02", "skipped"), make_entry("2024-01-03", "minimum")]
        merged = merge_entries(existing, incoming)
        assert [(e["entry_date"], e["status"]) for e in merged] == [
            ("2024-01-01", "completed"),
            ("2024-01-02", "skipped"),
            ("2024-01-03", "minimum"),
        ]

    def test_entries_in_range_is_inclusive(self):
        entries = [make_entry(f"2024-01-0{day}", "completed") for day in range(1, 6)]
        selected = entries_in_range(entries, "2024-01-02", pendulum.Date(2024, 1, 4))
        assert [e["entry_date"] for e in selected] == ["2024-01-02", "2024-01-03", "2024-01-04"]


class TestShading:
    STREAK = ["2024-01-01", "2024-01-02", "2024-01-04"]

    def test_completed_uses_streak_position(self):
        assert get_shade_index("2024-01-01", "completed", self.STREAK) == 0
        assert get_shade_index("2024-01-04", "completed", self.STREAK) == 2

    def test_completed_outside_streak_is_lightest(self):
        assert get_shade_index("2023-12-20", "completed", self.STREAK) == 0

    def test_skipped_takes_previous_day_position(self):
        assert get_shade_index("2024-01-03", "skipped", self.STREAK) == 1
        assert get_shade_index("2024-01-10", "skipped", self.STREAK) == 0

    def test_open_and_minimum_are_unshaded(self):
        assert get_shade_index("2024-01-05", None, self.STREAK) == -1
        assert get_shade_index("2024-01-05", "minimum", self.STREAK) == -1

    def test_shade_color_is_clamped(self):
        assert get_shade_color("green", 100) == get_shade_color("green", 15)
        assert get_shade_color("green", -5) == get_shade_color("green", 0)
        assert get_shade_color("dark_blue", 0) != get_shade_color("green", 0)

    def test_weighted_colors(self):
        assert get_weighted_status_color("skipped") == get_weighted_status_color(None)
        assert get_weighted_status_color("completed") != get_weighted_status_color("minimum")
