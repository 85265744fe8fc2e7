# SPDX-License-Identifier: MIT

import datetime
from pathlib import Path
from typing import Any, Optional, cast, get_args

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from habitual.model.entry import EntryStatus, HabitEntry
from habitual.model.habit import Frequency, Habit, HabitColorId
from habitual.service.habit import merge_entries
from habitual.template.habit import get_entry_template, get_habit_template
from habitual.time import date_from_str, date_to_str, to_date

VALID_STATUSES: tuple[str, ...] = get_args(EntryStatus)
VALID_FREQUENCIES: tuple[str, ...] = get_args(Frequency)
VALID_COLORS: tuple[str, ...] = get_args(HabitColorId)


class HabitLogError(Exception):
    """Raised when a habit log file cannot be read or fails validation."""

    pass


class HabitLogRepository:
    """
    Read-only access to a YAML habit log:

    habits:
      - id: read
        name: Read
        frequency: weekly
        frequency_target: 42
    entries:
      - habit_id: read
        entry_date: "2024-01-01"
        status: completed
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._habits: Optional[list[Habit]] = None
        self._entries: Optional[list[HabitEntry]] = None

    @property
    def habits(self) -> list[Habit]:
        if self._habits is None:
            self.__load_data()
        if self._habits is None:
            raise ValueError()
        return self._habits

    @property
    def entries(self) -> list[HabitEntry]:
        if self._entries is None:
            self.__load_data()
        if self._entries is None:
            raise ValueError()
        return self._entries

    def __load_data(self) -> None:
        if not self.path.is_file():
            raise HabitLogError(f"Habit log not found: {self.path}")

        try:
            raw = load(self.path.read_text(), Loader=Loader)
        except YAMLError as e:
            raise HabitLogError(f"Habit log is not valid YAML: {e}")

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise HabitLogError("Habit log must be a mapping with 'habits' and 'entries'")

        raw_habits = raw.get("habits") or []
        raw_entries = raw.get("entries") or []
        if not isinstance(raw_habits, list) or not isinstance(raw_entries, list):
            raise HabitLogError("'habits' and 'entries' must be lists")

        habits = [self.__convert_habit(raw_habit) for raw_habit in raw_habits]
        habit_ids = {habit["id"] for habit in habits}
        if len(habit_ids) != len(habits):
            raise HabitLogError("Habit ids must be unique")

        entries: list[HabitEntry] = []
        for raw_entry in raw_entries:
            entry = self.__convert_entry(raw_entry)
            if entry["habit_id"] not in habit_ids:
                raise HabitLogError(
                    f"Entry for {entry['entry_date']} references unknown habit '{entry['habit_id']}'"
                )
            entries.append(entry)

        self._habits = sorted(habits, key=lambda h: h["sort_order"])
        self._entries = entries

    def __convert_habit(self, raw_habit: Any) -> Habit:
        if not isinstance(raw_habit, dict) or not raw_habit.get("name"):
            raise HabitLogError(f"Habit must be a mapping with a name: {raw_habit!r}")

        habit = get_habit_template()
        habit.update(cast(Habit, raw_habit))
        habit["name"] = str(habit["name"])
        habit["id"] = str(raw_habit.get("id") or habit["name"])

        if habit["frequency"] not in VALID_FREQUENCIES:
            raise HabitLogError(
                f"Invalid frequency '{habit['frequency']}' for habit '{habit['name']}'. "
                f"Valid options: {', '.join(VALID_FREQUENCIES)}"
            )
        if habit["color"] not in VALID_COLORS:
            raise HabitLogError(
                f"Invalid color '{habit['color']}' for habit '{habit['name']}'. "
                f"Valid options: {', '.join(VALID_COLORS)}"
            )
        target = habit["frequency_target"]
        if target is not None and (isinstance(target, bool) or not isinstance(target, int)):
            raise HabitLogError(
                f"frequency_target for habit '{habit['name']}' must be an integer"
            )
        sort_order = habit["sort_order"]
        if isinstance(sort_order, bool) or not isinstance(sort_order, int):
            raise HabitLogError(
                f"sort_order for habit '{habit['name']}' must be an integer"
            )
        for key in ("description", "desired_action", "minimum_action"):
            value = habit[key]  # type: ignore[literal-required]
            if value is not None and not isinstance(value, str):
                raise HabitLogError(
                    f"{key} for habit '{habit['name']}' must be text"
                )
        return habit

    def __convert_entry(self, raw_entry: Any) -> HabitEntry:
        if not isinstance(raw_entry, dict):
            raise HabitLogError(f"Entry must be a mapping: {raw_entry!r}")

        entry = get_entry_template()
        entry["id"] = raw_entry.get("id")
        entry["habit_id"] = str(raw_entry.get("habit_id", ""))
        entry["entry_date"] = self.__convert_entry_date(raw_entry.get("entry_date"))

        status = raw_entry.get("status")
        if status not in VALID_STATUSES:
            raise HabitLogError(
                f"Invalid status '{status}' on {entry['entry_date']}. "
                f"Valid options: {', '.join(VALID_STATUSES)}"
            )
        entry["status"] = status
        return entry

    def __convert_entry_date(self, value: Any) -> str:
        # Unquoted YAML dates arrive as datetime.date
        if isinstance(value, datetime.date):
            return date_to_str(to_date(value))
        if isinstance(value, str):
            try:
                return date_to_str(date_from_str(value))
            except ValueError:
                pass
        raise HabitLogError(f"Invalid entry_date '{value}', expected YYYY-MM-DD")

    def get_habits(self) -> list[Habit]:
        return [habit.copy() for habit in self.habits]

    def get_habit_by_name(self, name: str) -> Habit:
        for habit in self.habits:
            if habit["name"].lower() == name.lower() or habit["id"] == name:
                return habit.copy()
        raise HabitLogError(f"No habit named '{name}'")

    def get_entries_by_habit(self) -> dict[str, list[HabitEntry]]:
        """Entries grouped per habit, one per date (last one in the file wins), sorted by date."""
        grouped: dict[str, list[HabitEntry]] = {
            habit["id"]: [] for habit in self.habits
        }
        for entry in self.entries:
            grouped[entry["habit_id"]].append(entry.copy())
        return {
            habit_id: merge_entries([], entries)
            for habit_id, entries in grouped.items()
        }
