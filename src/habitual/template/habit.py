# SPDX-License-Identifier: MIT

from habitual.model.entry import HabitEntry
from habitual.model.habit import Habit


def get_habit_template() -> Habit:
    return {
        "id": "",
        "name": "",
        "description": None,
        "sort_order": 0,
        "frequency": "daily",
        "frequency_target": None,
        "desired_action": None,
        "minimum_action": None,
        "color": "green",
    }


def get_entry_template() -> HabitEntry:
    return {
        "id": None,
        "habit_id": "",
        "entry_date": "",
        "status": "completed",
    }
