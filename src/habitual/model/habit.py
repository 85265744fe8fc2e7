# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, Union

Frequency = Literal["daily", "weekly", "times_per_day", "every_x_days"]
HabitColorId = Literal[
    "orange",
    "yellow",
    "green",
    "light_blue",
    "dark_blue",
    "purple",
    "pink",
    "red",
    "grey",
]


class Habit(TypedDict):
    id: str
    name: str
    description: Optional[str]
    sort_order: int
    frequency: Frequency

    # For weekly habits: weekday bitmask, bit 0 = Sunday ... bit 6 = Saturday
    # e.g. Monday = 2, Mon+Wed = 2|8 = 10
    frequency_target: Optional[int]

    desired_action: Optional[str]  # Full / ideal action
    minimum_action: Optional[str]  # Minimum viable action, maps to "minimum" status
    color: HabitColorId


class HabitWithStreaks(Habit):
    current_streak: Union[int, float]
    longest_streak: Union[int, float]
    current_streak_dates: list[str]  # YYYY-MM-DD, oldest first; for cell shading
