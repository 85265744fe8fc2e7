# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

StreakVariant = Literal["standard", "weighted"]


class StreakResult(TypedDict):
    # Days for daily habits, complete weeks for weekly habits
    current: int
    longest: int


class WeightedStreakResult(TypedDict):
    current: float
    longest: float
