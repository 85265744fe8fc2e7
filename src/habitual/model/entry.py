# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

# No entry for a date means "open"
EntryStatus = Literal["completed", "skipped", "minimum"]


class HabitEntry(TypedDict):
    id: Optional[str]
    habit_id: str
    entry_date: str  # YYYY-MM-DD
    status: EntryStatus


class StreakEntry(TypedDict):
    date: str  # YYYY-MM-DD
    status: EntryStatus
