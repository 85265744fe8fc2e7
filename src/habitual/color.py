# SPDX-License-Identifier: MIT

from typing import Optional

from habitual.model.entry import EntryStatus
from habitual.model.habit import HabitColorId

# Streak shading: 16 steps from light to dark; stays light longer then darkens slowly
_LIGHT_STEPS = [300, 300, 300, 400, 400, 400, 500, 500, 600, 600, 700, 700, 800, 900, 950, 950]
_DARK_STEPS = [400, 400, 400, 500, 500, 500, 600, 600, 700, 700, 800, 800, 900, 900, 950, 950]
_YELLOW_STEPS = [300, 300, 300, 400, 400, 500, 500, 600, 600, 700, 700, 800, 800, 900, 950, 950]

_GREEN = {300: "#86efac", 400: "#4ade80", 500: "#22c55e", 600: "#16a34a", 700: "#15803d", 800: "#166534", 900: "#14532d", 950: "#052e16"}
_ORANGE = {300: "#fdba74", 400: "#fb923c", 500: "#f97316", 600: "#ea580c", 700: "#c2410c", 800: "#9a3412", 900: "#7c2d12", 950: "#431407"}
# Yellow turns amber past 500
_YELLOW = {300: "#fde047", 400: "#facc15", 500: "#eab308", 600: "#d97706", 700: "#b45309", 800: "#92400e", 900: "#78350f", 950: "#451a03"}
_BLUE = {300: "#93c5fd", 400: "#60a5fa", 500: "#3b82f6", 600: "#2563eb", 700: "#1d4ed8", 800: "#1e40af", 900: "#1e3a8a", 950: "#172554"}
_PURPLE = {300: "#d8b4fe", 400: "#c084fc", 500: "#a855f7", 600: "#9333ea", 700: "#7e22ce", 800: "#6b21a8", 900: "#581c87", 950: "#3b0764"}
_PINK = {300: "#f9a8d4", 400: "#f472b6", 500: "#ec4899", 600: "#db2777", 700: "#be185d", 800: "#9d174d", 900: "#831843", 950: "#500724"}
_RED = {300: "#fca5a5", 400: "#f87171", 500: "#ef4444", 600: "#dc2626", 700: "#b91c1c", 800: "#991b1b", 900: "#7f1d1d", 950: "#450a0a"}
_SLATE = {300: "#cbd5e1", 400: "#94a3b8", 500: "#64748b", 600: "#475569", 700: "#334155", 800: "#1e293b", 900: "#0f172a", 950: "#020617"}

SHADE_STEPS: dict[HabitColorId, list[str]] = {
    "orange": [_ORANGE[s] for s in _LIGHT_STEPS],
    "yellow": [_YELLOW[s] for s in _YELLOW_STEPS],
    "green": [_GREEN[s] for s in _LIGHT_STEPS],
    "light_blue": [_BLUE[s] for s in _LIGHT_STEPS],
    "dark_blue": [_BLUE[s] for s in _DARK_STEPS],
    "purple": [_PURPLE[s] for s in _LIGHT_STEPS],
    "pink": [_PINK[s] for s in _LIGHT_STEPS],
    "red": [_RED[s] for s in _DARK_STEPS],
    "grey": [_SLATE[s] for s in _LIGHT_STEPS],
}

# Weighted view cells: green / yellow / red
WEIGHTED_STATUS_COLORS: dict[str, str] = {
    "completed": _GREEN[500],
    "minimum": "#fbbf24",
    "red": _RED[400],
}

NOT_TRACKED_STYLE = "dim"
TODAY_STYLE = "bold underline"


def get_shade_color(color: HabitColorId, index: int) -> str:
    """Background color for a streak cell; index is the streak age, capped at the darkest step."""
    steps = SHADE_STEPS.get(color, SHADE_STEPS["green"])
    return steps[min(max(index, 0), len(steps) - 1)]


def get_weighted_status_color(status: Optional[EntryStatus]) -> str:
    if status == "completed" or status == "minimum":
        return WEIGHTED_STATUS_COLORS[status]
    return WEIGHTED_STATUS_COLORS["red"]
