# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from habitual.view.state import get_show_header


def header(console: Console, today: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with the reference date.

    Args:
        console: Console to print to
        today: The date streaks are computed for (YYYY-MM-DD)
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"

    console.print(Padding("[dark_orange]habitual[/dark_orange]", (1, 0, 0, 1)))
    console.print(Padding(additional, (0, 1)))
    console.print(Padding(f"[plum1]{today}[/plum1]", (0, 1)))
