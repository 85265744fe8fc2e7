# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from habitual.time import add_days, date_from_str, today_local


def parse_date(date_param: Optional[str]) -> Optional[pendulum.Date]:
    """
    Parse a calendar date option.

    Accepts YYYY-MM-DD, today/t, yesterday/y, tomorrow/o, or a signed day
    offset from today such as "-3".
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date {date}: {e}")

    if re.match(r"^[+-]?\d+$", date):
        return add_days(today_local(), int(date))

    if date == "today" or date == "t":
        return today_local()
    if date == "yesterday" or date == "y":
        return add_days(today_local(), -1)
    if date == "tomorrow" or date == "o":
        return add_days(today_local(), 1)
    raise typer.BadParameter("Incorrect date format, expected YYYY-MM-DD")
