# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from habitual.terminal import configuration, streak
from habitual.terminal.custom_typer import AliasedTyperGroup
from habitual.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="Habitual - Habit streaks in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="streaks, s")(streak.streaks)
app.command(name="week, w")(streak.week)
app.command(name="habit, h")(streak.habit)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    Habitual - Habit streaks in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
