# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast, get_args

import typer
from rich.console import Console
from rich.table import Table

from habitual import configuration
from habitual.model.streak import StreakVariant
from habitual.repository.configuration import CONFIGURATION_REPO
from habitual.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _configuration_table(config: configuration.Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("log_path", str(configuration.resolve_log_path(config)))
    table.add_row("history_days", str(config["history_days"]))
    table.add_row("streak_variant", config["streak_variant"])
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(_configuration_table(config))
    console.print()
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the report header",
        ),
    ] = None,
    log_path: Annotated[
        Optional[str],
        typer.Option("--log-path", help="Habit log YAML file"),
    ] = None,
    remove_log_path: Annotated[
        bool,
        typer.Option(
            "--remove-log-path",
            help="Reset log path to the default data directory",
        ),
    ] = False,
    history_days: Annotated[
        Optional[int],
        typer.Option(
            "--history-days",
            min=1,
            help="Days of history streaks are computed over",
        ),
    ] = None,
    streak_variant: Annotated[
        Optional[str],
        typer.Option("--variant", help="Default streak variant: standard, weighted"),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    console = Console()

    valid_variants = get_args(StreakVariant)
    if streak_variant is not None and streak_variant not in valid_variants:
        console.print(
            f"[red]Invalid variant: {streak_variant}. Valid options: {', '.join(valid_variants)}[/red]"
        )
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        log_path=log_path,
        remove_log_path=remove_log_path,
        history_days=history_days,
        streak_variant=cast(Optional[StreakVariant], streak_variant),
    )
    CONFIGURATION_REPO.flush()

    config = CONFIGURATION_REPO.get_config()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table(config, title="Updated Configuration"))
