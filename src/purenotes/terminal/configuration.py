# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
from pendulum.tz.exceptions import InvalidTimezone
import typer
from rich.console import Console
from rich.table import Table

from purenotes import configuration
from purenotes.log import LOG_FORMATS, LOG_LEVELS
from purenotes.repository.configuration import CONFIGURATION_REPO
from purenotes.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def __configuration_table(title: Optional[str] = None) -> Table:
    config = CONFIGURATION_REPO.get_config()

    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("notes_path", config["notes_path"] or "None")
    table.add_row("resolved notes path", str(configuration.DATA_NOTES_PATH))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("log_level", config["log_level"])
    table.add_row("log_format", config["log_format"])
    table.add_row("timezone", config["timezone"])
    table.add_row("config file", str(configuration.APP_CONFIG_PATH))
    return table


@app.command("show, v")
def show() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(__configuration_table())


@app.command("set, s")
def set(
    notes_path: Annotated[
        Optional[str],
        typer.Option("--notes-path", help="Path of the JSON notes file"),
    ] = None,
    remove_notes_path: Annotated[
        bool,
        typer.Option(
            "--remove-notes-path",
            help="Reset notes path to the default location",
        ),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above lists",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=f"One of: {', '.join(LOG_LEVELS)}"),
    ] = None,
    log_format: Annotated[
        Optional[str],
        typer.Option("--log-format", help=f"One of: {', '.join(LOG_FORMATS)}"),
    ] = None,
    timezone: Annotated[
        Optional[str],
        typer.Option(
            "--timezone",
            help="Timezone for dates and monthly groups, e.g. Europe/Paris or local",
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(
            f"must be one of: {', '.join(LOG_LEVELS)}", param_hint="--log-level"
        )
    if log_format is not None and log_format.lower() not in LOG_FORMATS:
        raise typer.BadParameter(
            f"must be one of: {', '.join(LOG_FORMATS)}", param_hint="--log-format"
        )
    if timezone is not None and timezone != "local":
        try:
            pendulum.timezone(timezone)
        except InvalidTimezone as e:
            raise typer.BadParameter(
                f"unknown timezone {timezone}", param_hint="--timezone"
            ) from e

    CONFIGURATION_REPO.update_config(
        notes_path=notes_path,
        remove_notes_path=remove_notes_path,
        show_header=show_header,
        log_level=log_level,
        log_format=log_format,
        timezone=timezone,
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(__configuration_table("Updated Configuration"))
