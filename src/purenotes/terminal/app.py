# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from purenotes import configuration as app_configuration
from purenotes.terminal import configuration
from purenotes.terminal.browse import browse
from purenotes.terminal.custom_typer import AliasedTyperGroup
from purenotes.terminal.note import list_notes, show
from purenotes.terminal.version import version
from purenotes.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="PureNotes - Browse your notes in the CLI",
    no_args_is_help=True,
)
app.command(name="list, ls")(list_notes)
app.command(name="show, sh")(show)
app.command(name="browse, b")(browse)
app.add_typer(configuration.app, name="config, c")
app.command(name="version, ve")(version)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
    notes_path: Annotated[
        Optional[Path],
        typer.Option(
            "--notes-path",
            help="Read notes from this JSON file instead of the configured one",
        ),
    ] = None,
) -> None:
    """
    PureNotes - Browse your notes in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if notes_path is not None:
        app_configuration.set_notes_path(notes_path)


def run() -> None:
    app()
