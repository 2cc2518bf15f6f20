# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from purenotes.repository.note import NOTE_REPO
from purenotes.service.filter import filter_notes
from purenotes.service.grouping import group_notes_by_date
from purenotes.terminal.common import exit_on_error
from purenotes.view.state import get_timezone
from purenotes.view.views.note import grouped_notes_view, single_note_view


def list_notes(
    search: Annotated[
        str,
        typer.Option(
            "--search",
            "-s",
            help="Only show notes whose title or text contains this text",
        ),
    ] = "",
    no_wrap: Annotated[
        bool,
        typer.Option("--no-wrap", help="Disable text wrapping in table columns"),
    ] = False,
) -> None:
    """List notes grouped by when they were last modified."""
    notes = exit_on_error(NOTE_REPO.load_all)
    filtered_notes = filter_notes(notes, search)
    grouped_notes = group_notes_by_date(filtered_notes, tz=get_timezone())
    grouped_notes_view(grouped_notes, search_text=search, no_wrap=no_wrap)


def show(
    id: Annotated[int, typer.Argument(help="Note id")],
) -> None:
    """Show the full text of a note."""
    exit_on_error(NOTE_REPO.load_all)
    note = exit_on_error(lambda: NOTE_REPO.get_note(id))
    single_note_view(note)
