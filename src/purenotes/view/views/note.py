# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from purenotes.model.note import Note, NoteGroup
from purenotes.service.grouping import note_instant
from purenotes.time import (
    datetime_to_display_local_datetime_str,
    datetime_to_display_short_date_str,
)
from purenotes.view.state import get_timezone
from purenotes.view.views.header import header


def note_summary_line(note: Note) -> str:
    """Date and snippet shown under the title in lists, e.g. '3/07/24 Buy milk'."""
    date = datetime_to_display_short_date_str(note_instant(note), get_timezone())
    return f"{date} {note['snippet']}"


def grouped_notes_view(
    grouped_notes: list[NoteGroup],
    search_text: str = "",
    numbered: bool = False,
    no_wrap: bool = False,
) -> None:
    """
    Display one table per group, newest group first.

    Args:
        grouped_notes: Output of group_notes_by_date
        search_text: Active search text, shown in the header when set
        numbered: Number rows across all groups, for picking a note in browse
        no_wrap: Whether to disable text wrapping in columns
    """
    header(f"search: {search_text}" if search_text else None)

    console = Console()
    if not grouped_notes:
        console.print("No notes found.")
        return

    row_number = 0
    for label, notes in grouped_notes:
        notes_table = Table(box=box.SIMPLE, title=label, title_justify="left")
        if numbered:
            notes_table.add_column("#")
        notes_table.add_column("id")
        if no_wrap:
            notes_table.add_column("note", no_wrap=True, overflow="ellipsis")
        else:
            notes_table.add_column("note")

        for note in notes:
            row_number += 1
            cell = (
                f"[bold]{escape(note['title'])}[/bold]\n"
                f"[dim]{escape(note_summary_line(note))}[/dim]"
            )
            row = [str(note["id"]), cell]
            if numbered:
                row.insert(0, str(row_number))
            notes_table.add_row(*row)

        console.print(notes_table)


def single_note_view(note: Note) -> None:
    header(note["title"])

    console = Console()
    modified = datetime_to_display_local_datetime_str(
        note_instant(note), get_timezone()
    )
    console.print(f" [dim]modified {modified}[/dim]")
    console.print(
        Panel(escape(note["text"]), title=escape(note["title"]), border_style="blue")
    )


def load_error_view(message: str, path: Optional[str] = None) -> None:
    console = Console()
    console.print(f"[red]{escape(message)}[/red]")
    if path is not None:
        console.print(f"[dim]source: {escape(path)}[/dim]")
