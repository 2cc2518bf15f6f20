# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.prompt import Prompt

from purenotes.model.note import Note
from purenotes.repository.note import NOTE_REPO
from purenotes.service.filter import filter_notes
from purenotes.service.grouping import group_notes_by_date
from purenotes.terminal.common import exit_on_error
from purenotes.view.state import get_timezone
from purenotes.view.views.note import grouped_notes_view, single_note_view

PROMPT = "[dim]number to open, /text to search, / to clear, q to quit[/dim]"


def browse() -> None:
    """Browse notes interactively with a search box."""
    console = Console()

    future = NOTE_REPO.load_all_in_background()
    with console.status("Loading notes..."):
        notes: list[Note] = exit_on_error(future.result)

    search_text = ""
    while True:
        grouped_notes = group_notes_by_date(
            filter_notes(notes, search_text), tz=get_timezone()
        )
        grouped_notes_view(grouped_notes, search_text=search_text, numbered=True)
        # Same order as the numbered rows
        shown_notes = [note for _, group in grouped_notes for note in group]

        try:
            choice = Prompt.ask(PROMPT, default="q", console=console).strip()
        except (EOFError, KeyboardInterrupt):
            # stdin closed or Ctrl-C, same as q
            console.print()
            return
        if choice == "q":
            return
        if choice.startswith("/"):
            search_text = choice[1:]
            continue
        if choice.isdigit() and 1 <= int(choice) <= len(shown_notes):
            single_note_view(shown_notes[int(choice) - 1])
            continue
        console.print(f"[red]Unknown choice: {choice}[/red]")
