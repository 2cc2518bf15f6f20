# SPDX-License-Identifier: MIT

from purenotes.model.note import Note


def note_matches(note: Note, search_text: str) -> bool:
    """
    Case-sensitive literal substring match on title and text.

    An empty search text matches every note.
    """
    if search_text == "":
        return True
    return search_text in note["title"] or search_text in note["text"]


def filter_notes(notes: list[Note], search_text: str) -> list[Note]:
    """Return the notes matching search_text, in their original order."""
    return [note for note in notes if note_matches(note, search_text)]
