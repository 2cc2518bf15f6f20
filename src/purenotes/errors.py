# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional


class PureNotesError(Exception):
    """Base class for errors surfaced to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class LoadError(PureNotesError):
    """The note source is missing, unreadable, or does not match the schema."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class NoteNotFoundError(PureNotesError):
    def __init__(self, id: int) -> None:
        super().__init__(f"note not found: {id}")
        self.id = id
