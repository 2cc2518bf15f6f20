# SPDX-License-Identifier: MIT

import json
import math
from concurrent.futures import Future, ThreadPoolExecutor
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

from purenotes import configuration
from purenotes.errors import LoadError, NoteNotFoundError
from purenotes.log import get_logger
from purenotes.model.note import Note
from purenotes.time import reference_seconds_to_datetime_utc

logger = get_logger(__name__)

# JSON key -> (Note key, accepted types)
NOTE_FIELDS: dict[str, tuple[str, tuple[type, ...]]] = {
    "id": ("id", (int,)),
    "title": ("title", (str,)),
    "text": ("text", (str,)),
    "snippet": ("snippet", (str,)),
    "modifyDate": ("modify_date", (int, float)),
}


class NoteRepository:
    """
    Read-only access to the notes file.

    The loaded collection is replaced wholesale on every load, never merged.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._notes: Optional[list[Note]] = None
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATA_NOTES_PATH

    @property
    def notes(self) -> list[Note]:
        if self._notes is None:
            self._notes = self.__load_data()
        return self._notes

    def __load_data(self) -> list[Note]:
        path = self.path
        try:
            raw_text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            logger.warning("notes_load_failed", path=str(path), reason="missing")
            raise LoadError(f"notes file not found: {path}", path) from e
        except UnicodeDecodeError as e:
            logger.warning("notes_load_failed", path=str(path), reason=str(e))
            raise LoadError(f"notes file is not valid UTF-8: {e}", path) from e
        except OSError as e:
            logger.warning("notes_load_failed", path=str(path), reason=str(e))
            raise LoadError(f"unable to read notes file {path}: {e}", path) from e

        try:
            raw_notes = json.loads(raw_text)
        except json.JSONDecodeError as e:
            logger.warning("notes_load_failed", path=str(path), reason=str(e))
            raise LoadError(f"notes file is not valid JSON: {e}", path) from e

        try:
            notes = self.__convert_notes_for_deserialization(raw_notes)
        except ValueError as e:
            logger.warning("notes_load_failed", path=str(path), reason=str(e))
            raise LoadError(f"notes file has an unexpected format: {e}", path) from e

        logger.info("notes_loaded", path=str(path), count=len(notes))
        return notes

    def __convert_notes_for_deserialization(self, raw_notes: Any) -> list[Note]:
        if not isinstance(raw_notes, list):
            raise ValueError("expected an array of notes")

        notes: list[Note] = []
        seen_ids: set[int] = set()
        for index, raw_note in enumerate(raw_notes):
            note = self.__convert_note_for_deserialization(index, raw_note)
            if note["id"] in seen_ids:
                raise ValueError(f"duplicate note id {note['id']}")
            seen_ids.add(note["id"])
            notes.append(note)
        return notes

    def __convert_note_for_deserialization(self, index: int, raw_note: Any) -> Note:
        if not isinstance(raw_note, dict):
            raise ValueError(f"note {index} is not an object")

        note: dict[str, Any] = {}
        for json_key, (note_key, accepted_types) in NOTE_FIELDS.items():
            if json_key not in raw_note:
                raise ValueError(f"note {index} is missing '{json_key}'")
            value = raw_note[json_key]
            # bool is an int subclass, but never a valid id or timestamp
            if isinstance(value, bool) or not isinstance(value, accepted_types):
                raise ValueError(f"note {index} has an invalid '{json_key}'")
            note[note_key] = value

        note["modify_date"] = self.__convert_modify_date(index, note["modify_date"])
        return Note(
            id=note["id"],
            title=note["title"],
            text=note["text"],
            snippet=note["snippet"],
            modify_date=note["modify_date"],
        )

    def __convert_modify_date(self, index: int, value: float) -> float:
        invalid = ValueError(f"note {index} has an invalid 'modifyDate'")
        try:
            seconds = float(value)
        except OverflowError as e:
            raise invalid from e
        if not math.isfinite(seconds):
            raise invalid
        # Must be representable as a calendar date for monthly groups
        try:
            reference_seconds_to_datetime_utc(seconds)
        except (ValueError, OverflowError, OSError) as e:
            raise invalid from e
        return seconds

    def load_all(self) -> list[Note]:
        """
        Read the notes file again and return every note in file order.

        Raises:
            LoadError: If the file is missing, unreadable, or malformed
        """
        self._notes = None
        return self.get_all_notes()

    def load_all_in_background(self) -> "Future[list[Note]]":
        """
        Start load_all() on a worker thread.

        The returned future resolves to the note list, or raises LoadError
        from result().
        """
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="purenotes-load"
            )
        return self._executor.submit(self.load_all)

    def shutdown(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def get_all_notes(self) -> list[Note]:
        return deepcopy(self.notes)

    def get_note(self, id: int) -> Note:
        """
        Get note by ID.

        Raises:
            NoteNotFoundError: If no note has this id
        """
        matches = [note for note in self.notes if note["id"] == id]
        if not matches:
            raise NoteNotFoundError(id)
        return deepcopy(matches[0])


NOTE_REPO = NoteRepository()
