# SPDX-License-Identifier: MIT

from typing import TypeAlias, TypedDict


class Note(TypedDict):
    id: int
    title: str
    text: str
    snippet: str
    # seconds since 2001-01-01T00:00:00Z
    modify_date: float


NoteGroup: TypeAlias = tuple[str, list[Note]]
