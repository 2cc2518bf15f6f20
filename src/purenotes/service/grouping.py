# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from purenotes.log import get_logger
from purenotes.model.note import Note, NoteGroup
from purenotes.time import (
    REFERENCE_EPOCH_OFFSET,
    SECONDS_PER_DAY,
    now_utc,
    reference_seconds_to_datetime_utc,
)

logger = get_logger(__name__)

LAST_24_HOURS = "Last 24 Hours"
LAST_7_DAYS = "Last 7 Days"
LAST_30_DAYS = "Last 30 Days"

# Checked in order, first match wins
FIXED_GROUP_WINDOWS: list[tuple[str, float]] = [
    (LAST_24_HOURS, SECONDS_PER_DAY),
    (LAST_7_DAYS, 7 * SECONDS_PER_DAY),
    (LAST_30_DAYS, 30 * SECONDS_PER_DAY),
]


def note_instant(note: Note) -> pendulum.DateTime:
    return reference_seconds_to_datetime_utc(note["modify_date"])


def note_age_seconds(note: Note, now: pendulum.DateTime) -> float:
    """Seconds elapsed between the note's last modification and now.

    Negative for notes dated after now.
    """
    return now.timestamp() - (note["modify_date"] + REFERENCE_EPOCH_OFFSET)


def month_label(month: int, year: int) -> str:
    return f"{month}/{year}"


def sort_by_modify_date_desc(notes: list[Note]) -> list[Note]:
    return sorted(notes, key=lambda note: note["modify_date"], reverse=True)


def group_notes_by_date(
    notes: list[Note],
    now: Optional[pendulum.DateTime] = None,
    tz: str = "local",
) -> list[NoteGroup]:
    """
    Group notes into labelled time buckets.

    Notes modified within the last 24 hours, 7 days and 30 days go into
    the fixed buckets of those names; older notes are grouped by the month
    and year they were modified in, as seen in the calendar of ``tz``.
    Each note lands in exactly one bucket and every bucket is sorted by
    modification date, newest first. Empty fixed buckets are left out.

    Monthly buckets follow the fixed ones in the reverse of the order their
    month was first seen in ``notes``. For input that is not sorted by date
    this is not chronological; it is kept for compatibility with existing
    readers of this ordering.

    Args:
        notes: Notes to group, in any order. Not modified.
        now: Reference instant, defaults to the current time
        tz: Timezone whose calendar decides the monthly buckets

    Returns:
        List of (label, notes) pairs
    """
    if now is None:
        now = now_utc()

    fixed_groups: dict[str, list[Note]] = {
        label: [] for label, _ in FIXED_GROUP_WINDOWS
    }
    monthly_groups: dict[tuple[int, int], list[Note]] = {}

    for note in notes:
        age = note_age_seconds(note, now)

        for label, window in FIXED_GROUP_WINDOWS:
            if age < window:
                fixed_groups[label].append(note)
                break
        else:
            local_instant = note_instant(note).in_tz(tz)
            key = (local_instant.month, local_instant.year)
            monthly_groups.setdefault(key, []).append(note)

    grouped_notes: list[NoteGroup] = []
    for label, _ in FIXED_GROUP_WINDOWS:
        if fixed_groups[label]:
            grouped_notes.append(
                (label, sort_by_modify_date_desc(fixed_groups[label]))
            )

    for (month, year), month_notes in reversed(list(monthly_groups.items())):
        grouped_notes.append(
            (month_label(month, year), sort_by_modify_date_desc(month_notes))
        )

    logger.debug(
        "notes_grouped", note_count=len(notes), group_count=len(grouped_notes)
    )
    return grouped_notes
