# SPDX-License-Identifier: MIT

import pendulum

# Seconds between the Unix epoch and 2001-01-01T00:00:00Z, the reference
# date used by the note file's modifyDate values.
REFERENCE_EPOCH_OFFSET = 978_307_200

SECONDS_PER_DAY = 24 * 60 * 60


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def reference_seconds_to_datetime_utc(seconds: float) -> pendulum.DateTime:
    return pendulum.from_timestamp(seconds + REFERENCE_EPOCH_OFFSET, tz="UTC")


def datetime_to_reference_seconds(datetime: pendulum.DateTime) -> float:
    return datetime.timestamp() - REFERENCE_EPOCH_OFFSET


def datetime_to_display_short_date_str(
    datetime: pendulum.DateTime, tz: str = "local"
) -> str:
    """Format as M/DD/YY, e.g. 3/07/24."""
    return datetime.in_tz(tz).format("M/DD/YY")


def datetime_to_display_local_datetime_str(
    datetime: pendulum.DateTime, tz: str = "local"
) -> str:
    return datetime.in_tz(tz).format("YYYY-MM-DD ddd HH:mm")
