"""Unit tests for time helpers."""

# SPDX-License-Identifier: MIT

import pendulum

from purenotes.time import (
    REFERENCE_EPOCH_OFFSET,
    datetime_to_display_short_date_str,
    datetime_to_reference_seconds,
    reference_seconds_to_datetime_utc,
)


class TestReferenceSeconds:
    def test_offset_constant(self):
        assert REFERENCE_EPOCH_OFFSET == 978_307_200

    def test_converts_to_utc(self):
        instant = reference_seconds_to_datetime_utc(86_400.5)

        assert instant == pendulum.datetime(2001, 1, 2, 0, 0, 0, 500000, tz="UTC")
        assert instant.timezone_name == "UTC"

    def test_inverse(self):
        instant = pendulum.datetime(2023, 3, 15, 8, 30, tz="UTC")

        seconds = datetime_to_reference_seconds(instant)

        assert reference_seconds_to_datetime_utc(seconds) == instant


class TestDisplay:
    def test_short_date_format(self):
        instant = pendulum.datetime(2024, 3, 7, 12, tz="UTC")

        assert datetime_to_display_short_date_str(instant, "UTC") == "3/07/24"

    def test_short_date_uses_timezone(self):
        instant = pendulum.datetime(2024, 3, 7, 2, tz="UTC")

        display = datetime_to_display_short_date_str(instant, "America/New_York")

        assert display == "3/06/24"
