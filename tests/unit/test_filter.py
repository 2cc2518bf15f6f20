"""Unit tests for search filtering."""

# SPDX-License-Identifier: MIT

import pytest

from purenotes.service.filter import filter_notes, note_matches


@pytest.fixture
def notes(make_note, now):
    return [
        make_note(now, title="Groceries", text="Milk and eggs"),
        make_note(now, title="Work", text="Quarterly report"),
        make_note(now, title="milk run", text="Corner shop"),
    ]


class TestNoteMatches:
    def test_empty_search_matches(self, notes):
        assert all(note_matches(note, "") for note in notes)

    def test_matches_title(self, notes):
        assert note_matches(notes[1], "Wor")

    def test_matches_text(self, notes):
        assert note_matches(notes[1], "report")

    def test_is_case_sensitive(self, notes):
        assert note_matches(notes[0], "Milk")
        assert not note_matches(notes[0], "MILK")

    def test_does_not_match_snippet(self, make_note, now):
        note = make_note(now, title="a", text="b", snippet="only here")
        assert not note_matches(note, "only here")


class TestFilterNotes:
    def test_empty_search_returns_everything_in_order(self, notes):
        assert filter_notes(notes, "") == notes

    def test_keeps_original_order(self, notes):
        assert [note["title"] for note in filter_notes(notes, "o")] == [
            "Groceries",
            "Work",
            "milk run",
        ]

    def test_literal_substring(self, notes):
        assert [note["title"] for note in filter_notes(notes, "milk")] == ["milk run"]

    def test_no_match(self, notes):
        assert filter_notes(notes, "zzz") == []
