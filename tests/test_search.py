"""Tests for full-text search."""

from datetime import date

import pytest

from daybook.adapters.file_journal import FileJournalStore
from daybook.core.navigator import Direction
from daybook.core.search import find_in_entry, match_column, search

ENTRY = (
    "Work - Monday 2024/3/4\n"
    "\n\n09:00 am - Hello there\n\t09:05 am - general"
    "\n\n10:00 am - other\n\t10:30 am - said hello again"
)


@pytest.fixture
def store(tmp_path):
    store = FileJournalStore(tmp_path)
    store.save("Work", date(2023, 5, 1), "Work - Monday 2023/5/1\n\n\n09:00 am - hello from 2023")
    store.save("Work", date(2024, 1, 2), "Work - Tuesday 2024/1/2\n\n\n09:00 am - nothing here")
    store.save("Work", date(2024, 2, 3), "Work - Saturday 2024/2/3\n\n\n09:00 am - HELLO from 2024")
    return store


class TestFindInEntry:
    def test_case_insensitive_match(self):
        matches = find_in_entry(date(2024, 3, 4), ENTRY, "hello")

        assert len(matches) == 2
        first = matches[0]
        assert first.date == date(2024, 3, 4)
        assert first.heading == "Work - Monday 2024/3/4"
        assert first.lines[first.matched_lines[0]] == "09:00 am - Hello there"

    def test_reports_line_within_block(self):
        second = find_in_entry(date(2024, 3, 4), ENTRY, "HELLO")[1]

        assert second.block == "10:00 am - other\n\t10:30 am - said hello again"
        assert second.matched_lines == [1]

    def test_no_match(self):
        assert find_in_entry(date(2024, 3, 4), ENTRY, "absent") == []

    def test_entry_without_blocks_is_skipped(self):
        assert find_in_entry(date(2024, 3, 4), "Hello - Monday 2024/3/4\n", "hello") == []

    def test_heading_match_is_reported(self):
        matches = find_in_entry(date(2024, 3, 4), ENTRY, "monday")
        assert [m.block for m in matches] == ["Work - Monday 2024/3/4"]


class TestMatchColumn:
    def test_column(self):
        assert match_column("09:00 am - Hello there", "HELLO") == 11

    def test_missing(self):
        assert match_column("09:00 am - there", "hello") is None


class TestSearch:
    def test_backward_finds_latest_first(self, store):
        matches = list(search(store, "Work", date(2024, 12, 31), Direction.BACKWARD, "hello"))

        assert [m.date for m in matches] == [date(2024, 2, 3)]

    def test_successive_calls_walk_history(self, store):
        matches = list(search(store, "Work", date(2024, 2, 2), Direction.BACKWARD, "hello"))
        assert [m.date for m in matches] == [date(2023, 5, 1)]

    def test_forward(self, store):
        matches = list(search(store, "Work", date(2023, 5, 2), Direction.FORWARD, "hello"))
        assert [m.date for m in matches] == [date(2024, 2, 3)]

    def test_no_more_results(self, store):
        assert list(search(store, "Work", date(2023, 4, 30), Direction.BACKWARD, "hello")) == []
