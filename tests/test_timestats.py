"""Tests for time breakdown logic."""

from datetime import date, datetime, timedelta

import pytest

from daybook.core.timestats import NOW_LABEL, extract_marks, format_hours, parse_time, time_breakdown


@pytest.fixture
def today():
    return date(2024, 3, 4)


@pytest.fixture
def now():
    return datetime(2024, 3, 4, 10, 0)


@pytest.fixture
def entry_text():
    return "Work - Monday 2024/3/4\n\n\n09:00 am - start\n\t09:30 am - more"


class TestParseTime:
    def test_morning(self, today):
        assert parse_time("09:00 am - start", today) == datetime(2024, 3, 4, 9, 0)

    def test_nested_line(self, today):
        assert parse_time("\t09:30 am - more", today) == datetime(2024, 3, 4, 9, 30)

    def test_afternoon(self, today):
        assert parse_time("01:15 pm - lunch", today) == datetime(2024, 3, 4, 13, 15)

    def test_noon(self, today):
        assert parse_time("12:30 pm - noon", today) == datetime(2024, 3, 4, 12, 30)

    def test_twelve_am_stays_twelve(self, today):
        assert parse_time("12:10 am - late", today) == datetime(2024, 3, 4, 12, 10)

    def test_keeps_reference_day_only(self):
        reference = datetime(2024, 3, 4, 23, 59, 59)
        assert parse_time("09:00 am - x", reference) == datetime(2024, 3, 4, 9, 0)

    @pytest.mark.parametrize(
        "line",
        [
            "Work - Monday 2024/3/4",
            "",
            "9:00 am - too short",
            "ab:cd pm - letters",
            "99:00 am - bad hour",
            "09:7",
            ":30 am",
        ],
    )
    def test_unparseable_lines(self, line, today):
        assert parse_time(line, today) is None


class TestExtractMarks:
    def test_block_detection(self, entry_text, today):
        marks = extract_marks(entry_text, today)

        assert [m.text for m in marks] == ["09:00 am - start", "\t09:30 am - more"]
        assert [m.is_block_start for m in marks] == [True, False]

    def test_bad_line_does_not_stop_the_rest(self, today):
        text = "09:00 am - a\nxx:yy am - broken\n\t09:45 am - b"
        assert [m.instant.minute for m in extract_marks(text, today)] == [0, 45]


class TestTimeBreakdown:
    def test_since_last_for_nested_line(self, entry_text, today, now):
        rows = time_breakdown(entry_text, today, now=now)

        assert rows[1].mark.text == "\t09:30 am - more"
        assert rows[1].elapsed.since_last == timedelta(minutes=30)

    def test_appends_now_mark(self, entry_text, today, now):
        rows = time_breakdown(entry_text, today, now=now)

        last = rows[-1]
        assert last.mark.text == NOW_LABEL
        assert last.mark.instant == now
        assert last.show_elapsed
        assert last.elapsed.since_last == timedelta(minutes=30)
        assert last.elapsed.since_start == timedelta(hours=1)

    def test_first_row_has_no_elapsed(self, entry_text, today, now):
        rows = time_breakdown(entry_text, today, now=now)
        assert rows[0].elapsed is None
        assert not rows[0].show_elapsed

    def test_lines_hidden_unless_granular(self, entry_text, today, now):
        assert not time_breakdown(entry_text, today, now=now)[1].show_elapsed
        assert time_breakdown(entry_text, today, granular=True, now=now)[1].show_elapsed

    def test_block_resets_block_start(self, today):
        text = (
            "Work - Monday 2024/3/4\n\n\n09:00 am - a\n\t09:30 am - b"
            "\n\n10:00 am - c\n\t10:15 am - d"
        )
        rows = time_breakdown(text, today, granular=True, now=datetime(2024, 3, 4, 11, 0))
        by_text = {row.mark.text: row for row in rows}

        block = by_text["10:00 am - c"].elapsed
        assert block.since_block == timedelta(hours=1)
        assert block.since_last == timedelta(minutes=30)

        line = by_text["\t10:15 am - d"].elapsed
        assert line.since_block == timedelta(minutes=15)
        assert line.since_start == timedelta(minutes=75)

    def test_heading_only_entry(self, today, now):
        rows = time_breakdown("Work - Monday 2024/3/4\n", today, now=now)

        assert len(rows) == 1
        assert rows[0].mark.text == NOW_LABEL
        assert rows[0].elapsed is None


class TestFormatHours:
    def test_fractional_hours(self):
        assert format_hours(timedelta(minutes=90)) == "1.50h"

    def test_partial_minutes_dropped(self):
        assert format_hours(timedelta(seconds=59)) == "0.00h"

    def test_negative(self):
        assert format_hours(timedelta(minutes=-30)) == "-0.50h"
