"""Pure time breakdown logic - no I/O dependencies.

Timestamps are never stored on their own; they are read back out of the
entry text, so this relies on units being written as `HH:MM am|pm - ...`.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

NOW_LABEL = "<now>"


@dataclass
class TimeMark:
    """A timestamped line pulled out of an entry."""

    instant: datetime
    text: str
    is_block_start: bool


@dataclass
class Elapsed:
    """Durations measured at one mark."""

    since_start: timedelta
    since_block: timedelta
    since_last: timedelta


@dataclass
class BreakdownRow:
    """One mark plus the durations leading up to it."""

    mark: TimeMark
    elapsed: Elapsed | None = None
    show_elapsed: bool = False


def parse_time(line: str, reference_date: date | datetime) -> datetime | None:
    """
    Parse the first `HH:MM am|pm` in a line onto reference_date's day.

    Returns None if the line has no usable timestamp. A 12 is kept as is
    for both am and pm.
    """
    colon = line.find(":")
    if colon < 2:
        return None

    hour_str = line[colon - 2:colon]
    minute_str = line[colon + 1:colon + 3]
    if not (hour_str.isdigit() and minute_str.isdigit() and len(minute_str) == 2):
        return None

    try:
        hour = int(hour_str)
        minute = int(minute_str)
        if hour != 12 and line[colon + 4:colon + 6] == "pm":
            hour += 12
        if isinstance(reference_date, datetime):
            return datetime.combine(
                reference_date.date(), time(hour, minute), tzinfo=reference_date.tzinfo
            )
        return datetime.combine(reference_date, time(hour, minute))
    except ValueError:
        return None


def extract_marks(entry_text: str, reference_date: date | datetime) -> list[TimeMark]:
    """All timestamped lines in an entry, in text order."""
    marks = []
    for line in entry_text.split("\n"):
        instant = parse_time(line, reference_date)
        if instant is not None:
            marks.append(TimeMark(instant=instant, text=line, is_block_start="\t" not in line))
    return marks


def time_breakdown(
    entry_text: str,
    reference_date: date | datetime,
    granular: bool = False,
    now: datetime | None = None,
) -> list[BreakdownRow]:
    """
    Elapsed-time breakdown for an entry.

    A synthetic "<now>" mark is appended so the most recent unit always has
    a duration. Every row after the first carries durations since the first
    mark, since the start of its block and since the previous mark;
    show_elapsed is set on block starts, or on every row when granular.

    Pure function - no I/O.
    """
    if now is None:
        tz = reference_date.tzinfo if isinstance(reference_date, datetime) else None
        now = datetime.now(tz)

    marks = extract_marks(entry_text, reference_date)
    marks.append(TimeMark(instant=now, text=NOW_LABEL, is_block_start=True))

    rows = [BreakdownRow(mark=marks[0])]
    first = marks[0].instant
    block_start = first

    for previous, mark in zip(marks, marks[1:]):
        elapsed = Elapsed(
            since_start=mark.instant - first,
            since_block=mark.instant - block_start,
            since_last=mark.instant - previous.instant,
        )
        rows.append(
            BreakdownRow(
                mark=mark,
                elapsed=elapsed,
                show_elapsed=mark.is_block_start or granular,
            )
        )
        if mark.is_block_start:
            block_start = mark.instant

    return rows


def format_hours(delta: timedelta) -> str:
    """Whole minutes as fractional hours, e.g. 90 minutes -> '1.50h'."""
    minutes = int(delta.total_seconds() / 60)
    return f"{minutes / 60:.2f}h"
