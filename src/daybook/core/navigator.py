"""Chronological navigation over a journal's entries.

Storage access goes through the JournalStore port; no files are touched
here directly.
"""

from datetime import date, timedelta
from enum import Enum
from typing import Callable

from ..ports.journal_store import JournalStore

Visitor = Callable[[date, str], bool]


class Direction(Enum):
    """Walk direction through the calendar."""

    FORWARD = "forward"
    BACKWARD = "backward"

    @property
    def step(self) -> timedelta:
        return timedelta(days=1) if self is Direction.FORWARD else timedelta(days=-1)


def _year_anchor(year: int, direction: Direction) -> date:
    """First day of the year going forward, last day going backward."""
    if direction is Direction.FORWARD:
        return date(year, 1, 1)
    return date(year, 12, 31)


def _start_index(years: list[int], start_year: int, direction: Direction) -> int | None:
    """Index of the year to begin in, or None if nothing lies that way."""
    if start_year in years:
        return years.index(start_year)
    if direction is Direction.FORWARD:
        later = [i for i, y in enumerate(years) if y > start_year]
        return later[0] if later else None
    earlier = [i for i, y in enumerate(years) if y < start_year]
    return earlier[-1] if earlier else None


def walk(
    store: JournalStore,
    journal: str,
    start_date: date,
    direction: Direction,
    visit: Visitor,
) -> None:
    """
    Visit every existing entry from start_date onward, one day at a time.

    visit(date, text) is called for each day that has an entry, in calendar
    order for the given direction. Days without an entry are skipped.
    Returning False from visit stops the walk. Years without a folder are
    jumped over; the walk ends past the first/last year folder.
    """
    years = store.list_years(journal)
    if not years:
        return

    index = _start_index(years, start_date.year, direction)
    if index is None:
        return

    current = start_date
    if years[index] != start_date.year:
        current = _year_anchor(years[index], direction)

    while True:
        this_year = current.year
        while current.year == this_year:
            text = store.load(journal, current)
            if text is not None and not visit(current, text):
                return
            current += direction.step

        index += 1 if direction is Direction.FORWARD else -1
        if index < 0 or index >= len(years):
            return
        current = _year_anchor(years[index], direction)


def recent_entries(
    store: JournalStore,
    journal: str,
    start_date: date,
    page_size: int = 20,
    page: int = 1,
) -> list[tuple[date, str]]:
    """
    One page of entries walking back from start_date, oldest first.

    Pages are 1-based; page 0 is treated as page 1.
    """
    page = max(page - 1, 0)
    start = page_size * page
    end = start + page_size

    found: list[tuple[date, str]] = []
    count = 0

    def collect(entry_date: date, text: str) -> bool:
        nonlocal count
        if count >= start:
            found.append((entry_date, text))
        count += 1
        return count < end

    walk(store, journal, start_date, Direction.BACKWARD, collect)
    return list(reversed(found))
