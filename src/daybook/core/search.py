"""Full-text search over a journal, one matching day at a time."""

from dataclasses import dataclass, field
from datetime import date
from typing import Iterator

from ..ports.journal_store import JournalStore
from .entry import BLOCK_SEPARATOR
from .navigator import Direction, walk


@dataclass
class SearchMatch:
    """A block of an entry that contains the query."""

    date: date
    heading: str
    block: str
    matched_lines: list[int] = field(default_factory=list)

    @property
    def lines(self) -> list[str]:
        return self.block.split("\n")


def match_column(line: str, query: str) -> int | None:
    """Case-insensitive column of query in line, or None."""
    index = line.lower().find(query.lower())
    return None if index == -1 else index


def find_in_entry(entry_date: date, text: str, query: str) -> list[SearchMatch]:
    """
    Blocks of one entry's text that contain query, case-insensitively.

    Entries without any block separator yield nothing, even when the
    heading itself matches.

    Pure function - no I/O.
    """
    needle = query.lower()
    if needle not in text.lower():
        return []

    separator_at = text.find(BLOCK_SEPARATOR)
    if separator_at == -1:
        return []
    entry_heading = text[:separator_at]

    matches = []
    for block in text.split(BLOCK_SEPARATOR):
        if needle not in block.lower():
            continue
        matched_lines = [i for i, line in enumerate(block.split("\n")) if needle in line.lower()]
        matches.append(
            SearchMatch(
                date=entry_date,
                heading=entry_heading,
                block=block,
                matched_lines=matched_lines,
            )
        )
    return matches


def search(
    store: JournalStore,
    journal: str,
    start_date: date,
    direction: Direction,
    query: str,
) -> Iterator[SearchMatch]:
    """
    Find the next entry containing query, starting at start_date.

    Yields each matching block of the first matching entry in the given
    direction, then stops. Call again from the day after (or before) the
    last match's date to get the next result.
    """
    found: list[SearchMatch] = []

    def visit(entry_date: date, text: str) -> bool:
        found.extend(find_in_entry(entry_date, text, query))
        return not found

    walk(store, journal, start_date, direction, visit)
    yield from found
