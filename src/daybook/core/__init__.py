"""Functional core - journal text, navigation, time stats and search."""

from .entry import ToggleRejected, append, has_no_entries, heading, timestamp, toggle
from .navigator import Direction, recent_entries, walk
from .timestats import BreakdownRow, Elapsed, TimeMark, format_hours, time_breakdown
from .search import SearchMatch, find_in_entry, match_column, search

__all__ = [
    # Entry text
    "ToggleRejected",
    "append",
    "has_no_entries",
    "heading",
    "timestamp",
    "toggle",
    # Navigation
    "Direction",
    "recent_entries",
    "walk",
    # Time stats
    "BreakdownRow",
    "Elapsed",
    "TimeMark",
    "format_hours",
    "time_breakdown",
    # Search
    "SearchMatch",
    "find_in_entry",
    "match_column",
    "search",
]
