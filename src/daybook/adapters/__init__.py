"""Adapters - I/O implementations of ports."""

from .file_journal import (
    FileJournalStore,
    JournalError,
    JournalLayoutError,
    JournalReadError,
    NoJournalsError,
)
from .editor import EditorOpener

__all__ = [
    "FileJournalStore",
    "JournalError",
    "JournalLayoutError",
    "JournalReadError",
    "NoJournalsError",
    "EditorOpener",
]
