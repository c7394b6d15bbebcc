"""Journal storage interface."""

from datetime import date
from pathlib import Path
from typing import Protocol


class JournalStore(Protocol):
    """Interface for reading and writing date-addressed journal entries."""

    def list_journals(self) -> list[str]:
        """List journal names. Raises NoJournalsError if there are none."""
        ...

    def list_years(self, journal: str) -> list[int]:
        """Years that have an entry folder for a journal, ascending."""
        ...

    def load(self, journal: str, target_date: date) -> str | None:
        """Read entry text for a date. Returns None if not found."""
        ...

    def load_or_init(self, journal: str, target_date: date) -> str:
        """Read entry text for a date, creating it with a heading if missing."""
        ...

    def save(self, journal: str, target_date: date, text: str) -> bool:
        """Write/overwrite entry text for a date. Returns False on failure."""
        ...

    def exists(self, journal: str, target_date: date) -> bool:
        """Check if an entry exists for a date."""
        ...

    def path_for(self, journal: str, target_date: date) -> Path:
        """Where an entry for a date lives (or would live)."""
        ...
