"""File-based journal storage adapter."""

import logging
import os
from datetime import date
from pathlib import Path

from ..core.entry import heading

logger = logging.getLogger(__name__)


class JournalError(Exception):
    """Base exception for journal storage."""


class NoJournalsError(JournalError):
    """Raised when the root holds no journals yet."""


class JournalReadError(JournalError):
    """Raised when an entry exists but cannot be read."""


class JournalLayoutError(JournalError):
    """Raised when a journal folder holds something other than year folders."""


def check_journal_name(name: str) -> str:
    """Reject names that would resolve outside the journals root."""
    if name in ("", ".", "..") or "/" in name or os.sep in name or Path(name).name != name:
        raise ValueError(f"'{name}' can't be used as a journal name")
    return name


class FileJournalStore:
    """
    File-based journal storage.

    Implements JournalStore protocol. Each journal is a folder under the
    root, and each day gets a text file at <journal>/<YYYY>/<MM>/<DD>.txt.
    Month and day are zero-padded so folder listings sort chronologically.
    """

    def __init__(self, root: Path | str, extension: str = ".txt"):
        self.root = Path(root).expanduser()
        self.extension = extension
        self.root.mkdir(parents=True, exist_ok=True)

    def journal_dir(self, journal: str) -> Path:
        """Get the folder holding a journal's year folders."""
        return self.root / check_journal_name(journal)

    def path_for(self, journal: str, target_date: date) -> Path:
        """Get the file path for a journal entry on a given date."""
        return (
            self.journal_dir(journal)
            / str(target_date.year)
            / f"{target_date.month:02d}"
            / f"{target_date.day:02d}{self.extension}"
        )

    def list_journals(self) -> list[str]:
        """List journal names. Raises NoJournalsError if there are none."""
        journals = []
        if self.root.is_dir():
            journals = sorted(p.name for p in self.root.iterdir() if p.is_dir())
        if not journals:
            raise NoJournalsError("There are no journals.")
        return journals

    def list_years(self, journal: str) -> list[int]:
        """Years that have an entry folder for a journal, ascending."""
        journal_dir = self.journal_dir(journal)
        if not journal_dir.is_dir():
            return []

        years = []
        for path in journal_dir.iterdir():
            if not path.is_dir():
                continue
            try:
                years.append(int(path.name))
            except ValueError:
                raise JournalLayoutError(
                    f"Folders in {journal_dir} must all be years, found '{path.name}'"
                )
        return sorted(years)

    def load(self, journal: str, target_date: date) -> str | None:
        """Read entry text for a date. Returns None if not found."""
        path = self.path_for(journal, target_date)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise JournalReadError(
                f"Couldn't read journal {journal} for {target_date.isoformat()}: {e}"
            ) from e
        return text.replace("\r", "")

    def load_or_init(self, journal: str, target_date: date) -> str:
        """Read entry text for a date, creating it with a heading if missing."""
        text = self.load(journal, target_date)
        if text is None:
            text = heading(journal, target_date)
            logger.debug(f"Creating entry for {journal} on {target_date.isoformat()}")
            self.save(journal, target_date, text)
        return text

    def save(self, journal: str, target_date: date, text: str) -> bool:
        """Write/overwrite entry text for a date. Returns False on failure."""
        path = self.path_for(journal, target_date)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            logger.error(f"Could not write journal {path}: {e}")
            return False
        logger.debug(f"Saved {path}")
        return True

    def exists(self, journal: str, target_date: date) -> bool:
        """Check if an entry exists for a date."""
        return self.path_for(journal, target_date).exists()
