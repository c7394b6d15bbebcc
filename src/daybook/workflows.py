"""Shared workflow layer between the one-shot CLI commands and the REPL.

Each function takes the session (store + journal) explicitly, loads what it
needs through the store, runs the pure core, and saves the result.
"""

import logging
from datetime import date, datetime
from pathlib import Path

from .adapters.editor import EditorOpener
from .adapters.file_journal import FileJournalStore, JournalError, check_journal_name
from .config import JOURNALS_DIR, Config
from .core import entry
from .core.navigator import Direction
from .core.search import SearchMatch, search
from .core.timestats import BreakdownRow, time_breakdown
from .session import Session

logger = logging.getLogger(__name__)


class JournalExistsError(JournalError):
    """Raised when a new journal name matches an existing journal."""


def get_store(config: Config) -> FileJournalStore:
    """Resolve the journals root from config."""
    if config.journals_dir:
        return FileJournalStore(Path(config.journals_dir).expanduser(), config.extension)
    return FileJournalStore(JOURNALS_DIR, config.extension)


def find_journal(user_input: str, journals: list[str]) -> str | None:
    """
    Pick a journal by list index or by case-insensitive name prefix.

    Returns None if nothing matches.
    """
    user_input = user_input.strip()
    if user_input.isdecimal():
        index = int(user_input)
        if index < len(journals):
            return journals[index]
        return None

    prefix = user_input.lower()
    for name in journals:
        if name.lower().startswith(prefix):
            return name
    return None


def create_journal(store: FileJournalStore, name: str, today: date | None = None) -> str:
    """Create a journal by initialising today's entry. Returns the entry text."""
    name = name.strip()
    if not name:
        raise ValueError("Journal name can't be empty")
    check_journal_name(name)

    try:
        existing = find_journal(name, store.list_journals())
    except JournalError:
        existing = None
    if existing is not None:
        raise JournalExistsError(
            f"That name already refers to the journal '{existing}', please pick another one."
        )

    logger.info(f"Creating journal {name}")
    return store.load_or_init(name, today or date.today())


def add_entry(session: Session, raw_input: str, now: datetime | None = None) -> str:
    """Append input to today's entry, save it, and return the new text."""
    now = now or datetime.now()
    today = now.date()
    text = session.store.load_or_init(session.journal, today)
    new_text = entry.append(text, now, raw_input)
    session.store.save(session.journal, today, new_text)
    return new_text


def today_breakdown(
    session: Session,
    granular: bool = False,
    now: datetime | None = None,
) -> list[BreakdownRow]:
    """Time breakdown for today's entry."""
    now = now or datetime.now()
    text = session.store.load_or_init(session.journal, now.date())
    return time_breakdown(text, now, granular=granular, now=now)


def find_next(
    session: Session,
    query: str,
    start_date: date,
    direction: Direction = Direction.BACKWARD,
) -> list[SearchMatch]:
    """Matching blocks from the next entry containing query, or []."""
    logger.debug(f"Searching {direction.value} from {start_date.isoformat()} for {query!r}")
    return list(search(session.store, session.journal, start_date, direction, query))


def open_entry(session: Session, opener: EditorOpener, target_date: date | None = None) -> int:
    """Open an entry in an external program, creating it first if needed."""
    target_date = target_date or date.today()
    if not session.store.exists(session.journal, target_date):
        logger.debug(f"Creating {session.journal} entry for {target_date.isoformat()} before opening")
        session.store.load_or_init(session.journal, target_date)
    return opener.open(session.store.path_for(session.journal, target_date))
