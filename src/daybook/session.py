"""Interactive session state and command parsing."""

from dataclasses import dataclass
from enum import Enum, auto

from .ports.journal_store import JournalStore


@dataclass
class Session:
    """The store and journal an interactive loop is working on."""

    store: JournalStore
    journal: str


class CommandKind(Enum):
    """What a line of interactive input asks for."""

    TEXT = auto()
    NOOP = auto()
    EXIT = auto()
    HELP = auto()
    SWITCH = auto()
    NEW = auto()
    PREV = auto()
    TIME = auto()
    GRANULAR_TIME = auto()
    FIND = auto()
    OPEN = auto()


@dataclass
class Command:
    """A parsed line of input. text is only set for TEXT."""

    kind: CommandKind
    text: str = ""


HELP_PREFIXES = ("/?", "help", "/help")

SLASH_COMMANDS = (
    ("/switch", CommandKind.SWITCH),
    ("/set", CommandKind.SWITCH),
    ("/last", CommandKind.PREV),
    ("/prev", CommandKind.PREV),
    ("/time", CommandKind.TIME),
    ("/gtime", CommandKind.GRANULAR_TIME),
    ("/find", CommandKind.FIND),
    ("/open", CommandKind.OPEN),
)


def parse_command(raw: str) -> Command:
    """Resolve a line of input to a Command."""
    line = raw.rstrip()

    if line == "/exit":
        return Command(CommandKind.EXIT)
    if line.startswith(HELP_PREFIXES) or line.strip() == "?":
        return Command(CommandKind.HELP)

    stripped = line.strip()
    if stripped in ("", "-"):
        return Command(CommandKind.NOOP)

    if stripped.startswith("/"):
        if line == "/new":
            return Command(CommandKind.NEW)
        for prefix, kind in SLASH_COMMANDS:
            if line.startswith(prefix):
                return Command(kind)
        return Command(CommandKind.NOOP)

    return Command(CommandKind.TEXT, text=line)
