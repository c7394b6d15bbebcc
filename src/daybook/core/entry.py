"""Pure entry text logic - no I/O dependencies.

An entry is the plain text for one journal day:

    Work - Monday 2024/3/4

    09:00 am - standup
    	09:20 am - notes from standup

    11:45 am - review

The first line is the heading. Each unit after it is a timestamped line,
either a block (preceded by a blank line) or a nested line (indented by
one tab under the current block).
"""

from datetime import date, datetime

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

BLOCK_SEPARATOR = "\n\n"
LINE_SEPARATOR = "\n\t"
TOGGLE_INPUT = "~"


class ToggleRejected(ValueError):
    """Raised when '~' is used on an entry that has no units yet."""


def datestamp(target_date: date) -> str:
    """Unpadded Y/M/D, as written in headings."""
    return f"{target_date.year}/{target_date.month}/{target_date.day}"


def timestamp(moment: datetime) -> str:
    """Render a 12-hour `HH:MM am|pm` timestamp with a zero-padded hour."""
    hour = moment.hour % 12 or 12
    am_pm = "pm" if moment.hour >= 12 else "am"
    return f"{hour:02d}:{moment.minute:02d} {am_pm}"


def heading(journal: str, target_date: date) -> str:
    """Heading line written once when an entry is created."""
    weekday = WEEKDAYS[target_date.weekday()]
    return f"{journal} - {weekday} {datestamp(target_date)}\n"


def format_unit(moment: datetime, indent: int, content: str) -> str:
    """A unit as appended to the text: newline, tabs, timestamp, content."""
    return "\n" + "\t" * indent + f"{timestamp(moment)} - {content}"


def has_no_entries(text: str) -> bool:
    """
    True while the entry holds no units.

    Counts dashes: the heading has one, and every unit adds another.
    Content that contains its own '-' also counts.
    """
    return text.count("-") < 2


def append(existing_text: str, now: datetime, raw_input: str) -> str:
    """
    Merge one unit of input into an entry's text and return the new text.

    - "~" toggles the most recent unit between block and line form
    - input starting with "-" (or the first input of the day) starts a block
    - anything else becomes a nested line under the current block

    Pure function - no I/O. Raises ToggleRejected for "~" on an empty entry.
    """
    empty = has_no_entries(existing_text)

    if raw_input.strip() == TOGGLE_INPUT:
        if empty:
            raise ToggleRejected("Can't use '~' when there aren't any entries")
        return toggle(existing_text)

    if raw_input.startswith("-") or empty:
        content = raw_input.strip()
        if content.startswith("-"):
            content = content[1:]
        return existing_text + "\n" + format_unit(now, 0, content.strip())

    return existing_text + format_unit(now, 1, raw_input.strip())


def toggle(text: str) -> str:
    """
    Flip the separator in front of the most recent unit.

    A block separator ("\\n\\n") becomes a line separator ("\\n\\t") and the
    other way round. Everything else is left byte-for-byte unchanged. Text
    with neither separator is returned as is.
    """
    block_at = text.rfind(BLOCK_SEPARATOR)
    line_at = text.rfind(LINE_SEPARATOR)

    if block_at == -1 and line_at == -1:
        return text

    if line_at > block_at:
        return text[:line_at] + BLOCK_SEPARATOR + text[line_at + 2:]
    return text[:block_at] + LINE_SEPARATOR + text[block_at + 2:]
