"""Daybook CLI - plain-text journal."""

import logging
import sys
from datetime import date, timedelta

import click

from .adapters.editor import EditorOpener
from .adapters.file_journal import FileJournalStore, JournalError, NoJournalsError
from .config import Config, load_config
from .core.entry import ToggleRejected, has_no_entries
from .core.navigator import Direction, recent_entries
from .core.search import SearchMatch, match_column
from .core.timestats import BreakdownRow, format_hours
from .session import CommandKind, Session, parse_command
from .workflows import (
    JournalExistsError,
    add_entry,
    create_journal,
    find_journal,
    find_next,
    get_store,
    open_entry,
    today_breakdown,
)

HELP_TEXT = """
Help


09:50 am - Before we start:
\t09:50 am - Type /help from anywhere to access this text
\t09:50 am - Type /exit from anywhere to exit this program

09:51 am - The basics
\t09:51 am - Type any text to add an 'entry'
\t09:51 am - new entries will be added to the current 'block' of lines
\t09:51 am - like
\t09:51 am - this

09:52 am - Type dash (-) followed by an entry to start a new block
\t09:52 am - Type a (~) on its own to toggle the last line between being part of a block vs being the start of a new block

09:53 am - (Useful for when you forget a (-) on the line you just entered)

09:53 am - Journal Reading
\t09:54 am - Type /prev to view previous entries
\t09:54 am - Type /find to search previous entries
\t09:54 am - Type /time to view a time breakdown of how much time elapsed between each block.
\t09:54 am - Type /gtime to show a more granular (but much harder to read) time breakdown between each entry.
\t09:54 am - Type /open to open today's entry in your editor

09:54 am - Journal Managing
\t09:54 am - You can have multiple journals.
\t09:54 am - Type /new to create a new journal. You will be asked to provide a name.
\t09:54 am - Type /switch to switch to another journal. This will only work if you have more than one journal.
"""


def _parse_date(value: str | None) -> date:
    if value is None:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a YYYY-MM-DD date")


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _session(ctx: click.Context) -> Session:
    """Resolve the store and journal for a one-shot command."""
    config: Config = ctx.obj["config"]
    store = get_store(config)
    try:
        journals = store.list_journals()
    except NoJournalsError:
        _fail("No journals yet. Create one with 'daybook new NAME'.")

    requested = ctx.obj["journal"] or config.default_journal
    if requested:
        name = find_journal(requested, journals)
        if name is None:
            _fail(f"No journal matches '{requested}'.")
        return Session(store=store, journal=name)

    if len(journals) > 1:
        _fail(f"Several journals found ({', '.join(journals)}). Pick one with --journal.")
    return Session(store=store, journal=journals[0])


@click.group(invoke_without_command=True)
@click.version_option()
@click.option("--journal", "-j", default=None, help="Journal name or prefix")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, journal: str | None, debug: bool):
    """Daybook - plain-text journal, one file per day."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    ctx.ensure_object(dict)
    ctx.obj.setdefault("config", load_config())
    ctx.obj["journal"] = journal

    if ctx.invoked_subcommand is None:
        ctx.invoke(repl)


@main.command()
@click.pass_context
def journals(ctx):
    """List journals."""
    store = get_store(ctx.obj["config"])
    try:
        names = store.list_journals()
    except NoJournalsError:
        click.echo("No journals yet. Create one with 'daybook new NAME'.")
        return

    for i, name in enumerate(names):
        click.echo(f"[{i}] - {name}")


@main.command()
@click.argument("name")
@click.pass_context
def new(ctx, name: str):
    """Create a new journal."""
    store = get_store(ctx.obj["config"])
    try:
        create_journal(store, name)
    except (JournalError, ValueError) as e:
        _fail(str(e))

    click.echo(f"Created journal {name.strip()} at {store.journal_dir(name.strip())}")


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Date to view (YYYY-MM-DD), defaults to today")
@click.pass_context
def show(ctx, target_date: str | None):
    """View a day's entry."""
    session = _session(ctx)
    target = _parse_date(target_date)

    try:
        if target == date.today():
            _echo_today(session)
            return
        text = session.store.load(session.journal, target)
    except JournalError as e:
        _fail(str(e))

    if text is None:
        click.echo(f"No entry in {session.journal} for {target.strftime('%A, %b %d')}.")
        return
    click.echo(text)


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("text", nargs=-1, required=True)
@click.pass_context
def add(ctx, text: tuple[str, ...]):
    """Add to today's entry. Start with '-' for a new block, or '~' to toggle."""
    session = _session(ctx)
    try:
        content = add_entry(session, " ".join(text))
    except (ToggleRejected, JournalError) as e:
        _fail(str(e))

    click.echo(content)


@main.command()
@click.option("--page", "-p", default=1, type=click.IntRange(min=0), help="Page number (1 or more)")
@click.option("--page-size", "-n", default=None, type=click.IntRange(min=1), help="Entries per page")
@click.pass_context
def prev(ctx, page: int, page_size: int | None):
    """View previous entries, newest last."""
    session = _session(ctx)
    page_size = page_size or ctx.obj["config"].page_size
    try:
        entries = recent_entries(session.store, session.journal, date.today(), page_size, page)
    except JournalError as e:
        _fail(str(e))

    _echo_page([text for _, text in entries], page, page_size)


@main.command()
@click.option("--granular", "-g", is_flag=True, help="Show durations for every line")
@click.pass_context
def time(ctx, granular: bool):
    """Time breakdown for today's entry."""
    session = _session(ctx)
    try:
        rows = today_breakdown(session, granular=granular)
    except JournalError as e:
        _fail(str(e))

    _echo_breakdown(rows, granular)


@main.command()
@click.argument("query")
@click.option("--from", "from_date", default=None, help="Start date (YYYY-MM-DD), defaults to today")
@click.option("--forward", is_flag=True, help="Search forwards in time instead of backwards")
@click.pass_context
def find(ctx, query: str, from_date: str | None, forward: bool):
    """Find the next entry containing QUERY."""
    session = _session(ctx)
    direction = Direction.FORWARD if forward else Direction.BACKWARD
    try:
        matches = find_next(session, query, _parse_date(from_date), direction)
    except JournalError as e:
        _fail(str(e))

    if not matches:
        click.echo(f'No results for "{query}".')
        return
    _echo_matches(matches, query)


@main.command("open")
@click.option("--date", "-d", "target_date", default=None,
              help="Date to open (YYYY-MM-DD), defaults to today")
@click.pass_context
def open_cmd(ctx, target_date: str | None):
    """Open an entry in your editor."""
    session = _session(ctx)
    opener = EditorOpener(ctx.obj["config"].opener or None)
    try:
        open_entry(session, opener, _parse_date(target_date))
    except (JournalError, RuntimeError) as e:
        _fail(str(e))


@main.command()
@click.pass_context
def repl(ctx):
    """Interactive journaling loop (default)."""
    config: Config = ctx.obj["config"]
    store = get_store(config)
    requested = ctx.obj["journal"] or config.default_journal
    try:
        session = Session(store=store, journal=_pick_journal(store, requested))
        _run_repl(session, config)
    except JournalError as e:
        _fail(str(e))


# ============== Presentation ==============


def _echo_today(session: Session) -> None:
    content = session.store.load_or_init(session.journal, date.today())
    if has_no_entries(content):
        click.echo(
            f"You haven't put any entries in [{session.journal}] yet.\n"
            "Type '/help' at any time to find out how.\n\n"
        )
    click.echo(content)


def _echo_breakdown(rows: list[BreakdownRow], granular: bool) -> None:
    click.echo(f"Viewing time breakdown{' (granular)' if granular else ''}:\n\n")
    click.echo(rows[0].mark.text)

    for row in rows[1:]:
        if row.mark.is_block_start:
            click.echo()
        if row.show_elapsed:
            elapsed = row.elapsed
            click.echo(
                f"\nelapsed:\t\tsince start: {format_hours(elapsed.since_start)}"
                f"      since block: {format_hours(elapsed.since_block)}"
                f"      since last: {format_hours(elapsed.since_last)}\n"
            )
        if row.mark.is_block_start:
            click.echo()
        click.echo(row.mark.text)


def _highlight(line: str, column: int, symbol: str, count: int) -> str:
    pad = "".join("\t" if c == "\t" else " " for c in line[:column])
    return f"    {pad}{symbol * count}"


def _echo_matches(matches: list[SearchMatch], query: str) -> None:
    for match in matches:
        for i, line in enumerate(match.lines):
            column = match_column(line, query)
            if i in match.matched_lines and column is not None:
                click.echo()
                click.echo(_highlight(line, column, "v", len(query)))
                click.echo(f"--> {line}     <--")
                click.echo(_highlight(line, column, "^", len(query)))
                click.echo()
            else:
                click.echo(f"    {line}")

    click.echo(f"\n\nFound results in {matches[0].heading}:\n")


def _echo_page(texts: list[str], page: int, page_size: int) -> None:
    page_index = max(page - 1, 0)
    start = page_size * page_index

    for i, text in enumerate(texts):
        if page_index == 0 and i == len(texts) - 1:
            label = ""
        else:
            label = f" - {start + len(texts) - 1 - i}"
        click.echo(f"\n\n\n---------------- <latest entry{label}> ----------------\n\n")
        click.echo(text)

    click.echo("\n\n")
    if not texts:
        click.echo(f"No entries were found for page {page_index + 1} with a page size of {page_size}.")
        return

    click.echo(f"Viewing entries from latest-{start + len(texts) - 1} to latest-{start}")
    if len(texts) != page_size:
        click.echo(f"(Only {len(texts)}/{page_size} entries were found)")


# ============== Interactive loop ==============


def _show_help() -> None:
    click.clear()
    click.echo(HELP_TEXT)
    click.pause("Press enter to continue...")


def _ask(message: str) -> str:
    """Prompt for input. /exit and /help work here as at the main prompt."""
    while True:
        raw = click.prompt(message, default="", show_default=False, prompt_suffix="\n> ")
        match parse_command(raw).kind:
            case CommandKind.EXIT:
                click.clear()
                sys.exit(0)
            case CommandKind.HELP:
                _show_help()
            case _:
                return raw


def _pick_journal(store: FileJournalStore, requested: str | None = None) -> str:
    """Choose an existing journal, or create one if there are none."""
    try:
        journals = store.list_journals()
    except NoJournalsError:
        return _pick_new_journal(store)

    if requested:
        name = find_journal(requested, journals)
        if name is not None:
            return name
    return _pick_existing_journal(journals)


def _pick_existing_journal(journals: list[str]) -> str:
    if len(journals) == 1:
        return journals[0]

    while True:
        click.echo("Select a journal:")
        for i, name in enumerate(journals):
            click.echo(f"[{i}] - {name}")
        name = find_journal(_ask(""), journals)
        if name is not None:
            return name
        click.echo("Input was invalid, try again")


def _pick_new_journal(store: FileJournalStore) -> str:
    while True:
        name = _ask("Enter the name of your new journal:").strip()
        try:
            create_journal(store, name)
        except (JournalExistsError, ValueError) as e:
            click.echo(str(e))
            continue
        return name


def _prev_loop(session: Session, page_size: int) -> None:
    page = 0
    while True:
        click.clear()
        entries = recent_entries(session.store, session.journal, date.today(), page_size, page)
        _echo_page([text for _, text in entries], page, page_size)
        raw = _ask("input a page number (1 or more), or anything else to go back").strip()
        if not raw.isdecimal():
            return
        page = int(raw)


def _find_loop(session: Session) -> None:
    cursor = date.today()
    query = ""

    def run(start: date, direction: Direction) -> None:
        nonlocal cursor
        click.echo(f"searching {direction.value}s from {start.isoformat()} ...")
        matches = find_next(session, query, start, direction)
        if not matches:
            click.echo(f'No more results for "{query}".')
            return
        cursor = matches[0].date
        _echo_matches(matches, query)

    click.clear()
    while True:
        if query:
            click.echo(f'Searching for "{query}"')
        raw = _ask('Enter search text, "<" or ">" to go backwards or forwards, or ":quit" to go back').strip()
        click.clear()

        if raw == ":quit":
            return
        if raw in ("<", "", ">") and not query:
            click.echo("Enter some search text first.")
        elif raw in ("<", ""):
            run(cursor - timedelta(days=1), Direction.BACKWARD)
        elif raw == ">":
            run(cursor + timedelta(days=1), Direction.FORWARD)
        else:
            query = raw
            run(date.today(), Direction.BACKWARD)


def _run_repl(session: Session, config: Config) -> None:
    message = ""

    while True:
        click.clear()
        _echo_today(session)

        if message:
            click.echo(f"\n{message}\n")
            message = ""

        command = parse_command(
            click.prompt(f"\ncurrent->{session.journal}", default="", show_default=False, prompt_suffix=": ")
        )

        match command.kind:
            case CommandKind.EXIT:
                click.clear()
                return
            case CommandKind.NOOP:
                continue
            case CommandKind.HELP:
                _show_help()
            case CommandKind.SWITCH:
                try:
                    session.journal = _pick_existing_journal(session.store.list_journals())
                except NoJournalsError:
                    message = "No journals available, use /new to make one."
            case CommandKind.NEW:
                session.journal = _pick_new_journal(session.store)
            case CommandKind.PREV:
                _prev_loop(session, config.page_size)
            case CommandKind.TIME | CommandKind.GRANULAR_TIME:
                granular = command.kind is CommandKind.GRANULAR_TIME
                click.clear()
                _echo_breakdown(today_breakdown(session, granular=granular), granular)
                click.pause("\n\npress enter to go back ...")
            case CommandKind.FIND:
                _find_loop(session)
            case CommandKind.OPEN:
                try:
                    open_entry(session, EditorOpener(config.opener or None))
                except RuntimeError as e:
                    message = str(e)
            case CommandKind.TEXT:
                try:
                    add_entry(session, command.text)
                except ToggleRejected as e:
                    message = str(e)


if __name__ == "__main__":
    main()
