"""Daybook CLI - single-file daily notes."""

import json
import logging
import sys
from dataclasses import asdict
from datetime import date

import click

from . import config as settings
from .adapters.file_note import NoteNotFoundError
from .config import ConfigError, load_config, note_path, save_config, update_config
from .core.month_grid import is_weekend, month_weeks, weekday_header
from .ports.note_store import FileEntry, FolderEntry
from .workflows import (
    change_heading_type,
    create_note_for_date,
    find_note,
    handle_rename,
    notes_in_month,
    open_daily_note,
    show_note,
)


def _parse_date(value: str | None, param_hint: str = "--date") -> date:
    if not value:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"{value!r} is not a YYYY-MM-DD date", param_hint=param_hint) from None


def _parse_month(value: str | None, param_hint: str = "--month") -> date:
    if not value:
        return date.today().replace(day=1)
    try:
        return date.fromisoformat(f"{value}-01")
    except ValueError:
        raise click.BadParameter(f"{value!r} is not a YYYY-MM month", param_hint=param_hint) from None


def _fail(error: Exception) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Daybook - one markdown file, one section per day."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
def today():
    """Open the daily notes file, adding today's section."""
    config = load_config()
    try:
        location = open_daily_note(config)
    except (ConfigError, NoteNotFoundError, RuntimeError) as e:
        _fail(e)

    status = "Added" if location.created else "Found"
    click.echo(f"{status} today's section in {location.path} (line {location.index + 1})")


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Date of the section (YYYY-MM-DD), defaults to today")
def add(target_date: str | None):
    """Add a section for a date."""
    config = load_config()
    target = _parse_date(target_date)
    try:
        location = create_note_for_date(config, target)
    except (ConfigError, NoteNotFoundError, RuntimeError) as e:
        _fail(e)

    if location.created:
        click.echo(f"✓ Added section for {target.isoformat()} (line {location.index + 1})")
    else:
        click.echo(f"Section for {target.isoformat()} already exists (line {location.index + 1})")


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Date to look up (YYYY-MM-DD), defaults to today")
def find(target_date: str | None):
    """Print the line number of a date's section."""
    config = load_config()
    target = _parse_date(target_date)
    try:
        index = find_note(config, target)
    except (ConfigError, NoteNotFoundError, RuntimeError) as e:
        _fail(e)

    if index is None:
        click.echo(f"No daily note exists for {target.isoformat()}.", err=True)
        sys.exit(1)
    click.echo(index + 1)


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Date to show (YYYY-MM-DD), defaults to today")
def show(target_date: str | None):
    """Print a date's section."""
    config = load_config()
    target = _parse_date(target_date)
    try:
        content = show_note(config, target)
    except (ConfigError, NoteNotFoundError, RuntimeError) as e:
        _fail(e)

    if content is None:
        click.echo(f"No daily note exists for {target.isoformat()}.")
        return
    click.echo(content)


@main.command()
@click.option("--month", "-m", default=None, help="Month to show (YYYY-MM), defaults to this month")
def calendar(month: str | None):
    """Show a month calendar, marking days that have a section."""
    config = load_config()
    shown = _parse_month(month)
    try:
        noted = {s.day for s in notes_in_month(config, shown)}
    except (ConfigError, NoteNotFoundError, RuntimeError) as e:
        _fail(e)

    click.echo(shown.strftime("%B %Y"))
    click.echo(" ".join(f"{name:>3}" for name in weekday_header()))
    for week in month_weeks(shown):
        cells = []
        for day in week:
            cell = f"{day.day:>2}{'*' if day in noted else ' '}"
            if day.month != shown.month:
                cell = click.style(cell, dim=True)
            elif day == date.today():
                cell = click.style(cell, bold=True, underline=True)
            elif is_weekend(day):
                cell = click.style(cell, fg="cyan")
            cells.append(cell)
        click.echo(" ".join(cells))


@main.command()
@click.argument("heading_type")
def headings(heading_type: str):
    """Change the heading type (h1 to h6) and rewrite existing headings."""
    config = load_config()
    try:
        change_heading_type(config, heading_type)
    except (ConfigError, NoteNotFoundError, RuntimeError) as e:
        _fail(e)
    click.echo(f"Updated daily note headings to {heading_type}")


@main.command()
@click.argument("old_path")
@click.argument("new_path")
@click.option("--folder", is_flag=True, help="The renamed entry is a folder")
def renamed(old_path: str, new_path: str, folder: bool):
    """Tell daybook that a vault file or folder was renamed."""
    config = load_config()
    entry = FolderEntry(new_path) if folder else FileEntry(new_path)
    new_config = handle_rename(config, entry, old_path)

    if new_config == config:
        click.echo("Daily notes file not affected.")
    else:
        click.echo(f"Daily notes file is now {note_path(new_config)}")


@main.group("config")
def config_group():
    """Show or change settings."""
    pass


@config_group.command("show")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def config_show(as_json: bool):
    """Show current settings."""
    config = load_config()
    if as_json:
        click.echo(json.dumps(asdict(config), indent=2))
        return

    click.echo(f"# {settings.CONFIG_FILE}")
    for key, value in asdict(config).items():
        click.echo(f"{key:14} {value}")


@config_group.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str):
    """Change a setting."""
    config = load_config()
    try:
        if key.strip().lower() == "heading_type":
            change_heading_type(config, value)
        else:
            save_config(update_config(config, key, value))
    except (ConfigError, NoteNotFoundError, RuntimeError) as e:
        _fail(e)
    click.echo(f"✓ {key.lower()} = {value}")


if __name__ == "__main__":
    main()
