"""Shared workflow layer between the CLI and the note core.

Each function loads the note through the store, runs a pure core
function over its text, and writes the result back when it changed.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date
from pathlib import Path

from .adapters.file_note import FileNoteStore
from .config import Config, ConfigError, apply_rename, note_path, save_config, validate_heading_type
from .core.migrate import migrate_headings
from .core.notes import Section, find_section, insert_for_date, list_sections, read_section
from .ports.note_store import VaultEntry

logger = logging.getLogger(__name__)


@dataclass
class NoteLocation:
    """Where a day's section lives after a workflow ran."""

    path: Path
    index: int
    created: bool


def get_store(config: Config) -> FileNoteStore:
    """Resolve the vault from config."""
    return FileNoteStore(Path(config.vault_dir).expanduser())


def _require_note_name(config: Config) -> str:
    if not config.note_name:
        raise ConfigError("Daily notes file name cannot be empty. Change NOTE_NAME in daybook.conf.")
    return note_path(config)


def _read_note(config: Config) -> str | None:
    return get_store(config).read(_require_note_name(config))


def create_note_for_date(config: Config, target: date) -> NoteLocation:
    """Add a section for target to the daily notes file, creating the file if needed."""
    path = _require_note_name(config)
    store = get_store(config)
    fmt = config.note_format()

    if not store.exists(path):
        store.create(path)

    result = None

    def _insert(text: str) -> str:
        nonlocal result
        result = insert_for_date(text, target, fmt)
        return result.text

    store.process(path, _insert)
    if result.created:
        logger.info(f"Added section for {target.isoformat()} at line {result.index}")
    return NoteLocation(path=store.path_for(path), index=result.index, created=result.created)


def open_daily_note(config: Config, today: date | None = None) -> NoteLocation:
    """Make sure today's section exists."""
    return create_note_for_date(config, today or date.today())


def find_note(config: Config, target: date) -> int | None:
    """Line index of target's section, or None if there is none."""
    text = _read_note(config)
    if text is None:
        return None
    return find_section(text, target, config.note_format())


def show_note(config: Config, target: date) -> str | None:
    """Heading and body of target's section."""
    text = _read_note(config)
    if text is None:
        return None
    return read_section(text, target, config.note_format())


def notes_in_month(config: Config, day: date) -> list[Section]:
    """Sections dated in day's month."""
    text = _read_note(config)
    if text is None:
        return []
    return [
        s for s in list_sections(text, config.note_format())
        if (s.day.year, s.day.month) == (day.year, day.month)
    ]


def change_heading_type(config: Config, heading_type: str, path: Path | None = None) -> Config:
    """
    Switch date headings to a new level and rewrite the note to match.

    The setting is only saved once the note has been rewritten, so a
    failed migration leaves both at the old level.

    Raises:
        ConfigError: if heading_type is not h1 to h6
    """
    validate_heading_type(heading_type)
    new_config = replace(config, heading_type=heading_type)

    store = get_store(new_config)
    note = note_path(new_config)
    if new_config.note_name and store.exists(note):
        fmt = new_config.note_format()
        store.process(note, lambda text: migrate_headings(text, new_config.heading_level, fmt))
        logger.info(f"Updated daily note headings to {heading_type}")

    save_config(new_config, path)
    return new_config


def handle_rename(
    config: Config,
    entry: VaultEntry,
    old_path: str,
    path: Path | None = None,
) -> Config:
    """Update and save the note location after a file or folder rename."""
    new_config = apply_rename(config, entry, old_path)
    if new_config != config:
        save_config(new_config, path)
        logger.info(f"Daily notes file is now {note_path(new_config)}")
    return new_config
