"""Configuration management for Daybook."""

import logging
import os
import re
from dataclasses import dataclass, fields, replace
from pathlib import Path

from .core.headings import NoteFormat
from .ports.note_store import FileEntry, FolderEntry, VaultEntry

logger = logging.getLogger(__name__)

DAYBOOK_HOME = Path(os.environ.get("DAYBOOK_HOME", Path.home() / "daybook"))
CONFIG_FILE = DAYBOOK_HOME / "daybook.conf"

_HEADING_TYPE_RE = re.compile(r"^h[1-6]$")


class ConfigError(ValueError):
    """Raised for invalid configuration values."""


@dataclass(frozen=True)
class Config:
    """Daybook configuration."""

    note_name: str = "Daily Notes"
    note_location: str = ""
    vault_dir: str = str(DAYBOOK_HOME / "vault")
    heading_type: str = "h3"
    date_format: str = "DD-MM-YYYY, dddd"
    month_format: str = "MMMM YYYY"
    default_entry: str = "- entry"

    @property
    def heading_level(self) -> int:
        return int(self.heading_type[1])

    def note_format(self) -> NoteFormat:
        """The heading format the core works with."""
        return NoteFormat(
            heading_level=self.heading_level,
            date_format=self.date_format,
            month_format=self.month_format,
            default_entry=self.default_entry,
        )


def validate_heading_type(value: str) -> str:
    """Check a heading type is one of h1 to h6."""
    if not _HEADING_TYPE_RE.match(value):
        raise ConfigError(f'Invalid heading type "{value}" (expected h1 to h6)')
    return value


def update_config(config: Config, key: str, value: str) -> Config:
    """Return a copy of config with one validated setting changed."""
    key = key.strip().lower()
    if key not in {f.name for f in fields(Config)}:
        raise ConfigError(f"Unknown setting: {key}")
    if key == "heading_type":
        validate_heading_type(value)
    return replace(config, **{key: value})


def note_path(config: Config) -> str:
    """Vault-relative path of the daily notes file."""
    file = config.note_name + ".md"
    if not config.note_location:
        return file
    return config.note_location + "/" + file


def apply_rename(config: Config, entry: VaultEntry, old_path: str) -> Config:
    """
    Follow the daily notes file when it, or a folder holding it, moves.

    Returns config unchanged when the rename does not affect the note.
    """
    current = note_path(config)

    match entry:
        case FileEntry() if old_path == current:
            location = entry.path.rsplit("/", 1)[0] if "/" in entry.path else ""
            return replace(config, note_name=entry.basename, note_location=location)
        case FolderEntry() if current.startswith(old_path + "/"):
            new_path = entry.path + current[len(old_path) :]
            return replace(config, note_location=new_path[: new_path.rfind("/")])

    return config


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"'):
        end_quote = value.find('"', 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if value.startswith("'"):
        end_quote = value.find("'", 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from daybook.conf, keeping defaults for missing keys."""
    path = path or CONFIG_FILE
    config = Config()

    if not path.exists():
        return config

    values: dict[str, str] = {}
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "heading_type":
                if _HEADING_TYPE_RE.match(value):
                    values[key] = value
                else:
                    logger.warning(f"Ignoring invalid HEADING_TYPE {value!r}, using {config.heading_type}")
            case "note_name" | "note_location" | "vault_dir" | "date_format" | "month_format" | "default_entry":
                values[key] = value
            case _:
                logger.debug(f"Ignoring unknown setting {key!r}")

    return replace(config, **values)


def save_config(config: Config, path: Path | None = None) -> None:
    """Write every setting to daybook.conf."""
    path = path or CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)

    lines = []
    for f in fields(Config):
        value = getattr(config, f.name)
        quote = "'" if '"' in value else '"'
        lines.append(f"{f.name.upper()} = {quote}{value}{quote}")
    path.write_text("\n".join(lines) + "\n")
    logger.debug(f"Saved configuration to {path}")
