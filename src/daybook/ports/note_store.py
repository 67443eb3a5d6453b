"""Note storage interface."""

from dataclasses import dataclass
from typing import Callable, Protocol


@dataclass(frozen=True)
class FileEntry:
    """A file in the vault, by vault-relative path."""

    path: str

    @property
    def basename(self) -> str:
        """File name without directory or extension."""
        name = self.path.rsplit("/", 1)[-1]
        return name.rsplit(".", 1)[0] if "." in name else name


@dataclass(frozen=True)
class FolderEntry:
    """A folder in the vault, by vault-relative path."""

    path: str


VaultEntry = FileEntry | FolderEntry


class NoteStore(Protocol):
    """Interface for reading and updating the daily notes file."""

    def exists(self, path: str) -> bool:
        """Check if a note exists at a vault-relative path."""
        ...

    def read(self, path: str) -> str | None:
        """Read note content. Returns None if not found."""
        ...

    def write(self, path: str, content: str) -> None:
        """Write/overwrite note content."""
        ...

    def create(self, path: str, content: str = "") -> None:
        """Create a note, including missing parent folders."""
        ...

    def process(self, path: str, transform: Callable[[str], str]) -> str:
        """Apply transform to the note as one serialized read-modify-write."""
        ...
