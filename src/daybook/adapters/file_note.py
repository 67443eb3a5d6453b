"""File-based note storage adapter."""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator

logger = logging.getLogger(__name__)


class NoteNotFoundError(FileNotFoundError):
    """Raised when updating a note that does not exist."""


@contextmanager
def note_lock(lock_path: Path) -> Iterator[None]:
    """Hold an exclusive lock so updates to one note never interleave.

    Blocks until any other holder releases the lock.
    """
    try:
        import fcntl
    except ModuleNotFoundError:
        raise RuntimeError("Note locks require fcntl (not available on this platform).") from None

    with lock_path.open("a+", encoding="utf-8") as handle:
        fcntl.flock(handle.fileno(), fcntl.LOCK_EX)
        try:
            yield
        finally:
            fcntl.flock(handle.fileno(), fcntl.LOCK_UN)


class FileNoteStore:
    """
    File-based note storage.

    Implements NoteStore protocol. Paths are relative to the vault directory.
    """

    def __init__(self, vault_dir: Path | str):
        self.vault_dir = Path(vault_dir).expanduser()

    def path_for(self, path: str) -> Path:
        """Resolve a vault-relative path."""
        return self.vault_dir / path

    def _lock_path(self, path: str) -> Path:
        note = self.path_for(path)
        return note.with_name(f".{note.name}.lock")

    def exists(self, path: str) -> bool:
        return self.path_for(path).is_file()

    def read(self, path: str) -> str | None:
        """Read note content. Returns None if not found."""
        note = self.path_for(path)
        if not note.is_file():
            return None
        return note.read_text(encoding="utf-8")

    def write(self, path: str, content: str) -> None:
        """Write/overwrite note content."""
        self.path_for(path).write_text(content, encoding="utf-8")

    def create(self, path: str, content: str = "") -> None:
        """Create a note, including missing parent folders."""
        note = self.path_for(path)
        note.parent.mkdir(parents=True, exist_ok=True)
        self.write(path, content)
        logger.info(f"Created note {note}")

    def process(self, path: str, transform: Callable[[str], str]) -> str:
        """
        Apply transform to the note as one serialized read-modify-write.

        The file is only rewritten when the content changes.

        Returns:
            The note content after the transform

        Raises:
            NoteNotFoundError: if the note does not exist
        """
        note = self.path_for(path)
        if not note.is_file():
            raise NoteNotFoundError(f"Note not found: {note}")

        with note_lock(self._lock_path(path)):
            current = note.read_text(encoding="utf-8")
            updated = transform(current)
            if updated != current:
                self.write(path, updated)
                logger.debug(f"Updated note {note}")
        return updated
