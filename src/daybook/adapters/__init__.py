"""Adapters - I/O implementations of ports."""

from .file_note import FileNoteStore, NoteNotFoundError

__all__ = [
    "FileNoteStore",
    "NoteNotFoundError",
]
