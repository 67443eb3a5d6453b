"""Ports - interfaces/protocols for external dependencies."""

from .note_store import FileEntry, FolderEntry, NoteStore, VaultEntry

__all__ = [
    "FileEntry",
    "FolderEntry",
    "NoteStore",
    "VaultEntry",
]
