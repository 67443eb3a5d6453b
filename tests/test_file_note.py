"""Tests for the file-based note store."""

import threading
from datetime import date
from pathlib import Path
from unittest.mock import patch

import pytest

from daybook.adapters.file_note import FileNoteStore, NoteNotFoundError
from daybook.core.headings import NoteFormat
from daybook.core.notes import insert_for_date, list_sections


@pytest.fixture
def store(tmp_path):
    return FileNoteStore(tmp_path)


class TestFileNoteStore:
    def test_read_missing(self, store):
        assert store.read("Daily Notes.md") is None
        assert store.exists("Daily Notes.md") is False

    def test_create_and_read(self, store, tmp_path):
        store.create("Daily Notes.md")
        assert store.exists("Daily Notes.md")
        assert store.read("Daily Notes.md") == ""
        assert (tmp_path / "Daily Notes.md").exists()

    def test_create_makes_parent_folders(self, store, tmp_path):
        store.create("journal/2024/Daily Notes.md", "hello")
        assert (tmp_path / "journal" / "2024" / "Daily Notes.md").read_text() == "hello"

    def test_write_overwrites(self, store):
        store.create("Daily Notes.md", "old")
        store.write("Daily Notes.md", "new")
        assert store.read("Daily Notes.md") == "new"

    def test_create_and_process_write_through_write(self, store):
        with patch.object(store, "write", wraps=store.write) as mock_write:
            store.create("Daily Notes.md", "old")
            store.process("Daily Notes.md", lambda text: "new")
        assert [c.args for c in mock_write.call_args_list] == [
            ("Daily Notes.md", "old"),
            ("Daily Notes.md", "new"),
        ]
        assert store.read("Daily Notes.md") == "new"

    def test_folder_is_not_a_note(self, store, tmp_path):
        (tmp_path / "Daily Notes.md").mkdir()
        assert store.exists("Daily Notes.md") is False
        assert store.read("Daily Notes.md") is None

    def test_expands_user_path(self):
        store = FileNoteStore("~/vault")
        assert store.vault_dir == Path.home() / "vault"


class TestProcess:
    def test_applies_transform(self, store):
        store.create("Daily Notes.md", "a")
        result = store.process("Daily Notes.md", lambda text: text + "b")
        assert result == "ab"
        assert store.read("Daily Notes.md") == "ab"

    def test_missing_note_raises(self, store):
        with pytest.raises(NoteNotFoundError):
            store.process("Daily Notes.md", lambda text: text)

    def test_not_found_is_a_file_not_found_error(self):
        assert issubclass(NoteNotFoundError, FileNotFoundError)

    def test_unchanged_text_is_not_written(self, store):
        store.create("Daily Notes.md", "same")
        with patch.object(Path, "write_text") as mock_write:
            store.process("Daily Notes.md", lambda text: text)
        mock_write.assert_not_called()

    def test_uses_sibling_lock_file(self, store, tmp_path):
        store.create("Daily Notes.md")
        store.process("Daily Notes.md", lambda text: text + "x")
        assert (tmp_path / ".Daily Notes.md.lock").exists()

    def test_concurrent_updates_are_serialized(self, store):
        fmt = NoteFormat(date_format="DD-MM-YYYY")
        days = [date(2024, 5, n) for n in range(1, 11)]
        store.create("Daily Notes.md")

        def add(day):
            store.process("Daily Notes.md", lambda text: insert_for_date(text, day, fmt).text)

        threads = [threading.Thread(target=add, args=(day,)) for day in days]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        text = store.read("Daily Notes.md")
        assert [s.day for s in list_sections(text, fmt)] == sorted(days, reverse=True)
