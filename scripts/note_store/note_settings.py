"""NoteSettings - load-on-start / save-on-mutate persistence for the note list.

The whole list lives under one settings key as a single string. Every
mutation reads it, decodes it, applies the change to a new ``NoteList`` and
writes the full snapshot back; there is no per-note key.

Usage::

    from note_store import note_settings

    note = note_settings.add_note("Groceries", "Milk, eggs")
    note_settings.toggle_completion(note.id)
    note_settings.delete_notes({0})
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from log import note_log
from settings_store import SettingsStore

from .note import Note, toggle_completed
from .note_list import NoteList


class NoteSettings:
    """Owns the stored note list; collaborators only ever get copies.

    Mutations hold the settings file lock (``SettingsStore.lock``) across the
    whole read-modify-write, so every adapter on the same file is serialized.
    """

    def __init__(
        self,
        settings_path: Path | None = None,
        key: str | None = None,
        store: SettingsStore | None = None,
    ):
        self._settings_path = settings_path
        self._key = key
        self._store = store

    # -- Wiring --

    @property
    def key(self) -> str:
        if self._key is not None:
            return self._key
        from conf import NOTE_LIST_KEY
        return NOTE_LIST_KEY

    @property
    def store(self) -> SettingsStore:
        if self._store is None:
            path = self._settings_path
            if path is None:
                from conf import SETTINGS_FILE
                path = SETTINGS_FILE
            self._store = SettingsStore(path)
        return self._store

    # -- Load / save --

    def load(self) -> NoteList:
        """Read the current list; empty when absent or unreadable."""
        with self.store.lock:
            return NoteList.from_raw_value(self.store.get(self.key))

    def save(self, note_list: NoteList) -> None:
        """Replace the stored list with ``note_list``."""
        if not isinstance(note_list, NoteList):
            raise TypeError(f"Expected NoteList, got {type(note_list).__name__}")
        with self.store.lock:
            self.store.set(self.key, note_list.raw_value)

    def reset(self) -> None:
        """Drop the stored value so the next load starts empty."""
        with self.store.lock:
            self.store.delete(self.key)
        note_log(f"Note list '{self.key}' reset")

    # -- Reads --

    @property
    def notes(self) -> list[Note]:
        return list(self.load().items)

    def get_note(self, note_id: str) -> Note | None:
        return self.load().find(note_id)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)

    def __len__(self) -> int:
        return len(self.load())

    # -- Mutations --

    def add_note(self, title: str, content: str) -> Note:
        """Append a new note and persist. Title validation is the caller's job."""
        note = Note.create(title, content)
        with self.store.lock:
            self.save(self.load().appended(note))
        note_log(f"Note added: {note.id}")
        return note

    def delete_notes(self, positions: Iterable[int]) -> None:
        """Remove the notes at the given display positions and persist."""
        positions = set(positions)
        with self.store.lock:
            current = self.load()
            ignored = sorted(p for p in positions if not 0 <= p < len(current))
            if ignored:
                note_log(f"Ignoring out-of-range note positions: {ignored}")
            self.save(current.without_positions(positions))
        note_log(f"Notes deleted at positions {sorted(positions - set(ignored))}")

    def update_note(self, note_id: str, title: str, content: str) -> Note | None:
        """Replace title/content of the matching note. Returns None if absent."""
        with self.store.lock:
            current = self.load()
            existing = current.find(note_id)
            if existing is None:
                note_log(f"Update skipped, no note {note_id}")
                return None
            updated = existing.with_text(title, content)
            self.save(current.replaced(updated))
        note_log(f"Note updated: {note_id}")
        return updated

    def toggle_completion(self, note_id: str) -> Note | None:
        """Flip completion of the matching note. Returns None if absent."""
        with self.store.lock:
            current = self.load()
            existing = current.find(note_id)
            if existing is None:
                note_log(f"Toggle skipped, no note {note_id}")
                return None
            toggled = toggle_completed(existing)
            self.save(current.replaced(toggled))
        note_log(f"Note {note_id} completed={toggled.is_completed}")
        return toggled


note_settings = NoteSettings()
