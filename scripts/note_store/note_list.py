"""Ordered note collection and its single-string settings encoding."""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict, ValidationError

from log import note_log

from .note import Note

# Value an absent settings key stands for
EMPTY_RAW_VALUE = '{"items": []}'


class NoteList(BaseModel):
    """Ordered, immutable list of notes; insertion order is display order.

    ``items`` is a tuple, so copies (``model_copy``, ``copy.copy``) cannot
    alias mutable state; every helper returns a new ``NoteList``.

    Stored form (``raw_value``)::

        {"items": [{"id": ..., "title": ..., "content": ..., "isCompleted": ...}]}
    """

    model_config = ConfigDict(frozen=True, strict=True)

    items: tuple[Note, ...] = ()

    # -- Encoding --

    @property
    def raw_value(self) -> str:
        """Encode the whole list as one JSON string."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_raw_value(cls, raw: str | bytes | None) -> NoteList:
        """Decode a stored value. Anything unreadable yields an empty list."""
        if raw is None:
            return cls()
        if not isinstance(raw, (str, bytes)):
            note_log(f"Stored note list has type {type(raw).__name__}, starting empty")
            return cls()
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            note_log(f"Stored note list unreadable, starting empty: {e.error_count()} error(s)")
            return cls()

    # -- Lookup --

    def find(self, note_id: str) -> Note | None:
        for note in self.items:
            if note.id == note_id:
                return note
        return None

    def ids(self) -> list[str]:
        return [note.id for note in self.items]

    # -- Pure updates --

    def appended(self, note: Note) -> NoteList:
        """Return a list with ``note`` added at the end."""
        if self.find(note.id) is not None:
            raise ValueError(f"Note with id {note.id!r} already exists")
        return NoteList(items=(*self.items, note))

    def without_positions(self, positions: Iterable[int]) -> NoteList:
        """Return a list without the notes at the given 0-based positions.

        Positions refer to the current order; out-of-range ones are ignored.
        """
        drop = {p for p in positions if 0 <= p < len(self.items)}
        return NoteList(items=tuple(n for i, n in enumerate(self.items) if i not in drop))

    def replaced(self, note: Note) -> NoteList:
        """Return a list where the entry sharing ``note.id`` is swapped for ``note``."""
        return NoteList(items=tuple(note if n.is_same_note(note) else n for n in self.items))

    # -- Collection access --

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Note:
        return self.items[index]
