"""Note record - immutable value type, no I/O."""

from __future__ import annotations

import uuid
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def new_note_id() -> str:
    """Return a fresh uppercase UUID string."""
    return str(uuid.uuid4()).upper()


def _canonical_uuid(value: str) -> str:
    try:
        return str(uuid.UUID(value)).upper()
    except ValueError:
        raise ValueError(f"Note id {value!r} is not a UUID") from None


NoteId = Annotated[str, AfterValidator(_canonical_uuid)]


class Note(BaseModel):
    """A single note.

    Instances are frozen; edits produce copies that keep the same ``id``.
    Field-wise ``==`` compares full content; use ``is_same_note`` to ask
    whether two copies refer to the same logical note. Ids are stored in
    uppercase canonical UUID form whatever form they were given in.
    """

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True)

    id: NoteId
    title: str
    content: str
    is_completed: bool = Field(alias="isCompleted")

    @classmethod
    def create(cls, title: str, content: str) -> Note:
        """Build a new, not yet completed note with a fresh id."""
        return cls(id=new_note_id(), title=title, content=content, is_completed=False)

    def toggled(self) -> Note:
        return self.model_copy(update={"is_completed": not self.is_completed})

    def with_text(self, title: str, content: str) -> Note:
        """Copy carrying new title/content; id and completion unchanged."""
        return self.model_copy(update={"title": title, "content": content})

    def is_same_note(self, other: Note) -> bool:
        return self.id == other.id


def create_note(title: str, content: str) -> Note:
    return Note.create(title, content)


def toggle_completed(note: Note) -> Note:
    """Return a copy of ``note`` with ``is_completed`` inverted."""
    return note.toggled()


def same_note(a: Note, b: Note) -> bool:
    return a.is_same_note(b)
