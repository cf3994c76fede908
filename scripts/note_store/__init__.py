"""Note data model and its settings-backed persistence."""

from .note import Note, create_note, same_note, toggle_completed
from .note_list import EMPTY_RAW_VALUE, NoteList
from .note_settings import NoteSettings, note_settings
