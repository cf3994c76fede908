"""
NoteTaker - Settings Store
A flat key-value settings store backed by a single JSON file.
"""
import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any

from log import note_log

# One lock per settings file, shared by every store opened on it
_file_locks: dict[Path, threading.RLock] = {}
_file_locks_guard = threading.Lock()


def lock_for(file_path: Path | str) -> threading.RLock:
    """Return the process-wide lock guarding ``file_path``."""
    key = Path(file_path).resolve()
    with _file_locks_guard:
        return _file_locks.setdefault(key, threading.RLock())


class SettingsStore:
    """Flat key-value settings backed by a JSON object on disk.

    Every write replaces the file atomically, so a reader always sees either
    the previous snapshot or the new one. Stores opened on the same file
    share ``lock``; hold it across any read-modify-write of a value.
    """

    def __init__(self, file_path: Path | str) -> None:
        self.file_path = Path(file_path)
        self.lock = lock_for(self.file_path)
        self._ensure_file_exists()

    def _ensure_file_exists(self) -> None:
        """Create the settings file with an empty object if it doesn't exist."""
        with self.lock:
            if not self.file_path.exists():
                self.file_path.parent.mkdir(parents=True, exist_ok=True)
                self._write_data({})

    def _read_data(self) -> dict:
        """Read the settings object, falling back to empty on any damage."""
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            note_log(f"Settings file {self.file_path} unreadable, using empty settings: {e}")
            return {}
        if not isinstance(data, dict):
            note_log(f"Settings file {self.file_path} is not a JSON object, using empty settings")
            return {}
        return data

    def _write_data(self, data: dict) -> None:
        """Write the settings object via a unique temp file and atomic rename."""
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=self.file_path.parent,
            prefix=f"{self.file_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            tmp_name = f.name
        try:
            os.replace(tmp_name, self.file_path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by key, returning default if not found."""
        with self.lock:
            return self._read_data().get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a key-value pair."""
        with self.lock:
            data = self._read_data()
            data[key] = value
            self._write_data(data)

    def delete(self, key: str) -> bool:
        """Delete a key. Returns True if key existed, False otherwise."""
        with self.lock:
            data = self._read_data()
            if key in data:
                del data[key]
                self._write_data(data)
                return True
            return False

    def exists(self, key: str) -> bool:
        with self.lock:
            return key in self._read_data()

    def keys(self) -> list[str]:
        with self.lock:
            return list(self._read_data().keys())

    def clear(self) -> None:
        """Remove every setting."""
        with self.lock:
            self._write_data({})

    def __contains__(self, key: str) -> bool:
        return self.exists(key)
