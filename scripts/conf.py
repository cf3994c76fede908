"""NoteTaker - Central path configuration."""

import os
from pathlib import Path

USER_HOME = Path.home()
NOTETAKER_HOME = Path(os.environ.get("NOTETAKER_HOME", USER_HOME / ".notetaker"))

SCRIPT_DIR = Path(__file__).parent.resolve()

SETTINGS_FILE = NOTETAKER_HOME / "settings.json"
LOG_FILE = NOTETAKER_HOME / "notetaker.log"

# Settings key holding the whole serialized note list
NOTE_LIST_KEY = "Note_Lists"
