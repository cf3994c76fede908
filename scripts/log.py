"""
NoteTaker - Logging Module
Timestamped log lines for the note store, written to LOG_FILE and stderr.
"""
import os
import sys
import threading
from datetime import datetime

from conf import LOG_FILE, SCRIPT_DIR

# =============================================================================
# CONFIGURATION
# =============================================================================

LOG = os.environ.get("NOTETAKER_LOG", "1") != "0"  # NOTETAKER_LOG=0 silences logging
LOG_TO_STDERR = True
first_line = True

# Adapters log from several threads; lines must not interleave
_log_lock = threading.Lock()

# =============================================================================
# LOGGING
# =============================================================================

def _format_line(message: str) -> str:
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    return f"[{timestamp}] {message}\n"


def note_log(message: str) -> None:
    """Append a timestamped line to notetaker.log if LOG is enabled.

    The first call of a process prefixes a session banner.
    """
    global first_line
    if not LOG:
        return
    with _log_lock:
        lines = []
        if first_line:
            first_line = False
            LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
            lines.append(_format_line(f"--- New NoteTaker Session (pid {os.getpid()}) ---"))
            lines.append(_format_line(f"Modules loaded from: {SCRIPT_DIR}"))
        lines.append(_format_line(message))
        text = "".join(lines)
        if LOG_TO_STDERR:
            sys.stderr.write(text)
        with open(LOG_FILE, "a", encoding="utf-8") as f:
            f.write(text)


def note_log_print() -> None:
    """Print the contents of the log file to stdout."""
    if not LOG_FILE.exists():
        print("[NoteTaker Log file does not exist]")
        return
    log_contents = LOG_FILE.read_text(encoding="utf-8")
    print(log_contents or "[NoteTaker Log is empty]", end="" if log_contents else "\n")


def note_log_clear() -> None:
    """Delete the log file."""
    LOG_FILE.unlink(missing_ok=True)
