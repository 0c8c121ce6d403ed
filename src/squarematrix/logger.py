import csv
import time
from pathlib import Path

FIELDS = ["ts", "event", "value"]


def new_session_path(directory="logs"):
    Path(directory).mkdir(parents=True, exist_ok=True)
    stamp = time.strftime("%Y%m%d_%H%M%S")
    return Path(directory) / f"session_{stamp}.csv"


def open_session(directory="logs"):
    """Create a fresh session CSV with its header row and return its path."""
    path = new_session_path(directory)
    with path.open("w", encoding="utf-8", newline="") as f:
        csv.writer(f).writerow(FIELDS)
    return path


def log_event(path, event, value=""):
    # session logging is optional; callers pass None when it is off
    if path is None:
        return
    ts = time.strftime("%Y-%m-%d %H:%M:%S")
    with path.open("a", encoding="utf-8", newline="") as f:
        csv.writer(f).writerow([ts, event, value])


def read_events(path):
    """Load a session log back as a list of {"ts", "event", "value"} dicts."""
    with path.open("r", encoding="utf-8", newline="") as f:
        return list(csv.DictReader(f))
