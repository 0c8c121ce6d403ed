import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from src.squarematrix.logger import open_session, log_event, read_events

def test_session_log_roundtrip(tmp_path):
    path = open_session(tmp_path / "logs")
    assert path.parent == tmp_path / "logs"
    assert path.name.startswith("session_") and path.suffix == ".csv"
    assert path.read_text(encoding="utf-8").splitlines()[0] == "ts,event,value"

    log_event(path, "swap_rows", "0 1")
    log_event(path, "add_error", "sizes, mismatched")
    events = read_events(path)
    assert [e["event"] for e in events] == ["swap_rows", "add_error"]
    assert events[1]["value"] == "sizes, mismatched"

def test_log_event_without_session_is_noop():
    log_event(None, "anything", "x")
