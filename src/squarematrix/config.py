import copy
import json
from pathlib import Path

from .errors import InputConfigError
from .matrix import wrap_int

DEFAULT_COUNTS = {"swap_rows": 2, "swap_columns": 2, "update": 3}

DEFAULT_CONFIG = {
    "log_level": "WARNING",
    "defaults": {
        "swap_rows": [0, 1],
        "swap_columns": [0, 1],
        "update": [0, 0, 100],
    },
    "session_log": {
        "enabled": False,
        "directory": "logs",
    },
    "report": {
        "diagonals_for_b": False,
    },
}


def merge(base, override):
    out = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = merge(out[key], value)
        else:
            out[key] = value
    return out


def _is_int64(value):
    return type(value) is int and wrap_int(value) == value


def validate(cfg, source="config"):
    """Check the fields run_app reads; raise InputConfigError on the first bad one."""
    for key, count in DEFAULT_COUNTS.items():
        value = cfg["defaults"].get(key) if isinstance(cfg.get("defaults"), dict) else None
        if not isinstance(value, list) or len(value) != count or not all(_is_int64(v) for v in value):
            raise InputConfigError(f"{source}: defaults.{key} must be a list of {count} integers.")

    for section, key in (("session_log", "enabled"), ("report", "diagonals_for_b")):
        value = cfg[section].get(key) if isinstance(cfg.get(section), dict) else None
        if not isinstance(value, bool):
            raise InputConfigError(f"{source}: {section}.{key} must be true or false.")

    if not isinstance(cfg["session_log"].get("directory"), str):
        raise InputConfigError(f"{source}: session_log.directory must be a string.")
    if not isinstance(cfg.get("log_level"), str):
        raise InputConfigError(f"{source}: log_level must be a string.")
    return cfg


def load_config(path=None):
    if path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise InputConfigError(f"could not read config file '{path}'.") from e
    except json.JSONDecodeError as e:
        raise InputConfigError(f"config file '{path}' is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise InputConfigError(f"config file '{path}' must contain a JSON object.")
    return validate(merge(DEFAULT_CONFIG, raw), source=f"config file '{path}'")
