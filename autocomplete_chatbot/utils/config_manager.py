# config_manager.py - JSON config manager

import json
import os

from .logger_utils import DEFAULT_LOG_PATH, LEVELS

DEFAULTS = {
    "max_suggestions": 5,      # suggestions shown per query
    "log_path": DEFAULT_LOG_PATH,
    "log_level": "INFO",       # DEBUG, INFO, WARNING or ERROR
    "echo_log": False,         # mirror log lines to stdout
    "seed_path": "",           # optional JSON vocabulary instead of the built-in one
}

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


class Config:
    def __init__(self, path="config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        # set when the file exists but can't be read; caller decides how to report it
        self.load_error = None
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self.load_error = f"could not read {self.path}: {e}"
            return
        if not isinstance(raw, dict):
            self.load_error = f"{self.path} must hold a JSON object"
            return
        problems = []
        for k, v in raw.items():
            if k not in self.data:
                continue
            try:
                self.data[k] = _convert(k, v)
            except (TypeError, ValueError) as e:
                # keep the default for this key only
                problems.append(f"{k}: {e}")
        if problems:
            self.load_error = f"bad values in {self.path}: " + "; ".join(problems)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        self.data[key] = _convert(key, val)
        self.save()


def _convert(key, val):
    val = _coerce(DEFAULTS[key], val)
    if key == "log_level":
        val = val.upper()
        if val not in LEVELS:
            raise ValueError(f"unknown log level: {val}")
    return val


def _coerce(default, val):
    """Convert `val` to the type of the option's default."""
    if isinstance(default, bool):
        if isinstance(val, bool):
            return val
        s = str(val).strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
        raise ValueError(f"expected a boolean, got {val!r}")
    if isinstance(default, int):
        # bool is an int subclass and floats would truncate silently
        if isinstance(val, (bool, float)):
            raise ValueError(f"expected an integer, got {val!r}")
        n = int(val)
        if n < 1:
            raise ValueError(f"expected a positive integer, got {val!r}")
        return n
    if val is None or isinstance(val, (dict, list)):
        raise TypeError(f"expected a string, got {type(val).__name__}")
    return type(default)(val)
