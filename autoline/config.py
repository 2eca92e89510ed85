"""Configuration management — JSON-based, stored in ~/.config/autoline/."""
import json
from pathlib import Path

CONFIG_DIR = Path.home() / ".config" / "autoline"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_CONFIG = {
    "dictionary_path": None,  # whitespace-separated word list; None = builtin
    "builtin_language": "en",
    "builtin_size": 10000,
    "poll_timeout_ms": 500,
    "show_status": True,
    "debug_logging": False,
    "log_file": str(CONFIG_DIR / "autoline.log"),
}


class Config:
    def __init__(self, path=None):
        self.path = Path(path) if path else CONFIG_FILE
        self._data = dict(DEFAULT_CONFIG)
        self.load()

    def load(self):
        if self.path.exists():
            try:
                with open(self.path, "r") as f:
                    stored = json.load(f)
                if isinstance(stored, dict):
                    self._data.update(stored)
            except (json.JSONDecodeError, IOError):
                pass

    def save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value
        self.save()

    @property
    def dictionary_path(self):
        return self._data.get("dictionary_path")

    @property
    def builtin_language(self):
        return self._data["builtin_language"]

    @property
    def builtin_size(self):
        return int(self._data["builtin_size"])

    @property
    def poll_timeout_ms(self):
        return int(self._data["poll_timeout_ms"])

    @property
    def show_status(self):
        return bool(self._data["show_status"])

    @property
    def debug_logging(self):
        return self._data["debug_logging"]

    @property
    def log_file(self):
        return self._data.get("log_file")
