"""
Motus persistent configuration.

Loads/saves settings from ~/.motus/config.json (or $MOTUS_CONFIG).
Values act as defaults for the command line; explicit flags win.
"""

import copy
import json
import os
from pathlib import Path
from typing import Any, Optional

from motus.core.log import get_logger

logger = get_logger('config')


DEFAULTS = {
    "memorable": {
        "words": 5,
        "separator": "none",
        "capitalize": False,
        "full_words": True,
    },
    "random": {
        "characters": 20,
        "numbers": False,
        "symbols": False,
    },
    "pin": {
        "numbers": 7,
    },
    "output": {
        "format": "text",
        "clipboard": True,
        "analyze": False,
    },
}

CONFIG_DIR = Path.home() / ".motus"
CONFIG_FILE = CONFIG_DIR / "config.json"
CONFIG_ENV = "MOTUS_CONFIG"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge override into base, returning a new dict."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def default_config_path() -> Path:
    """Config file location, honoring $MOTUS_CONFIG."""
    env_path = os.environ.get(CONFIG_ENV)
    return Path(env_path).expanduser() if env_path else CONFIG_FILE


class Config:
    """Persistent configuration with deep-merge defaults."""

    def __init__(self, config_file: Optional[Path] = None):
        self._file = Path(config_file) if config_file else default_config_path()
        self._data = self._load()

    @property
    def path(self) -> Path:
        return self._file

    def _load(self) -> dict:
        """Load config from file, deep-merged with defaults."""
        if self._file.exists():
            try:
                with open(self._file, 'r') as f:
                    user_data = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Ignoring unreadable config %s: %s", self._file, e)
            else:
                if isinstance(user_data, dict):
                    return _deep_merge(DEFAULTS, user_data)
                logger.warning("Ignoring config %s: top level is not an object", self._file)
        return copy.deepcopy(DEFAULTS)

    def get(self, section: str, key: str) -> Any:
        """Get a config value."""
        return self._data.get(section, {}).get(key)

    def set(self, section: str, key: str, value: Any) -> None:
        """Set a config value."""
        if section not in self._data:
            self._data[section] = {}
        self._data[section][key] = value

    def save(self) -> None:
        """Save config to file."""
        self._file.parent.mkdir(parents=True, exist_ok=True)
        with open(self._file, 'w') as f:
            json.dump(self._data, f, indent=2)
