"""Persistent JSON config helpers.

Stores presentation preferences (style, filler glyph, banner) and the log
file location. All access is defensive: malformed or missing config falls
back to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .ansi import display_width
from .highlight import DEFAULT_STYLE
from .state import DEFAULT_FILLER, DEFAULT_WELCOME_MESSAGE

APP_NAME = "pykilo"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_nonempty_str(config: dict[str, object], key: str) -> str | None:
    value = config.get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_style_name(config: dict[str, object]) -> str:
    """Pygments style name, defaulting to ``monokai``."""
    return _load_nonempty_str(config, "style") or DEFAULT_STYLE


def load_filler(config: dict[str, object]) -> str:
    """Row marker glyph; only values exactly one cell wide are accepted."""
    value = config.get("filler")
    if isinstance(value, str) and len(value) == 1 and display_width(value) == 1:
        return value
    return DEFAULT_FILLER


def load_welcome_message(config: dict[str, object]) -> str:
    return _load_nonempty_str(config, "welcome_message") or DEFAULT_WELCOME_MESSAGE


def load_log_file(config: dict[str, object]) -> Path | None:
    value = _load_nonempty_str(config, "log_file")
    return Path(value).expanduser() if value is not None else None


def load_clear_on_exit(config: dict[str, object]) -> bool:
    """Only explicit booleans are accepted; anything else means ``False``."""
    value = config.get("clear_on_exit")
    return value if isinstance(value, bool) else False
