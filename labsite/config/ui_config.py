"""
labsite UI Configuration.

Handles persistence of UI preferences. The only persisted preference is the
theme ("light", "dark" or "system"), stored in
~/.config/labsite/ui_config.json and read once when a session starts.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .constants import LABSITE_CONFIG_DIR

logger = logging.getLogger(__name__)

THEME_KEY = "theme"

DEFAULT_CONFIG: dict[str, Any] = {
    THEME_KEY: "system",
}


def get_ui_config_path() -> Path:
    """Location of ui_config.json, creating the config directory if needed."""
    LABSITE_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return LABSITE_CONFIG_DIR / "ui_config.json"


def load_ui_config() -> dict[str, Any]:
    """
    Read the saved preferences, filling gaps from DEFAULT_CONFIG.

    A missing, unreadable or non-object file yields the defaults.
    """
    config = dict(DEFAULT_CONFIG)
    try:
        path = get_ui_config_path()
        stored = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return config
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        logger.warning(f"Ignoring unreadable UI config: {e}")
        return config

    if isinstance(stored, dict):
        config.update(stored)
    else:
        logger.warning(f"Ignoring UI config {path}: expected a JSON object")
    return config


def save_ui_config(config: dict[str, Any]) -> None:
    """Write the preferences back; a failed write is logged and otherwise ignored."""
    try:
        path = get_ui_config_path()
        path.write_text(json.dumps(config, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    except OSError as e:
        # The preference just won't survive the session
        logger.debug(f"Could not save UI config: {e}")


def get_stored_theme() -> str | None:
    """The raw stored theme preference, or None if absent."""
    value = load_ui_config().get(THEME_KEY)
    return value if isinstance(value, str) else None


def set_stored_theme(preference: str) -> None:
    """Persist ``preference`` ("light", "dark" or "system"), keeping other keys."""
    save_ui_config({**load_ui_config(), THEME_KEY: preference})
