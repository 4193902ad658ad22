"""Settings file reader for focus-forest.

Reads a JSON settings file at XDG_CONFIG_HOME/focus-forest/settings.json to
seed initial settings. Nothing is ever written back: settings live for the
lifetime of the process only.
"""

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def get_config_path() -> Path:
    """Return path to settings file.

    FOCUS_FOREST_SETTINGS wins; otherwise XDG_CONFIG_HOME (default ~/.config)
    / focus-forest / settings.json.
    """
    explicit = os.environ.get("FOCUS_FOREST_SETTINGS")
    if explicit:
        return Path(explicit)
    config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "focus-forest" / "settings.json"


def load_settings() -> dict:
    """Load settings from JSON file. Returns empty dict on missing/corrupt file."""
    path = get_config_path()
    # [LAW:dataflow-not-control-flow] Always attempt read; empty dict is the "no data" value.
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (ValueError, OSError) as exc:
        # JSONDecodeError, UnicodeDecodeError
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: top level is not an object", path)
        return {}
    return data

