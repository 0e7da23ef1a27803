"""User settings for the editor.

Settings are read from a JSON file in the OS-appropriate config
directory. A missing file means defaults; bad values are logged and
replaced by their defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditorSettings:
    tab_width: int = EditorConstants.DEFAULT_TAB_WIDTH
    strict_redraw: bool = False
    log_level: str = EditorConstants.DEFAULT_LOG_LEVEL


def validate_setting(key: str, value: Any) -> bool:
    """Validate a setting value.

    Args:
        key: Setting key name.
        value: Setting value to validate.

    Returns:
        True if setting is valid, False otherwise.
    """
    if key == 'tab_width':
        # bool is an int subclass; reject it explicitly
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        return EditorConstants.MIN_TAB_WIDTH <= value <= EditorConstants.MAX_TAB_WIDTH
    if key == 'strict_redraw':
        return isinstance(value, bool)
    if key == 'log_level':
        return isinstance(value, str) and value.upper() in EditorConstants.LOG_LEVELS
    return False


class SettingsStore:
    """Loads EditorSettings from the user's config directory."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = config_dir or Path(platformdirs.user_config_dir(EditorConstants.APP_NAME))
        self._settings_file = self._config_dir / EditorConstants.SETTINGS_FILENAME

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _read_raw(self) -> Dict[str, Any]:
        if not self._settings_file.exists():
            return {}
        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return {}
        return data

    def load(self) -> EditorSettings:
        """Return the stored settings merged over the defaults."""
        raw = self._read_raw()
        known = {f.name for f in fields(EditorSettings)}
        values: Dict[str, Any] = {}
        for key, value in raw.items():
            if key not in known:
                logger.warning(f"Ignoring unknown setting {key!r}")
                continue
            if not validate_setting(key, value):
                logger.warning(f"Ignoring invalid value {value!r} for setting {key!r}")
                continue
            values[key] = value.upper() if key == 'log_level' else value
        return EditorSettings(**values)
