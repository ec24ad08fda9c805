"""Persistent storage settings.

The settings file records which storage backend ``docforge`` saves through
by default and where that backend writes. It lives in an OS-appropriate
config directory and survives application restarts.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: Dict[str, Any] = {
    "backend": EditorConstants.DEFAULT_BACKEND,
    "target": None,
}


class SettingsPersistence:
    """Loads and saves the storage settings file.

    Settings are cached after the first load. Problems reading the file are
    logged and the defaults are used instead.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = Path(
            config_dir or platformdirs.user_config_dir(EditorConstants.APP_NAME)
        )
        self._settings_file = self._config_dir / EditorConstants.SETTINGS_FILENAME
        self._settings_cache: Optional[Dict[str, Any]] = None

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def load_settings(self) -> Dict[str, Any]:
        """Load settings, falling back to defaults for anything missing or invalid.

        Returns:
            A fresh dictionary with every key in ``DEFAULT_SETTINGS``.
        """
        if self._settings_cache is None:
            self._settings_cache = self._read_file()
        return self._settings_cache.copy()

    def _read_file(self) -> Dict[str, Any]:
        settings = dict(DEFAULT_SETTINGS)
        if not self._settings_file.exists():
            return settings

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            return settings

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return settings

        for key, value in data.items():
            if self.validate_setting(key, value):
                settings[key] = value
            else:
                logger.warning(f"Ignoring invalid setting {key}={value!r}")
        return settings

    def save_settings(self, settings: Dict[str, Any]) -> bool:
        """Save settings to disk atomically.

        Returns:
            True if save was successful, False otherwise.
        """
        for key, value in settings.items():
            if not self.validate_setting(key, value):
                logger.warning(f"Refusing to save invalid setting {key}={value!r}")
                return False

        temp_file = self._settings_file.with_suffix(EditorConstants.ATOMIC_SAVE_SUFFIX)
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            temp_file.replace(self._settings_file)
        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                temp_file.unlink(missing_ok=True)
            except OSError:
                logger.warning(f"Could not remove temporary file {temp_file}")
            return False

        merged = dict(DEFAULT_SETTINGS)
        merged.update(settings)
        self._settings_cache = merged
        return True

    def validate_setting(self, key: str, value: Any) -> bool:
        """Validate a setting value.

        Unknown keys are accepted so newer settings files still load.
        """
        if key == "backend":
            return value in EditorConstants.BACKENDS
        if key == "target":
            return value is None or (isinstance(value, str) and value != "")
        return True

    def clear_cache(self) -> None:
        """Clear the in-memory cache of settings."""
        self._settings_cache = None


_persistence: Optional[SettingsPersistence] = None


def get_persistence() -> SettingsPersistence:
    """Get the process-wide settings persistence instance."""
    global _persistence
    if _persistence is None:
        _persistence = SettingsPersistence()
    return _persistence
