"""
Settings manager for the image converter
Handles saving and loading user preferences
"""

import json
import os
from pathlib import Path
from typing import Any

from .constants import DEBUG_BASENAME


class SettingsManager:
    """Manages converter settings with persistence"""

    def __init__(self, app_name="spacesim_imageconvert"):
        self.app_name = app_name
        self.settings_file = self._get_settings_path()
        self.settings = self._load_settings()

    def _get_settings_path(self) -> Path:
        """Get the appropriate settings directory for the platform"""
        if os.name == "nt":  # Windows
            base = Path(os.environ.get("APPDATA", os.path.expanduser("~")))
            settings_dir = base / self.app_name
        else:  # Linux/Mac
            base = Path(os.path.expanduser("~"))
            settings_dir = base / f".{self.app_name}"

        settings_dir.mkdir(parents=True, exist_ok=True)
        return settings_dir / "settings.json"

    def _load_settings(self) -> dict[str, Any]:
        """Load settings from file"""
        if self.settings_file.exists():
            try:
                with open(self.settings_file) as f:
                    loaded = json.load(f)
            except (OSError, json.JSONDecodeError):
                # If file is corrupted, start fresh
                return self._get_default_settings()
            if isinstance(loaded, dict):
                settings = self._get_default_settings()
                settings.update(loaded)
                return settings
        return self._get_default_settings()

    def _get_default_settings(self) -> dict[str, Any]:
        """Get default settings"""
        return {
            "output_dir": "",
            "log_level": "INFO",
            "debug_basename": DEBUG_BASENAME,
        }

    def save_settings(self):
        """Save current settings to file"""
        try:
            with open(self.settings_file, "w") as f:
                json.dump(self.settings, f, indent=2)
        except OSError:
            # Fail silently if we can't save settings
            pass

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value, nested keys separated by dots"""
        keys = key.split(".")
        value = self.settings
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any):
        """Set a setting value"""
        keys = key.split(".")
        target = self.settings
        for k in keys[:-1]:
            if k not in target:
                target[k] = {}
            target = target[k]
        target[keys[-1]] = value
        self.save_settings()


# Singleton instance
_settings_instance = None


def get_settings() -> SettingsManager:
    """Get the singleton settings instance"""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = SettingsManager()
    return _settings_instance
