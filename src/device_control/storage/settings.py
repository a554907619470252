"""Application settings."""

import json
import os
from pathlib import Path
from dataclasses import dataclass, fields
from typing import Optional
import logging

logger = logging.getLogger(__name__)


@dataclass
class AppSettings:
    """Application settings with defaults."""

    # Appearance
    theme: str = "dark"  # "dark", "light", or "system"
    language: str = "en"

    # Logging
    log_level: str = "INFO"

    # Window
    window_width: int = 520
    window_height: int = 640


def _check_types(settings: AppSettings) -> None:
    """Raise TypeError if a loaded value differs in type from its default."""
    defaults = AppSettings()
    for setting in fields(AppSettings):
        value = getattr(settings, setting.name)
        expected = type(getattr(defaults, setting.name))
        # bool is an int subclass but never a valid size
        if (isinstance(value, bool) and expected is not bool) or not isinstance(value, expected):
            raise TypeError(
                f"{setting.name} must be {expected.__name__}, got {type(value).__name__}"
            )


class SettingsManager:
    """Reads application settings from the user's config directory.

    Device state is never written here; only the settings file is read.
    """

    def __init__(self, app_name: str = "DeviceControl", settings_dir: Optional[Path] = None):
        """Initialize the settings manager.

        Args:
            app_name: Name of the application (used for config directory)
            settings_dir: Explicit settings directory, overriding the platform default
        """
        self._app_name = app_name
        self._settings_dir = Path(settings_dir) if settings_dir else self._get_settings_dir()
        self._settings_file = self._settings_dir / "settings.json"
        self._settings: Optional[AppSettings] = None

    def _get_settings_dir(self) -> Path:
        """Get the appropriate settings directory for the platform."""
        if os.name == "nt":  # Windows
            base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        else:  # Linux/Mac
            base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))

        return base / self._app_name

    def load(self) -> AppSettings:
        """Load settings from disk or return defaults.

        Returns:
            The loaded or default settings
        """
        if self._settings is not None:
            return self._settings

        if self._settings_file.exists():
            try:
                with open(self._settings_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
                    self._settings = AppSettings(**data)
                    _check_types(self._settings)
                    logger.info(f"Settings loaded from {self._settings_file}")
            except (json.JSONDecodeError, TypeError, OSError) as e:
                logger.warning(f"Failed to load settings, using defaults: {e}")
                self._settings = AppSettings()
        else:
            self._settings = AppSettings()
            logger.debug("No settings file found, using defaults")

        return self._settings

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    @property
    def settings_dir(self) -> Path:
        """Get the settings directory path."""
        return self._settings_dir
