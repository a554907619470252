"""Settings storage layer."""

from .settings import SettingsManager, AppSettings

__all__ = ["SettingsManager", "AppSettings"]
