"""Configuration loading, saving and logging setup."""

from podnote.config.manager import ConfigManager
from podnote.config.schema import PodnoteConfig

__all__ = ["ConfigManager", "PodnoteConfig"]
