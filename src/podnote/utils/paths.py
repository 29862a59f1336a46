"""Filesystem locations used by Podnote."""

import os
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "podnote"


def get_config_dir() -> Path:
    """Get the configuration directory.

    Honors ``XDG_CONFIG_HOME`` when set so tests and power users can relocate
    it; otherwise falls back to the platform default.
    """
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path(user_config_dir(APP_NAME))


def get_config_file() -> Path:
    """Get path to config.yaml."""
    return get_config_dir() / "config.yaml"
