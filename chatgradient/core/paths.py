"""
Filesystem locations for chatgradient.
"""

import os
from pathlib import Path


def get_app_dir() -> Path:
    """Get the directory holding user-writable files (settings, palette)."""
    override = os.environ.get("CHATGRADIENT_HOME", "")
    if override:
        return Path(override)
    return Path.home() / ".chatgradient"


def get_settings_path() -> Path:
    """Get path to user settings file."""
    return get_app_dir() / "settings.json"


def get_palette_path() -> Path:
    """Get path to local palette file."""
    return get_app_dir() / "palette.json"
