"""
Core helpers shared across chatgradient: constants and file locations.
"""

from .constants import (
    HEX_COLOR_PATTERN,
    DEFAULT_START,
    DEFAULT_END,
    DEFAULT_BACKEND,
    PALETTE_TIMEOUT,
)
from .paths import get_app_dir, get_settings_path, get_palette_path

__all__ = [
    "HEX_COLOR_PATTERN",
    "DEFAULT_START",
    "DEFAULT_END",
    "DEFAULT_BACKEND",
    "PALETTE_TIMEOUT",
    "get_app_dir",
    "get_settings_path",
    "get_palette_path",
]
