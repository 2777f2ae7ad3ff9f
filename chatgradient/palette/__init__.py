"""
Named color catalogs.

Palettes map names like 'LIGHT_BLUE' to hex strings and resolve color
references for the gradient code.
"""

from .palette import Palette, ColorReference, DEFAULT_COLORS, normalize_name
from .fetch import fetch_palette

__all__ = [
    "Palette",
    "ColorReference",
    "DEFAULT_COLORS",
    "normalize_name",
    "fetch_palette",
]
