"""
Terminal helpers: ANSI colors and diagnostic output.
"""

from .colors import Colors, rgb, strip_ansi
from . import display

__all__ = [
    "Colors",
    "rgb",
    "strip_ansi",
    "display",
]
