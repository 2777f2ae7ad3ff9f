"""
chatgradient - Stamp text with a two-color RGB gradient for game chat.

Each character gets its own color, linearly interpolated from a start color
to an end color, rendered as legacy chat codes, MiniMessage tags or ANSI
escapes.

    from chatgradient import colorize_text
    colorize_text("Hello", "RED", "#0000FF")
"""

from .errors import GradientError, InvalidColorFormat, InvalidArgument
from .color import RGBColor, parse_hex, lerp_color
from .render import StyleFlags, StyleBackend, get_backend, backend_names
from .palette import Palette, DEFAULT_COLORS, fetch_palette
from .gradient import (
    ColorStep,
    gradient_steps,
    generate_gradient,
    apply_gradient,
    colorize_text,
)
from .config import UserSettings


def _get_version():
    """Read version from VERSION file."""
    from pathlib import Path
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "0.0.0"


__version__ = _get_version()

__all__ = [
    "GradientError",
    "InvalidColorFormat",
    "InvalidArgument",
    "RGBColor",
    "parse_hex",
    "lerp_color",
    "StyleFlags",
    "StyleBackend",
    "get_backend",
    "backend_names",
    "Palette",
    "DEFAULT_COLORS",
    "fetch_palette",
    "ColorStep",
    "gradient_steps",
    "generate_gradient",
    "apply_gradient",
    "colorize_text",
    "UserSettings",
]
