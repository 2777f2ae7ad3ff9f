"""
Truecolor ANSI output for previewing gradients in a terminal.
"""

from ..color import RGBColor
from ..ui.colors import Colors, rgb
from .backend import StyleBackend, StyleFlags, NO_STYLE, register_backend


@register_backend
class AnsiBackend(StyleBackend):
    """24-bit foreground escapes. No reset is appended; callers add Colors.RESET."""

    name = "ansi"

    def color_token(self, color: RGBColor) -> str:
        r, g, b = color
        return rgb(r, g, b)

    def styled_unit(self, char: str, token: str, style: StyleFlags = NO_STYLE) -> str:
        decorations = ""
        if style.bold:
            decorations += Colors.BOLD
        if style.italic:
            decorations += Colors.ITALIC
        return f"{token}{decorations}{char}"
