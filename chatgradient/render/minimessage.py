"""
MiniMessage tag output.
"""

from ..color import RGBColor
from .backend import StyleBackend, StyleFlags, NO_STYLE, register_backend


@register_backend
class MiniMessageBackend(StyleBackend):
    """Each character wrapped in its own closed color tag."""

    name = "minimessage"

    def color_token(self, color: RGBColor) -> str:
        return color.to_hex().lower()

    def styled_unit(self, char: str, token: str, style: StyleFlags = NO_STYLE) -> str:
        inner = escape(char)
        if style.italic:
            inner = f"<i>{inner}</i>"
        if style.bold:
            inner = f"<b>{inner}</b>"
        return f"<{token}>{inner}</{token}>"


def escape(char: str) -> str:
    """Escape characters MiniMessage would read as tag syntax."""
    if char in ("<", "\\"):
        return "\\" + char
    return char
