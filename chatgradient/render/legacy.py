"""
Legacy chat color codes.

Hex colors use the '&x&R&R&G&G&B&B' form understood by Bukkit-style chat
formatters. A color code resets decorations on the client, so bold/italic
codes are written after the color.
"""

from ..color import RGBColor
from .backend import StyleBackend, StyleFlags, NO_STYLE, register_backend

BOLD_CODE = "l"
ITALIC_CODE = "o"


@register_backend
class LegacyBackend(StyleBackend):
    """Ampersand-prefixed codes, translated by the server before sending."""

    name = "legacy"
    marker = "&"

    def color_token(self, color: RGBColor) -> str:
        digits = "x" + color.to_hex()[1:].lower()
        return "".join(self.marker + d for d in digits)

    def styled_unit(self, char: str, token: str, style: StyleFlags = NO_STYLE) -> str:
        decorations = ""
        if style.bold:
            decorations += self.marker + BOLD_CODE
        if style.italic:
            decorations += self.marker + ITALIC_CODE
        return f"{token}{decorations}{char}"


@register_backend
class SectionBackend(LegacyBackend):
    """Same codes with the section sign, as sent on the wire."""

    name = "section"
    marker = "§"
