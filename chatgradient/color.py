"""
RGB color values and hex parsing.
"""

from dataclasses import dataclass

from .core.constants import HEX_COLOR_PATTERN
from .errors import InvalidColorFormat


@dataclass(frozen=True)
class RGBColor:
    """An opaque 24-bit color. Channels are ints in [0, 255]."""
    red: int
    green: int
    blue: int

    def __post_init__(self):
        for channel in (self.red, self.green, self.blue):
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise InvalidColorFormat(f"Channel must be an int, got {channel!r}")
            if not 0 <= channel <= 255:
                raise InvalidColorFormat(f"Channel out of range 0-255: {channel}")

    def __iter__(self):
        return iter((self.red, self.green, self.blue))

    @classmethod
    def from_hex(cls, value: str) -> "RGBColor":
        return parse_hex(value)

    def to_hex(self) -> str:
        """Format as '#RRGGBB'."""
        return "#{:02X}{:02X}{:02X}".format(self.red, self.green, self.blue)


def parse_hex(value: str) -> RGBColor:
    """
    Parse a '#RRGGBB' string (case-insensitive) into an RGBColor.

    Raises:
        InvalidColorFormat: value is None, not a string, lacks the '#',
            has the wrong length or contains non-hex digits.
    """
    if value is None:
        raise InvalidColorFormat("Color is missing")
    if not isinstance(value, str) or not HEX_COLOR_PATTERN.fullmatch(value):
        raise InvalidColorFormat(f"Expected a color like '#RRGGBB', got {value!r}")
    return RGBColor(
        int(value[1:3], 16),
        int(value[3:5], 16),
        int(value[5:7], 16),
    )


def lerp_color(c1: RGBColor, c2: RGBColor, t: float) -> RGBColor:
    # int() truncates; channels stay non-negative so this floors
    return RGBColor(
        int(c1.red + (c2.red - c1.red) * t),
        int(c1.green + (c2.green - c1.green) * t),
        int(c1.blue + (c2.blue - c1.blue) * t),
    )
