"""
Named color catalog.

A palette maps names to '#RRGGBB' strings. The gradient code only ever sees
the resolved RGB values, so palettes can be swapped freely. Two names may
share the same hex value.
"""

import json
from pathlib import Path
from typing import Optional, Union

from ..color import RGBColor, parse_hex
from ..core.constants import HEX_COLOR_PATTERN
from ..errors import InvalidArgument, InvalidColorFormat
from ..ui import display

ColorReference = Union[RGBColor, str]

DEFAULT_COLORS = {
    "RED": "#FF0000",
    "GREEN": "#00FF00",
    "BLUE": "#0000FF",
    "YELLOW": "#FFFF00",
    "CYAN": "#00FFFF",
    "WHITE": "#FFFFFF",
    "BLACK": "#000000",
    "GRAY": "#808080",
    "DARK_GRAY": "#404040",
    "LIGHT_GRAY": "#C0C0C0",
    "ORANGE": "#FFA500",
    "PINK": "#FFC0CB",
    "PURPLE": "#800080",
    "BROWN": "#A52A2A",
    "LIME": "#00FF00",
    "MAROON": "#800000",
    "LIGHT_BLUE": "#ADD8E6",
    "LIGHT_GREEN": "#90EE90",
    "LIGHT_YELLOW": "#FFFFE0",
    "LIGHT_PINK": "#FFB6C1",
    "LIGHT_PURPLE": "#D3D3D3",
    "SILVER": "#C0C0C0",
    "AQUA": "#00FFFF",
    "MAGENTA": "#FF00FF",
}


def normalize_name(name: str) -> str:
    """'light blue', 'Light-Blue' and 'LIGHT_BLUE' all name the same color."""
    return name.strip().upper().replace("-", "_").replace(" ", "_")


class Palette:
    """
    Manages palette.json - user-defined color names.

    File format:
        {"colors": {"SUNSET": "#FF7E5F", ...}}

    Loaded entries are merged over DEFAULT_COLORS, so a palette file only
    needs the names it adds or overrides.
    """

    def __init__(self, colors: Optional[dict[str, str]] = None, path: Optional[Path] = None):
        self.path = path
        self.colors: dict[str, str] = {}
        for name, value in (DEFAULT_COLORS if colors is None else colors).items():
            self.set_color(name, value)

    @classmethod
    def default(cls) -> "Palette":
        return cls()

    @classmethod
    def from_dict(cls, data: dict, path: Optional[Path] = None) -> "Palette":
        """Build a palette from parsed JSON, skipping malformed entries."""
        palette = cls(path=path)
        entries = data.get("colors") if isinstance(data, dict) else None
        if not isinstance(entries, dict):
            display.warning("Palette has no 'colors' mapping, using defaults")
            return palette

        for name, value in entries.items():
            try:
                palette.set_color(name, value)
            except InvalidColorFormat:
                display.warning(f"Skipping palette entry {name!r}: {value!r} is not #RRGGBB")
        return palette

    @classmethod
    def load(cls, path: Path) -> "Palette":
        """Load palette from file. A missing file yields the defaults."""
        if not path.exists():
            return cls(path=path)

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            display.warning(f"Could not load {path.name}: {e}")
            return cls(path=path)

        return cls.from_dict(data, path=path)

    def to_dict(self) -> dict:
        return {"colors": dict(self.colors)}

    def save(self):
        """Save palette to file."""
        if self.path is None:
            raise ValueError("No path set for palette")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    def set_color(self, name: str, value: str):
        """Add or replace a color. Stored as upper-case '#RRGGBB'."""
        if not isinstance(value, str) or not HEX_COLOR_PATTERN.fullmatch(value):
            raise InvalidColorFormat(f"Expected a color like '#RRGGBB', got {value!r}")
        self.colors[normalize_name(name)] = value.upper()

    def get(self, name: str) -> Optional[str]:
        """Get the hex string for a name, or None."""
        return self.colors.get(normalize_name(name))

    def names(self) -> list[str]:
        return list(self.colors)

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and normalize_name(name) in self.colors

    def __len__(self) -> int:
        return len(self.colors)

    def resolve(self, ref: ColorReference) -> RGBColor:
        """
        Turn a color reference into an RGBColor.

        Args:
            ref: An RGBColor (returned as-is), a '#RRGGBB' string, or a name
                from this palette.

        Raises:
            InvalidArgument: ref is None.
            InvalidColorFormat: malformed hex or unknown name.
        """
        if ref is None:
            raise InvalidArgument("Color reference is missing")
        if isinstance(ref, RGBColor):
            return ref
        if isinstance(ref, str) and not ref.startswith("#"):
            hex_value = self.get(ref)
            if hex_value is None:
                raise InvalidColorFormat(f"Unknown color name {ref!r}")
            return parse_hex(hex_value)
        return parse_hex(ref)
