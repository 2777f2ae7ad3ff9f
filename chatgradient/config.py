"""
Configuration management for chatgradient.

Config file:
- settings.json: defaults for the command line (endpoint colors, output
  format, decorations, remote palette URL)
"""

import json
from pathlib import Path

from .core.constants import DEFAULT_BACKEND, DEFAULT_END, DEFAULT_START
from .render import StyleFlags
from .ui import display


def _json_bool(value, default: bool) -> bool:
    """Only real JSON booleans count; "false" or 0 keep the default."""
    return value if isinstance(value, bool) else default


class UserSettings:
    """
    Manages settings.json - user preferences that persist across runs.

    A missing or unreadable file yields the built-in defaults.
    """

    def __init__(self, path: Path):
        self.path = path
        self.start: str = DEFAULT_START
        self.end: str = DEFAULT_END
        self.backend: str = DEFAULT_BACKEND
        self.bold: bool = False
        self.italic: bool = False
        # Remote palette fetched on every run when set
        self.palette_url: str = ""
        self._is_new: bool = False

    @classmethod
    def load(cls, path: Path) -> "UserSettings":
        """Load user settings from file."""
        settings = cls(path)

        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    data = json.load(f)

                settings.start = data.get("start", DEFAULT_START)
                settings.end = data.get("end", DEFAULT_END)
                settings.backend = data.get("backend", DEFAULT_BACKEND)
                settings.bold = _json_bool(data.get("bold"), False)
                settings.italic = _json_bool(data.get("italic"), False)
                settings.palette_url = data.get("palette_url", "")
            except (json.JSONDecodeError, IOError, AttributeError) as e:
                display.warning(f"Could not load {path.name}: {e}")
                settings = cls(path)
                settings._is_new = True
        else:
            settings._is_new = True

        return settings

    @property
    def is_new(self) -> bool:
        return self._is_new

    @property
    def style(self) -> StyleFlags:
        return StyleFlags(bold=self.bold, italic=self.italic)

    def to_dict(self) -> dict:
        data = {
            "start": self.start,
            "end": self.end,
            "backend": self.backend,
            "bold": self.bold,
            "italic": self.italic,
        }
        if self.palette_url:
            data["palette_url"] = self.palette_url
        return data

    def save(self):
        """Save user settings to file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        self._is_new = False
