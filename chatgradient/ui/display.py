"""
User-facing warnings and errors.

All terminal diagnostics go through these helpers so wording and colors stay
consistent between the CLI and the palette/settings loaders.
"""

import sys

from .colors import Colors


def warning(message: str):
    """Print a non-fatal warning to stderr."""
    print(f"{Colors.YELLOW}Warning:{Colors.RESET} {message}", file=sys.stderr)


def error(message: str):
    """Print an error to stderr."""
    print(f"{Colors.RED}Error:{Colors.RESET} {message}", file=sys.stderr)


def error_palette_http(status_code: int):
    error(f"Palette server returned HTTP {status_code}")


def error_palette_timeout():
    error("Timed out fetching palette")


def error_palette_generic(message: str):
    error(f"Could not fetch palette: {message}")


def error_no_local_palette(path):
    error(f"No local palette found at {path}")
