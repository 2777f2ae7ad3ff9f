#!/usr/bin/env python3
"""
chatgradient - Color text with a two-color gradient for game chat.

Prints the text with one interpolated color per character, in the chosen
chat format. Defaults come from settings.json in the app directory.
"""

import argparse
import sys
from pathlib import Path

from chatgradient import (
    GradientError,
    Palette,
    StyleFlags,
    UserSettings,
    backend_names,
    colorize_text,
    fetch_palette,
    __version__,
)
from chatgradient.core.paths import get_palette_path, get_settings_path
from chatgradient.ui import Colors, rgb


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="chatgradient - Color text with a two-color gradient"
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to color (read from stdin when omitted)"
    )
    parser.add_argument("-s", "--start", help="Start color: name or #RRGGBB")
    parser.add_argument("-e", "--end", help="End color: name or #RRGGBB")
    parser.add_argument(
        "-f", "--format",
        choices=backend_names(),
        help="Output format"
    )
    parser.add_argument("--bold", action="store_true", default=None, help="Bold every character")
    parser.add_argument("--italic", action="store_true", default=None, help="Italicize every character")
    parser.add_argument("--palette", metavar="FILE", help="Palette JSON file with extra color names")
    parser.add_argument("--palette-url", metavar="URL", help="Fetch the palette from a URL")
    parser.add_argument(
        "--list-colors",
        action="store_true",
        help="List palette color names and exit"
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Also print an ANSI preview of the gradient"
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Remember the given colors, format and flags in settings.json"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_palette(args, settings: UserSettings) -> Palette:
    """Remote palette when a URL is given or saved, else the local palette file."""
    local_path = Path(args.palette) if args.palette else get_palette_path()
    url = args.palette_url or settings.palette_url
    if url:
        return fetch_palette(url, fallback_path=local_path)
    return Palette.load(local_path)


def print_colors(palette: Palette):
    """Print each palette entry with a color swatch."""
    width = max((len(name) for name in palette.names()), default=0)
    for name in palette.names():
        color = palette.resolve(name)
        swatch = f"{rgb(*color)}██{Colors.RESET}"
        print(f"  {swatch} {name:<{width}}  {Colors.MUTED}{color.to_hex()}{Colors.RESET}")


def main(argv=None) -> int:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = UserSettings.load(get_settings_path())
    palette = load_palette(args, settings)

    if args.list_colors:
        print_colors(palette)
        return 0

    start = args.start or settings.start
    end = args.end or settings.end
    backend = args.format or settings.backend
    style = StyleFlags(
        bold=settings.bold if args.bold is None else args.bold,
        italic=settings.italic if args.italic is None else args.italic,
    )

    text = " ".join(args.text) if args.text else sys.stdin.read().rstrip("\n")

    try:
        output = colorize_text(text, start, end, palette=palette, backend=backend, style=style)
        preview = None
        if args.preview and backend != "ansi":
            preview = colorize_text(text, start, end, palette=palette, backend="ansi", style=style)
    except GradientError as e:
        parser.error(str(e))

    if backend == "ansi":
        output += Colors.RESET
    print(output)
    if preview is not None:
        print(preview + Colors.RESET)

    if args.save_defaults:
        settings.start = start
        settings.end = end
        settings.backend = backend
        settings.bold = style.bold
        settings.italic = style.italic
        if args.palette_url:
            settings.palette_url = args.palette_url
        settings.save()
        print(f"{Colors.DIM}Saved defaults to {settings.path}{Colors.RESET}", file=sys.stderr)

    return 0


def run(argv=None) -> int:
    """Console script entry point: main() with Ctrl+C handled."""
    try:
        return main(argv)
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        return 0


if __name__ == "__main__":
    sys.exit(run())
