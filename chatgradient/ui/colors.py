"""
ANSI escape sequences for terminal output.
"""

import re


class Colors:
    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"
    DIM = "\x1b[2m"
    ITALIC = "\x1b[3m"
    RED = "\x1b[38;2;239;68;68m"
    YELLOW = "\x1b[38;2;250;204;21m"
    MUTED = "\x1b[38;2;148;163;184m"


def rgb(r: int, g: int, b: int) -> str:
    return f"\x1b[38;2;{r};{g};{b}m"


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return re.sub(r'\x1b\[[0-9;]*m', '', text)
