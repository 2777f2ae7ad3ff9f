"""
Shared constants for chatgradient.
"""

import re

# Hex color in #RRGGBB form (case-insensitive, '#' required)
HEX_COLOR_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")

# Endpoint colors used when neither the command line nor settings name one
DEFAULT_START = "RED"
DEFAULT_END = "BLUE"

# Chat format used when no backend is requested
DEFAULT_BACKEND = "legacy"

# Seconds to wait for a remote palette
PALETTE_TIMEOUT = 10
