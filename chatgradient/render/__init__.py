"""
Output formats for gradient text.

Importing this package registers every built-in backend.
"""

from .backend import (
    StyleFlags,
    NO_STYLE,
    StyleBackend,
    register_backend,
    backend_names,
    get_backend,
)
from .legacy import LegacyBackend, SectionBackend
from .minimessage import MiniMessageBackend
from .ansi import AnsiBackend

__all__ = [
    "StyleFlags",
    "NO_STYLE",
    "StyleBackend",
    "register_backend",
    "backend_names",
    "get_backend",
    "LegacyBackend",
    "SectionBackend",
    "MiniMessageBackend",
    "AnsiBackend",
]
