"""
Styling backend interface and registry.

A backend turns an RGB color into a color token and a (character, token)
pair into one styled fragment. Fragments are joined with no separator.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from ..color import RGBColor
from ..core.constants import DEFAULT_BACKEND
from ..errors import InvalidArgument


@dataclass(frozen=True)
class StyleFlags:
    """Decorations applied uniformly to every character."""
    bold: bool = False
    italic: bool = False

    def __bool__(self) -> bool:
        return self.bold or self.italic


NO_STYLE = StyleFlags()


class StyleBackend:
    """Base class for output formats."""

    name = ""

    def color_token(self, color: RGBColor) -> str:
        raise NotImplementedError

    def styled_unit(self, char: str, token: str, style: StyleFlags = NO_STYLE) -> str:
        raise NotImplementedError

    def concat(self, fragments: Iterable[str]) -> str:
        return "".join(fragments)


_BACKENDS: dict[str, type[StyleBackend]] = {}


def register_backend(cls: type[StyleBackend]) -> type[StyleBackend]:
    """Class decorator adding a backend to the registry under cls.name."""
    _BACKENDS[cls.name] = cls
    return cls


def backend_names() -> list[str]:
    return sorted(_BACKENDS)


def get_backend(backend: Optional[object] = None) -> StyleBackend:
    """
    Resolve a backend instance.

    Args:
        backend: A StyleBackend instance, a registered name, or None for the
            default chat format.

    Raises:
        InvalidArgument: unknown backend name.
    """
    if isinstance(backend, StyleBackend):
        return backend
    name = DEFAULT_BACKEND if backend is None else backend
    if name not in _BACKENDS:
        available = ", ".join(backend_names())
        raise InvalidArgument(f"Unknown format {name!r}. Available: {available}")
    return _BACKENDS[name]()
