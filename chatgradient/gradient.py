"""
Linear RGB gradients stamped onto text, one color per character.

Characters are Python code points, so the gradient length is len(text).
Interpolated channels are truncated with int(), not rounded.
"""

from dataclasses import dataclass
from typing import Optional

from .color import RGBColor, lerp_color
from .errors import InvalidArgument
from .palette import Palette, ColorReference
from .render import StyleBackend, StyleFlags, NO_STYLE, get_backend


@dataclass(frozen=True)
class ColorStep:
    """The color assigned to the character at index."""
    index: int
    color: RGBColor


def gradient_steps(start: RGBColor, end: RGBColor, steps: int) -> list[ColorStep]:
    """
    Build `steps` indexed colors going from start to end.

    A single step gets the start color. The last of several steps is exactly end.
    """
    for endpoint in (start, end):
        if not isinstance(endpoint, RGBColor):
            raise InvalidArgument(f"Gradient endpoints must be RGBColor, got {endpoint!r}")
    if steps < 0:
        raise InvalidArgument(f"steps must be >= 0, got {steps}")
    if steps == 1:
        return [ColorStep(0, start)]
    return [
        ColorStep(i, lerp_color(start, end, i / (steps - 1)))
        for i in range(steps)
    ]


def generate_gradient(start: RGBColor, end: RGBColor, steps: int) -> list[RGBColor]:
    """Colors only, in order. See gradient_steps()."""
    return [step.color for step in gradient_steps(start, end, steps)]


def apply_gradient(
    text: str,
    start: RGBColor,
    end: RGBColor,
    backend: Optional[StyleBackend] = None,
    style: StyleFlags = NO_STYLE,
) -> str:
    """
    Color each character of text with its gradient step and join the fragments.

    Args:
        text: Text to color (empty text gives "")
        start: Color of the first character
        end: Color of the last character
        backend: Output format; defaults to legacy chat codes
        style: Bold/italic applied to every character

    Returns:
        Concatenated fragments, no separators and no trailing reset
    """
    if text is None:
        raise InvalidArgument("Text is missing")
    backend = get_backend(backend)
    style = style or NO_STYLE

    fragments = []
    for step in gradient_steps(start, end, len(text)):
        token = backend.color_token(step.color)
        fragments.append(backend.styled_unit(text[step.index], token, style))
    return backend.concat(fragments)


def colorize_text(
    text: str,
    start: ColorReference,
    end: ColorReference,
    *,
    palette: Optional[Palette] = None,
    backend=None,
    style: Optional[StyleFlags] = None,
) -> str:
    """
    Render text as a start-to-end gradient.

    Args:
        text: Text to color
        start: RGBColor, '#RRGGBB' string, or palette color name
        end: RGBColor, '#RRGGBB' string, or palette color name
        palette: Catalog used for color names (default catalog if None)
        backend: StyleBackend instance or registered name ('legacy',
            'section', 'minimessage', 'ansi')
        style: Optional bold/italic flags, applied to every character

    Raises:
        InvalidArgument: text or a color reference is None, or unknown backend
        InvalidColorFormat: a color reference is malformed or unknown
    """
    if text is None:
        raise InvalidArgument("Text is missing")
    palette = palette if palette is not None else Palette.default()

    # Resolve everything up front so a bad input never yields partial output
    start_color = palette.resolve(start)
    end_color = palette.resolve(end)
    resolved_backend = get_backend(backend)

    return apply_gradient(text, start_color, end_color, resolved_backend, style or NO_STYLE)
