"""
Exceptions raised by chatgradient.
"""


class GradientError(Exception):
    """Base class for chatgradient errors."""


class InvalidColorFormat(GradientError, ValueError):
    """A color reference could not be turned into an RGB color."""


class InvalidArgument(GradientError, ValueError):
    """A required argument was missing or out of range."""
