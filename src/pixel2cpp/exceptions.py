"""Exceptions raised by pixel2cpp."""

from __future__ import annotations


class Pixel2CppError(Exception):
    """Base exception for all pixel2cpp errors."""


class InvalidDimensionsError(Pixel2CppError, ValueError):
    """Width or height is not a positive integer."""


class BufferLengthMismatchError(Pixel2CppError, ValueError):
    """Pixel buffer length does not equal width * height."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Pixel buffer holds {actual} pixels, expected {expected} (width * height)"
        )


class UnsupportedDrawModeError(Pixel2CppError, ValueError):
    """Draw mode selector not recognized by any packer."""


class UnsupportedOutputFormatError(Pixel2CppError, ValueError):
    """Output format selector not recognized by any emitter."""


class UnsupportedCombinationError(Pixel2CppError, ValueError):
    """Draw mode and output format cannot be combined."""
