from __future__ import annotations

from enum import IntEnum
from typing import Final

from ..exceptions import UnsupportedDrawModeError, UnsupportedOutputFormatError


class DrawMode(IntEnum):
    """Pixel packing layouts.

    Selects both the packer and the channel layout of the generated array.
    """
    HORIZONTAL_1BIT = 0
    VERTICAL_1BIT = 1
    HORIZONTAL_ALPHA = 2
    HORIZONTAL_RGB565 = 3
    HORIZONTAL_RGB888_24 = 4
    HORIZONTAL_RGB888_32 = 5
    RGB332 = 6
    GRAY4 = 7

    @classmethod
    def from_name(cls, name: str | DrawMode) -> DrawMode:
        """Parse a selector string such as ``"HORIZONTAL_1BIT"``."""
        if isinstance(name, cls):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise UnsupportedDrawModeError(f"Unsupported draw mode: {name!r}") from None

    @property
    def is_monochrome(self) -> bool:
        """True for the 1 bit-per-pixel layouts."""
        return self in MONOCHROME_MODES


class OutputFormat(IntEnum):
    """Code emitter templates."""
    ARDUINO_CODE = 0
    PLAIN_BYTES = 1
    ARDUINO_SINGLE_BITMAP = 2
    GFX_BITMAP_FONT = 3

    @classmethod
    def from_name(cls, name: str | OutputFormat) -> OutputFormat:
        """Parse a selector string such as ``"PLAIN_BYTES"``."""
        if isinstance(name, cls):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise UnsupportedOutputFormatError(f"Unsupported output format: {name!r}") from None


class Orientation(IntEnum):
    """Bit-packing direction for the 1-bit layouts."""
    HORIZONTAL = 0  # 8 pixels of a row per byte
    VERTICAL = 1    # 8 pixels of a column (one page) per byte

    @classmethod
    def from_name(cls, name: str | Orientation) -> Orientation:
        if isinstance(name, cls):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown orientation: {name!r}") from None


class ElementType(IntEnum):
    """Width of one packed element, in bits."""
    UINT8 = 8
    UINT16 = 16

    @property
    def ctype(self) -> str:
        return f"uint{self.value}_t"

    @property
    def hex_digits(self) -> int:
        return self.value // 4

    @property
    def max_value(self) -> int:
        return (1 << self.value) - 1


MONOCHROME_MODES: Final[frozenset[DrawMode]] = frozenset({
    DrawMode.HORIZONTAL_1BIT,
    DrawMode.VERTICAL_1BIT,
    DrawMode.HORIZONTAL_ALPHA,
})

_ELEMENT_TYPES: Final[dict[DrawMode, ElementType]] = {
    mode: ElementType.UINT8 for mode in DrawMode
} | {DrawMode.HORIZONTAL_RGB565: ElementType.UINT16}

_DATA_SUFFIXES: Final[dict[DrawMode, str]] = {
    DrawMode.HORIZONTAL_1BIT: "bits",
    DrawMode.VERTICAL_1BIT: "bits",
    DrawMode.HORIZONTAL_ALPHA: "alpha",
    DrawMode.HORIZONTAL_RGB565: "pixels",
    DrawMode.HORIZONTAL_RGB888_24: "pixels",
    DrawMode.HORIZONTAL_RGB888_32: "pixels",
    DrawMode.RGB332: "pixels",
    DrawMode.GRAY4: "pixels",
}


def element_type_for(mode: DrawMode) -> ElementType:
    """Element width of the packed data for a draw mode."""
    return _ELEMENT_TYPES[mode]


def data_suffix_for(mode: DrawMode) -> str:
    """Suffix of the generated array identifier (``<name>_<suffix>``)."""
    return _DATA_SUFFIXES[mode]
