"""Pixel and pixel buffer models."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

import numpy as np
from PIL import Image

from ..exceptions import BufferLengthMismatchError, InvalidDimensionsError


def _check_u8(name: str, value: int) -> int:
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {value!r}") from None
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} out of range: {value} (must be 0-255)")
    return value


def check_u8_array(array: np.ndarray) -> None:
    """Raise ValueError unless every element of an integer array is 0-255."""
    if array.dtype.kind not in "iub":
        raise ValueError(f"Expected integer pixel array, got dtype {array.dtype}")
    if array.size and (array.min() < 0 or array.max() > 0xFF):
        raise ValueError(
            f"Channel values out of range: {array.min()}..{array.max()} (must be 0-255)"
        )


def check_dimensions(width: int, height: int) -> None:
    """Raise InvalidDimensionsError unless width and height are positive."""
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(
            f"Invalid dimensions: {width}x{height} (width and height must be positive)"
        )


@dataclass(frozen=True, slots=True)
class Pixel:
    """One RGBA sample, 8 bits per channel, not premultiplied."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, _check_u8(name, getattr(self, name)))

    @classmethod
    def coerce(cls, value: Pixel | Mapping[str, int] | Iterable[int]) -> Pixel:
        """Accept a Pixel, an {r, g, b[, a]} mapping or an (r, g, b[, a]) tuple."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(value["r"], value["g"], value["b"], value.get("a", 255))
        channels = list(value)
        if len(channels) not in (3, 4):
            raise ValueError(f"Expected 3 or 4 channels, got {len(channels)}")
        return cls(*channels)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True)
class PixelBuffer:
    """Rectangular, row-major grid of RGBA pixels.

    Index of pixel (x, y) is ``y * width + x``. The length invariant is
    checked on construction so encoders never see a partial buffer.
    """

    width: int
    height: int
    pixels: tuple[Pixel, ...]

    def __post_init__(self) -> None:
        check_dimensions(self.width, self.height)
        # Normalize lists and tuples of channel values into Pixel objects
        object.__setattr__(self, "pixels", tuple(Pixel.coerce(p) for p in self.pixels))
        expected = self.width * self.height
        if len(self.pixels) != expected:
            raise BufferLengthMismatchError(expected, len(self.pixels))

    @classmethod
    def filled(cls, width: int, height: int, pixel: Pixel | None = None) -> PixelBuffer:
        """Build a buffer with every pixel set to ``pixel`` (transparent by default)."""
        check_dimensions(width, height)
        fill = pixel if pixel is not None else Pixel(0, 0, 0, 0)
        return cls(width, height, (fill,) * (width * height))

    @classmethod
    def from_array(cls, array: np.ndarray | Iterable) -> PixelBuffer:
        """Build a buffer from a (height, width, 4) or (height, width, 3) array.

        Three-channel arrays are treated as fully opaque. Values must be
        integers in 0-255.
        """
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[2] not in (3, 4):
            raise ValueError(f"Expected array of shape (h, w, 3|4), got {array.shape}")

        height, width, channels = array.shape
        check_dimensions(width, height)
        check_u8_array(array)
        data = np.asarray(array, dtype=np.uint8)
        if channels == 3:
            alpha = np.full((height, width, 1), 255, dtype=np.uint8)
            data = np.concatenate([data, alpha], axis=2)

        pixels = tuple(Pixel(int(r), int(g), int(b), int(a)) for r, g, b, a in data.reshape(-1, 4))
        return cls(width, height, pixels)

    @classmethod
    def from_image(cls, image: Image.Image) -> PixelBuffer:
        """Build a buffer from a PIL image, converting it to RGBA.

        No scaling or thresholding is applied.
        """
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return cls.from_array(np.array(image))

    def to_array(self) -> np.ndarray:
        """Return pixels as a (height, width, 4) uint8 array."""
        flat = np.array([p.as_tuple() for p in self.pixels], dtype=np.uint8)
        return flat.reshape(self.height, self.width, 4)

    def to_image(self) -> Image.Image:
        """Return the buffer as an RGBA PIL image."""
        return Image.fromarray(self.to_array())

    def pixel_at(self, x: int, y: int) -> Pixel:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        return self.pixels[y * self.width + x]

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def __len__(self) -> int:
        return len(self.pixels)

    def __iter__(self) -> Iterator[Pixel]:
        return iter(self.pixels)
