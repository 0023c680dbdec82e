"""Pixel packers for display-controller firmware formats.

Every packer takes ``(pixels, width, height)`` and returns a new sequence;
the input is never modified. ``pixels`` may be a PixelBuffer, a sequence of
Pixel objects (or RGBA tuples), or a (height, width, 4) numpy array.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

import numpy as np

from ..exceptions import BufferLengthMismatchError
from ..models.enums import Orientation
from ..models.pixels import Pixel, PixelBuffer, check_dimensions, check_u8_array
from .colors import ALPHA_THRESHOLD, LIT_THRESHOLD, LUMA_WEIGHTS

PixelSource = Union[PixelBuffer, Sequence[Pixel], np.ndarray]


def _as_array(pixels: PixelSource, width: int, height: int) -> np.ndarray:
    """Return pixels as a (height, width, 4) int32 array.

    Raises:
        InvalidDimensionsError: If width or height is not positive
        BufferLengthMismatchError: If the pixel count is not width * height
        ValueError: If a PixelBuffer has other dimensions, or an array holds
            values outside 0-255
    """
    check_dimensions(width, height)
    expected = width * height

    if isinstance(pixels, PixelBuffer):
        if len(pixels) != expected:
            raise BufferLengthMismatchError(expected, len(pixels))
        if pixels.size != (width, height):
            raise ValueError(
                f"Pixel buffer is {pixels.width}x{pixels.height}, expected {width}x{height}"
            )
        return pixels.to_array().astype(np.int32)

    if isinstance(pixels, np.ndarray):
        flat = pixels.reshape(-1, pixels.shape[-1]) if pixels.ndim > 1 else pixels
        if flat.ndim != 2 or flat.shape[1] != 4:
            raise ValueError(f"Expected RGBA pixel array, got shape {pixels.shape}")
        if len(flat) != expected:
            raise BufferLengthMismatchError(expected, len(flat))
        check_u8_array(flat)
        return flat.astype(np.int32).reshape(height, width, 4)

    if len(pixels) != expected:
        raise BufferLengthMismatchError(expected, len(pixels))
    flat = np.array([Pixel.coerce(p).as_tuple() for p in pixels], dtype=np.int32)
    return flat.reshape(height, width, 4)


def _pack_mask(mask: np.ndarray, orientation: Orientation | str) -> bytes:
    """Pack a (height, width) boolean mask, MSB first.

    Horizontal: 8 pixels of a row per byte, each row padded to a byte boundary.
    Vertical: 8 rows of a column (a page) per byte, pages padded with zeros,
    emitted column by column.
    """
    orientation = Orientation.from_name(orientation)
    bits = mask.astype(np.uint8)

    if orientation == Orientation.HORIZONTAL:
        # packbits pads each row with zero bits in its low-order positions
        return np.packbits(bits, axis=1).tobytes()

    # (pages, width) -> (width, pages) so all pages of column 0 come first
    return np.ascontiguousarray(np.packbits(bits, axis=0).T).tobytes()


def pack_1bit(
        pixels: PixelSource,
        width: int,
        height: int,
        orientation: Orientation | str = Orientation.HORIZONTAL,
) -> bytes:
    """Pack to 1 bit per pixel; a pixel is on when r + g + b > 381.

    Alpha is ignored, so a transparent white pixel is still on.

    Returns:
        ceil(width / 8) * height bytes (horizontal) or
        width * ceil(height / 8) bytes (vertical)
    """
    arr = _as_array(pixels, width, height)
    mask = arr[:, :, :3].sum(axis=2) > LIT_THRESHOLD
    return _pack_mask(mask, orientation)


def pack_1bit_alpha(
        pixels: PixelSource,
        width: int,
        height: int,
        orientation: Orientation | str = Orientation.HORIZONTAL,
) -> bytes:
    """Pack an alpha mask to 1 bit per pixel; a pixel is on when alpha > 127.

    Same geometry as pack_1bit. RGB channels are ignored.
    """
    arr = _as_array(pixels, width, height)
    mask = arr[:, :, 3] > ALPHA_THRESHOLD
    return _pack_mask(mask, orientation)


def pack_rgb565(pixels: PixelSource, width: int, height: int) -> list[int]:
    """Pack to one 16-bit RGB565 word per pixel, row-major. Alpha is dropped."""
    arr = _as_array(pixels, width, height)
    r, g, b = arr[:, :, 0], arr[:, :, 1], arr[:, :, 2]
    words = ((r >> 3) << 11) | ((g >> 2) << 5) | (b >> 3)
    return [int(w) for w in words.reshape(-1)]


def pack_rgb24(pixels: PixelSource, width: int, height: int) -> bytes:
    """Pack to 3 bytes per pixel in r, g, b order, row-major."""
    arr = _as_array(pixels, width, height)
    return arr[:, :, :3].astype(np.uint8).tobytes()


def pack_rgba32(pixels: PixelSource, width: int, height: int) -> bytes:
    """Pack to 4 bytes per pixel in r, g, b, a order, row-major."""
    arr = _as_array(pixels, width, height)
    return arr.astype(np.uint8).tobytes()


def pack_rgb332(pixels: PixelSource, width: int, height: int) -> bytes:
    """Pack to one RRRGGGBB byte per pixel, row-major."""
    arr = _as_array(pixels, width, height)
    r, g, b = arr[:, :, 0], arr[:, :, 1], arr[:, :, 2]
    packed = ((r >> 5) << 5) | ((g >> 5) << 2) | (b >> 6)
    return packed.astype(np.uint8).tobytes()


def pack_gray4(pixels: PixelSource, width: int, height: int) -> bytes:
    """Pack to 4-bit gray, two pixels per byte, first pixel in the high nibble.

    Gray level is luma / 16 truncated and clamped to 0-15. Each row starts a
    fresh byte; an odd trailing pixel leaves the low nibble zero.

    Returns:
        height * ceil(width / 2) bytes
    """
    arr = _as_array(pixels, width, height).astype(np.float64)
    wr, wg, wb = LUMA_WEIGHTS
    luma = wr * arr[:, :, 0] + wg * arr[:, :, 1] + wb * arr[:, :, 2]
    levels = np.clip(np.floor(luma / 16), 0, 15).astype(np.uint8)

    if width % 2:
        levels = np.pad(levels, ((0, 0), (0, 1)))

    packed = (levels[:, 0::2] << 4) | levels[:, 1::2]
    return packed.astype(np.uint8).tobytes()
