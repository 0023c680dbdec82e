"""Color conversion helpers shared by the packers and emitters."""

from __future__ import annotations

from typing import Final

from PIL import ImageColor

from ..models.pixels import Pixel

# r + g + b must exceed this for a pixel to count as lit in 1-bit mode
LIT_THRESHOLD: Final = 381
# alpha must exceed this for a pixel to count as opaque in the alpha mask
ALPHA_THRESHOLD: Final = 127

# Rec. 709 luma weights
LUMA_WEIGHTS: Final = (0.2126, 0.7152, 0.0722)

BLACK: Final = Pixel(0, 0, 0, 255)
WHITE: Final = Pixel(255, 255, 255, 255)
TRANSPARENT: Final = Pixel(0, 0, 0, 0)


def clamp(n: int | float, lo: int | float = 0, hi: int | float = 255) -> int | float:
    return max(lo, min(hi, n))


def rgb_to_565(r: int, g: int, b: int) -> int:
    """Pack 8-bit channels into a 16-bit RGB565 word."""
    return (((r >> 3) & 0x1F) << 11) | (((g >> 2) & 0x3F) << 5) | ((b >> 3) & 0x1F)


def rgb_to_332(r: int, g: int, b: int) -> int:
    """Pack 8-bit channels into an RRRGGGBB byte."""
    return (((r >> 5) & 0x07) << 5) | (((g >> 5) & 0x07) << 2) | ((b >> 6) & 0x03)


def luma(r: int, g: int, b: int) -> float:
    wr, wg, wb = LUMA_WEIGHTS
    return wr * r + wg * g + wb * b


def gray4(r: int, g: int, b: int) -> int:
    """Quantize a color to a 4-bit gray level (0 = black, 15 = white).

    The level is luma / 16 truncated, so a 170 gray maps to 10 rather than 11.
    """
    return int(clamp(int(luma(r, g, b) / 16), 0, 15))


def is_lit(pixel: Pixel) -> bool:
    """1-bit predicate: lighter pixels are on. Alpha is ignored."""
    return pixel.r + pixel.g + pixel.b > LIT_THRESHOLD


def is_opaque(pixel: Pixel) -> bool:
    """Alpha-mask predicate: opaque pixels are on. RGB is ignored."""
    return pixel.a > ALPHA_THRESHOLD


def rgba_to_hex(pixel: Pixel) -> str:
    """Format as ``#rrggbb`` (alpha dropped)."""
    return f"#{pixel.r:02x}{pixel.g:02x}{pixel.b:02x}"


def parse_color(text: str) -> Pixel:
    """Parse a CSS-style color string (``#f80``, ``rgb(...)``, ``red``...).

    Raises:
        ValueError: If Pillow cannot interpret the string
    """
    rgba = ImageColor.getcolor(text.strip(), "RGBA")
    return Pixel(*rgba)
