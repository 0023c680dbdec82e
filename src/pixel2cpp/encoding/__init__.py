"""Pixel packing and color conversion."""

from .colors import (
    BLACK,
    TRANSPARENT,
    WHITE,
    clamp,
    gray4,
    is_lit,
    is_opaque,
    luma,
    parse_color,
    rgb_to_332,
    rgb_to_565,
    rgba_to_hex,
)
from .packers import (
    pack_1bit,
    pack_1bit_alpha,
    pack_gray4,
    pack_rgb24,
    pack_rgb332,
    pack_rgb565,
    pack_rgba32,
)

__all__ = [
    "pack_1bit",
    "pack_1bit_alpha",
    "pack_rgb565",
    "pack_rgb24",
    "pack_rgba32",
    "pack_rgb332",
    "pack_gray4",
    "rgb_to_565",
    "rgb_to_332",
    "luma",
    "gray4",
    "is_lit",
    "is_opaque",
    "clamp",
    "rgba_to_hex",
    "parse_color",
    "BLACK",
    "WHITE",
    "TRANSPARENT",
]
