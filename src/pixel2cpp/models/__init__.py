"""Data models for pixel2cpp."""

from .enums import (
    DrawMode,
    ElementType,
    Orientation,
    OutputFormat,
    data_suffix_for,
    element_type_for,
)
from .options import CodegenOptions, options_from_json, options_to_json
from .packed import PackedImage
from .pixels import Pixel, PixelBuffer

__all__ = [
    "CodegenOptions",
    "DrawMode",
    "ElementType",
    "Orientation",
    "OutputFormat",
    "PackedImage",
    "Pixel",
    "PixelBuffer",
    "data_suffix_for",
    "element_type_for",
    "options_from_json",
    "options_to_json",
]
