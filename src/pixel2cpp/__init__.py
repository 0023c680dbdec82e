"""Pixel2CPP image encoding package.

  Packs RGBA pixel buffers into firmware bitmap formats and generates
  Arduino/C++ source around the packed data.
  """

from .codegen import (
    emit_arduino_code,
    emit_gfx_font,
    emit_plain_bytes,
    emit_single_bitmap,
    format_hex,
    sanitize_identifier,
    usage_snippet,
)
from .encoding import (
    pack_1bit,
    pack_1bit_alpha,
    pack_gray4,
    pack_rgb24,
    pack_rgb332,
    pack_rgb565,
    pack_rgba32,
    parse_color,
)
from .exceptions import (
    BufferLengthMismatchError,
    InvalidDimensionsError,
    Pixel2CppError,
    UnsupportedCombinationError,
    UnsupportedDrawModeError,
    UnsupportedOutputFormatError,
)
from .generator import (
    export_header,
    generate_code,
    generate_from_options,
    header_filename,
    pack_buffer,
)
from .models import (
    CodegenOptions,
    DrawMode,
    ElementType,
    Orientation,
    OutputFormat,
    PackedImage,
    Pixel,
    PixelBuffer,
    options_from_json,
    options_to_json,
)
from .selftest import SelfTestResult, all_passed, run_selftests

__version__ = "0.1.0"

__all__ = [
    # Main API
    "pack_buffer",
    "generate_code",
    "generate_from_options",
    "export_header",
    "header_filename",
    # Exceptions
    "Pixel2CppError",
    "InvalidDimensionsError",
    "BufferLengthMismatchError",
    "UnsupportedDrawModeError",
    "UnsupportedOutputFormatError",
    "UnsupportedCombinationError",
    # Models
    "Pixel",
    "PixelBuffer",
    "PackedImage",
    "CodegenOptions",
    "options_to_json",
    "options_from_json",
    # Enums
    "DrawMode",
    "OutputFormat",
    "Orientation",
    "ElementType",
    # Packers
    "pack_1bit",
    "pack_1bit_alpha",
    "pack_rgb565",
    "pack_rgb24",
    "pack_rgba32",
    "pack_rgb332",
    "pack_gray4",
    # Code generation
    "emit_arduino_code",
    "emit_plain_bytes",
    "emit_single_bitmap",
    "emit_gfx_font",
    "usage_snippet",
    # Utilities
    "sanitize_identifier",
    "format_hex",
    "parse_color",
    "run_selftests",
    "all_passed",
    "SelfTestResult",
]
