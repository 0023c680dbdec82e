"""C++ source generation for packed image data."""

from .emitters import emit_arduino_code, emit_gfx_font, emit_plain_bytes, emit_single_bitmap
from .formatting import format_hex, format_hex_list, sanitize_identifier
from .snippets import all_usage_snippets, usage_snippet
from .source import ArrayDeclaration, ConstDeclaration, Sketch

__all__ = [
    "emit_arduino_code",
    "emit_plain_bytes",
    "emit_single_bitmap",
    "emit_gfx_font",
    "usage_snippet",
    "all_usage_snippets",
    "sanitize_identifier",
    "format_hex",
    "format_hex_list",
    "ArrayDeclaration",
    "ConstDeclaration",
    "Sketch",
]
