"""Emitters that wrap packed image data in C++ source text.

Each emitter is a pure function of a PackedImage and an asset name. The name
is sanitized once per call and reused for every identifier.
"""

from __future__ import annotations

from ..exceptions import UnsupportedCombinationError
from ..models.enums import ElementType
from ..models.packed import PackedImage
from .formatting import format_hex_list, sanitize_identifier
from .sketches import display_target
from .source import ArrayDeclaration, ConstDeclaration, Sketch

GENERATOR_TAG = "Pixel2CPP"


def _declarations(packed: PackedImage, identifier: str, array: str, per_line: int) -> list[str]:
    return [
        ConstDeclaration("uint16_t", f"{identifier}_w", packed.width).render(),
        ConstDeclaration("uint16_t", f"{identifier}_h", packed.height).render(),
        ArrayDeclaration(array, packed.data, packed.element_type, per_line=per_line).render(),
    ]


def _sketch(
        packed: PackedImage,
        identifier: str,
        array: str,
        per_line: int,
        serial: bool,
) -> Sketch:
    target = display_target(
        packed.draw_mode,
        array,
        f"{identifier}_w",
        f"{identifier}_h",
        serial=serial,
    )
    return Sketch(
        header_comment=f"// Generated by {GENERATOR_TAG} ({packed.draw_mode.name})",
        includes=["<Adafruit_GFX.h>", *target.includes],
        declarations=_declarations(packed, identifier, array, per_line),
        preamble=target.preamble,
        setup=target.setup,
        functions=target.functions,
        loop=["// Your main code here"] if serial else [],
        trailer=target.trailer,
    )


def emit_arduino_code(packed: PackedImage, name: str, values_per_line: int = 0) -> str:
    """Emit a complete sketch: includes, data array, display init and drawing.

    The array is named ``<name>_<suffix>`` where suffix is ``bits``,
    ``alpha`` or ``pixels`` depending on the draw mode.
    """
    identifier = sanitize_identifier(name)
    array = f"{identifier}_{packed.data_suffix}"
    return _sketch(packed, identifier, array, values_per_line, serial=False).render()


def emit_plain_bytes(
        packed: PackedImage,
        name: str,
        include_sketch: bool = True,
        values_per_line: int = 0,
) -> str:
    """Emit a comment header and the bare hex listing.

    With include_sketch, a minimal working sketch using ``<name>_data`` is
    appended after the listing.
    """
    identifier = sanitize_identifier(name)
    header = (
        f"// {identifier}: {packed.width}x{packed.height} pixels, "
        f"{len(packed)} values, {packed.byte_length} bytes "
        f"({packed.element_type.ctype}, {packed.draw_mode.name})"
    )
    text = f"{header}\n{format_hex_list(packed.data, packed.element_type, values_per_line)}"
    if not include_sketch:
        return text

    sketch = _sketch(packed, identifier, f"{identifier}_data", values_per_line, serial=True)
    return f"{text}\n\n{sketch.render()}"


def emit_single_bitmap(packed: PackedImage, name: str) -> str:
    """Emit one inline PROGMEM array declaration with a size comment."""
    identifier = sanitize_identifier(name)
    array = ArrayDeclaration(identifier, packed.data, packed.element_type, inline=True)
    return "\n".join([
        f"// Single bitmap array - {identifier}",
        f"// {packed.width}x{packed.height} pixels, {packed.byte_length} bytes",
        array.render(),
    ])


def emit_gfx_font(packed: PackedImage, name: str, values_per_line: int = 0) -> str:
    """Emit an Adafruit-GFX font holding one glyph that spans the canvas.

    Glyph entry: offset 0, width, height, xAdvance = width, xOffset 0,
    yOffset 0. The font covers character 0 only, yAdvance = height.

    Raises:
        UnsupportedCombinationError: If the data is not 8-bit
    """
    if packed.element_type != ElementType.UINT8:
        raise UnsupportedCombinationError(
            f"GFX_BITMAP_FONT requires 8-bit data, {packed.draw_mode.name} "
            f"packs {packed.element_type.ctype}"
        )

    identifier = sanitize_identifier(name)
    bitmaps = ArrayDeclaration(f"{identifier}Bitmaps", packed.data, per_line=values_per_line)
    glyphs = "\n".join([
        f"const GFXglyph {identifier}Glyphs[] PROGMEM = {{",
        f"  {{ 0, {packed.width}, {packed.height}, {packed.width}, 0, 0 }} // Single glyph covering entire bitmap",
        "};",
    ])
    font = "\n".join([
        f"const GFXfont {identifier} PROGMEM = {{",
        f"  (uint8_t *){identifier}Bitmaps,",
        f"  (GFXglyph *){identifier}Glyphs,",
        f"  0, 0, {packed.height}",
        "};",
    ])
    head = f"// GFX Bitmap Font format - {identifier}\n#include <Adafruit_GFX.h>"
    return "\n\n".join([head, bitmaps.render(), glyphs, font])
