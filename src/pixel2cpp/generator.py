"""Draw-mode and output-format dispatch for code generation."""

from __future__ import annotations

import logging
from pathlib import Path

from .codegen import (
    emit_arduino_code,
    emit_gfx_font,
    emit_plain_bytes,
    emit_single_bitmap,
    sanitize_identifier,
)
from .encoding import (
    pack_1bit,
    pack_1bit_alpha,
    pack_gray4,
    pack_rgb24,
    pack_rgb332,
    pack_rgb565,
    pack_rgba32,
)
from .exceptions import UnsupportedDrawModeError, UnsupportedOutputFormatError
from .models.enums import (
    DrawMode,
    Orientation,
    OutputFormat,
    data_suffix_for,
    element_type_for,
)
from .models.options import CodegenOptions
from .models.packed import PackedImage
from .models.pixels import PixelBuffer

_LOGGER = logging.getLogger(__name__)


def pack_buffer(buffer: PixelBuffer, draw_mode: DrawMode | str) -> PackedImage:
    """Pack a pixel buffer with the packer selected by draw_mode.

    Raises:
        UnsupportedDrawModeError: If draw_mode is not a known DrawMode
    """
    mode = DrawMode.from_name(draw_mode)
    w, h = buffer.width, buffer.height

    if mode == DrawMode.HORIZONTAL_1BIT:
        data = pack_1bit(buffer, w, h, Orientation.HORIZONTAL)
    elif mode == DrawMode.VERTICAL_1BIT:
        data = pack_1bit(buffer, w, h, Orientation.VERTICAL)
    elif mode == DrawMode.HORIZONTAL_ALPHA:
        data = pack_1bit_alpha(buffer, w, h, Orientation.HORIZONTAL)
    elif mode == DrawMode.HORIZONTAL_RGB565:
        data = pack_rgb565(buffer, w, h)
    elif mode == DrawMode.HORIZONTAL_RGB888_24:
        data = pack_rgb24(buffer, w, h)
    elif mode == DrawMode.HORIZONTAL_RGB888_32:
        data = pack_rgba32(buffer, w, h)
    elif mode == DrawMode.RGB332:
        data = pack_rgb332(buffer, w, h)
    elif mode == DrawMode.GRAY4:
        data = pack_gray4(buffer, w, h)
    else:
        raise UnsupportedDrawModeError(f"Unsupported draw mode: {draw_mode!r}")

    packed = PackedImage(
        draw_mode=mode,
        width=w,
        height=h,
        data=tuple(data),
        element_type=element_type_for(mode),
        data_suffix=data_suffix_for(mode),
    )
    _LOGGER.debug(
        "Packed %dx%d buffer as %s: %d values (%d bytes)",
        w,
        h,
        mode.name,
        len(packed),
        packed.byte_length,
    )
    return packed


def generate_code(
        buffer: PixelBuffer,
        name: str,
        draw_mode: DrawMode | str,
        output_format: OutputFormat | str,
        *,
        include_sketch: bool = True,
        values_per_line: int = 0,
) -> str:
    """Pack a buffer and render it as C++ source text.

    Args:
        buffer: Pixels to encode
        name: Asset name; sanitized for use as an identifier
        draw_mode: Packing layout (enum member or selector string)
        output_format: Emitter template (enum member or selector string)
        include_sketch: Append a working sketch to PLAIN_BYTES output
        values_per_line: Wrap hex listings after this many values (0 = no wrap)

    Returns:
        Generated source text

    Raises:
        UnsupportedDrawModeError: If draw_mode is unknown
        UnsupportedOutputFormatError: If output_format is unknown
        UnsupportedCombinationError: If the emitter cannot hold the packed data
    """
    mode = DrawMode.from_name(draw_mode)
    fmt = OutputFormat.from_name(output_format)
    packed = pack_buffer(buffer, mode)

    _LOGGER.debug("Emitting %s for %r (%s)", fmt.name, name, mode.name)

    if fmt == OutputFormat.ARDUINO_CODE:
        return emit_arduino_code(packed, name, values_per_line=values_per_line)
    if fmt == OutputFormat.PLAIN_BYTES:
        return emit_plain_bytes(
            packed,
            name,
            include_sketch=include_sketch,
            values_per_line=values_per_line,
        )
    if fmt == OutputFormat.ARDUINO_SINGLE_BITMAP:
        return emit_single_bitmap(packed, name)
    if fmt == OutputFormat.GFX_BITMAP_FONT:
        return emit_gfx_font(packed, name, values_per_line=values_per_line)

    raise UnsupportedOutputFormatError(f"Unsupported output format: {output_format!r}")


def generate_from_options(buffer: PixelBuffer, options: CodegenOptions) -> str:
    """generate_code() driven by a CodegenOptions value."""
    return generate_code(
        buffer,
        options.name,
        options.draw_mode,
        options.output_format,
        include_sketch=options.include_sketch,
        values_per_line=options.values_per_line,
    )


def header_filename(name: str) -> str:
    """File name for an exported header: ``<sanitized name>.h``."""
    return f"{sanitize_identifier(name)}.h"


def export_header(
        buffer: PixelBuffer,
        directory: str | Path,
        options: CodegenOptions,
) -> Path:
    """Write the generated source to ``directory/<sanitized name>.h``.

    The file content is exactly the generated text, UTF-8 encoded.

    Returns:
        Path of the written file
    """
    code = generate_from_options(buffer, options)
    path = Path(directory) / header_filename(options.name)
    path.write_text(code, encoding="utf-8")

    _LOGGER.info(
        "Wrote %s (%s, %s, %dx%d)",
        path,
        options.draw_mode.name,
        options.output_format.name,
        buffer.width,
        buffer.height,
    )
    return path
