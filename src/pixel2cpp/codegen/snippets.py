"""Usage snippets showing how to draw a generated header."""

from __future__ import annotations

from ..models.enums import DrawMode, data_suffix_for
from .formatting import sanitize_identifier
from .sketches import display_target
from .source import Sketch


def usage_snippet(draw_mode: DrawMode, name: str, width: int, height: int) -> str:
    """Return an Arduino example that includes ``<name>.h`` and draws it.

    The snippet refers to the array emitted by the ARDUINO_CODE format
    (``<name>_bits``, ``<name>_alpha`` or ``<name>_pixels``).
    """
    draw_mode = DrawMode.from_name(draw_mode)
    identifier = sanitize_identifier(name)
    array = f"{identifier}_{data_suffix_for(draw_mode)}"
    target = display_target(draw_mode, array, str(width), str(height))

    return Sketch(
        header_comment=f"// {target.title}",
        includes=["<Adafruit_GFX.h>", *target.includes, f'"{identifier}.h"'],
        preamble=target.preamble,
        setup=target.setup,
        functions=target.functions,
        loop=[],
        trailer=target.trailer,
    ).render()


def all_usage_snippets(name: str, width: int, height: int) -> dict[DrawMode, str]:
    """Usage snippets for every draw mode, keyed by mode."""
    return {mode: usage_snippet(mode, name, width, height) for mode in DrawMode}
