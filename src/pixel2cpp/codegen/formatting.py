"""Identifier and numeric literal formatting for generated C++ source."""

from __future__ import annotations

import re
from collections.abc import Iterable

from ..models.enums import ElementType

_INVALID_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_]")


def sanitize_identifier(name: str) -> str:
    """Replace every character outside [A-Za-z0-9_] with an underscore.

    A leading digit gets an underscore prefix so the result is a valid C
    identifier.

    Raises:
        ValueError: If name is empty
    """
    identifier = _INVALID_IDENTIFIER_CHARS.sub("_", name)
    if not identifier:
        raise ValueError("Asset name must not be empty")
    if identifier[0].isdigit():
        identifier = f"_{identifier}"
    return identifier


def format_hex(value: int, element_type: ElementType = ElementType.UINT8) -> str:
    """Format as ``0x`` + uppercase hex, zero-padded to the element width.

    Raises:
        ValueError: If value does not fit in element_type
    """
    if not 0 <= value <= element_type.max_value:
        raise ValueError(
            f"Value 0x{value:X} out of range for {element_type.ctype}"
        )
    return f"0x{value:0{element_type.hex_digits}X}"


def format_hex_list(
        values: Iterable[int],
        element_type: ElementType = ElementType.UINT8,
        per_line: int = 0,
) -> str:
    """Join values as hex literals separated by ``", "``.

    When per_line > 0 the listing wraps after that many values; continuation
    lines are indented by two spaces to line up inside an array initializer.
    """
    literals = [format_hex(v, element_type) for v in values]
    if per_line <= 0:
        return ", ".join(literals)

    lines = [
        ", ".join(literals[i:i + per_line])
        for i in range(0, len(literals), per_line)
    ]
    return ",\n  ".join(lines)
