"""Minimal source representation for generated Arduino sketches.

Declarations and sketch sections are kept as structured values until
render(), so hex formatting and identifiers are handled in one place.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..models.enums import ElementType
from .formatting import format_hex_list

INDENT = "  "


@dataclass(frozen=True)
class ArrayDeclaration:
    """A ``const <type> <name>[] PROGMEM = {...};`` declaration."""

    identifier: str
    values: tuple[int, ...]
    element_type: ElementType = ElementType.UINT8
    inline: bool = False
    per_line: int = 0

    @property
    def ctype(self) -> str:
        return self.element_type.ctype

    def render(self) -> str:
        body = format_hex_list(self.values, self.element_type, self.per_line)
        head = f"const {self.ctype} {self.identifier}[] PROGMEM = "
        if self.inline:
            return f"{head}{{ {body} }};"
        return f"{head}{{\n{INDENT}{body}\n}};"


@dataclass(frozen=True)
class ConstDeclaration:
    """A scalar ``const <type> <name> = <value>;`` declaration."""

    ctype: str
    identifier: str
    value: int | str

    def render(self) -> str:
        return f"const {self.ctype} {self.identifier} = {self.value};"


def _indent_block(lines: list[str]) -> str:
    return "\n".join(f"{INDENT}{line}" if line else "" for line in lines)


def render_function(signature: str, body: list[str]) -> str:
    """Render ``signature { body }``; an empty body renders as ``{}``."""
    if not body:
        return f"{signature} {{}}"
    return f"{signature} {{\n{_indent_block(body)}\n}}"


@dataclass
class Sketch:
    """An Arduino sketch assembled from sections.

    Sections render in a fixed order: header comment, includes,
    declarations, preamble, setup(), helper functions, loop(), trailer.
    Empty sections are skipped.
    """

    header_comment: str = ""
    includes: list[str] = field(default_factory=list)
    declarations: list[str] = field(default_factory=list)
    preamble: list[str] = field(default_factory=list)
    setup: list[str] | None = None
    functions: list[str] = field(default_factory=list)
    loop: list[str] | None = None
    trailer: str = ""

    def render(self) -> str:
        blocks: list[str] = []

        head = [self.header_comment] if self.header_comment else []
        head.extend(f"#include {inc}" for inc in self.includes)
        if head:
            blocks.append("\n".join(head))

        if self.declarations:
            blocks.append("\n".join(self.declarations))
        if self.preamble:
            blocks.append("\n".join(self.preamble))
        if self.setup is not None:
            blocks.append(render_function("void setup()", self.setup))
        blocks.extend(self.functions)
        if self.loop is not None:
            blocks.append(render_function("void loop()", self.loop))
        if self.trailer:
            blocks.append(self.trailer)

        return "\n\n".join(blocks)
