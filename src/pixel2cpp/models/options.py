"""Code generation options and their JSON form."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .enums import DrawMode, OutputFormat


@dataclass(frozen=True, slots=True)
class CodegenOptions:
    """Settings for one code generation request."""

    name: str = "sprite"
    draw_mode: DrawMode = DrawMode.HORIZONTAL_1BIT
    output_format: OutputFormat = OutputFormat.ARDUINO_CODE
    include_sketch: bool = True  # PLAIN_BYTES only
    values_per_line: int = 0     # 0 = all values on one line

    def __post_init__(self) -> None:
        # Accept selector strings as well as enum members
        object.__setattr__(self, "draw_mode", DrawMode.from_name(self.draw_mode))
        object.__setattr__(self, "output_format", OutputFormat.from_name(self.output_format))
        if self.values_per_line < 0:
            raise ValueError(
                f"values_per_line out of range: {self.values_per_line} (must be >= 0)"
            )

    def to_dict(self) -> dict[str, Any]:
        """Export to a JSON-serializable dict (enums by name)."""
        return {
            "name": self.name,
            "draw_mode": self.draw_mode.name,
            "output_format": self.output_format.name,
            "include_sketch": self.include_sketch,
            "values_per_line": self.values_per_line,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CodegenOptions:
        """Import from a dict produced by to_dict(). Unknown keys are ignored."""
        defaults = cls()
        return cls(
            name=str(data.get("name", defaults.name)),
            draw_mode=DrawMode.from_name(data.get("draw_mode", defaults.draw_mode)),
            output_format=OutputFormat.from_name(data.get("output_format", defaults.output_format)),
            include_sketch=bool(data.get("include_sketch", defaults.include_sketch)),
            values_per_line=int(data.get("values_per_line", defaults.values_per_line)),
        )


def options_to_json(options: CodegenOptions) -> str:
    return json.dumps(options.to_dict(), indent=2)


def options_from_json(text: str) -> CodegenOptions:
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object, got {type(data).__name__}")
    return CodegenOptions.from_dict(data)
