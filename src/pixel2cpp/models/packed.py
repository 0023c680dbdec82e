"""Packed image model returned by the generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .enums import DrawMode, ElementType


@dataclass(frozen=True, slots=True)
class PackedImage:
    """Packed pixel data plus the metadata emitters need."""

    draw_mode: DrawMode
    width: int
    height: int
    data: tuple[int, ...]
    element_type: ElementType = ElementType.UINT8
    data_suffix: str = "pixels"

    def __len__(self) -> int:
        return len(self.data)

    @property
    def byte_length(self) -> int:
        """Storage size of the data in bytes."""
        return len(self.data) * (self.element_type.value // 8)

    def to_bytes(self, byteorder: Literal["little", "big"] = "big") -> bytes:
        """Serialize for direct binary embedding.

        16-bit words are split into two bytes using ``byteorder``.
        """
        if self.element_type == ElementType.UINT8:
            return bytes(self.data)
        width = self.element_type.value // 8
        return b"".join(v.to_bytes(width, byteorder=byteorder) for v in self.data)
