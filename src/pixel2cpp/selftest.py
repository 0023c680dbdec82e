"""Built-in reference checks for the packers."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .encoding import (
    BLACK,
    WHITE,
    pack_1bit,
    pack_1bit_alpha,
    pack_gray4,
    pack_rgb24,
    pack_rgb332,
    pack_rgb565,
)
from .models.pixels import Pixel

RED = Pixel(255, 0, 0)
GREEN = Pixel(0, 255, 0)
BLUE = Pixel(0, 0, 255)


@dataclass(frozen=True, slots=True)
class SelfTestResult:
    """Outcome of one reference check."""

    name: str
    passed: bool
    got: list[int]
    expected: list[int]


def _alternating(count: int) -> list[Pixel]:
    # 1, 0, 1, 0, ... with white = 1
    return [WHITE if i % 2 == 0 else BLACK for i in range(count)]


_CASES: list[tuple[str, Callable[[], Sequence[int]], list[int]]] = [
    (
        "1BIT Horizontal 8px 10101010",
        lambda: pack_1bit(_alternating(8), 8, 1, "horizontal"),
        [0xAA],
    ),
    (
        "1BIT Horizontal 10px row all 1s",
        lambda: pack_1bit([WHITE] * 10, 10, 1, "horizontal"),
        [0xFF, 0xC0],
    ),
    (
        "1BIT Vertical 1x8 10101010",
        lambda: pack_1bit(_alternating(8), 1, 8, "vertical"),
        [0xAA],
    ),
    (
        "1BIT Alpha map 8px pattern",
        lambda: pack_1bit_alpha(
            [Pixel(255, 255, 255, 255 if i % 2 == 0 else 0) for i in range(8)], 8, 1
        ),
        [0xAA],
    ),
    (
        "RGB565 R,G,B",
        lambda: pack_rgb565([RED, GREEN, BLUE], 3, 1),
        [0xF800, 0x07E0, 0x001F],
    ),
    (
        "RGB24 2x2 colors",
        lambda: pack_rgb24([RED, GREEN, BLUE, WHITE], 2, 2),
        [255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 255],
    ),
    (
        "RGB332 R,G,B",
        lambda: pack_rgb332([RED, GREEN, BLUE], 3, 1),
        [0xE0, 0x1C, 0x03],
    ),
    (
        "GRAY4 grayscale",
        lambda: pack_gray4(
            [Pixel(0, 0, 0), Pixel(85, 85, 85), Pixel(170, 170, 170), Pixel(255, 255, 255)], 4, 1
        ),
        [0x05, 0xAF],
    ),
]


def run_selftests() -> list[SelfTestResult]:
    """Run every reference check and collect the results."""
    results = []
    for name, run, expected in _CASES:
        got = list(run())
        results.append(SelfTestResult(name, got == expected, got, expected))
    return results


def all_passed(results: Sequence[SelfTestResult]) -> bool:
    return all(r.passed for r in results)
