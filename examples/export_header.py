"""Convert an image file into an Arduino header.

Usage:
    uv run python examples/export_header.py sprite.png --mode HORIZONTAL_RGB565
    uv run python examples/export_header.py logo.png --name boot-logo --format GFX_BITMAP_FONT
    uv run python examples/export_header.py --selftest
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from PIL import Image

from pixel2cpp import (
    CodegenOptions,
    DrawMode,
    OutputFormat,
    Pixel2CppError,
    PixelBuffer,
    all_passed,
    export_header,
    run_selftests,
    usage_snippet,
)


def _print_selftests() -> int:
    results = run_selftests()
    for result in results:
        status = "PASS" if result.passed else "FAIL"
        line = f"{status} - {result.name}"
        if not result.passed:
            line += f" (got {result.got}, expected {result.expected})"
        print(line)
    ok = all_passed(results)
    print("Overall: all tests passed" if ok else "Overall: some tests failed")
    return 0 if ok else 1


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Pack an image into a firmware bitmap and write it as a .h file."
    )
    parser.add_argument("image", nargs="?", type=Path, help="Source image (any format Pillow reads)")
    parser.add_argument("--name", help="Asset name (default: image file stem)")
    parser.add_argument(
        "--mode",
        default=DrawMode.HORIZONTAL_1BIT.name,
        choices=[m.name for m in DrawMode],
        help="Draw mode. Default: HORIZONTAL_1BIT",
    )
    parser.add_argument(
        "--format",
        default=OutputFormat.ARDUINO_CODE.name,
        choices=[f.name for f in OutputFormat],
        help="Output format. Default: ARDUINO_CODE",
    )
    parser.add_argument("--out", type=Path, default=Path("."), help="Output directory. Default: .")
    parser.add_argument("--per-line", type=int, default=16, help="Hex values per line (0 = one line)")
    parser.add_argument("--snippet", action="store_true", help="Also print a usage snippet")
    parser.add_argument("--selftest", action="store_true", help="Run the built-in packer checks and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.selftest:
        return _print_selftests()
    if args.image is None:
        print("error: an image path is required unless --selftest is given", file=sys.stderr)
        return 2

    options = CodegenOptions(
        name=args.name or args.image.stem,
        draw_mode=args.mode,
        output_format=args.format,
        values_per_line=args.per_line,
    )

    with Image.open(args.image) as image:
        buffer = PixelBuffer.from_image(image)

    try:
        path = export_header(buffer, args.out, options)
    except Pixel2CppError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1

    print(f"Wrote {path} ({buffer.width}x{buffer.height}, {options.draw_mode.name})")
    if args.snippet:
        print()
        print(usage_snippet(options.draw_mode, options.name, buffer.width, buffer.height))
    return 0


if __name__ == "__main__":
    sys.exit(main())
