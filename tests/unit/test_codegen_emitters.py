"""Test C++ emitters and usage snippets."""

import re

import pytest

from pixel2cpp.codegen.emitters import (
    emit_arduino_code,
    emit_gfx_font,
    emit_plain_bytes,
    emit_single_bitmap,
)
from pixel2cpp.codegen.sketches import display_target
from pixel2cpp.codegen.snippets import all_usage_snippets, usage_snippet
from pixel2cpp.exceptions import UnsupportedCombinationError
from pixel2cpp.models.enums import (
    MONOCHROME_MODES,
    DrawMode,
    ElementType,
    data_suffix_for,
    element_type_for,
)
from pixel2cpp.models.packed import PackedImage


def _packed(mode: DrawMode, data: tuple[int, ...], width: int = 8, height: int = 1) -> PackedImage:
    return PackedImage(
        draw_mode=mode,
        width=width,
        height=height,
        data=data,
        element_type=element_type_for(mode),
        data_suffix=data_suffix_for(mode),
    )


MONO = _packed(DrawMode.HORIZONTAL_1BIT, (0xAA,))
RGB565 = _packed(DrawMode.HORIZONTAL_RGB565, (0xF800, 0x07E0, 0x001F), width=3)


class TestArduinoCode:
    """Test the full sketch emitter."""

    def test_1bit_sketch(self):
        assert emit_arduino_code(MONO, "logo") == (
            "// Generated by Pixel2CPP (HORIZONTAL_1BIT)\n"
            "#include <Adafruit_GFX.h>\n"
            "#include <Adafruit_SSD1306.h>\n"
            "\n"
            "const uint16_t logo_w = 8;\n"
            "const uint16_t logo_h = 1;\n"
            "const uint8_t logo_bits[] PROGMEM = {\n"
            "  0xAA\n"
            "};\n"
            "\n"
            "Adafruit_SSD1306 display(128, 64, &Wire, -1);\n"
            "\n"
            "void setup() {\n"
            "  display.begin(SSD1306_SWITCHCAPVCC, 0x3C);\n"
            "  display.clearDisplay();\n"
            "  display.drawBitmap(0, 0, logo_bits, logo_w, logo_h, 1);\n"
            "  display.display();\n"
            "}\n"
            "\n"
            "void loop() {}"
        )

    def test_alpha_mask_uses_monochrome_blit(self):
        code = emit_arduino_code(_packed(DrawMode.HORIZONTAL_ALPHA, (0xAA,)), "mask")
        assert "#include <Adafruit_SSD1306.h>" in code
        assert "display.drawBitmap(0, 0, mask_alpha, mask_w, mask_h, 1);" in code

    @pytest.mark.parametrize("mode", list(DrawMode))
    def test_ssd1306_target_only_for_monochrome_modes(self, mode):
        target = display_target(mode, "bits", "w", "h")
        assert (target.includes == ["<Adafruit_SSD1306.h>"]) == (mode in MONOCHROME_MODES)

    def test_rgb565_sketch(self):
        code = emit_arduino_code(RGB565, "icon")
        assert "#include <Adafruit_ST7735.h>" in code
        assert "const uint16_t icon_pixels[] PROGMEM = {\n  0xF800, 0x07E0, 0x001F\n};" in code
        assert "tft.setAddrWindow(x0, y0, icon_w, icon_h);" in code
        assert "pgm_read_word(&icon_pixels[i])" in code
        assert "tft.writePixel(color);" in code

    def test_rgb24_sketch_converts_per_pixel(self):
        code = emit_arduino_code(_packed(DrawMode.HORIZONTAL_RGB888_24, (1, 2, 3), width=1), "img")
        assert "#include <Adafruit_ILI9341.h>" in code
        assert "* 3;" in code
        assert "((r & 0xF8) << 8) | ((g & 0xFC) << 3) | (b >> 3)" in code
        assert "a > 127" not in code

    def test_rgba32_sketch_skips_transparent_pixels(self):
        code = emit_arduino_code(_packed(DrawMode.HORIZONTAL_RGB888_32, (1, 2, 3, 4), width=1), "img")
        assert "* 4;" in code
        assert "uint8_t a = pgm_read_byte(&img_pixels[index + 3]);" in code
        assert "if (a > 127) {" in code

    def test_rgb332_and_gray4_sketches(self):
        rgb332 = emit_arduino_code(_packed(DrawMode.RGB332, (0xE0,), width=1), "c")
        assert "#include <Adafruit_SSD1331.h>" in rgb332
        assert "display.drawPixel(x0 + x, y0 + y, color332);" in rgb332

        gray = emit_arduino_code(_packed(DrawMode.GRAY4, (0x05, 0xAF), width=4), "g")
        assert "#include <Adafruit_EPD.h>" in gray
        assert "void drawGrayImage(int16_t x0, int16_t y0)" in gray
        assert "const uint16_t rowBytes = (g_w + 1) / 2;" in gray

    def test_empty_name_raises(self):
        with pytest.raises(ValueError, match="must not be empty"):
            emit_single_bitmap(MONO, "")

    def test_name_is_sanitized_everywhere(self):
        code = emit_arduino_code(MONO, "my logo!")
        assert "my logo" not in code
        identifiers = set(re.findall(r"my_logo_\w*", code))
        assert identifiers == {"my_logo__w", "my_logo__h", "my_logo__bits"}


class TestPlainBytes:
    """Test the plain byte listing emitter."""

    def test_listing_only(self):
        assert emit_plain_bytes(MONO, "logo", include_sketch=False) == (
            "// logo: 8x1 pixels, 1 values, 1 bytes (uint8_t, HORIZONTAL_1BIT)\n0xAA"
        )

    def test_word_listing_reports_bytes(self):
        text = emit_plain_bytes(RGB565, "icon", include_sketch=False)
        assert text.splitlines() == [
            "// icon: 3x1 pixels, 3 values, 6 bytes (uint16_t, HORIZONTAL_RGB565)",
            "0xF800, 0x07E0, 0x001F",
        ]

    def test_with_sketch_uses_data_array(self):
        text = emit_plain_bytes(MONO, "logo", include_sketch=True)
        assert text.startswith("// logo: 8x1 pixels")
        assert "const uint8_t logo_data[] PROGMEM = {" in text
        assert "Serial.begin(9600);" in text
        assert "display.drawBitmap(0, 0, logo_data, logo_w, logo_h, 1);" in text
        assert "void loop() {\n  // Your main code here\n}" in text

    def test_wrapped_listing(self):
        packed = _packed(DrawMode.HORIZONTAL_1BIT, (1, 2, 3), width=24)
        text = emit_plain_bytes(packed, "x", include_sketch=False, values_per_line=2)
        assert text.endswith("0x01, 0x02,\n  0x03")


class TestSingleBitmap:
    """Test the bare declaration emitter."""

    def test_single_bitmap(self):
        assert emit_single_bitmap(MONO, "my sprite!") == (
            "// Single bitmap array - my_sprite_\n"
            "// 8x1 pixels, 1 bytes\n"
            "const uint8_t my_sprite_[] PROGMEM = { 0xAA };"
        )

    def test_single_bitmap_words(self):
        text = emit_single_bitmap(RGB565, "icon")
        assert text.splitlines()[1] == "// 3x1 pixels, 6 bytes"
        assert text.endswith("const uint16_t icon[] PROGMEM = { 0xF800, 0x07E0, 0x001F };")


class TestGfxFont:
    """Test the Adafruit-GFX font emitter."""

    def test_font_structure(self):
        assert emit_gfx_font(MONO, "glyph") == (
            "// GFX Bitmap Font format - glyph\n"
            "#include <Adafruit_GFX.h>\n"
            "\n"
            "const uint8_t glyphBitmaps[] PROGMEM = {\n"
            "  0xAA\n"
            "};\n"
            "\n"
            "const GFXglyph glyphGlyphs[] PROGMEM = {\n"
            "  { 0, 8, 1, 8, 0, 0 } // Single glyph covering entire bitmap\n"
            "};\n"
            "\n"
            "const GFXfont glyph PROGMEM = {\n"
            "  (uint8_t *)glyphBitmaps,\n"
            "  (GFXglyph *)glyphGlyphs,\n"
            "  0, 0, 1\n"
            "};"
        )

    def test_rejects_word_data(self):
        assert RGB565.element_type == ElementType.UINT16
        with pytest.raises(UnsupportedCombinationError, match="requires 8-bit data"):
            emit_gfx_font(RGB565, "icon")


class TestUsageSnippets:
    """Test usage snippets for generated headers."""

    def test_1bit_snippet(self):
        snippet = usage_snippet(DrawMode.HORIZONTAL_1BIT, "my logo", 16, 8)
        assert snippet.startswith("// 1-bit (SSD1306 OLED)\n#include <Adafruit_GFX.h>")
        assert '#include "my_logo.h"' in snippet
        assert "display.drawBitmap(0, 0, my_logo_bits, 16, 8, 1);" in snippet

    def test_rgb565_snippet_uses_literal_dimensions(self):
        snippet = usage_snippet("HORIZONTAL_RGB565", "icon", 10, 4)
        assert "tft.setAddrWindow(x0, y0, 10, 4);" in snippet
        assert "pgm_read_word(&icon_pixels[i])" in snippet

    def test_snippet_for_every_mode(self):
        snippets = all_usage_snippets("a", 2, 2)
        assert set(snippets) == set(DrawMode)
        assert all('#include "a.h"' in s for s in snippets.values())
