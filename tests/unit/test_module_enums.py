"""Test model enums and conversions."""

import pytest

from pixel2cpp.exceptions import UnsupportedDrawModeError, UnsupportedOutputFormatError
from pixel2cpp.models.enums import (
    DrawMode,
    ElementType,
    Orientation,
    OutputFormat,
    data_suffix_for,
    element_type_for,
)


class TestDrawMode:
    """Test DrawMode enum."""

    def test_all_draw_modes_exist(self):
        """Test all 8 draw modes are defined."""
        assert [m.name for m in DrawMode] == [
            "HORIZONTAL_1BIT",
            "VERTICAL_1BIT",
            "HORIZONTAL_ALPHA",
            "HORIZONTAL_RGB565",
            "HORIZONTAL_RGB888_24",
            "HORIZONTAL_RGB888_32",
            "RGB332",
            "GRAY4",
        ]

    def test_from_name(self):
        """Test selector strings parse to members."""
        assert DrawMode.from_name("HORIZONTAL_RGB565") == DrawMode.HORIZONTAL_RGB565
        assert DrawMode.from_name(" gray4 ") == DrawMode.GRAY4
        assert DrawMode.from_name(DrawMode.RGB332) is DrawMode.RGB332

    def test_from_name_rejects_unknown(self):
        """Test unknown selectors raise instead of falling through."""
        with pytest.raises(UnsupportedDrawModeError, match="Unsupported draw mode"):
            DrawMode.from_name("HORIZONTAL_2BIT")

    def test_is_monochrome(self):
        assert DrawMode.HORIZONTAL_ALPHA.is_monochrome
        assert DrawMode.VERTICAL_1BIT.is_monochrome
        assert not DrawMode.GRAY4.is_monochrome

    def test_element_types(self):
        """Only RGB565 packs 16-bit words."""
        assert element_type_for(DrawMode.HORIZONTAL_RGB565) == ElementType.UINT16
        others = [m for m in DrawMode if m != DrawMode.HORIZONTAL_RGB565]
        assert all(element_type_for(m) == ElementType.UINT8 for m in others)

    def test_data_suffixes(self):
        assert data_suffix_for(DrawMode.HORIZONTAL_1BIT) == "bits"
        assert data_suffix_for(DrawMode.VERTICAL_1BIT) == "bits"
        assert data_suffix_for(DrawMode.HORIZONTAL_ALPHA) == "alpha"
        assert data_suffix_for(DrawMode.HORIZONTAL_RGB888_32) == "pixels"


class TestOutputFormat:
    """Test OutputFormat enum."""

    def test_output_format_names(self):
        assert [f.name for f in OutputFormat] == [
            "ARDUINO_CODE",
            "PLAIN_BYTES",
            "ARDUINO_SINGLE_BITMAP",
            "GFX_BITMAP_FONT",
        ]

    def test_from_name_rejects_unknown(self):
        with pytest.raises(UnsupportedOutputFormatError, match="Unsupported output format"):
            OutputFormat.from_name("JSON")


class TestOrientation:
    """Test Orientation enum."""

    def test_from_name(self):
        assert Orientation.from_name("vertical") == Orientation.VERTICAL
        assert Orientation.from_name("HORIZONTAL") == Orientation.HORIZONTAL

    def test_from_name_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unknown orientation"):
            Orientation.from_name("diagonal")


class TestElementType:
    """Test ElementType properties."""

    def test_uint8(self):
        assert ElementType.UINT8.ctype == "uint8_t"
        assert ElementType.UINT8.hex_digits == 2
        assert ElementType.UINT8.max_value == 0xFF

    def test_uint16(self):
        assert ElementType.UINT16.ctype == "uint16_t"
        assert ElementType.UINT16.hex_digits == 4
        assert ElementType.UINT16.max_value == 0xFFFF
