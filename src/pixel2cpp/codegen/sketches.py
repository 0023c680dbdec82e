"""Display-family specific setup and drawing code for generated sketches."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..exceptions import UnsupportedDrawModeError
from ..models.enums import DrawMode
from .source import render_function


@dataclass(frozen=True)
class DisplayTarget:
    """Library, globals and drawing code for one display family."""

    title: str
    includes: list[str]
    preamble: list[str] = field(default_factory=list)
    setup: list[str] = field(default_factory=list)
    functions: list[str] = field(default_factory=list)
    trailer: str = ""


_TFT_PINS = [
    "#define TFT_CS   10",
    "#define TFT_RST  9",
    "#define TFT_DC   8",
]


def _rgb888_draw(array: str, width: str, height: str, stride: int) -> str:
    body = [
        f"for (uint16_t y = 0; y < {height}; y++) {{",
        f"  for (uint16_t x = 0; x < {width}; x++) {{",
        f"    uint32_t index = ((uint32_t)y * {width} + x) * {stride};",
        f"    uint8_t r = pgm_read_byte(&{array}[index]);",
        f"    uint8_t g = pgm_read_byte(&{array}[index + 1]);",
        f"    uint8_t b = pgm_read_byte(&{array}[index + 2]);",
    ]
    convert = [
        "uint16_t color = ((r & 0xF8) << 8) | ((g & 0xFC) << 3) | (b >> 3);",
        "tft.drawPixel(x0 + x, y0 + y, color);",
    ]
    if stride == 4:
        body.append(f"    uint8_t a = pgm_read_byte(&{array}[index + 3]);")
        body.append("    if (a > 127) {")
        body.extend(f"      {line}" for line in convert)
        body.append("    }")
    else:
        body.extend(f"    {line}" for line in convert)
    body.extend(["  }", "}"])
    return render_function("void drawImage(int16_t x0, int16_t y0)", body)


def display_target(
        draw_mode: DrawMode,
        array: str,
        width: str,
        height: str,
        serial: bool = False,
) -> DisplayTarget:
    """Build the drawing code for a draw mode.

    Args:
        draw_mode: Layout of the packed array
        array: Identifier of the PROGMEM array to draw
        width: C expression for the image width
        height: C expression for the image height
        serial: Start the serial port at the top of setup()

    Raises:
        UnsupportedDrawModeError: If draw_mode has no display family
    """
    serial_setup = ["Serial.begin(9600);", ""] if serial else []

    if draw_mode.is_monochrome:
        return DisplayTarget(
            title="1-bit (SSD1306 OLED)",
            includes=["<Adafruit_SSD1306.h>"],
            preamble=["Adafruit_SSD1306 display(128, 64, &Wire, -1);"],
            setup=serial_setup + [
                "display.begin(SSD1306_SWITCHCAPVCC, 0x3C);",
                "display.clearDisplay();",
                f"display.drawBitmap(0, 0, {array}, {width}, {height}, 1);",
                "display.display();",
            ],
        )

    if draw_mode == DrawMode.HORIZONTAL_RGB565:
        return DisplayTarget(
            title="RGB565 (ST7735/ILI9341 TFT)",
            includes=["<Adafruit_ST7735.h>"],
            preamble=_TFT_PINS + ["", "Adafruit_ST7735 tft = Adafruit_ST7735(TFT_CS, TFT_DC, TFT_RST);"],
            setup=serial_setup + [
                "tft.initR(INITR_BLACKTAB);",
                "tft.fillScreen(ST77XX_BLACK);",
                "drawImage(0, 0);",
            ],
            functions=[render_function("void drawImage(int16_t x0, int16_t y0)", [
                "tft.startWrite();",
                f"tft.setAddrWindow(x0, y0, {width}, {height});",
                f"for (uint32_t i = 0; i < (uint32_t){width} * {height}; i++) {{",
                f"  uint16_t color = pgm_read_word(&{array}[i]);",
                "  tft.writePixel(color);",
                "}",
                "tft.endWrite();",
            ])],
        )

    if draw_mode in (DrawMode.HORIZONTAL_RGB888_24, DrawMode.HORIZONTAL_RGB888_32):
        stride = 3 if draw_mode == DrawMode.HORIZONTAL_RGB888_24 else 4
        return DisplayTarget(
            title="RGB24 (ESP32/High Memory)" if stride == 3 else "RGBA32 (ESP32/High Memory)",
            includes=["<Adafruit_ILI9341.h>"],
            preamble=_TFT_PINS + ["", "Adafruit_ILI9341 tft = Adafruit_ILI9341(TFT_CS, TFT_DC, TFT_RST);"],
            setup=serial_setup + [
                "tft.begin();",
                "tft.fillScreen(ILI9341_BLACK);",
                "drawImage(0, 0);",
            ],
            functions=[_rgb888_draw(array, width, height, stride)],
        )

    if draw_mode == DrawMode.RGB332:
        return DisplayTarget(
            title="RGB332 (SSD1331/Low Memory)",
            includes=["<Adafruit_SSD1331.h>"],
            preamble=[
                "#define OLED_CS   10",
                "#define OLED_RST  9",
                "#define OLED_DC   8",
                "",
                "Adafruit_SSD1331 display = Adafruit_SSD1331(OLED_CS, OLED_DC, OLED_RST);",
            ],
            setup=serial_setup + [
                "display.begin();",
                "display.fillScreen(0x00);",
                "drawImage(0, 0);",
            ],
            functions=[render_function("void drawImage(int16_t x0, int16_t y0)", [
                f"for (uint16_t y = 0; y < {height}; y++) {{",
                f"  for (uint16_t x = 0; x < {width}; x++) {{",
                f"    uint8_t color332 = pgm_read_byte(&{array}[(uint32_t)y * {width} + x]);",
                "    display.drawPixel(x0 + x, y0 + y, color332);",
                "  }",
                "}",
            ])],
            trailer="// RGB332: RRRGGGBB (8-bit color)",
        )

    if draw_mode == DrawMode.GRAY4:
        return DisplayTarget(
            title="4-bit Grayscale (E-ink/EPD)",
            includes=["<Adafruit_EPD.h>"],
            preamble=["// Adafruit_IL0373 display(152, 152, 8, 9, 10, 11, 7);"],
            setup=serial_setup + [
                "// display.begin();",
                "// display.clearBuffer();",
                "drawGrayImage(0, 0);",
                "// display.display();",
            ],
            functions=[render_function("void drawGrayImage(int16_t x0, int16_t y0)", [
                f"const uint16_t rowBytes = ({width} + 1) / 2;",
                f"for (uint16_t y = 0; y < {height}; y++) {{",
                f"  for (uint16_t x = 0; x < {width}; x++) {{",
                f"    uint8_t packedByte = pgm_read_byte(&{array}[(uint32_t)y * rowBytes + x / 2]);",
                "    uint8_t grayValue = (x % 2 == 0) ? (packedByte >> 4) : (packedByte & 0x0F);",
                "    uint8_t gray8 = grayValue * 17;",
                "    // display.drawPixel(x0 + x, y0 + y, gray8);",
                "  }",
                "}",
            ])],
            trailer="// 4-bit grayscale: 2 pixels per byte, first pixel in the high nibble",
        )

    raise UnsupportedDrawModeError(f"Unsupported draw mode: {draw_mode!r}")
