"""Frame buffer and I2C command set for an SSD1306 OLED display."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

from .font import GLYPH_SIZE, glyph

DEFAULT_WIDTH = 128
DEFAULT_HEIGHT = 64
DEFAULT_ADDRESS = 0x3C

_DATA_PREFIX = 0x40
_COMMAND_PREFIX = 0x80


class Command(IntEnum):
    """SSD1306 command bytes."""

    SET_CONTRAST = 0x81
    SET_ENTIRE_ON = 0xA4
    SET_NORM_INV = 0xA6
    SET_DISP = 0xAE
    SET_MEM_ADDR = 0x20
    SET_COL_ADDR = 0x21
    SET_PAGE_ADDR = 0x22
    SET_DISP_START_LINE = 0x40
    SET_SEG_REMAP = 0xA0
    SET_MUX_RATIO = 0xA8
    SET_COM_OUT_DIR = 0xC0
    SET_DISP_OFFSET = 0xD3
    SET_COM_PIN_CFG = 0xDA
    SET_DISP_CLK_DIV = 0xD5
    SET_PRECHARGE = 0xD9
    SET_VCOM_DESEL = 0xDB
    SET_CHARGE_PUMP = 0x8D


class I2CBus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...


class SSD1306:
    """An SSD1306 display in vertical addressing mode, driven over an I2C bus.

    Drawing happens in a local buffer; ``send_data`` pushes it to the panel.
    """

    def __init__(
        self,
        bus: I2CBus,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        address: int = DEFAULT_ADDRESS,
        external_vcc: bool = False,
    ) -> None:
        self.bus = bus
        self.width = width
        self.height = height
        self.pages = height // 8
        self.address = address
        self.external_vcc = external_vcc
        self.buffer = bytearray(self.pages * width + 1)
        self.buffer[0] = _DATA_PREFIX

    def config(self) -> None:
        """Send the power-up configuration sequence and switch the display on."""
        sequence = (
            Command.SET_DISP | 0x00,
            Command.SET_MEM_ADDR, 0x01,
            Command.SET_DISP_START_LINE | 0x00,
            Command.SET_SEG_REMAP | 0x01,
            Command.SET_MUX_RATIO, self.height - 1,
            Command.SET_COM_OUT_DIR | 0x08,
            Command.SET_DISP_OFFSET, 0x00,
            Command.SET_COM_PIN_CFG, 0x12,
            Command.SET_DISP_CLK_DIV, 0x80,
            Command.SET_PRECHARGE, 0xF1,
            Command.SET_VCOM_DESEL, 0x30,
            Command.SET_CONTRAST, 0xFF,
            Command.SET_ENTIRE_ON,
            Command.SET_NORM_INV,
            Command.SET_CHARGE_PUMP, 0x14,
            Command.SET_DISP | 0x01,
        )
        for byte in sequence:
            self.command(byte)

    def command(self, command: int) -> None:
        """Send a single command byte."""
        self.bus.write(self.address, bytes((_COMMAND_PREFIX, int(command) & 0xFF)))

    def send_data(self) -> None:
        """Write the whole frame buffer to the display."""
        for byte in (
            Command.SET_COL_ADDR, 0, self.width - 1,
            Command.SET_PAGE_ADDR, 0, self.pages - 1,
        ):
            self.command(byte)
        self.bus.write(self.address, bytes(self.buffer))

    def _locate(self, x: int, y: int) -> tuple[int, int]:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} display")
        return (y >> 3) + x * self.pages + 1, 1 << (y & 0b111)

    def pixel(self, x: int, y: int, value: bool) -> None:
        """Set or clear one pixel."""
        index, mask = self._locate(x, y)
        if value:
            self.buffer[index] |= mask
        else:
            self.buffer[index] &= ~mask & 0xFF

    def get_pixel(self, x: int, y: int) -> bool:
        """Whether one pixel is lit in the buffer."""
        index, mask = self._locate(x, y)
        return bool(self.buffer[index] & mask)

    def fill(self, value: bool) -> None:
        """Set or clear every pixel."""
        for y in range(self.height):
            for x in range(self.width):
                self.pixel(x, y, value)

    def rect(self, top: int, left: int, width: int, height: int, value: bool, fill: bool) -> None:
        """Draw a rectangle outline, optionally filling its interior."""
        for x in range(left, left + width):
            self.pixel(x, top, value)
            self.pixel(x, top + height - 1, value)
        for y in range(top, top + height):
            self.pixel(left, y, value)
            self.pixel(left + width - 1, y, value)
        if fill:
            for x in range(left + 1, left + width - 1):
                for y in range(top + 1, top + height - 1):
                    self.pixel(x, y, value)

    def line(self, x0: int, y0: int, x1: int, y1: int, value: bool) -> None:
        """Draw a straight line between two points, ends included."""
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        while True:
            self.pixel(x0, y0, value)
            if x0 == x1 and y0 == y1:
                break
            e2 = err * 2
            if e2 > -dy:
                err -= dy
                x0 += sx
            if e2 < dx:
                err += dx
                y0 += sy

    def hline(self, x0: int, x1: int, y: int, value: bool) -> None:
        """Draw a horizontal line from x0 to x1 inclusive."""
        for x in range(x0, x1 + 1):
            self.pixel(x, y, value)

    def vline(self, x: int, y0: int, y1: int, value: bool) -> None:
        """Draw a vertical line from y0 to y1 inclusive."""
        for y in range(y0, y1 + 1):
            self.pixel(x, y, value)

    def draw_char(self, char: str, x: int, y: int) -> None:
        """Draw one 8x8 character with its top-left corner at (x, y)."""
        for i, column in enumerate(glyph(char)):
            for j in range(GLYPH_SIZE):
                self.pixel(x + i, y + j, bool(column & (1 << j)))

    def draw_string(self, text: str, x: int, y: int) -> None:
        """Draw text, wrapping to the next row near the right edge and stopping at the bottom."""
        for char in text:
            self.draw_char(char, x, y)
            x += GLYPH_SIZE
            if x + GLYPH_SIZE >= self.width:
                x = 0
                y += GLYPH_SIZE
            if y + GLYPH_SIZE >= self.height:
                break