"""8x8 bitmap font for the SSD1306 display: digits, letters and a few symbols.

Each glyph is eight column bytes; bit 0 of a byte is the top row.
"""

from __future__ import annotations

GLYPH_SIZE = 8

_GLYPHS: tuple[tuple[int, ...], ...] = (
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),  # blank
    (0x3E, 0x7F, 0x71, 0x59, 0x4D, 0x7F, 0x3E, 0x00),  # 0
    (0x40, 0x42, 0x7F, 0x7F, 0x40, 0x40, 0x00, 0x00),  # 1
    (0x62, 0x73, 0x59, 0x49, 0x6F, 0x66, 0x00, 0x00),  # 2
    (0x22, 0x63, 0x49, 0x49, 0x7F, 0x36, 0x00, 0x00),  # 3
    (0x18, 0x1C, 0x16, 0x53, 0x7F, 0x7F, 0x50, 0x00),  # 4
    (0x27, 0x67, 0x45, 0x45, 0x7D, 0x39, 0x00, 0x00),  # 5
    (0x3C, 0x7E, 0x4B, 0x49, 0x79, 0x30, 0x00, 0x00),  # 6
    (0x03, 0x03, 0x71, 0x79, 0x0F, 0x07, 0x00, 0x00),  # 7
    (0x36, 0x7F, 0x49, 0x49, 0x7F, 0x36, 0x00, 0x00),  # 8
    (0x06, 0x4F, 0x49, 0x69, 0x3F, 0x1E, 0x00, 0x00),  # 9
    (0x78, 0x14, 0x12, 0x11, 0x12, 0x14, 0x78, 0x00),  # A
    (0x7F, 0x49, 0x49, 0x49, 0x49, 0x49, 0x7F, 0x00),  # B
    (0x1C, 0x3E, 0x63, 0x41, 0x41, 0x63, 0x22, 0x00),  # C
    (0x7F, 0x41, 0x41, 0x41, 0x41, 0x41, 0x7E, 0x00),  # D
    (0x7F, 0x49, 0x49, 0x49, 0x49, 0x49, 0x49, 0x00),  # E
    (0x7F, 0x09, 0x09, 0x09, 0x09, 0x01, 0x01, 0x00),  # F
    (0x7F, 0x41, 0x41, 0x41, 0x51, 0x51, 0x73, 0x00),  # G
    (0x7F, 0x08, 0x08, 0x08, 0x08, 0x08, 0x7F, 0x00),  # H
    (0x00, 0x00, 0x00, 0x7F, 0x00, 0x00, 0x00, 0x00),  # I
    (0x21, 0x41, 0x41, 0x3F, 0x01, 0x01, 0x01, 0x00),  # J
    (0x00, 0x7F, 0x08, 0x08, 0x14, 0x22, 0x41, 0x00),  # K
    (0x7F, 0x40, 0x40, 0x40, 0x40, 0x40, 0x40, 0x00),  # L
    (0x7F, 0x02, 0x04, 0x08, 0x04, 0x02, 0x7F, 0x00),  # M
    (0x7F, 0x02, 0x04, 0x08, 0x10, 0x20, 0x7F, 0x00),  # N
    (0x3E, 0x41, 0x41, 0x41, 0x41, 0x41, 0x3E, 0x00),  # O
    (0x7F, 0x11, 0x11, 0x11, 0x11, 0x11, 0x0E, 0x00),  # P
    (0x3E, 0x41, 0x41, 0x49, 0x51, 0x61, 0x7E, 0x00),  # Q
    (0x7F, 0x11, 0x11, 0x11, 0x31, 0x51, 0x0E, 0x00),  # R
    (0x46, 0x49, 0x49, 0x49, 0x49, 0x30, 0x00, 0x00),  # S
    (0x03, 0x41, 0x7F, 0x7F, 0x41, 0x03, 0x00, 0x00),  # T
    (0x7F, 0x7F, 0x40, 0x40, 0x7F, 0x7F, 0x00, 0x00),  # U
    (0x0F, 0x10, 0x20, 0x40, 0x20, 0x10, 0x0F, 0x00),  # V
    (0x7F, 0x20, 0x10, 0x08, 0x10, 0x20, 0x7F, 0x00),  # W
    (0x00, 0x41, 0x22, 0x14, 0x14, 0x22, 0x41, 0x00),  # X
    (0x01, 0x02, 0x04, 0x78, 0x04, 0x02, 0x01, 0x00),  # Y
    (0x41, 0x61, 0x59, 0x45, 0x43, 0x41, 0x00, 0x00),  # Z
    (0x20, 0x74, 0x54, 0x54, 0x3C, 0x78, 0x40, 0x00),  # a
    (0x41, 0x7F, 0x3F, 0x48, 0x48, 0x78, 0x30, 0x00),  # b
    (0x38, 0x7C, 0x44, 0x44, 0x6C, 0x28, 0x00, 0x00),  # c
    (0x30, 0x78, 0x48, 0x49, 0x3F, 0x7F, 0x40, 0x00),  # d
    (0x38, 0x7C, 0x54, 0x54, 0x5C, 0x18, 0x00, 0x00),  # e
    (0x48, 0x7E, 0x7F, 0x49, 0x03, 0x02, 0x00, 0x00),  # f
    (0x98, 0xBC, 0xA4, 0xA4, 0xF8, 0x7C, 0x04, 0x00),  # g
    (0x41, 0x7F, 0x7F, 0x08, 0x04, 0x7C, 0x78, 0x00),  # h
    (0x00, 0x44, 0x7D, 0x7D, 0x40, 0x00, 0x00, 0x00),  # i
    (0x60, 0xE0, 0x80, 0x80, 0xFD, 0x7D, 0x00, 0x00),  # j
    (0x41, 0x7F, 0x7F, 0x10, 0x38, 0x6C, 0x44, 0x00),  # k
    (0x00, 0x41, 0x7F, 0x7F, 0x40, 0x00, 0x00, 0x00),  # l
    (0x7C, 0x7C, 0x18, 0x38, 0x1C, 0x7C, 0x78, 0x00),  # m
    (0x7C, 0x7C, 0x04, 0x04, 0x7C, 0x78, 0x00, 0x00),  # n
    (0x38, 0x7C, 0x44, 0x44, 0x7C, 0x38, 0x00, 0x00),  # o
    (0x84, 0xFC, 0xF8, 0xA4, 0x24, 0x3C, 0x18, 0x00),  # p
    (0x18, 0x3C, 0x24, 0xA4, 0xF8, 0xFC, 0x84, 0x00),  # q
    (0x44, 0x7C, 0x78, 0x4C, 0x04, 0x1C, 0x18, 0x00),  # r
    (0x48, 0x5C, 0x54, 0x54, 0x74, 0x24, 0x00, 0x00),  # s
    (0x00, 0x04, 0x3E, 0x7F, 0x44, 0x24, 0x00, 0x00),  # t
    (0x3C, 0x7C, 0x40, 0x40, 0x3C, 0x7C, 0x40, 0x00),  # u
    (0x1C, 0x3C, 0x60, 0x60, 0x3C, 0x1C, 0x00, 0x00),  # v
    (0x3C, 0x7C, 0x70, 0x38, 0x70, 0x7C, 0x3C, 0x00),  # w
    (0x44, 0x6C, 0x38, 0x10, 0x38, 0x6C, 0x44, 0x00),  # x
    (0x9C, 0xBC, 0xA0, 0xA0, 0xFC, 0x7C, 0x00, 0x00),  # y
    (0x4C, 0x64, 0x74, 0x5C, 0x4C, 0x64, 0x00, 0x00),  # z
    (0x00, 0x00, 0x66, 0x66, 0x00, 0x00, 0x00, 0x00),  # :
    (0x02, 0x03, 0x51, 0x59, 0x0F, 0x06, 0x00, 0x00),  # ?
    (0x00, 0x06, 0x0F, 0x09, 0x0F, 0x06, 0x00, 0x00),  # *
    (0x46, 0x66, 0x30, 0x18, 0x0C, 0x66, 0x62, 0x00),  # %
    (0x08, 0x08, 0x08, 0x08, 0x08, 0x08, 0x00, 0x00),  # -
    (0x00, 0x00, 0x60, 0x60, 0x00, 0x00, 0x00, 0x00),  # .
)

FONT = bytes(byte for row in _GLYPHS for byte in row)

_SYMBOL_INDEX = {":": 63, ".": 68}


def _glyph_index(char: str) -> int:
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 37
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 11
    if "0" <= char <= "9":
        return ord(char) - ord("0") + 1
    return _SYMBOL_INDEX.get(char, 0)


def _check_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def glyph_offset(char: str) -> int:
    """Byte offset of the glyph for ``char`` in FONT; unknown characters map to the blank glyph."""
    _check_char(char)
    return _glyph_index(char) * GLYPH_SIZE


def glyph(char: str) -> bytes:
    """The eight column bytes that draw ``char``."""
    start = glyph_offset(char)
    return FONT[start:start + GLYPH_SIZE]