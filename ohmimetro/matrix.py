"""Frame of a WS2812 LED matrix, pushed word by word to a pixel sink."""

from __future__ import annotations

import logging
from typing import Callable

from .resistor import Bands, color_bands

NUM_PIXELS = 25
BAND_LEDS = (13, 12, 11)

_log = logging.getLogger(__name__)


def urgb_u32(r: int, g: int, b: int) -> int:
    """Pack an RGB colour into the 24-bit GRB word the LEDs expect."""
    for channel in (r, g, b):
        if not 0 <= channel <= 0xFF:
            raise ValueError(f"colour channel {channel!r} outside 0..255")
    return (r << 8) | (g << 16) | b


class LedMatrix:
    """A row of LEDs kept in memory until ``write`` sends them out.

    ``sink`` receives one 32-bit word per LED, the colour in the upper 24 bits.
    """

    def __init__(self, sink: Callable[[int], None], size: int = NUM_PIXELS) -> None:
        self.sink = sink
        self.leds = [0] * size

    def set_led(self, index: int, r: int, g: int, b: int) -> None:
        """Set one LED; indices outside the matrix are ignored."""
        if 0 <= index < len(self.leds):
            self.leds[index] = urgb_u32(r, g, b)

    def clear(self) -> None:
        """Switch every LED off."""
        self.leds[:] = [0] * len(self.leds)

    def write(self) -> None:
        """Send every LED's colour to the sink, in order."""
        for led in self.leds:
            self.sink(led << 8)

    def show_bands(self, resistance: float) -> Bands:
        """Light the band LEDs with the colour code of ``resistance`` and send the frame."""
        bands = color_bands(resistance)
        _log.debug(
            "first: %d / second: %d / multiplier: %d",
            bands.first, bands.second, bands.multiplier,
        )
        for index, color in zip(BAND_LEDS, bands.colors):
            self.set_led(index, color.r, color.g, color.b)
        self.write()
        return bands