"""The ohmmeter: measure, pick the E24 value and show both on display and LEDs."""

from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Iterable, Sequence

from .matrix import BAND_LEDS, LedMatrix
from .resistor import Reading, color_names, measure, nearest_e24
from .ssd1306 import SSD1306

_log = logging.getLogger(__name__)

_RESISTANCE_WIDTH = 6
_VOLTAGE_WIDTH = 5
_BAND_COLUMNS = (10, 49, 88)
_MEASURED_ROW = 4
_E24_ROW = 13
_RESISTOR_BODY_LEDS = (6, 7, 8, 10, 14, 16, 17, 18)


def format_resistance(resistance: float) -> str:
    """Resistance rounded to whole ohms, zero-padded to six characters and cut to six."""
    if not math.isfinite(resistance):
        raise ValueError(f"cannot format a resistance of {resistance!r}")
    return f"{int(resistance + 0.5):06d}"[:_RESISTANCE_WIDTH]


def format_voltage(voltage: float) -> str:
    """Voltage with three decimals, cut to five characters."""
    return f"{voltage:05.3f}"[:_VOLTAGE_WIDTH]


def _blank_on_error(formatter, value: float, width: int) -> str:
    try:
        return formatter(value)
    except ValueError:
        return " " * width


def _band_names(resistance: float) -> tuple[str, ...]:
    try:
        return color_names(resistance)
    except ValueError:
        return ("    ",) * 3


class Ohmmeter:
    """Drives the OLED display and LED matrix of the resistance meter."""

    def __init__(self, display: SSD1306, matrix: LedMatrix) -> None:
        self.display = display
        self.matrix = matrix

    def draw_layout(self) -> None:
        """Draw the static frame, labels and resistor picture, then send both outputs."""
        d = self.display
        d.rect(0, 0, 128, 64, True, False)
        d.draw_string("res:", 18, 43)
        d.draw_string("volt:", 77, 43)
        d.vline(63, 41, 62, True)
        d.vline(64, 41, 62, True)
        d.hline(1, 126, 40, True)
        d.hline(1, 126, 39, True)
        self.draw_resistor()
        d.send_data()
        self.matrix.write()

    def draw_resistor(self) -> None:
        """Draw a resistor body with three bands on the display and on the matrix."""
        d = self.display
        d.rect(25, 11, 106, 10, True, False)
        d.hline(3, 10, 30, True)
        d.hline(117, 124, 30, True)
        for x in (24, 25, 63, 64, 102, 103):
            d.vline(x, 26, 33, True)
        for index in _RESISTOR_BODY_LEDS:
            self.matrix.set_led(index, 1, 1, 1)

    def update(self, samples: Iterable[float]) -> tuple[Reading, float]:
        """Take one measurement and refresh both outputs with it."""
        reading = measure(samples)
        e24 = nearest_e24(reading.resistance)
        _log.debug(
            "r_x: %f / voltage: %f / r_e24: %f",
            reading.resistance, reading.voltage, e24,
        )

        try:
            self.matrix.show_bands(e24)
        except ValueError:
            for index in BAND_LEDS:
                self.matrix.set_led(index, 0, 0, 0)
            self.matrix.write()

        d = self.display
        d.draw_string(
            _blank_on_error(format_resistance, reading.resistance, _RESISTANCE_WIDTH), 8, 53
        )
        d.draw_string(_blank_on_error(format_voltage, reading.voltage, _VOLTAGE_WIDTH), 76, 53)
        for row, value in ((_MEASURED_ROW, reading.resistance), (_E24_ROW, e24)):
            for name, x in zip(_band_names(value), _BAND_COLUMNS):
                d.draw_string(name, x, row)
        d.send_data()
        return reading, e24


class _NullBus:
    def write(self, address: int, data: bytes) -> None:
        pass


def _discard(word: int) -> None:
    pass


def main(argv: Sequence[str] | None = None) -> int:
    """Compute a resistance from raw ADC readings given as arguments or on stdin."""
    parser = argparse.ArgumentParser(
        prog="ohmimetro",
        description="Resistance from raw 12-bit ADC readings of the divider.",
    )
    parser.add_argument(
        "samples", nargs="*", type=int,
        help="ADC readings; read from standard input when omitted",
    )
    args = parser.parse_args(argv)
    samples = args.samples
    if not samples:
        try:
            samples = [int(token) for token in sys.stdin.read().split()]
        except ValueError as exc:
            parser.error(f"invalid ADC reading: {exc}")
    if not samples:
        parser.error("no ADC readings given")

    meter = Ohmmeter(SSD1306(_NullBus()), LedMatrix(_discard))
    meter.draw_layout()
    reading, e24 = meter.update(samples)

    print(f"r_x: {reading.resistance:f}/ tensao: {reading.voltage:f}/ r_e24: {e24:f}")
    print(_blank_on_error(format_resistance, reading.resistance, _RESISTANCE_WIDTH))
    print(format_voltage(reading.voltage))
    print(" ".join(_band_names(reading.resistance)))
    print(" ".join(_band_names(e24)))
    return 0