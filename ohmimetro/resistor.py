"""Resistance measurement through a voltage divider and resistor colour codes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

ADC_VREF = 3.30
ADC_RESOLUTION = 4095
KNOWN_RESISTOR = 9920

E24_BASE = (
    10, 11, 12, 13, 15, 16, 18, 20, 22, 24, 27, 30,
    33, 36, 39, 43, 47, 51, 56, 62, 68, 75, 82, 91,
)


@dataclass(frozen=True)
class Color:
    """An RGB colour for the LED matrix."""

    r: int
    g: int
    b: int


# Digits 0-9 follow the standard colour code; -1 and -2 are the gold and
# silver multipliers used for resistances below ten ohms.
RESISTOR_COLORS: dict[int, Color] = {
    -2: Color(2, 2, 2),
    -1: Color(8, 5, 0),
    0: Color(0, 0, 0),
    1: Color(8, 1, 0),
    2: Color(8, 0, 0),
    3: Color(15, 3, 0),
    4: Color(10, 4, 0),
    5: Color(0, 8, 0),
    6: Color(0, 0, 8),
    7: Color(6, 0, 6),
    8: Color(1, 1, 1),
    9: Color(8, 8, 8),
}

COLOR_NAMES: dict[int, str] = {
    -2: "prat",
    -1: "dour",
    0: "pret",
    1: "marr",
    2: "verm",
    3: "lara",
    4: "amar",
    5: "verd",
    6: "azul",
    7: "viol",
    8: "cinz",
    9: "bran",
}


@dataclass(frozen=True)
class Reading:
    """Divider voltage and the unknown resistance derived from it."""

    voltage: float
    resistance: float


@dataclass(frozen=True)
class Bands:
    """The two significant digits and the multiplier of a colour code."""

    first: int
    second: int
    multiplier: int

    @property
    def digits(self) -> tuple[int, int, int]:
        return (self.first, self.second, self.multiplier)

    @property
    def colors(self) -> tuple[Color, ...]:
        return tuple(RESISTOR_COLORS[digit] for digit in self.digits)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(COLOR_NAMES[digit] for digit in self.digits)

    @property
    def value(self) -> float:
        """The resistance these bands encode."""
        return (10 * self.first + self.second) * 10.0 ** self.multiplier


def measure(
    samples: Iterable[float],
    vref: float = ADC_VREF,
    resolution: int = ADC_RESOLUTION,
    known_resistor: float = KNOWN_RESISTOR,
) -> Reading:
    """Average raw ADC samples and solve the divider for the unknown resistor.

    A reading at full scale gives an infinite resistance.
    """
    values = list(samples)
    if not values:
        raise ValueError("at least one ADC sample is required")
    mean = sum(values) / len(values)
    voltage = mean * vref / resolution
    drop = vref - voltage
    resistance = math.inf if drop == 0 else voltage * known_resistor / drop
    return Reading(voltage=voltage, resistance=resistance)


def nearest_e24(resistance: float) -> float:
    """The E24 value closest to ``resistance``, searched in its decade and both neighbours.

    Zero, negative and non-finite inputs give 0.0.
    """
    if not (math.isfinite(resistance) and resistance > 0):
        return 0.0
    decade = 10.0 ** math.floor(math.log10(resistance))
    candidates = (
        base * (decade * 10.0 ** shift) / 10.0
        for shift in (-1, 0, 1)
        for base in E24_BASE
    )
    return min(candidates, key=lambda candidate: abs(candidate - resistance))


def color_bands(resistance: float) -> Bands:
    """Reduce ``resistance`` to two significant digits and a clamped multiplier."""
    if not (math.isfinite(resistance) and resistance > 0):
        raise ValueError(f"cannot colour-code a resistance of {resistance!r}")
    if resistance < 1:
        resistance *= 1000
    multiplier = 0
    while resistance >= 100:
        resistance /= 10
        multiplier += 1
    while resistance < 10:
        resistance *= 10
        multiplier -= 1
    value = int(resistance + 0.5)
    return Bands(
        first=min(value // 10, 9),
        second=min(value % 10, 9),
        multiplier=max(-2, min(multiplier, 9)),
    )


def color_names(resistance: float) -> tuple[str, ...]:
    """Short colour names of the three bands for ``resistance``."""
    return color_bands(resistance).names