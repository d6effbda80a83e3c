import math

import pytest

from ohmimetro.resistor import (
    COLOR_NAMES,
    E24_BASE,
    RESISTOR_COLORS,
    Bands,
    color_bands,
    color_names,
    measure,
    nearest_e24,
)


def test_measure_requires_samples():
    with pytest.raises(ValueError):
        measure([])


def test_measure_midpoint_equals_known_resistor():
    reading = measure([50, 50], vref=1.0, resolution=100, known_resistor=1000)
    assert reading.resistance == pytest.approx(1000)
    assert reading.voltage == pytest.approx(1.0 / 2)


def test_measure_averages_samples():
    assert measure([10, 30]) == measure([20, 20])


def test_measure_satisfies_divider_equation():
    reading = measure([1234], vref=3.3, resolution=4095, known_resistor=9920)
    assert reading.resistance * (3.3 - reading.voltage) == pytest.approx(
        reading.voltage * 9920
    )


def test_measure_full_scale_is_infinite():
    reading = measure([100], vref=1.0, resolution=100, known_resistor=1000)
    assert reading.resistance == math.inf
    assert reading.voltage == pytest.approx(1.0)


@pytest.mark.parametrize("value", [10, 47, 220, 3300, 4700, 22000, 910000])
def test_nearest_e24_keeps_series_values(value):
    assert nearest_e24(value) == pytest.approx(value)


def test_nearest_e24_of_known_resistor():
    assert nearest_e24(9920) == pytest.approx(10000)


@pytest.mark.parametrize("value", [0, -5, math.inf, math.nan])
def test_nearest_e24_degenerate_inputs(value):
    assert nearest_e24(value) == 0.0


@pytest.mark.parametrize("value", [1.3, 57.0, 333.0, 5100.7, 87654.0, 2.2e6])
def test_nearest_e24_is_a_series_value_no_farther_than_neighbours(value):
    result = nearest_e24(value)
    mantissa = result / 10 ** math.floor(math.log10(result)) * 10
    assert round(mantissa) in E24_BASE
    decade = 10 ** math.floor(math.log10(value))
    for base in E24_BASE:
        assert abs(result - value) <= abs(base * decade / 10 - value) + 1e-9


def test_color_names_for_series_values():
    assert color_names(4700) == ("amar", "viol", "verm")
    assert color_names(10000) == ("marr", "pret", "lara")
    assert color_names(220) == ("verm", "verm", "marr")


def test_color_bands_below_ten_ohms_uses_gold_multiplier():
    bands = color_bands(4.7)
    assert bands.names[2] == COLOR_NAMES[-1]
    assert bands.value == pytest.approx(4.7)


def test_color_bands_sub_ohm_values_are_scaled_up():
    assert color_bands(0.47) == color_bands(470)


def test_color_bands_clamps_multiplier():
    assert color_bands(1e15).multiplier == 9


@pytest.mark.parametrize("value", [0, -1, math.inf, math.nan])
def test_color_bands_rejects_degenerate_values(value):
    with pytest.raises(ValueError):
        color_bands(value)


@pytest.mark.parametrize("exponent", range(0, 7))
def test_color_bands_round_trip_series(exponent):
    for base in E24_BASE:
        value = base * 10**exponent
        assert color_bands(value).value == pytest.approx(value)


def test_bands_colors_come_from_table():
    bands = Bands(first=4, second=7, multiplier=2)
    assert bands.colors == (RESISTOR_COLORS[4], RESISTOR_COLORS[7], RESISTOR_COLORS[2])