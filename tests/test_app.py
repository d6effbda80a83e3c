import io
import math

import pytest

from ohmimetro.app import Ohmmeter, format_resistance, format_voltage, main
from ohmimetro.matrix import BAND_LEDS, LedMatrix, urgb_u32
from ohmimetro.resistor import color_bands, color_names, measure, nearest_e24
from ohmimetro.ssd1306 import SSD1306


class FakeBus:
    def __init__(self):
        self.writes = []

    def write(self, address, data):
        self.writes.append((address, bytes(data)))


def make_meter():
    bus = FakeBus()
    words = []
    display = SSD1306(bus)
    matrix = LedMatrix(words.append)
    return Ohmmeter(display, matrix), bus, words


def region(display, x0, y0, width, height):
    return [
        display.get_pixel(x, y)
        for x in range(x0, x0 + width)
        for y in range(y0, y0 + height)
    ]


def test_format_resistance_pads_to_six():
    assert format_resistance(123.4) == "000123"


def test_format_resistance_cuts_to_six():
    text = format_resistance(12345678)
    assert len(text) == 6
    assert "12345678".startswith(text)


def test_format_resistance_rejects_infinite():
    with pytest.raises(ValueError):
        format_resistance(math.inf)


def test_format_voltage():
    assert format_voltage(1.65) == "1.650"
    assert len(format_voltage(3.3)) == 5


def test_draw_layout_sends_frame_and_matrix():
    meter, bus, words = make_meter()
    meter.draw_layout()
    display = meter.display
    assert display.get_pixel(0, 0) and display.get_pixel(127, 63)
    assert display.get_pixel(63, 50) and display.get_pixel(64, 50)
    assert bus.writes[-1] == (display.address, bytes(display.buffer))
    assert len(words) == len(meter.matrix.leds)
    assert meter.matrix.leds[6] == urgb_u32(1, 1, 1)
    assert meter.matrix.leds[12] == 0


def test_draw_resistor_marks_body():
    meter, _, _ = make_meter()
    meter.draw_resistor()
    assert meter.display.get_pixel(11, 25)
    assert meter.display.get_pixel(3, 30)
    assert meter.display.get_pixel(103, 33)
    assert meter.matrix.leds[18] == urgb_u32(1, 1, 1)


def test_update_measures_and_shows_e24_bands():
    meter, bus, words = make_meter()
    samples = [2048, 2050, 2046]
    reading, e24 = meter.update(samples)
    assert reading == measure(samples)
    assert e24 == nearest_e24(reading.resistance)
    for index, color in zip(BAND_LEDS, color_bands(e24).colors):
        assert meter.matrix.leds[index] == urgb_u32(color.r, color.g, color.b)
    assert bus.writes[-1][1] == bytes(meter.display.buffer)


def test_update_draws_formatted_values():
    meter, _, _ = make_meter()
    reading, e24 = meter.update([1500])
    reference = SSD1306(FakeBus())
    reference.draw_string(format_resistance(reading.resistance), 8, 53)
    reference.draw_string(color_names(e24)[0], 10, 13)
    assert region(meter.display, 8, 53, 48, 8) == region(reference, 8, 53, 48, 8)
    assert region(meter.display, 10, 13, 32, 8) == region(reference, 10, 13, 32, 8)


def test_update_with_zero_reading_keeps_running():
    meter, bus, _ = make_meter()
    reading, e24 = meter.update([0, 0])
    assert reading.resistance == 0
    assert e24 == 0.0
    assert all(meter.matrix.leds[index] == 0 for index in BAND_LEDS)
    assert bus.writes[-1][1] == bytes(meter.display.buffer)


def test_main_with_arguments(capsys):
    assert main(["2048", "2048"]) == 0
    out = capsys.readouterr().out
    assert "r_e24:" in out
    assert " ".join(color_names(nearest_e24(measure([2048]).resistance))) in out


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1000 1000\n"))
    assert main([]) == 0
    assert format_voltage(measure([1000]).voltage) in capsys.readouterr().out


def test_main_without_readings_fails(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2