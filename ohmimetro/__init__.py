"""Ohmmeter: divider resistance from ADC samples, E24 matching, colour bands, SSD1306 and LED matrix rendering."""

__version__ = "0.1.0"
__all__ = ["font", "ssd1306", "resistor", "matrix", "app"]