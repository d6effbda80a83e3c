# ohmimetro

A small ohmmeter toolkit. It turns raw 12-bit ADC samples taken across a
voltage divider (3.3 V reference, 9920 Ω known resistor by default) into a
voltage and a resistance, finds the closest standard E24 resistor, decodes the
colour bands of both values, and renders the result onto an in-memory SSD1306
128x64 OLED frame buffer and a 25-LED RGB matrix.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
ohmimetro 2048 2050 2047
```

or, with the readings on standard input:

```
echo "2048 2050 2047" | ohmimetro
```

The command averages the given ADC readings, solves the divider, picks the
nearest E24 value and prints five lines: the measured resistance, voltage and
E24 value; the resistance as six zero-padded digits; the voltage with three
decimals; and the short colour names of the three bands for the measured and
for the E24 value. It exits with an error if no readings are given or one is
not an integer. The display and the LED matrix it draws on are discarded.

## Library use

```python
from ohmimetro.resistor import measure, nearest_e24, color_bands, color_names

reading = measure(samples)          # Reading(voltage, resistance)
r_e24 = nearest_e24(reading.resistance)
bands = color_bands(r_e24)          # Bands(first, second, multiplier)
names = color_names(r_e24)          # e.g. ("marr", "pret", "verm")
```

- `measure(samples, vref, resolution, known_resistor)` raises `ValueError` on
  an empty sample list; a full-scale reading gives an infinite resistance.
- `nearest_e24` searches the value's decade and both neighbours, and returns
  `0.0` for zero, negative or non-finite input.
- `color_bands` keeps two significant digits and clamps the multiplier to
  -2..9 (gold and silver below ten ohms); it raises `ValueError` for
  non-positive or non-finite input. `Bands` offers `digits`, `colors`, `names`
  and `value`.

`ohmimetro.ssd1306.SSD1306(bus, width, height, address, external_vcc)` keeps a
page-ordered frame buffer and offers `pixel`, `get_pixel`, `fill`, `rect`,
`line`, `hline`, `vline`, `draw_char` and `draw_string`; pixels outside the
display raise `IndexError`. `config`, `command` and `send_data` write command
and buffer bytes through `bus.write(address, data)`. `Command` lists the
command bytes. The 8x8 font in `ohmimetro.font` (`glyph`, `glyph_offset`)
draws digits, letters, `:` and `.`; any other character is blank.

`ohmimetro.matrix.LedMatrix(sink, size)` holds one colour per LED (packed with
`urgb_u32`); `write` passes each LED's word to `sink`, and `show_bands` lights
LEDs 13, 12 and 11 in the colour code of a resistance.

`ohmimetro.app.Ohmmeter(display, matrix)` ties both together: `draw_layout`
and `draw_resistor` draw the static screen, and `update(samples)` takes one
measurement, refreshes both outputs and returns the reading and the E24 value.
`format_resistance` and `format_voltage` give the on-screen text.

## What it does not do

The package does not read an ADC, talk to an I2C bus or drive LEDs itself:
samples come from the caller, and the display bus and the matrix sink are
objects the caller supplies. There is no continuous measurement loop and no
button handling; each `update` or command run handles one batch of readings.