[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ohmimetro"
version = "0.1.0"
description = "Ohmmeter logic: voltage-divider resistance from ADC samples, nearest E24 value, colour-band decoding, SSD1306 frame buffer and LED matrix rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["ohmmeter", "resistor", "e24", "color code", "ssd1306", "oled", "led matrix", "ws2812"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ohmimetro = "ohmimetro.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ohmimetro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
