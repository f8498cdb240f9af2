"""Error taxonomy for the colour engine.

Validation errors are raised where the bad input is seen and never swallowed.
A missing pixel position is not an error: it is a PaletteEntry with
position=None.
"""

from typing import Any


class PaletteError(Exception):
    """Base class for every error raised by palette_engine."""


class InvalidColorChannel(PaletteError, ValueError):
    """A colour channel is not an integer or is out of range."""

    def __init__(self, channel: str, value: Any, low: int = 0, high: int = 255):
        self.channel = channel
        self.value = value
        super().__init__(f'Invalid {channel} channel: {value!r}. Must be an integer between {low}-{high}.')


class InvalidHexFormat(PaletteError, ValueError):
    """A hex literal is not of the form #RRGGBB."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f'Invalid hex colour: {value!r}. Expected #RRGGBB.')


class NoColorsExtracted(PaletteError):
    """The quantizer returned nothing usable."""

    def __init__(self, message: str = 'No colors extracted from image'):
        super().__init__(message)


class InvalidColorCount(PaletteError, ValueError):
    def __init__(self, count: Any, low: int, high: int):
        self.count = count
        super().__init__(f'Invalid colour count: {count!r}. Must be an integer between {low}-{high}.')


class ConfigError(PaletteError):
    """A setting from the environment or .env file could not be used."""
