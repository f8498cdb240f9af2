"""palette_engine — colour extraction and harmony engine."""

from palette_engine.core.assembler import assemble_palette, extract_palette, locate_entry
from palette_engine.core.colour import hex_to_rgb, hsl_to_rgb, rgb_distance, rgb_to_hex, rgb_to_hsl
from palette_engine.core.errors import (
    InvalidColorChannel,
    InvalidColorCount,
    InvalidHexFormat,
    NoColorsExtracted,
    PaletteError,
)
from palette_engine.core.harmony import analogous, complementary, suggest
from palette_engine.core.locator import find_position
from palette_engine.core.raster import Raster
from palette_engine.core.types import HslColor, PaletteEntry, Position, RgbColor

__all__ = [
    'HslColor',
    'InvalidColorChannel',
    'InvalidColorCount',
    'InvalidHexFormat',
    'NoColorsExtracted',
    'PaletteEntry',
    'PaletteError',
    'Position',
    'Raster',
    'RgbColor',
    'analogous',
    'assemble_palette',
    'complementary',
    'extract_palette',
    'find_position',
    'hex_to_rgb',
    'hsl_to_rgb',
    'locate_entry',
    'rgb_distance',
    'rgb_to_hex',
    'rgb_to_hsl',
    'suggest',
]
