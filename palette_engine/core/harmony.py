"""Harmony colours: fixed hue rotations of a selected palette entry.

Rotations work on the entry's stored HSL. Saturation and lightness are kept;
RGB and hex are derived from the rotated HSL.
"""

from dataclasses import dataclass

from palette_engine.core.colour import entry_from_hsl
from palette_engine.core.types import PaletteEntry

COMPLEMENTARY_ANGLE = 180
ANALOGOUS_ANGLE = 30


@dataclass(frozen=True)
class Harmony:
    """Suggested colours for one selected entry."""

    source: PaletteEntry
    complementary: PaletteEntry
    analogous: tuple[PaletteEntry, PaletteEntry]
    angle: int = ANALOGOUS_ANGLE

    def to_dict(self) -> dict:
        return {
            'angle': self.angle,
            'source': self.source.to_dict(),
            'complementary': self.complementary.to_dict(),
            'analogous': [e.to_dict() for e in self.analogous],
        }


def rotate(entry: PaletteEntry, degrees: int) -> PaletteEntry:
    """Return entry with its hue rotated by degrees, wrapped into [0, 360)."""
    h, s, lum = entry.hsl
    return entry_from_hsl((h + degrees + 360) % 360, s, lum)


def complementary(entry: PaletteEntry) -> PaletteEntry:
    return rotate(entry, COMPLEMENTARY_ANGLE)


def analogous(entry: PaletteEntry, angle: int = ANALOGOUS_ANGLE) -> list[PaletteEntry]:
    """Two neighbours on the colour wheel: -angle first, then +angle."""
    return [rotate(entry, -angle), rotate(entry, angle)]


def suggest(entry: PaletteEntry, angle: int = ANALOGOUS_ANGLE) -> Harmony:
    left, right = analogous(entry, angle)
    return Harmony(source=entry, complementary=complementary(entry), analogous=(left, right), angle=angle)
