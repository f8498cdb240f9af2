"""Tests for palette_engine.core.harmony — complementary and analogous rotations."""

from palette_engine.core.colour import entry_from_rgb, rgb_to_hex
from palette_engine.core.harmony import analogous, complementary, rotate, suggest
from palette_engine.core.types import HslColor, PaletteEntry, RgbColor


def _entry(h: int, s: int = 50, lum: int = 50) -> PaletteEntry:
    # rgb deliberately unrelated to hsl: harmonies must read the stored hsl
    return PaletteEntry(hex='#000000', rgb=RgbColor(0, 0, 0), hsl=HslColor(h, s, lum))


class TestComplementary:
    def test_hue_190(self):
        assert complementary(_entry(10)).hsl.h == 190

    def test_wraps(self):
        assert complementary(_entry(270)).hsl.h == 90

    def test_keeps_saturation_and_lightness(self):
        comp = complementary(_entry(10, 50, 50))
        assert (comp.hsl.s, comp.hsl.l) == (50, 50)

    def test_rgb_and_hex_from_rotated_hsl(self):
        comp = complementary(_entry(10, 50, 50))
        assert comp.rgb.as_tuple() == (64, 170, 191)
        assert comp.hex == rgb_to_hex(*comp.rgb) == '#40AABF'

    def test_always_h_plus_180(self):
        for h in range(0, 360, 7):
            assert complementary(_entry(h)).hsl.h == (h + 180) % 360

    def test_has_no_position(self):
        assert complementary(_entry(10)).position is None


class TestAnalogous:
    def test_default_angle(self):
        result = analogous(_entry(10))
        assert [e.hsl.h for e in result] == [340, 40]

    def test_near_top_of_wheel(self):
        result = analogous(_entry(350))
        assert [e.hsl.h for e in result] == [320, 20]

    def test_custom_angle(self):
        result = analogous(_entry(10), 45)
        assert [e.hsl.h for e in result] == [325, 55]

    def test_exactly_two_in_order(self):
        for h in (0, 29, 30, 180, 359):
            left, right = analogous(_entry(h), 30)
            assert left.hsl.h == (h - 30 + 360) % 360
            assert right.hsl.h == (h + 30) % 360

    def test_keeps_saturation_and_lightness(self):
        for e in analogous(_entry(200, 80, 30)):
            assert (e.hsl.s, e.hsl.l) == (80, 30)


class TestSuggest:
    def test_bundles_both(self):
        entry = entry_from_rgb(255, 87, 51)
        harmony = suggest(entry)
        assert harmony.source is entry
        assert harmony.complementary.hsl.h == 191
        assert [e.hsl.h for e in harmony.analogous] == [341, 41]

    def test_rotate_zero_is_identity_on_hsl(self):
        entry = entry_from_rgb(255, 87, 51)
        assert rotate(entry, 0).hsl == entry.hsl

    def test_to_dict(self):
        data = suggest(entry_from_rgb(255, 87, 51), 45).to_dict()
        assert data['angle'] == 45
        assert data['source']['hex'] == '#FF5733'
        assert len(data['analogous']) == 2
