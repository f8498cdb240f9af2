"""Colour space conversion (RGB, HSL, hex) and RGB Euclidean distance.

All RGB-consuming functions validate their channels first and raise
InvalidColorChannel rather than clamping. Hex output is always the canonical
uppercase #RRGGBB form.
"""

import math
import re
from collections.abc import Iterable

from palette_engine.core.channels import check_channels, check_hue, check_range
from palette_engine.core.errors import InvalidHexFormat
from palette_engine.core.types import HslColor, PaletteEntry, RgbColor

_HEX_RE = re.compile(r'^#([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})$')


def _round(x: float) -> int:
    """Round half up, so 127.5 -> 128 and 0.5 -> 1 (not banker's rounding)."""
    return int(math.floor(x + 0.5))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    check_channels(r=r, g=g, b=b)
    return f'#{r:02X}{g:02X}{b:02X}'


def hex_to_rgb(value: str) -> RgbColor:
    """Parse '#RRGGBB' (any case) into an RgbColor."""
    if not isinstance(value, str):
        raise InvalidHexFormat(value)
    m = _HEX_RE.match(value.strip())
    if not m:
        raise InvalidHexFormat(value)
    return RgbColor(int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def rgb_to_hsl(r: int, g: int, b: int) -> HslColor:
    """Convert RGB to whole-number HSL.

    When two channels share the maximum, red wins over green and green over
    blue, e.g. (255, 255, 0) takes the red branch.
    """
    check_channels(r=r, g=g, b=b)
    rn = r / 255
    gn = g / 255
    bn = b / 255

    mx = max(rn, gn, bn)
    mn = min(rn, gn, bn)
    delta = mx - mn

    h = 0.0
    s = 0.0
    lum = (mx + mn) / 2

    if delta != 0:
        s = delta / (2 - mx - mn) if lum > 0.5 else delta / (mx + mn)

        if mx == rn:
            h = ((gn - bn) / delta + (6 if gn < bn else 0)) / 6
        elif mx == gn:
            h = ((bn - rn) / delta + 2) / 6
        else:
            h = ((rn - gn) / delta + 4) / 6

    # a hue just under one turn rounds up to 360
    return HslColor(_round(h * 360) % 360, _round(s * 100), _round(lum * 100))


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: int, s: int, l: int) -> RgbColor:  # noqa: E741
    """Inverse of rgb_to_hsl, exact up to integer rounding (+/-1 per channel)."""
    check_hue(h)
    check_range('s', s, 0, 100)
    check_range('l', l, 0, 100)
    hn = (h % 360) / 360
    sn = s / 100
    ln = l / 100

    if sn == 0:
        r = g = b = ln
    else:
        q = ln * (1 + sn) if ln < 0.5 else ln + sn - ln * sn
        p = 2 * ln - q
        r = _hue_to_rgb(p, q, hn + 1 / 3)
        g = _hue_to_rgb(p, q, hn)
        b = _hue_to_rgb(p, q, hn - 1 / 3)

    return RgbColor(_round(r * 255), _round(g * 255), _round(b * 255))


def rgb_distance(a: Iterable[int], b: Iterable[int]) -> float:
    """Euclidean distance between two RGB colours.

    Channels are converted with int() so numpy uint8 pixels cannot wrap.
    """
    ar, ag, ab = (int(c) for c in a)
    br, bg, bb = (int(c) for c in b)
    return math.sqrt((ar - br) ** 2 + (ag - bg) ** 2 + (ab - bb) ** 2)


def entry_from_rgb(r: int, g: int, b: int) -> PaletteEntry:
    """Build a PaletteEntry (without position) from one RGB triple."""
    return PaletteEntry(hex=rgb_to_hex(r, g, b), rgb=RgbColor(r, g, b), hsl=rgb_to_hsl(r, g, b))


def entry_from_hsl(h: int, s: int, l: int) -> PaletteEntry:  # noqa: E741
    """Build a PaletteEntry whose HSL is kept as given, not re-derived from RGB."""
    rgb = hsl_to_rgb(h, s, l)
    return PaletteEntry(hex=rgb_to_hex(*rgb), rgb=rgb, hsl=HslColor(h % 360, s, l))


def parse_colour(value: str) -> RgbColor:
    """Parse '#RRGGBB' or 'r,g,b' / 'rgb(r, g, b)' into an RgbColor."""
    text = value.strip()
    if text.startswith('#'):
        return hex_to_rgb(text)
    m = re.fullmatch(r'(?:rgb\()?\s*(-?[\d.]+)\s*,\s*(-?[\d.]+)\s*,\s*(-?[\d.]+)\s*\)?', text)
    if not m:
        raise InvalidHexFormat(value)
    channels = []
    for raw in m.groups():
        # keep 12.5 as a float so validation rejects it
        channels.append(float(raw) if '.' in raw else int(raw))
    return RgbColor(*channels)
