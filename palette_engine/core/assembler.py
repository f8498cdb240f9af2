"""Turn quantizer output into palette entries with positions.

Each RGB triple becomes a PaletteEntry (hex, rgb, hsl). Position lookups run
concurrently on a thread pool, one per entry, over the same read-only raster.
All lookups finish before the palette is returned, in quantizer order.

A lookup that raises leaves its entry without a position. Invalid channels
in the quantizer output are not absorbed: they raise InvalidColorChannel.
"""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from palette_engine.core.colour import entry_from_rgb
from palette_engine.core.errors import InvalidColorCount, NoColorsExtracted
from palette_engine.core.locator import SAMPLE_STEP, find_position
from palette_engine.core.quantizers import Quantizer
from palette_engine.core.raster import Raster
from palette_engine.core.types import PaletteEntry

logger = logging.getLogger(__name__)

DEFAULT_COLOR_COUNT = 6
MIN_COLOR_COUNT = 3
MAX_COLOR_COUNT = 12


def validate_color_count(k: int) -> None:
    if not isinstance(k, int) or isinstance(k, bool) or not MIN_COLOR_COUNT <= k <= MAX_COLOR_COUNT:
        raise InvalidColorCount(k, MIN_COLOR_COUNT, MAX_COLOR_COUNT)


def locate_entry(raster: Raster | None, entry: PaletteEntry, step: int = SAMPLE_STEP) -> PaletteEntry:
    """Return entry with a position, looking it up only if it has none.

    Never raises for lookup problems; the entry comes back unchanged instead.
    """
    if entry.position is not None:
        return entry
    try:
        position = find_position(raster, entry.rgb, step)
    except Exception as e:
        logger.warning('position lookup failed for %s: %s', entry.hex, e)
        return entry
    return entry.with_position(position)


def assemble_palette(
    triples: Sequence[Sequence[int]],
    raster: Raster | None,
    step: int = SAMPLE_STEP,
    max_workers: int | None = None,
) -> list[PaletteEntry]:
    """Build palette entries from quantizer triples and locate each in raster."""
    if not isinstance(triples, (list, tuple)) or len(triples) == 0:
        raise NoColorsExtracted()

    if step < 1:
        raise ValueError(f'step must be >= 1, got {step}')
    entries = [entry_from_rgb(*triple) for triple in triples]
    if raster is None or raster.is_empty:
        logger.debug('no raster to search, skipping position lookup for %d colours', len(entries))
        return entries

    with ThreadPoolExecutor(max_workers=max_workers or len(entries)) as pool:
        # map yields results in submission order
        located = list(pool.map(lambda e: locate_entry(raster, e, step), entries))
    return located


def extract_palette(
    raster: Raster,
    quantizer: Quantizer,
    k: int = DEFAULT_COLOR_COUNT,
    step: int = SAMPLE_STEP,
    max_workers: int | None = None,
) -> list[PaletteEntry]:
    """Quantize raster to up to k colours and assemble the palette."""
    validate_color_count(k)
    triples = quantizer.extract(raster, k)
    if not isinstance(triples, (list, tuple)) or len(triples) == 0:
        raise NoColorsExtracted()
    logger.debug('quantizer returned %d of %d requested colours', len(triples), k)
    return assemble_palette(list(triples), raster, step=step, max_workers=max_workers)
