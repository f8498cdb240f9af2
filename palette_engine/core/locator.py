"""Find where a colour occurs in a raster by strided nearest-match search.

Samples every `step`-th pixel in both directions starting at (0, 0). For each
sample, computes RGB Euclidean distance to the target. The first sample in
row-major order with the minimum distance wins.

The result is the nearest *sampled* pixel, not necessarily the nearest pixel
overall. Halving the step quadruples the work.

Position is reported as percentages of the raster size:
    (best_x / width * 100, best_y / height * 100)
"""

import logging
from collections.abc import Iterable

import numpy as np

from palette_engine.core.channels import check_channels
from palette_engine.core.raster import Raster
from palette_engine.core.types import Position

logger = logging.getLogger(__name__)

SAMPLE_STEP = 10


def nearest_sample(raster: Raster, target: Iterable[int], step: int = SAMPLE_STEP) -> tuple[int, int, float]:
    """Return (x, y, distance) of the best sampled pixel.

    Raises ValueError for an empty raster or a step below 1.
    """
    if step < 1:
        raise ValueError(f'step must be >= 1, got {step}')
    if raster.is_empty:
        raise ValueError('raster has no pixels')
    r, g, b = target
    check_channels(r=r, g=g, b=b)

    # int32 so differences of uint8 values cannot wrap
    samples = raster.rgb()[::step, ::step].astype(np.int32)
    diff = samples - np.array([r, g, b], dtype=np.int32)
    squared = np.einsum('ijk,ijk->ij', diff, diff)

    # argmin returns the first minimum in row-major order
    flat_index = int(np.argmin(squared))
    row, col = divmod(flat_index, squared.shape[1])
    best_sq = int(squared[row, col])
    return col * step, row * step, float(np.sqrt(best_sq))


def find_position(raster: Raster | None, target: Iterable[int], step: int = SAMPLE_STEP) -> Position | None:
    """Best-effort location of target in raster, or None if there is no raster to search."""
    if raster is None or raster.is_empty:
        return None
    target = tuple(target)
    x, y, distance = nearest_sample(raster, target, step)
    logger.debug('nearest sample for %s at (%d, %d), distance %.2f', target, x, y, distance)
    return Position(x=x / raster.width * 100, y=y / raster.height * 100)
