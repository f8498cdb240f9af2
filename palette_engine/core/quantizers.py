"""Dominant colour quantizers.

A quantizer is anything with `extract(raster, k)` returning up to k RGB
triples, most representative first. The engine treats it as a black box;
these two cover the command line tool.

kmeans     KMeans (scikit-learn) on up to 5000 sampled opaque pixels,
           n_init=3, fixed seed. Clusters ordered by population.
histogram  Bins every opaque pixel to 32 levels per channel and returns
           the k most populated bin centres.

Transparent pixels (alpha < 125) never contribute.
"""

from typing import Protocol

import numpy as np
from sklearn.cluster import KMeans

from palette_engine.core.raster import Raster

SAMPLE_SIZE = 5000
SEED = 42
BIN_SIZE = 32


class Quantizer(Protocol):
    def extract(self, raster: Raster, k: int) -> list[tuple[int, int, int]]: ...


def _sample(pixels: np.ndarray, n_samples: int) -> np.ndarray:
    if len(pixels) > n_samples:
        indices = np.random.default_rng(SEED).choice(len(pixels), n_samples, replace=False)
        pixels = pixels[indices]
    return pixels


def _triples(centres: np.ndarray) -> list[tuple[int, int, int]]:
    return [(int(c[0]), int(c[1]), int(c[2])) for c in centres]


class KMeansQuantizer:
    name = 'kmeans'

    def __init__(self, n_samples: int = SAMPLE_SIZE, n_init: int = 3):
        self.n_samples = n_samples
        self.n_init = n_init

    def extract(self, raster: Raster, k: int) -> list[tuple[int, int, int]]:
        pixels = _sample(raster.opaque_pixels(), self.n_samples)
        if len(pixels) == 0:
            return []

        distinct = len(np.unique(pixels, axis=0))
        km = KMeans(n_clusters=min(k, distinct), n_init=self.n_init, random_state=SEED)
        km.fit(pixels.astype(np.float64))

        centres = np.clip(np.rint(km.cluster_centers_), 0, 255).astype(int)
        counts = np.bincount(km.labels_, minlength=len(centres))
        # stable sort keeps cluster index order between equal populations
        order = np.argsort(-counts, kind='stable')
        return _triples(centres[order])


class HistogramQuantizer:
    name = 'histogram'

    def __init__(self, bin_size: int = BIN_SIZE):
        self.bin_size = bin_size

    def extract(self, raster: Raster, k: int) -> list[tuple[int, int, int]]:
        pixels = raster.opaque_pixels().astype(int)
        if len(pixels) == 0:
            return []

        half = self.bin_size // 2
        quantized = np.minimum((pixels // self.bin_size) * self.bin_size + half, 255)
        unique, counts = np.unique(quantized, axis=0, return_counts=True)
        order = np.argsort(-counts, kind='stable')[:k]
        return _triples(unique[order])


QUANTIZERS: dict[str, type] = {
    KMeansQuantizer.name: KMeansQuantizer,
    HistogramQuantizer.name: HistogramQuantizer,
}


def get_quantizer(name: str) -> Quantizer:
    """Instantiate a quantizer by name."""
    if name not in QUANTIZERS:
        raise KeyError(f'Unknown quantizer: {name}. Available: {", ".join(sorted(QUANTIZERS))}')
    return QUANTIZERS[name]()
