"""Decoded pixel data the engine reads from.

A Raster wraps a read-only (height, width, channels) uint8 numpy array in
row-major order, with 3 (RGB) or 4 (RGBA) channels. The engine never decodes
image files: callers hand over a Pillow image, an array, or raw bytes.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from PIL import Image

# Pixels with alpha below this are treated as transparent background
ALPHA_THRESHOLD = 125


@dataclass(frozen=True, eq=False)
class Raster:
    pixels: np.ndarray

    def __post_init__(self) -> None:
        if self.pixels.ndim != 3 or self.pixels.shape[2] not in (3, 4):
            raise ValueError(f'Raster needs shape (height, width, 3|4), got {self.pixels.shape}')

    @classmethod
    def from_array(cls, array: np.ndarray) -> Raster:
        """Copy array into a read-only uint8 raster."""
        pixels = np.array(array, dtype=np.uint8, copy=True)
        pixels.setflags(write=False)
        return cls(pixels)

    @classmethod
    def from_image(cls, image: Image.Image) -> Raster:
        """Build a raster from a Pillow image of any mode (converted to RGBA)."""
        return cls.from_array(np.asarray(image.convert('RGBA')))

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes, channels: int = 4) -> Raster:
        """Build a raster from a row-major RGBA (or RGB) byte buffer."""
        expected = width * height * channels
        if len(data) != expected:
            raise ValueError(f'Expected {expected} bytes for {width}x{height}x{channels}, got {len(data)}')
        flat = np.frombuffer(data, dtype=np.uint8)
        return cls.from_array(flat.reshape(height, width, channels))

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def channels(self) -> int:
        return int(self.pixels.shape[2])

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def rgb(self) -> np.ndarray:
        """(height, width, 3) view of the colour channels."""
        return self.pixels[:, :, :3]

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        px = self.pixels[y, x]
        return (int(px[0]), int(px[1]), int(px[2]))

    def opaque_pixels(self, alpha_threshold: int = ALPHA_THRESHOLD) -> np.ndarray:
        """(n, 3) array of RGB values for pixels that are not transparent."""
        flat = self.pixels.reshape(-1, self.channels)
        if self.channels == 4:
            flat = flat[flat[:, 3] >= alpha_threshold]
        return flat[:, :3]
