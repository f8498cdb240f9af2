"""Image decoding for commands. The engine itself only sees Raster objects."""

import os

from PIL import Image, UnidentifiedImageError

from palette_engine.core.raster import Raster


class ImageLoadError(Exception):
    pass


def load_raster(path: str) -> Raster:
    """Decode an image file with Pillow into a Raster."""
    if not os.path.isfile(path):
        raise ImageLoadError(f'image not found: {path}')
    try:
        with Image.open(path) as image:
            return Raster.from_image(image)
    except (UnidentifiedImageError, OSError) as e:
        raise ImageLoadError(f'cannot read image {path}: {e}') from e
