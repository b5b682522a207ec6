"""Read and write PixelGrids through Pillow."""

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from .config import IMAGE_EXTENSIONS
from .errors import ImageLoadError, UnsupportedFormatError
from .grid import PixelGrid

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_grid(path: PathLike) -> PixelGrid:
    """Decode an image file into a grid, dropping any alpha channel."""
    path = Path(path)
    try:
        with Image.open(path) as img:
            if img.mode != "RGB":
                img = img.convert("RGB")
            pixels = np.array(img)
    except (OSError, UnidentifiedImageError) as exc:
        raise ImageLoadError(f"Could not load image: {path}") from exc

    grid = PixelGrid.from_rgb(pixels)
    logger.debug("Loaded %s as %dx%d grid", path.name, grid.rows, grid.cols)
    return grid


def save_grid(grid: PixelGrid, path: PathLike) -> Path:
    """Encode ``grid`` to ``path``; the suffix picks the file format."""
    path = Path(path)
    if path.suffix.lower() not in IMAGE_EXTENSIONS:
        raise UnsupportedFormatError(
            f"Cannot save {path.name}: expected one of {', '.join(sorted(IMAGE_EXTENSIONS))}"
        )
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(grid.to_rgb()).save(path)
    logger.debug("Saved %dx%d grid to %s", grid.rows, grid.cols, path)
    return path
