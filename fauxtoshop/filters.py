"""
Pixel filters: scatter, edge detection, green-screen compositing, blur.

Every filter takes a :class:`PixelGrid` and returns a new one of the same
dimensions; inputs are never modified.
"""

import logging
import math
from typing import Optional

import cv2
import numpy as np

from .colors import BLACK, GREEN, WHITE, difference_map, split_channels
from .errors import InvalidParameterError
from .grid import CELL_DTYPE, PixelGrid
from .random_source import RandomSource

logger = logging.getLogger(__name__)

# Offsets of the 3x3 neighborhood, the cell itself included
NEIGHBORHOOD = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1)]


# ---------------------------------------------------------------------------
# Scatter
# ---------------------------------------------------------------------------


def _scatter_source(
    grid: PixelGrid, row: int, col: int, radius: int, rng: RandomSource
) -> int:
    """Pick the color of a random in-bounds cell within ``radius`` of (row, col).

    Out-of-bounds draws are discarded and redrawn rather than clamped. The
    loop terminates because (row, col) itself is always a legal draw.
    """
    while True:
        candidate_row = rng.random_integer(row - radius, row + radius)
        candidate_col = rng.random_integer(col - radius, col + radius)
        if grid.in_bounds(candidate_row, candidate_col):
            return int(grid.cells[candidate_row, candidate_col])


def scatter(grid: PixelGrid, radius: int, rng: Optional[RandomSource] = None) -> PixelGrid:
    """Resample every cell from a random neighbor at most ``radius`` away per axis.

    Cells are visited in row-major order, so a seeded ``rng`` gives the same
    output on every run.
    """
    if radius < 1:
        raise InvalidParameterError("radius", radius, ">= 1")
    if rng is None:
        rng = RandomSource()

    logger.debug("Scatter %dx%d grid, radius=%d, %r", grid.rows, grid.cols, radius, rng)
    result = np.empty(grid.shape, dtype=CELL_DTYPE)
    for row in range(grid.rows):
        for col in range(grid.cols):
            result[row, col] = _scatter_source(grid, row, col, radius, rng)
    return PixelGrid(result)


# ---------------------------------------------------------------------------
# Edge detection
# ---------------------------------------------------------------------------


def edge_mask(grid: PixelGrid, threshold: int) -> np.ndarray:
    """Boolean map, True where some 3x3 neighbor differs by more than ``threshold``.

    Neighborhoods are clipped at the border; nothing wraps around.
    """
    rows, cols = grid.shape
    channels = split_channels(grid.cells)
    mask = np.zeros((rows, cols), dtype=bool)

    for dr, dc in NEIGHBORHOOD:
        r0, r1 = max(0, -dr), rows - max(0, dr)
        c0, c1 = max(0, -dc), cols - max(0, dc)
        if r1 <= r0 or c1 <= c0:
            continue
        center = channels[r0:r1, c0:c1]
        neighbor = channels[r0 + dr:r1 + dr, c0 + dc:c1 + dc]
        difference = np.abs(center - neighbor).max(axis=-1)
        mask[r0:r1, c0:c1] |= difference > threshold

    return mask


def detect_edges(grid: PixelGrid, threshold: int) -> PixelGrid:
    """Black where a cell sits on an edge, white everywhere else."""
    if threshold < 0:
        raise InvalidParameterError("threshold", threshold, ">= 0")

    mask = edge_mask(grid, threshold)
    logger.debug(
        "Edge detection on %dx%d grid, threshold=%d: %d edge cells",
        grid.rows, grid.cols, threshold, int(mask.sum()),
    )
    return PixelGrid(np.where(mask, BLACK, WHITE).astype(CELL_DTYPE))


# ---------------------------------------------------------------------------
# Green screen
# ---------------------------------------------------------------------------


def composite(
    base: PixelGrid,
    sticker: PixelGrid,
    offset_row: int,
    offset_col: int,
    tolerance: int,
    key_color: int = GREEN,
) -> PixelGrid:
    """Paste ``sticker`` onto ``base`` with its top-left at (offset_row, offset_col).

    Sticker cells within ``tolerance`` of ``key_color`` (difference <=
    tolerance) are transparent. Cells that land outside ``base`` are dropped.
    """
    if tolerance < 0:
        raise InvalidParameterError("tolerance", tolerance, ">= 0")

    result = base.mutable_cells()

    top, bottom = max(0, offset_row), min(base.rows, offset_row + sticker.rows)
    left, right = max(0, offset_col), min(base.cols, offset_col + sticker.cols)
    if bottom <= top or right <= left:
        logger.debug(
            "Sticker at (%d, %d) misses the %dx%d base entirely",
            offset_row, offset_col, base.rows, base.cols,
        )
        return PixelGrid(result)

    region = sticker.cells[
        top - offset_row:bottom - offset_row,
        left - offset_col:right - offset_col,
    ]
    opaque = difference_map(region, key_color) > tolerance
    target = result[top:bottom, left:right]
    target[opaque] = region[opaque]

    logger.debug(
        "Composited %d of %d sticker cells at (%d, %d), tolerance=%d",
        int(opaque.sum()), sticker.rows * sticker.cols, offset_row, offset_col, tolerance,
    )
    return PixelGrid(result)


# ---------------------------------------------------------------------------
# Gaussian blur
# ---------------------------------------------------------------------------


def gaussian_kernel(radius: int) -> np.ndarray:
    """Normalised 1-D Gaussian weights for ``[-radius, radius]``.

    Sigma equals the radius. Returns an empty array when ``radius < 1``.
    """
    if radius < 1:
        return np.zeros(0, dtype=np.float64)
    offsets = np.arange(-radius, radius + 1, dtype=np.float64)
    kernel = np.exp(-(offsets ** 2) / (2.0 * radius * radius)) / (math.sqrt(2.0 * math.pi) * radius)
    return kernel / kernel.sum()


def gaussian_blur(grid: PixelGrid, radius: int) -> PixelGrid:
    """Blur each channel with a separable Gaussian of the given radius.

    Rows are convolved first, then columns; borders replicate the edge cell.
    """
    if radius < 1:
        raise InvalidParameterError("radius", radius, ">= 1")
    if grid.rows == 0 or grid.cols == 0:
        return grid.copy()

    kernel = gaussian_kernel(radius).astype(np.float32)
    rgb = grid.to_rgb().astype(np.float32)
    blurred = cv2.sepFilter2D(
        rgb, -1, kernel, kernel, borderType=cv2.BORDER_REPLICATE
    )
    blurred = np.clip(np.rint(blurred), 0, 255).astype(np.uint8)
    logger.debug("Gaussian blur on %dx%d grid, radius=%d", grid.rows, grid.cols, radius)
    return PixelGrid.from_rgb(blurred)
