"""Pixel-exact comparison of two grids."""

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .colors import MAGENTA
from .errors import DimensionMismatchError
from .grid import PixelGrid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiffReport:
    """Where and how often two equally sized grids disagree."""
    count: int
    positions: Tuple[Tuple[int, int], ...]
    total: int

    @property
    def identical(self) -> bool:
        return self.count == 0

    @property
    def percent(self) -> float:
        return 100.0 * self.count / max(self.total, 1)


def _require_same_shape(first: PixelGrid, second: PixelGrid) -> None:
    if first.shape != second.shape:
        raise DimensionMismatchError(first.shape, second.shape)


def diff_mask(first: PixelGrid, second: PixelGrid) -> np.ndarray:
    """Boolean map, True where the packed colors differ."""
    _require_same_shape(first, second)
    return first.cells != second.cells


def diff(first: PixelGrid, second: PixelGrid) -> DiffReport:
    """Count and locate every position whose color differs between the grids."""
    mask = diff_mask(first, second)
    positions = tuple((int(r), int(c)) for r, c in np.argwhere(mask))
    report = DiffReport(count=len(positions), positions=positions, total=int(mask.size))
    logger.debug("Diff of %dx%d grids: %d differing cells", first.rows, first.cols, report.count)
    return report


def render_diff(first: PixelGrid, second: PixelGrid, highlight: int = MAGENTA) -> PixelGrid:
    """Copy of ``first`` with every differing cell painted ``highlight``."""
    mask = diff_mask(first, second)
    cells = first.mutable_cells()
    cells[mask] = highlight
    return PixelGrid(cells)
