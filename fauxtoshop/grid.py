"""
PixelGrid: the in-memory raster every filter reads and writes.

Cells are packed ``0xRRGGBB`` integers held in a 2-D numpy array indexed
``[row, col]``. A grid owns a private, read-only copy of its cells, so the
"original" and "result" of a filter pass never alias each other.
"""

from typing import Iterator, List, Sequence, Tuple

import numpy as np

from .colors import COLOR_MASK, split_channels
from .errors import OutOfBoundsError

CELL_DTYPE = np.uint32


class PixelGrid:
    """Immutable rows x cols grid of packed RGB colors."""

    __slots__ = ("_cells",)

    def __init__(self, cells: np.ndarray):
        array = np.array(cells, dtype=np.int64, copy=True)
        if array.ndim != 2:
            raise ValueError(f"PixelGrid needs a 2-D cell array, got shape {array.shape}")
        if array.size and (array.min() < 0 or array.max() > COLOR_MASK):
            raise ValueError("PixelGrid cells must be 24-bit packed colors")
        array = array.astype(CELL_DTYPE)
        array.setflags(write=False)
        self._cells = array

    # ------------------------- constructors ---------------------------

    @classmethod
    def filled(cls, rows: int, cols: int, color: int) -> "PixelGrid":
        if rows < 0 or cols < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {rows}x{cols}")
        return cls(np.full((rows, cols), color, dtype=CELL_DTYPE))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "PixelGrid":
        """Build a grid from nested row lists, e.g. ``[[BLACK, WHITE], ...]``."""
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise ValueError(f"Rows have differing lengths: {sorted(widths)}")
        if not rows:
            return cls(np.zeros((0, 0), dtype=CELL_DTYPE))
        return cls(np.array(rows, dtype=np.int64))

    @classmethod
    def from_rgb(cls, pixels: np.ndarray) -> "PixelGrid":
        """Pack an ``(H, W, 3)`` uint8 array into a grid."""
        pixels = np.asarray(pixels)
        if pixels.ndim != 3 or pixels.shape[2] < 3:
            raise ValueError(f"Expected an (H, W, 3) RGB array, got shape {pixels.shape}")
        channels = pixels[:, :, :3].astype(np.int64)
        packed = (channels[:, :, 0] << 16) | (channels[:, :, 1] << 8) | channels[:, :, 2]
        return cls(packed)

    # ------------------------- accessors ---------------------------

    @property
    def rows(self) -> int:
        return int(self._cells.shape[0])

    @property
    def cols(self) -> int:
        return int(self._cells.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the packed cell array."""
        return self._cells

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> int:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self.shape)
        return int(self._cells[row, col])

    def __getitem__(self, position: Tuple[int, int]) -> int:
        row, col = position
        return self.get(row, col)

    def __iter__(self) -> Iterator[Tuple[int, int, int]]:
        """Yield ``(row, col, color)`` in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col, int(self._cells[row, col])

    def __len__(self) -> int:
        return int(self._cells.size)

    # ------------------------- conversion ---------------------------

    def copy(self) -> "PixelGrid":
        return PixelGrid(self._cells)

    def mutable_cells(self) -> np.ndarray:
        """Writable copy of the cells for building a new grid."""
        return self._cells.copy()

    def to_rows(self) -> List[List[int]]:
        return [[int(value) for value in row] for row in self._cells]

    def to_rgb(self) -> np.ndarray:
        """Unpack into an ``(H, W, 3)`` uint8 array for Pillow/OpenCV."""
        return split_channels(self._cells).astype(np.uint8)

    # ------------------------- comparison ---------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._cells, other._cells))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PixelGrid(rows={self.rows}, cols={self.cols})"
