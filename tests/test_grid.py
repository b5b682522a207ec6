"""Tests for the PixelGrid model and the color helpers."""

from __future__ import annotations

import numpy as np
import pytest

from fauxtoshop.colors import (
    BLACK,
    GREEN,
    WHITE,
    color_difference,
    difference_map,
    pack_rgb,
    unpack_rgb,
)
from fauxtoshop.errors import OutOfBoundsError
from fauxtoshop.grid import PixelGrid


class TestColors:
    def test_pack_and_unpack(self):
        color = pack_rgb(0x12, 0x34, 0x56)
        assert color == 0x123456
        assert unpack_rgb(color) == (0x12, 0x34, 0x56)

    def test_pack_rejects_out_of_range_channel(self):
        with pytest.raises(ValueError):
            pack_rgb(256, 0, 0)

    def test_difference_is_largest_channel_gap(self):
        # red differs by 10, green by 40, blue by 5
        assert color_difference(pack_rgb(100, 100, 100), pack_rgb(110, 60, 95)) == 40

    def test_difference_extremes(self):
        assert color_difference(BLACK, WHITE) == 255
        assert color_difference(GREEN, GREEN) == 0
        assert color_difference(0xFF0000, GREEN) == 255

    def test_difference_is_symmetric(self):
        a, b = pack_rgb(1, 200, 30), pack_rgb(90, 10, 30)
        assert color_difference(a, b) == color_difference(b, a)

    def test_difference_map_matches_scalar_metric(self):
        cells = np.array([[0x000000, 0x10FF20], [0x00F000, 0xFFFFFF]])
        expected = [[color_difference(int(v), GREEN) for v in row] for row in cells]
        assert difference_map(cells, GREEN).tolist() == expected


class TestPixelGrid:
    def test_dimensions(self):
        grid = PixelGrid.filled(3, 5, WHITE)
        assert grid.rows == 3
        assert grid.cols == 5
        assert grid.shape == (3, 5)
        assert len(grid) == 15

    def test_from_rows_round_trip(self):
        rows = [[BLACK, WHITE], [GREEN, 0x123456]]
        assert PixelGrid.from_rows(rows).to_rows() == rows

    def test_from_rows_rejects_ragged_input(self):
        with pytest.raises(ValueError):
            PixelGrid.from_rows([[BLACK, WHITE], [BLACK]])

    def test_rejects_non_24_bit_cells(self):
        with pytest.raises(ValueError):
            PixelGrid(np.array([[0x1000000]]))

    def test_indexing_and_bounds(self):
        grid = PixelGrid.from_rows([[BLACK, WHITE], [GREEN, BLACK]])
        assert grid[1, 0] == GREEN
        assert grid.get(0, 1) == WHITE
        assert grid.in_bounds(1, 1)
        assert not grid.in_bounds(2, 0)
        assert not grid.in_bounds(0, -1)

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, 2), (2, 0), (5, 5)])
    def test_out_of_bounds_access_raises(self, row, col):
        grid = PixelGrid.filled(2, 2, BLACK)
        with pytest.raises(OutOfBoundsError):
            grid.get(row, col)
        with pytest.raises(IndexError):
            grid[row, col]

    def test_cells_are_read_only(self):
        grid = PixelGrid.filled(2, 2, BLACK)
        with pytest.raises(ValueError):
            grid.cells[0, 0] = WHITE

    def test_construction_copies_input(self):
        source = np.zeros((2, 2), dtype=np.uint32)
        grid = PixelGrid(source)
        source[0, 0] = WHITE
        assert grid[0, 0] == BLACK

    def test_rgb_round_trip(self):
        grid = PixelGrid.from_rows([[0xFF0000, 0x00FF00], [0x0000FF, 0x808080]])
        rgb = grid.to_rgb()
        assert rgb.shape == (2, 2, 3)
        assert rgb.dtype == np.uint8
        assert rgb[0, 0].tolist() == [255, 0, 0]
        assert PixelGrid.from_rgb(rgb) == grid

    def test_iteration_is_row_major(self):
        grid = PixelGrid.from_rows([[1, 2], [3, 4]])
        assert [(r, c) for r, c, _ in grid] == [(0, 0), (0, 1), (1, 0), (1, 1)]
        assert [value for _, _, value in grid] == [1, 2, 3, 4]

    def test_equality(self):
        assert PixelGrid.filled(2, 3, WHITE) == PixelGrid.filled(2, 3, WHITE)
        assert PixelGrid.filled(2, 3, WHITE) != PixelGrid.filled(3, 2, WHITE)
        assert PixelGrid.filled(2, 3, WHITE) != PixelGrid.filled(2, 3, BLACK)
