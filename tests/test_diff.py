"""Tests for pixel-exact grid comparison."""

from __future__ import annotations

import pytest

from fauxtoshop.colors import BLACK, MAGENTA, WHITE
from fauxtoshop.diff import DiffReport, diff, render_diff
from fauxtoshop.errors import DimensionMismatchError
from fauxtoshop.grid import PixelGrid


def _make_pair():
    first = PixelGrid.from_rows([[BLACK, WHITE, BLACK], [WHITE, WHITE, WHITE]])
    second = PixelGrid.from_rows([[BLACK, BLACK, BLACK], [WHITE, WHITE, 0xFFFFFE]])
    return first, second


class TestDiff:
    def test_counts_and_locates_differences(self):
        first, second = _make_pair()
        report = diff(first, second)
        assert report.count == 2
        assert report.positions == ((0, 1), (1, 2))
        assert report.total == 6
        assert report.percent == pytest.approx(100.0 * 2 / 6)
        assert not report.identical

    def test_reflexive(self):
        first, _ = _make_pair()
        report = diff(first, first)
        assert report.count == 0
        assert report.positions == ()
        assert report.identical

    def test_symmetric(self):
        first, second = _make_pair()
        assert diff(first, second).count == diff(second, first).count
        assert diff(first, second).positions == diff(second, first).positions

    def test_single_channel_step_counts(self):
        first = PixelGrid.filled(1, 1, 0x000000)
        second = PixelGrid.filled(1, 1, 0x000001)
        assert diff(first, second).count == 1

    @pytest.mark.parametrize("shape", [(2, 4), (3, 3), (1, 3), (0, 0)])
    def test_dimension_mismatch_raises(self, shape):
        first, _ = _make_pair()
        other = PixelGrid.filled(shape[0], shape[1], BLACK)
        with pytest.raises(DimensionMismatchError) as excinfo:
            diff(first, other)
        assert excinfo.value.first == (2, 3)
        assert excinfo.value.second == shape

    def test_prefix_match_is_not_enough(self):
        wide = PixelGrid.filled(2, 4, WHITE)
        narrow = PixelGrid.filled(2, 3, WHITE)
        with pytest.raises(ValueError):
            diff(wide, narrow)

    def test_empty_grids_are_identical(self):
        empty = PixelGrid.filled(0, 0, BLACK)
        assert diff(empty, empty) == DiffReport(count=0, positions=(), total=0)


class TestRenderDiff:
    def test_highlights_differences_in_magenta(self):
        first, second = _make_pair()
        overlay = render_diff(first, second)
        assert overlay.to_rows() == [[BLACK, MAGENTA, BLACK], [WHITE, WHITE, MAGENTA]]

    def test_custom_highlight_and_inputs_untouched(self):
        first, second = _make_pair()
        before = first.to_rows()
        overlay = render_diff(first, second, highlight=0x123456)
        assert overlay[0, 1] == 0x123456
        assert first.to_rows() == before

    def test_mismatch_raises(self):
        with pytest.raises(DimensionMismatchError):
            render_diff(PixelGrid.filled(1, 2, BLACK), PixelGrid.filled(2, 1, BLACK))
