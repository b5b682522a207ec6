"""Public interface for the Fauxtoshop pixel filter toolkit."""

from __future__ import annotations

from .colors import BLACK, GREEN, MAGENTA, WHITE, color_difference, pack_rgb, unpack_rgb
from .diff import DiffReport, diff, render_diff
from .errors import (
    DimensionMismatchError,
    FauxtoshopError,
    ImageLoadError,
    InvalidLocationError,
    InvalidParameterError,
    OutOfBoundsError,
    UnsupportedFormatError,
)
from .filters import composite, detect_edges, gaussian_blur, gaussian_kernel, scatter
from .grid import PixelGrid
from .imaging import load_grid, save_grid
from .location import parse_location
from .random_source import RandomSource

__all__ = [
    "BLACK",
    "GREEN",
    "MAGENTA",
    "WHITE",
    "DiffReport",
    "DimensionMismatchError",
    "FauxtoshopError",
    "ImageLoadError",
    "InvalidLocationError",
    "InvalidParameterError",
    "OutOfBoundsError",
    "PixelGrid",
    "RandomSource",
    "UnsupportedFormatError",
    "color_difference",
    "composite",
    "detect_edges",
    "diff",
    "gaussian_blur",
    "gaussian_kernel",
    "load_grid",
    "pack_rgb",
    "parse_location",
    "render_diff",
    "save_grid",
    "scatter",
    "unpack_rgb",
]
