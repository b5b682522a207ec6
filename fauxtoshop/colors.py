"""Packed 24-bit RGB colors and the channel-wise difference metric.

A color is a plain ``int`` laid out as ``0xRRGGBB``; the high byte is zero.
"""

from typing import Tuple, Union

import numpy as np

WHITE = 0xFFFFFF
BLACK = 0x000000
GREEN = 0x00FF00
# Highlight used when drawing pixel differences
MAGENTA = 0xFF00FF

COLOR_MASK = 0xFFFFFF


def pack_rgb(red: int, green: int, blue: int) -> int:
    """Combine three 0-255 channels into one packed color."""
    for value in (red, green, blue):
        if not 0 <= value <= 255:
            raise ValueError(f"Channel value {value} outside [0, 255]")
    return (red << 16) | (green << 8) | blue


def unpack_rgb(color: int) -> Tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def red(color: int) -> int:
    return (color >> 16) & 0xFF


def green(color: int) -> int:
    return (color >> 8) & 0xFF


def blue(color: int) -> int:
    return color & 0xFF


def color_difference(first: int, second: int) -> int:
    """Largest absolute per-channel difference between two colors.

    This is the Chebyshev distance in RGB space, so a single threshold means
    the same thing for each of the three channels.
    """
    r1, g1, b1 = unpack_rgb(first)
    r2, g2, b2 = unpack_rgb(second)
    return max(abs(r1 - r2), abs(g1 - g2), abs(b1 - b2))


def split_channels(cells: np.ndarray) -> np.ndarray:
    """Expand packed cells of shape ``(H, W)`` into an ``(H, W, 3)`` int32 array."""
    cells = np.asarray(cells, dtype=np.int64)
    return np.stack(
        [(cells >> 16) & 0xFF, (cells >> 8) & 0xFF, cells & 0xFF], axis=-1
    ).astype(np.int32)


def difference_map(
    cells: np.ndarray, other: Union[int, np.ndarray]
) -> np.ndarray:
    """Vectorised :func:`color_difference` over packed cell arrays.

    ``other`` is either a single packed color or an array broadcastable
    against ``cells``.
    """
    ours = split_channels(cells)
    theirs = split_channels(np.asarray(other))
    return np.abs(ours - theirs).max(axis=-1)
