"""Exception types raised by the Fauxtoshop filters and helpers."""

from typing import Tuple


class FauxtoshopError(Exception):
    """Base class for every error the toolkit raises on purpose."""


class InvalidParameterError(FauxtoshopError, ValueError):
    """A filter parameter falls outside the range the algorithm accepts."""

    def __init__(self, name: str, value, requirement: str):
        self.name = name
        self.value = value
        self.requirement = requirement
        super().__init__(f"Invalid {name}={value!r}: must be {requirement}")


class InvalidLocationError(InvalidParameterError):
    """Text that does not parse as a non-negative ``(row,col)`` pair."""

    def __init__(self, text: str):
        super().__init__("location", text, 'of the form "(row,col)" with non-negative integers')


class DimensionMismatchError(FauxtoshopError, ValueError):
    """Two grids that must share a shape do not."""

    def __init__(self, first: Tuple[int, int], second: Tuple[int, int]):
        self.first = first
        self.second = second
        super().__init__(
            f"Grid dimensions differ: {first[0]}x{first[1]} vs {second[0]}x{second[1]}"
        )


class OutOfBoundsError(FauxtoshopError, IndexError):
    """A coordinate lies outside a grid."""

    def __init__(self, row: int, col: int, shape: Tuple[int, int]):
        self.row = row
        self.col = col
        self.shape = shape
        super().__init__(
            f"({row}, {col}) is outside a {shape[0]}x{shape[1]} grid"
        )


class ImageLoadError(FauxtoshopError):
    """An image file could not be opened or decoded."""


class UnsupportedFormatError(FauxtoshopError):
    """An image path carries an extension the toolkit does not write."""
