"""Fauxtoshop configuration: parameter ranges, seeds, file types."""

from dataclasses import dataclass
from typing import Optional

from .colors import GREEN
from .errors import InvalidParameterError


# ---------------------------------------------------------------------------
# Parameter ranges accepted at the command line
# ---------------------------------------------------------------------------
MIN_SCATTER_RADIUS = 1
MAX_SCATTER_RADIUS = 100

MIN_EDGE_THRESHOLD = 0

MIN_TOLERANCE = 0
MAX_TOLERANCE = 100

MIN_BLUR_RADIUS = 1
MAX_BLUR_RADIUS = 100

# Seed of the reproducible "fake" random sequence used for reference outputs
DEFAULT_SEED = 106

# File types the imaging adapter reads and writes
IMAGE_EXTENSIONS = {".bmp", ".gif", ".ppm", ".jpg", ".jpeg", ".png"}


def check_range(name: str, value: int, low: int, high: Optional[int] = None) -> int:
    """Return ``value`` if ``low <= value <= high``; raise otherwise."""
    if value < low or (high is not None and value > high):
        requirement = f">= {low}" if high is None else f"in [{low}, {high}]"
        raise InvalidParameterError(name, value, requirement)
    return value


@dataclass
class FilterConfig:
    """Settings for a single filter run, as collected by the CLI."""
    scatter_radius: int = 5
    edge_threshold: int = 30
    tolerance: int = 10
    key_color: int = GREEN
    blur_radius: int = 2
    seed: Optional[int] = None

    def validate(self) -> "FilterConfig":
        check_range("radius", self.scatter_radius, MIN_SCATTER_RADIUS, MAX_SCATTER_RADIUS)
        check_range("threshold", self.edge_threshold, MIN_EDGE_THRESHOLD)
        check_range("tolerance", self.tolerance, MIN_TOLERANCE, MAX_TOLERANCE)
        check_range("blur radius", self.blur_radius, MIN_BLUR_RADIUS, MAX_BLUR_RADIUS)
        check_range("key color", self.key_color, 0, 0xFFFFFF)
        return self
