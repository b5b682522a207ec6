"""Command line front end for the Fauxtoshop filters.

Usage:
    python -m fauxtoshop.cli scatter      <image> --radius 5          [-o out.png] [--seed 7 | --fixed-seed]
    python -m fauxtoshop.cli edges        <image> --threshold 30      [-o out.png]
    python -m fauxtoshop.cli green-screen <image> <sticker> --at "(10,20)" [--tolerance 10] [-o out.png]
    python -m fauxtoshop.cli compare      <image> <other>             [--diff-output diff.png]
    python -m fauxtoshop.cli blur         <image> --radius 2          [-o out.png]

Each subcommand loads the image, applies one filter and, when ``-o`` is
given, saves the result. Without ``-o`` saving is skipped.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .colors import GREEN
from .config import (
    DEFAULT_SEED,
    MAX_BLUR_RADIUS,
    MAX_SCATTER_RADIUS,
    MAX_TOLERANCE,
    FilterConfig,
)
from .diff import diff, render_diff
from .errors import FauxtoshopError
from .filters import composite, detect_edges, gaussian_blur, scatter
from .grid import PixelGrid
from .imaging import load_grid, save_grid
from .location import parse_location
from .random_source import RandomSource

logger = logging.getLogger("fauxtoshop")


def _setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _parse_color(text: str) -> int:
    """Accept ``00ff00``, ``#00FF00`` or ``0x00ff00``."""
    value = text.strip().lower()
    for prefix in ("#", "0x"):
        if value.startswith(prefix):
            value = value[len(prefix):]
    try:
        color = int(value, 16)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a hex color: {text!r}")
    if len(value) != 6 or not 0 <= color <= 0xFFFFFF:
        raise argparse.ArgumentTypeError(f"expected six hex digits, got {text!r}")
    return color


def _save_result(grid: PixelGrid, output: Optional[str]) -> None:
    if not output:
        logger.info("No output path given, skipping save")
        return
    path = save_grid(grid, output)
    logger.info("Saved %dx%d image -> %s", grid.rows, grid.cols, path)


# ---- Subcommand: scatter ----

def cmd_scatter(args) -> int:
    cfg = FilterConfig(scatter_radius=args.radius, seed=args.seed).validate()
    rng = RandomSource.fixed() if args.fixed_seed else RandomSource(cfg.seed)

    grid = load_grid(args.image)
    logger.info("Scattering %s (radius=%d)", Path(args.image).name, cfg.scatter_radius)
    result = scatter(grid, cfg.scatter_radius, rng)
    _save_result(result, args.output)
    return 0


# ---- Subcommand: edges ----

def cmd_edges(args) -> int:
    cfg = FilterConfig(edge_threshold=args.threshold).validate()

    grid = load_grid(args.image)
    logger.info("Detecting edges in %s (threshold=%d)", Path(args.image).name, cfg.edge_threshold)
    result = detect_edges(grid, cfg.edge_threshold)
    _save_result(result, args.output)
    return 0


# ---- Subcommand: green-screen ----

def cmd_green_screen(args) -> int:
    cfg = FilterConfig(tolerance=args.tolerance, key_color=args.key_color).validate()
    row, col = parse_location(args.at)

    base = load_grid(args.image)
    sticker = load_grid(args.sticker)
    logger.info(
        "Placing %s on %s at (%d,%d), tolerance=%d",
        Path(args.sticker).name, Path(args.image).name, row, col, cfg.tolerance,
    )
    result = composite(base, sticker, row, col, cfg.tolerance, cfg.key_color)
    _save_result(result, args.output)
    return 0


# ---- Subcommand: compare ----

def cmd_compare(args) -> int:
    first = load_grid(args.image)
    second = load_grid(args.other)

    report = diff(first, second)
    if report.identical:
        logger.info("These images are the same!")
        return 0

    logger.info("These images differ in %d pixel locations!", report.count)
    logger.debug("%.2f%% of %d pixels differ", report.percent, report.total)
    if args.diff_output:
        path = save_grid(render_diff(first, second), args.diff_output)
        logger.info("Difference image -> %s", path)
    return 0


# ---- Subcommand: blur ----

def cmd_blur(args) -> int:
    cfg = FilterConfig(blur_radius=args.radius).validate()

    grid = load_grid(args.image)
    logger.info("Blurring %s (radius=%d)", Path(args.image).name, cfg.blur_radius)
    result = gaussian_blur(grid, cfg.blur_radius)
    _save_result(result, args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fauxtoshop",
        description="Apply simple pixel filters to an image.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    # -- scatter --
    p_scatter = sub.add_parser("scatter", help="Scatter pixels within a radius")
    p_scatter.add_argument("image", help="Image to filter")
    p_scatter.add_argument("--radius", type=int, required=True,
                           help=f"Degree of scatter [1 - {MAX_SCATTER_RADIUS}]")
    seed_group = p_scatter.add_mutually_exclusive_group()
    seed_group.add_argument("--seed", type=int, default=None,
                            help="Random seed for reproducible output")
    seed_group.add_argument("--fixed-seed", action="store_true",
                            help=f"Use the reference seed ({DEFAULT_SEED})")
    p_scatter.add_argument("-o", "--output", default=None,
                           help="Where to save the result (default: don't save)")
    p_scatter.set_defaults(func=cmd_scatter)

    # -- edges --
    p_edges = sub.add_parser("edges", help="Black-and-white edge detection")
    p_edges.add_argument("image", help="Image to filter")
    p_edges.add_argument("--threshold", type=int, required=True,
                         help="Channel difference above which a neighbor marks an edge")
    p_edges.add_argument("-o", "--output", default=None,
                         help="Where to save the result (default: don't save)")
    p_edges.set_defaults(func=cmd_edges)

    # -- green-screen --
    p_green = sub.add_parser("green-screen", help="Overlay a green-screened sticker")
    p_green.add_argument("image", help="Background image")
    p_green.add_argument("sticker", help="Sticker image with a green background")
    p_green.add_argument("--at", required=True,
                         help='Sticker top-left as "(row,col)"')
    p_green.add_argument("--tolerance", type=int, default=FilterConfig.tolerance,
                         help=f"Key color tolerance [0 - {MAX_TOLERANCE}] "
                              f"(default: {FilterConfig.tolerance})")
    p_green.add_argument("--key-color", type=_parse_color, default=GREEN,
                         help="Hex color treated as transparent (default: 00ff00)")
    p_green.add_argument("-o", "--output", default=None,
                         help="Where to save the result (default: don't save)")
    p_green.set_defaults(func=cmd_green_screen)

    # -- compare --
    p_compare = sub.add_parser("compare", help="Count differing pixels between two images")
    p_compare.add_argument("image", help="First image")
    p_compare.add_argument("other", help="Image to compare against")
    p_compare.add_argument("--diff-output", default=None,
                           help="Save the first image with differences in magenta")
    p_compare.set_defaults(func=cmd_compare)

    # -- blur --
    p_blur = sub.add_parser("blur", help="Gaussian blur")
    p_blur.add_argument("image", help="Image to filter")
    p_blur.add_argument("--radius", type=int, required=True,
                        help=f"Blur radius [1 - {MAX_BLUR_RADIUS}]")
    p_blur.add_argument("-o", "--output", default=None,
                        help="Where to save the result (default: don't save)")
    p_blur.set_defaults(func=cmd_blur)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.debug)
    try:
        return args.func(args)
    except FauxtoshopError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
