"""Compute the Mandelbrot set and render it as text."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def mandelbrot_at_point(cx: float, cy: float, max_iters: int) -> int:
    """Return the iteration at which the point escapes, or ``max_iters``."""
    z = complex(0.0, 0.0)
    c = complex(cx, cy)
    for i in range(max_iters + 1):
        if abs(z) > 2.0:
            return i
        z = z * z + c
    return max_iters


def calculate_mandelbrot(
    max_iters: int,
    x_min: float,
    x_max: float,
    y_min: float,
    y_max: float,
    width: int,
    height: int,
) -> list[list[int]]:
    """Return escape counts for a ``height`` by ``width`` grid over the region."""
    rows = []
    for img_y in range(height):
        y_percent = img_y / height
        cy = y_min + (y_max - y_min) * y_percent
        rows.append(
            [
                mandelbrot_at_point(
                    x_min + (x_max - x_min) * (img_x / width), cy, max_iters
                )
                for img_x in range(width)
            ]
        )
    return rows


_SYMBOLS = (
    (2, " "),
    (5, "."),
    (10, "•"),
    (30, "*"),
    (100, "+"),
    (200, "x"),
    (400, "$"),
    (700, "#"),
)


def _symbol(value: int) -> str:
    for upper, char in _SYMBOLS:
        if value <= upper:
            return char
    return "%"


def render_mandelbrot(escape_vals: Sequence[Sequence[int]]) -> list[str]:
    """Turn rows of escape counts into lines of text."""
    return ["".join(_symbol(value) for value in row) for row in escape_vals]


def main(argv: list[str] | None = None) -> int:
    """Print the Mandelbrot set to standard output."""
    parser = argparse.ArgumentParser(
        prog="mandelbrot", description="render the Mandelbrot set as text"
    )
    parser.add_argument("--max-iters", type=int, default=100000)
    parser.add_argument("--width", type=int, default=100)
    parser.add_argument("--height", type=int, default=24)
    args = parser.parse_args(argv)

    grid = calculate_mandelbrot(
        args.max_iters, -2.0, 1.0, -1.0, 1.0, args.width, args.height
    )
    for line in render_mandelbrot(grid):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())