"""
Startup configuration for the maze animator.
Values are read once at process start; the CLI may override them.
"""
from typing import Tuple

# Pixel size of one grid cell
CELL_SIZE = 20

# Width (and height) of the square canvas in pixels
WINDOW_SIZE = 600

# Generator ticks per second
FRAMERATE = 60


def grid_dimensions(window_size: int = WINDOW_SIZE, cell_size: int = CELL_SIZE) -> Tuple[int, int]:
    """Returns (rows, cols) for a square canvas: floor(window_size / cell_size) each."""
    if window_size <= 0 or cell_size <= 0:
        raise ValueError(f"Window size and cell size must be positive, got {window_size} and {cell_size}")

    n = window_size // cell_size
    if n < 1:
        raise ValueError(f"Cell size {cell_size} does not fit in a {window_size}px window")
    return n, n
