"""Helpers deriving secondary grids from an activity grid.

- outline_grid: boundary blocks (the only blocks a build guide walks)
- display_grid: what is shown for the current fill mode
- count_blocks: number of blocks needed to build the shape
"""

import numpy as np

__all__ = ['outline_grid', 'display_grid', 'count_blocks']


def outline_grid(grid: np.ndarray) -> np.ndarray:
    """Return the outline of an activity grid.

    A cell is outline when it is active and at least one of its four
    direct neighbors is inactive or lies outside the grid.

    Parameters
    ----------
    grid : np.ndarray
        2D boolean activity grid.

    Returns
    -------
    np.ndarray
        Boolean grid of the same shape.
    """
    grid = np.asarray(grid, dtype=bool)
    padded = np.pad(grid, 1, mode="constant", constant_values=False)

    up = padded[:-2, 1:-1]
    down = padded[2:, 1:-1]
    left = padded[1:-1, :-2]
    right = padded[1:-1, 2:]

    return grid & ~(up & down & left & right)


def display_grid(grid: np.ndarray, filled: bool) -> np.ndarray:
    """Cells shown for the given fill mode: all active cells, or only the outline."""
    grid = np.asarray(grid, dtype=bool)
    if filled:
        return grid.copy()
    return outline_grid(grid)


def count_blocks(grid: np.ndarray, filled: bool) -> int:
    """Count the blocks needed to build the shape in the given fill mode."""
    return int(display_grid(grid, filled).sum())
