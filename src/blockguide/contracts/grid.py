"""Rasterization stage contract.

Enforces the guarantee that the rasterizer produced a rectangular boolean
grid of the expected extent.
"""

import numpy as np
from blockguide.contracts.base import require


def assert_rasterized(grid: np.ndarray, width: int, height: int, padding: int) -> None:
    """Enforce rasterization stage contract.

    Parameters
    ----------
    grid : np.ndarray
        Activity grid from rasterize()

    width, height : int
        Shape dimensions the grid was produced for

    padding : int
        Padding cells added on every side

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    require(
        grid.ndim == 2,
        f"Grid contract violated: activity grid has {grid.ndim} dims, expected 2"
    )
    require(
        grid.dtype == np.bool_,
        f"Grid contract violated: activity grid dtype is {grid.dtype}, expected bool"
    )

    expected = (max(height + 2 * padding, 0), max(width + 2 * padding, 0))
    require(
        grid.shape == expected,
        f"Grid contract violated: shape is {grid.shape}, expected {expected}"
    )
