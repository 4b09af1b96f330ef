"""Ellipse rasterization onto a padded block grid.

The rasterizer answers one question per cell: does this block belong to an
ellipse of the requested width and height? Radii are inflated by half a
cell so the discrete shape matches a continuous ellipse drawn through the
centers of the outermost blocks, which keeps the classic "pixel circle"
silhouettes (no single-block nubs on the axes, full rows on the flats).

Padding extends the coordinate space on every side. Padding cells are tested
with the same formula, so for any real shape they stay empty and give
outline detection at the true edges a neighborhood to inspect.
"""

import logging

import numpy as np

__all__ = ['rasterize', 'DEFAULT_PADDING']

logger = logging.getLogger(__name__)

DEFAULT_PADDING = 2


def rasterize(width: int, height: int, padding: int = DEFAULT_PADDING) -> np.ndarray:
    """Rasterize an ellipse into a boolean activity grid.

    Parameters
    ----------
    width, height : int
        Ellipse extent in blocks. Callers coerce both to at least 1; smaller
        values give a negative radius and a fully inactive grid.

    padding : int, default 2
        Empty cells added on every side of the shape.

    Returns
    -------
    np.ndarray
        Boolean array of shape ``(height + 2*padding, width + 2*padding)``
        indexed ``[y, x]``. ``True`` marks a block of the shape.

    Examples
    --------
    >>> rasterize(1, 1, 0)
    array([[ True]])
    >>> rasterize(5, 3, 1).shape
    (5, 7)
    """
    total_width = max(width + 2 * padding, 0)
    total_height = max(height + 2 * padding, 0)
    grid = np.zeros((total_height, total_width), dtype=bool)

    rx = (width - 1) / 2
    ry = (height - 1) / 2
    if rx < 0 or ry < 0:
        logger.debug("Non-positive radius (rx=%s, ry=%s); returning empty grid", rx, ry)
        return grid

    center_x = rx + padding
    center_y = ry + padding

    ys, xs = np.ogrid[:total_height, :total_width]
    dx = xs - center_x
    dy = ys - center_y
    normalized_distance = (dx * dx) / (rx + 0.5) ** 2 + (dy * dy) / (ry + 0.5) ** 2
    grid[:] = normalized_distance <= 1.0

    logger.debug("Rasterized %dx%d ellipse (padding=%d): %d active cells",
                 width, height, padding, int(grid.sum()))
    return grid
