"""Segment labeling of boolean grids.

Assigns every active cell a positive segment identifier so that each segment
is one build instruction: either a straight line of blocks along one axis or
a single block.

Labeling runs in two row-major passes:

1. **Straight runs.** An unlabeled cell whose horizontal run is longer than
   one while its vertical run is exactly one starts a horizontal segment
   (and symmetrically for vertical). The segment takes the cell and the
   following cells of the same run, stopping at the run end or at a cell
   that already belongs to another segment. Cells long in both axes (cross
   points of an outline) never start a segment.
2. **Singletons.** Every active cell still unlabeled gets its own identifier.

This is not connected-component labeling: an L-shaped stretch of outline is
deliberately split into a line plus single blocks.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

import numpy as np
from scipy.ndimage import center_of_mass

from blockguide.contracts import require
from blockguide.shape.run_length import RunTable

__all__ = [
    'StraightRun',
    'Singleton',
    'Segment',
    'label_segments',
    'extract_segments',
    'grid_center',
]

logger = logging.getLogger(__name__)

HORIZONTAL = "horizontal"
VERTICAL = "vertical"


@dataclass(frozen=True)
class StraightRun:
    """A line of blocks along one axis."""
    axis: str
    length: int


@dataclass(frozen=True)
class Singleton:
    """A single block."""
    length: int = field(default=1, init=False)


SegmentKind = Union[StraightRun, Singleton]


@dataclass(frozen=True)
class Segment:
    """One labeled group of cells, placed as a single build step.

    Attributes
    ----------
    segment_id : int
        Identifier from the segment map (> 0).
    cells : tuple of (x, y)
        Member cells in row-major order.
    centroid_x, centroid_y : float
        Mean of member coordinates.
    angle : float
        Bearing in radians from the grid center to the centroid, in
        ``(-pi, pi]``. Grid rows grow downward, so negative angles point up.
    kind : StraightRun or Singleton
    """
    segment_id: int
    cells: Tuple[Tuple[int, int], ...]
    centroid_x: float
    centroid_y: float
    angle: float
    kind: SegmentKind

    @property
    def block_count(self) -> int:
        return len(self.cells)

    @property
    def is_straight(self) -> bool:
        return isinstance(self.kind, StraightRun)


def label_segments(grid: np.ndarray, runs: RunTable) -> np.ndarray:
    """Assign segment identifiers to every active cell.

    Parameters
    ----------
    grid : np.ndarray
        2D boolean grid (usually an outline grid).

    runs : RunTable
        Run lengths computed from exactly this grid.

    Returns
    -------
    np.ndarray
        int32 segment map, 0 for inactive cells and identifiers 1..N issued
        in scan order.

    Raises
    ------
    ContractViolation
        If ``runs`` is not co-indexed with ``grid``.
    """
    grid = np.asarray(grid, dtype=bool)
    require(
        runs.horizontal.shape == grid.shape and runs.vertical.shape == grid.shape,
        f"Labeler received runs of shape {runs.horizontal.shape}/{runs.vertical.shape} "
        f"for a grid of shape {grid.shape}"
    )

    segment_map = np.zeros(grid.shape, dtype=np.int32)
    if grid.size == 0:
        return segment_map

    total_height, total_width = grid.shape
    h_runs = runs.horizontal
    v_runs = runs.vertical
    segment_id = 1

    # Pass 1: straight single-axis runs
    for y, x in np.argwhere(grid):
        if segment_map[y, x]:
            continue

        h = h_runs[y, x]
        v = v_runs[y, x]

        if h > 1 and v == 1:
            k = x
            while k < total_width and grid[y, k] and not segment_map[y, k]:
                segment_map[y, k] = segment_id
                k += 1
            segment_id += 1
        elif v > 1 and h == 1:
            k = y
            while k < total_height and grid[k, x] and not segment_map[k, x]:
                segment_map[k, x] = segment_id
                k += 1
            segment_id += 1

    num_straight = segment_id - 1

    # Pass 2: whatever is left becomes a single block
    residual = grid & (segment_map == 0)
    num_single = int(residual.sum())
    segment_map[residual] = np.arange(segment_id, segment_id + num_single, dtype=np.int32)

    logger.debug("Labeled %d straight segments and %d singletons", num_straight, num_single)
    return segment_map


def grid_center(shape: Tuple[int, int]) -> Tuple[float, float]:
    """Geometric center ``(x, y)`` of a grid: half of its total extent."""
    total_height, total_width = shape
    return total_width / 2, total_height / 2


def _classify(cells: List[Tuple[int, int]]) -> SegmentKind:
    if len(cells) < 2:
        return Singleton()
    xs = {x for x, _ in cells}
    if len(xs) == 1:
        return StraightRun(axis=VERTICAL, length=len(cells))
    return StraightRun(axis=HORIZONTAL, length=len(cells))


def extract_segments(segment_map: np.ndarray,
                     center: Optional[Tuple[float, float]] = None) -> List[Segment]:
    """Collect the segments of a segment map, in identifier order.

    Parameters
    ----------
    segment_map : np.ndarray
        Output of label_segments().

    center : tuple of (x, y), optional
        Reference point for bearings. Defaults to grid_center().

    Returns
    -------
    list of Segment
        One entry per identifier, sorted ascending by ``segment_id``.
    """
    if center is None:
        center = grid_center(segment_map.shape)
    center_x, center_y = center

    ids = np.unique(segment_map[segment_map > 0])
    if len(ids) == 0:
        return []

    centroids = center_of_mass((segment_map > 0).astype(float), labels=segment_map, index=ids)

    # Group member cells per identifier, row-major within each group
    ys, xs = np.nonzero(segment_map)
    members = {int(i): [] for i in ids}
    for y, x in zip(ys.tolist(), xs.tolist()):
        members[int(segment_map[y, x])].append((x, y))

    segments = []
    for segment_id, (cy, cx) in zip(ids.tolist(), centroids):
        cells = members[segment_id]
        segments.append(Segment(
            segment_id=segment_id,
            cells=tuple(cells),
            centroid_x=float(cx),
            centroid_y=float(cy),
            angle=math.atan2(cy - center_y, cx - center_x),
            kind=_classify(cells),
        ))

    return segments
