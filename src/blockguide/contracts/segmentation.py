"""Segmentation stage contract.

Enforces the guarantee that after labeling, every active cell carries
exactly one positive segment identifier and nothing else does.
"""

import numpy as np
from blockguide.contracts.base import require


def assert_segmented(grid: np.ndarray, segment_map: np.ndarray) -> None:
    """Enforce segmentation stage contract.

    Called immediately after label_segments(). Verifies that the labeler
    produced valid, typed, complete output.

    Parameters
    ----------
    grid : np.ndarray
        Boolean grid that was labeled

    segment_map : np.ndarray
        Output of label_segments()

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    require(
        segment_map.shape == grid.shape,
        f"Segmentation contract violated: shape {segment_map.shape} "
        f"does not match grid shape {grid.shape}"
    )

    # Verify type
    require(
        segment_map.dtype.kind in {"i", "u"},
        f"Segmentation contract violated: dtype is {segment_map.dtype}, expected integer"
    )

    if segment_map.size == 0:
        return

    # Verify range: 0=inactive, 1..N=segments
    require(
        np.min(segment_map) >= 0,
        f"Segmentation contract violated: labels contain negative values (min={np.min(segment_map)})"
    )

    # Verify coverage: labels exactly on active cells
    require(
        bool(np.all(segment_map[grid] > 0)),
        "Segmentation contract violated: active cells left unlabeled"
    )
    require(
        not np.any(segment_map[~grid]),
        "Segmentation contract violated: inactive cells carry labels"
    )

    # Verify identifiers are issued contiguously from 1
    ids = np.unique(segment_map[grid])
    require(
        np.array_equal(ids, np.arange(1, len(ids) + 1)),
        f"Segmentation contract violated: identifiers are not contiguous 1..{len(ids)}"
    )
