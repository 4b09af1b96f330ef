"""Build order sequencing for shape outlines.

Turns an activity grid into a BuildSequence: the outline is labeled into
segments, and segments are ordered by the bearing of their centroid as seen
from the grid center. Bearings grow clockwise on screen (rows grow
downward), starting just past the left-hand side, so a guide walks around
the shape in one sweep.

Only the outline is sequenced. A filled shape's guide walks its border;
interior blocks are simple rows to fill once the border stands.

Notes
-----
Bearings are measured from the grid center, not from anything local to a
segment. For convex shapes such as ellipses this visits the border in
order; heavily interrupted outlines could revisit a region out of order.
"""

import logging
from typing import List, Optional

import numpy as np
import pandas as pd

from blockguide.guide.session import BuildSequence
from blockguide.shape.run_length import compute_runs
from blockguide.shape.segment_labeler import Segment, extract_segments, label_segments
from blockguide.shape.shape_utils import outline_grid

__all__ = ['build_guide', 'sequence_segments', 'segments_to_dataframe', 'SEGMENT_COLUMNS']

logger = logging.getLogger(__name__)

SEGMENT_COLUMNS = [
    "segment_id",
    "kind",
    "axis",
    "block_count",
    "centroid_x",
    "centroid_y",
    "angle",
]


def sequence_segments(segments: List[Segment]) -> List[Segment]:
    """Sort segments ascending by bearing.

    The sort is stable: segments with equal bearing keep identifier order,
    provided ``segments`` arrives in identifier order (as extract_segments
    returns it).
    """
    return sorted(segments, key=lambda segment: segment.angle)


def build_guide(active_grid: np.ndarray) -> BuildSequence:
    """Start a build guide for an activity grid.

    Parameters
    ----------
    active_grid : np.ndarray
        2D boolean activity grid (filled shape, as produced by rasterize()).

    Returns
    -------
    BuildSequence
        Sequence positioned on its first step, or the inactive sequence when
        the grid has no active cells.

    Examples
    --------
    >>> seq = build_guide(rasterize(11, 11))
    >>> seq.current_index
    0
    """
    outline = outline_grid(active_grid)
    runs = compute_runs(outline)
    segment_map = label_segments(outline, runs)
    segments = extract_segments(segment_map)

    ordered = sequence_segments(segments)
    steps = tuple(segment.segment_id for segment in ordered)
    logger.debug("Build guide: %d steps over %d outline blocks", len(steps), int(outline.sum()))

    if not steps:
        return BuildSequence.inactive()
    return BuildSequence(steps=steps, current_index=0)


def segments_to_dataframe(segments: List[Segment],
                          sequence: Optional[BuildSequence] = None) -> pd.DataFrame:
    """Summarize segments as a table, one row per segment.

    Parameters
    ----------
    segments : list of Segment

    sequence : BuildSequence, optional
        When given (and active), adds a 1-based ``step`` column and orders
        rows by build step. Otherwise rows are in identifier order.

    Returns
    -------
    pd.DataFrame
        Columns ``segment_id, kind, axis, block_count, centroid_x,
        centroid_y, angle`` and optionally ``step``. ``axis`` is None for
        single blocks.
    """
    rows = []
    for segment in segments:
        rows.append({
            "segment_id": segment.segment_id,
            "kind": "straight" if segment.is_straight else "single",
            "axis": segment.kind.axis if segment.is_straight else None,
            "block_count": segment.block_count,
            "centroid_x": segment.centroid_x,
            "centroid_y": segment.centroid_y,
            "angle": segment.angle,
        })

    df = pd.DataFrame(rows, columns=SEGMENT_COLUMNS)

    if sequence is not None and sequence.is_active:
        step_of = {segment_id: i + 1 for i, segment_id in enumerate(sequence.steps)}
        df["step"] = df["segment_id"].map(step_of)
        df = df.sort_values("step", kind="stable").reset_index(drop=True)

    return df
