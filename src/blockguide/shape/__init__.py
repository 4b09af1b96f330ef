"""Shape processing modules.

- rasterizer: Ellipse to activity grid
- shape_utils: Outline, display grid, block count
- run_length: Horizontal/vertical run lengths
- segment_labeler: Straight-run and singleton segments
"""

from blockguide.shape.rasterizer import rasterize
from blockguide.shape.shape_utils import outline_grid, display_grid, count_blocks
from blockguide.shape.run_length import RunTable, compute_runs, run_labels
from blockguide.shape.segment_labeler import (
    Segment,
    Singleton,
    StraightRun,
    extract_segments,
    label_segments,
)

__all__ = [
    "rasterize",
    "outline_grid",
    "display_grid",
    "count_blocks",
    "RunTable",
    "compute_runs",
    "run_labels",
    "Segment",
    "Singleton",
    "StraightRun",
    "extract_segments",
    "label_segments",
]
