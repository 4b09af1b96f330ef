"""Shape processing pipeline.

Runs a shape through rasterization, outline derivation, run-length encoding
and segment labeling, checking each stage's contract, and bundles the
per-cell products into one xarray Dataset. The same Dataset feeds the
segment summary and the build guide.
"""

import logging
from typing import TYPE_CHECKING

import numpy as np
import pandas as pd
import xarray as xr

from blockguide.contracts import (
    assert_rasterized,
    assert_run_lengths,
    assert_segmented,
    assert_sequenced,
    assert_segment_table,
)
from blockguide.guide.session import BuildSequence
from blockguide.guide.sequencer import build_guide, segments_to_dataframe
from blockguide.shape.rasterizer import rasterize
from blockguide.shape.run_length import compute_runs, run_labels
from blockguide.shape.segment_labeler import extract_segments, label_segments
from blockguide.shape.shape_utils import display_grid, outline_grid

if TYPE_CHECKING:
    from blockguide.schemas import InternalConfig

__all__ = ['ShapeProcessor']

logger = logging.getLogger(__name__)


class ShapeProcessor:
    """Computes every grid product for one configured shape.

    **Processing Pipeline:**

    1. **Rasterize**: ellipse of ``shape.width`` x ``shape.height`` blocks on
       a grid padded by ``shape.padding`` cells.
    2. **Outline**: active cells with an inactive or missing 4-neighbor.
    3. **Run lengths**: horizontal and vertical runs of the outline.
    4. **Segments**: straight runs and single blocks of the outline.

    Segments are always computed over the outline, whatever the fill mode:
    the fill mode only changes which cells are displayed and counted.

    **Output Dataset** (dims ``("y", "x")``, names from ``config.var_names``):

    - ``active``: bool activity grid
    - ``outline``: bool outline grid
    - ``display``: bool cells shown for the fill mode
    - ``horizontal_run``, ``vertical_run``: int32 outline run lengths
    - ``run_label``: int32 number printed on each outline block
    - ``segment_labels``: int32 outline segment ids

    Attributes: ``width``, ``height``, ``padding``, ``filled``,
    ``block_count``, ``segment_count``.

    Example usage::

        processor = ShapeProcessor(config)
        ds = processor.process()
        df = processor.summarize(ds)
        seq = processor.start_guide(ds)
    """

    def __init__(self, config: "InternalConfig"):
        """Initialize processor with validated configuration.

        Parameters
        ----------
        config : InternalConfig
            Fully validated runtime configuration.
        """
        self.config = config
        self.width = config.shape.width
        self.height = config.shape.height
        self.padding = config.shape.padding
        self.filled = config.shape.filled
        self.var_names = config.var_names

        logger.info("ShapeProcessor initialized: %dx%d, filled=%s, padding=%d",
                    self.width, self.height, self.filled, self.padding)

    def process(self) -> xr.Dataset:
        """Run all shape stages and return the shape Dataset."""
        active = rasterize(self.width, self.height, self.padding)
        assert_rasterized(active, self.width, self.height, self.padding)

        outline = outline_grid(active)
        shown = display_grid(active, self.filled)

        runs = compute_runs(outline)
        assert_run_lengths(outline, runs)

        segment_map = label_segments(outline, runs)
        assert_segmented(outline, segment_map)

        names = self.var_names
        total_height, total_width = active.shape
        dims = ("y", "x")

        ds = xr.Dataset(
            {
                names.active: (dims, active),
                names.outline: (dims, outline),
                names.display: (dims, shown),
                names.horizontal_run: (dims, runs.horizontal),
                names.vertical_run: (dims, runs.vertical),
                names.run_label: (dims, run_labels(runs)),
                names.segment_labels: (dims, segment_map),
            },
            coords={
                "y": np.arange(total_height),
                "x": np.arange(total_width),
            },
            attrs={
                "width": self.width,
                "height": self.height,
                "padding": self.padding,
                "filled": int(self.filled),
                "block_count": int(shown.sum()),
                "segment_count": int(segment_map.max(initial=0)),
            },
        )

        logger.info("Shape processed: grid=%dx%d, blocks=%d, segments=%d",
                    total_width, total_height, ds.attrs["block_count"], ds.attrs["segment_count"])
        return ds

    def summarize(self, ds: xr.Dataset, sequence: BuildSequence = None) -> pd.DataFrame:
        """Segment table for a processed shape.

        Parameters
        ----------
        ds : xr.Dataset
            Output of process().
        sequence : BuildSequence, optional
            Adds a ``step`` column and orders rows by build step.
        """
        segment_map = ds[self.var_names.segment_labels].values
        segments = extract_segments(segment_map)
        df = segments_to_dataframe(segments, sequence)
        assert_segment_table(df)
        logger.debug("Segment table: %d rows", len(df))
        return df

    def start_guide(self, ds: xr.Dataset) -> BuildSequence:
        """Start a build guide for a processed shape."""
        sequence = build_guide(ds[self.var_names.active].values)
        assert_sequenced(sequence, ds[self.var_names.segment_labels].values)
        logger.info("Build guide started: %d steps", len(sequence))
        return sequence
