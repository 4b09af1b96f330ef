"""Tests for stage contracts.

These tests verify that contracts are enforced at stage boundaries.
They test contract violations directly, without defensive logic downstream.
"""

import pytest
import pandas as pd
import numpy as np

pytestmark = pytest.mark.unit

from blockguide.contracts import (
    ContractViolation,
    require,
    assert_rasterized,
    assert_run_lengths,
    assert_segmented,
    assert_sequenced,
    assert_segment_table,
)
from blockguide.guide.session import BuildSequence
from blockguide.shape.run_length import RunTable, compute_runs


def segment_row(**overrides):
    row = {
        "segment_id": 1,
        "kind": "straight",
        "block_count": 3,
        "centroid_x": 2.0,
        "centroid_y": 0.0,
        "angle": -1.5,
    }
    row.update(overrides)
    return row


class TestRequire:
    """Test the single enforcement primitive."""

    def test_passes_silently(self):
        require(True, "never shown")

    def test_raises_with_message(self):
        with pytest.raises(ContractViolation, match="broken invariant"):
            require(False, "broken invariant")

    def test_violation_is_runtime_error(self):
        assert issubclass(ContractViolation, RuntimeError)


class TestGridContract:
    """Test rasterization stage contract."""

    def test_passes_with_padded_grid(self):
        assert_rasterized(np.zeros((9, 7), dtype=bool), width=3, height=5, padding=2)

    def test_passes_with_empty_grid(self):
        assert_rasterized(np.zeros((0, 0), dtype=bool), width=0, height=0, padding=0)

    def test_fails_on_wrong_shape(self):
        with pytest.raises(ContractViolation, match="shape is"):
            assert_rasterized(np.zeros((5, 5), dtype=bool), width=5, height=5, padding=1)

    def test_fails_on_wrong_dtype(self):
        with pytest.raises(ContractViolation, match="expected bool"):
            assert_rasterized(np.zeros((5, 5), dtype=int), width=5, height=5, padding=0)

    def test_fails_on_1d_grid(self):
        with pytest.raises(ContractViolation, match="expected 2"):
            assert_rasterized(np.zeros(5, dtype=bool), width=5, height=1, padding=0)


class TestRunContract:
    """Test run-length stage contract."""

    def test_passes_with_computed_runs(self, circle5_outline):
        assert_run_lengths(circle5_outline, compute_runs(circle5_outline))

    def test_fails_on_shape_mismatch(self, circle5_outline):
        runs = compute_runs(np.ones((2, 2), dtype=bool))
        with pytest.raises(ContractViolation, match="does not match grid shape"):
            assert_run_lengths(circle5_outline, runs)

    def test_fails_on_float_table(self, circle5_outline):
        runs = compute_runs(circle5_outline)
        bad = RunTable(horizontal=runs.horizontal.astype(float), vertical=runs.vertical)
        with pytest.raises(ContractViolation, match="expected integer"):
            assert_run_lengths(circle5_outline, bad)

    def test_fails_on_length_over_inactive_cell(self, circle5_outline):
        runs = compute_runs(circle5_outline)
        horizontal = runs.horizontal.copy()
        horizontal[2, 2] = 1
        with pytest.raises(ContractViolation, match="inactive cells"):
            assert_run_lengths(circle5_outline, RunTable(horizontal, runs.vertical))

    def test_fails_on_missing_length(self, circle5_outline):
        runs = compute_runs(circle5_outline)
        vertical = runs.vertical.copy()
        vertical[0, 1] = 0
        with pytest.raises(ContractViolation, match="zero length"):
            assert_run_lengths(circle5_outline, RunTable(runs.horizontal, vertical))


class TestSegmentationContract:
    """Test segmentation stage contract."""

    def test_passes_with_valid_map(self, plus_grid):
        labels = np.array([[0, 1, 0], [2, 1, 3], [0, 1, 0]], dtype=np.int32)
        assert_segmented(plus_grid, labels)

    def test_passes_with_empty_map(self):
        assert_segmented(np.zeros((0, 3), dtype=bool), np.zeros((0, 3), dtype=np.int32))

    def test_fails_on_shape_mismatch(self, plus_grid):
        with pytest.raises(ContractViolation, match="does not match"):
            assert_segmented(plus_grid, np.zeros((2, 2), dtype=np.int32))

    def test_fails_on_float_labels(self, plus_grid):
        with pytest.raises(ContractViolation, match="expected integer"):
            assert_segmented(plus_grid, plus_grid.astype(float))

    def test_fails_on_negative_labels(self, plus_grid):
        labels = np.array([[0, 1, 0], [1, 1, 1], [0, 1, -1]], dtype=np.int32)
        with pytest.raises(ContractViolation, match="negative"):
            assert_segmented(plus_grid, labels)

    def test_fails_on_unlabeled_cell(self, plus_grid):
        labels = np.array([[0, 1, 0], [0, 1, 2], [0, 1, 0]], dtype=np.int32)
        with pytest.raises(ContractViolation, match="left unlabeled"):
            assert_segmented(plus_grid, labels)

    def test_fails_on_label_outside_shape(self, plus_grid):
        labels = np.array([[3, 1, 0], [2, 1, 2], [0, 1, 0]], dtype=np.int32)
        with pytest.raises(ContractViolation, match="inactive cells carry labels"):
            assert_segmented(plus_grid, labels)

    def test_fails_on_gap_in_identifiers(self, plus_grid):
        labels = np.array([[0, 1, 0], [2, 1, 5], [0, 1, 0]], dtype=np.int32)
        with pytest.raises(ContractViolation, match="not contiguous"):
            assert_segmented(plus_grid, labels)


class TestSequenceContract:
    """Test sequencing stage contract."""

    segment_map = np.array([[0, 1, 0], [2, 1, 3], [0, 1, 0]], dtype=np.int32)

    def test_passes_with_permutation(self):
        assert_sequenced(BuildSequence(steps=(3, 1, 2), current_index=0), self.segment_map)

    def test_passes_with_inactive_empty_shape(self):
        assert_sequenced(BuildSequence.inactive(), np.zeros((3, 3), dtype=np.int32))

    def test_fails_on_missing_step(self):
        with pytest.raises(ContractViolation, match="not a permutation"):
            assert_sequenced(BuildSequence(steps=(3, 1), current_index=0), self.segment_map)

    def test_fails_on_repeated_step(self):
        with pytest.raises(ContractViolation, match="not a permutation"):
            assert_sequenced(BuildSequence(steps=(1, 1, 2, 3), current_index=0), self.segment_map)

    def test_fails_on_cursor_out_of_range(self):
        with pytest.raises(ContractViolation, match="outside"):
            assert_sequenced(BuildSequence(steps=(3, 1, 2), current_index=3), self.segment_map)

    def test_fails_on_empty_sequence_with_cursor(self):
        with pytest.raises(ContractViolation, match="empty sequence"):
            assert_sequenced(BuildSequence(steps=(), current_index=0), np.zeros((3, 3), dtype=np.int32))


class TestSegmentTableContract:
    """Test segment table contract."""

    def test_passes_with_valid_table(self):
        assert_segment_table(pd.DataFrame([segment_row(), segment_row(segment_id=2)]))

    def test_passes_with_empty_table(self):
        df = pd.DataFrame(columns=list(segment_row().keys()))
        assert_segment_table(df)

    def test_fails_on_non_dataframe(self):
        with pytest.raises(ContractViolation, match="expected DataFrame"):
            assert_segment_table([segment_row()])

    def test_fails_on_missing_column(self):
        df = pd.DataFrame([segment_row()]).drop(columns=["angle"])
        with pytest.raises(ContractViolation, match="missing required column 'angle'"):
            assert_segment_table(df)

    def test_fails_on_zero_id(self):
        with pytest.raises(ContractViolation, match="segment_id must be > 0"):
            assert_segment_table(pd.DataFrame([segment_row(segment_id=0)]))

    def test_fails_on_duplicate_id(self):
        with pytest.raises(ContractViolation, match="duplicate"):
            assert_segment_table(pd.DataFrame([segment_row(), segment_row()]))

    def test_fails_on_empty_segment(self):
        with pytest.raises(ContractViolation, match="block_count"):
            assert_segment_table(pd.DataFrame([segment_row(block_count=0)]))

    def test_fails_on_nan_centroid(self):
        with pytest.raises(ContractViolation, match="non-finite"):
            assert_segment_table(pd.DataFrame([segment_row(centroid_x=np.nan)]))

    def test_fails_below_minimum_rows(self):
        with pytest.raises(ContractViolation, match="expected at least 2"):
            assert_segment_table(pd.DataFrame([segment_row()]), min_expected_rows=2)
