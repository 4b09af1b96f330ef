import numpy as np
import pytest

from blockguide.guide.session import BuildSequence
from blockguide.pipeline.processor import ShapeProcessor

pytestmark = [pytest.mark.unit, pytest.mark.pipeline]

VARIABLES = [
    "active",
    "outline",
    "display",
    "horizontal_run",
    "vertical_run",
    "run_label",
    "segment_labels",
]


def test_dataset_variables(small_circle_ds):
    assert sorted(small_circle_ds.data_vars) == sorted(VARIABLES)
    for name in VARIABLES:
        assert small_circle_ds[name].dims == ("y", "x")
    assert small_circle_ds.sizes["y"] == 5
    assert small_circle_ds.sizes["x"] == 5


def test_dataset_grids(small_circle_ds, circle5_grid, circle5_outline):
    np.testing.assert_array_equal(small_circle_ds["active"].values, circle5_grid)
    np.testing.assert_array_equal(small_circle_ds["outline"].values, circle5_outline)
    np.testing.assert_array_equal(small_circle_ds["display"].values, circle5_outline)
    np.testing.assert_array_equal(small_circle_ds["run_label"].values, 3 * circle5_outline)


def test_dataset_attrs(small_circle_ds):
    attrs = small_circle_ds.attrs
    assert attrs["width"] == 5
    assert attrs["height"] == 5
    assert attrs["padding"] == 0
    assert attrs["filled"] == 0
    assert attrs["block_count"] == 12
    assert attrs["segment_count"] == 4


def test_filled_shape_counts_interior(make_config, circle5_outline):
    ds = ShapeProcessor(make_config(WIDTH=5, PADDING=0, FILLED=True)).process()

    assert ds.attrs["filled"] == 1
    assert ds.attrs["block_count"] == 21
    # Segments always follow the outline
    assert ds.attrs["segment_count"] == 4
    np.testing.assert_array_equal(ds["segment_labels"].values > 0, circle5_outline)


def test_default_config_is_padded(internal_config):
    ds = ShapeProcessor(internal_config).process()

    assert ds["active"].shape == (15, 15)
    assert not ds["active"].values[:2].any()
    assert not ds["active"].values[:, -2:].any()


def test_ellipse_extent(make_config):
    ds = ShapeProcessor(make_config(WIDTH=21, HEIGHT=13)).process()

    assert ds["active"].shape == (17, 25)
    assert ds.attrs["width"] == 21
    assert ds.attrs["height"] == 13


def test_custom_variable_names(make_config):
    config = make_config(WIDTH=5, var_names={"segment_labels": "segment_id"})
    ds = ShapeProcessor(config).process()

    assert "segment_id" in ds
    assert "segment_labels" not in ds
    assert ShapeProcessor(config).start_guide(ds).steps == (2, 1, 3, 4)


def test_summarize(small_circle_config, small_circle_ds):
    df = ShapeProcessor(small_circle_config).summarize(small_circle_ds)

    assert len(df) == 4
    assert df["block_count"].sum() == 12
    assert "step" not in df.columns


def test_summarize_with_guide(small_circle_config, small_circle_ds):
    proc = ShapeProcessor(small_circle_config)
    seq = proc.start_guide(small_circle_ds)

    df = proc.summarize(small_circle_ds, seq)

    assert df["segment_id"].tolist() == [2, 1, 3, 4]
    assert df["step"].tolist() == [1, 2, 3, 4]


def test_start_guide(small_circle_config, small_circle_ds):
    seq = ShapeProcessor(small_circle_config).start_guide(small_circle_ds)

    assert isinstance(seq, BuildSequence)
    assert seq.steps == (2, 1, 3, 4)
    assert seq.current_index == 0


def test_single_block_shape(make_config):
    proc = ShapeProcessor(make_config(WIDTH=1, PADDING=0))
    ds = proc.process()

    assert ds.attrs["block_count"] == 1
    assert proc.start_guide(ds).steps == (1,)
    assert proc.summarize(ds)["kind"].tolist() == ["single"]
