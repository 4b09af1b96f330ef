import pytest

from blockguide.pipeline.processor import ShapeProcessor


@pytest.fixture
def small_circle_config(make_config):
    """5-block hollow circle without padding."""
    return make_config(WIDTH=5, PADDING=0)


@pytest.fixture
def small_circle_ds(small_circle_config):
    return ShapeProcessor(small_circle_config).process()
