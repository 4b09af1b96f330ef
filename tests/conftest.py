"""Root-level pytest fixtures for the blockguide test suite.

Provides shared configuration fixtures following the Pydantic-based
architecture, plus small hand-checked grids used across modules.
"""

import pytest
import numpy as np

from blockguide.schemas import ParamConfig, UserConfig, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Returns a callable that accepts UserConfig-compatible kwargs.

    Examples
    --------
    >>> def test_small_circle(make_config):
    ...     config = make_config(WIDTH=5, PADDING=0)
    ...     assert config.shape.height == 5
    """
    def _make(**user_overrides):
        """Create InternalConfig with user overrides."""
        if user_overrides:
            user = UserConfig(**user_overrides)
            return resolve_config(param_config, user, None)
        else:
            return resolve_config(param_config, None, None)

    return _make


# =============================================================================
# Grid Fixtures
# =============================================================================

@pytest.fixture
def circle5_grid():
    """rasterize(5, 5, 0): full middle rows, trimmed corners.

        .###.
        #####
        #####
        #####
        .###.
    """
    return np.array([
        [0, 1, 1, 1, 0],
        [1, 1, 1, 1, 1],
        [1, 1, 1, 1, 1],
        [1, 1, 1, 1, 1],
        [0, 1, 1, 1, 0],
    ], dtype=bool)


@pytest.fixture
def circle5_outline():
    """Outline of circle5_grid: four straight runs of three blocks."""
    return np.array([
        [0, 1, 1, 1, 0],
        [1, 0, 0, 0, 1],
        [1, 0, 0, 0, 1],
        [1, 0, 0, 0, 1],
        [0, 1, 1, 1, 0],
    ], dtype=bool)


@pytest.fixture
def l_shape_grid():
    """Corner where a horizontal and a vertical run meet at (0, 0)."""
    return np.array([
        [1, 1, 1],
        [1, 0, 0],
        [1, 0, 0],
    ], dtype=bool)


@pytest.fixture
def plus_grid():
    """Plus sign: both runs cross in the middle cell."""
    return np.array([
        [0, 1, 0],
        [1, 1, 1],
        [0, 1, 0],
    ], dtype=bool)
