"""Run-length stage contract.

Enforces the guarantee that run tables are co-indexed with their grid and
hold lengths only where cells are active.
"""

import numpy as np
from blockguide.contracts.base import require


def assert_run_lengths(grid: np.ndarray, runs) -> None:
    """Enforce run-length stage contract.

    Parameters
    ----------
    grid : np.ndarray
        Boolean grid the runs were computed from

    runs : RunTable
        Output of compute_runs(grid)

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    for name, table in (("horizontal", runs.horizontal), ("vertical", runs.vertical)):
        require(
            table.shape == grid.shape,
            f"Run contract violated: {name} table shape {table.shape} "
            f"does not match grid shape {grid.shape}"
        )
        require(
            table.dtype.kind in {"i", "u"},
            f"Run contract violated: {name} table dtype is {table.dtype}, expected integer"
        )
        require(
            not np.any(table[~grid]),
            f"Run contract violated: {name} table has lengths on inactive cells"
        )
        require(
            bool(np.all(table[grid] > 0)),
            f"Run contract violated: {name} table has zero length on active cells"
        )
