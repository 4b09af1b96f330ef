"""Segment table contract.

Enforces the guarantee that the segment summary contains required columns
and well-formed rows.
"""

import pandas as pd
import numpy as np
from blockguide.contracts.base import require


def assert_segment_table(df: pd.DataFrame, min_expected_rows: int = 0) -> None:
    """Enforce segment table contract.

    Called after segments_to_dataframe(). We only check structural
    requirements, not the geometry itself.

    Parameters
    ----------
    df : pd.DataFrame
        Output from segments_to_dataframe()

    min_expected_rows : int, optional
        Minimum number of rows expected (default 0, allows empty shapes)

    Raises
    ------
    ContractViolation
        If structural requirements are violated
    """
    require(
        isinstance(df, pd.DataFrame),
        f"Segment table contract violated: output is {type(df)}, expected DataFrame"
    )

    required_cols = [
        "segment_id",
        "kind",
        "block_count",
        "centroid_x",
        "centroid_y",
        "angle",
    ]

    for col in required_cols:
        require(
            col in df.columns,
            f"Segment table contract violated: missing required column '{col}'"
        )

    if len(df) > 0:
        require(
            (df["segment_id"] > 0).all(),
            "Segment table contract violated: segment_id must be > 0 for all rows"
        )
        require(
            df["segment_id"].is_unique,
            "Segment table contract violated: duplicate segment_id rows"
        )
        require(
            (df["block_count"] >= 1).all(),
            "Segment table contract violated: block_count must be >= 1"
        )
        require(
            bool(np.isfinite(df[["centroid_x", "centroid_y", "angle"]].to_numpy(dtype=float)).all()),
            "Segment table contract violated: non-finite centroid or angle"
        )

    require(
        len(df) >= min_expected_rows,
        f"Segment table contract violated: {len(df)} rows, expected at least {min_expected_rows}"
    )
