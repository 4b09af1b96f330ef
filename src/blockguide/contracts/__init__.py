"""Stage contracts: fail-fast enforcement of stage invariants.

Contracts fail immediately and loudly when a stage doesn't receive or
produce its promised invariants.

Key principle:
- Pydantic validates config correctness
- Contracts validate stage correctness
- Algorithms handle degenerate shapes (empty grids, zero radius)
"""

from blockguide.contracts.failure import ContractViolation
from blockguide.contracts.base import require
from blockguide.contracts.grid import assert_rasterized
from blockguide.contracts.runs import assert_run_lengths
from blockguide.contracts.segmentation import assert_segmented
from blockguide.contracts.sequence import assert_sequenced
from blockguide.contracts.analysis import assert_segment_table

__all__ = [
    "ContractViolation",
    "require",
    "assert_rasterized",
    "assert_run_lengths",
    "assert_segmented",
    "assert_sequenced",
    "assert_segment_table",
]
