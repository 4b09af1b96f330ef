"""Sequencing stage contract.

Enforces the guarantee that a build sequence visits every segment exactly
once and its cursor points at a real step.
"""

import numpy as np
from blockguide.contracts.base import require


def assert_sequenced(sequence, segment_map: np.ndarray) -> None:
    """Enforce sequencing stage contract.

    Parameters
    ----------
    sequence : BuildSequence
        Output of build_guide()

    segment_map : np.ndarray
        Outline segment map the sequence was built from

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    ids = np.unique(segment_map[segment_map > 0])
    require(
        sorted(sequence.steps) == ids.tolist(),
        f"Sequence contract violated: steps {list(sequence.steps)} are not a "
        f"permutation of segment ids 1..{len(ids)}"
    )

    if sequence.steps:
        require(
            0 <= sequence.current_index < len(sequence.steps),
            f"Sequence contract violated: current_index {sequence.current_index} "
            f"outside [0, {len(sequence.steps)})"
        )
    else:
        require(
            sequence.current_index == -1,
            f"Sequence contract violated: empty sequence has current_index {sequence.current_index}"
        )
