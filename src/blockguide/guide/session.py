"""Build guide state.

A BuildSequence is an immutable snapshot of a guide: the ordered segment ids
and the step currently shown. Every transition returns a new snapshot, so
callers keep ownership of their session state and can diff snapshots to
decide what to redraw.

States::

    Inactive   (steps=(), current_index=-1)
    Active(i)  (0 <= i < len(steps))

``build_guide`` starts a guide; ``advance`` and ``retreat`` move the cursor
by exactly one step and are no-ops at the ends; ``exit`` returns to Inactive.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

__all__ = ['BuildSequence', 'StepStatus', 'step_status', 'describe_step']


class StepStatus(IntEnum):
    """Visibility of a cell while a guide is shown."""
    HIDDEN = 0
    PLACED = 1
    CURRENT = 2


@dataclass(frozen=True)
class BuildSequence:
    """Ordered build steps plus the current step cursor."""
    steps: Tuple[int, ...] = ()
    current_index: int = -1

    @classmethod
    def inactive(cls) -> "BuildSequence":
        return cls()

    @property
    def is_active(self) -> bool:
        return self.current_index >= 0

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def current_segment(self) -> Optional[int]:
        """Segment id of the current step, or None when inactive."""
        if not self.is_active:
            return None
        return self.steps[self.current_index]

    @property
    def placed_segments(self) -> Tuple[int, ...]:
        """Segment ids of steps before the current one."""
        if not self.is_active:
            return ()
        return self.steps[:self.current_index]

    @property
    def can_advance(self) -> bool:
        return self.is_active and self.current_index + 1 < len(self.steps)

    @property
    def can_retreat(self) -> bool:
        return self.is_active and self.current_index > 0

    @property
    def step_label(self) -> str:
        """Human-readable position, e.g. ``"Step 3 / 12"``."""
        if not self.is_active:
            return ""
        return f"Step {self.current_index + 1} / {len(self.steps)}"

    def advance(self) -> "BuildSequence":
        if not self.can_advance:
            return self
        return BuildSequence(self.steps, self.current_index + 1)

    def retreat(self) -> "BuildSequence":
        if not self.can_retreat:
            return self
        return BuildSequence(self.steps, self.current_index - 1)

    def exit(self) -> "BuildSequence":
        if not self.is_active:
            return self
        return BuildSequence.inactive()


def step_status(segment_map: np.ndarray, sequence: BuildSequence) -> np.ndarray:
    """Per-cell StepStatus for the current step of a guide.

    Cells of the current segment are CURRENT, cells of earlier steps PLACED
    and everything else HIDDEN. Without an active guide every labeled cell
    is PLACED.

    Parameters
    ----------
    segment_map : np.ndarray
        Outline segment map the sequence was built from.

    sequence : BuildSequence

    Returns
    -------
    np.ndarray
        int8 grid of StepStatus values.
    """
    status = np.full(segment_map.shape, StepStatus.HIDDEN, dtype=np.int8)
    if not sequence.is_active:
        status[segment_map > 0] = StepStatus.PLACED
        return status

    placed = list(sequence.placed_segments)
    if placed:
        status[np.isin(segment_map, placed)] = StepStatus.PLACED
    status[segment_map == sequence.current_segment] = StepStatus.CURRENT
    return status


def describe_step(sequence: BuildSequence, segments: Sequence) -> str:
    """Instruction for the current step.

    Parameters
    ----------
    sequence : BuildSequence
    segments : sequence of Segment
        Segments the sequence was built from.

    Examples
    --------
    >>> describe_step(seq, segments)
    'Step 2 / 8: place a horizontal row of 5 blocks'
    """
    if not sequence.is_active:
        return ""

    by_id: Dict[int, object] = {s.segment_id: s for s in segments}
    segment = by_id[sequence.current_segment]

    if segment.is_straight:
        noun = "row" if segment.kind.axis == "horizontal" else "column"
        action = f"place a {segment.kind.axis} {noun} of {segment.block_count} blocks"
    else:
        action = "place a single block"

    return f"{sequence.step_label}: {action}"
