"""Build guide modules.

- sequencer: Outline segments to ordered build steps
- session: Immutable guide state and per-step cell status
"""

from blockguide.guide.session import BuildSequence, StepStatus, describe_step, step_status
from blockguide.guide.sequencer import build_guide, segments_to_dataframe, sequence_segments

__all__ = [
    "BuildSequence",
    "StepStatus",
    "describe_step",
    "step_status",
    "build_guide",
    "segments_to_dataframe",
    "sequence_segments",
]
