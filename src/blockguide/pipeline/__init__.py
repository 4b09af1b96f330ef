"""Pipeline modules.

- processor: Runs all shape stages with contract checks
"""

from blockguide.pipeline.processor import ShapeProcessor

__all__ = [
    "ShapeProcessor",
]
