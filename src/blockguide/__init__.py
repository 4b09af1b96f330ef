"""`blockguide` - block-by-block build guides for pixel ellipses.

Subpackages:
- shape: Rasterization, run-length encoding, segment labeling
- guide: Build order sequencing and guide state
- pipeline: Processor running all stages with contract checks
- schemas: Layered Pydantic configuration
- cli: Command-line runner
"""

__version__ = "0.1.0"
