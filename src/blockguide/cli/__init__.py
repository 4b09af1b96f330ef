"""Command-line interface for the build guide.

Scripts are thin wrappers; this is the real implementation.
"""

from blockguide.cli.run_guide import run_build_guide

__all__ = ['run_build_guide']
