"""CLIConfig: Command-line operational overrides.

Minimal configuration for parameters that commonly change between runs:
dimensions, fill mode, verbosity.

This schema handles command-line arguments parsed by argparse.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator, model_validator
from blockguide.schemas.base import GuideBaseModel, coerce_dimension
from blockguide.schemas.user import shape_overrides, unlock_unequal_dimensions


class CLIConfig(GuideBaseModel):
    """Command-line configuration overrides.

    Highest priority in config resolution.

    Notes
    -----
    If both width and height are given, differ, and locked is not, the
    shape is unlocked (schema responsibility, not runtime).

    Usage
    -----
        cli_cfg = CLIConfig(width=15, filled=True)

        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    width: Optional[int] = None
    height: Optional[int] = None
    filled: Optional[bool] = None
    locked: Optional[bool] = None
    padding: Optional[int] = Field(None, ge=0)
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    @field_validator("width", "height", mode="before")
    @classmethod
    def coerce_dimensions(cls, v):
        """Accept strings and floats; clamp to at least 1."""
        return coerce_dimension(v)

    @model_validator(mode="after")
    def infer_unlocked_from_dimensions(self):
        """Unequal width and height without --unlocked still means an ellipse."""
        return unlock_unequal_dimensions(self)

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        shape = shape_overrides(self)
        if shape:
            overrides["shape"] = shape

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
