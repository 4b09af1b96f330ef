"""ParamConfig: Expert defaults for blockguide.

This module defines the complete default configuration. ALL parameters must
have defaults here. No runtime code should define fallback values - this is
the single source of truth for defaults.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal
from pydantic import Field
from blockguide.schemas.base import GuideBaseModel


# =============================================================================
# Nested Configuration Models
# =============================================================================

class ShapeConfig(GuideBaseModel):
    """Ellipse dimensions and fill mode."""
    width: int = Field(11, ge=1, description="Ellipse width in blocks")
    height: int = Field(11, ge=1, description="Ellipse height in blocks")
    filled: bool = Field(False, description="Build the interior as well as the outline")
    locked: bool = Field(True, description="Keep width and height equal (circle)")
    padding: int = Field(2, ge=0, description="Empty cells around the shape")


class DisplayConfig(GuideBaseModel):
    """Text preview settings."""
    show_numbers: bool = True
    active_char: str = Field("#", min_length=1, max_length=1)
    inactive_char: str = Field(".", min_length=1, max_length=1)


class VarNamesConfig(GuideBaseModel):
    """Variable names in the shape dataset."""
    active: str = "active"
    outline: str = "outline"
    display: str = "display"
    horizontal_run: str = "horizontal_run"
    vertical_run: str = "vertical_run"
    run_label: str = "run_label"
    segment_labels: str = "segment_labels"


class LoggingConfig(GuideBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(GuideBaseModel):
    """Complete expert configuration with all defaults.

    Usage
    -----
    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg, cli_cfg)

    Runtime code only sees InternalConfig.
    """

    shape: ShapeConfig = Field(default_factory=ShapeConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    var_names: VarNamesConfig = Field(default_factory=VarNamesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
