"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and contains NO optional fields that processing code depends on.
"""

from typing import Literal
from pydantic import ConfigDict, model_validator
from blockguide.schemas.base import GuideBaseModel


class InternalShapeConfig(GuideBaseModel):
    """Runtime shape configuration."""
    width: int
    height: int
    filled: bool
    locked: bool
    padding: int

    @model_validator(mode="after")
    def check_locked_dimensions(self):
        """A locked shape is a circle: both sides must match."""
        if self.locked and self.width != self.height:
            raise ValueError(
                f"locked shape requires width == height (got {self.width}x{self.height})"
            )
        return self


class InternalDisplayConfig(GuideBaseModel):
    """Runtime text preview settings."""
    show_numbers: bool
    active_char: str
    inactive_char: str


class InternalVarNamesConfig(GuideBaseModel):
    """Runtime dataset variable names."""
    active: str
    outline: str
    display: str
    horizontal_run: str
    vertical_run: str
    run_label: str
    segment_labels: str


class InternalLoggingConfig(GuideBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class InternalConfig(GuideBaseModel):
    """Fully validated, immutable runtime configuration.

    Usage
    -----
    Runtime modules receive InternalConfig and access fields directly:

        def __init__(self, config: InternalConfig):
            self.width = config.shape.width  # NOT .get()

    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    - NO validation in runtime code

    All of that happens during config resolution, not in runtime code.
    """

    shape: InternalShapeConfig
    display: InternalDisplayConfig
    var_names: InternalVarNamesConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
