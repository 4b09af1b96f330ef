"""UserConfig: Forgiving, minimal user-facing configuration.

This schema accepts user inputs with aliases for common naming patterns
(e.g., WIDTH → width, FILLED → filled).

UserConfig is intentionally minimal - users only specify what they want
to override from the expert defaults. Validation is lenient: dimensions
are coerced to integers of at least 1 and unknown keys are ignored.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator, model_validator
from blockguide.schemas.base import GuideBaseModel, coerce_dimension


class UserShapeConfig(GuideBaseModel):
    """User-facing shape config."""
    width: Optional[int] = None
    height: Optional[int] = None
    filled: Optional[bool] = None
    locked: Optional[bool] = None
    padding: Optional[int] = Field(None, ge=0)

    @field_validator("width", "height", mode="before")
    @classmethod
    def coerce_dimensions(cls, v):
        """Accept strings and floats; clamp to at least 1."""
        return coerce_dimension(v)


class UserDisplayConfig(GuideBaseModel):
    """User-facing display config."""
    show_numbers: Optional[bool] = None
    active_char: Optional[str] = None
    inactive_char: Optional[str] = None


def unlock_unequal_dimensions(cfg):
    """Unequal width and height without an explicit lock means an ellipse."""
    if cfg.locked is None and cfg.width is not None and cfg.height is not None:
        if cfg.width != cfg.height:
            cfg.locked = False
    return cfg


def shape_overrides(cfg) -> dict:
    """Collect non-None shape fields of a flat config into a dict."""
    shape = {}
    for key in ("width", "height", "filled", "locked", "padding"):
        value = getattr(cfg, key)
        if value is not None:
            shape[key] = value
    return shape


class UserConfig(GuideBaseModel):
    """User-facing configuration schema.

    Minimal, forgiving, and uses common aliases. Users only specify
    what they want to override from ParamConfig defaults.

    Usage
    -----
        user_cfg = UserConfig(WIDTH=21, HEIGHT=13, FILLED=True)

        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    # Shape settings (flat aliases)
    width: Optional[int] = Field(None, alias="WIDTH")
    height: Optional[int] = Field(None, alias="HEIGHT")
    filled: Optional[bool] = Field(None, alias="FILLED")
    locked: Optional[bool] = Field(None, alias="LOCKED")
    padding: Optional[int] = Field(None, ge=0, alias="PADDING")

    # Display settings (flat aliases)
    show_numbers: Optional[bool] = Field(None, alias="SHOW_NUMBERS")

    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(
        None, alias="LOG_LEVEL"
    )

    # Nested overrides (advanced users)
    shape: Optional[UserShapeConfig] = None
    display: Optional[UserDisplayConfig] = None
    var_names: Optional[dict[str, str]] = None

    model_config = GuideBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("width", "height", mode="before")
    @classmethod
    def coerce_dimensions(cls, v):
        """Accept strings and floats; clamp to at least 1."""
        return coerce_dimension(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Normalize level names to uppercase."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    @model_validator(mode="after")
    def infer_unlocked_from_dimensions(self):
        """If unequal width and height are given but lock is not, unlock.

        This is a schema responsibility: asking for a 21x13 shape means an
        ellipse, so the default circle lock must not apply.
        """
        unlock_unequal_dimensions(self)
        if self.shape is not None:
            unlock_unequal_dimensions(self.shape)
        return self

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        # Shape section
        shape = shape_overrides(self)
        if self.shape is not None:
            shape.update(self.shape.model_dump(exclude_none=True))
        if shape:
            overrides["shape"] = shape

        # Display section
        display = {}
        if self.show_numbers is not None:
            display["show_numbers"] = self.show_numbers
        if self.display is not None:
            display.update(self.display.model_dump(exclude_none=True))
        if display:
            overrides["display"] = display

        if self.var_names:
            overrides["var_names"] = dict(self.var_names)

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
