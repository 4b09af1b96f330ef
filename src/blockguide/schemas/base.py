"""Base Pydantic model with strict defaults for blockguide configs.

All config schemas inherit from this base to ensure consistent validation
behavior across parameter, user, CLI, and internal configs.
"""

from pydantic import BaseModel, ConfigDict


class GuideBaseModel(BaseModel):
    """Base model for all blockguide configuration schemas.

    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Strips whitespace from strings
    """

    model_config = ConfigDict(
        extra='forbid',           # Reject unknown fields
        validate_assignment=True, # Validate on field mutation
        use_enum_values=True,     # Convert enums to values
        str_strip_whitespace=True,# Strip whitespace from strings
    )


def coerce_dimension(v):
    """Coerce a user-supplied dimension to an integer of at least 1.

    Mirrors how the dimension inputs behave: anything unparsable or zero
    becomes 1, and negative sizes clamp to 1.
    """
    if v is None:
        return v
    try:
        value = int(float(v))
    except (TypeError, ValueError):
        return 1
    return max(value, 1)
