"""Block Build Guide User Configuration.

This is the user-facing configuration file. Modify settings here to customize
the shape. Defaults for everything else come from blockguide.schemas.param.

Usage:
    python scripts/run_build_guide.py scripts/user_config.py
    python scripts/run_build_guide.py scripts/user_config.py --width 31
    python scripts/run_build_guide.py scripts/user_config.py --all-steps
"""

CONFIG = {
    # ========================================================================
    # SHAPE
    # ========================================================================
    "WIDTH": 21,              # Blocks across
    "HEIGHT": 13,             # Blocks down (unequal sizes unlock the shape)
    "FILLED": False,          # True: build the interior as well
    "PADDING": 2,             # Empty cells drawn around the shape

    # ========================================================================
    # DISPLAY
    # ========================================================================
    "SHOW_NUMBERS": True,     # Print run lengths instead of block characters

    # ========================================================================
    # LOGGING
    # ========================================================================
    "LOG_LEVEL": "INFO",
}
