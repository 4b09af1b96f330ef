#!/usr/bin/env python3
"""Block Build Guide runner.

Usage:
    python scripts/run_build_guide.py scripts/user_config.py
    python scripts/run_build_guide.py scripts/user_config.py --step 3
    python scripts/run_build_guide.py --width 15 --filled --all-steps

Thin wrapper around ``blockguide.cli.run_guide.main``; the installed
``blockguide`` command does the same.
"""

from blockguide.cli.run_guide import main


if __name__ == "__main__":
    main()
