"""
Shared utilities for FITCHECK.

Common functionality used across contexts:
- Logger setup
- Timestamps
- Percentage math
- Report formatting
- Analysis history log
"""

from fitcheck.utils.numeric import percentage, round_half_up
from fitcheck.utils.timestamp import now, now_exact

__all__ = ["now", "now_exact", "percentage", "round_half_up"]
