"""Helper utilities for score display."""

import math


def display_percent(value: float) -> int:
    """Round a score for display, halves going up (52.5 -> 53, -0.5 -> 0)."""
    return int(math.floor(value + 0.5))
