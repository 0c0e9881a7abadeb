#!/usr/bin/env python3
"""
Shared numeric helpers
"""
import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def clamp(value, lower, upper):
    return max(lower, min(upper, value))
