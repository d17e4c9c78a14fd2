"""Shared constants and random-number helpers."""

from __future__ import annotations

import math
import random

INFINITY = math.inf
PI = math.pi

__all__ = [
    "INFINITY",
    "PI",
    "degrees_to_radians",
    "random_double",
    "random_int",
]


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * math.pi / 180.0


def random_double(minimum: float = 0.0, maximum: float = 1.0) -> float:
    """Return a random float in the half-open range [minimum, maximum)."""
    return minimum + (maximum - minimum) * random.random()


def random_int(minimum: int, maximum: int) -> int:
    """Return a random integer in the closed range [minimum, maximum]."""
    return int(random_double(minimum, maximum + 1))