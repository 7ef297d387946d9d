"""Angle helpers and shared physical constants."""

from __future__ import annotations

import math

from .vec2 import Vec2

__all__ = ["PI", "GRAVITATION", "rtod", "deg360"]

PI = 3.1415927
GRAVITATION = Vec2(0.0, 200.0)


def rtod(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * (180.0 / PI)


def deg360(degrees: float) -> float:
    """Normalise an angle in degrees into the range [0, 360)."""
    if degrees >= 360.0 or degrees <= -360.0:
        degrees = math.fmod(degrees, 360.0)
    if degrees < 0.0:
        return 360.0 + degrees
    return degrees