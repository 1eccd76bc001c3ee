"""
Math helpers for Cosmic Dodge: interpolation, distance, random ranges
and fitting the play surface into the window.
"""

import math
import random
from typing import Optional

from models import Resolution
from games.CosmicDodge.config import (
    MAX_SURFACE_WIDTH,
    MAX_SURFACE_HEIGHT,
    VIEWPORT_WIDTH_FRACTION,
    VIEWPORT_HEIGHT_FRACTION,
)


def lerp(start: float, end: float, t: float) -> float:
    """Move `start` the fraction `t` of the way toward `end`."""
    return start + (end - start) * t


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(ax - bx, ay - by)


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]. If the range is empty, lo wins."""
    return max(lo, min(hi, value))


def random_in_range(lo: float, hi: float, rng: Optional[random.Random] = None) -> float:
    """Uniform float in [lo, hi)."""
    rng = rng or random
    return lo + rng.random() * (hi - lo)


def fit_surface(
    viewport_width: float,
    viewport_height: float,
    max_width: int = MAX_SURFACE_WIDTH,
    max_height: int = MAX_SURFACE_HEIGHT,
) -> Resolution:
    """
    Size of the play surface for a given window.

    The surface is capped at max_width x max_height and otherwise takes
    95% of the viewport width and 80% of its height.
    """
    width = min(max_width, viewport_width * VIEWPORT_WIDTH_FRACTION)
    height = min(max_height, viewport_height * VIEWPORT_HEIGHT_FRACTION)
    return Resolution(width=max(1, int(width)), height=max(1, int(height)))
