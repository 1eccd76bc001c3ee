"""
Asteroid spawning for Cosmic Dodge.

Two difficulty ramps work together: fall speed grows continuously with
score, while the gap between spawns shrinks in discrete steps at fixed
score thresholds.
"""

import math
import random
from typing import Optional

from games.CosmicDodge.config import ASTEROID_COLORS, TUNING, DodgeTuning
from games.CosmicDodge.entities import Asteroid
from games.CosmicDodge.geometry import random_in_range


def spawn_interval(score: int, tuning: DodgeTuning = TUNING) -> int:
    """Ticks between spawns at the given score.

    With default tuning: 45 up to score 500, 35 up to 1000, 25 up to
    2000, 15 beyond. Each bound is inclusive.
    """
    for upper_bound, interval in tuning.spawn_thresholds:
        if score <= upper_bound:
            return interval
    return tuning.spawn_interval_final


def spawn_asteroid(
    score: int,
    surface_width: float,
    rng: Optional[random.Random] = None,
    tuning: DodgeTuning = TUNING,
) -> Asteroid:
    """
    Create a new asteroid just above the top edge.

    Args:
        score: Current tick score; raises the fall speed
        surface_width: Width of the play surface
        rng: Random source (module random if None)
        tuning: Gameplay constants

    Returns:
        Asteroid with y = -size and 0 <= x <= surface_width - size
    """
    rng = rng or random
    size = random_in_range(tuning.asteroid_size_min, tuning.asteroid_size_max, rng)
    x = random_in_range(0.0, max(0.0, surface_width - size), rng)
    speed = (random_in_range(tuning.asteroid_speed_min, tuning.asteroid_speed_max, rng)
             + score * tuning.speed_per_score)

    return Asteroid(
        x=x,
        y=-size,
        size=size,
        speed=speed,
        rotation=random_in_range(0.0, math.pi, rng),
        rotation_speed=random_in_range(-tuning.rotation_speed_max, tuning.rotation_speed_max, rng),
        color=rng.choice(ASTEROID_COLORS),
    )
