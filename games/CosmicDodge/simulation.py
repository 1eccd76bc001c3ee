"""
Per-tick simulation for Cosmic Dodge.

One call to step() advances a running session by exactly one tick:

    1. score += 1
    2. ease the ship toward the pointer
    3. clamp the ship to the playable rectangle
    4. every few ticks, emit an exhaust particle
    5. age the exhaust trail
    6. spawn an asteroid when the frame counter hits the spawn interval
    7. move and spin every asteroid
    8. drop asteroids that fell past the bottom
    9. test for a collision (first hit in spawn order ends the session)
    10. frame_count += 1 if the ship survived

The order is fixed so seeded sessions replay identically.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from models import Resolution
from dodgekit.games.game_state import GameState
from dodgekit.logging import get_logger
from games.CosmicDodge.config import (
    PLAYER_RADIUS,
    PLAYER_START_OFFSET,
    SCORE_DIVISOR,
    TUNING,
    DodgeTuning,
)
from games.CosmicDodge.entities import Asteroid, Player
from games.CosmicDodge.geometry import clamp, distance
from games.CosmicDodge.spawner import spawn_asteroid, spawn_interval

log = get_logger('simulation')


class StepResult(Enum):
    """Outcome of one simulation tick."""
    IDLE = "idle"            # Session not running; nothing happened
    CONTINUE = "continue"    # Tick completed, ship survived
    COLLISION = "collision"  # Ship was hit; session is now over


@dataclass
class SessionData:
    """
    Everything a single play-through owns.

    Attributes:
        surface: Current play surface size
        player: The ship
        asteroids: Live asteroids in spawn order
        score: Ticks survived (shown divided by SCORE_DIVISOR)
        frame_count: Completed ticks; drives trail and spawn cadence
        state: IDLE, PLAYING or GAME_OVER
        tuning: Gameplay constants
        rng: Random source for spawning
    """
    surface: Resolution
    player: Player
    asteroids: List[Asteroid] = field(default_factory=list)
    score: int = 0
    frame_count: int = 0
    state: GameState = GameState.IDLE
    tuning: DodgeTuning = TUNING
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def create(
        cls,
        surface: Resolution,
        seed: Optional[int] = None,
        tuning: DodgeTuning = TUNING,
        player_radius: float = PLAYER_RADIUS,
    ) -> 'SessionData':
        """New idle session with the ship parked at its home position."""
        player = Player(x=0.0, y=0.0, radius=player_radius)
        session = cls(surface=surface, player=player, tuning=tuning, rng=random.Random(seed))
        session.player.x, session.player.y = session.home_position()
        return session

    @property
    def display_score(self) -> int:
        return self.score // SCORE_DIVISOR

    @property
    def is_running(self) -> bool:
        return self.state == GameState.PLAYING

    def home_position(self) -> Tuple[float, float]:
        """Bottom-center start point, kept inside the playable rectangle."""
        radius = self.player.radius
        x = clamp(self.surface.width / 2, radius, self.surface.width - radius)
        y = clamp(self.surface.height - PLAYER_START_OFFSET, radius, self.surface.height - radius)
        return (x, y)

    def reset(self, surface: Optional[Resolution] = None) -> None:
        """Clear score, counters, asteroids and trail; park the ship."""
        if surface is not None:
            self.surface = surface
        self.score = 0
        self.frame_count = 0
        self.asteroids = []
        self.player.trail = []
        self.player.x, self.player.y = self.home_position()


def collides(player: Player, asteroid: Asteroid, margin: float = TUNING.collision_margin) -> bool:
    """Circle overlap test with a forgiveness margin.

    The ship is hit when the centers are closer than the summed radii
    minus `margin`.
    """
    gap = distance(player.x, player.y, asteroid.x, asteroid.y)
    return gap < player.radius + asteroid.radius - margin


def step(session: SessionData, target: Tuple[float, float]) -> StepResult:
    """
    Advance a running session by one tick.

    Args:
        session: Session to mutate
        target: Pointer position (surface coordinates) the ship steers toward

    Returns:
        StepResult.IDLE if the session is not running, COLLISION if the
        ship was hit this tick (session state becomes GAME_OVER), else
        CONTINUE.
    """
    if not session.is_running:
        return StepResult.IDLE

    tuning = session.tuning
    player = session.player
    width = session.surface.width
    height = session.surface.height

    session.score += 1

    player.move_toward(target[0], target[1], tuning.lerp_factor)
    player.clamp_to(width, height)

    if session.frame_count % tuning.trail_interval == 0:
        player.emit_exhaust(tuning.trail_offset_factor)
    player.age_trail(tuning.trail_drift, tuning.trail_fade)

    if session.frame_count % spawn_interval(session.score, tuning) == 0:
        asteroid = spawn_asteroid(session.score, width, session.rng, tuning)
        session.asteroids.append(asteroid)
        log.trace("spawned asteroid size=%.1f speed=%.2f x=%.1f",
                  asteroid.size, asteroid.speed, asteroid.x)

    for asteroid in session.asteroids:
        asteroid.advance()
    session.asteroids = [a for a in session.asteroids if not a.is_below(height)]

    for asteroid in session.asteroids:
        if collides(player, asteroid, tuning.collision_margin):
            session.state = GameState.GAME_OVER
            log.debug("collision at tick %d (score %d)", session.frame_count, session.score)
            return StepResult.COLLISION

    session.frame_count += 1
    return StepResult.CONTINUE
