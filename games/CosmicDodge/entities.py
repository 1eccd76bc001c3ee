"""
Entities for Cosmic Dodge.

The player's ship follows the pointer and leaves an exhaust trail;
asteroids fall from the top of the surface and spin as they go.
All entities are plain mutable dataclasses owned by a single session.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from games.CosmicDodge.config import PLAYER_COLOR, PLAYER_RADIUS
from games.CosmicDodge.geometry import clamp, lerp

# Alpha at or below this counts as fully faded (absorbs float drift from
# repeated subtraction).
ALPHA_EPSILON = 1e-9


@dataclass
class TrailParticle:
    """One puff of engine exhaust."""
    x: float
    y: float
    radius: float
    alpha: float = 1.0

    @property
    def spent(self) -> bool:
        return self.alpha <= ALPHA_EPSILON

    def age(self, drift: float, fade: float) -> bool:
        """Drift down and fade. Returns False once the particle is spent."""
        self.y += drift
        self.alpha = max(0.0, self.alpha - fade)
        return not self.spent


@dataclass
class Player:
    """
    The player's ship.

    Attributes:
        x, y: Center position (surface pixels)
        radius: Collision radius, also the drawn half-width of the ship
        color: RGB fill color
        trail: Exhaust particles, oldest first
    """
    x: float
    y: float
    radius: float = PLAYER_RADIUS
    color: Tuple[int, int, int] = PLAYER_COLOR
    trail: List[TrailParticle] = field(default_factory=list)

    def move_toward(self, target_x: float, target_y: float, factor: float) -> None:
        """Ease toward the target, covering `factor` of the gap on each axis."""
        self.x = lerp(self.x, target_x, factor)
        self.y = lerp(self.y, target_y, factor)

    def clamp_to(self, width: float, height: float) -> None:
        """Keep the ship's center inside the surface, inset by its radius."""
        self.x = clamp(self.x, self.radius, width - self.radius)
        self.y = clamp(self.y, self.radius, height - self.radius)

    def emit_exhaust(self, offset_factor: float) -> TrailParticle:
        """Append a fresh exhaust particle just below the ship."""
        particle = TrailParticle(
            x=self.x,
            y=self.y + self.radius * offset_factor,
            radius=self.radius / 2,
            alpha=1.0,
        )
        self.trail.append(particle)
        return particle

    def age_trail(self, drift: float, fade: float) -> None:
        """Age every particle and drop the spent ones, preserving order."""
        self.trail = [p for p in self.trail if p.age(drift, fade)]


@dataclass
class Asteroid:
    """
    A falling asteroid.

    Attributes:
        x, y: Center position (surface pixels)
        size: Radius of the hexagonal body and of its collision circle
        speed: Fall speed in pixels per tick
        rotation: Current angle in radians
        rotation_speed: Radians per tick
        color: RGB fill color
    """
    x: float
    y: float
    size: float
    speed: float
    rotation: float = 0.0
    rotation_speed: float = 0.0
    color: Tuple[int, int, int] = (170, 170, 170)

    @property
    def radius(self) -> float:
        return self.size

    def advance(self) -> None:
        """Fall and spin by one tick."""
        self.y += self.speed
        self.rotation += self.rotation_speed

    def is_below(self, height: float) -> bool:
        """True once the asteroid is entirely past the bottom edge."""
        return self.y > height + self.size
