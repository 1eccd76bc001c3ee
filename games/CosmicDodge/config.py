"""
Cosmic Dodge - Configuration loader.

Loads settings from the .env file in the game directory, with sensible
defaults. Create a .env.local file to override settings without
modifying .env.
"""
import os
from pathlib import Path
from typing import List, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator

GAME_DIR = Path(__file__).parent

# .env.local first so its values win (load_dotenv never overrides)
load_dotenv(GAME_DIR / '.env.local')
load_dotenv(GAME_DIR / '.env')


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display
MAX_SURFACE_WIDTH = _get_int('MAX_SURFACE_WIDTH', 800)
MAX_SURFACE_HEIGHT = _get_int('MAX_SURFACE_HEIGHT', 600)
VIEWPORT_WIDTH_FRACTION = _get_float('VIEWPORT_WIDTH_FRACTION', 0.95)
VIEWPORT_HEIGHT_FRACTION = _get_float('VIEWPORT_HEIGHT_FRACTION', 0.8)
WINDOW_WIDTH = _get_int('WINDOW_WIDTH', 840)
WINDOW_HEIGHT = _get_int('WINDOW_HEIGHT', 760)
FPS = _get_int('FPS', 60)

# Player
PLAYER_RADIUS = _get_float('PLAYER_RADIUS', 20.0)
PLAYER_START_OFFSET = _get_float('PLAYER_START_OFFSET', 100.0)  # above bottom edge

# Score shown to the player is the tick count divided by this
SCORE_DIVISOR = _get_int('SCORE_DIVISOR', 10)

# Visual
BACKGROUND_COLOR = (8, 8, 20)
PLAYER_COLOR = (77, 79, 255)        # Cosmic blue
TRAIL_COLOR = (77, 79, 255)
PLAYER_GLOW_RADIUS = 15
CRATER_COLOR = (0, 0, 0)
CRATER_ALPHA = 0.3
ASTEROID_COLORS: List[Tuple[int, int, int]] = [
    (240, 128, 240),   # Pink
    (255, 215, 0),     # Yellow
    (170, 170, 170),   # Gray
    (255, 85, 85),     # Red
]
HUD_COLOR = (255, 255, 255)
OVERLAY_COLOR = (0, 0, 0, 160)
GAME_OVER_COLOR = (255, 85, 85)
GLOW_ENABLED = _get_bool('GLOW_ENABLED', True)


class DodgeTuning(BaseModel):
    """
    Gameplay tuning constants.

    Defaults reproduce the reference feel of the game. Every value can be
    overridden from the environment (see load_tuning).
    """
    model_config = ConfigDict(frozen=True)

    lerp_factor: float = Field(
        default=0.15, gt=0.0, le=1.0,
        description="Fraction of the remaining distance to the pointer covered per tick",
    )
    collision_margin: float = Field(
        default=5.0, ge=0.0,
        description="Subtracted from the summed radii before the overlap test",
    )
    trail_interval: int = Field(
        default=3, ge=1,
        description="Ticks between exhaust particles",
    )
    trail_offset_factor: float = Field(
        default=0.75,
        description="Exhaust spawn offset below the ship, as a fraction of its radius",
    )
    trail_fade: float = Field(
        default=0.05, gt=0.0, le=1.0,
        description="Alpha lost by each exhaust particle per tick",
    )
    trail_drift: float = Field(
        default=2.0,
        description="Downward drift of exhaust particles per tick",
    )
    asteroid_size_min: float = Field(default=10.0, gt=0.0)
    asteroid_size_max: float = Field(default=35.0, gt=0.0)
    asteroid_speed_min: float = Field(default=2.0, ge=0.0)
    asteroid_speed_max: float = Field(default=5.0, ge=0.0)
    speed_per_score: float = Field(
        default=0.005, ge=0.0,
        description="Extra fall speed per tick of score",
    )
    rotation_speed_max: float = Field(default=0.05, ge=0.0)
    spawn_thresholds: List[Tuple[int, int]] = Field(
        default=[(500, 45), (1000, 35), (2000, 25)],
        description="(score upper bound, ticks between spawns), ascending",
    )
    spawn_interval_final: int = Field(
        default=15, ge=1,
        description="Ticks between spawns once every threshold is passed",
    )

    @model_validator(mode='after')
    def validate_ranges(self) -> 'DodgeTuning':
        if self.asteroid_size_min > self.asteroid_size_max:
            raise ValueError('asteroid_size_min must not exceed asteroid_size_max')
        if self.asteroid_speed_min > self.asteroid_speed_max:
            raise ValueError('asteroid_speed_min must not exceed asteroid_speed_max')
        bounds = [bound for bound, _ in self.spawn_thresholds]
        if bounds != sorted(bounds):
            raise ValueError('spawn_thresholds must be in ascending score order')
        if any(interval < 1 for _, interval in self.spawn_thresholds):
            raise ValueError('spawn intervals must be at least one tick')
        return self


def load_tuning() -> DodgeTuning:
    """Build tuning from environment overrides (LERP_FACTOR, COLLISION_MARGIN, ...)."""
    overrides = {}
    for name in DodgeTuning.model_fields:
        if name == 'spawn_thresholds':
            continue
        raw = os.getenv(name.upper())
        if raw is not None:
            overrides[name] = raw
    return DodgeTuning(**overrides)


TUNING: DodgeTuning = load_tuning()
