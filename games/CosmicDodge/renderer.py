"""
Drawing for Cosmic Dodge.

The renderer only reads session state. Layering is trail, then ship,
then asteroids, so an asteroid hitting the ship is drawn on top of it.
"""

import math
from typing import List, Optional, Tuple

import pygame

from games.CosmicDodge.config import (
    BACKGROUND_COLOR,
    CRATER_ALPHA,
    CRATER_COLOR,
    GAME_OVER_COLOR,
    GLOW_ENABLED,
    HUD_COLOR,
    OVERLAY_COLOR,
    PLAYER_GLOW_RADIUS,
    TRAIL_COLOR,
)
from games.CosmicDodge.entities import Asteroid, Player, TrailParticle
from games.CosmicDodge.simulation import SessionData

Point = Tuple[float, float]

HEXAGON_SIDES = 6
GLOW_LAYERS = 5


def ship_points(player: Player) -> List[Point]:
    """Outline of the ship, nose up: tip, right wing, engine notch, left wing."""
    r = player.radius
    return [
        (player.x, player.y - r),
        (player.x + r, player.y + r),
        (player.x, player.y + r * 0.5),
        (player.x - r, player.y + r),
    ]


def hexagon_points(asteroid: Asteroid) -> List[Point]:
    """Vertices of the asteroid body, rotated by its current angle."""
    points = []
    for j in range(HEXAGON_SIDES):
        angle = asteroid.rotation + j * 2 * math.pi / HEXAGON_SIDES
        points.append((
            asteroid.x + asteroid.size * math.cos(angle),
            asteroid.y + asteroid.size * math.sin(angle),
        ))
    return points


def crater_center(asteroid: Asteroid) -> Point:
    """Crater position: offset (size/3, -size/4) in the asteroid's rotating frame."""
    ox = asteroid.size / 3
    oy = -asteroid.size / 4
    cos_r = math.cos(asteroid.rotation)
    sin_r = math.sin(asteroid.rotation)
    return (
        asteroid.x + ox * cos_r - oy * sin_r,
        asteroid.y + ox * sin_r + oy * cos_r,
    )


def _blit_translucent_circle(
    screen: pygame.Surface,
    color: Tuple[int, int, int],
    alpha: float,
    center: Point,
    radius: float,
) -> None:
    size = max(1, int(math.ceil(radius * 2)))
    surf = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.circle(surf, (*color, int(255 * alpha)), (size / 2, size / 2), radius)
    screen.blit(surf, (int(center[0] - size / 2), int(center[1] - size / 2)))


class Renderer:
    """
    Draws a session onto a pygame surface.

    Fonts are created lazily so the renderer can be built before
    pygame.font is initialized.
    """

    def __init__(self, glow: bool = GLOW_ENABLED):
        self._glow = glow
        self._font: Optional[pygame.font.Font] = None
        self._font_large: Optional[pygame.font.Font] = None

    def _get_font(self) -> pygame.font.Font:
        """Get or create font."""
        if self._font is None:
            self._font = pygame.font.Font(None, 36)
        return self._font

    def _get_font_large(self) -> pygame.font.Font:
        """Get or create large font."""
        if self._font_large is None:
            self._font_large = pygame.font.Font(None, 72)
        return self._font_large

    def draw(self, screen: pygame.Surface, session: SessionData) -> None:
        """Clear the surface and draw trail, ship and asteroids."""
        screen.fill(BACKGROUND_COLOR)

        for particle in session.player.trail:
            self._draw_particle(screen, particle)

        self._draw_ship(screen, session.player)

        for asteroid in session.asteroids:
            self._draw_asteroid(screen, asteroid)

    def _draw_particle(self, screen: pygame.Surface, particle: TrailParticle) -> None:
        if particle.alpha <= 0:
            return
        _blit_translucent_circle(screen, TRAIL_COLOR, particle.alpha,
                                 (particle.x, particle.y), particle.radius)

    def _draw_ship(self, screen: pygame.Surface, player: Player) -> None:
        points = ship_points(player)
        if self._glow:
            self._draw_glow(screen, player)
        pygame.draw.polygon(screen, player.color, points)

    def _draw_glow(self, screen: pygame.Surface, player: Player) -> None:
        """Soft halo: progressively larger, fainter copies of the hull."""
        reach = player.radius + PLAYER_GLOW_RADIUS
        size = int(math.ceil(reach * 2)) + 2
        halo = pygame.Surface((size, size), pygame.SRCALPHA)
        center = size / 2

        for layer in range(GLOW_LAYERS, 0, -1):
            scale = 1 + (PLAYER_GLOW_RADIUS / player.radius) * layer / GLOW_LAYERS
            alpha = int(60 / (layer + 1))
            points = [
                (center + (px - player.x) * scale, center + (py - player.y) * scale)
                for px, py in ship_points(player)
            ]
            layer_surf = pygame.Surface((size, size), pygame.SRCALPHA)
            pygame.draw.polygon(layer_surf, (*player.color, alpha), points)
            halo.blit(layer_surf, (0, 0))

        screen.blit(halo, (int(player.x - center), int(player.y - center)))

    def _draw_asteroid(self, screen: pygame.Surface, asteroid: Asteroid) -> None:
        pygame.draw.polygon(screen, asteroid.color, hexagon_points(asteroid))
        _blit_translucent_circle(screen, CRATER_COLOR, CRATER_ALPHA,
                                 crater_center(asteroid), asteroid.size / 4)

    # =========================================================================
    # HUD and overlays
    # =========================================================================

    def draw_hud(self, screen: pygame.Surface, display_score: int) -> None:
        """Score in the top-left corner."""
        text = self._get_font().render(f"Score: {display_score}", True, HUD_COLOR)
        screen.blit(text, (10, 10))

    def draw_start_screen(self, screen: pygame.Surface) -> None:
        """Title and instructions while waiting for a start signal."""
        width, height = screen.get_size()
        self._draw_overlay(screen)

        title = self._get_font_large().render("COSMIC DODGE", True, TRAIL_COLOR)
        screen.blit(title, title.get_rect(center=(width // 2, height // 2 - 50)))

        hint = self._get_font().render("Steer with mouse or touch - SPACE to play", True, HUD_COLOR)
        screen.blit(hint, hint.get_rect(center=(width // 2, height // 2 + 20)))

    def draw_game_over(self, screen: pygame.Surface, final_score: int) -> None:
        """Game over banner with the final score."""
        width, height = screen.get_size()
        self._draw_overlay(screen)

        text = self._get_font_large().render("GAME OVER", True, GAME_OVER_COLOR)
        screen.blit(text, text.get_rect(center=(width // 2, height // 2 - 50)))

        score = self._get_font().render(f"Final Score: {final_score}", True, HUD_COLOR)
        screen.blit(score, score.get_rect(center=(width // 2, height // 2 + 20)))

        hint = self._get_font().render("SPACE to play again - ESC to close", True, HUD_COLOR)
        screen.blit(hint, hint.get_rect(center=(width // 2, height // 2 + 60)))

    def _draw_overlay(self, screen: pygame.Surface) -> None:
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        screen.blit(overlay, (0, 0))
