"""
Tests for Cosmic Dodge drawing.

Geometry helpers are checked directly; drawing is checked by sampling
pixels on an off-screen surface.
"""

import copy
import math

import pygame
import pytest

from models import Resolution
from games.CosmicDodge.config import BACKGROUND_COLOR, PLAYER_COLOR
from games.CosmicDodge.entities import Asteroid, Player, TrailParticle
from games.CosmicDodge.renderer import Renderer, crater_center, hexagon_points, ship_points
from games.CosmicDodge.simulation import SessionData

RED = (255, 85, 85)


@pytest.fixture
def pygame_init():
    """Initialize pygame for rendering tests."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def canvas():
    return pygame.Surface((800, 600))


@pytest.fixture
def session():
    return SessionData.create(Resolution(width=800, height=600), seed=5)


def pixel(surface, x, y):
    return tuple(surface.get_at((int(x), int(y))))[:3]


# ============================================================================
# Geometry
# ============================================================================


def test_ship_points():
    points = ship_points(Player(x=100, y=200, radius=20))
    assert points == [(100, 180), (120, 220), (100, 210), (80, 220)]


def test_hexagon_vertices_lie_on_circle():
    asteroid = Asteroid(x=50, y=60, size=18, speed=0, rotation=0.7)
    points = hexagon_points(asteroid)

    assert len(points) == 6
    for px, py in points:
        assert math.hypot(px - 50, py - 60) == pytest.approx(18)


def test_hexagon_follows_rotation():
    still = hexagon_points(Asteroid(x=0, y=0, size=10, speed=0, rotation=0.0))
    assert still[0] == pytest.approx((10, 0))

    turned = hexagon_points(Asteroid(x=0, y=0, size=10, speed=0, rotation=math.pi / 2))
    assert turned[0][0] == pytest.approx(0, abs=1e-9)
    assert turned[0][1] == pytest.approx(10)


def test_crater_offset_without_rotation():
    center = crater_center(Asteroid(x=100, y=100, size=24, speed=0))
    assert center == pytest.approx((108, 94))


def test_crater_offset_rotates_with_body():
    asteroid = Asteroid(x=0, y=0, size=24, speed=0, rotation=math.pi)
    assert crater_center(asteroid) == pytest.approx((-8, 6))


# ============================================================================
# Drawing
# ============================================================================


def test_draw_does_not_mutate_session(canvas, session):
    session.player.emit_exhaust(0.75)
    session.asteroids.append(Asteroid(x=100, y=100, size=20, speed=3, rotation=0.3, color=RED))
    before = copy.deepcopy((session.player, session.asteroids, session.score, session.frame_count))

    Renderer(glow=True).draw(canvas, session)

    after = (session.player, session.asteroids, session.score, session.frame_count)
    assert after == before


def test_background_and_ship(canvas, session):
    Renderer(glow=False).draw(canvas, session)

    assert pixel(canvas, 10, 10) == BACKGROUND_COLOR
    assert pixel(canvas, 400, 495) == PLAYER_COLOR


def test_glow_keeps_hull_color(canvas, session):
    Renderer(glow=True).draw(canvas, session)

    assert pixel(canvas, 400, 495) == PLAYER_COLOR
    # The halo tints pixels just outside the hull
    assert pixel(canvas, 400, 476) != BACKGROUND_COLOR


def test_asteroid_body_and_crater(canvas, session):
    session.asteroids.append(Asteroid(x=100, y=100, size=20, speed=0, color=RED))

    Renderer(glow=False).draw(canvas, session)

    assert pixel(canvas, 85, 100) == RED
    cx, cy = crater_center(session.asteroids[0])
    crater = pixel(canvas, cx, cy)
    assert crater != RED
    assert all(c <= r for c, r in zip(crater, RED))


def test_asteroids_drawn_over_ship(canvas, session):
    session.asteroids.append(Asteroid(x=400, y=495, size=20, speed=0, color=RED))

    Renderer(glow=False).draw(canvas, session)

    assert pixel(canvas, 398, 495) == RED


def test_trail_drawn_under_ship(canvas, session):
    session.player.trail.append(TrailParticle(x=400, y=495, radius=10, alpha=1.0))

    Renderer(glow=False).draw(canvas, session)

    assert pixel(canvas, 400, 495) == PLAYER_COLOR


def test_faded_trail_particle_is_skipped(canvas, session):
    particle = session.player.emit_exhaust(0.75)
    particle.x, particle.y = 200, 200
    particle.alpha = 0.0

    Renderer(glow=False).draw(canvas, session)

    assert pixel(canvas, 200, 200) == BACKGROUND_COLOR


# ============================================================================
# Overlays
# ============================================================================


def test_hud_draws_in_corner(pygame_init, canvas):
    canvas.fill(BACKGROUND_COLOR)
    Renderer().draw_hud(canvas, 42)

    corner = pygame.Rect(0, 0, 200, 50)
    colors = {pixel(canvas, x, y) for x in range(corner.width) for y in range(corner.height)}
    assert colors != {BACKGROUND_COLOR}


def test_start_screen_dims_surface(pygame_init, canvas):
    canvas.fill((200, 200, 200))
    Renderer().draw_start_screen(canvas)

    assert pixel(canvas, 5, 5)[0] < 200


def test_game_over_dims_surface(pygame_init, canvas):
    canvas.fill((200, 200, 200))
    Renderer().draw_game_over(canvas, 17)

    assert pixel(canvas, 5, 595)[0] < 200


def test_fonts_are_created_lazily(pygame_init):
    renderer = Renderer()
    assert renderer._font is None
    renderer.draw_hud(pygame.Surface((100, 50)), 0)
    assert renderer._font is not None
