"""Tests for asteroid spawning and spawn cadence."""

import math
import random

import pytest

from games.CosmicDodge.config import ASTEROID_COLORS, DodgeTuning
from games.CosmicDodge.spawner import spawn_asteroid, spawn_interval


@pytest.fixture
def rng():
    return random.Random(1234)


class TestSpawnAsteroid:

    def test_starts_fully_above_top_edge(self, rng):
        for _ in range(500):
            asteroid = spawn_asteroid(0, 800, rng)
            assert asteroid.y == -asteroid.size

    def test_x_within_surface(self, rng):
        for _ in range(500):
            asteroid = spawn_asteroid(0, 800, rng)
            assert 0 <= asteroid.x <= 800 - asteroid.size

    def test_size_range(self, rng):
        sizes = [spawn_asteroid(0, 800, rng).size for _ in range(500)]
        assert all(10 <= s < 35 for s in sizes)

    def test_speed_grows_with_score(self, rng):
        for score in (0, 400, 3000):
            for _ in range(200):
                speed = spawn_asteroid(score, 800, rng).speed
                assert 2 + score * 0.005 <= speed < 5 + score * 0.005

    def test_rotation_ranges(self, rng):
        for _ in range(500):
            asteroid = spawn_asteroid(0, 800, rng)
            assert 0 <= asteroid.rotation < math.pi
            assert -0.05 <= asteroid.rotation_speed < 0.05

    def test_color_from_palette(self, rng):
        colors = {spawn_asteroid(0, 800, rng).color for _ in range(300)}
        assert colors <= set(ASTEROID_COLORS)
        assert len(colors) == len(ASTEROID_COLORS)

    def test_surface_narrower_than_asteroid(self, rng):
        asteroid = spawn_asteroid(0, 5, rng)
        assert asteroid.x == 0

    def test_seeded_spawns_repeat(self):
        a = spawn_asteroid(100, 640, random.Random(5))
        b = spawn_asteroid(100, 640, random.Random(5))
        assert a == b


class TestSpawnInterval:

    @pytest.mark.parametrize("score,expected", [
        (0, 45),
        (500, 45),
        (501, 35),
        (1000, 35),
        (1001, 25),
        (2000, 25),
        (2001, 15),
        (100000, 15),
    ])
    def test_thresholds(self, score, expected):
        assert spawn_interval(score) == expected

    def test_non_increasing(self):
        intervals = [spawn_interval(score) for score in range(0, 3000)]
        assert all(a >= b for a, b in zip(intervals, intervals[1:]))

    def test_custom_tuning(self):
        tuning = DodgeTuning(spawn_thresholds=[(10, 5)], spawn_interval_final=2)
        assert spawn_interval(10, tuning) == 5
        assert spawn_interval(11, tuning) == 2
