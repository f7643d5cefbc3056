"""
Tests for asteroid spawn geometry, movement, pruning and collision
"""

import math
import random

import pytest

from game.dodge.config import GameConfig
from game.dodge.difficulty import base_speed
from game.dodge.entities import Asteroid, Rect
from game.dodge.spawner import SpawnEngine, compute_spawn


class ScriptedRandom(random.Random):
    """Random source that replays queued randint/random results, then falls back"""

    def __init__(self, ints=(), floats=()):
        super().__init__(0)
        self.ints = list(ints)
        self.floats = list(floats)

    def randint(self, a, b):
        if self.ints:
            value = self.ints.pop(0)
            assert a <= value <= b
            return value
        return super().randint(a, b)

    def random(self):
        if self.floats:
            return self.floats.pop(0)
        return super().random()


FAR_AWAY = Rect(5000, 5000, 40, 40)


def test_spawn_speed_matches_level_speed():
    rng = random.Random(1234)
    for level in range(1, 15):
        for _ in range(200):
            player = (rng.uniform(50, 750), rng.uniform(50, 550))
            s = compute_spawn(level, player, rng)
            assert math.hypot(s.vx, s.vy) == pytest.approx(base_speed(level), rel=1e-9)


def test_spawn_points_sit_just_outside_an_edge():
    rng = random.Random(7)
    for _ in range(500):
        s = compute_spawn(3, (400, 300), rng)
        if s.y == -50:
            assert 0 <= s.x <= 800 and s.vy > 0
        elif s.x == 850:
            assert 0 <= s.y <= 600
        elif s.y == 650:
            assert 0 <= s.x <= 800
        else:
            assert s.x == -50 and 0 <= s.y <= 600


def test_straight_spawn_from_left_moves_right():
    # side 3 = left, y = 200, no targeting, lateral = -300
    rng = ScriptedRandom(ints=[3, 200, -300], floats=[0.99])
    s = compute_spawn(1, (400, 300), rng)
    assert (s.x, s.y) == (-50, 200)
    speed = base_speed(1)
    assert s.vx == pytest.approx(speed / math.sqrt(2))
    assert s.vy == pytest.approx(-speed / math.sqrt(2))


def test_straight_spawn_from_top_has_fixed_downward_component():
    rng = ScriptedRandom(ints=[0, 400, 0], floats=[0.99])
    s = compute_spawn(2, (100, 100), rng)
    assert (s.x, s.y) == (400, -50)
    assert s.vx == pytest.approx(0.0)
    assert s.vy == pytest.approx(base_speed(2))


def test_targeting_spawn_points_at_player():
    # side 1 = right, y = 300, random() below every targeting probability
    rng = ScriptedRandom(ints=[1, 300], floats=[0.0])
    s = compute_spawn(1, (450, 300), rng)
    assert (s.x, s.y) == (850, 300)
    assert s.vx == pytest.approx(-base_speed(1))
    assert s.vy == pytest.approx(0.0)


def test_targeting_at_spawn_point_falls_back_to_inward_direction():
    rng = ScriptedRandom(ints=[3, 300], floats=[0.0])
    s = compute_spawn(1, (-50, 300), rng)
    assert not math.isnan(s.vx) and not math.isnan(s.vy)
    assert (s.vx, s.vy) == pytest.approx((base_speed(1), 0.0))


def test_spawned_asteroid_scale_in_range():
    engine = SpawnEngine(GameConfig(), random.Random(3))
    for _ in range(300):
        a = engine.spawn(1, (400, 300))
        assert 0.5 <= a.scale <= 1.5
    assert len(engine.asteroids) == 300


@pytest.mark.parametrize("x,y,kept", [
    (-51, 300, False),
    (851, 300, False),
    (-49, 300, True),
    (-50, 300, True),
    (849, 300, True),
    (850, 300, True),
    (400, -51, False),
    (400, 651, False),
    (400, -49, True),
    (400, 649, True),
])
def test_pruning_margin(x, y, kept):
    engine = SpawnEngine(GameConfig())
    engine.asteroids = [Asteroid(x=x, y=y, vx=0.0, vy=0.0)]
    engine.tick(FAR_AWAY)
    assert (len(engine.asteroids) == 1) is kept


def test_tick_moves_by_velocity_per_frame():
    engine = SpawnEngine(GameConfig())
    a = Asteroid(x=100, y=100, vx=2.5, vy=-1.0)
    engine.asteroids = [a]
    engine.tick(FAR_AWAY)
    engine.tick(FAR_AWAY)
    assert (a.x, a.y) == (105.0, 98.0)


def test_collision_against_shrunk_hitbox():
    engine = SpawnEngine(GameConfig())
    # 5px box scaled to 40% -> hit box [120, 120, 2, 2]
    a = Asteroid(x=121.0, y=121.0, vx=0.0, vy=0.0, scale=1.0, size=5.0)
    engine.asteroids = [a]
    hb = engine.hitbox(a)
    assert (hb.x, hb.y, hb.width, hb.height) == pytest.approx((120, 120, 2, 2))
    assert engine.tick(Rect(100, 100, 40, 40)) is True


def test_outer_part_of_asteroid_is_not_collidable():
    engine = SpawnEngine(GameConfig())
    # 100px asteroid centred at (200, 120): full box starts at x=150, hit box at 180
    engine.asteroids = [Asteroid(x=200.0, y=120.0, vx=0.0, vy=0.0, scale=1.0, size=100.0)]
    assert engine.tick(Rect(100, 100, 60, 40)) is False
    assert engine.tick(Rect(100, 100, 81, 40)) is True


def test_clear_empties_collection():
    engine = SpawnEngine(GameConfig(), random.Random(0))
    engine.spawn(1, (400, 300))
    engine.clear()
    assert engine.asteroids == []
