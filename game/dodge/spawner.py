"""
Asteroid spawning, movement, pruning and collision
"""

from __future__ import annotations

import random
from typing import List, Optional, Tuple

from .config import GameConfig
from .difficulty import base_speed, targeting_probability
from .entities import Asteroid, Rect, SpawnData
from .utils import normalize, rects_intersect, scaled_bounds

EDGES = ("top", "right", "bottom", "left")

# Unit vector pointing into the screen from each edge
INWARD = {
    "top": (0.0, 1.0),
    "right": (-1.0, 0.0),
    "bottom": (0.0, -1.0),
    "left": (1.0, 0.0),
}

# Magnitude of the inward and maximum lateral component of a straight spawn
STRAIGHT_COMPONENT = 300


def compute_spawn(
    level: int,
    player_pos: Tuple[float, float],
    rng: random.Random,
    width: int = 800,
    height: int = 600,
    margin: float = 50.0,
) -> SpawnData:
    """Pick an entry point just outside a random edge and a velocity at level speed"""
    side = EDGES[rng.randint(0, 3)]
    speed = base_speed(level)
    is_targeting = rng.random() < targeting_probability(level)
    c = STRAIGHT_COMPONENT

    if side == "top":
        x, y = rng.randint(0, width), -margin
    elif side == "right":
        x, y = width + margin, rng.randint(0, height)
    elif side == "bottom":
        x, y = rng.randint(0, width), height + margin
    else:
        x, y = -margin, rng.randint(0, height)

    if is_targeting:
        raw_x = player_pos[0] - x
        raw_y = player_pos[1] - y
    else:
        in_x, in_y = INWARD[side]
        lateral = rng.randint(-c, c)
        if in_x == 0:
            raw_x, raw_y = lateral, in_y * c
        else:
            raw_x, raw_y = in_x * c, lateral

    nx, ny = normalize(raw_x, raw_y, default=INWARD[side])
    return SpawnData(x=float(x), y=float(y), vx=nx * speed, vy=ny * speed)


class SpawnEngine:
    """Owns the live asteroid collection"""

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.asteroids: List[Asteroid] = []

    def spawn(self, level: int, player_pos: Tuple[float, float]) -> Asteroid:
        cfg = self.config
        data = compute_spawn(
            level, player_pos, self.rng,
            width=cfg.width, height=cfg.height, margin=cfg.edge_margin,
        )
        lo, hi = cfg.asteroid_scale_range
        asteroid = Asteroid(
            x=data.x, y=data.y, vx=data.vx, vy=data.vy,
            scale=self.rng.uniform(lo, hi),
            size=cfg.asteroid_size,
        )
        self.asteroids.append(asteroid)
        return asteroid

    def clear(self):
        self.asteroids = []

    def hitbox(self, asteroid: Asteroid) -> Rect:
        return scaled_bounds(asteroid.bounds, self.config.hitbox_scale)

    def is_off_screen(self, asteroid: Asteroid) -> bool:
        m = self.config.edge_margin
        return (asteroid.x < -m or asteroid.x > self.config.width + m or
                asteroid.y < -m or asteroid.y > self.config.height + m)

    def tick(self, player_bounds: Rect) -> bool:
        """Advance one frame; returns True if any asteroid hit the player"""
        hit = False
        survivors = []
        for a in self.asteroids:
            a.x += a.vx
            a.y += a.vy

            if self.is_off_screen(a):
                continue
            survivors.append(a)

            if rects_intersect(player_bounds, self.hitbox(a)):
                hit = True
        self.asteroids = survivors
        return hit
