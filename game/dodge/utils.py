"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
import random
from typing import Tuple, Optional
import numpy as np

from .entities import Rect


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def normalize(
    x: float,
    y: float,
    eps: float = 1e-8,
    default: Tuple[float, float] = (0.0, 0.0),
) -> Tuple[float, float]:
    """Normalize a vector to unit length, returning `default` for a zero vector"""
    l = math.hypot(x, y)
    if l < eps:
        return default
    return x / l, y / l


def scaled_bounds(box: Rect, scale: float) -> Rect:
    """Shrink (or grow) a box concentrically so its size is `scale` times the original"""
    width_diff = box.width * (1 - scale)
    height_diff = box.height * (1 - scale)
    return Rect(
        box.x + width_diff / 2,
        box.y + height_diff / 2,
        box.width * scale,
        box.height * scale,
    )


def rects_intersect(a: Rect, b: Rect) -> bool:
    """
    Axis-aligned overlap test. Touching edges count as overlap; a box with
    no area never overlaps anything.
    """
    if a.width <= 0 or a.height <= 0 or b.width <= 0 or b.height <= 0:
        return False
    return not (
        a.right < b.x or a.bottom < b.y or a.x > b.right or a.y > b.bottom
    )


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
