"""
Fixed, validated configuration record for a game session
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class GameConfig:
    """Every option a session recognises. Validated on construction."""

    width: int = 800
    height: int = 600
    gravity: Tuple[float, float] = (0.0, 0.0)  # unused, must stay zero
    debug: bool = False

    edge_margin: float = 50.0  # spawn offset and prune margin outside the viewport
    player_bounds_margin: float = 50.0
    player_step: float = 5.0  # px per frame per held key
    player_size: Tuple[float, float] = (40.0, 40.0)
    asteroid_size: float = 64.0
    asteroid_scale_range: Tuple[float, float] = (0.5, 1.5)
    hitbox_scale: float = 0.4
    banner_ms: float = 2000.0

    score_rate: float = 0.01  # per elapsed millisecond
    initial_threshold: float = 1000.0
    threshold_growth: float = 1.2

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Viewport must be positive, got {self.width}x{self.height}")
        if tuple(self.gravity) != (0.0, 0.0):
            raise ValueError(f"Gravity is not supported, got {self.gravity}")
        if not isinstance(self.debug, bool):
            raise ValueError(f"debug must be a bool, got {self.debug!r}")
        if 2 * self.player_bounds_margin >= min(self.width, self.height):
            raise ValueError("player_bounds_margin leaves no movable region")
        lo, hi = self.asteroid_scale_range
        if not 0 < lo <= hi:
            raise ValueError(f"Invalid asteroid_scale_range: {self.asteroid_scale_range}")
        if not 0 < self.hitbox_scale <= 1:
            raise ValueError(f"hitbox_scale must be in (0, 1], got {self.hitbox_scale}")
        if self.edge_margin < 0 or self.player_step < 0 or self.banner_ms < 0:
            raise ValueError("edge_margin, player_step and banner_ms must be non-negative")
        if self.initial_threshold <= 0 or self.threshold_growth <= 1:
            raise ValueError("Threshold must start positive and grow on every level")

    @property
    def movable_region(self) -> Tuple[float, float, float, float]:
        """(x_min, y_min, x_max, y_max) the player centre is clamped to"""
        m = self.player_bounds_margin
        return m, m, self.width - m, self.height - m

    @classmethod
    def from_dict(cls, options: Dict[str, Any]) -> "GameConfig":
        """Build a config from a plain dict, rejecting unknown option names"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(f"Unknown config option(s): {', '.join(unknown)}")
        return cls(**options)
