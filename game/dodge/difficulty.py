"""
Level/difficulty curve: spawn cadence, asteroid speed and homing odds per level
"""

from __future__ import annotations

from .entities import LevelState


def spawn_delay_for_level(level: int) -> float:
    """Spawn interval in ms: 100ms faster per level, never below 500ms"""
    return max(1500 - level * 100, 500)


def base_speed(level: int) -> float:
    """Asteroid speed in px per frame"""
    return 3 + level * 0.5


def targeting_probability(level: int) -> float:
    """Chance a new asteroid is aimed at the player, capped at 80%"""
    return min(0.3 + level * 0.1, 0.8)


class LevelController:
    """Owns score, level progress and the rising level-up threshold"""

    def __init__(self, score_rate: float = 0.01, initial_threshold: float = 1000.0,
                 threshold_growth: float = 1.2):
        self.score_rate = score_rate
        self.initial_threshold = initial_threshold
        self.threshold_growth = threshold_growth
        self.score = 0.0
        self.state = LevelState(threshold=initial_threshold)

    @property
    def level(self) -> int:
        return self.state.level

    @property
    def progress(self) -> float:
        return self.state.progress

    @property
    def threshold(self) -> float:
        return self.state.threshold

    @property
    def spawn_delay(self) -> float:
        return spawn_delay_for_level(self.state.level)

    def reset(self):
        self.score = 0.0
        self.state = LevelState(threshold=self.initial_threshold)

    def advance_progress(self, delta_ms: float):
        # Same rate, separate counters: progress resets on level-up, score never does
        gain = delta_ms * self.score_rate
        self.score += gain
        self.state.progress += gain

    def ready_to_level_up(self) -> bool:
        return self.state.progress >= self.state.threshold

    def level_up(self) -> int:
        """Apply one level transition and return the new level"""
        self.state.level += 1
        self.state.progress = 0.0
        self.state.threshold *= self.threshold_growth
        return self.state.level
