"""
Game entity dataclasses
"""

from dataclasses import dataclass
from enum import Enum


class GamePhase(Enum):
    """Whole-game state machine: IDLE -> PLAYING -> GAME_OVER -> PLAYING"""
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box in screen space, (x, y) is the top-left corner"""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @classmethod
    def centered(cls, cx: float, cy: float, width: float, height: float) -> "Rect":
        return cls(cx - width / 2, cy - height / 2, width, height)


@dataclass
class Player:
    """Player ship, moved directly from input (no velocity state)"""
    x: float
    y: float
    width: float = 40.0
    height: float = 40.0

    @property
    def bounds(self) -> Rect:
        return Rect.centered(self.x, self.y, self.width, self.height)


@dataclass
class Asteroid:
    """Incoming rock; velocity is in pixels per frame"""
    x: float
    y: float
    vx: float
    vy: float
    scale: float = 1.0
    size: float = 64.0  # texture edge before scaling

    @property
    def bounds(self) -> Rect:
        edge = self.size * self.scale
        return Rect.centered(self.x, self.y, edge, edge)


@dataclass(frozen=True)
class SpawnData:
    """Entry point and velocity for a new asteroid"""
    x: float
    y: float
    vx: float
    vy: float


@dataclass
class InputState:
    """Directional keys currently held"""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False


@dataclass
class LevelState:
    level: int = 1
    progress: float = 0.0
    threshold: float = 1000.0


@dataclass(frozen=True)
class GameOverSummary:
    final_score: int
    level: int


@dataclass
class Banner:
    """Transient centre-screen text such as 'Level 3'"""
    text: str
