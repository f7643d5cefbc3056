"""
GameSession - the whole simulation for one player, independent of rendering
--------------------------------------------------------------------------
- Lifecycle hooks: init, load_resources, create, update(current_time_ms, delta_ms)
- Score/progress accrual and level-ups (LevelController)
- Asteroid spawning on a repeating timer, movement, pruning, collision (SpawnEngine)
- Phase machine: IDLE -> PLAYING -> GAME_OVER -> PLAYING (restart)

A host (the Arcade window, the Gymnasium env, or a test) calls advance_frame
once per frame, or drives `clock` and `update` itself.
"""

from __future__ import annotations

import math
import random
from typing import Dict, Optional

from .clock import Clock, TimerHandle
from .config import GameConfig
from .difficulty import LevelController
from .entities import Banner, GameOverSummary, GamePhase, InputState, Player
from .spawner import SpawnEngine
from .utils import clamp


class GameSession:
    """State and rules for one game, restartable in place"""

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None,
                 verbose: int = 0):
        self.config = config or GameConfig()
        self.verbose = verbose
        self.rng = random.Random(seed)

        self.clock = Clock()
        self.levels = LevelController(
            score_rate=self.config.score_rate,
            initial_threshold=self.config.initial_threshold,
            threshold_growth=self.config.threshold_growth,
        )
        self.spawner = SpawnEngine(self.config, self.rng)
        self.player = self._new_player()
        self.input = InputState()

        self.phase = GamePhase.IDLE
        self.debug = self.config.debug
        self.resources: Dict[str, str] = {}
        self.spawn_timer: Optional[TimerHandle] = None
        self.banner: Optional[Banner] = None
        self._banner_timer: Optional[TimerHandle] = None
        self.summary: Optional[GameOverSummary] = None

    # ----------------------------
    # Lifecycle hooks
    # ----------------------------

    def init(self, debug: Optional[bool] = None):
        if debug is not None:
            self.debug = debug

    def load_resources(self) -> Dict[str, str]:
        """Asset keys the renderer is expected to provide"""
        self.resources = {
            "ship": "assets/sprites/thrust_ship2.png",
            "asteroid": "assets/asteroids/medium/a10000.png",
            "background": "assets/skies/space3.png",
        }
        return self.resources

    def create(self):
        self.reset()
        self.phase = GamePhase.PLAYING
        self._log("Session started")
        self._start_level()

    def update(self, current_time_ms: float, delta_ms: float):
        if self.phase is not GamePhase.PLAYING:
            return

        self.levels.advance_progress(delta_ms)
        self.check_level_up()
        self._move_player()

        if self.spawner.tick(self.player.bounds):
            self.handle_game_over()

    # ----------------------------
    # Host helpers
    # ----------------------------

    def advance_frame(self, delta_ms: float):
        """Fire due timers, then run the frame update"""
        self.clock.advance(delta_ms)
        self.update(self.clock.now_ms, delta_ms)

    def restart(self):
        """Throw away the current game and start again from level 1"""
        self.create()

    def reset(self):
        self.clock.clear()
        self.spawn_timer = None
        self._banner_timer = None
        self.banner = None
        self.summary = None
        self.spawner.clear()
        self.levels.reset()
        self.player = self._new_player()
        self.input = InputState()

    # ----------------------------
    # Level transitions
    # ----------------------------

    def check_level_up(self) -> bool:
        if not self.levels.ready_to_level_up():
            return False

        level = self.levels.level_up()
        self.spawner.clear()
        if self.spawn_timer is not None:
            self.spawn_timer.cancel()
        self._log(f"Level {level} (spawn every {self.levels.spawn_delay:g}ms)")
        self._start_level()
        return True

    def _start_level(self):
        self.spawn_timer = self.clock.schedule(self.levels.spawn_delay, self.spawn_asteroid)
        self.show_banner(f"Level {self.levels.level}")

    def show_banner(self, text: str):
        if self._banner_timer is not None:
            self._banner_timer.cancel()
        self.banner = Banner(text)
        self._banner_timer = self.clock.schedule(
            self.config.banner_ms, self._clear_banner, repeating=False
        )

    def _clear_banner(self):
        self.banner = None
        self._banner_timer = None

    # ----------------------------
    # Spawning / collisions
    # ----------------------------

    def spawn_asteroid(self):
        if self.phase is not GamePhase.PLAYING:
            return None
        return self.spawner.spawn(self.levels.level, (self.player.x, self.player.y))

    def _move_player(self):
        step = self.config.player_step
        x_min, y_min, x_max, y_max = self.config.movable_region
        p = self.player
        if self.input.left:
            p.x = max(p.x - step, x_min)
        if self.input.right:
            p.x = min(p.x + step, x_max)
        if self.input.up:
            p.y = max(p.y - step, y_min)
        if self.input.down:
            p.y = min(p.y + step, y_max)

    def handle_game_over(self):
        self.phase = GamePhase.GAME_OVER
        if self.spawn_timer is not None:
            self.spawn_timer.cancel()
            self.spawn_timer = None
        self.summary = GameOverSummary(
            final_score=int(math.floor(self.levels.score)),
            level=self.levels.level,
        )
        self._log(f"Game over: score {self.summary.final_score}, level {self.summary.level}")

    # ----------------------------
    # Read-only views
    # ----------------------------

    @property
    def score(self) -> float:
        return self.levels.score

    @property
    def level(self) -> int:
        return self.levels.level

    @property
    def asteroids(self):
        return self.spawner.asteroids

    @property
    def is_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER

    def _new_player(self) -> Player:
        w, h = self.config.player_size
        x_min, y_min, x_max, y_max = self.config.movable_region
        return Player(
            x=clamp(self.config.width / 2, x_min, x_max),
            y=clamp(self.config.height / 2, y_min, y_max),
            width=w,
            height=h,
        )

    def _log(self, msg: str):
        if self.verbose > 0:
            print(f"[GameSession] {msg}")
