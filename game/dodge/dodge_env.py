"""
DodgeEnv - the asteroid dodge game as a Gymnasium environment
------------------------------------------------------------
- One GameSession frame (60 FPS, ~16.7ms) per step
- MultiDiscrete action space: [up(2), down(2), left(2), right(2)] held keys
- Vector observation: player position, level progress, level,
  and the K nearest asteroids' relative position and velocity
- Reward: small bonus per surviving frame, bonus per level-up, penalty on crash

Arcade is only imported when a window is actually needed, so the
environment runs headless for training and tests.

Quick test:
    python -m game.dodge.dodge_env
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import GameConfig
from .difficulty import base_speed
from .entities import GamePhase
from .session import GameSession
from .utils import clamp, seed_everything

DEFAULT_REWARDS = {
    "R_ALIVE": 0.01,
    "R_LEVEL": 1.0,
    "R_CRASH": 5.0,
}


class DodgeEnv(gym.Env):
    """Asteroid dodge environment driven frame by frame"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        config: Optional[GameConfig] = None,
        frame_ms: float = 1000 / 60,
        max_steps: int = 18_000,  # 5 minutes at 60 FPS
        k_asteroids: int = 5,
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render_mode: {render_mode}")
        if frame_ms <= 0:
            raise ValueError(f"frame_ms must be positive, got {frame_ms}")
        self.render_mode = render_mode

        self.config = config or GameConfig()
        self.frame_ms = frame_ms
        self.max_steps = max_steps
        self.k_asteroids = k_asteroids
        self.rewards = {**DEFAULT_REWARDS, **(reward_config or {})}

        # up, down, left, right: 0 released / 1 held
        self.action_space = spaces.MultiDiscrete([2, 2, 2, 2])

        # Player: pos(2) progress(1) level(1)
        # Each asteroid: rel pos(2) vel(2)
        obs_dim = 2 + 1 + 1 + self.k_asteroids * 4
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        # Fastest asteroid the observation distinguishes (level 10)
        self._speed_scale = base_speed(10)

        self.session = GameSession(self.config)
        self._window = None
        self._step_count = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)
        if seed is not None:
            self.session.rng.seed(seed)

        self._step_count = 0
        self.session.create()

        return self._get_obs(), self._get_info()

    def step(self, action):
        if self.session.phase is GamePhase.IDLE:
            raise RuntimeError("Call reset() before step()")

        up, down, left, right = (bool(int(a)) for a in action)
        self.session.input.up = up
        self.session.input.down = down
        self.session.input.left = left
        self.session.input.right = right

        level_before = self.session.level
        self.session.advance_frame(self.frame_ms)

        terminated = self.session.is_over
        reward = self._compute_reward(self.session.level - level_before, terminated)

        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        s = self.session
        p = s.player
        w, h = self.config.width, self.config.height

        progress = s.levels.progress / max(1e-6, s.levels.threshold)
        obs_parts = [
            (p.x / w) * 2 - 1,
            (p.y / h) * 2 - 1,
            clamp(progress, 0, 1) * 2 - 1,
            clamp(s.level / 10.0, 0, 1) * 2 - 1,
        ]

        # Asteroids: top-K nearest
        nearest = sorted(
            s.asteroids,
            key=lambda a: (a.x - p.x) ** 2 + (a.y - p.y) ** 2
        )
        for i in range(self.k_asteroids):
            if i < len(nearest):
                a = nearest[i]
                obs_parts += [
                    clamp((a.x - p.x) / w, -1, 1),
                    clamp((a.y - p.y) / h, -1, 1),
                    clamp(a.vx / self._speed_scale, -1, 1),
                    clamp(a.vy / self._speed_scale, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, levels_gained: int, crashed: bool) -> float:
        reward = 0.0
        if crashed:
            reward -= self.rewards["R_CRASH"]
        else:
            reward += self.rewards["R_ALIVE"]
        reward += self.rewards["R_LEVEL"] * levels_gained
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": int(self.session.score),
            "level": self.session.level,
            "num_asteroids": len(self.session.asteroids),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .window import DodgeWindow
            self._window = DodgeWindow(self.session, drive=False, title="DodgeEnv - Arcade")

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42) -> float:
    """Run a random-policy episode and return its total reward"""
    env = DodgeEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.2f} "
          f"(score {info['score']}, level {info['level']}, {info['step']} steps)")

    env.close()
    return total


if __name__ == "__main__":
    # Use: python -m game.dodge.dodge_env
    run_random_episode(render=True)
