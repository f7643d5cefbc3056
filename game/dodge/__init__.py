"""Asteroid dodge - spawn/difficulty/collision simulation with Arcade and Gymnasium hosts"""

from .config import GameConfig
from .session import GameSession
from .dodge_env import DodgeEnv, run_random_episode

__all__ = ['GameConfig', 'GameSession', 'DodgeEnv', 'run_random_episode']
