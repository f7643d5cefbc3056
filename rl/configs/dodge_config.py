"""
Configuration for the asteroid dodge game and its evaluation runs
"""

# Game parameters (see game.dodge.config.GameConfig for validation)
GAME_CONFIG = {
    "width": 800,
    "height": 600,
    "gravity": (0.0, 0.0),
    "debug": False,
    "edge_margin": 50.0,          # Spawn 50px outside the screen, prune 50px outside it
    "player_bounds_margin": 50.0,  # Player centre stays in [50, 750] x [50, 550]
    "player_step": 5.0,           # Pixels per frame per held key
    "player_size": (40.0, 40.0),
    "asteroid_size": 64.0,        # Texture edge before the random 0.5-1.5 scale
    "asteroid_scale_range": (0.5, 1.5),
    "hitbox_scale": 0.4,          # Collidable share of the asteroid's box
    "banner_ms": 2000.0,          # "Level N" banner lifetime
    "score_rate": 0.01,           # Score per elapsed millisecond
    "initial_threshold": 1000.0,  # Progress needed for level 2
    "threshold_growth": 1.2,
}

# ==============================================================================
# ENVIRONMENT
# ==============================================================================

ENV_CONFIG = {
    "frame_ms": 1000 / 60,
    "max_steps": 18_000,  # 5 minutes at 60 FPS
    "k_asteroids": 5,
}

# Reward shaping for the Gymnasium wrapper
REWARD_CONFIG = {
    "R_ALIVE": 0.01,     # Per surviving frame
    "R_LEVEL": 1.0,      # Per level-up
    "R_CRASH": 5.0,      # Collision penalty
}

# ==============================================================================
# EVALUATION
# ==============================================================================

EVAL_CONFIG = {
    "n_episodes": 10,
    "seed": 42,
    "policies": ["random", "evade"],
    "log_dir": "./logs",
}
