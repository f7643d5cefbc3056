"""
Headless evaluation of baseline policies on the asteroid dodge environment
"""

import argparse
import csv
import os
from typing import Callable, Dict, List, Optional

import numpy as np

from game.dodge import DodgeEnv, GameConfig
from rl.configs.dodge_config import GAME_CONFIG, ENV_CONFIG, REWARD_CONFIG, EVAL_CONFIG


def make_env(render: bool = False) -> DodgeEnv:
    """Factory function to create the environment"""
    return DodgeEnv(
        render_mode="human" if render else None,
        config=GameConfig.from_dict(GAME_CONFIG),
        reward_config=REWARD_CONFIG,
        **ENV_CONFIG,
    )


def random_policy(env: DodgeEnv) -> Callable[[np.ndarray], np.ndarray]:
    return lambda obs: env.action_space.sample()


def evade_policy(env: DodgeEnv, danger_radius: float = 180.0) -> Callable[[np.ndarray], np.ndarray]:
    """
    Scripted baseline: step away from the nearest asteroid's next position,
    drift back toward the centre when nothing is close.
    """
    def act(obs: np.ndarray) -> np.ndarray:
        s = env.session
        p = s.player
        threat = None
        best = danger_radius ** 2
        for a in s.asteroids:
            d2 = (a.x + a.vx * 10 - p.x) ** 2 + (a.y + a.vy * 10 - p.y) ** 2
            if d2 < best:
                best = d2
                threat = a

        if threat is None:
            dx = s.config.width / 2 - p.x
            dy = s.config.height / 2 - p.y
            deadzone = 20.0
        else:
            dx = p.x - (threat.x + threat.vx * 10)
            dy = p.y - (threat.y + threat.vy * 10)
            deadzone = 0.0

        return np.array([
            int(dy < -deadzone),  # up
            int(dy > deadzone),   # down
            int(dx < -deadzone),  # left
            int(dx > deadzone),   # right
        ], dtype=np.int64)

    return act


POLICIES = {
    "random": random_policy,
    "evade": evade_policy,
}


def evaluate_policy(
    policy_name: str,
    n_episodes: int = 10,
    seed: Optional[int] = None,
    render: bool = False,
    csv_path: Optional[str] = None,
) -> Dict[str, float]:
    """
    Evaluate a baseline policy

    Args:
        policy_name: 'random' or 'evade'
        n_episodes: Number of episodes to evaluate
        seed: Base random seed; episode i uses seed + i
        render: Whether to open an Arcade window
        csv_path: Optional CSV file for per-episode rows
    """
    if policy_name not in POLICIES:
        raise ValueError(f"Unknown policy: {policy_name}")

    env = make_env(render=render)
    policy = POLICIES[policy_name](env)

    rows: List[Dict[str, float]] = []
    for episode in range(n_episodes):
        ep_seed = seed + episode if seed is not None else None
        obs, info = env.reset(seed=ep_seed)
        env.action_space.seed(ep_seed)

        terminated = False
        truncated = False
        total_reward = 0.0

        while not (terminated or truncated):
            obs, reward, terminated, truncated, info = env.step(policy(obs))
            total_reward += reward

        rows.append({
            "episode": episode,
            "reward": total_reward,
            "score": info["score"],
            "level": info["level"],
            "length": info["step"],
            "crashed": int(terminated),
        })
        print(f"[{policy_name}] Episode {episode + 1}/{n_episodes}: "
              f"Reward = {total_reward:.2f}, Score = {info['score']}, "
              f"Level = {info['level']}, Length = {info['step']}")

    env.close()

    if csv_path:
        os.makedirs(os.path.dirname(csv_path) or ".", exist_ok=True)
        with open(csv_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            writer.writerows(rows)
        print(f"[{policy_name}] Episode metrics written to {csv_path}")

    rewards = np.array([r["reward"] for r in rows])
    results = {
        "mean_reward": float(np.mean(rewards)),
        "std_reward": float(np.std(rewards)),
        "mean_score": float(np.mean([r["score"] for r in rows])),
        "mean_level": float(np.mean([r["level"] for r in rows])),
        "mean_length": float(np.mean([r["length"] for r in rows])),
    }

    print("\n" + "=" * 50)
    print(f"Evaluation Results: {policy_name} ({n_episodes} episodes)")
    print(f"Mean Reward: {results['mean_reward']:.2f} ± {results['std_reward']:.2f}")
    print(f"Mean Score: {results['mean_score']:.1f}")
    print(f"Mean Level: {results['mean_level']:.2f}")
    print(f"Mean Episode Length: {results['mean_length']:.1f}")
    print("=" * 50)

    return results


def main():
    parser = argparse.ArgumentParser(description="Evaluate baseline policies on asteroid dodge")
    parser.add_argument(
        "--policy",
        type=str,
        default="all",
        choices=list(POLICIES) + ["all"],
        help="Policy to evaluate (default: all)",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=EVAL_CONFIG["n_episodes"],
        help=f"Number of evaluation episodes (default: {EVAL_CONFIG['n_episodes']})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EVAL_CONFIG["seed"],
        help=f"Random seed (default: {EVAL_CONFIG['seed']})",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Open an Arcade window while evaluating",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Write per-episode CSV files to this directory",
    )

    args = parser.parse_args()

    names = EVAL_CONFIG["policies"] if args.policy == "all" else [args.policy]
    summary = {}
    for name in names:
        csv_path = os.path.join(args.log_dir, f"{name}_episodes.csv") if args.log_dir else None
        summary[name] = evaluate_policy(
            name,
            n_episodes=args.n_episodes,
            seed=args.seed,
            render=args.render,
            csv_path=csv_path,
        )

    if len(summary) > 1 and "random" in summary:
        for name, results in summary.items():
            if name == "random":
                continue
            improvement = results["mean_score"] - summary["random"]["mean_score"]
            print(f"\n{name} score improvement over random: {improvement:.1f}")


if __name__ == "__main__":
    main()
