"""
Plotting script for policy evaluation results.
Reads the per-episode CSVs written by rl.evaluate and compares policies.
"""

import os
import argparse
import pandas as pd
import numpy as np
import matplotlib.pyplot as plt
from typing import Dict, List, Optional


def load_episodes(log_dir: str, policy: str) -> Optional[pd.DataFrame]:
    """Load the per-episode CSV for a policy."""
    csv_path = os.path.join(log_dir, f"{policy}_episodes.csv")
    if os.path.exists(csv_path):
        return pd.read_csv(csv_path)
    return None


def summarize(data: Dict[str, pd.DataFrame]) -> pd.DataFrame:
    """One row per policy: mean/std of score, level and length, crash rate."""
    rows = []
    for policy, df in data.items():
        rows.append({
            "policy": policy,
            "episodes": len(df),
            "mean_score": df["score"].mean(),
            "std_score": df["score"].std(ddof=0),
            "mean_level": df["level"].mean(),
            "max_level": df["level"].max(),
            "mean_length": df["length"].mean(),
            "crash_rate": df["crashed"].mean(),
        })
    return pd.DataFrame(rows)


def plot_comparison(
    data: Dict[str, pd.DataFrame],
    output_dir: str,
) -> str:
    """Plot score, level and survival comparisons for all policies."""
    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    fig.suptitle("Policy Comparison", fontsize=16, fontweight="bold")

    colors = {"random": "#e74c3c", "evade": "#3498db"}
    policies = list(data.keys())
    summary = summarize(data)

    # Mean score
    ax = axes[0, 0]
    ax.bar(policies, summary["mean_score"], yerr=summary["std_score"],
           color=[colors.get(p, None) for p in policies], capsize=6)
    ax.set_ylabel("Final Score")
    ax.set_title("Mean Final Score")
    ax.grid(True, alpha=0.3, axis="y")

    # Level reached
    ax = axes[0, 1]
    ax.bar(policies, summary["mean_level"], color=[colors.get(p, None) for p in policies])
    ax.set_ylabel("Level")
    ax.set_title("Mean Level Reached")
    ax.grid(True, alpha=0.3, axis="y")

    # Episode length per episode
    ax = axes[1, 0]
    for policy, df in data.items():
        ax.plot(df["episode"].values, df["length"].values, marker="o",
                linewidth=2, label=policy, color=colors.get(policy, None))
    ax.set_xlabel("Episode")
    ax.set_ylabel("Frames Survived")
    ax.set_title("Episode Length")
    ax.legend()
    ax.grid(True, alpha=0.3)

    # Score distribution
    ax = axes[1, 1]
    for policy, df in data.items():
        scores = df["score"].values
        ax.hist(scores, bins=20, alpha=0.6, edgecolor="black", label=policy,
                color=colors.get(policy, None))
        ax.axvline(np.mean(scores), linestyle="--", color=colors.get(policy, "black"))
    ax.set_xlabel("Final Score")
    ax.set_ylabel("Frequency")
    ax.set_title("Score Distribution")
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    os.makedirs(output_dir, exist_ok=True)
    save_path = os.path.join(output_dir, "policy_comparison.png")
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()

    print(f"Saved policy comparison to {save_path}")
    return save_path


def main():
    parser = argparse.ArgumentParser(description="Plot policy evaluation results")
    parser.add_argument(
        "--log-dir",
        type=str,
        default="./logs",
        help="Directory containing <policy>_episodes.csv files (default: ./logs)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="./figures",
        help="Directory to save plots (default: ./figures)",
    )
    parser.add_argument(
        "--policies",
        type=str,
        nargs="+",
        default=["random", "evade"],
        help="Policies to compare (default: random evade)",
    )

    args = parser.parse_args()

    data: Dict[str, pd.DataFrame] = {}
    missing: List[str] = []
    for policy in args.policies:
        df = load_episodes(args.log_dir, policy)
        if df is None or len(df) == 0:
            missing.append(policy)
        else:
            data[policy] = df

    if missing:
        print(f"No episodes found for: {', '.join(missing)}")
    if not data:
        print(f"Nothing to plot in {args.log_dir}. Run: python -m rl.evaluate --log-dir {args.log_dir}")
        return

    print(summarize(data).to_string(index=False))
    plot_comparison(data, args.output_dir)


if __name__ == "__main__":
    main()
