"""
Play asteroid dodge in an Arcade window

Use: python -m game.dodge.play [--debug] [--seed N]
"""

import argparse

import arcade

from .config import GameConfig
from .session import GameSession
from .window import DodgeWindow


def main():
    parser = argparse.ArgumentParser(description="Dodge the asteroids for as long as you can")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Draw player boxes, asteroid boxes and shrunk hit boxes",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for asteroid spawns (default: unseeded)",
    )
    parser.add_argument(
        "--verbose",
        type=int,
        default=1,
        help="Print session events when > 0 (default: 1)",
    )

    args = parser.parse_args()

    config = GameConfig(debug=args.debug)
    session = GameSession(config, seed=args.seed, verbose=args.verbose)
    session.init(debug=args.debug)
    session.load_resources()
    session.create()

    DodgeWindow(session)
    arcade.run()


if __name__ == "__main__":
    main()
