"""
Entry point: play with the keyboard, or run a headless random-agent episode.

    python -m game.asteroids.play
    python -m game.asteroids.play --headless --seed 7 --steps 2000
"""

import argparse

from .config import WORLD_CONFIG
from .env import run_random_episode


def main():
    parser = argparse.ArgumentParser(description="Asteroids with a boss planet")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run a random-agent episode without a window",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: unseeded)",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=None,
        help="Episode length for --headless (default: from ENV_CONFIG)",
    )
    parser.add_argument("--width", type=int, default=WORLD_CONFIG["width"])
    parser.add_argument("--height", type=int, default=WORLD_CONFIG["height"])

    args = parser.parse_args()

    if args.headless:
        seed = 42 if args.seed is None else args.seed
        print(f"Running headless episode (seed={seed})...")
        run_random_episode(render=False, seed=seed, max_steps=args.steps)
        return

    # Imported late so headless runs never need a display
    from .render import run_game
    run_game(width=args.width, height=args.height, seed=args.seed)


if __name__ == "__main__":
    main()
