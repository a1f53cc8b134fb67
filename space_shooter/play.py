"""
Command-line entry point: play in an arcade window, or run random-policy
episodes headless.
"""

import argparse
import logging
import random
import sys

import numpy as np

from .collision import CollisionResolver
from .config import ENV_CONFIG, FRONTEND_CONFIG, GAME_CONFIG
from .spawner import Spawner
from .state_machine import Game
from .shooter_env import run_random_episode


def play(args) -> int:
    # Imported here so headless runs never need a display
    import arcade
    from .arcade_frontend import ResourceLoadError, Resources, ShooterWindow, make_frontend

    config = dict(GAME_CONFIG)
    config.update(width=args.width, height=args.height, highscore_path=args.highscore_file)

    resources = None
    if args.assets:
        try:
            resources = Resources.load(args.assets)
        except ResourceLoadError as e:
            print(f"[Game] Failed to load resources: {e}", file=sys.stderr)
            return 1

    frontend = make_frontend(config["height"], resources, seed=args.seed)
    game = Game(
        frontend=frontend,
        spawner=Spawner.from_config(rng=random.Random(args.seed)),
        resolver=CollisionResolver(single_hit=args.single_hit),
        **config,
    )
    print(f"[Game] High score: {game.high_score}")

    ShooterWindow(game, frontend, FRONTEND_CONFIG["title"])
    arcade.run()
    return 0


def run_headless(args) -> int:
    env_config = dict(ENV_CONFIG)
    env_config.update(width=args.width, height=args.height, single_hit=args.single_hit)

    print(f"Running {args.headless} random episodes...")
    scores, lengths = [], []
    for episode in range(args.headless):
        seed = args.seed + episode if args.seed is not None else None
        result = run_random_episode(seed=seed, **env_config)
        scores.append(result["score"])
        lengths.append(result["length"])
        print(f"Episode {episode + 1}/{args.headless}: "
              f"Score = {result['score']}, Level = {result['level']}, Length = {result['length']}")

    print("\n" + "=" * 50)
    print(f"Mean Score: {np.mean(scores):.1f} ± {np.std(scores):.1f}")
    print(f"Mean Episode Length: {np.mean(lengths):.1f}")
    print(f"Best Score: {np.max(scores)}")
    print("=" * 50)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Vertical space shooter")
    parser.add_argument(
        "--width", type=int, default=GAME_CONFIG["width"],
        help=f"Window width (default: {GAME_CONFIG['width']})",
    )
    parser.add_argument(
        "--height", type=int, default=GAME_CONFIG["height"],
        help=f"Window height (default: {GAME_CONFIG['height']})",
    )
    parser.add_argument(
        "--highscore-file", type=str, default=GAME_CONFIG["highscore_path"],
        help="File holding the high score",
    )
    parser.add_argument(
        "--assets", type=str, default=None,
        help="Assets folder with sprites and sounds (default: draw plain shapes)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed",
    )
    parser.add_argument(
        "--single-hit", action="store_true",
        help="A bullet or enemy can only be hit once per frame",
    )
    parser.add_argument(
        "--headless", type=int, default=0, metavar="N",
        help="Run N random-policy episodes without a window",
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.headless > 0:
        return run_headless(args)
    return play(args)


if __name__ == "__main__":
    sys.exit(main())
