#!/usr/bin/env python3
"""
Main script to launch Pickle Pong with PyGame graphical interface
"""

import argparse
import logging
import sys

from pickle_pong.core.game_engine import MatchRunner
from pickle_pong.core.physics import MatchEngine
from pickle_pong.utils.config import LOG_LEVELS
from pickle_pong.utils.config import game_config
from pickle_pong.utils.config import load_config_from_file
from pickle_pong.utils.log import setup_logging

logger = logging.getLogger("pickle_pong.play")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pickle Pong - Cat vs Dog")
    parser.add_argument("--config", help="JSON configuration file to load")
    parser.add_argument("--seed", type=int, default=None, help="Seed for ball directions")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level (default from config)",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Play one match without a window, paddles standing still",
    )
    parser.add_argument(
        "--max-ticks", type=int, default=100_000, help="Tick limit for a headless match"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    if args.config and not load_config_from_file(args.config):
        setup_logging(args.log_level)
        logger.error("Could not load configuration from %s", args.config)
        return 1

    setup_logging(args.log_level)

    if args.headless:
        runner = MatchRunner(MatchEngine(game_config, seed=args.seed))
        result = runner.play_match(max_ticks=args.max_ticks)
        winner = result["winner"].value if result["winner"] else "nobody"
        logger.info(
            "Headless match: %s wins, dog %d - cat %d in %d ticks",
            winner,
            result["score"]["dog"],
            result["score"]["cat"],
            result["ticks"],
        )
        return 0

    # pygame window only when actually playing
    from pickle_pong.gui.game_app import main as run_app

    logger.info("CONTROLS: Dog W/S (Z/S on AZERTY), Cat arrow keys, or drag on your half")
    logger.info("SPACE/ENTER or click the button to start, ESC to quit")
    run_app(game_config, seed=args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
