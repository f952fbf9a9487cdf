"""Entry point: ``python -m axion``."""

import argparse
import logging

from axion.config import GameConfig
from axion.logging_config import setup_logging


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Territory-capture arcade game")
    parser.add_argument("--width", type=int, default=GameConfig.GRID_WIDTH,
                        help="board width in cells")
    parser.add_argument("--height", type=int, default=GameConfig.GRID_HEIGHT,
                        help="board height in cells")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for hazard placement")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--log-file", default=None,
                        help="also write a full debug log of the session here")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # Imported late so --help works without a display
    from axion.frontend import GameView

    config = GameConfig(GRID_WIDTH=args.width, GRID_HEIGHT=args.height)
    GameView(config, seed=args.seed).run()


if __name__ == "__main__":
    main()
