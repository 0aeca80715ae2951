from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path

from . import config
from .game import play


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fruitsnake",
        description="Steer the snake, eat the fruit, avoid walls, yourself and skulls.",
    )
    parser.add_argument(
        "--frontend",
        choices=("window", "terminal"),
        default="window",
        help="Where to play (window=pygame, terminal=curses).",
    )
    parser.add_argument("--width", type=int, default=config.GRID_WIDTH, help="Board width in cells (window only).")
    parser.add_argument("--height", type=int, default=config.GRID_HEIGHT, help="Board height in cells (window only).")
    parser.add_argument("--delay", type=float, default=config.FRAME_DELAY, help="Starting seconds per tick.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for fruit spawning.")
    parser.add_argument("--verbose", action="store_true", help="Log spawns and fruit effects.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write log records here instead of stderr.")
    args = parser.parse_args(argv)

    if args.width < 2 or args.height < 2:
        parser.error("board must be at least 2x2")
    if args.delay < config.MIN_DELAY:
        parser.error(f"--delay must be at least {config.MIN_DELAY}")
    if args.frontend == "terminal" and args.verbose and args.log_file is None:
        # stderr shares the screen with curses.
        parser.error("--verbose with the terminal frontend needs --log-file")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        filename=args.log_file,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.frontend == "terminal":
        from .term import TerminalFrontend

        frontend = TerminalFrontend()
    else:
        from .render import WindowFrontend

        frontend = WindowFrontend(args.width, args.height)

    try:
        game = play(frontend, random.Random(args.seed), args.delay)
    finally:
        frontend.close()

    print(f"{game.outcome}  score {game.score}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
