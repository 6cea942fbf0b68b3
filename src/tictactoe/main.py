from __future__ import annotations

import argparse
import logging
import sys

from tictactoe import config
from tictactoe.game.controller import run_game
from tictactoe.game.state import new_game

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="tictactoe", description="Two-player tic-tac-toe in the terminal.")
    ap.add_argument("--width", type=int, default=config.WIDTH, help=f"Number of columns (1-{config.MAX_WIDTH})")
    ap.add_argument("--height", type=int, default=config.HEIGHT, help=f"Number of rows (1-{config.MAX_HEIGHT})")
    ap.add_argument("--player1", type=str, default=config.PLAYER_NAMES[0], help="Name of the player using X")
    ap.add_argument("--player2", type=str, default=config.PLAYER_NAMES[1], help="Name of the player using O")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns")
    ap.add_argument(
        "--log-level",
        type=str,
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for messages written to stderr",
    )
    return ap


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    # Every cell must be reachable by a one-letter, two-digit reference
    if not 1 <= args.width <= config.MAX_WIDTH:
        ap.error(f"--width must be between 1 and {config.MAX_WIDTH}")
    if not 1 <= args.height <= config.MAX_HEIGHT:
        ap.error(f"--height must be between 1 and {config.MAX_HEIGHT}")

    configure_logging(args.log_level)

    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False

    state = new_game(args.width, args.height, (args.player1, args.player2))
    logger.info("Starting %dx%d game: %s vs %s", args.width, args.height, args.player1, args.player2)

    try:
        result = run_game(state)
    except KeyboardInterrupt:
        print()
        return 130

    logger.info("Game over: %s after %d turns", result.outcome, result.turns)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
