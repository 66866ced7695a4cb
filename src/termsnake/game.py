from __future__ import annotations

import argparse
import logging
import sys

import blessed

from . import config
from .logic import handle_key, update_game
from .render import draw_state
from .state import Game, new_game

logger = logging.getLogger(__name__)


class TerminalError(RuntimeError):
    """The terminal can't be put into raw mode."""


def _grid_size(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if n < config.MIN_GRID_SIZE:
        raise argparse.ArgumentTypeError(f"must be at least {config.MIN_GRID_SIZE}, got {n}")
    return n


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="termsnake", description="Play snake in the terminal.")
    parser.add_argument(
        "-x",
        "--width",
        type=_grid_size,
        default=config.DEFAULT_WIDTH,
        help=f"Grid width in columns (default {config.DEFAULT_WIDTH}).",
    )
    parser.add_argument(
        "-y",
        "--height",
        type=_grid_size,
        default=config.DEFAULT_HEIGHT,
        help=f"Grid height in rows (default {config.DEFAULT_HEIGHT}).",
    )
    return parser.parse_args(argv)


def run(game: Game, term) -> int:
    """Drive the tick loop on ``term`` until the game ends. Returns the final score."""
    if not term.is_a_tty:
        raise TerminalError("output is not a terminal")
    if term._keyboard_fd is None:
        # blessed leaves raw mode and inkey pacing off without a keyboard tty.
        raise TerminalError("input is not a terminal")

    with term.raw(), term.hidden_cursor():
        while not game.game_over:
            draw_state(term, game)
            term.stream.flush()

            key = term.inkey(timeout=config.TICK_SECONDS)
            if key:
                handle_key(game, key)
                if game.game_over:
                    continue

            update_game(game)

        term.stream.flush()

    return game.final_score()


def final_message(score: int) -> str:
    return f"\nGame Over!\nYour final score is: {score}\nThanks for playing.\n"


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    game = new_game(args.width, args.height)
    term = blessed.Terminal()

    try:
        score = run(game, term)
    except (TerminalError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger.info("game finished with score %d", score)
    print(final_message(score), end="")
    return 0
