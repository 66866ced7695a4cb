from __future__ import annotations

import logging
import random

from . import config
from .grid import is_interior, random_interior_cell
from .state import Direction, Game, Snake, add_vectors

logger = logging.getLogger(__name__)

KEY_MAP = {
    "KEY_UP": Direction.UP,
    "KEY_DOWN": Direction.DOWN,
    "KEY_LEFT": Direction.LEFT,
    "KEY_RIGHT": Direction.RIGHT,
}


def next_head(game: Game) -> tuple[int, int]:
    return add_vectors(game.head, game.snake.direction.delta)


def hits_wall(game: Game, pos: tuple[int, int]) -> bool:
    # Touching the border ring counts, not only leaving the grid.
    return not is_interior(pos, game.width, game.height)


def hits_self(game: Game, pos: tuple[int, int]) -> bool:
    return pos in game.snake.positions[1:]


def relocate_food(game: Game, rng=random) -> None:
    # May land on the snake's body; that is the game's behaviour.
    game.food.position = random_interior_cell(game.width, game.height, rng)


def update_game(game: Game, rng=random) -> None:
    """Advance the game by one tick, or set ``game_over`` and leave everything else alone."""
    new_head = next_head(game)

    if hits_wall(game, new_head):
        logger.debug("wall hit at %s", new_head)
        game.game_over = True
        return

    if hits_self(game, new_head):
        logger.debug("self hit at %s", new_head)
        game.game_over = True
        return

    positions = game.snake.positions
    positions.insert(0, new_head)
    if new_head == game.food.position:
        game.score += 1
        relocate_food(game, rng)
        logger.debug("ate food at %s, score=%d, food now at %s", new_head, game.score, game.food.position)
    else:
        positions.pop()


def turn(snake: Snake, direction: Direction) -> bool:
    """Set the heading unless it would reverse the snake. Returns whether it changed."""
    if direction is snake.direction.opposite:
        return False
    snake.direction = direction
    return True


def handle_key(game: Game, key) -> None:
    """Apply one keystroke: arrows turn, ``q`` quits, anything else is ignored."""
    direction = KEY_MAP.get(getattr(key, "name", None))
    if direction is not None:
        turn(game.snake, direction)
    elif str(key) == config.QUIT_KEY:
        logger.debug("quit requested")
        game.game_over = True
