from __future__ import annotations

import numpy as np

from . import config
from .grid import is_interior
from .state import Game


def build_buffer(game: Game) -> np.ndarray:
    w, h = game.width, game.height
    buf = np.full((h, w), config.EMPTY, dtype="<U1")

    buf[0, :] = config.BORDER
    buf[h - 1, :] = config.BORDER
    buf[:, 0] = config.BORDER
    buf[:, w - 1] = config.BORDER

    if is_interior(game.food.position, w, h):
        fx, fy = game.food.position
        buf[fy, fx] = config.FOOD

    for x, y in game.snake.positions:
        if is_interior((x, y), w, h):
            buf[y, x] = config.SNAKE

    return buf


def frame_text(game: Game) -> str:
    lines = [f"Score: {game.score}"]
    lines.extend("".join(row) for row in build_buffer(game))
    return config.NEWLINE.join(lines) + config.NEWLINE


def draw_state(term, game: Game) -> None:
    term.stream.write(term.home + term.clear + frame_text(game))
