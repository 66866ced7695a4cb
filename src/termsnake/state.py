from __future__ import annotations

import enum
from dataclasses import dataclass, field

from . import config


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])


class Direction(enum.Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


@dataclass
class Food:
    position: tuple[int, int] = config.FOOD_START


@dataclass
class Snake:
    direction: Direction = Direction.RIGHT
    # head is first element
    positions: list[tuple[int, int]] = field(default_factory=lambda: [config.SNAKE_START])

    @property
    def head(self) -> tuple[int, int]:
        return self.positions[0]


@dataclass
class Game:
    width: int
    height: int
    snake: Snake = field(default_factory=Snake)
    food: Food = field(default_factory=Food)
    score: int = 0
    game_over: bool = False

    @property
    def head(self) -> tuple[int, int]:
        return self.snake.head

    def final_score(self) -> int:
        return self.score


def new_game(width: int = config.DEFAULT_WIDTH, height: int = config.DEFAULT_HEIGHT) -> Game:
    return Game(width=width, height=height)
