from __future__ import annotations

import contextlib
import io

from blessed.keyboard import Keystroke

from termsnake.state import Direction, Food, Game, Snake


ARROWS = {
    "KEY_UP": "\x1b[A",
    "KEY_DOWN": "\x1b[B",
    "KEY_RIGHT": "\x1b[C",
    "KEY_LEFT": "\x1b[D",
}


def key(name: str | None = None, char: str = "") -> Keystroke:
    return Keystroke(ucs=char or ARROWS.get(name, ""), name=name)


class FakeTerminal:
    """Stands in for blessed.Terminal: scripted keys, output captured in ``stream``."""

    home = "<home>"
    clear = "<clear>"

    def __init__(self, keys=(), is_a_tty: bool = True, has_keyboard: bool = True):
        self.keys = list(keys)
        self.is_a_tty = is_a_tty
        self._keyboard_fd = 0 if has_keyboard else None
        self.stream = io.StringIO()
        self.timeouts: list[float] = []
        self.raw_active = False
        self.raw_exits = 0

    @contextlib.contextmanager
    def raw(self):
        self.raw_active = True
        try:
            yield
        finally:
            self.raw_active = False
            self.raw_exits += 1

    @contextlib.contextmanager
    def hidden_cursor(self):
        yield

    def inkey(self, timeout=None):
        self.timeouts.append(timeout)
        if self.keys:
            k = self.keys.pop(0)
            if isinstance(k, BaseException):
                raise k
            return k
        return Keystroke("")


def make_game(
    positions,
    direction: Direction = Direction.RIGHT,
    food: tuple[int, int] = (10, 10),
    width: int = 20,
    height: int = 20,
    score: int = 0,
) -> Game:
    return Game(
        width=width,
        height=height,
        snake=Snake(direction=direction, positions=list(positions)),
        food=Food(position=food),
        score=score,
    )
