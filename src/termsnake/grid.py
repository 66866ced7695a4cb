from __future__ import annotations

import enum
import random


class CellKind(enum.Enum):
    BORDER = "border"
    INTERIOR = "interior"
    OUTSIDE = "outside"


def in_bounds(pos: tuple[int, int], width: int, height: int) -> bool:
    x, y = pos
    return 0 <= x < width and 0 <= y < height


def is_border(pos: tuple[int, int], width: int, height: int) -> bool:
    if not in_bounds(pos, width, height):
        return False
    x, y = pos
    return x in (0, width - 1) or y in (0, height - 1)


def is_interior(pos: tuple[int, int], width: int, height: int) -> bool:
    x, y = pos
    return 0 < x < width - 1 and 0 < y < height - 1


def classify(pos: tuple[int, int], width: int, height: int) -> CellKind:
    if is_interior(pos, width, height):
        return CellKind.INTERIOR
    if is_border(pos, width, height):
        return CellKind.BORDER
    return CellKind.OUTSIDE


def interior_range(width: int, height: int) -> tuple[range, range]:
    """Inclusive-exclusive x and y ranges of the cells inside the border ring."""
    return range(1, width - 1), range(1, height - 1)


def random_interior_cell(width: int, height: int, rng=random) -> tuple[int, int]:
    xs, ys = interior_range(width, height)
    if not xs or not ys:
        raise ValueError(f"grid {width}x{height} has no interior cells")
    return (rng.randint(xs[0], xs[-1]), rng.randint(ys[0], ys[-1]))
