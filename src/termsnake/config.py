from __future__ import annotations

# Grid
DEFAULT_WIDTH, DEFAULT_HEIGHT = 20, 20
MIN_GRID_SIZE = 3

# One tick per input poll, at most this long.
TICK_SECONDS = 0.3

# Starting entities (fixed, independent of grid size)
SNAKE_START = (12, 10)
FOOD_START = (10, 10)

# Glyphs
EMPTY = " "
BORDER = "/"
FOOD = "*"
SNAKE = "#"

NEWLINE = "\r\n"  # raw mode does not translate \n

# Keys
QUIT_KEY = "q"
