from .state import Direction, Food, Game, Snake, new_game
from .logic import handle_key, turn, update_game
from .render import build_buffer, frame_text

__all__ = [
    "Direction",
    "Food",
    "Game",
    "Snake",
    "new_game",
    "handle_key",
    "turn",
    "update_game",
    "build_buffer",
    "frame_text",
]
