"""Rules engine for the 2048 sliding-tile puzzle."""

from .config import GameConfig
from .core import Board, GameError, InvalidState, Model, OutOfBounds, Side, Tile
from .envs import TwentyFortyEight

__all__ = [
    "Board",
    "GameConfig",
    "GameError",
    "InvalidState",
    "Model",
    "OutOfBounds",
    "Side",
    "Tile",
    "TwentyFortyEight",
]
