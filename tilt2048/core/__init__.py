# -*- coding: utf-8 -*-
"""
Rules engine of the 2048 game.

It includes the tiles and the board that holds them, the perspective used to tilt toward any side, the predicates
that decide legal moves and game over, and the `Model` that keeps the score.
"""

from .board import Board
from .errors import GameError, InvalidState, OutOfBounds
from .gamemove import is_done, legal_sides
from .model import MAX_PIECE, Model
from .side import Side
from .tile import Tile

__all__ = [
    "Board",
    "GameError",
    "InvalidState",
    "OutOfBounds",
    "is_done",
    "legal_sides",
    "MAX_PIECE",
    "Model",
    "Side",
    "Tile",
]
