"""
Configuration of a 2048 game.
"""

from dataclasses import dataclass, field
from math import isclose


@dataclass(frozen=True)
class GameConfig:
    """
    Settings shared by the model and the environment.

    Attributes
    ----------
    size : int
        Number of cells along one side of the board.
    max_piece : int
        Tile value that ends the game.
    initial_tiles : int
        Number of tiles spawned when a game starts.
    tile_spawn_probs : dict[int, float]
        Values a spawned tile can take, with their probabilities.
    """

    size: int = 4
    max_piece: int = 2048
    initial_tiles: int = 2
    tile_spawn_probs: dict[int, float] = field(default_factory=lambda: {2: 0.9, 4: 0.1})

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f'size must be >= 1, got {self.size}')
        if self.max_piece < 2 or self.max_piece & (self.max_piece - 1):
            raise ValueError(f'max_piece must be a power of two >= 2, got {self.max_piece}')
        if not 0 <= self.initial_tiles <= self.size**2:
            raise ValueError(f'initial_tiles must be in [0, {self.size ** 2}], got {self.initial_tiles}')
        if not self.tile_spawn_probs:
            raise ValueError('tile_spawn_probs must not be empty')
        if any(prob < 0 for prob in self.tile_spawn_probs.values()):
            raise ValueError(f'tile_spawn_probs must be non-negative, got {self.tile_spawn_probs}')
        if not isclose(sum(self.tile_spawn_probs.values()), 1.0):
            raise ValueError(f'tile_spawn_probs must sum to 1, got {self.tile_spawn_probs}')
