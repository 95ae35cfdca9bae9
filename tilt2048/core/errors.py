"""
Errors raised by the 2048 rules engine.

Every failure is an immediate contract violation by the caller: nothing is retried and a failing
operation never leaves the board partially mutated.
"""


class GameError(Exception):
    """Base class for all errors raised by the engine."""


class OutOfBounds(GameError, IndexError):
    """A coordinate lies outside the ``[0, size)`` range of the board."""

    def __init__(self, col: int, row: int, size: int):
        super().__init__(f'Cell ({col}, {row}) is outside a board of size {size}.')
        self.col = col
        self.row = row
        self.size = size


class InvalidState(GameError, ValueError):
    """An operation would break the one-tile-per-cell invariant of the board."""
