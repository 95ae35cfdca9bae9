"""
A single numbered piece of the 2048 board.
"""

from dataclasses import dataclass


@dataclass(eq=False)
class Tile:
    """
    A tile at an absolute board position.

    Tiles are compared by identity: each tilt hands out fresh tiles for every piece that moves or
    merges, so two tiles with the same value and position are still different pieces.

    Attributes
    ----------
    value : int
        Face value of the tile, a power of two in regular play.
    col : int
        Column of the tile, 0 being the left edge.
    row : int
        Row of the tile, 0 being the bottom edge.
    merged : bool
        Whether the tile is the product of a merge during the current tilt.
    """

    value: int
    col: int
    row: int
    merged: bool = False

    @classmethod
    def create(cls, value: int, col: int, row: int) -> 'Tile':
        """Build a fresh, unmerged tile."""
        return cls(value=value, col=col, row=row)

    def mark_merged(self) -> None:
        """Flag this tile as the result of a merge."""
        self.merged = True

    def move(self, col: int, row: int) -> 'Tile':
        """Return the tile that replaces this one after a plain slide to ``(col, row)``."""
        return Tile.create(self.value, col, row)

    def merge(self, col: int, row: int) -> 'Tile':
        """Return the tile created when this one merges with its twin at ``(col, row)``."""
        tile = Tile.create(2 * self.value, col, row)
        tile.mark_merged()
        return tile

    def __repr__(self) -> str:
        flag = '*' if self.merged else ''
        return f'Tile({self.value}{flag} @ {self.col}, {self.row})'
