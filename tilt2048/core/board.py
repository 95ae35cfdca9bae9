"""
Grid of tiles for the 2048 game, with a viewing perspective that remaps coordinates on the fly.
"""

from collections.abc import Iterator, Sequence

from numpy import int64, ndarray, zeros

from tilt2048.core.errors import InvalidState, OutOfBounds
from tilt2048.core.side import Side
from tilt2048.core.tile import Tile


class Board:
    """
    A square grid holding at most one tile per cell.

    Cells are addressed as ``(col, row)`` with ``(0, 0)`` the lower-left corner. Reads and moves go
    through the current viewing perspective: when the board is seen from a side, that side is
    treated as the top edge. Tiles always store their absolute position.
    """

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f'Board size must be positive, got {size}.')
        self._size = size
        self._grid: list[list[Tile | None]] = [[None] * size for _ in range(size)]
        self._perspective = Side.NORTH

    @classmethod
    def from_values(cls, raw_values: Sequence[Sequence[int]]) -> 'Board':
        """
        Build a board from a square table of values.

        Parameters
        ----------
        raw_values : Sequence[Sequence[int]]
            Values listed row by row from the top edge down, as the board is drawn. Zero marks an
            empty cell.

        Returns
        -------
        Board
            A board holding one fresh tile per non-zero value.

        Raises
        ------
        ValueError
            If the table is not square.
        """
        size = len(raw_values)
        if any(len(line) != size for line in raw_values):
            raise ValueError('Raw values must form a square table.')

        board = cls(size)
        for index, line in enumerate(raw_values):
            for col, value in enumerate(line):
                if value:
                    board.add_tile(Tile.create(int(value), col, size - 1 - index))
        return board

    @property
    def size(self) -> int:
        """Number of cells along one side."""
        return self._size

    @property
    def perspective(self) -> Side:
        """Side the board is currently viewed from."""
        return self._perspective

    def set_viewing_perspective(self, side: Side) -> None:
        """View the board so that ``side`` is the top edge."""
        self._perspective = side

    def _check_bounds(self, col: int, row: int) -> None:
        if not (0 <= col < self._size and 0 <= row < self._size):
            raise OutOfBounds(col, row, self._size)

    def _absolute(self, col: int, row: int) -> tuple[int, int]:
        self._check_bounds(col, row)
        side = self._perspective
        return side.col(col, row, self._size), side.row(col, row, self._size)

    def tile_at(self, col: int, row: int) -> Tile | None:
        """
        Return the tile at ``(col, row)`` under the current perspective, or ``None``.

        Raises
        ------
        OutOfBounds
            If the coordinates fall outside the board.
        """
        abs_col, abs_row = self._absolute(col, row)
        return self._grid[abs_col][abs_row]

    def is_empty_at(self, col: int, row: int) -> bool:
        """Whether no tile sits at ``(col, row)`` under the current perspective."""
        return self.tile_at(col, row) is None

    def add_tile(self, tile: Tile) -> None:
        """
        Place a tile at its own absolute position.

        Raises
        ------
        OutOfBounds
            If the tile lies outside the board.
        InvalidState
            If the cell is already occupied. The board is left untouched.
        """
        self._check_bounds(tile.col, tile.row)
        occupant = self._grid[tile.col][tile.row]
        if occupant is not None:
            raise InvalidState(f'Cannot add {tile!r}: cell already holds {occupant!r}.')
        self._grid[tile.col][tile.row] = tile

    def move(self, col: int, row: int, tile: Tile) -> bool:
        """
        Transfer a tile to the view cell ``(col, row)``, merging it with the tile found there.

        The tile leaves its cell and is replaced at the destination by a fresh tile: a plain copy
        when the destination is empty, a merged tile of double value when it holds an unmerged twin.

        Parameters
        ----------
        col : int
            Destination column under the current perspective.
        row : int
            Destination row under the current perspective.
        tile : Tile
            A tile currently on this board.

        Returns
        -------
        bool
            True if the move merged two tiles.

        Raises
        ------
        InvalidState
            If the tile is not on the board, or the destination holds a tile it may not merge with.
        """
        dest_col, dest_row = self._absolute(col, row)
        if self._grid[tile.col][tile.row] is not tile:
            raise InvalidState(f'{tile!r} is not on this board.')
        if (dest_col, dest_row) == (tile.col, tile.row):
            return False

        occupant = self._grid[dest_col][dest_row]
        if occupant is not None and (occupant.value != tile.value or occupant.merged):
            raise InvalidState(f'Cannot move {tile!r} onto {occupant!r}.')

        # ##>: Validation is done, the transfer below cannot fail halfway.
        self._grid[tile.col][tile.row] = None
        if occupant is None:
            self._grid[dest_col][dest_row] = tile.move(dest_col, dest_row)
            return False
        self._grid[dest_col][dest_row] = tile.merge(dest_col, dest_row)
        return True

    def reset_merged(self) -> None:
        """Clear the merged flag of every tile, ready for a new tilt."""
        for tile in self.tiles():
            tile.merged = False

    def clear(self) -> None:
        """Remove every tile."""
        for column in self._grid:
            column[:] = [None] * self._size

    def tiles(self) -> Iterator[Tile]:
        """Iterate over the tiles on the board, column by column."""
        for column in self._grid:
            yield from (tile for tile in column if tile is not None)

    def values(self) -> ndarray:
        """
        Snapshot of the tile values.

        Returns
        -------
        ndarray
            An ``int64`` array of shape ``(size, size)`` laid out as the board is drawn: ``values[0]``
            is the top row and ``values[:, 0]`` the left column. Empty cells hold 0.
        """
        values = zeros((self._size, self._size), dtype=int64)
        for tile in self.tiles():
            values[self._size - 1 - tile.row, tile.col] = tile.value
        return values

    def __repr__(self) -> str:
        return f'Board(size={self._size}, tiles={sum(1 for _ in self.tiles())})'
