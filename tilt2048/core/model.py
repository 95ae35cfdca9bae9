"""
State of a 2048 game: the board, the score and the tilt that drives them.
"""

import logging
from collections.abc import Callable, Sequence

from numpy import ndarray

from tilt2048.config import GameConfig
from tilt2048.core.board import Board
from tilt2048.core.gamemove import is_done, legal_sides
from tilt2048.core.side import Side
from tilt2048.core.tile import Tile

logger = logging.getLogger(__name__)

# ##>: Largest piece value, reaching it ends the game.
MAX_PIECE = 2048


class Model:
    """
    A game of 2048.

    The model owns a board and keeps the score. It never spawns tiles by itself: the caller tilts,
    checks ``game_over()`` and places the next tile with ``add_tile``. An optional listener is called
    with the model after every change of state.
    """

    def __init__(
        self,
        size: int = 4,
        max_piece: int = MAX_PIECE,
        listener: Callable[['Model'], None] | None = None,
    ):
        """
        Start a game on an empty board with a score of 0.

        Parameters
        ----------
        size : int, optional
            Number of cells along one side (default is 4).
        max_piece : int, optional
            Tile value that ends the game (default is 2048).
        listener : Callable[[Model], None], optional
            Called after each change of state.
        """
        self._board = Board(size)
        self._max_piece = max_piece
        self._listener = listener
        self._score = 0
        self._max_score = 0
        self._game_over = False

    @classmethod
    def from_config(cls, config: GameConfig, listener: Callable[['Model'], None] | None = None) -> 'Model':
        """Start an empty game sized and bounded by ``config``."""
        return cls(size=config.size, max_piece=config.max_piece, listener=listener)

    @classmethod
    def from_values(
        cls,
        raw_values: Sequence[Sequence[int]],
        score: int = 0,
        max_score: int = 0,
        game_over: bool = False,
        max_piece: int = MAX_PIECE,
    ) -> 'Model':
        """
        Restore a game from a table of values, drawn from the top row down, 0 for empty cells.

        Mostly useful to set up a position in tests.
        """
        model = cls(size=len(raw_values), max_piece=max_piece)
        model._board = Board.from_values(raw_values)
        model._score = score
        model._max_score = max_score
        model._game_over = game_over
        return model

    @property
    def board(self) -> Board:
        """The board of this game."""
        return self._board

    @property
    def size(self) -> int:
        """Number of cells along one side of the board."""
        return self._board.size

    @property
    def score(self) -> int:
        """Current score."""
        return self._score

    @property
    def max_score(self) -> int:
        """Best score so far, updated when a game ends."""
        return self._max_score

    @property
    def max_piece(self) -> int:
        """Tile value that ends the game."""
        return self._max_piece

    def tile(self, col: int, row: int) -> Tile | None:
        """Return the tile at ``(col, row)``, or ``None`` if the cell is empty."""
        return self._board.tile_at(col, row)

    def values(self) -> ndarray:
        """Value snapshot of the board, see ``Board.values``."""
        return self._board.values()

    def legal_sides(self) -> list[Side]:
        """Sides whose tilt would change the board."""
        return legal_sides(self._board.values())

    def game_over(self) -> bool:
        """
        Tell whether the game is over, recording the score as the best one if it is.

        Returns
        -------
        bool
            True if a tile reached ``max_piece`` or no tilt can change the board.
        """
        self._check_game_over()
        return self._game_over

    def clear(self) -> None:
        """Empty the board and reset the score. The best score is kept."""
        self._score = 0
        self._game_over = False
        self._board.clear()
        self._notify()

    def add_tile(self, tile: Tile) -> None:
        """
        Place a tile on the board.

        Raises
        ------
        OutOfBounds
            If the tile lies outside the board.
        InvalidState
            If a tile already sits at the same position.
        """
        self._board.add_tile(tile)
        self._check_game_over()
        self._notify()

    def tilt(self, side: Side | str) -> bool:
        """
        Tilt the board toward a side.

        Tiles slide as far as they can toward ``side``. Two tiles of equal value that meet merge
        into one of double value, which is added to the score. A tile produced by a merge does not
        merge again during the same tilt, so with three equal tiles in a line the two leading ones
        merge and the trailing one does not.

        Parameters
        ----------
        side : Side or str
            Side to tilt toward, or one of its names (``'north'``, ``'up'``, ...).

        Returns
        -------
        bool
            True if any tile moved or merged.
        """
        side = Side.parse(side)
        score = self._score

        self._board.reset_merged()
        self._board.set_viewing_perspective(side)
        try:
            changed = False
            for col in range(self._board.size):
                changed = self._tilt_column(col) or changed
        finally:
            self._board.set_viewing_perspective(Side.NORTH)

        logger.debug('Tilt %s: changed=%s, score +%d', side.name, changed, self._score - score)
        self._check_game_over()
        if changed:
            self._notify()
        return changed

    def _tilt_column(self, col: int) -> bool:
        """Tilt one column toward the top edge of the current perspective."""
        board = self._board
        size = board.size
        changed = False

        # ##>: The top row cannot move, scan the rest from the top edge down.
        for row in range(size - 2, -1, -1):
            tile = board.tile_at(col, row)
            if tile is None:
                continue

            target = row
            while target + 1 < size and board.is_empty_at(col, target + 1):
                target += 1
            if target + 1 < size:
                above = board.tile_at(col, target + 1)
                if above.value == tile.value and not above.merged:
                    target += 1

            if target == row:
                continue
            if board.move(col, target, tile):
                self._score += 2 * tile.value
            changed = True
        return changed

    def _check_game_over(self) -> None:
        over = is_done(self._board.values(), self._max_piece)
        if over:
            if not self._game_over:
                logger.info('Game over with score %d.', self._score)
            self._max_score = max(self._max_score, self._score)
        self._game_over = over

    def _notify(self) -> None:
        if self._listener is not None:
            self._listener(self)

    def __str__(self) -> str:
        over = 'over' if self.game_over() else 'not over'
        lines = ['', '[']
        for row in range(self.size - 1, -1, -1):
            cells = []
            for col in range(self.size):
                tile = self.tile(col, row)
                cells.append('    ' if tile is None else f'{tile.value:4d}')
            lines.append('|' + '|'.join(cells) + '|')
        lines.append(f'] {self._score} (max: {self._max_score}) (game is {over}) ')
        return '\n'.join(lines) + '\n'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))
