"""2048 game driver: tilts the model and spawns the next random tile."""

import logging
from collections.abc import Callable

from numpy import ndarray
from numpy.random import Generator, default_rng

from tilt2048.config import GameConfig
from tilt2048.core.model import Model
from tilt2048.core.side import Side
from tilt2048.core.tile import Tile

logger = logging.getLogger(__name__)


class TwentyFortyEight:
    """
    2048 game environment.

    The environment plays the part the rules engine leaves to its caller: it starts games with a few
    random tiles and, after every tilt that changes the board, places one more.
    """

    # ##: All Actions.
    ACTIONS = {'left': Side.WEST, 'up': Side.NORTH, 'right': Side.EAST, 'down': Side.SOUTH}

    def __init__(self, config: GameConfig | None = None, listener: Callable[[Model], None] | None = None):
        """
        Initialize the game with an empty board.

        Parameters
        ----------
        config : GameConfig, optional
            Board size, winning value and spawn probabilities (defaults to ``GameConfig()``).
        listener : Callable[[Model], None], optional
            Called by the model after each change of state.
        """
        self.config = config or GameConfig()
        self._model = Model.from_config(self.config, listener=listener)
        self._rng: Generator = default_rng()
        self._reward = 0

        # ##>: Pre-computed tile values and probabilities for sampling.
        self._tile_values = list(self.config.tile_spawn_probs)
        self._tile_probs = [self.config.tile_spawn_probs[value] for value in self._tile_values]

    @property
    def model(self) -> Model:
        """The game being played."""
        return self._model

    @property
    def score(self) -> int:
        """Current score of the game."""
        return self._model.score

    @property
    def reward(self) -> int:
        """Score gained by the last step."""
        return self._reward

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the winning tile is on the board or no move is possible.
        """
        return self._model.game_over()

    @property
    def observation(self) -> ndarray:
        """
        Get the current state of the game board.

        Returns
        -------
        ndarray
            The tile values as a 2D array, top row first, 0 for empty cells.
        """
        return self._model.values()

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Clear the board and spawn the initial tiles.

        Parameters
        ----------
        seed : int, optional
            Seed of the random generator, for reproducible games.

        Returns
        -------
        ndarray
            The new game board.
        """
        self._rng = default_rng(seed)
        self._model.clear()
        self._reward = 0
        for _ in range(self.config.initial_tiles):
            self.spawn_tile()
        return self.observation

    def step(self, action: Side | str) -> tuple[ndarray, int, bool]:
        """
        Tilt the board and spawn a new tile if anything moved.

        Parameters
        ----------
        action : Side or str
            Side to tilt toward, or an action name such as ``'left'``.

        Returns
        -------
        tuple[ndarray, int, bool]
            A tuple containing:
            - The updated game board (ndarray)
            - The score gained by the tilt (int)
            - Whether the game has finished (bool)

        Notes
        -----
        - A tilt that changes nothing yields no reward and spawns no tile.
        - No tile is spawned once the game is over.
        """
        score = self._model.score
        changed = self._model.tilt(action)
        self._reward = self._model.score - score

        if changed and not self._model.game_over():
            self.spawn_tile()
        return self.observation, self._reward, self.is_finished

    def spawn_tile(self) -> Tile | None:
        """
        Place a random tile on a random empty cell.

        Returns
        -------
        Tile or None
            The new tile, or None when the board is full.
        """
        board = self._model.board
        empty_cells = [
            (col, row) for col in range(board.size) for row in range(board.size) if board.is_empty_at(col, row)
        ]
        if not empty_cells:
            return None

        value = int(self._rng.choice(self._tile_values, p=self._tile_probs))
        col, row = empty_cells[int(self._rng.integers(len(empty_cells)))]
        tile = Tile.create(value, col, row)
        self._model.add_tile(tile)
        logger.debug('Spawned %r', tile)
        return tile
