"""
Board predicates for the 2048 game: empty cells, maximum tile, legal tilts and game over.

All functions work on the value snapshot returned by ``Board.values()``, a 2D array drawn from the
top row down where 0 marks an empty cell.
"""

from numpy import ndarray

from tilt2048.core.side import Side


def empty_space_exists(values: ndarray) -> bool:
    """Whether at least one cell of the board is empty."""
    return bool((values == 0).any())


def max_tile_exists(values: ndarray, max_piece: int) -> bool:
    """Whether any tile has reached the winning value ``max_piece``."""
    return bool((values == max_piece).any())


def adjacent_match_exists(values: ndarray) -> bool:
    """
    Check whether two orthogonally adjacent tiles share a value.

    Parameters
    ----------
    values : ndarray
        Value snapshot of the board.

    Returns
    -------
    bool
        True if some pair of neighbouring tiles could merge.

    Notes
    -----
    Empty cells never match, not even another empty cell.
    """
    # ##>: Horizontal and vertical neighbour pairs, compared in one vectorized pass each.
    h_match = (values[:, :-1] != 0) & (values[:, :-1] == values[:, 1:])
    v_match = (values[:-1, :] != 0) & (values[:-1, :] == values[1:, :])
    return bool(h_match.any() or v_match.any())


def at_least_one_move_exists(values: ndarray) -> bool:
    """Whether some tilt would still change the board."""
    return empty_space_exists(values) or adjacent_match_exists(values)


def legal_sides_mask(values: ndarray) -> dict[Side, bool]:
    """
    Tell, for every side, whether tilting toward it changes the board.

    Parameters
    ----------
    values : ndarray
        Value snapshot of the board.

    Returns
    -------
    dict[Side, bool]
        Mapping from each side to True when the tilt is legal.

    Notes
    -----
    A tilt is legal if a tile has an empty cell on the side it moves toward, or if two equal tiles
    are adjacent along the tilt axis. Adjacency is computed once per axis.
    """
    # ##>: Horizontal pairs serve WEST/EAST, vertical pairs serve NORTH/SOUTH.
    left_cols, right_cols = values[:, :-1], values[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    top_rows, bottom_rows = values[:-1, :], values[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: Slide conditions per side.
    west = (left_cols == 0) & (right_cols != 0)
    east = (right_cols == 0) & (left_cols != 0)
    north = (top_rows == 0) & (bottom_rows != 0)
    south = (bottom_rows == 0) & (top_rows != 0)

    return {
        Side.NORTH: bool(north.any() or v_can_merge.any()),
        Side.EAST: bool(east.any() or h_can_merge.any()),
        Side.SOUTH: bool(south.any() or v_can_merge.any()),
        Side.WEST: bool(west.any() or h_can_merge.any()),
    }


def legal_sides(values: ndarray) -> list[Side]:
    """List the sides whose tilt changes the board, in ``Side`` order."""
    mask = legal_sides_mask(values)
    return [side for side in Side if mask[side]]


def is_done(values: ndarray, max_piece: int) -> bool:
    """
    Check whether the game has ended.

    Parameters
    ----------
    values : ndarray
        Value snapshot of the board.
    max_piece : int
        Winning tile value.

    Returns
    -------
    bool
        True if a tile equals ``max_piece``, or if the board is full and no neighbours match.
    """
    return max_tile_exists(values, max_piece) or not at_least_one_move_exists(values)
