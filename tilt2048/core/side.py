"""
Directions of a tilt and the perspective transform used to reduce all four of them to one.
"""

from enum import Enum

# ##>: Action names used by the environments, mapped to the side they tilt toward.
_ALIASES = {'up': 'NORTH', 'right': 'EAST', 'down': 'SOUTH', 'left': 'WEST'}


class Side(Enum):
    """
    The four sides of the board.

    Each member carries ``(col0, row0, dcol, drow)``: the corner that the view origin maps to and the
    direction in which the view's "up" points. Viewing the board from a side rotates it so that this
    side becomes the top edge, which lets every tilt be written as a tilt toward the north.
    """

    NORTH = (0, 0, 0, 1)
    EAST = (0, 1, 1, 0)
    SOUTH = (1, 1, 0, -1)
    WEST = (1, 0, -1, 0)

    def __init__(self, col0: int, row0: int, dcol: int, drow: int):
        self._col0 = col0
        self._row0 = row0
        self.dcol = dcol
        self.drow = drow

    @property
    def opposite(self) -> 'Side':
        """The side facing this one."""
        return _OPPOSITES[self]

    def col(self, x: int, y: int, size: int) -> int:
        """
        Absolute column of the view cell ``(x, y)`` when the board is seen from this side.

        Parameters
        ----------
        x : int
            Column in the view.
        y : int
            Row in the view.
        size : int
            Size of the board.

        Returns
        -------
        int
            The column in the board's own coordinates.
        """
        return self._col0 * (size - 1) + x * self.drow + y * self.dcol

    def row(self, x: int, y: int, size: int) -> int:
        """
        Absolute row of the view cell ``(x, y)`` when the board is seen from this side.

        Parameters
        ----------
        x : int
            Column in the view.
        y : int
            Row in the view.
        size : int
            Size of the board.

        Returns
        -------
        int
            The row in the board's own coordinates.
        """
        return self._row0 * (size - 1) - x * self.dcol + y * self.drow

    @classmethod
    def parse(cls, value: 'Side | str') -> 'Side':
        """
        Resolve a side from a member, its name, or an action name such as ``'left'``.

        Raises
        ------
        ValueError
            If the value names no side.
        """
        if isinstance(value, Side):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            name = _ALIASES.get(key, key.upper())
            if name in cls.__members__:
                return cls[name]
        raise ValueError(f'Unknown side `{value}`.')


_OPPOSITES = {Side.NORTH: Side.SOUTH, Side.SOUTH: Side.NORTH, Side.EAST: Side.WEST, Side.WEST: Side.EAST}
