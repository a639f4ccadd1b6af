"""
Cell types and beam directions for the beam grid.

Each cell holds one of five symbols and defines how it redirects
an incoming beam.

Direction encoding:
    0 = Up (row decreases)
    1 = Right (col increases)
    2 = Down (row increases)
    3 = Left (col decreases)
"""

from enum import IntEnum
from typing import Dict, List, Tuple


class Direction(IntEnum):
    """Cardinal directions a beam can travel."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def delta(self) -> Tuple[int, int]:
        """Return (row_delta, col_delta) for moving in this direction."""
        return _DELTAS[self]

    @property
    def bit(self) -> int:
        """Bit for this direction in a 4-bit per-cell mask."""
        return 1 << int(self)

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}


class CellType(IntEnum):
    """Contents of a single grid cell."""
    EMPTY = 0
    FORWARD_MIRROR = 1       # /
    BACKWARD_MIRROR = 2      # \
    VERTICAL_SPLITTER = 3    # |
    HORIZONTAL_SPLITTER = 4  # -

    @property
    def symbol(self) -> str:
        """Character used for this cell in grid text."""
        return CELL_TO_SYMBOL[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> 'CellType':
        """
        Look up the cell type for a grid character.

        Raises:
            ValueError: if the character is not one of the five cell symbols
        """
        try:
            return SYMBOL_TO_CELL[symbol]
        except KeyError:
            raise ValueError(f"Unknown cell symbol: {symbol!r}") from None

    def outgoing(self, incoming: Direction) -> List[Direction]:
        """
        Handle an incoming beam and return outgoing directions.

        Args:
            incoming: Direction the beam is traveling when it enters this cell

        Returns:
            One direction, or two when a splitter is struck across its axis
        """
        if self == CellType.EMPTY:
            return [incoming]

        if self == CellType.FORWARD_MIRROR:
            return [FORWARD_REFLECTION[incoming]]

        if self == CellType.BACKWARD_MIRROR:
            return [BACKWARD_REFLECTION[incoming]]

        if self == CellType.VERTICAL_SPLITTER:
            if incoming.is_vertical:
                return [incoming]
            return [Direction.UP, Direction.DOWN]

        # HORIZONTAL_SPLITTER
        if not incoming.is_vertical:
            return [incoming]
        return [Direction.LEFT, Direction.RIGHT]


# / diagonal - reflects Up<->Right, Down<->Left
FORWARD_REFLECTION: Dict[Direction, Direction] = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.UP,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.DOWN,
}

# \ diagonal - reflects Up<->Left, Down<->Right
BACKWARD_REFLECTION: Dict[Direction, Direction] = {
    Direction.UP: Direction.LEFT,
    Direction.LEFT: Direction.UP,
    Direction.DOWN: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
}

# Mapping between grid characters and cell types
SYMBOL_TO_CELL: Dict[str, CellType] = {
    '.': CellType.EMPTY,
    '/': CellType.FORWARD_MIRROR,
    '\\': CellType.BACKWARD_MIRROR,
    '|': CellType.VERTICAL_SPLITTER,
    '-': CellType.HORIZONTAL_SPLITTER,
}

CELL_TO_SYMBOL: Dict[CellType, str] = {v: k for k, v in SYMBOL_TO_CELL.items()}
