"""
Grid model for the beam grid.

The grid is a fixed rows x cols array of cell types parsed from text.
Coordinates are (row, col) with (0,0) at top-left. A grid is never
mutated after construction, so one instance can be shared by any
number of concurrent traversals.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from cells import CellType, Direction

Position = Tuple[int, int]


class GridError(ValueError):
    """Base class for grid construction failures."""


class ParseError(GridError):
    """A row holds a character, or the array a code, that is not a cell."""

    def __init__(self, message: str, row: Optional[int] = None,
                 col: Optional[int] = None, char: Optional[str] = None):
        super().__init__(message)
        self.row = row
        self.col = col
        self.char = char


class RaggedRowError(ParseError):
    """Rows of the grid have different lengths."""

    def __init__(self, row: int, expected: int, actual: int):
        super().__init__(
            f"Row {row} has length {actual}, expected {expected}", row=row)
        self.expected = expected
        self.actual = actual


class EmptyGridError(GridError):
    """The grid has zero rows or zero columns."""


class Grid:
    """
    Immutable rectangular array of cells.

    Attributes:
        cells: numpy uint8 array of CellType codes, shape (rows, cols),
               marked read-only
        rows: Number of rows
        cols: Number of columns
    """

    __slots__ = ('cells', 'rows', 'cols')

    def __init__(self, cells: np.ndarray):
        if cells.ndim != 2 or cells.shape[0] == 0 or cells.shape[1] == 0:
            raise EmptyGridError(f"Grid must have at least one row and column, got shape {cells.shape}")

        # Check codes before the uint8 cast, which would wrap negatives
        codes = np.asarray(cells)
        bad = (codes < 0) | (codes > int(max(CellType)))
        if bad.any():
            r, c = (int(i) for i in np.argwhere(bad)[0])
            raise ParseError(f"Invalid cell code {codes[r, c]} at row {r}, col {c}",
                             row=r, col=c)

        frozen = np.array(codes, dtype=np.uint8, copy=True)
        frozen.flags.writeable = False
        self.cells = frozen
        self.rows, self.cols = frozen.shape

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Grid':
        """
        Build a grid from row strings.

        Args:
            rows: One string per row, already trimmed

        Returns:
            Grid instance

        Raises:
            EmptyGridError: no rows, or rows with no characters
            RaggedRowError: rows of unequal length
            ParseError: unknown character
        """
        if not rows:
            raise EmptyGridError("Grid has no rows")

        width = len(rows[0])
        if width == 0:
            raise EmptyGridError("Grid has no columns")

        codes = np.empty((len(rows), width), dtype=np.uint8)
        for r, line in enumerate(rows):
            if len(line) != width:
                raise RaggedRowError(r, width, len(line))
            for c, ch in enumerate(line):
                try:
                    codes[r, c] = CellType.from_symbol(ch)
                except ValueError:
                    raise ParseError(
                        f"Unknown character {ch!r} at row {r}, col {c}",
                        row=r, col=c, char=ch) from None

        return cls(codes)

    @property
    def size(self) -> Tuple[int, int]:
        """(rows, cols)"""
        return self.rows, self.cols

    def is_valid_pos(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, position: Position) -> CellType:
        """Get the cell type at an in-bounds position."""
        row, col = position
        return CellType(int(self.cells[row, col]))

    def neighbor(self, position: Position, direction: Direction) -> Optional[Position]:
        """
        Step one cell in a direction.

        Returns:
            The adjacent position, or None if the move leaves the grid
        """
        dr, dc = direction.delta
        row, col = position[0] + dr, position[1] + dc
        if not self.is_valid_pos(row, col):
            return None
        return (row, col)

    def to_rows(self) -> List[str]:
        """Render the grid back to its row strings."""
        return [''.join(CellType(int(code)).symbol for code in line) for line in self.cells]

    def to_text(self) -> str:
        return '\n'.join(self.to_rows())

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    def __hash__(self):
        return hash((self.rows, self.cols, self.cells.tobytes()))

    def __repr__(self):
        return f"Grid(rows={self.rows}, cols={self.cols})"

    def __getstate__(self):
        return {'cells': self.cells}

    def __setstate__(self, state):
        # Read-only flag does not survive pickling
        frozen = np.array(state['cells'], dtype=np.uint8, copy=True)
        frozen.flags.writeable = False
        self.cells = frozen
        self.rows, self.cols = frozen.shape


def parse_grid(text: str) -> Grid:
    """
    Parse grid text into a Grid.

    Each line is trimmed of surrounding whitespace. Blank lines before the
    first row and after the last row are ignored; a blank line between rows
    is a zero-length row and fails the length check.

    Args:
        text: Block of text, one line per grid row

    Returns:
        Grid instance
    """
    lines = [line.strip() for line in text.splitlines()]

    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()

    return Grid.from_rows(lines)
