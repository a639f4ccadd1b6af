"""
Energization tracking for a single beam traversal.

Keeps one 4-bit direction mask per cell: a set bit means a beam has
already been processed at that cell heading in that direction. A cell
is energized as soon as any of its bits is set.
"""

from typing import List, Set, Tuple

import numpy as np

from cells import Direction


class EnergyTracker:
    """
    Visited beam states and energized cells for one traversal.

    Never share a tracker between traversals.
    """

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self.masks = np.zeros((rows, cols), dtype=np.uint8)
        self._visited = 0
        self._energized = 0

    @property
    def capacity(self) -> int:
        """Upper bound on visited beam states."""
        return self.rows * self.cols * len(Direction)

    @property
    def visited_count(self) -> int:
        return self._visited

    @property
    def energized_count(self) -> int:
        return self._energized

    def has_visited(self, row: int, col: int, direction: Direction) -> bool:
        return bool(self.masks[row, col] & direction.bit)

    def is_energized(self, row: int, col: int) -> bool:
        return bool(self.masks[row, col])

    def visit(self, row: int, col: int, direction: Direction) -> bool:
        """
        Record a beam state.

        Returns:
            True if the state is new, False if it was already recorded
        """
        mask = int(self.masks[row, col])
        if mask & direction.bit:
            return False

        if not mask:
            self._energized += 1
        self.masks[row, col] = mask | direction.bit
        self._visited += 1
        return True

    def directions_at(self, row: int, col: int) -> List[Direction]:
        """Directions beams traveled through a cell, in enum order."""
        mask = int(self.masks[row, col])
        return [d for d in Direction if mask & d.bit]

    def energized_cells(self) -> Set[Tuple[int, int]]:
        """Set of (row, col) touched by any beam."""
        rows, cols = np.nonzero(self.masks)
        return {(int(r), int(c)) for r, c in zip(rows, cols)}
