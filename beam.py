"""
Beam simulation for the beam grid.

Traces every beam spawned from one entry state through the grid,
handling reflections and splits, and reports the energized cells.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Set, Tuple

from cells import Direction
from grid import Grid, Position
from tracker import EnergyTracker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BeamState:
    """A beam at a cell, traveling in a direction."""
    row: int
    col: int
    direction: Direction  # Direction beam is traveling when in this cell

    @property
    def position(self) -> Position:
        return (self.row, self.col)


# Beam enters at the top-left cell heading right
FIXED_ENTRY = BeamState(0, 0, Direction.RIGHT)


@dataclass
class TraceResult:
    """Result of tracing one entry state."""
    entry: BeamState
    energized: Set[Position] = field(default_factory=set)
    directions: Dict[Position, List[Direction]] = field(default_factory=dict)
    visited_states: int = 0
    steps: int = 0
    progress: Optional[List[int]] = None  # Energized count after each step

    @property
    def num_energized(self) -> int:
        """Number of energized cells."""
        return len(self.energized)


def _drain(grid: Grid, entry: BeamState,
           progress: Optional[List[int]] = None) -> Tuple[EnergyTracker, int]:
    """Run the frontier loop from `entry`; returns the tracker and step count."""
    if not grid.is_valid_pos(entry.row, entry.col):
        raise ValueError(f"Entry ({entry.row}, {entry.col}) is outside a {grid.rows}x{grid.cols} grid")

    tracker = EnergyTracker(grid.rows, grid.cols)

    # Stack of (row, col, direction) still to process (grows on splits)
    frontier: Deque[Tuple[int, int, Direction]] = deque()
    frontier.append((entry.row, entry.col, entry.direction))

    steps = 0
    while frontier:
        row, col, direction = frontier.pop()
        steps += 1

        # States already processed are dropped here, which breaks loops
        if tracker.visit(row, col, direction):
            cell = grid.cell_at((row, col))
            for out_dir in cell.outgoing(direction):
                nxt = grid.neighbor((row, col), out_dir)
                if nxt is not None:
                    frontier.append((nxt[0], nxt[1], out_dir))
            # else beam exits grid

        if progress is not None:
            progress.append(tracker.energized_count)

    return tracker, steps


def trace_beam(grid: Grid, entry: BeamState, record_progress: bool = False) -> TraceResult:
    """
    Trace the beam from an entry state until no new states remain.

    Args:
        grid: The grid (read only)
        entry: Initial beam state, inside the grid
        record_progress: Record the energized count after every frontier pop

    Returns:
        TraceResult with energized cells and traversal statistics
    """
    progress: Optional[List[int]] = [] if record_progress else None
    tracker, steps = _drain(grid, entry, progress)

    energized = tracker.energized_cells()
    result = TraceResult(
        entry=entry,
        energized=energized,
        directions={pos: tracker.directions_at(*pos) for pos in energized},
        visited_states=tracker.visited_count,
        steps=steps,
        progress=progress,
    )

    logger.debug("trace from (%d, %d) %s: %d energized, %d states, %d steps",
                 entry.row, entry.col, entry.direction.name,
                 result.num_energized, result.visited_states, steps)
    return result


def count_energized(grid: Grid, entry: BeamState = FIXED_ENTRY) -> int:
    """Number of cells energized by a beam entering at `entry`."""
    tracker, _ = _drain(grid, entry)
    return tracker.energized_count


def get_beam_at_cell(result: TraceResult, row: int, col: int) -> List[Direction]:
    """Directions recorded at (row, col), empty if the cell stayed dark."""
    return list(result.directions.get((row, col), []))
