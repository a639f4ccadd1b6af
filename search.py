"""
Search over border entries for the most energizing beam.

Every border entry is traced independently against the same read-only
grid, so the traces run as a parallel map and only their counts are
combined, in a final max reduction.
"""

import logging
import os
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Tuple

from cells import Direction
from grid import Grid, parse_grid
from beam import BeamState, FIXED_ENTRY, count_energized

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = max(1, (os.cpu_count() or 1) - 1)

# Candidates handed to a worker at a time
CHUNK_SIZE = 16


@dataclass
class SearchResult:
    """Result of searching all border entries."""
    best_count: int
    best_entry: Optional[BeamState]
    candidates: int


def border_entries(grid: Grid) -> List[BeamState]:
    """
    All beam states entering the grid from its border.

    Top row heads down, bottom row up, left column right, right column
    left. Corner cells appear once for each side they lie on.
    """
    last_row, last_col = grid.rows - 1, grid.cols - 1
    entries = []
    entries.extend(BeamState(0, col, Direction.DOWN) for col in range(grid.cols))
    entries.extend(BeamState(last_row, col, Direction.UP) for col in range(grid.cols))
    entries.extend(BeamState(row, 0, Direction.RIGHT) for row in range(grid.rows))
    entries.extend(BeamState(row, last_col, Direction.LEFT) for row in range(grid.rows))
    return entries


# Worker must be top-level so it can be pickled by multiprocessing
def _count_entry(args: Tuple[Grid, BeamState]) -> Tuple[BeamState, int]:
    grid, entry = args
    return entry, count_energized(grid, entry)


def find_best_entry(grid: Grid, workers: Optional[int] = None,
                    use_processes: bool = True) -> SearchResult:
    """
    Trace every border entry and keep the largest energized count.

    Args:
        grid: The grid (read only, shared by all traces)
        workers: Number of parallel workers. If None, uses DEFAULT_WORKERS.
                 1 runs every trace in the calling thread.
        use_processes: If True, uses ProcessPoolExecutor. If False, uses
                       ThreadPoolExecutor.

    Returns:
        SearchResult; best_count is 0 and best_entry None when there are
        no candidates
    """
    entries = border_entries(grid)
    if not entries:
        return SearchResult(best_count=0, best_entry=None, candidates=0)

    if workers is None:
        workers = DEFAULT_WORKERS
    workers = max(1, min(workers, len(entries)))

    args_list = [(grid, entry) for entry in entries]
    logger.debug("searching %d border entries on a %dx%d grid with %d worker(s)",
                 len(entries), grid.rows, grid.cols, workers)

    if workers == 1:
        results = list(map(_count_entry, args_list))
    else:
        Executor = ProcessPoolExecutor if use_processes else ThreadPoolExecutor
        with Executor(max_workers=workers) as ex:
            if use_processes:
                results = list(ex.map(_count_entry, args_list, chunksize=CHUNK_SIZE))
            else:
                results = list(ex.map(_count_entry, args_list))

    best_entry, best_count = max(results, key=lambda item: item[1])
    logger.debug("best entry (%d, %d) %s energizes %d cells",
                 best_entry.row, best_entry.col, best_entry.direction.name, best_count)

    return SearchResult(best_count=best_count, best_entry=best_entry,
                        candidates=len(entries))


def max_energized(grid: Grid, workers: Optional[int] = None,
                  use_processes: bool = True) -> int:
    """Largest energized count over all border entries."""
    return find_best_entry(grid, workers=workers, use_processes=use_processes).best_count


def solve(text: str, workers: Optional[int] = None,
          use_processes: bool = True) -> Tuple[int, int]:
    """
    Energized count for the fixed entry and the best border entry.

    Args:
        text: Grid text, one line per row

    Returns:
        (fixed_count, max_count)
    """
    grid = parse_grid(text)
    fixed_count = count_energized(grid, FIXED_ENTRY)
    max_count = max_energized(grid, workers=workers, use_processes=use_processes)
    return fixed_count, max_count
