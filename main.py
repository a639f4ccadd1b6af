"""
CLI entry point for the beam grid.

Loads a grid file and prints the energized count for the fixed entry
and the best border entry.
"""

import argparse
import logging
import sys
from typing import Optional

from beam import FIXED_ENTRY, count_energized
from file_io import load_grid
from grid import GridError
from search import find_best_entry


def run(filepath: str, workers: Optional[int] = None, use_processes: bool = True) -> int:
    """Solve one input file and print both answers. Returns exit status."""
    try:
        grid = load_grid(filepath)
    except GridError as e:
        print(f"Error: {e}")
        return 1
    except OSError as e:
        print(f"Error loading file: {e}")
        return 1

    fixed_count = count_energized(grid, FIXED_ENTRY)
    result = find_best_entry(grid, workers=workers, use_processes=use_processes)

    print(f"Part 1: {fixed_count}")
    print(f"Part 2: {result.best_count}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description='Beam grid energizer')
    parser.add_argument('file', help='Grid text file')
    parser.add_argument('--workers', '-w', type=int, default=None,
                        help='Parallel workers for the border search (default: CPU count - 1)')
    parser.add_argument('--threads', action='store_true',
                        help='Use threads instead of processes for the border search')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log traversal statistics')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(levelname)s %(name)s: %(message)s')

    return run(args.file, workers=args.workers, use_processes=not args.threads)


if __name__ == '__main__':
    sys.exit(main())
