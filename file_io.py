"""
File loading for the beam grid.

Reads grid text from disk and hands it to the grid parser.
"""

from pathlib import Path
from typing import Union

from grid import Grid, parse_grid


def load_text(filepath: Union[str, Path]) -> str:
    """
    Read grid text from a file.

    Args:
        filepath: Path to the input file

    Returns:
        File contents
    """
    with open(filepath, 'r') as f:
        return f.read()


def load_grid(filepath: Union[str, Path]) -> Grid:
    """
    Load and parse a grid from a text file.

    Args:
        filepath: Path to the input file

    Returns:
        Parsed Grid instance
    """
    return parse_grid(load_text(filepath))
