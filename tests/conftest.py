"""Shared fixtures for beam grid tests."""

import pytest

from grid import parse_grid

# Published 10x10 sample: fixed entry energizes 46, best border entry 51
SAMPLE_TEXT = r"""
.|...\....
|.-.\.....
.....|-...
........|.
..........
.........\
..../.\\..
.-.-/..|..
.|....-|.\
..//.|....
"""


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def sample_grid():
    return parse_grid(SAMPLE_TEXT)


@pytest.fixture
def loop_grid():
    """Four mirrors forming a closed loop around the center cell."""
    return parse_grid("/.\\\n...\n\\./")
