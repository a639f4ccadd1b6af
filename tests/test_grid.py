"""Unit tests for grid.py - Grid parsing and lookup."""

import pickle

import numpy as np
import pytest
from cells import CellType, Direction
from grid import (
    Grid, parse_grid, GridError, ParseError, RaggedRowError, EmptyGridError,
)


class TestParseGrid:
    """Tests for parse_grid."""

    def test_dimensions(self, sample_grid):
        """Test sample grid is 10x10."""
        assert sample_grid.rows == 10
        assert sample_grid.cols == 10
        assert sample_grid.size == (10, 10)

    def test_cells_parsed(self, sample_grid):
        """Test individual cells are parsed to the right type."""
        assert sample_grid.cell_at((0, 0)) == CellType.EMPTY
        assert sample_grid.cell_at((0, 1)) == CellType.VERTICAL_SPLITTER
        assert sample_grid.cell_at((0, 5)) == CellType.BACKWARD_MIRROR
        assert sample_grid.cell_at((1, 2)) == CellType.HORIZONTAL_SPLITTER
        assert sample_grid.cell_at((6, 4)) == CellType.FORWARD_MIRROR

    def test_whitespace_trimmed(self):
        """Test surrounding whitespace on each line is ignored."""
        grid = parse_grid("  ..| \n\t.-.  \n")
        assert grid.size == (2, 3)
        assert grid.to_rows() == ["..|", ".-."]

    def test_to_text_round_trip(self, sample_text, sample_grid):
        """Test rendering reproduces the input rows."""
        assert sample_grid.to_text() == sample_text.strip()

    def test_single_cell(self):
        """Test a 1x1 grid is valid."""
        grid = parse_grid("/")
        assert grid.size == (1, 1)
        assert grid.cell_at((0, 0)) == CellType.FORWARD_MIRROR


class TestParseErrors:
    """Tests for parse failures."""

    def test_unknown_character(self):
        """Test unknown character raises ParseError with its location."""
        with pytest.raises(ParseError) as exc_info:
            parse_grid("...\n..x")
        err = exc_info.value
        assert err.row == 1
        assert err.col == 2
        assert err.char == 'x'

    def test_ragged_rows(self):
        """Test rows of unequal length raise RaggedRowError."""
        with pytest.raises(RaggedRowError) as exc_info:
            parse_grid(".|\n...")
        err = exc_info.value
        assert err.row == 1
        assert err.expected == 2
        assert err.actual == 3

    def test_ragged_is_parse_error(self):
        """Test RaggedRowError is a ParseError."""
        with pytest.raises(ParseError):
            parse_grid("..\n.")

    def test_blank_line_between_rows(self):
        """Test an interior blank line is a zero-length row."""
        with pytest.raises(RaggedRowError):
            parse_grid("..\n\n..")

    def test_empty_text(self):
        """Test empty input raises EmptyGridError."""
        with pytest.raises(EmptyGridError):
            parse_grid("")

    def test_only_blank_lines(self):
        """Test whitespace-only input raises EmptyGridError."""
        with pytest.raises(EmptyGridError):
            parse_grid("\n   \n\t\n")

    def test_errors_are_value_errors(self):
        """Test all grid errors derive from GridError and ValueError."""
        for exc in (ParseError, RaggedRowError, EmptyGridError):
            assert issubclass(exc, GridError)
            assert issubclass(exc, ValueError)

    def test_empty_array(self):
        """Test building a grid from an empty array fails."""
        with pytest.raises(EmptyGridError):
            Grid(np.zeros((0, 3), dtype=np.uint8))

    def test_array_code_too_large(self):
        """Test an out-of-range cell code is rejected at construction."""
        with pytest.raises(ParseError) as exc_info:
            Grid(np.array([[0, 9], [0, 0]], dtype=np.uint8))
        assert exc_info.value.row == 0
        assert exc_info.value.col == 1

    def test_array_code_negative(self):
        """Test negative codes are rejected rather than wrapped to 255."""
        with pytest.raises(ParseError):
            Grid(np.array([[-1]]))

    def test_array_all_cell_types(self):
        """Test every valid cell code is accepted."""
        codes = np.array([[int(cell) for cell in CellType]])
        grid = Grid(codes)
        assert grid.to_rows() == ["./\\|-"]


class TestGridLookup:
    """Tests for bounds and neighbor lookup."""

    def test_is_valid_pos(self):
        """Test bounds checking."""
        grid = parse_grid("...\n...")
        assert grid.is_valid_pos(0, 0)
        assert grid.is_valid_pos(1, 2)
        assert not grid.is_valid_pos(-1, 0)
        assert not grid.is_valid_pos(2, 0)
        assert not grid.is_valid_pos(0, 3)

    def test_neighbor_inside(self):
        """Test neighbor inside the grid."""
        grid = parse_grid("...\n...\n...")
        assert grid.neighbor((1, 1), Direction.UP) == (0, 1)
        assert grid.neighbor((1, 1), Direction.DOWN) == (2, 1)
        assert grid.neighbor((1, 1), Direction.LEFT) == (1, 0)
        assert grid.neighbor((1, 1), Direction.RIGHT) == (1, 2)

    def test_neighbor_leaves_grid(self):
        """Test moving off any edge returns None without wraparound."""
        grid = parse_grid("...\n...")
        assert grid.neighbor((0, 1), Direction.UP) is None
        assert grid.neighbor((1, 1), Direction.DOWN) is None
        assert grid.neighbor((0, 0), Direction.LEFT) is None
        assert grid.neighbor((0, 2), Direction.RIGHT) is None


class TestGridImmutability:
    """Tests for read-only grid storage."""

    def test_cells_read_only(self, sample_grid):
        """Test cell array cannot be written."""
        with pytest.raises(ValueError):
            sample_grid.cells[0, 0] = CellType.FORWARD_MIRROR

    def test_source_array_copied(self):
        """Test later writes to the source array do not reach the grid."""
        codes = np.zeros((2, 2), dtype=np.uint8)
        grid = Grid(codes)
        codes[0, 0] = CellType.VERTICAL_SPLITTER
        assert grid.cell_at((0, 0)) == CellType.EMPTY

    def test_equality_and_hash(self):
        """Test grids compare by contents."""
        a = parse_grid("./\n|-")
        b = parse_grid("./\n|-")
        c = parse_grid("./\n-|")
        assert a == b
        assert hash(a) == hash(b)
        assert a != c

    def test_pickle_keeps_read_only(self, sample_grid):
        """Test grids survive pickling for worker processes."""
        copy = pickle.loads(pickle.dumps(sample_grid))
        assert copy == sample_grid
        assert copy.size == sample_grid.size
        assert not copy.cells.flags.writeable
