"""Tests for the Grid container: construction, access and neighbors."""

import pytest

from grid_types import (
    MAX_CELLS,
    Direction,
    ExcessiveSize,
    GridError,
    GridOptions,
    IndexOutOfBounds,
    InvalidSize,
    Origin,
    RowSizeMismatch,
)
from neighborgrid import Grid

FLAT = GridOptions(inverted_y=False)
WRAPPED = GridOptions(inverted_y=False, wrap_x=True, wrap_y=True)


def numbered(cols: int, rows: int, options: GridOptions | None = None) -> Grid[int]:
    return Grid.from_flat(list(range(cols * rows)), cols, rows, options)


# =============================================================================
# Construction
# =============================================================================


class TestConstruction:
    """Tests for the grid constructors."""

    def test_from_rows(self) -> None:
        """Nested rows are flattened in row-major order."""
        grid = Grid.new([[1, 2, 3], [4, 5, 6]])
        assert grid.rows == 2
        assert grid.cols == 3
        assert grid.size == 6
        assert grid.items == [1, 2, 3, 4, 5, 6]

    def test_from_pattern(self) -> None:
        """A (pattern, row_count) pair repeats one row."""
        grid = Grid.new(([1, 2, 3], 2))
        assert grid.rows == 2
        assert grid.cols == 3
        assert grid.items == [1, 2, 3, 1, 2, 3]

    def test_filled(self) -> None:
        """Every cell of a filled grid holds the value."""
        grid = Grid.filled(4, 2, "x")
        assert grid.items == ["x"] * 8
        assert grid.columns == 4

    def test_from_flat(self) -> None:
        """A flat sequence is wrapped without reordering."""
        grid = Grid.from_flat(range(6), 3, 2)
        assert grid.items == [0, 1, 2, 3, 4, 5]

    def test_filled_cells_independent(self) -> None:
        """Mutating one cell of a filled grid leaves the others unchanged."""
        grid = Grid.filled(2, 2, [])
        grid[0].append("x")
        assert grid[0] == ["x"]
        assert grid[3] == []

    def test_pattern_cells_independent(self) -> None:
        """Mutating one cell of a pattern grid leaves the same column of other rows unchanged."""
        grid = Grid.from_pattern([[], []], 2)
        grid[(0, 0)].append("x")
        assert grid[(0, 1)] == []
        assert grid[(1, 0)] == []

    def test_default_options(self) -> None:
        """Grids default to upper-left, inverted y and no wrapping."""
        grid = Grid.new([[1]])
        assert grid.options == GridOptions(Origin.UPPER_LEFT, True, True, False, False)
        assert grid.origin is Origin.UPPER_LEFT

    def test_no_rows(self) -> None:
        """An empty row list is an invalid size."""
        with pytest.raises(InvalidSize):
            Grid.from_rows([])

    def test_empty_rows(self) -> None:
        """Rows with no cells are an invalid size."""
        with pytest.raises(InvalidSize):
            Grid.from_rows([[], []])

    def test_row_mismatch(self) -> None:
        """Rows of different lengths are reported with their sizes."""
        with pytest.raises(RowSizeMismatch, match="Row size must match other rows") as exc_info:
            Grid.from_rows([[1, 2], [3], [4, 5]])
        assert "Row 1: 1 columns" in str(exc_info.value)

    def test_flat_length_mismatch(self) -> None:
        """A flat sequence must fill the grid exactly."""
        with pytest.raises(InvalidSize):
            Grid.from_flat([1, 2, 3], 2, 2)

    def test_excessive_dimension(self) -> None:
        """A single dimension at the cell ceiling is refused before allocation."""
        with pytest.raises(ExcessiveSize):
            Grid.filled(MAX_CELLS, 1, 0)

    def test_excessive_product(self) -> None:
        """Two moderate dimensions whose product is too large are refused."""
        with pytest.raises(ExcessiveSize, match="too large"):
            Grid.filled(65536, 65536, 0)

    def test_errors_share_base(self) -> None:
        """Every construction failure is a GridError and a ValueError."""
        for bad in ([], [[1], [1, 2]]):
            with pytest.raises(GridError):
                Grid.from_rows(bad)
            with pytest.raises(ValueError):
                Grid.from_rows(bad)

    def test_large_grid(self) -> None:
        """Large but valid grids are accepted."""
        grid = Grid.filled(1000, 655, 0)
        assert grid.size == 655000


# =============================================================================
# Access
# =============================================================================


class TestAccess:
    """Tests for reading and writing cells."""

    def test_set_and_get(self) -> None:
        """set writes through any index form."""
        grid = numbered(3, 3)
        grid.set((1, 2), 99)
        assert grid.items[7] == 99
        grid[0] = -1
        assert grid[(0, 0)] == -1

    def test_set_out_of_bounds(self) -> None:
        """set raises for locations off the grid."""
        grid = numbered(3, 3)
        with pytest.raises(IndexOutOfBounds):
            grid.set((3, 0), 1)

    def test_getitem_out_of_bounds(self) -> None:
        """Subscripting raises where get returns None."""
        grid = numbered(3, 3)
        assert grid.get((0, 3)) is None
        with pytest.raises(IndexOutOfBounds):
            grid[(0, 3)]

    def test_swap(self) -> None:
        """swap exchanges two cells."""
        grid = numbered(3, 3)
        grid.swap(0, (2, 2))
        assert grid.items[0] == 8
        assert grid.items[8] == 0

    def test_swap_out_of_bounds(self) -> None:
        """swap raises and leaves the grid unchanged when an index is invalid."""
        grid = numbered(3, 3)
        with pytest.raises(IndexOutOfBounds):
            grid.swap(0, 9)
        assert grid.items == list(range(9))

    def test_cell_ref(self) -> None:
        """A cell handle writes to the grid."""
        grid = numbered(3, 3)
        cell = grid.cell((1, 1))
        assert cell is not None
        cell.value = 40
        assert grid[4] == 40
        assert grid.cell((5, 5)) is None

    def test_equality(self) -> None:
        """Grids compare by cells, shape and options."""
        assert numbered(3, 2) == numbered(3, 2)
        assert numbered(3, 2) != numbered(2, 3)
        assert numbered(3, 2) != numbered(3, 2, FLAT)

    def test_map_and_copy(self) -> None:
        """map and copy produce independent grids of the same shape."""
        grid = numbered(2, 2)
        doubled = grid.map(lambda v: v * 2)
        copied = grid.copy()
        copied[0] = 100
        assert doubled.items == [0, 2, 4, 6]
        assert grid[0] == 0

    def test_rows_view(self) -> None:
        """rows_view yields storage rows."""
        assert list(numbered(2, 3).rows_view()) == [[0, 1], [2, 3], [4, 5]]

    def test_indexed(self) -> None:
        """indexed pairs each offset with its value."""
        assert list(Grid.new([["a", "b"]]).indexed()) == [(0, "a"), (1, "b")]


# =============================================================================
# Neighbors
# =============================================================================


class TestNeighbors:
    """Tests for neighbor lookup on a 5x5 grid numbered 0..24."""

    def test_plain_axis(self) -> None:
        """Without inversion, up is the previous storage row."""
        grid = numbered(5, 5, FLAT)
        assert grid.get((2, -1)) == 7
        assert grid.get_up((2, -1)) == 2
        assert grid.get_down((2, -1)) == 12
        assert grid.get_left((2, -1)) == 6
        assert grid.get_right((2, -1)) == 8

    def test_inverted_follows_y(self) -> None:
        """With inverted y and y-based neighbors, up is y + 1."""
        grid = numbered(5, 5)
        assert grid.get((2, 1)) == 7
        assert grid.get_up((2, 1)) == 12
        assert grid.get_down((2, 1)) == 2
        assert grid.get((2, 2)) == grid.get_up((2, 1))

    def test_inverted_raw_rows(self) -> None:
        """Turning off y-based neighbors keeps up on the previous storage row."""
        grid = numbered(5, 5, GridOptions(neighbor_ybased=False))
        assert grid.get_up((2, 1)) == 2
        assert grid.get_down((2, 1)) == 12

    def test_wrapping(self) -> None:
        """Wrapped edges continue on the opposite side."""
        grid = numbered(5, 5, WRAPPED)
        assert grid.get_left((0, 0)) == 4
        assert grid.get_up((0, 0)) == 20
        assert grid.get_right(4) == 0
        assert grid.get_down(24) == 4
        assert grid.get_upleft(0) == 24

    def test_wrap_x_only(self) -> None:
        """Wrapping one axis leaves the other bounded."""
        grid = numbered(5, 5, GridOptions(inverted_y=False, wrap_x=True))
        assert grid.get_left(0) == 4
        assert grid.get_up(0) is None

    def test_edges_without_wrap(self) -> None:
        """Neighbors past an unwrapped edge are absent."""
        grid = numbered(5, 5, FLAT)
        assert grid.get_up(0) is None
        assert grid.get_left(0) is None
        assert grid.get_right(4) is None
        assert grid.get_right(19) is None
        assert grid.get_down(22) is None
        assert grid.get_upleft(0) is None
        assert grid.get_upright(4) is None
        assert grid.get_downleft(20) is None
        assert grid.get_downright(24) is None

    def test_diagonals(self) -> None:
        """Diagonals move vertically, then horizontally."""
        grid = numbered(5, 5, FLAT)
        assert grid.get_upleft(12) == 6
        assert grid.get_upright(12) == 8
        assert grid.get_downleft(12) == 16
        assert grid.get_downright(12) == 18

    def test_all_around(self) -> None:
        """all_around_neighbors lists the surrounding cells top to bottom."""
        grid = numbered(5, 5, FLAT)
        assert list(grid.all_around_neighbors(12)) == [6, 7, 8, 11, 13, 16, 17, 18]

    def test_xy_neighbors(self) -> None:
        """xy_neighbors lists up, left, right, down."""
        around = numbered(5, 5, FLAT).xy_neighbors((2, -2))
        assert (around.up, around.left, around.right, around.down) == (7, 11, 13, 17)

    @pytest.mark.parametrize(
        "offset, xy_count, all_count",
        [(0, 2, 3), (2, 3, 5), (12, 4, 8), (24, 2, 3)],
    )
    def test_counts_without_wrap(self, offset: int, xy_count: int, all_count: int) -> None:
        """Corners, edges and interior cells have the expected neighbor counts."""
        grid = numbered(5, 5)
        assert grid.xy_neighbors(offset).present() == xy_count
        assert grid.all_around_neighbors(offset).present() == all_count

    def test_counts_with_wrap(self) -> None:
        """On a torus every cell has a full neighborhood."""
        grid = numbered(5, 5, WRAPPED)
        for offset in range(grid.size):
            assert grid.xy_neighbors(offset).present() == 4
            assert grid.all_around_neighbors(offset).present() == 8

    @pytest.mark.parametrize("inverted_y", [True, False])
    def test_wrap_symmetry(self, inverted_y: bool) -> None:
        """Opposite steps undo each other on a wrapped grid."""
        grid = numbered(4, 3, GridOptions(inverted_y=inverted_y, wrap_x=True, wrap_y=True))
        for offset in range(grid.size):
            up = grid.neighbor_index(offset, Direction.UP)
            right = grid.neighbor_index(offset, Direction.RIGHT)
            assert grid.neighbor_index(up, Direction.DOWN) == offset
            assert grid.neighbor_index(right, Direction.LEFT) == offset

    def test_off_grid_neighbors(self) -> None:
        """Neighbor getters return None for an index off the grid."""
        grid = numbered(5, 5, WRAPPED)
        assert grid.get_up((9, 9)) is None
        assert grid.neighbor_index(25, Direction.LEFT) is None

    def test_bulk_neighbors_raise(self) -> None:
        """Bulk neighbor queries raise for an index off the grid."""
        grid = numbered(5, 5)
        with pytest.raises(IndexOutOfBounds):
            grid.xy_neighbors((5, 5))
        with pytest.raises(IndexOutOfBounds):
            grid.all_around_neighbors(-1)

    def test_neighbor_cell(self) -> None:
        """A neighbor handle writes to the neighboring cell."""
        grid = numbered(3, 3, FLAT)
        cell = grid.neighbor_cell(4, Direction.UP)
        assert cell is not None
        cell.value = -1
        assert grid[1] == -1

    def test_center_neighbors(self) -> None:
        """Neighbors do not depend on the origin."""
        grid = numbered(3, 5, GridOptions(origin=Origin.CENTER, inverted_y=False))
        assert grid.get_up((0, 0)) == 4
        assert grid.get_down((0, 0)) == 10
        assert grid.get_left((0, 0)) == 6
        assert grid.get_right((0, 0)) == 8
