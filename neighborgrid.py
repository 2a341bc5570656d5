"""
Dense 2-D grid with configurable coordinate addressing.

Cells are stored contiguously in row-major order. Callers address them with
a flat offset, an (x, y) tuple or a Coordinates record; the grid's
GridOptions decide where (0, 0) is, which way y grows, what "up" means for
neighbors and whether the edges wrap.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterator, Sequence, TypeVar

import grid_builder
import neighbors
from coords import Coordinates, Index, coordinate_range, materialize, resolve_index
from grid_iters import CellRef, ColIter, MutColIter, MutNrantIter, MutRowIter, NrantIter, RowIter
from grid_types import (
    AllAroundNeighbor,
    Direction,
    GridOptions,
    IndexOutOfBounds,
    InvalidSize,
    Origin,
    XyNeighbor,
)
from regions import check_divisor, region_of, region_start

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

__all__ = ["Coordinates", "Direction", "Grid", "GridOptions", "Origin"]


@dataclass(eq=True)
class Grid(Generic[T]):
    """
    A rows x cols grid of cells.

    Build one with the constructors (Grid.new, Grid.from_rows, Grid.from_flat,
    Grid.from_pattern, Grid.filled) which validate their input; the
    dataclass constructor only checks the storage invariants.
    """

    items: list[T]
    rows: int
    cols: int
    options: GridOptions = field(default_factory=GridOptions)

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise InvalidSize(f"Invalid grid size: {self.cols}x{self.rows}")
        if len(self.items) != self.rows * self.cols:
            raise InvalidSize(
                f"Invalid grid size: {len(self.items)} items for a {self.cols}x{self.rows} grid"
            )
        if self.options.origin is Origin.CENTER and (self.rows % 2 == 0 or self.cols % 2 == 0):
            raise InvalidSize(
                f"Invalid grid size: a center origin needs odd dimensions, got {self.cols}x{self.rows}"
            )

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def new(cls, source: Any, options: GridOptions | None = None) -> Grid[Any]:
        """
        Build a grid from nested rows, or from a (pattern, row_count) pair
        that replicates one row.
        """
        match source:
            case (list() | tuple() as pattern, int() as row_count) if not (
                pattern and isinstance(pattern[0], (list, tuple))
            ):
                return cls.from_pattern(pattern, row_count, options)
        return cls.from_rows(source, options)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]], options: GridOptions | None = None) -> Grid[T]:
        """
        Raises:
            InvalidSize: if there are no rows or the rows are empty
            RowSizeMismatch: if the rows differ in length
            ExcessiveSize: if the grid would be too large
        """
        items, row_count, col_count = grid_builder.flatten_rows(rows)
        return cls._build(items, row_count, col_count, options)

    @classmethod
    def from_flat(
        cls, items: Sequence[T], columns: int, rows: int, options: GridOptions | None = None
    ) -> Grid[T]:
        """Wrap row-major `items` as a columns x rows grid."""
        return cls._build(grid_builder.flat_items(items, columns, rows), rows, columns, options)

    @classmethod
    def from_pattern(
        cls, pattern: Sequence[T], row_count: int, options: GridOptions | None = None
    ) -> Grid[T]:
        """Repeat one row `row_count` times."""
        items = grid_builder.repeat_pattern(pattern, row_count)
        return cls._build(items, row_count, len(pattern), options)

    @classmethod
    def filled(cls, columns: int, rows: int, value: T, options: GridOptions | None = None) -> Grid[T]:
        return cls._build(grid_builder.fill(columns, rows, value), rows, columns, options)

    @classmethod
    def _build(cls, items: list[T], rows: int, cols: int, options: GridOptions | None) -> Grid[T]:
        grid = cls(items, rows, cols, options if options is not None else GridOptions())
        logger.debug("Built %dx%d grid, origin %s", cols, rows, grid.options.origin.value)
        return grid

    # =========================================================================
    # Shape
    # =========================================================================

    @property
    def size(self) -> int:
        """The number of cells."""
        return len(self.items)

    @property
    def columns(self) -> int:
        return self.cols

    @property
    def origin(self) -> Origin:
        return self.options.origin

    @property
    def min_x(self) -> int:
        """Smallest valid x. Depends on the origin."""
        return coordinate_range(self.rows, self.cols, self.options)[0]

    @property
    def max_x(self) -> int:
        """Largest valid x. Depends on the origin."""
        return coordinate_range(self.rows, self.cols, self.options)[1]

    @property
    def min_y(self) -> int:
        """Smallest valid y. Depends on the origin and inverted_y."""
        return coordinate_range(self.rows, self.cols, self.options)[2]

    @property
    def max_y(self) -> int:
        """Largest valid y. Depends on the origin and inverted_y."""
        return coordinate_range(self.rows, self.cols, self.options)[3]

    # =========================================================================
    # Addressing
    # =========================================================================

    def index_of(self, index: Index) -> int:
        """
        Canonical flat offset of any coordinate form.

        Raises:
            IndexOutOfBounds: if the location is not on the grid
        """
        return resolve_index(index, self)

    def coords_of(self, offset: int, kind: type = tuple) -> Any:
        """Logical location of `offset` as an int, (x, y) tuple or Coordinates."""
        return materialize(offset, self, kind)

    def contains(self, index: Index) -> bool:
        """Whether `index` names a cell of this grid."""
        try:
            resolve_index(index, self)
        except IndexOutOfBounds:
            return False
        return True

    def _try_resolve(self, index: Index) -> int | None:
        try:
            return resolve_index(index, self)
        except IndexOutOfBounds:
            return None

    # =========================================================================
    # Cell Access
    # =========================================================================

    def get(self, index: Index) -> T | None:
        """Value of a cell, or None if outside the grid."""
        offset = self._try_resolve(index)
        return None if offset is None else self.items[offset]

    def set(self, index: Index, value: T) -> None:
        """
        Replace the value of a cell.

        Raises:
            IndexOutOfBounds: if the location is not on the grid
        """
        self.items[resolve_index(index, self)] = value

    def cell(self, index: Index) -> CellRef[T] | None:
        """A writable handle to a cell, or None if outside the grid."""
        offset = self._try_resolve(index)
        return None if offset is None else CellRef(self, offset)

    def __getitem__(self, index: Index) -> T:
        return self.items[resolve_index(index, self)]

    def __setitem__(self, index: Index, value: T) -> None:
        self.set(index, value)

    def swap(self, a: Index, b: Index) -> None:
        """
        Swap the values of two cells.

        Raises:
            IndexOutOfBounds: if either location is not on the grid
        """
        i = resolve_index(a, self)
        j = resolve_index(b, self)
        self.items[i], self.items[j] = self.items[j], self.items[i]

    # =========================================================================
    # Neighbors
    # =========================================================================

    def neighbor_index(self, index: Index, direction: Direction) -> int | None:
        """Offset of the neighbor in `direction`, or None if there is none."""
        offset = self._try_resolve(index)
        if offset is None:
            return None
        return neighbors.step(offset, direction, self.rows, self.cols, self.options)

    def get_neighbor(self, index: Index, direction: Direction) -> T | None:
        offset = self.neighbor_index(index, direction)
        return None if offset is None else self.items[offset]

    def get_up(self, index: Index) -> T | None:
        """
        Value one step "up", or None.

        With inverted_y and neighbor_ybased both set, up means y + 1, which
        is the next storage row; otherwise up is the previous storage row.
        """
        return self.get_neighbor(index, Direction.UP)

    def get_down(self, index: Index) -> T | None:
        return self.get_neighbor(index, Direction.DOWN)

    def get_left(self, index: Index) -> T | None:
        return self.get_neighbor(index, Direction.LEFT)

    def get_right(self, index: Index) -> T | None:
        return self.get_neighbor(index, Direction.RIGHT)

    def get_upleft(self, index: Index) -> T | None:
        return self.get_neighbor(index, Direction.UPLEFT)

    def get_upright(self, index: Index) -> T | None:
        return self.get_neighbor(index, Direction.UPRIGHT)

    def get_downleft(self, index: Index) -> T | None:
        return self.get_neighbor(index, Direction.DOWNLEFT)

    def get_downright(self, index: Index) -> T | None:
        return self.get_neighbor(index, Direction.DOWNRIGHT)

    def neighbor_cell(self, index: Index, direction: Direction) -> CellRef[T] | None:
        """A writable handle to the neighbor in `direction`, or None."""
        offset = self.neighbor_index(index, direction)
        return None if offset is None else CellRef(self, offset)

    def xy_neighbors(self, index: Index) -> XyNeighbor[T]:
        """
        The four cardinal neighbors of a cell.

        Raises:
            IndexOutOfBounds: if the location is not on the grid
        """
        offset = resolve_index(index, self)
        return XyNeighbor(
            up=self.get_up(offset),
            left=self.get_left(offset),
            right=self.get_right(offset),
            down=self.get_down(offset),
        )

    def all_around_neighbors(self, index: Index) -> AllAroundNeighbor[T]:
        """
        The eight surrounding neighbors of a cell.

        Raises:
            IndexOutOfBounds: if the location is not on the grid
        """
        offset = resolve_index(index, self)
        return AllAroundNeighbor(
            upleft=self.get_upleft(offset),
            up=self.get_up(offset),
            upright=self.get_upright(offset),
            left=self.get_left(offset),
            right=self.get_right(offset),
            downleft=self.get_downleft(offset),
            down=self.get_down(offset),
            downright=self.get_downright(offset),
        )

    # =========================================================================
    # Regions
    # =========================================================================

    def nrant(self, index: Index, divisor: int) -> int:
        """
        Which of the divisor x divisor regions the cell belongs to.

        Region sizes use ceiling division, so grids that do not divide evenly
        have smaller regions along the bottom and right. A 9x9 Sudoku board
        uses a divisor of 3.

        Raises:
            InvalidDivisionSize: unless 1 <= divisor <= max(rows, cols)
            IndexOutOfBounds: if the location is not on the grid
        """
        check_divisor(self.rows, self.cols, divisor)
        return region_of(resolve_index(index, self), self.rows, self.cols, divisor)

    def quadrant(self, index: Index) -> int:
        """nrant with a divisor of 2. Not affected by origin or inversion."""
        return self.nrant(index, 2)

    def region_start(self, region_id: int, divisor: int) -> int | None:
        """Offset of the upper-left cell of a region, None if the region is empty."""
        return region_start(region_id, self.rows, self.cols, divisor)

    # =========================================================================
    # Iteration
    # =========================================================================

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def iter_mut(self) -> Iterator[CellRef[T]]:
        return (CellRef(self, i) for i in range(self.size))

    def indexed(self) -> Iterator[tuple[int, T]]:
        """(offset, value) pairs in storage order."""
        return enumerate(self.items)

    def rows_view(self) -> Iterator[list[T]]:
        """Each row as a list, top storage row first."""
        for start in range(0, self.size, self.cols):
            yield self.items[start : start + self.cols]

    def row_iter(self, index: Index) -> RowIter[T]:
        """
        Every cell of the row that `index` is on, from the start of the row.

        An index outside the grid gives an empty iteration.
        """
        return RowIter(self, self._try_resolve(index))

    def col_iter(self, index: Index) -> ColIter[T]:
        """Every cell of the column that `index` is on, from the first row."""
        return ColIter(self, self._try_resolve(index))

    def row_iter_mut(self, index: Index) -> MutRowIter[T]:
        return MutRowIter(self, self._try_resolve(index))

    def col_iter_mut(self, index: Index) -> MutColIter[T]:
        return MutColIter(self, self._try_resolve(index))

    def nrant_iter(self, divisor: int, index: Index) -> NrantIter[T]:
        """
        Every slot of the region containing `index`, in row-major order.

        Ragged slots past the grid edge yield None. An index outside the
        grid gives an empty iteration.

        Raises:
            InvalidDivisionSize: unless 1 <= divisor <= max(rows, cols)
        """
        return NrantIter(self, divisor, self._try_resolve(index))

    def nrant_iter_mut(self, divisor: int, index: Index) -> MutNrantIter[T]:
        return MutNrantIter(self, divisor, self._try_resolve(index))

    def quadrant_iter(self, index: Index) -> NrantIter[T]:
        return self.nrant_iter(2, index)

    def quadrant_iter_mut(self, index: Index) -> MutNrantIter[T]:
        return self.nrant_iter_mut(2, index)

    # =========================================================================
    # Whole-grid Helpers
    # =========================================================================

    def copy(self) -> Grid[T]:
        return Grid(list(self.items), self.rows, self.cols, self.options)

    def map(self, fn: Callable[[T], U]) -> Grid[U]:
        """A new grid of the same shape and options with `fn` applied to every cell."""
        return Grid([fn(item) for item in self.items], self.rows, self.cols, self.options)

    def with_options(self, options: GridOptions) -> Grid[T]:
        """The same cells addressed through different options."""
        return Grid(list(self.items), self.rows, self.cols, options)

