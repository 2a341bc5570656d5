"""
Row, column and region iteration over a grid.

Each iterator is a restartable view: every call to iter() walks the cells
again from the start. Constructing a view with offset=None gives an empty
view, which is how the Grid turns an out-of-bounds coordinate into an empty
iteration instead of an error.

Mutable views yield CellRef handles instead of values. A mutable view must
not be used while another view or reference writes to the same grid.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Iterable, Iterator, TypeVar

from regions import check_divisor, region_extent, region_of, region_offsets

if TYPE_CHECKING:
    from neighborgrid import Grid

T = TypeVar("T")

__all__ = [
    "CellRef",
    "ColIter",
    "MutColIter",
    "MutNrantIter",
    "MutRowIter",
    "NrantIter",
    "RowIter",
]


class CellRef(Generic[T]):
    """A handle to one storage slot of a grid."""

    __slots__ = ("_grid", "index")

    def __init__(self, grid: Grid[T], index: int) -> None:
        self._grid = grid
        self.index = index

    @property
    def value(self) -> T:
        return self._grid.items[self.index]

    @value.setter
    def value(self, value: T) -> None:
        self._grid.items[self.index] = value

    def coords(self, kind: type = tuple) -> object:
        """Logical location of this cell, in the coordinate form `kind`."""
        return self._grid.coords_of(self.index, kind)

    def __repr__(self) -> str:
        return f"CellRef(index={self.index}, value={self.value!r})"


class _CellView(Generic[T]):
    """Base for views over a fixed sequence of offsets."""

    def __init__(self, grid: Grid[T]) -> None:
        self._grid = grid

    def offsets(self) -> Iterable[int | None]:
        raise NotImplementedError

    def __iter__(self) -> Iterator[T | None]:
        items = self._grid.items
        for offset in self.offsets():
            yield None if offset is None else items[offset]

    def __len__(self) -> int:
        return sum(1 for _ in self.offsets())


class _MutCellView(_CellView[T]):
    def __iter__(self) -> Iterator[CellRef[T] | None]:  # type: ignore[override]
        for offset in self.offsets():
            yield None if offset is None else CellRef(self._grid, offset)


# =============================================================================
# Rows and Columns
# =============================================================================


class RowIter(_CellView[T]):
    """Every cell of the row containing `offset`, left to right in storage order."""

    def __init__(self, grid: Grid[T], offset: int | None) -> None:
        super().__init__(grid)
        self._start = None if offset is None else offset - offset % grid.cols

    def offsets(self) -> range:
        if self._start is None:
            return range(0)
        return range(self._start, self._start + self._grid.cols)

    def __len__(self) -> int:
        return len(self.offsets())


class ColIter(_CellView[T]):
    """Every cell of the column containing `offset`, top to bottom in storage order."""

    def __init__(self, grid: Grid[T], offset: int | None) -> None:
        super().__init__(grid)
        self._start = None if offset is None else offset % grid.cols

    def offsets(self) -> range:
        if self._start is None:
            return range(0)
        return range(self._start, self._grid.size, self._grid.cols)

    def __len__(self) -> int:
        return len(self.offsets())


class MutRowIter(_MutCellView[T], RowIter[T]):
    pass


class MutColIter(_MutCellView[T], ColIter[T]):
    pass


# =============================================================================
# Regions
# =============================================================================


class NrantIter(_CellView[T]):
    """
    Every slot of the region containing `offset`, for a grid split into
    divisor x divisor regions.

    Yields exactly region_width * region_height items; slots past a ragged
    grid edge yield None.
    """

    def __init__(self, grid: Grid[T], divisor: int, offset: int | None) -> None:
        super().__init__(grid)
        check_divisor(grid.rows, grid.cols, divisor)
        self.divisor = divisor
        self.region = None if offset is None else region_of(offset, grid.rows, grid.cols, divisor)

    def offsets(self) -> Iterator[int | None]:
        if self.region is None:
            return iter(())
        return region_offsets(self.region, self._grid.rows, self._grid.cols, self.divisor)

    def __len__(self) -> int:
        if self.region is None:
            return 0
        width, height = region_extent(self._grid.rows, self._grid.cols, self.divisor)
        return width * height


class MutNrantIter(_MutCellView[T], NrantIter[T]):
    pass
