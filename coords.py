"""
Coordinate system and index resolution.

Canonical space has (0, 0) in the upper left, x growing rightward and y
growing downward; canonical (cx, cy) maps to the flat row-major offset
cy * cols + cx. Every logical coordinate is translated into canonical
space in two steps:

1. Axis inversion: when `inverted_y` is set, y is negated.
2. Origin translation: shift/reflect (x, y) by the configured origin.

`from_canonical` undoes step 2 exactly, so offset -> (x, y) -> offset is the
identity for every in-bounds location.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from grid_types import GridOptions, IndexOutOfBounds, Origin

if TYPE_CHECKING:
    from neighborgrid import Grid

__all__ = [
    "Coordinates",
    "Index",
    "coordinate_range",
    "from_canonical",
    "logical_to_offset",
    "materialize",
    "offset_to_logical",
    "resolve_index",
    "to_canonical",
]


# =============================================================================
# Coordinate System
# =============================================================================


def _invert(y: int, options: GridOptions) -> int:
    return -y if options.inverted_y else y


def to_canonical(x: int, y: int, rows: int, cols: int, origin: Origin) -> tuple[int, int]:
    """Translate an (already inversion-adjusted) (x, y) into canonical space. No bounds check."""
    match origin:
        case Origin.UPPER_LEFT:
            return (x, -y)
        case Origin.UPPER_RIGHT:
            return (x + cols - 1, -y)
        case Origin.CENTER:
            return (x + cols // 2, rows // 2 - y)
        case Origin.LOWER_LEFT:
            return (x, rows - 1 - y)
        case Origin.LOWER_RIGHT:
            return (x + cols - 1, rows - 1 - y)
    raise ValueError(f"Unknown origin: {origin}")


def from_canonical(cx: int, cy: int, rows: int, cols: int, origin: Origin) -> tuple[int, int]:
    """Inverse of to_canonical."""
    match origin:
        case Origin.UPPER_LEFT:
            return (cx, -cy)
        case Origin.UPPER_RIGHT:
            return (cx - (cols - 1), -cy)
        case Origin.CENTER:
            return (cx - cols // 2, rows // 2 - cy)
        case Origin.LOWER_LEFT:
            return (cx, rows - 1 - cy)
        case Origin.LOWER_RIGHT:
            return (cx - (cols - 1), rows - 1 - cy)
    raise ValueError(f"Unknown origin: {origin}")


def logical_to_offset(x: int, y: int, rows: int, cols: int, options: GridOptions) -> int:
    """
    Convert a logical (x, y) into a canonical flat offset.

    Raises:
        IndexOutOfBounds: if the location is outside the grid under `options`
    """
    cx, cy = to_canonical(x, _invert(y, options), rows, cols, options.origin)
    if not (0 <= cx < cols and 0 <= cy < rows):
        raise IndexOutOfBounds(f"Index out of bounds: ({x}, {y}) on a {cols}x{rows} grid")
    return cy * cols + cx


def offset_to_logical(offset: int, rows: int, cols: int, options: GridOptions) -> tuple[int, int]:
    """Recover the logical (x, y) of a canonical offset."""
    if not 0 <= offset < rows * cols:
        raise IndexOutOfBounds(f"Index out of bounds: offset {offset} on a {cols}x{rows} grid")
    x, y = from_canonical(offset % cols, offset // cols, rows, cols, options.origin)
    return (x, _invert(y, options))


def coordinate_range(rows: int, cols: int, options: GridOptions) -> tuple[int, int, int, int]:
    """
    Inclusive logical bounds of a grid.

    Returns:
        (min_x, max_x, min_y, max_y)
    """
    # The two opposite corners cover the extremes for every origin
    x0, y0 = offset_to_logical(0, rows, cols, options)
    x1, y1 = offset_to_logical(rows * cols - 1, rows, cols, options)
    return (min(x0, x1), max(x0, x1), min(y0, y1), max(y0, y1))


# =============================================================================
# Index Resolution
# =============================================================================


def _check_xy(x: object, y: object) -> None:
    """Reject anything but plain integers, so every form resolves to an int offset."""
    for value in (x, y):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Coordinates must be integers, got ({x!r}, {y!r})")


@dataclass(frozen=True)
class Coordinates:
    """A named (x, y) location, equivalent to the plain (x, y) tuple."""

    x: int
    y: int

    def resolve(self, grid: Grid) -> int:
        """Validated canonical offset of this location on `grid`."""
        _check_xy(self.x, self.y)
        return logical_to_offset(self.x, self.y, grid.rows, grid.cols, grid.options)

    @classmethod
    def materialize(cls, offset: int, grid: Grid) -> Coordinates:
        """The Coordinates that resolve to `offset` on `grid`."""
        x, y = offset_to_logical(offset, grid.rows, grid.cols, grid.options)
        return cls(x, y)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


Index = int | tuple[int, int] | Coordinates

IndexT = TypeVar("IndexT", int, tuple, Coordinates)


def resolve_index(index: Index, grid: Grid) -> int:
    """
    Resolve any supported coordinate form to a validated canonical offset.

    The returned offset is always safe for direct storage access.

    Raises:
        IndexOutOfBounds: if the location is not on the grid
        TypeError: if `index` is not a supported coordinate form
    """
    match index:
        case bool():
            raise TypeError("bool is not a grid index")
        case int():
            if 0 <= index < grid.rows * grid.cols:
                return index
            raise IndexOutOfBounds(f"Index out of bounds: offset {index} on a {grid.cols}x{grid.rows} grid")
        case Coordinates():
            return index.resolve(grid)
        case (x, y):
            _check_xy(x, y)
            return logical_to_offset(x, y, grid.rows, grid.cols, grid.options)
    raise TypeError(f"Unsupported grid index: {index!r}")


def materialize(offset: int, grid: Grid, kind: type[IndexT] = tuple) -> IndexT:  # type: ignore[assignment]
    """
    Express a canonical offset in the coordinate form `kind`.

    `kind` is one of int, tuple or Coordinates.
    """
    if kind is int:
        resolve_index(offset, grid)
        return offset  # type: ignore[return-value]
    if kind is tuple:
        return offset_to_logical(offset, grid.rows, grid.cols, grid.options)  # type: ignore[return-value]
    if kind is Coordinates:
        return Coordinates.materialize(offset, grid)  # type: ignore[return-value]
    raise TypeError(f"Unsupported coordinate kind: {kind!r}")
