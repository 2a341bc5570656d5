"""
Shared type definitions for the neighborgrid system.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

NEIGHBOR_Y_BASED = True
DEFAULT_WRAP = False
DEFAULT_INVERTED_Y = True

# Largest number of cells (and largest single dimension) a grid may have
MAX_CELLS = 2**31 - 1


class Origin(Enum):
    """Which cell of the grid a caller's coordinate system treats as (0, 0)."""

    UPPER_LEFT = "upper_left"
    UPPER_RIGHT = "upper_right"
    CENTER = "center"
    LOWER_LEFT = "lower_left"
    LOWER_RIGHT = "lower_right"


class Direction(Enum):
    """Neighbor direction, named from the caller's point of view."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    UPLEFT = "upleft"
    UPRIGHT = "upright"
    DOWNLEFT = "downleft"
    DOWNRIGHT = "downright"


CARDINALS = (Direction.UP, Direction.LEFT, Direction.RIGHT, Direction.DOWN)


# =============================================================================
# Errors
# =============================================================================


class GridError(Exception):
    """Base class for all grid failures."""

    default_message = "Grid error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class IndexOutOfBounds(GridError, IndexError):
    default_message = "Index out of bounds"


class RowSizeMismatch(GridError, ValueError):
    default_message = "Row size must match other rows"


class InvalidSize(GridError, ValueError):
    default_message = "Invalid grid size"


class ExcessiveSize(GridError, ValueError):
    default_message = "Resulting grid is too large"


class InvalidDivisionSize(GridError, ValueError):
    default_message = "Divisor must be at least 1 and no larger than the grid"


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True)
class GridOptions:
    """
    Coordinate and neighbor configuration of a grid.

    For most grids, with x and y always positive, UPPER_LEFT with
    inverted_y=True is the natural fit and therefore the default: x grows
    to the right and y grows downward, matching row order.
    """

    origin: Origin = Origin.UPPER_LEFT
    inverted_y: bool = DEFAULT_INVERTED_Y
    # Only consulted when inverted_y is set: up/down follow logical y (True)
    # or raw storage rows (False)
    neighbor_ybased: bool = NEIGHBOR_Y_BASED
    wrap_x: bool = DEFAULT_WRAP
    wrap_y: bool = DEFAULT_WRAP

    def with_changes(self, **changes: object) -> GridOptions:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


# =============================================================================
# Neighbor Records
# =============================================================================


@dataclass(frozen=True)
class XyNeighbor(Generic[T]):
    """The four cardinal neighbors of a cell. Absent neighbors are None."""

    up: T | None
    left: T | None
    right: T | None
    down: T | None

    def __iter__(self) -> Iterator[T | None]:
        # Top to bottom, left to right
        return (getattr(self, f.name) for f in fields(self))

    def present(self) -> int:
        return sum(1 for value in self if value is not None)


@dataclass(frozen=True)
class AllAroundNeighbor(Generic[T]):
    """The eight surrounding neighbors of a cell. Absent neighbors are None."""

    upleft: T | None
    up: T | None
    upright: T | None
    left: T | None
    right: T | None
    downleft: T | None
    down: T | None
    downright: T | None

    def __iter__(self) -> Iterator[T | None]:
        return (getattr(self, f.name) for f in fields(self))

    def present(self) -> int:
        return sum(1 for value in self if value is not None)
