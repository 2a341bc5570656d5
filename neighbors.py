"""
Neighbor resolution on canonical offsets.

Every function takes an already validated offset plus the grid shape and
options, and returns the neighbor's offset or None when there is no such
neighbor. Wrapping is honored per axis.
"""

from __future__ import annotations

from typing import Callable

from grid_types import Direction, GridOptions

Step = Callable[[int, int, int, GridOptions], "int | None"]


# =============================================================================
# Raw Storage Steps
# =============================================================================


def raw_up(offset: int, rows: int, cols: int, options: GridOptions) -> int | None:
    """One storage row up (toward row 0)."""
    if offset >= cols:
        return offset - cols
    if options.wrap_y:
        return offset + rows * cols - cols
    return None


def raw_down(offset: int, rows: int, cols: int, options: GridOptions) -> int | None:
    """One storage row down (toward the last row)."""
    below = offset + cols
    if below < rows * cols:
        return below
    if options.wrap_y:
        return below - rows * cols
    return None


def left(offset: int, rows: int, cols: int, options: GridOptions) -> int | None:
    if offset % cols == 0:
        return offset + cols - 1 if options.wrap_x else None
    return offset - 1


def right(offset: int, rows: int, cols: int, options: GridOptions) -> int | None:
    after = offset + 1
    if after % cols == 0:
        return after - cols if options.wrap_x else None
    return after


# =============================================================================
# Logical Steps
# =============================================================================


def _follows_logical_y(options: GridOptions) -> bool:
    # With an inverted y axis, "up" is y+1, which is the next storage row
    return options.inverted_y and options.neighbor_ybased


def up(offset: int, rows: int, cols: int, options: GridOptions) -> int | None:
    if _follows_logical_y(options):
        return raw_down(offset, rows, cols, options)
    return raw_up(offset, rows, cols, options)


def down(offset: int, rows: int, cols: int, options: GridOptions) -> int | None:
    if _follows_logical_y(options):
        return raw_up(offset, rows, cols, options)
    return raw_down(offset, rows, cols, options)


def _compose(vertical: Step, horizontal: Step) -> Step:
    def diagonal(offset: int, rows: int, cols: int, options: GridOptions) -> int | None:
        moved = vertical(offset, rows, cols, options)
        if moved is None:
            return None
        return horizontal(moved, rows, cols, options)

    diagonal.__name__ = f"{vertical.__name__}{horizontal.__name__}"
    return diagonal


upleft = _compose(up, left)
upright = _compose(up, right)
downleft = _compose(down, left)
downright = _compose(down, right)


STEPS: dict[Direction, Step] = {
    Direction.UP: up,
    Direction.DOWN: down,
    Direction.LEFT: left,
    Direction.RIGHT: right,
    Direction.UPLEFT: upleft,
    Direction.UPRIGHT: upright,
    Direction.DOWNLEFT: downleft,
    Direction.DOWNRIGHT: downright,
}


def step(offset: int, direction: Direction, rows: int, cols: int, options: GridOptions) -> int | None:
    """Offset of the neighbor of `offset` in `direction`, or None."""
    return STEPS[direction](offset, rows, cols, options)
