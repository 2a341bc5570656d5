"""
Partitioning a grid into divisor x divisor regions ("nrants").

Region extents use ceiling division, so when the grid does not divide evenly
the regions along the bottom and right edges are ragged: they hold fewer
cells than region_width x region_height. Regions are numbered row-major,
0 <= region_id < divisor * divisor.

All functions work on canonical offsets, so they are independent of the
grid's origin and axis inversion.
"""

from __future__ import annotations

from typing import Iterator

from grid_types import InvalidDivisionSize

__all__ = [
    "check_divisor",
    "ceiling",
    "region_extent",
    "region_of",
    "region_offsets",
    "region_start",
]


def ceiling(a: int, b: int) -> int:
    return (a + b - 1) // b


def check_divisor(rows: int, cols: int, divisor: int) -> None:
    """
    Raises:
        InvalidDivisionSize: unless 1 <= divisor <= max(rows, cols)
    """
    if divisor < 1 or divisor > max(rows, cols):
        raise InvalidDivisionSize(
            f"Invalid divisor {divisor} for a {cols}x{rows} grid: "
            f"must be between 1 and {max(rows, cols)}"
        )


def region_extent(rows: int, cols: int, divisor: int) -> tuple[int, int]:
    """
    Returns:
        (region_width, region_height)
    """
    check_divisor(rows, cols, divisor)
    return (ceiling(cols, divisor), ceiling(rows, divisor))


def region_of(offset: int, rows: int, cols: int, divisor: int) -> int:
    """Region id containing `offset`."""
    width, height = region_extent(rows, cols, divisor)
    row_block = offset // cols // height
    col_block = offset % cols // width
    return row_block * divisor + col_block


def _region_corner(region_id: int, rows: int, cols: int, divisor: int) -> tuple[int, int, int, int]:
    width, height = region_extent(rows, cols, divisor)
    if not 0 <= region_id < divisor * divisor:
        raise InvalidDivisionSize(f"Region {region_id} does not exist for divisor {divisor}")
    row_block, col_block = divmod(region_id, divisor)
    return (row_block * height, col_block * width, width, height)


def region_start(region_id: int, rows: int, cols: int, divisor: int) -> int | None:
    """
    First canonical offset of a region (its upper-left cell).

    Ceiling extents can leave whole regions past the grid edge (5 columns
    split 4 ways gives widths 2, 2, 1, 0); such a region has no cells and
    None is returned.
    """
    row, col, _, _ = _region_corner(region_id, rows, cols, divisor)
    if row >= rows or col >= cols:
        return None
    return row * cols + col


def region_offsets(region_id: int, rows: int, cols: int, divisor: int) -> Iterator[int | None]:
    """
    Yield every slot of a region in row-major order.

    Exactly region_width * region_height slots are produced. Slots that fall
    outside the grid (ragged right or bottom edge) yield None, so the
    position of each slot within the region is always the same.
    """
    start_row, start_col, width, height = _region_corner(region_id, rows, cols, divisor)
    for slot in range(width * height):
        row_offset, col_offset = divmod(slot, width)
        row = start_row + row_offset
        col = start_col + col_offset
        if row >= rows or col >= cols:
            yield None
        else:
            yield row * cols + col
