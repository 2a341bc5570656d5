"""
Validation and flattening of grid construction input.

Each helper checks its input once and returns the row-major item list that a
Grid stores. Sizes are bounded by MAX_CELLS so that a bad dimension fails
before anything is allocated.
"""

from __future__ import annotations

import copy
from typing import Sequence, TypeVar

from grid_types import MAX_CELLS, ExcessiveSize, InvalidSize, RowSizeMismatch

T = TypeVar("T")

__all__ = ["check_size", "fill", "flat_items", "flatten_rows", "repeat_pattern"]


def check_size(columns: int, rows: int) -> int:
    """
    Total cell count of a columns x rows grid.

    Raises:
        ExcessiveSize: if either dimension or the product reaches MAX_CELLS
        InvalidSize: if either dimension is less than 1
    """
    if rows >= MAX_CELLS or columns >= MAX_CELLS:
        raise ExcessiveSize(f"Resulting grid is too large: {columns}x{rows}")
    total = rows * columns
    if total >= MAX_CELLS:
        raise ExcessiveSize(f"Resulting grid is too large: {columns}x{rows} = {total} cells")
    if rows < 1 or columns < 1:
        raise InvalidSize(f"Invalid grid size: {columns}x{rows}")
    return total


def flatten_rows(rows: Sequence[Sequence[T]]) -> tuple[list[T], int, int]:
    """
    Flatten nested rows into row-major order.

    Returns:
        (items, row_count, column_count)
    """
    if len(rows) == 0:
        raise InvalidSize("Invalid grid size: no rows")
    cols = len(rows[0])
    check_size(cols, len(rows))

    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Row size must match other rows\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns\n"
        raise RowSizeMismatch(error_msg.rstrip("\n"))

    items: list[T] = []
    for row in rows:
        items.extend(row)
    return items, len(rows), cols


def flat_items(items: Sequence[T], columns: int, rows: int) -> list[T]:
    """Copy of `items`, checked to fill a columns x rows grid exactly."""
    total = check_size(columns, rows)
    if len(items) != total:
        raise InvalidSize(
            f"Invalid grid size: {len(items)} items do not fill a {columns}x{rows} grid"
        )
    return list(items)


def repeat_pattern(pattern: Sequence[T], row_count: int) -> list[T]:
    """One row repeated `row_count` times. Each cell gets its own shallow copy."""
    if len(pattern) == 0 or row_count < 1:
        raise InvalidSize(f"Invalid grid size: {len(pattern)} columns x {row_count} rows")
    check_size(len(pattern), row_count)
    return [copy.copy(v) for _ in range(row_count) for v in pattern]


def fill(columns: int, rows: int, value: T) -> list[T]:
    """`value` in every cell, shallow-copied per cell so cells stay independent."""
    return [copy.copy(value) for _ in range(check_size(columns, rows))]
