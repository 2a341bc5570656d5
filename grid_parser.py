"""
Grid parsing utilities for neighborgrid.

Provides two parsing formats:
1. Standard format with spaces and explicit markers
2. Concise format with single-character cells
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from grid_types import GridOptions, InvalidSize, RowSizeMismatch
from neighborgrid import Grid

logger = logging.getLogger(__name__)

__all__ = ["parse_grid", "parse_grid_concise", "parse_grids"]

EMPTY_MARKER = "_"

Convert = Callable[[str], Any]


def _convert_cell(
    cell_str: str, convert: Convert, row_idx: int, col_idx: int, row_str: str
) -> Any:
    if not cell_str or cell_str == EMPTY_MARKER:
        return None
    try:
        return convert(cell_str)
    except ValueError as exc:
        error_msg = (
            f"Invalid cell string: '{cell_str}'\n"
            f"  Row {row_idx}: \"{row_str}\"\n"
            f"  Position: column {col_idx}\n"
            f"  Conversion failed: {exc}"
        )
        raise ValueError(error_msg) from exc


def _split_rows(definition: str) -> list[str]:
    if not definition.strip():
        raise InvalidSize("Invalid grid size: empty grid definition")
    return definition.strip().split("|")


def _check_rows(rows: list[list[Any]], row_strings: list[str]) -> None:
    cols = len(rows[0])
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{row_strings[row_idx]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise RowSizeMismatch(error_msg)


def parse_grid(
    definition: str, options: GridOptions | None = None, convert: Convert = int
) -> Grid[Any]:
    """
    Parse a grid from a compact string format.

    Format:
    - Rows separated by |
    - Cells separated by single spaces
    - Underscore only (_): empty cell (None)
    - Empty string (from multiple adjacent spaces): empty cell (None)
    - Anything else is passed through `convert` (int by default)

    Example:
        "1 2 3|4 _ 6" creates a 3x2 grid [1, 2, 3, 4, None, 6]

    Args:
        definition: The grid definition
        options: Options for the resulting grid
        convert: Conversion applied to each non-empty cell string

    Returns:
        The parsed grid
    """
    row_strings = _split_rows(definition)
    rows: list[list[Any]] = []

    for row_idx, row_str in enumerate(row_strings):
        # Multiple spaces = multiple empty cells
        cell_strings = row_str.split(" ")
        rows.append(
            [
                _convert_cell(cell_str, convert, row_idx, col_idx, row_str)
                for col_idx, cell_str in enumerate(cell_strings)
            ]
        )

    _check_rows(rows, row_strings)
    grid = Grid.from_rows(rows, options)
    logger.debug("Parsed %dx%d grid", grid.cols, grid.rows)
    return grid


def parse_grid_concise(
    definition: str, options: GridOptions | None = None, convert: Convert = int
) -> Grid[Any]:
    """
    Parse a grid where every character is one cell.

    Format:
    - Rows separated by |
    - Underscore (_): empty cell (None)
    - Any other character is passed through `convert` (int by default)
    - Surrounding whitespace is ignored

    Example:
        "12_|456" creates a 3x2 grid [1, 2, None, 4, 5, 6]
    """
    row_strings = [row.strip() for row in _split_rows(definition)]
    rows = [
        [
            _convert_cell(char, convert, row_idx, col_idx, row_str)
            for col_idx, char in enumerate(row_str)
        ]
        for row_idx, row_str in enumerate(row_strings)
    ]
    _check_rows(rows, row_strings)
    return Grid.from_rows(rows, options)


def parse_grids(
    definitions: dict[str, str], options: GridOptions | None = None, convert: Convert = int
) -> dict[str, Grid[Any]]:
    """
    Parse several named grids in the standard format.

    Args:
        definitions: Dict mapping a grid name to its definition

    Returns:
        Dict mapping each name to its parsed grid
    """
    store: dict[str, Grid[Any]] = {}
    for name, definition in definitions.items():
        try:
            store[name] = parse_grid(definition, options, convert)
        except RowSizeMismatch as exc:
            raise RowSizeMismatch(f"In grid '{name}': {exc}") from exc
    return store
