"""
ASCII rendering for neighborgrid grids.

Provides two renderers:
1. Box-drawn grid with optional region colouring and neighbor highlighting
2. Compact 3x3 block of a cell's all-around neighborhood
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from coords import Index
from grid_types import Direction
from neighborgrid import Grid

logger = logging.getLogger(__name__)

__all__ = ["cell_char", "render_grid", "render_neighbors"]

EMPTY_CHAR = "_"

# Palette for region colouring, cycled by region id
COLORS: list[Callable[[str], str]] = [
    chalk.red,
    chalk.green,
    chalk.yellow,
    chalk.blue,
    chalk.magenta,
    chalk.cyan,
    chalk.redBright,
    chalk.greenBright,
    chalk.yellowBright,
    chalk.blueBright,
]


def cell_char(value: Any) -> str:
    """Display text of one cell value."""
    return EMPTY_CHAR if value is None else str(value)


def _fit(text: str, cell_width: int) -> str:
    if cell_width == 1:
        return text[:1]
    return text[:cell_width].center(cell_width)


def _top_border(inner_width: int, title: str | None) -> str:
    if title is None:
        return "┌" + "─" * inner_width + "┐"
    label = f" {title} "
    if len(label) > inner_width:
        return "┌" + "─" * inner_width + "┐"
    # Center title in the border
    title_start = (inner_width - len(label)) // 2
    return "┌" + "─" * title_start + label + "─" * (inner_width - title_start - len(label)) + "┐"


def render_grid(
    grid: Grid[Any],
    cell_width: int = 3,
    highlight: Index | None = None,
    show_neighbors: bool = False,
    divisor: int | None = None,
    title: str | None = None,
) -> str:
    """
    Render a grid as a box-drawn character display.

    Rows are drawn in storage order, top storage row first, whatever the
    grid's origin.

    Args:
        grid: The grid to render
        cell_width: Characters per cell (default 3)
        highlight: Optional cell to highlight with a white background
        show_neighbors: Also mark the highlighted cell's 8 neighbors
        divisor: Colour cells by their region for this divisor
        title: Optional title centered in the top border

    Returns:
        The rendered grid with ANSI colour codes
    """
    highlight_offset = None
    if highlight is not None and grid.contains(highlight):
        highlight_offset = grid.index_of(highlight)

    neighbor_offsets: set[int] = set()
    if show_neighbors and highlight_offset is not None:
        for direction in Direction:
            offset = grid.neighbor_index(highlight_offset, direction)
            if offset is not None:
                neighbor_offsets.add(offset)

    inner_width = grid.cols * cell_width
    logger.debug(
        "render_grid: %dx%d cells, %d chars wide, divisor=%s", grid.cols, grid.rows, inner_width + 2, divisor
    )

    lines = [_top_border(inner_width, title)]
    for row_start in range(0, grid.size, grid.cols):
        line_parts = ["│"]
        for offset in range(row_start, row_start + grid.cols):
            content = _fit(cell_char(grid.items[offset]), cell_width)
            if offset == highlight_offset:
                content = chalk.bgWhite.black(content)
            elif offset in neighbor_offsets:
                content = chalk.bgBlue.white(content)
            elif divisor is not None:
                content = COLORS[grid.nrant(offset, divisor) % len(COLORS)](content)
            line_parts.append(content)
        line_parts.append("│")
        lines.append("".join(line_parts))
    lines.append("└" + "─" * inner_width + "┘")

    return "\n".join(lines)


def render_neighbors(grid: Grid[Any], index: Index, cell_width: int = 3) -> str:
    """
    Render the 3x3 neighborhood of a cell, in the caller's up/down sense:
    the top line holds upleft, up and upright.

    Raises:
        IndexOutOfBounds: if the location is not on the grid
    """
    around = grid.all_around_neighbors(index)
    center = chalk.bgWhite.black(_fit(cell_char(grid[index]), cell_width))
    rows: list[list[str]] = [
        [_fit(cell_char(v), cell_width) for v in (around.upleft, around.up, around.upright)],
        [_fit(cell_char(around.left), cell_width), center, _fit(cell_char(around.right), cell_width)],
        [_fit(cell_char(v), cell_width) for v in (around.downleft, around.down, around.downright)],
    ]
    return "\n".join("".join(row) for row in rows)
