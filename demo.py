"""
Demonstration scripts for the neighborgrid system.

Usage: python demo.py [life|sudoku]
"""

from __future__ import annotations

import logging
import sys

from ascii_render import render_grid
from coords import Index
from grid_parser import parse_grid_concise
from grid_types import GridOptions, Origin
from neighborgrid import Grid

logger = logging.getLogger(__name__)

ALIVE = 1
DEAD = 0

# Conway's glider, placed so it travels down and to the right
GLIDER = "01000|00110|01100|00000|00000"

SUDOKU_ROWS = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

SUDOKU_OPTIONS = GridOptions(origin=Origin.UPPER_LEFT, inverted_y=True, neighbor_ybased=False)


# =============================================================================
# Game of Life
# =============================================================================


def life_grid(definition: str = GLIDER) -> Grid[int]:
    """A toroidal life board from a concise 0/1 definition."""
    return parse_grid_concise(definition, GridOptions(wrap_x=True, wrap_y=True))


def next_generation(grid: Grid[int]) -> None:
    """Advance `grid` one generation in place."""
    next_stage = []
    for offset, state in grid.indexed():
        count = sum(1 for cell in grid.all_around_neighbors(offset) if cell == ALIVE)
        match state:
            case 0 if count == 3:
                next_stage.append(ALIVE)
            case 1 if count in (2, 3):
                next_stage.append(ALIVE)
            case _:
                next_stage.append(DEAD)

    for cell, state in zip(grid.iter_mut(), next_stage):
        cell.value = state


# =============================================================================
# Sudoku
# =============================================================================


def sudoku_grid() -> Grid[int]:
    return Grid.from_rows(SUDOKU_ROWS, SUDOKU_OPTIONS)


def can_place(grid: Grid[int], index: Index, number: int) -> bool:
    """
    Whether `number` may go at `index`: it must not already appear in the
    cell's row, column or 3x3 box.
    """
    checks = [
        ("row", grid.row_iter(index)),
        ("col", grid.col_iter(index)),
        ("3x3 box", grid.nrant_iter(3, index)),
    ]
    for name, cells in checks:
        for i, value in enumerate(cells):
            if value == number:
                logger.info("Cannot place a %d in the %s of %s: it is cell #%d", number, name, index, i)
                return False
    return True


# =============================================================================
# Entry Point
# =============================================================================


def demo_life(generations: int = 4) -> None:
    grid = life_grid()
    print(render_grid(grid, cell_width=2, title="gen 1"))
    for gen in range(2, generations + 1):
        next_generation(grid)
        print(render_grid(grid, cell_width=2, title=f"gen {gen}"))


def demo_sudoku() -> None:
    grid = sudoku_grid()
    print(render_grid(grid, highlight=(1, 1), divisor=3, title="sudoku"))
    for number in (8, 4):
        verdict = "can" if can_place(grid, (1, 1), number) else "cannot"
        print(f"We {verdict} place {number} at (1, 1)")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    demos = {"life": demo_life, "sudoku": demo_sudoku}
    selected = sys.argv[1:] or list(demos)
    for name in selected:
        if name not in demos:
            print(f"Unknown demo: {name}")
            print(f"Available demos: {', '.join(demos)}")
            sys.exit(1)
        print("=" * 40)
        print(f"{name}:")
        print("=" * 40)
        demos[name]()
        print()


if __name__ == "__main__":
    main()
