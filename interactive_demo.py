"""
Interactive explorer for neighborgrid coordinates.
Display a grid with a cursor and move it with keyboard commands, showing how
origin, inversion, wrapping and region division change what the cursor sees.
"""

from __future__ import annotations

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_grid, render_neighbors
from coords import Coordinates
from grid_parser import parse_grid
from grid_types import Direction, GridError, GridOptions, Origin
from neighborgrid import Grid

logger = logging.getLogger(__name__)

MOVES = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}

ORIGIN_CYCLE = list(Origin)


class InteractiveDemo:
    """Interactive explorer for one grid."""

    def __init__(self, grid: Grid, divisor: int = 2) -> None:
        self.grid = grid
        self.original_grid = grid.copy()  # Keep a copy of the original state
        self.cursor = 0
        self.divisor = divisor
        self.console = Console()
        self.status_message = "Ready"

    @property
    def options(self) -> GridOptions:
        return self.grid.options

    def generate_display(self) -> Panel:
        """Generate the current display with grid and status."""
        grid_text = render_grid(
            self.grid, highlight=self.cursor, show_neighbors=True, divisor=self.divisor
        )

        status = Text()
        status.append("Options: ", style="bold")
        status.append(
            f"origin={self.options.origin.value} inverted_y={self.options.inverted_y} "
            f"wrap_x={self.options.wrap_x} wrap_y={self.options.wrap_y}\n"
        )
        status.append("Cursor: ", style="bold")
        status.append(f"{self.grid.coords_of(self.cursor, Coordinates)} (offset {self.cursor})\n")
        status.append("Value: ", style="bold")
        status.append(f"{self.grid[self.cursor]}\n")
        status.append("Region: ", style="bold")
        status.append(f"{self.grid.nrant(self.cursor, self.divisor)} of {self.divisor}x{self.divisor}\n")
        status.append(
            f"x range: {self.grid.min_x}..{self.grid.max_x}  "
            f"y range: {self.grid.min_y}..{self.grid.max_y}\n\n"
        )

        # Convert ANSI-colored grid text to Rich Text properly
        status.append(Text.from_ansi(grid_text))
        status.append("\n\n")
        status.append("Neighbors:\n", style="bold")
        status.append(Text.from_ansi(render_neighbors(self.grid, self.cursor)))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  W/A/S/D - Move up/left/down/right\n")
        status.append("  X / Y - Toggle wrap on x / y\n")
        status.append("  I - Toggle inverted y\n")
        status.append("  O - Cycle origin\n")
        status.append("  + / - - Change region divisor\n")
        status.append("  R - Reset\n")
        status.append("  Q - Quit\n\n")

        # Status line at the bottom
        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="neighborgrid explorer", border_style="green", width=80)

    def move(self, direction: Direction) -> None:
        """Move the cursor to its neighbor in `direction`, if there is one."""
        target = self.grid.neighbor_index(self.cursor, direction)
        if target is None:
            self.status_message = f"✗ No neighbor {direction.value}"
            return
        self.cursor = target
        self.status_message = f"✓ Moved {direction.value} to {self.grid.coords_of(target)}"

    def change_options(self, **changes: object) -> None:
        """Re-address the grid with new options. The cursor keeps its cell."""
        try:
            self.grid = self.grid.with_options(self.options.with_changes(**changes))
        except GridError as exc:
            self.status_message = f"✗ {exc}"
            return
        self.status_message = f"Options changed: {changes}"

    def cycle_origin(self) -> None:
        position = ORIGIN_CYCLE.index(self.options.origin)
        for step in range(1, len(ORIGIN_CYCLE) + 1):
            origin = ORIGIN_CYCLE[(position + step) % len(ORIGIN_CYCLE)]
            # Center needs odd dimensions
            if origin is Origin.CENTER and (self.grid.rows % 2 == 0 or self.grid.cols % 2 == 0):
                continue
            self.change_options(origin=origin)
            return

    def change_divisor(self, delta: int) -> None:
        divisor = self.divisor + delta
        if not 1 <= divisor <= max(self.grid.rows, self.grid.cols):
            self.status_message = f"✗ Divisor {divisor} is out of range"
            return
        self.divisor = divisor
        self.status_message = f"Divisor is now {divisor}"

    def reset_grid(self) -> None:
        """Reset the grid to its original state."""
        self.grid = self.original_grid.copy()
        self.cursor = 0
        self.status_message = "Grid reset to original state"

    def handle_key(self, key: str) -> bool:
        """Apply one key press. Returns False when the explorer should stop."""
        key = key.lower()
        if key == "q":
            self.status_message = "Quitting..."
            return False
        if key in MOVES:
            self.move(MOVES[key])
        elif key == "x":
            self.change_options(wrap_x=not self.options.wrap_x)
        elif key == "y":
            self.change_options(wrap_y=not self.options.wrap_y)
        elif key == "i":
            self.change_options(inverted_y=not self.options.inverted_y)
        elif key == "o":
            self.cycle_origin()
        elif key == "+":
            self.change_divisor(1)
        elif key == "-":
            self.change_divisor(-1)
        elif key == "r":
            self.reset_grid()
        else:
            self.status_message = f"Unknown key: {repr(key)}"
        return True

    def run(self) -> None:
        """Run the explorer until Q is pressed."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    # Update display
                    live.update(self.generate_display())

                    # Get single key press
                    if not self.handle_key(readchar.readkey()):
                        live.update(self.generate_display())
                        break
            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


LAYOUTS = dict(
    numbers="0 1 2 3 4|5 6 7 8 9|10 11 12 13 14|15 16 17 18 19|20 21 22 23 24",
    wide="1 2 3 4 5 6 7|8 9 10 11 12 13 14|15 16 17 18 19 20 21",
    ragged="1 2 3 4|5 _ 7 8|9 10 11 12",
)


def main() -> None:
    """Run the explorer on a named layout (default: numbers)."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    name = sys.argv[1] if len(sys.argv) > 1 else "numbers"
    if name not in LAYOUTS:
        print(f"Unknown layout: {name}")
        print(f"Available layouts: {', '.join(LAYOUTS)}")
        sys.exit(1)
    demo = InteractiveDemo(parse_grid(LAYOUTS[name]))
    demo.run()


if __name__ == "__main__":
    main()
