"""
Terminal Renderer - Rich-based text view of the board.

Used by the replay viewer and handy for watching a game over SSH.
"""
from typing import Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..core.renderer_interface import RendererInterface
from .snake_game import Snapshot, EMPTY, FOOD, TAIL, HEAD


# glyph, style
GLYPHS = {
    EMPTY: ("·", "dim"),
    FOOD: ("*", "bold green"),
    TAIL: ("o", "blue"),
    HEAD: ("@", "bold red"),
}


class TerminalRenderer(RendererInterface):
    """Draws snapshots as a character grid inside a rich Panel."""

    def __init__(self, console: Optional[Console] = None, title: str = "Snake"):
        self.console = console or Console()
        self.title = title

    def get_preferred_size(self, grid_size: int) -> Tuple[int, int]:
        # Board only: a glyph plus a space per cell, border and padding around it.
        # Rows: board, blank line, status line, top and bottom border.
        return (grid_size * 2 + 4, grid_size + 4)

    def build(self, snapshot: Snapshot) -> Panel:
        """Build the renderable for a snapshot."""
        grid = snapshot.to_grid()
        board = Text()
        for row in grid:
            for value in row:
                glyph, style = GLYPHS[int(value)]
                board.append(glyph + " ", style=style)
            board.append("\n")

        board.append(
            f"\ntick {snapshot.tick}  length {snapshot.length}  "
            f"score {snapshot.score}  {snapshot.direction.name.lower()}",
            style="bold",
        )
        return Panel(board, title=self.title, expand=False)

    def render(self, snapshot: Snapshot, surface: Optional[Console] = None) -> Console:
        """
        Print a snapshot.

        Args:
            snapshot: Game snapshot
            surface: Console to print to (defaults to this renderer's console)

        Returns:
            The console that was printed to
        """
        target = surface or self.console
        target.print(self.build(snapshot))
        return target
