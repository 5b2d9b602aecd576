"""
Snake Game Renderer - Pygame-based visualization.
"""
import pygame
from typing import Optional, Tuple

from ..core.renderer_interface import RendererInterface
from .snake_game import Cell, Snapshot


# Colors
BLACK = (0, 0, 0)
BACKGROUND_COLOR = (240, 248, 255)
GRID_COLOR = (0, 0, 0)
FOOD_COLOR = (0, 255, 0)
TAIL_COLOR = (0, 0, 255)
HEAD_COLOR = (255, 0, 0)
TEXT_COLOR = (220, 220, 220)


class GameRenderer(RendererInterface):
    """
    Renders the Snake game using Pygame.

    Can render to a surface (for embedding) or be subclassed to
    manage its own window (for standalone play).
    """

    def __init__(
        self,
        cell_size: int = 50,
        surface: Optional[pygame.Surface] = None,
        offset: Tuple[int, int] = (0, 0)
    ):
        """
        Initialize the renderer.

        Args:
            cell_size: Size of each grid cell in pixels
            surface: Optional surface to render to
            offset: (x, y) offset for rendering on the surface
        """
        self.cell_size = cell_size
        self.surface = surface
        self.offset_x, self.offset_y = offset

    def get_preferred_size(self, grid_size: int) -> Tuple[int, int]:
        """Get the pixel size needed for a grid_size x grid_size board."""
        return (grid_size * self.cell_size, grid_size * self.cell_size)

    def cell_rect(self, cell: Cell) -> Tuple[int, int, int, int]:
        """
        Map a 1-based grid cell to a screen rectangle.

        Returns:
            (left, top, width, height) in pixels
        """
        return (
            self.offset_x + (cell.x - 1) * self.cell_size,
            self.offset_y + (cell.y - 1) * self.cell_size,
            self.cell_size,
            self.cell_size,
        )

    def render(
        self,
        snapshot: Snapshot,
        surface: Optional[pygame.Surface] = None
    ) -> pygame.Surface:
        """
        Render a snapshot.

        Args:
            snapshot: Game snapshot
            surface: Optional surface to render to

        Returns:
            The surface that was rendered to
        """
        target = surface or self.surface

        if target is None:
            raise ValueError("No surface to render to")

        size = snapshot.grid_size
        board_px = size * self.cell_size

        # Draw background
        board_rect = pygame.Rect(self.offset_x, self.offset_y, board_px, board_px)
        pygame.draw.rect(target, BACKGROUND_COLOR, board_rect)

        if snapshot.food is not None:
            pygame.draw.rect(target, FOOD_COLOR, pygame.Rect(*self.cell_rect(snapshot.food)))

        for cell in snapshot.tail:
            pygame.draw.rect(target, TAIL_COLOR, pygame.Rect(*self.cell_rect(cell)))

        pygame.draw.rect(target, HEAD_COLOR, pygame.Rect(*self.cell_rect(snapshot.head)))

        # Grid lines go on top so cells stay separated
        for i in range(size + 1):
            x = self.offset_x + i * self.cell_size
            pygame.draw.line(target, GRID_COLOR, (x, self.offset_y), (x, self.offset_y + board_px))
            y = self.offset_y + i * self.cell_size
            pygame.draw.line(target, GRID_COLOR, (self.offset_x, y), (self.offset_x + board_px, y))

        return target


class StandaloneRenderer(GameRenderer):
    """
    Standalone game renderer with its own window.
    Used for human play mode.
    """

    def __init__(
        self,
        grid_size: int = 10,
        cell_size: int = 50,
        title: str = "Snake"
    ):
        """
        Initialize standalone renderer with its own window.

        Args:
            grid_size: Board size in cells
            cell_size: Size of each cell in pixels
            title: Window title
        """
        self.grid_size = grid_size

        # Room below the board for the status line
        status_height = 40
        window_width = grid_size * cell_size
        window_height = grid_size * cell_size + status_height

        pygame.init()
        surface = pygame.display.set_mode((window_width, window_height))
        pygame.display.set_caption(title)

        super().__init__(cell_size, surface, (0, 0))

        self.window_width = window_width
        self.window_height = window_height
        self.font = pygame.font.Font(None, 28)

    def render_frame(self, snapshot: Snapshot, status: str = "") -> None:
        """
        Draw one frame and flip the display.

        Args:
            snapshot: Current game snapshot
            status: Text shown under the board
        """
        self.surface.fill(BLACK)
        self.render(snapshot)

        if status:
            text = self.font.render(status, True, TEXT_COLOR)
            self.surface.blit(
                text,
                (self.window_width // 2 - text.get_width() // 2,
                 self.window_height - 30)
            )

        pygame.display.flip()

    def close(self):
        """Close the renderer and pygame."""
        pygame.quit()
