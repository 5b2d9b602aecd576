"""
Abstract renderer interface for wrapsnake.

Renderers turn a game Snapshot into pixels or text.
"""

from abc import ABC, abstractmethod
from typing import Any, Tuple


class RendererInterface(ABC):
    """
    Abstract renderer for game visualization.

    Renderers only read snapshots; they never mutate the game.
    """

    @abstractmethod
    def render(self, snapshot: Any, surface: Any = None) -> Any:
        """
        Render a snapshot.

        Args:
            snapshot: Snapshot from GameState.snapshot()
            surface: Target to draw on (pygame surface, rich console, ...)

        Returns:
            Whatever was drawn to
        """
        pass

    @abstractmethod
    def get_preferred_size(self, grid_size: int) -> Tuple[int, int]:
        """
        Get the preferred render size for a board.

        Args:
            grid_size: Board size in cells

        Returns:
            Tuple of (width, height) in the renderer's units
        """
        pass
