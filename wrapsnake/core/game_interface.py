"""
Abstract game interface for wrapsnake.

A game engine implements GameInterface and provides GameMetadata.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, List


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Snake")
    id: str                             # Unique identifier (e.g., "snake")
    description: str                    # Brief description for UI
    version: str = "1.0.0"              # Game version
    supports_human: bool = True         # Can humans play?


class GameInterface(ABC):
    """
    Abstract base class for tick-driven games.

    Games handle the core logic, rules, and state management.
    They know nothing about windows, keyboards or clocks; a shell
    calls advance() on a fixed interval and renders snapshot().
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def reset(self) -> Any:
        """
        Reset the game to initial state.

        Returns:
            Snapshot of the initial state
        """
        pass

    @abstractmethod
    def advance(self) -> None:
        """Execute exactly one game tick."""
        pass

    @abstractmethod
    def submit_direction(self, direction: Any) -> bool:
        """
        Record a movement intent for the next tick.

        Args:
            direction: The requested direction

        Returns:
            True if the intent was accepted, False if it was dropped
        """
        pass

    @abstractmethod
    def snapshot(self) -> Any:
        """
        Get an immutable view of the state for rendering.

        Returns:
            Snapshot object that shares no mutable storage with the game
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state as a plain dictionary.

        Returns:
            Dictionary containing all state needed for rendering
        """
        pass

    # Optional recording support
    def start_recording(self) -> None:
        """Start recording game frames for replay."""
        pass

    def stop_recording(self) -> List[Any]:
        """
        Stop recording and return recorded frames.

        Returns:
            List of snapshots, one per recorded tick
        """
        return []
