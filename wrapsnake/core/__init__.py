"""
Core abstractions for wrapsnake.

Provides the interfaces the game engine and renderers implement.
"""

from .game_interface import GameInterface, GameMetadata
from .renderer_interface import RendererInterface

__all__ = [
    'GameInterface',
    'GameMetadata',
    'RendererInterface',
]
