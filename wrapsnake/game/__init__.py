"""
Snake game module.

Renderers are imported from their own modules so the engine can be
used without pygame or rich.
"""

from .snake_game import GameState, Direction, Cell, Snapshot
from .session import GameSession, TickClock

__all__ = [
    'GameState',
    'GameSession',
    'TickClock',
    'Direction',
    'Cell',
    'Snapshot',
]
