"""
Game Session - Drives a GameState from a frame loop.

The session is the glue between the shell (window, keyboard, frame clock)
and the engine. It filters reversed direction intents, advances the game
once per tick interval and can optionally end the game when the snake
runs into its own tail.
"""
import time
from typing import Callable, Optional

from .snake_game import GameState, Direction, Snapshot


class TickClock:
    """
    Fixed-interval tick source.

    due() is polled every frame and reports True once the configured
    interval has been exceeded since the last tick.
    """

    def __init__(self, interval: float = 0.25, clock: Callable[[], float] = time.monotonic):
        """
        Initialize the clock.

        Args:
            interval: Seconds between ticks
            clock: Monotonic time source in seconds
        """
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        self.interval = interval
        self._clock = clock
        self._last = clock()

    def due(self) -> bool:
        """Check for an elapsed tick, restarting the interval if one is due."""
        now = self._clock()
        if now - self._last > self.interval:
            self._last = now
            return True
        return False

    def elapsed(self) -> float:
        """Seconds since the last tick."""
        return self._clock() - self._last

    def reset(self):
        self._last = self._clock()


class GameSession:
    """
    One interactive game: a GameState plus its tick clock.

    The engine itself never ends the game. With end_on_collision the
    session treats any self-collision as game over; the tail is still
    truncated by the engine so the final frame shows the cut.
    """

    def __init__(
        self,
        game: GameState,
        tick_interval: float = 0.25,
        clock: Callable[[], float] = time.monotonic,
        end_on_collision: bool = False,
    ):
        """
        Initialize the session.

        Args:
            game: The game to drive
            tick_interval: Seconds between ticks
            clock: Monotonic time source in seconds
            end_on_collision: Stop the game on the first self-collision
        """
        self.game = game
        self.clock = TickClock(tick_interval, clock)
        self.end_on_collision = end_on_collision
        self.game_over = False

    def request_direction(self, direction: Direction) -> bool:
        """
        Forward a key press to the game.

        Reversals of the last committed direction are dropped here
        before the game sees them.

        Returns:
            True if the game accepted the direction
        """
        if self.game_over:
            return False
        if direction == self.game.direction.opposite:
            return False
        return self.game.submit_direction(direction)

    def update(self) -> bool:
        """
        Advance the game if a tick is due.

        Returns:
            True if the game advanced this call
        """
        if self.game_over or not self.clock.due():
            return False

        self.game.advance()

        if (
            self.end_on_collision
            and self.game.last_collision_index is not None
        ):
            self.game_over = True

        return True

    def restart(self) -> Snapshot:
        """Reset the game and the tick clock."""
        self.game_over = False
        self.clock.reset()
        return self.game.reset()

    def snapshot(self) -> Snapshot:
        return self.game.snapshot()

    @property
    def collision(self) -> Optional[int]:
        """Tail index hit on the last tick, if any."""
        return self.game.last_collision_index
