"""
Snake Game Core - Pure game logic without rendering.

The snake lives on a toroidal N x N grid with 1-based coordinates.
Leaving one edge re-enters from the opposite edge, and running into
the tail shortens the snake instead of ending the game.
"""
from dataclasses import dataclass
from typing import List, Tuple, Optional, Dict, Any, Iterator, Sequence
from enum import IntEnum
import random

import numpy as np

from ..core.game_interface import GameInterface, GameMetadata


class Direction(IntEnum):
    """Snake movement directions."""
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    @property
    def delta(self) -> Tuple[int, int]:
        """(dx, dy) applied to the head for one tick. y grows downwards."""
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """
        Parse a direction name such as "up" or "Left".

        Raises:
            ValueError: If the name is not one of the four directions
        """
        try:
            return cls[name.strip().upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unknown direction: {name!r}") from None


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Cell:
    """A cell on the game grid (1-based)."""
    x: int
    y: int

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, int]) -> "Cell":
        return cls(int(data["x"]), int(data["y"]))


# Occupancy codes used by Snapshot.to_grid()
EMPTY = 0
FOOD = 1
TAIL = 2
HEAD = 3


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the game handed to renderers and replays."""
    head: Cell
    tail: Tuple[Cell, ...]
    food: Optional[Cell]
    direction: Direction
    pending_direction: Direction
    growth_pending: int
    grid_size: int
    tick: int = 0
    score: int = 0

    @property
    def length(self) -> int:
        """Total snake length including the head."""
        return 1 + len(self.tail)

    def cells(self) -> Iterator[Cell]:
        """Iterate over the snake, head first."""
        yield self.head
        yield from self.tail

    def to_grid(self) -> np.ndarray:
        """
        Encode the board as an occupancy grid.

        Returns:
            int8 array of shape (grid_size, grid_size) indexed [y - 1, x - 1]
        """
        grid = np.zeros((self.grid_size, self.grid_size), dtype=np.int8)
        if self.food is not None:
            grid[self.food.y - 1, self.food.x - 1] = FOOD
        for cell in self.tail:
            grid[cell.y - 1, cell.x - 1] = TAIL
        grid[self.head.y - 1, self.head.x - 1] = HEAD
        return grid

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "head": self.head.to_dict(),
            "tail": [c.to_dict() for c in self.tail],
            "food": self.food.to_dict() if self.food is not None else None,
            "direction": int(self.direction),
            "pending_direction": int(self.pending_direction),
            "growth_pending": self.growth_pending,
            "grid_size": self.grid_size,
            "tick": self.tick,
            "score": self.score,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Snapshot":
        """Create from dictionary (e.g. a replay frame)."""
        food = data.get("food")
        direction = Direction(data.get("direction", Direction.UP))
        return cls(
            head=Cell.from_dict(data["head"]),
            tail=tuple(Cell.from_dict(c) for c in data.get("tail", [])),
            food=Cell.from_dict(food) if food is not None else None,
            direction=direction,
            pending_direction=Direction(data.get("pending_direction", direction)),
            growth_pending=data.get("growth_pending", 0),
            grid_size=data["grid_size"],
            tick=data.get("tick", 0),
            score=data.get("score", 0),
        )


DEFAULT_HEAD = (3, 3)
DEFAULT_TAIL = ((3, 4), (3, 5), (3, 6), (3, 7), (3, 8))


class GameState(GameInterface):
    """
    Core Snake game logic.

    One call to advance() moves the snake by one cell. Food eaten on a
    tick makes the tail grow on the following tick. Moving the head onto
    the tail cuts the tail off at that point.
    """

    def __init__(
        self,
        grid_size: int = 10,
        initial_head: Sequence[int] = DEFAULT_HEAD,
        initial_tail: Sequence[Sequence[int]] = DEFAULT_TAIL,
        initial_direction: Direction = Direction.UP,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        max_food_attempts: Optional[int] = None,
    ):
        """
        Initialize the game.

        Args:
            grid_size: Board size N (the board is N x N)
            initial_head: (x, y) of the head at start
            initial_tail: Tail cells at start, head-adjacent first
            initial_direction: Direction the snake starts moving in
            seed: Seed for food placement (ignored if rng is given)
            rng: Random generator used for food placement
            max_food_attempts: Random draws before falling back to picking
                among the free cells (defaults to grid_size ** 2)

        Raises:
            ValueError: If the initial shape does not fit the grid
        """
        if grid_size < 2:
            raise ValueError(f"grid_size must be at least 2, got {grid_size}")

        self.grid_size = grid_size
        self.rng = rng if rng is not None else random.Random(seed)
        self.max_food_attempts = max_food_attempts or grid_size * grid_size

        self._initial_head = Cell(*initial_head)
        self._initial_tail = [Cell(*c) for c in initial_tail]
        self._initial_direction = Direction(initial_direction)
        self._validate_shape()

        # Game state (initialized in reset)
        self.head: Cell = self._initial_head
        self.tail: List[Cell] = []
        self.direction: Direction = self._initial_direction
        self.pending_direction: Direction = self._initial_direction
        self.growth_pending: int = 0
        self.food: Optional[Cell] = None
        self.score: int = 0
        self.tick: int = 0
        self.last_collision_index: Optional[int] = None

        # For replay recording
        self.history: List[Snapshot] = []
        self.recording: bool = False

        self.reset()

    @classmethod
    def from_config(cls, config, rng: Optional[random.Random] = None) -> "GameState":
        """
        Build a game from a GameConfig.

        Args:
            config: GameConfig instance (see utils.config_loader)
            rng: Optional random generator overriding config.seed
        """
        config.validate()
        return cls(
            grid_size=config.grid_size,
            initial_head=config.initial_head,
            initial_tail=config.initial_tail,
            initial_direction=Direction.from_name(config.initial_direction),
            seed=config.seed,
            rng=rng,
            max_food_attempts=config.max_food_attempts,
        )

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        return GameMetadata(
            name="Snake",
            id="snake",
            description="Eat food and grow on a wrap-around board",
        )

    def _validate_shape(self):
        """Check the initial snake against the grid."""
        cells = [self._initial_head] + self._initial_tail
        for cell in cells:
            if not self.in_bounds(cell):
                raise ValueError(
                    f"Initial cell ({cell.x}, {cell.y}) is outside the "
                    f"{self.grid_size}x{self.grid_size} grid"
                )
        if len(set(cells)) != len(cells):
            raise ValueError("Initial snake cells must be distinct")

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a cell lies on the board."""
        return 1 <= cell.x <= self.grid_size and 1 <= cell.y <= self.grid_size

    def reset(self) -> Snapshot:
        """
        Restore the initial snake and place new food.

        Returns:
            Snapshot of the initial state
        """
        self.head = self._initial_head
        self.tail = list(self._initial_tail)
        self.direction = self._initial_direction
        self.pending_direction = self._initial_direction
        self.growth_pending = 0
        self.score = 0
        self.tick = 0
        self.last_collision_index = None

        self._place_food()

        # Reset history if recording
        self.history = []
        if self.recording:
            self._record_frame()

        return self.snapshot()

    def start_recording(self):
        """Start recording game history for replay."""
        self.recording = True
        self.history = []
        self._record_frame()

    def stop_recording(self) -> List[Snapshot]:
        """Stop recording and return the recorded snapshots."""
        self.recording = False
        return self.history

    def _record_frame(self):
        """Record the current frame to history."""
        self.history.append(self.snapshot())

    def submit_direction(self, direction: Direction) -> bool:
        """
        Request a direction for the next tick.

        A request that reverses the current direction is dropped.
        The last accepted request before advance() wins.

        Returns:
            True if the request was accepted
        """
        direction = Direction(direction)
        if direction == self.direction.opposite:
            return False
        self.pending_direction = direction
        return True

    def advance(self) -> None:
        """Execute one game tick."""
        # Growth keeps the last tail cell for one tick
        delta = 1
        if self.growth_pending > 0:
            delta = 0
            self.growth_pending -= 1

        tail = [self.head] + self.tail
        if delta:
            tail.pop()
        self.tail = tail

        self.direction = self.pending_direction

        dx, dy = self.direction.delta
        self.head = Cell(
            self._wrap(self.head.x + dx),
            self._wrap(self.head.y + dy),
        )

        if self.food is not None and self.head == self.food:
            self.growth_pending += 1
            self.score += 1
            self._place_food()

        self.last_collision_index = None
        for i, cell in enumerate(self.tail):
            if cell == self.head:
                self.tail = self.tail[:i]
                self.last_collision_index = i
                break

        # Board was full last time; a collision may have freed a cell
        if self.food is None:
            self._place_food()

        self.tick += 1

        if self.recording:
            self._record_frame()

    def _wrap(self, value: int) -> int:
        if value > self.grid_size:
            return 1
        if value < 1:
            return self.grid_size
        return value

    def _place_food(self):
        """Place food at a random cell not occupied by the snake."""
        occupied = set(self.tail)
        occupied.add(self.head)

        attempts = 0
        while attempts < self.max_food_attempts:
            food = Cell(
                self.rng.randint(1, self.grid_size),
                self.rng.randint(1, self.grid_size),
            )
            if food not in occupied:
                self.food = food
                return
            attempts += 1

        # Fallback: pick uniformly among the free cells (board is crowded)
        free = np.ones((self.grid_size, self.grid_size), dtype=bool)
        for cell in occupied:
            free[cell.y - 1, cell.x - 1] = False
        free_indices = np.flatnonzero(free)

        if free_indices.size == 0:
            self.food = None
            return

        index = int(free_indices[self.rng.randrange(free_indices.size)])
        y, x = divmod(index, self.grid_size)
        self.food = Cell(x + 1, y + 1)

    def is_occupied(self, cell: Cell) -> bool:
        """Check whether the snake covers a cell."""
        return cell == self.head or cell in self.tail

    def snapshot(self) -> Snapshot:
        """
        Get an immutable view of the current state for rendering.

        Returns:
            Snapshot of head, tail, food and counters
        """
        return Snapshot(
            head=self.head,
            tail=tuple(self.tail),
            food=self.food,
            direction=self.direction,
            pending_direction=self.pending_direction,
            growth_pending=self.growth_pending,
            grid_size=self.grid_size,
            tick=self.tick,
            score=self.score,
        )

    def get_state(self) -> Dict[str, Any]:
        """
        Get current game state as a dictionary.

        Returns:
            Dictionary containing full game state
        """
        state = self.snapshot().to_dict()
        state["game_over"] = False
        return state

    @property
    def length(self) -> int:
        return 1 + len(self.tail)
