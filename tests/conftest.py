"""
Pytest configuration and fixtures for wrapsnake tests.

This module sets up pygame mocking to allow testing rendering and the
play script without requiring a display or actual pygame initialization.
"""

import sys
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))


def create_mock_pygame():
    """Create a mock of the parts of pygame the game uses."""
    mock_pygame = MagicMock()

    # Basic initialization
    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Display
    mock_surface = MagicMock()
    mock_surface.get_width.return_value = 500
    mock_surface.get_height.return_value = 540
    mock_surface.fill.return_value = None
    mock_surface.blit.return_value = None
    mock_pygame.display.set_mode.return_value = mock_surface
    mock_pygame.display.set_caption.return_value = None
    mock_pygame.display.flip.return_value = None

    # Fonts
    mock_font = MagicMock()
    mock_font.render.return_value = MagicMock()  # Returns a surface
    mock_pygame.font.Font.return_value = mock_font

    # Drawing
    mock_pygame.draw.rect.return_value = None
    mock_pygame.draw.line.return_value = None

    # Events
    mock_pygame.event.get.return_value = []

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_UP = 273
    mock_pygame.K_DOWN = 274
    mock_pygame.K_LEFT = 276
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_w = 119
    mock_pygame.K_a = 97
    mock_pygame.K_s = 115
    mock_pygame.K_d = 100
    mock_pygame.K_r = 114
    mock_pygame.K_SPACE = 32

    # Time
    mock_clock = MagicMock()
    mock_clock.tick.return_value = 16  # ~60fps
    mock_pygame.time.Clock.return_value = mock_clock

    # Rect
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: MagicMock(
        x=args[0] if args else 0,
        y=args[1] if len(args) > 1 else 0,
        width=args[2] if len(args) > 2 else 0,
        height=args[3] if len(args) > 3 else 0,
    ))

    mock_pygame.Surface.return_value = mock_surface

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    This runs automatically for all tests and ensures pygame
    is mocked before any rendering modules are imported.
    """
    mock_pygame = create_mock_pygame()

    # Store original module if it exists
    original_pygame = sys.modules.get('pygame')

    # Install mock
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    # Restore original (or remove mock)
    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


@pytest.fixture
def mock_screen(mock_pygame_module):
    """Provide a mock pygame screen surface."""
    screen = MagicMock()
    screen.fill.return_value = None
    screen.blit.return_value = None
    return screen


@pytest.fixture
def make_game():
    """
    Factory for games with a staged snake and food.

    Food defaults to a far corner cell so it does not interfere
    with the moves a test makes.
    """
    from wrapsnake.game.snake_game import GameState, Direction, Cell

    def make(head=(3, 3), tail=((3, 4), (3, 5), (3, 6), (3, 7), (3, 8)),
             direction=Direction.UP, food=(10, 10), grid_size=10, seed=0):
        game = GameState(
            grid_size=grid_size,
            initial_head=head,
            initial_tail=tail,
            initial_direction=direction,
            seed=seed,
        )
        if food is not None:
            game.food = Cell(*food)
        return game

    return make


@pytest.fixture
def fake_clock():
    """A settable monotonic clock: call .advance(seconds) to move time."""
    class FakeClock:
        def __init__(self):
            self.now = 0.0

        def __call__(self):
            return self.now

        def advance(self, seconds):
            self.now += seconds

    return FakeClock()


def replay_frame(score=0, tick=0, head=(3, 3)):
    """A replay frame dict in Snapshot.to_dict() form."""
    return {
        "head": {"x": head[0], "y": head[1]},
        "tail": [{"x": 3, "y": 4}, {"x": 3, "y": 5}],
        "food": {"x": 7, "y": 7},
        "direction": 3,
        "pending_direction": 3,
        "growth_pending": 0,
        "grid_size": 10,
        "tick": tick,
        "score": score,
    }


@pytest.fixture
def temp_replays_dir(tmp_path):
    """Create a temporary replays directory with two sample replays."""
    replays_dir = tmp_path / "replays"
    replays_dir.mkdir(parents=True)

    for score, ticks, saved_at in [(5, 40, "20241201_120000"), (9, 80, "20241202_130000")]:
        replay_data = {
            "saved_at": saved_at,
            "frames": [replay_frame(), replay_frame(score, ticks)],
        }
        (replays_dir / f"replay_t{ticks}_score{score}_{saved_at}.json").write_text(
            json.dumps(replay_data)
        )

    return replays_dir


@pytest.fixture
def make_frame():
    """Factory for replay frame dicts."""
    return replay_frame
