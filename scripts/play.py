#!/usr/bin/env python3
"""
wrapsnake - Play Script

Play Snake on a wrap-around board.

Controls:
    Arrow Keys or WASD: Move the snake
    R: Restart game
    ESC: Quit

Usage:
    python scripts/play.py
    python scripts/play.py --size 15 --tick 0.15
    python scripts/play.py --record
"""
import sys
import os
import argparse
import warnings
from pathlib import Path
from typing import Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Suppress pygame messages
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
warnings.filterwarnings('ignore', category=UserWarning, module='pygame')

import pygame

from wrapsnake.game.snake_game import GameState, Direction
from wrapsnake.game.session import GameSession
from wrapsnake.game.renderer import StandaloneRenderer
from wrapsnake.utils.config_loader import load_config, Config
from wrapsnake.visualization.replay_player import ReplayManager


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="wrapsnake - Snake on a wrap-around board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/play.py                       # Default 10x10 board
  python scripts/play.py --size 15 --tick 0.15 # Bigger, faster
  python scripts/play.py --record              # Save a replay of each game
"""
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="Path to config file (default: config.yaml)"
    )
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Board size in cells (overrides config)"
    )
    parser.add_argument(
        "--tick",
        type=float,
        default=None,
        help="Seconds between moves (overrides config)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for food placement"
    )
    parser.add_argument(
        "--record",
        action="store_true",
        help="Save a replay when a game ends"
    )
    parser.add_argument(
        "--end-on-collision",
        action="store_true",
        help="End the game when the snake runs into its tail"
    )

    return parser.parse_args(argv)


def apply_overrides(config: Config, args) -> Config:
    """Apply command line overrides to a loaded config."""
    if args.size is not None:
        config.game.grid_size = args.size
    if args.tick is not None:
        config.game.tick_interval = args.tick
    if args.seed is not None:
        config.game.seed = args.seed
    if args.record:
        config.replay.enabled = True
    if args.end_on_collision:
        config.game.end_on_collision = True
    config.game.validate()
    return config


def key_to_direction(key: int) -> Optional[Direction]:
    """Map a pygame key code to a direction."""
    if key in (pygame.K_UP, pygame.K_w):
        return Direction.UP
    if key in (pygame.K_DOWN, pygame.K_s):
        return Direction.DOWN
    if key in (pygame.K_LEFT, pygame.K_a):
        return Direction.LEFT
    if key in (pygame.K_RIGHT, pygame.K_d):
        return Direction.RIGHT
    return None


def handle_key(session: GameSession, key: int) -> bool:
    """
    React to a key press.

    Returns:
        False if the player asked to quit, True otherwise
    """
    if key == pygame.K_ESCAPE:
        return False

    if key == pygame.K_r:
        session.restart()
        return True

    direction = key_to_direction(key)
    if direction is not None:
        session.request_direction(direction)
    return True


def status_line(session: GameSession) -> str:
    """Text shown under the board."""
    snap = session.snapshot()
    if session.game_over:
        return f"GAME OVER - Score: {snap.score} - Press R to restart"
    return f"Score: {snap.score}  Length: {snap.length}"


def save_recording(session: GameSession, replays: Optional[ReplayManager]):
    """Save the recorded frames of the current game, if any."""
    if replays is None:
        return
    frames = session.game.stop_recording()
    if len(frames) > 1:
        path = replays.save_replay(frames)
        print(f"[Replay] Saved {path}")


def play(config: Config):
    """Run the game loop until the window is closed."""
    game = GameState.from_config(config.game)
    session = GameSession(
        game,
        tick_interval=config.game.tick_interval,
        end_on_collision=config.game.end_on_collision,
    )

    replays = None
    if config.replay.enabled:
        replays = ReplayManager(config.replay.save_dir, config.replay.max_replays)
        game.start_recording()

    renderer = StandaloneRenderer(
        grid_size=config.game.grid_size,
        cell_size=config.render.cell_size,
        title=config.render.title,
    )
    clock = pygame.time.Clock()

    print("\n" + "=" * 50)
    print("wrapsnake")
    print("=" * 50)
    print("Controls:")
    print("  Arrow Keys / WASD: Move")
    print("  R: Restart")
    print("  ESC: Quit")
    print("=" * 50 + "\n")

    high_score = 0
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r:
                    save_recording(session, replays)
                running = handle_key(session, event.key)
                if event.key == pygame.K_r and replays is not None:
                    game.start_recording()

        was_over = session.game_over
        session.update()
        if session.game_over and not was_over:
            print(f"[Game] Game over! Score: {game.score}")

        high_score = max(high_score, game.score)
        renderer.render_frame(session.snapshot(), status_line(session))
        clock.tick(config.render.fps)

    save_recording(session, replays)
    renderer.close()
    print(f"\n[Game] High Score: {high_score}")


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    config = apply_overrides(load_config(args.config), args)
    play(config)


if __name__ == "__main__":
    main()
