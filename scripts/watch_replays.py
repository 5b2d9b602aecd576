#!/usr/bin/env python3
"""
Watch Replays - Play back saved games in the terminal.

Usage:
    python scripts/watch_replays.py              # Watch all replays (best first)
    python scripts/watch_replays.py --latest     # Watch most recent replay
    python scripts/watch_replays.py --list       # List available replays
"""
import sys
import time
import argparse
from pathlib import Path
from typing import List

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rich.console import Console
from rich.live import Live

from wrapsnake.game.terminal_renderer import TerminalRenderer
from wrapsnake.visualization.replay_player import ReplayManager, ReplayData, LOAD_ERRORS
from wrapsnake.utils.config_loader import load_config


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Watch saved replays")

    parser.add_argument(
        "--list",
        action="store_true",
        help="List available replays and exit"
    )
    parser.add_argument(
        "--latest",
        action="store_true",
        help="Watch only the most recent replay"
    )
    parser.add_argument(
        "--best",
        action="store_true",
        help="Watch only the best (highest score) replay"
    )
    parser.add_argument(
        "--speed",
        type=int,
        default=None,
        help="Playback speed in frames per second (default: from config)"
    )
    parser.add_argument(
        "--replay",
        type=str,
        default=None,
        help="Path to specific replay file"
    )
    parser.add_argument(
        "--dir",
        type=str,
        default=None,
        help="Replay directory (default: from config)"
    )

    return parser.parse_args(argv)


def select_replays(manager: ReplayManager, args) -> List[str]:
    """Pick which replay files to play."""
    if args.replay:
        return [args.replay]

    if args.best:
        best = manager.get_best_replay()
        return [best] if best else []

    if args.latest:
        return manager.list_replays()[:1]

    return manager.ranked_replays()


def play_replay(replay: ReplayData, renderer: TerminalRenderer, fps: int):
    """Animate one replay in place."""
    delay = 1.0 / max(1, fps)
    with Live(console=renderer.console, refresh_per_second=max(4, fps)) as live:
        for snapshot in replay.snapshots():
            live.update(renderer.build(snapshot))
            time.sleep(delay)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    config = load_config()

    manager = ReplayManager(args.dir or config.replay.save_dir, config.replay.max_replays)
    console = Console()

    if args.list:
        for path in manager.list_replays():
            try:
                replay = manager.load_replay(path)
            except LOAD_ERRORS as e:
                print(f"[Replay] Error loading {Path(path).name}: {e}")
                continue
            console.print(
                f"{Path(path).name}  score={replay.score}  ticks={replay.ticks}"
            )
        return

    paths = select_replays(manager, args)
    if not paths:
        print("[Replay] No replays found")
        return

    renderer = TerminalRenderer(console, title="Replay")
    fps = args.speed or config.replay.playback_fps
    played = 0

    try:
        for path in paths:
            if not Path(path).exists():
                print(f"[Replay] File not found: {path}")
                continue
            try:
                replay = manager.load_replay(path)
            except LOAD_ERRORS as e:
                print(f"[Replay] Error loading {path}: {e}")
                continue

            console.rule(f"Score {replay.score} - {replay.duration_frames} frames")
            play_replay(replay, renderer, fps)
            played += 1
    except KeyboardInterrupt:
        pass

    print(f"[Replay] Played {played} replay(s)")


if __name__ == "__main__":
    main()
