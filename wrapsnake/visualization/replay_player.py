"""
Replay Player - Saves and loads recorded games.

A replay is the run of Snapshots a GameState recorded, one per tick.
On disk it is a JSON file whose name carries the final score, so the
manager can rank and prune replays without opening them. Loading a
file rebuilds every frame, so a damaged replay fails at load time
rather than halfway through playback.
"""
import json
import re
from pathlib import Path
from typing import List, Dict, Any, Optional, Iterator, Sequence, Tuple
from dataclasses import dataclass
from datetime import datetime

from ..game.snake_game import Snapshot

# What load_replay() can raise for a damaged or foreign file.
# json.JSONDecodeError is a ValueError.
LOAD_ERRORS = (OSError, ValueError, KeyError, TypeError)

_SCORE_IN_NAME = re.compile(r"_score(\d+)_")


def _check_frame(frame: Snapshot, index: int):
    """Reject a frame with cells off its own board."""
    n = frame.grid_size
    cells = list(frame.cells())
    if frame.food is not None:
        cells.append(frame.food)
    for cell in cells:
        if not (1 <= cell.x <= n and 1 <= cell.y <= n):
            raise ValueError(
                f"Frame {index}: cell ({cell.x}, {cell.y}) is off the {n}x{n} board"
            )


@dataclass(frozen=True)
class ReplayData:
    """A recorded game. Score and tick count come from the last frame."""
    frames: Tuple[Snapshot, ...]
    saved_at: str = ""

    @property
    def score(self) -> int:
        return self.frames[-1].score

    @property
    def ticks(self) -> int:
        return self.frames[-1].tick

    @property
    def duration_frames(self) -> int:
        return len(self.frames)

    def snapshots(self) -> Iterator[Snapshot]:
        return iter(self.frames)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "saved_at": self.saved_at,
            "score": self.score,
            "ticks": self.ticks,
            "frames": [frame.to_dict() for frame in self.frames],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReplayData":
        """
        Rebuild a replay from its JSON form, checking every frame.

        Raises:
            KeyError: If the frames or a frame's head or grid size are missing
            ValueError: If there are no frames or a frame does not fit its board
        """
        frames = tuple(Snapshot.from_dict(frame) for frame in data["frames"])
        if not frames:
            raise ValueError("Replay has no frames")
        for index, frame in enumerate(frames):
            _check_frame(frame, index)
        return cls(frames=frames, saved_at=data.get("saved_at", ""))


class ReplayManager:
    """
    Keeps a directory of the best recorded games.

    Files are named replay_t{ticks}_score{score}_{saved_at}.json. Ranking
    and pruning read the score from the name only.
    """

    def __init__(self, save_dir: str = "replays", max_replays: int = 10):
        """
        Args:
            save_dir: Directory holding the replay files (created if missing)
            max_replays: How many of the highest-scoring replays to keep
        """
        self.save_dir = Path(save_dir)
        self.save_dir.mkdir(parents=True, exist_ok=True)
        self.max_replays = max_replays

    @staticmethod
    def score_from_name(path) -> Optional[int]:
        """Final score encoded in a replay file name, or None."""
        match = _SCORE_IN_NAME.search(Path(path).name)
        return int(match.group(1)) if match else None

    def save_replay(self, frames: Sequence[Snapshot]) -> str:
        """
        Write a recorded game, then prune down to max_replays.

        Args:
            frames: Snapshots from GameState.stop_recording()

        Returns:
            Path of the new file

        Raises:
            ValueError: If there is nothing to save
        """
        if not frames:
            raise ValueError("Cannot save a replay with no frames")

        replay = ReplayData(
            frames=tuple(frames),
            saved_at=datetime.now().strftime("%Y%m%d_%H%M%S"),
        )
        filepath = self.save_dir / (
            f"replay_t{replay.ticks}_score{replay.score}_{replay.saved_at}.json"
        )
        with open(filepath, "w") as f:
            json.dump(replay.to_dict(), f)

        self._cleanup_old_replays()

        return str(filepath)

    def _cleanup_old_replays(self):
        """Delete the lowest scores beyond max_replays. Unscored names are kept."""
        ranked = self.ranked_replays()
        for path in ranked[self.max_replays:]:
            score = self.score_from_name(path)
            if score is None:
                continue
            print(f"[Replay] Removing old replay: score {score}")
            Path(path).unlink()

    def load_replay(self, filepath: str) -> ReplayData:
        """
        Read and check a replay file.

        Raises:
            Any of LOAD_ERRORS if the file is missing or damaged
        """
        with open(filepath, "r") as f:
            data = json.load(f)
        return ReplayData.from_dict(data)

    def list_replays(self) -> List[str]:
        """All replay files, newest first."""
        paths = self.save_dir.glob("replay_*.json")
        return [str(p) for p in sorted(paths, key=lambda p: p.stat().st_mtime, reverse=True)]

    def ranked_replays(self) -> List[str]:
        """All replay files, highest score first. Unscored names go last."""
        return sorted(
            self.list_replays(),
            key=lambda p: -1 if self.score_from_name(p) is None else self.score_from_name(p),
            reverse=True,
        )

    def get_best_replay(self) -> Optional[str]:
        """
        The highest-scoring replay that loads cleanly.

        Files that fail to load are reported and passed over.
        """
        for path in self.ranked_replays():
            try:
                self.load_replay(path)
            except LOAD_ERRORS as e:
                print(f"[Replay] Skipping {Path(path).name}: {e}")
                continue
            return path
        return None
