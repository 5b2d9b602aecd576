"""
Configuration Loader - Load and validate configuration from YAML.

Every section is optional; missing sections and keys fall back to the
dataclass defaults, and unknown keys are ignored.
"""
import yaml
from pathlib import Path
from typing import Optional, Any, List
from dataclasses import dataclass, field, asdict


@dataclass
class GameConfig:
    """Game rules and initial snake shape."""
    grid_size: int = 10
    tick_interval: float = 0.25
    initial_head: List[int] = field(default_factory=lambda: [3, 3])
    initial_tail: List[List[int]] = field(
        default_factory=lambda: [[3, 4], [3, 5], [3, 6], [3, 7], [3, 8]]
    )
    initial_direction: str = "up"
    seed: Optional[int] = None
    max_food_attempts: Optional[int] = None
    end_on_collision: bool = False

    def validate(self):
        """
        Check the settings that the game cannot absorb at runtime.

        Raises:
            ValueError: On an unusable grid size, tick interval,
                direction name or initial shape
        """
        if self.grid_size < 2:
            raise ValueError(f"grid_size must be at least 2, got {self.grid_size}")
        if self.tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {self.tick_interval}")
        if self.initial_direction.strip().upper() not in ("UP", "DOWN", "LEFT", "RIGHT"):
            raise ValueError(f"Unknown direction: {self.initial_direction!r}")

        cells = [self.initial_head] + list(self.initial_tail)
        for cell in cells:
            if len(cell) != 2:
                raise ValueError(f"Cells must be [x, y] pairs, got {cell!r}")
            x, y = cell
            if not (1 <= x <= self.grid_size and 1 <= y <= self.grid_size):
                raise ValueError(
                    f"Initial cell ({x}, {y}) is outside the "
                    f"{self.grid_size}x{self.grid_size} grid"
                )

        seen = {tuple(cell) for cell in cells}
        if len(seen) != len(cells):
            raise ValueError("Initial snake cells must be distinct")


@dataclass
class RenderConfig:
    """Window settings."""
    cell_size: int = 50
    fps: int = 60
    title: str = "Snake"


@dataclass
class ReplayConfig:
    """Replay system settings."""
    enabled: bool = False
    save_dir: str = "replays"
    playback_fps: int = 4
    max_replays: int = 10


@dataclass
class Config:
    """Complete application configuration."""
    game: GameConfig = field(default_factory=GameConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    replay: ReplayConfig = field(default_factory=ReplayConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _find_config_file() -> Optional[Path]:
    """Look for config.yaml in common locations."""
    possible_paths = [
        Path("config.yaml"),
        Path(__file__).parent.parent.parent / "config.yaml",
        Path.cwd() / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path

    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to project root config.yaml)

    Returns:
        Config object with all settings

    Raises:
        ValueError: If the game section is invalid
    """
    path = Path(config_path) if config_path is not None else _find_config_file()

    if path is None or not path.exists():
        print("[Config] No config file found, using defaults")
        return Config()

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return Config()

    config = Config()

    if 'game' in data:
        config.game = _dict_to_dataclass(data['game'], GameConfig)

    if 'render' in data:
        config.render = _dict_to_dataclass(data['render'], RenderConfig)

    if 'replay' in data:
        config.replay = _dict_to_dataclass(data['replay'], ReplayConfig)

    config.game.validate()

    return config


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
