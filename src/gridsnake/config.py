"""Simulation configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from gridsnake.grid import Position
from gridsnake.snake import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    """Fixed parameters for one simulation process.

    Supports JSON serialization for reproducibility.
    """

    # Arena
    grid_width: int = 10
    grid_height: int = 10

    # Cadence
    move_interval_ms: int = 1500
    food_interval_ms: int = 1000

    # Starting snake
    start_x: int = 3
    start_y: int = 3
    initial_direction: str = "up"

    # Food placement RNG
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("grid_width and grid_height must each be at least 1.")
        if self.move_interval_ms <= 0:
            raise ValueError("move_interval_ms must be positive.")
        if self.food_interval_ms <= 0:
            raise ValueError("food_interval_ms must be positive.")

        heading = Direction.parse(self.initial_direction)
        start = self.start_position
        behind = heading.opposite.step(start)
        for label, pos in (("start", start), ("trailing segment", behind)):
            if not (0 <= pos.x < self.grid_width and 0 <= pos.y < self.grid_height):
                raise ValueError(
                    f"{label} position {tuple(pos)} lies outside the "
                    f"{self.grid_width}x{self.grid_height} grid."
                )

    @property
    def heading(self) -> Direction:
        return Direction.parse(self.initial_direction)

    @property
    def start_position(self) -> Position:
        return Position(self.start_x, self.start_y)

    @property
    def move_interval(self) -> float:
        """Move cadence in seconds."""
        return self.move_interval_ms / 1000

    @property
    def food_interval(self) -> float:
        """Food spawn cadence in seconds."""
        return self.food_interval_ms / 1000

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> SimulationConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
