"""Grid Snake: discrete-time snake simulation core."""

from gridsnake.config import SimulationConfig
from gridsnake.controls import DirectionResolver
from gridsnake.engine import Simulation
from gridsnake.errors import InvariantViolation
from gridsnake.events import (
    CollisionKind,
    EntityAction,
    EntityEvent,
    EntityKind,
)
from gridsnake.grid import Grid, Position
from gridsnake.snake import Direction, Snake

__all__ = [
    "CollisionKind",
    "Direction",
    "DirectionResolver",
    "EntityAction",
    "EntityEvent",
    "EntityKind",
    "Grid",
    "InvariantViolation",
    "Position",
    "Simulation",
    "SimulationConfig",
    "Snake",
]
