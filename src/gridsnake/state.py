"""The single top-level state struct shared by every simulation step."""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np

from gridsnake.config import SimulationConfig
from gridsnake.controls import DirectionResolver
from gridsnake.events import EventQueue, GameOverEvent, GrowthEvent
from gridsnake.food import FoodSpawner
from gridsnake.grid import Grid, Position
from gridsnake.snake import Snake
from gridsnake.timer import RepeatingTimer


@dataclass
class SimulationState:
    """All mutable simulation state, passed explicitly to each step.

    Only one step touches the state at a time; the frame order in
    :mod:`gridsnake.engine` decides who writes what.
    """

    config: SimulationConfig
    grid: Grid
    rng: np.random.Generator
    snake: Snake
    food: FoodSpawner
    move_timer: RepeatingTimer
    food_timer: RepeatingTimer
    resolver: DirectionResolver
    # Tail cell before the most recent move; None until the first tick.
    last_tail_position: Position | None = None
    growth_events: EventQueue[GrowthEvent] = field(default_factory=EventQueue)
    game_over_events: EventQueue[GameOverEvent] = field(
        default_factory=EventQueue,
    )
    frame: int = 0
    tick: int = 0
    games_played: int = 0
    _ids: Iterator[int] = field(default_factory=itertools.count, repr=False)

    @classmethod
    def create(cls, config: SimulationConfig) -> SimulationState:
        grid = Grid(width=config.grid_width, height=config.grid_height)
        rng = np.random.default_rng(config.seed)
        ids = itertools.count()
        snake = Snake.spawn(
            next(ids), next(ids), config.start_position, config.heading,
        )
        return cls(
            config=config,
            grid=grid,
            rng=rng,
            snake=snake,
            food=FoodSpawner(grid, rng=rng),
            move_timer=RepeatingTimer(config.move_interval),
            food_timer=RepeatingTimer(config.food_interval),
            resolver=DirectionResolver(config.heading),
            _ids=ids,
        )

    def next_id(self) -> int:
        """Allocate a fresh entity id. Ids are never reused."""
        return next(self._ids)
