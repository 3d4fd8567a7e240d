"""Frame-driven simulation engine composing the per-frame steps."""

from __future__ import annotations

import logging
from collections.abc import Collection

from gridsnake import systems
from gridsnake.config import SimulationConfig
from gridsnake.events import EntityAction, EntityEvent
from gridsnake.food import FoodSpawner
from gridsnake.snake import Direction, Snake
from gridsnake.state import SimulationState

logger = logging.getLogger(__name__)


class Simulation:
    """Single-snake, frame-driven game simulation.

    The host calls :meth:`update` once per frame with the elapsed wall-clock
    time and the directional inputs currently held. The steps always run in
    the same order: timers, direction resolution, movement and collision,
    eating, growth, food spawning, then game-over handling. Each call
    returns the entity lifecycle events the presentation layer needs to
    apply.
    """

    def __init__(self, config: SimulationConfig | None = None) -> None:
        self.config = config or SimulationConfig()
        self.state = SimulationState.create(self.config)
        logger.info(
            "Simulation started on a %dx%d grid.",
            self.config.grid_width, self.config.grid_height,
        )

    @property
    def snake(self) -> Snake:
        return self.state.snake

    @property
    def food(self) -> FoodSpawner:
        return self.state.food

    def initial_events(self) -> list[EntityEvent]:
        """CREATED events for the current snake, for hosts attaching late."""
        return systems.snake_events(self.state.snake, EntityAction.CREATED)

    def update(
        self, elapsed: float, pressed: Collection[Direction] = (),
    ) -> list[EntityEvent]:
        """Run one frame and return the entity events it produced."""
        if elapsed < 0:
            raise ValueError("Elapsed time cannot be negative.")

        state = self.state
        events: list[EntityEvent] = []
        state.frame += 1

        systems.tick_timers(state, elapsed)
        systems.resolve_direction(state, pressed)
        systems.move_snake(state, events)
        systems.eat_food(state, events)
        systems.grow_snake(state, events)
        systems.spawn_food(state, events)
        systems.handle_game_over(state, events)
        return events

    def reset(self) -> list[EntityEvent]:
        """Force a fresh game, as if the snake had just died."""
        events: list[EntityEvent] = []
        self.state.game_over_events.clear()
        systems.restart(self.state, events)
        return events

    def get_state(self) -> dict:
        """Return the full, serializable simulation state."""
        state = self.state
        return {
            "frame": state.frame,
            "tick": state.tick,
            "games_played": state.games_played,
            "snake": state.snake.to_dict(),
            "pending_direction": state.resolver.pending.name.lower(),
            "last_tail_position": (
                list(state.last_tail_position)
                if state.last_tail_position is not None else None
            ),
            "food": state.food.to_dict(),
            "timers": {
                "move": state.move_timer.to_dict(),
                "food": state.food_timer.to_dict(),
            },
            "grid": {
                **state.grid.to_dict(),
                "cells": state.grid.occupancy(
                    state.snake.positions, state.food.positions,
                ).tolist(),
            },
        }
