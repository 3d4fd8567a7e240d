"""Per-frame update steps.

Each step is a plain function over :class:`SimulationState`. Steps that
create, move or destroy entities append :class:`EntityEvent` records to
the ``events`` list they are given.
"""

from __future__ import annotations

import logging
from collections.abc import Collection

from gridsnake.collision import detect_collision
from gridsnake.errors import InvariantViolation
from gridsnake.events import (
    EntityAction,
    EntityEvent,
    EntityKind,
    GameOverEvent,
    GrowthEvent,
)
from gridsnake.snake import Direction, Segment, Snake
from gridsnake.state import SimulationState

logger = logging.getLogger(__name__)


def _segment_kind(index: int) -> EntityKind:
    return EntityKind.HEAD if index == 0 else EntityKind.SEGMENT


def snake_events(snake: Snake, action: EntityAction) -> list[EntityEvent]:
    """One event per segment, head first."""
    return [
        EntityEvent(action, _segment_kind(i), seg.entity_id, seg.position)
        for i, seg in enumerate(snake.segments)
    ]


def tick_timers(state: SimulationState, elapsed: float) -> None:
    state.move_timer.tick(elapsed)
    state.food_timer.tick(elapsed)


def resolve_direction(
    state: SimulationState, pressed: Collection[Direction],
) -> None:
    state.resolver.resolve(state.snake.heading, pressed)


def move_snake(state: SimulationState, events: list[EntityEvent]) -> None:
    """Advance the snake one cell if the move timer fired this frame."""
    if not state.move_timer.finished:
        return

    snake = state.snake
    snapshot = snake.advance(state.resolver.pending)
    state.last_tail_position = snapshot[-1]
    state.tick += 1
    events.extend(snake_events(snake, EntityAction.MOVED))

    reason = detect_collision(state.grid, snake.head.position, snapshot)
    if reason is not None:
        state.game_over_events.send(GameOverEvent(reason))


def eat_food(state: SimulationState, events: list[EntityEvent]) -> None:
    """Consume every food item under the head. Runs only on move ticks."""
    if not state.move_timer.finished:
        return

    for item in state.food.take_at(state.snake.head.position):
        events.append(EntityEvent(
            EntityAction.DESTROYED, EntityKind.FOOD,
            item.entity_id, item.position,
        ))
        state.growth_events.send(GrowthEvent())
        logger.debug("Food %d eaten at %s.", item.entity_id, item.position)


def grow_snake(state: SimulationState, events: list[EntityEvent]) -> None:
    """Drain growth signals, adding one segment per signal where the tail was."""
    for _event in state.growth_events.drain():
        if state.last_tail_position is None:
            raise InvariantViolation(
                "Growth signalled before any move recorded a tail position."
            )
        segment = Segment(state.next_id(), state.last_tail_position)
        state.snake.append(segment)
        events.append(EntityEvent(
            EntityAction.CREATED, EntityKind.SEGMENT,
            segment.entity_id, segment.position,
        ))
        logger.debug("Snake grew to length %d.", len(state.snake))


def spawn_food(state: SimulationState, events: list[EntityEvent]) -> None:
    if not state.food_timer.finished:
        return

    item = state.food.spawn(state.next_id())
    events.append(EntityEvent(
        EntityAction.CREATED, EntityKind.FOOD, item.entity_id, item.position,
    ))


def handle_game_over(
    state: SimulationState, events: list[EntityEvent],
) -> None:
    """Restart once if any game-over signal is pending, however many there are."""
    signals = list(state.game_over_events.drain())
    if not signals:
        return

    logger.info(
        "Game over (%s) at tick %d with length %d.",
        signals[0].reason.value, state.tick, len(state.snake),
    )
    restart(state, events)


def restart(state: SimulationState, events: list[EntityEvent]) -> None:
    """Destroy every food item and segment and respawn the starting snake."""
    for item in state.food.clear():
        events.append(EntityEvent(
            EntityAction.DESTROYED, EntityKind.FOOD,
            item.entity_id, item.position,
        ))
    events.extend(snake_events(state.snake, EntityAction.DESTROYED))

    cfg = state.config
    state.snake = Snake.spawn(
        state.next_id(), state.next_id(), cfg.start_position, cfg.heading,
    )
    events.extend(snake_events(state.snake, EntityAction.CREATED))

    state.resolver.reset(cfg.heading)
    state.last_tail_position = None
    state.growth_events.clear()
    state.move_timer.reset()
    state.food_timer.reset()
    state.tick = 0
    state.games_played += 1
    logger.info("Simulation reset (games played: %d).", state.games_played)
