"""Translate pressed directional inputs into a buffered heading."""

from __future__ import annotations

from collections.abc import Collection

from gridsnake.snake import Direction

# First pressed direction in this order wins when several are held.
INPUT_PRIORITY: tuple[Direction, ...] = (
    Direction.LEFT,
    Direction.DOWN,
    Direction.UP,
    Direction.RIGHT,
)


class DirectionResolver:
    """Buffers the direction the snake will take on its next move.

    Input is sampled every frame, independently of the move cadence. A
    candidate equal to the opposite of the current heading is ignored, so
    the buffered value survives until a legal direction replaces it.
    """

    def __init__(self, initial: Direction = Direction.UP) -> None:
        self.pending = initial

    def resolve(
        self, heading: Direction, pressed: Collection[Direction] = (),
    ) -> Direction:
        """Sample ``pressed`` against ``heading`` and return the buffered direction."""
        candidate = next(
            (d for d in INPUT_PRIORITY if d in pressed), self.pending,
        )
        if candidate != heading.opposite:
            self.pending = candidate
        return self.pending

    def reset(self, direction: Direction = Direction.UP) -> None:
        self.pending = direction
