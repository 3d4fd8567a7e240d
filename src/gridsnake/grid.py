"""Bounded integer grid and positions for the snake simulation."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import NamedTuple

import numpy as np


class Position(NamedTuple):
    """A grid cell. ``x`` grows rightwards, ``y`` grows upwards."""

    x: int
    y: int


class CellType(enum.IntEnum):
    """Integer codes stored in an occupancy array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2
    HEAD = 3


class Grid:
    """A ``width`` x ``height`` arena with cells ``0 <= x < width``, ``0 <= y < height``.

    The grid holds no entities itself; it answers bounds questions, draws
    random cells and builds NumPy occupancy snapshots on demand.
    """

    def __init__(self, width: int = 10, height: int = 10) -> None:
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be at least 1x1.")
        self.width = width
        self.height = height

    def in_bounds(self, pos: Position) -> bool:
        """Check whether a position lies within the grid."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def random_position(self, rng: np.random.Generator) -> Position:
        """Draw a cell uniformly from the whole grid, ignoring occupancy."""
        x = int(rng.integers(0, self.width))
        y = int(rng.integers(0, self.height))
        return Position(x, y)

    def occupancy(
        self,
        snake: Iterable[Position] = (),
        food: Iterable[Position] = (),
    ) -> np.ndarray:
        """Return a ``(height, width)`` array of :class:`CellType` codes.

        Row index is ``y``. Food is painted first so snake segments win on
        overlap, and the first snake position (the head) is painted last.
        Out-of-bounds positions are skipped.
        """
        cells = np.zeros((self.height, self.width), dtype=np.int8)
        for pos in food:
            if self.in_bounds(pos):
                cells[pos.y, pos.x] = CellType.FOOD
        body = list(snake)
        for pos in body[1:]:
            if self.in_bounds(pos):
                cells[pos.y, pos.x] = CellType.SNAKE
        if body and self.in_bounds(body[0]):
            cells[body[0].y, body[0].x] = CellType.HEAD
        return cells

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"width": self.width, "height": self.height}
