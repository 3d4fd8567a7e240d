"""Food spawning and consumption."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from gridsnake.grid import Position

if TYPE_CHECKING:
    from gridsnake.grid import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Food:
    entity_id: int
    position: Position


class FoodSpawner:
    """Owns the live food items and places new ones on the grid.

    Placement is uniform over the whole grid and deliberately ignores
    occupancy: food may land on the snake or on other food. There is no
    cap on how many items coexist.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.items: list[Food] = []

    def __len__(self) -> int:
        return len(self.items)

    @property
    def positions(self) -> list[Position]:
        return [item.position for item in self.items]

    def spawn(self, entity_id: int) -> Food:
        """Create one food item at a random cell."""
        return self.place(entity_id, self.grid.random_position(self.rng))

    def place(self, entity_id: int, position: Position) -> Food:
        """Create one food item at ``position``."""
        item = Food(entity_id, position)
        self.items.append(item)
        logger.debug("Food %d spawned at %s.", entity_id, position)
        return item

    def take_at(self, position: Position) -> list[Food]:
        """Remove and return every food item sitting on ``position``."""
        eaten = [item for item in self.items if item.position == position]
        if eaten:
            self.items = [
                item for item in self.items if item.position != position
            ]
        return eaten

    def clear(self) -> list[Food]:
        """Remove all food, returning what was removed."""
        removed, self.items = self.items, []
        return removed

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {
            "ids": [item.entity_id for item in self.items],
            "positions": [list(p) for p in self.positions],
        }
