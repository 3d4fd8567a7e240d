"""Deferred signals between simulation steps and outbound entity events."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from gridsnake.grid import Position

T = TypeVar("T")


class CollisionKind(enum.Enum):
    """Why a move ended the game."""

    WALL = "wall"
    SELF = "self"


@dataclass(frozen=True)
class GrowthEvent:
    """The head ate one food item this tick."""


@dataclass(frozen=True)
class GameOverEvent:
    reason: CollisionKind


class EntityKind(enum.Enum):
    HEAD = "head"
    SEGMENT = "segment"
    FOOD = "food"


class EntityAction(enum.Enum):
    CREATED = "created"
    MOVED = "moved"
    DESTROYED = "destroyed"


@dataclass(frozen=True)
class EntityEvent:
    """Lifecycle notification for the presentation layer.

    ``position`` is the entity's new cell for CREATED and MOVED, and its
    last known cell for DESTROYED.
    """

    action: EntityAction
    kind: EntityKind
    entity_id: int
    position: Position

    def to_dict(self) -> dict:
        return {
            "action": self.action.value,
            "kind": self.kind.value,
            "entity_id": self.entity_id,
            "position": list(self.position),
        }


class EventQueue(Generic[T]):
    """FIFO of emitted-but-unconsumed signals, drained by a single consumer."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def send(self, event: T) -> None:
        self._items.append(event)

    def drain(self) -> Iterator[T]:
        """Yield and remove queued events in emission order."""
        while self._items:
            yield self._items.popleft()

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)
