"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from gridsnake.errors import InvariantViolation
from gridsnake.grid import Position


class Direction(enum.Enum):
    """Cardinal movement directions with (x_delta, y_delta) values."""

    LEFT = (-1, 0)
    UP = (0, 1)
    RIGHT = (1, 0)
    DOWN = (0, -1)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def step(self, pos: Position) -> Position:
        """Return the neighbouring cell one unit away in this direction."""
        dx, dy = self.value
        return Position(pos.x + dx, pos.y + dy)

    @classmethod
    def parse(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name, e.g. ``"up"``."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


@dataclass
class Segment:
    """One body unit. The entity id stays fixed while the position moves."""

    entity_id: int
    position: Position


class Snake:
    """A snake represented as an ordered list of segments.

    The head is ``segments[0]``; the tail is ``segments[-1]``. Only the head
    carries a heading.
    """

    def __init__(self, segments: list[Segment], heading: Direction) -> None:
        if len(segments) < 2:
            raise InvariantViolation("A snake needs at least two segments.")
        self.segments = segments
        self.heading = heading

    @classmethod
    def spawn(
        cls,
        head_id: int,
        tail_id: int,
        start: Position,
        heading: Direction = Direction.UP,
    ) -> Snake:
        """Build the starting chain: the head plus one segment directly behind it."""
        behind = heading.opposite.step(start)
        return cls([Segment(head_id, start), Segment(tail_id, behind)], heading)

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def head(self) -> Segment:
        return self.segments[0]

    @property
    def tail(self) -> Segment:
        return self.segments[-1]

    @property
    def positions(self) -> list[Position]:
        """Segment positions in head-to-tail order."""
        return [seg.position for seg in self.segments]

    def advance(self, direction: Direction) -> list[Position]:
        """Move the snake one cell forward.

        ``direction`` becomes the new heading unless it would reverse the
        snake onto itself, in which case the current heading is kept. Every
        trailing segment takes the position its predecessor held before the
        move. Returns the pre-move positions in head-to-tail order; the last
        entry is the cell the tail vacated.
        """
        if len(self.segments) < 2:
            raise InvariantViolation(
                f"Cannot move a snake of length {len(self.segments)}."
            )
        if direction != self.heading.opposite:
            self.heading = direction

        snapshot = self.positions
        for i in range(len(self.segments) - 1, 0, -1):
            self.segments[i].position = snapshot[i - 1]
        self.head.position = self.heading.step(snapshot[0])
        return snapshot

    def append(self, segment: Segment) -> None:
        """Attach a new segment behind the current tail."""
        self.segments.append(segment)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "ids": [seg.entity_id for seg in self.segments],
            "body": [list(seg.position) for seg in self.segments],
            "heading": self.heading.name.lower(),
        }
