"""Wall and self collision checks run after every move."""

from __future__ import annotations

from collections.abc import Sequence

from gridsnake.events import CollisionKind
from gridsnake.grid import Grid, Position


def detect_collision(
    grid: Grid, head: Position, snapshot: Sequence[Position],
) -> CollisionKind | None:
    """Classify the post-move ``head`` against the pre-move body ``snapshot``.

    ``snapshot`` lists segment positions in head-to-tail order as they were
    before the move. The head's own former cell and the cell the tail just
    vacated are not obstacles. A wall hit takes precedence so at most one
    reason is reported.
    """
    if not grid.in_bounds(head):
        return CollisionKind.WALL
    if head in snapshot[1:-1]:
        return CollisionKind.SELF
    return None
