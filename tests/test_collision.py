"""Tests for collision detection."""

from gridsnake.collision import detect_collision
from gridsnake.events import CollisionKind
from gridsnake.grid import Grid, Position


def _cells(*pairs):
    return [Position(x, y) for x, y in pairs]


class TestWallCollision:
    def test_inside_grid(self):
        grid = Grid(10, 10)
        assert detect_collision(grid, Position(3, 4), _cells((3, 3), (3, 2))) is None

    def test_each_wall(self):
        grid = Grid(10, 10)
        snapshot = _cells((5, 5), (5, 4))
        for head in (Position(-1, 5), Position(5, -1), Position(10, 5), Position(5, 10)):
            assert detect_collision(grid, head, snapshot) == CollisionKind.WALL


class TestSelfCollision:
    def test_hits_body(self):
        grid = Grid(10, 10)
        snapshot = _cells((5, 5), (5, 4), (6, 4), (6, 5), (6, 6))
        assert detect_collision(grid, Position(6, 5), snapshot) == CollisionKind.SELF

    def test_vacated_tail_cell_is_free(self):
        grid = Grid(10, 10)
        snapshot = _cells((5, 5), (5, 4), (6, 4), (6, 5))
        assert detect_collision(grid, Position(6, 5), snapshot) is None

    def test_wall_reported_once(self):
        grid = Grid(2, 2)
        # Out of bounds and also a pre-move body cell: only the wall counts.
        snapshot = _cells((0, 0), (2, 0), (1, 0))
        assert detect_collision(grid, Position(2, 0), snapshot) == CollisionKind.WALL
