"""Tests for the Snake module."""

import pytest

from gridsnake.errors import InvariantViolation
from gridsnake.grid import Position
from gridsnake.snake import Direction, Segment, Snake


def _snake(cells, heading=Direction.UP):
    return Snake(
        [Segment(i, Position(*c)) for i, c in enumerate(cells)], heading,
    )


class TestDirection:
    def test_opposites(self):
        assert Direction.LEFT.opposite == Direction.RIGHT
        assert Direction.RIGHT.opposite == Direction.LEFT
        assert Direction.UP.opposite == Direction.DOWN
        assert Direction.DOWN.opposite == Direction.UP

    def test_opposite_is_involution(self):
        for d in Direction:
            assert d.opposite.opposite == d

    def test_unit_steps(self):
        origin = Position(5, 5)
        assert Direction.LEFT.step(origin) == Position(4, 5)
        assert Direction.RIGHT.step(origin) == Position(6, 5)
        assert Direction.UP.step(origin) == Position(5, 6)
        assert Direction.DOWN.step(origin) == Position(5, 4)

    def test_parse(self):
        assert Direction.parse("up") == Direction.UP
        assert Direction.parse("Left") == Direction.LEFT
        with pytest.raises(ValueError, match="Unknown direction"):
            Direction.parse("north")


class TestSnakeInit:
    def test_spawn_places_tail_behind_head(self):
        snake = Snake.spawn(0, 1, Position(3, 3))
        assert snake.positions == [Position(3, 3), Position(3, 2)]
        assert snake.heading == Direction.UP
        assert len(snake) == 2

    def test_spawn_facing_right(self):
        snake = Snake.spawn(0, 1, Position(9, 5), Direction.RIGHT)
        assert snake.tail.position == Position(8, 5)

    def test_minimum_length(self):
        with pytest.raises(InvariantViolation, match="at least two"):
            Snake([Segment(0, Position(0, 0))], Direction.UP)


class TestSnakeMovement:
    def test_first_tick_moves_up(self):
        snake = Snake.spawn(0, 1, Position(3, 3))
        snapshot = snake.advance(Direction.UP)
        assert snake.positions == [Position(3, 4), Position(3, 3)]
        assert snapshot == [Position(3, 3), Position(3, 2)]

    def test_trailing_segments_follow_predecessors(self):
        snake = _snake([(5, 5), (5, 4), (5, 3)])
        snake.advance(Direction.RIGHT)
        assert snake.positions == [Position(6, 5), Position(5, 5), Position(5, 4)]
        assert snake.heading == Direction.RIGHT

    def test_length_unchanged_by_propagation(self):
        snake = _snake([(5, 5), (5, 4), (5, 3), (5, 2)])
        for d in (Direction.UP, Direction.LEFT, Direction.DOWN):
            before = len(snake)
            snake.advance(d)
            assert len(snake) == before

    def test_entity_ids_stay_with_segments(self):
        snake = _snake([(5, 5), (5, 4), (5, 3)])
        snake.advance(Direction.UP)
        assert [seg.entity_id for seg in snake.segments] == [0, 1, 2]

    def test_reversal_is_refused(self):
        snake = _snake([(5, 5), (5, 4), (5, 3)])
        snake.advance(Direction.DOWN)
        assert snake.heading == Direction.UP
        assert snake.head.position == Position(5, 6)

    def test_too_short_to_move(self):
        snake = Snake.spawn(0, 1, Position(3, 3))
        snake.segments.pop()
        with pytest.raises(InvariantViolation, match="length 1"):
            snake.advance(Direction.UP)


class TestSnakeGrowth:
    def test_append(self):
        snake = Snake.spawn(0, 1, Position(3, 3))
        snake.append(Segment(7, Position(3, 1)))
        assert len(snake) == 3
        assert snake.tail.entity_id == 7


class TestSnakeSerialization:
    def test_to_dict(self):
        snake = _snake([(5, 5), (5, 4)])
        d = snake.to_dict()
        assert d["body"] == [[5, 5], [5, 4]]
        assert d["ids"] == [0, 1]
        assert d["heading"] == "up"
