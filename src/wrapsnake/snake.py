from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from .grid import Grid, Location


class Direction(Enum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"


# y grows downward.
OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


class Snake(NamedTuple):
    direction: Direction
    head: Location
    tail: tuple[Location, ...]  # head-to-tail order

    def length(self) -> int:
        return 1 + len(self.tail)

    def cells(self) -> tuple[Location, ...]:
        return (self.head, *self.tail)


def offset_for(direction: Direction) -> tuple[int, int]:
    return OFFSETS[direction]


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])


def advance(snake: Snake, grid: Grid) -> tuple[Location, tuple[Location, ...]]:
    """Next head plus the body as it would be without growth.

    The body is the old head followed by the old tail, minus its last cell.
    A snake with no tail therefore gets an empty body back.
    """
    new_head = grid.wrap(*add_vectors(snake.head, offset_for(snake.direction)))
    body_without_growth = snake.cells()[:-1]
    return new_head, body_without_growth


def set_direction(snake: Snake, direction: Direction) -> Snake:
    # Reversing into the neck is allowed; there is no death rule to trip.
    return snake._replace(direction=direction)
