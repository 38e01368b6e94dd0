from __future__ import annotations

from typing import NamedTuple

from .apple import NO_PLACEMENT
from .grid import Location
from .snake import Direction, Snake

INITIAL_HEAD: Location = (4, 5)
INITIAL_TAIL: tuple[Location, ...] = ((3, 5),)
INITIAL_APPLE: Location = (3, 2)


class GameState(NamedTuple):
    snake: Snake
    apple: Location

    def board_full(self) -> bool:
        return self.apple == NO_PLACEMENT


def initial_cells() -> tuple[Location, ...]:
    return (INITIAL_HEAD, *INITIAL_TAIL, INITIAL_APPLE)


def initial_state() -> GameState:
    return GameState(
        snake=Snake(direction=Direction.RIGHT, head=INITIAL_HEAD, tail=INITIAL_TAIL),
        apple=INITIAL_APPLE,
    )

