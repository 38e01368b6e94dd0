from __future__ import annotations

from .apple import select_new_apple
from .grid import Grid
from .snake import Direction, advance, set_direction
from .state import GameState


def apply_direction(state: GameState, direction: Direction) -> GameState:
    return state._replace(snake=set_direction(state.snake, direction))


def step(state: GameState, grid: Grid) -> GameState:
    """Move the snake one cell; grow and relocate the apple if it was eaten."""
    snake = state.snake
    new_head, body = advance(snake, grid)
    if new_head != state.apple:
        return GameState(snake=snake._replace(head=new_head, tail=body), apple=state.apple)

    # Growth keeps the cell that would have dropped off.
    new_tail = snake.cells()
    apple = select_new_apple({new_head, *new_tail}, grid)
    return GameState(snake=snake._replace(head=new_head, tail=new_tail), apple=apple)


def turn_and_step(state: GameState, direction: Direction, grid: Grid) -> GameState:
    return step(apply_direction(state, direction), grid)
