from __future__ import annotations

import pygame

from wrapsnake.apple import NO_PLACEMENT
from wrapsnake.game import STEP_EVENT, handle_event, is_quit
from wrapsnake.grid import Grid
from wrapsnake.keymap import KEY_MAP, direction_for_key
from wrapsnake.snake import Direction
from wrapsnake.state import initial_state

GRID = Grid(16, 12)


def _key(key: int, kind: int = pygame.KEYDOWN) -> pygame.event.Event:
    return pygame.event.Event(kind, key=key)


def test_key_map() -> None:
    assert direction_for_key(pygame.K_w) == direction_for_key(pygame.K_UP) == Direction.UP
    assert direction_for_key(pygame.K_s) == direction_for_key(pygame.K_DOWN) == Direction.DOWN
    assert direction_for_key(pygame.K_a) == direction_for_key(pygame.K_LEFT) == Direction.LEFT
    assert direction_for_key(pygame.K_d) == direction_for_key(pygame.K_RIGHT) == Direction.RIGHT
    assert direction_for_key(pygame.K_SPACE) is None
    assert len(KEY_MAP) == 8


def test_keydown_turns_and_steps() -> None:
    state = handle_event(initial_state(), _key(pygame.K_w), GRID)
    assert state.snake.head == (4, 4)
    assert state.snake.tail == ((4, 5),)


def test_unmapped_key_and_keyup_are_ignored() -> None:
    start = initial_state()
    assert handle_event(start, _key(pygame.K_SPACE), GRID) == start
    assert handle_event(start, _key(pygame.K_w, pygame.KEYUP), GRID) == start


def test_timer_event_steps_without_turning() -> None:
    state = handle_event(initial_state(), pygame.event.Event(STEP_EVENT), GRID)
    assert state.snake.head == (5, 5)
    assert state.snake.direction == Direction.RIGHT


def test_full_board_stops_advancing() -> None:
    full = initial_state()._replace(apple=NO_PLACEMENT)
    assert handle_event(full, pygame.event.Event(STEP_EVENT), GRID) == full
    assert handle_event(full, _key(pygame.K_d), GRID) == full


def test_quit_events() -> None:
    assert is_quit(pygame.event.Event(pygame.QUIT))
    assert is_quit(_key(pygame.K_ESCAPE))
    assert is_quit(_key(pygame.K_q))
    assert not is_quit(_key(pygame.K_w))
    assert not is_quit(_key(pygame.K_q, pygame.KEYUP))
