from __future__ import annotations

import pygame

from .snake import Direction

KEY_MAP: dict[int, Direction] = {
    pygame.K_w: Direction.UP,
    pygame.K_UP: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_RIGHT: Direction.RIGHT,
}

QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def direction_for_key(key: int) -> Direction | None:
    return KEY_MAP.get(key)
