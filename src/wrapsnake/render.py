from __future__ import annotations

from typing import NamedTuple

from . import config as defaults
from .config import Config
from .state import GameState


class DrawRect(NamedTuple):
    x: int
    y: int
    w: int
    h: int
    color: tuple[int, int, int]


def _cell_rect(loc: tuple[int, int], size: int, color: tuple[int, int, int]) -> DrawRect:
    x, y = loc
    return DrawRect(x * size, y * size, size, size, color)


def gather_draw_list(state: GameState, cfg: Config) -> list[DrawRect]:
    """World rectangle, then the snake head-first, then the apple."""
    size = cfg.cell_size
    w, h = cfg.screen_size
    rects = [DrawRect(0, 0, w, h, defaults.WORLD)]

    snake = state.snake
    rects.append(_cell_rect(snake.head, size, defaults.SNAKE_HEAD))
    rects.extend(_cell_rect(seg, size, defaults.SNAKE_BODY) for seg in snake.tail)

    if not state.board_full():
        rects.append(_cell_rect(state.apple, size, defaults.APPLE))
    return rects


def draw_state(prims, state: GameState, cfg: Config) -> None:
    prims.clear(defaults.BACKGROUND)
    for r in gather_draw_list(state, cfg):
        prims.rect(r.x, r.y, r.w, r.h, r.color)
