from __future__ import annotations

import pygame

from .config import Config
from .grid import Grid
from .keymap import QUIT_KEYS, direction_for_key
from .logic import step, turn_and_step
from .primitives import BufferPrimitives, SurfacePrimitives
from .render import draw_state
from .state import GameState, initial_state

STEP_EVENT = pygame.USEREVENT + 1


def is_quit(event: pygame.event.Event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key in QUIT_KEYS


def handle_event(state: GameState, event: pygame.event.Event, grid: Grid) -> GameState:
    """One transition per stimulus; anything unrecognised leaves the state alone."""
    if state.board_full():
        return state
    if event.type == pygame.KEYDOWN:
        direction = direction_for_key(event.key)
        if direction is not None:
            return turn_and_step(state, direction, grid)
    elif event.type == STEP_EVENT:
        return step(state, grid)
    return state


def run(cfg: Config) -> GameState:
    pygame.init()
    screen = pygame.display.set_mode(cfg.screen_size)
    pygame.display.set_caption("wrapsnake")
    clock = pygame.time.Clock()

    if cfg.renderer == "buffer":
        prims = BufferPrimitives(*cfg.screen_size)
    else:
        prims = SurfacePrimitives(screen)

    if cfg.auto_step_ms is not None:
        pygame.time.set_timer(STEP_EVENT, cfg.auto_step_ms)

    grid = Grid(cfg.world_width, cfg.world_height)
    state = initial_state()
    reported_full = False
    running = True

    while running:
        for event in pygame.event.get():
            if is_quit(event):
                running = False
                break
            state = handle_event(state, event, grid)

        if state.board_full() and not reported_full:
            print("Board full! Snake length:", state.snake.length())
            reported_full = True

        draw_state(prims, state, cfg)
        prims.present(screen)
        pygame.display.flip()
        clock.tick(cfg.fps)

    pygame.quit()
    print("Snake length:", state.snake.length())
    return state
