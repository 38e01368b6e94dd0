from __future__ import annotations

from .apple import APPLE_PRIME, NO_PLACEMENT, select_new_apple
from .config import Config, ConfigError, make_config
from .grid import Grid, Location
from .logic import apply_direction, step, turn_and_step
from .snake import Direction, Snake, advance, offset_for, set_direction
from .state import GameState, initial_state

__all__ = [
    "APPLE_PRIME",
    "NO_PLACEMENT",
    "Config",
    "ConfigError",
    "Direction",
    "GameState",
    "Grid",
    "Location",
    "Snake",
    "advance",
    "apply_direction",
    "initial_state",
    "make_config",
    "offset_for",
    "select_new_apple",
    "set_direction",
    "step",
    "turn_and_step",
]
