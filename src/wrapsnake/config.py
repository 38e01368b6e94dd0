from __future__ import annotations

from dataclasses import dataclass, replace

from .grid import Grid
from .state import initial_cells

# World size in cells.
GRID_WIDTH, GRID_HEIGHT = 16, 12
CELL_SIZE = 40

# None means the snake only moves on key presses.
AUTO_STEP_MS: int | None = None
FPS = 60

RENDERERS = ("surface", "buffer")

BACKGROUND = (0, 0, 0)
WORLD = (20, 20, 20)
SNAKE_HEAD = (0, 255, 0)
SNAKE_BODY = (0, 170, 0)
APPLE = (255, 0, 0)


class ConfigError(ValueError):
    """Raised once at startup when the configuration cannot be used."""


@dataclass(frozen=True)
class Config:
    world_width: int = GRID_WIDTH
    world_height: int = GRID_HEIGHT
    cell_size: int = CELL_SIZE
    auto_step_ms: int | None = AUTO_STEP_MS
    fps: int = FPS
    renderer: str = "surface"

    @property
    def screen_size(self) -> tuple[int, int]:
        return (self.world_width * self.cell_size, self.world_height * self.cell_size)

    def validate(self) -> Config:
        for name in ("world_width", "world_height", "cell_size", "fps"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        step_ms = self.auto_step_ms
        if step_ms is not None and (isinstance(step_ms, bool) or not isinstance(step_ms, int) or step_ms <= 0):
            raise ConfigError(f"auto_step_ms must be a positive integer, got {self.auto_step_ms!r}")
        if self.renderer not in RENDERERS:
            raise ConfigError(f"unknown renderer: {self.renderer}")
        grid = Grid(self.world_width, self.world_height)
        outside = [cell for cell in initial_cells() if not grid.contains(cell)]
        if outside:
            raise ConfigError(
                f"world {self.world_width}x{self.world_height} is too small for the starting cells {outside}"
            )
        return self


def make_config(**overrides) -> Config:
    """Build a validated Config, with None overrides falling back to defaults."""
    cfg = Config()
    given = {k: v for k, v in overrides.items() if v is not None}
    unknown = set(given) - set(Config.__dataclass_fields__)
    if unknown:
        raise ConfigError(f"unknown config field(s): {', '.join(sorted(unknown))}")
    return replace(cfg, **given).validate()
