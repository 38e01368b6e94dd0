from __future__ import annotations

from collections.abc import Iterable

from .grid import Grid, Location

# Fixed prime used to pick an index into the free cells. Not a random seed:
# the same occupied set always yields the same apple.
APPLE_PRIME = 15485863

# Returned when every cell is taken.
NO_PLACEMENT: Location = (-1, -1)


def free_cells(occupied: Iterable[Location], grid: Grid) -> list[Location]:
    taken = set(occupied)
    return [cell for cell in grid.all_cells() if cell not in taken]


def select_new_apple(occupied: Iterable[Location], grid: Grid) -> Location:
    free = free_cells(occupied, grid)
    if not free:
        return NO_PLACEMENT
    n = len(free)
    # Modulo n - 1, so the last free cell is never picked once n > 1.
    index = 0 if n <= 1 else APPLE_PRIME % (n - 1)
    return free[index]
