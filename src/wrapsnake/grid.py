from __future__ import annotations

from typing import NamedTuple

Location = tuple[int, int]


class Grid(NamedTuple):
    """Fixed-size toroidal grid; coordinates wrap on both axes."""

    width: int
    height: int

    def wrap(self, x: int, y: int) -> Location:
        # Python's % already floors, so negative inputs land in range.
        return (x % self.width, y % self.height)

    def all_cells(self) -> list[Location]:
        # x-major: every y for x=0, then x=1, ...
        return [(x, y) for x in range(self.width) for y in range(self.height)]

    def contains(self, loc: Location) -> bool:
        x, y = loc
        return 0 <= x < self.width and 0 <= y < self.height
