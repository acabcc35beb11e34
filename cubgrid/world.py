"""Top-down grid world: player position, movement and map pixels."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Optional

CELL = 32
FOV = 60
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 512
STEP = 2

GRID_COLOR = 0xFFFFFF
FLOOR_COLOR = 0x878787
WALL_COLOR = 0xC09E06
PLAYER_COLOR = 0x000000

FLOOR = "0"
WALL = "1"


class Key(IntEnum):
    """Key codes understood by the world."""

    W = 119
    A = 97
    S = 115
    D = 100
    UP = 65362
    LEFT = 65361
    DOWN = 65364
    RIGHT = 653623
    ESC = 65307


def _cell_index(coord: float) -> int:
    return math.trunc(math.trunc(coord) / CELL)


@dataclass
class World:
    """A grid map of cells and a player moving over it in pixel units."""

    rows: tuple[str, ...]
    px: float
    py: float

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "World":
        """Build a world from map rows, placing the player at the centre."""
        grid = tuple(rows)
        if not grid or not grid[0]:
            raise ValueError("map must have at least one non-empty row")
        height, width = len(grid), len(grid[0])
        py = height * CELL // 2 - CELL // 2
        px = width * CELL // 2 - CELL // 2
        return cls(grid, float(px), float(py))

    def cell_at(self, x: float, y: float) -> Optional[str]:
        """Return the map character under pixel (x, y), or None off the map."""
        row, col = _cell_index(y), _cell_index(x)
        if not 0 <= row < len(self.rows):
            return None
        line = self.rows[row]
        if not 0 <= col < len(line):
            return None
        return line[col]

    def move(self, key: int) -> bool:
        """Step the player for ``key`` if the target is floor; report whether it moved."""
        deltas = {
            Key.W: (0, -STEP),
            Key.S: (0, STEP),
            Key.D: (STEP, 0),
            Key.A: (-STEP, 0),
        }
        try:
            dx, dy = deltas[Key(key)]
        except (ValueError, KeyError):
            return False
        if self.cell_at(self.px + dx, self.py + dy) != FLOOR:
            return False
        self.px += dx
        self.py += dy
        return True

    def pixels(self) -> Iterator[tuple[int, int, int]]:
        """Yield (x, y, colour) for every painted pixel of the map."""
        limit = self.width * CELL
        for y in range(self.height * CELL):
            line = self.rows[y // CELL]
            for x in range(min(len(line) * CELL, limit + 1)):
                if x % CELL == 0 or y % CELL == 0:
                    yield x, y, GRID_COLOR
                else:
                    char = line[x // CELL]
                    if char == FLOOR:
                        yield x, y, FLOOR_COLOR
                    elif char == WALL:
                        yield x, y, WALL_COLOR

    def player_pixels(self) -> list[tuple[int, int, int]]:
        """Return the 2x2 block of pixels marking the player."""
        x, y = math.trunc(self.px), math.trunc(self.py)
        return [
            (x, y, PLAYER_COLOR),
            (x + 1, y, PLAYER_COLOR),
            (x, y + 1, PLAYER_COLOR),
            (x + 1, y + 1, PLAYER_COLOR),
        ]