"""The grid of tiles the game is played on."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TileType(Enum):
    EMPTY = auto()
    TOWER = auto()
    PATH = auto()
    START = auto()
    GOAL = auto()


_WALKABLE = frozenset({TileType.EMPTY, TileType.PATH, TileType.START})


@dataclass
class Tile:
    """A single cell of the map."""

    x: int
    y: int
    type: TileType = TileType.EMPTY

    @property
    def is_walkable(self) -> bool:
        """Whether enemies may move across this tile."""
        return self.type in _WALKABLE


class TileMap:
    """A width by height grid of tiles with a start and a goal."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._grid = [[Tile(x, y) for x in range(width)] for y in range(height)]
        self._start: tuple[int, int] | None = None
        self._goal: tuple[int, int] | None = None

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def set_start(self, x: int, y: int) -> None:
        """Mark the tile at (x, y) as the start."""
        if not self._contains(x, y):
            raise ValueError(f"Invalid start position ({x}, {y})")
        self._grid[y][x].type = TileType.START
        self._start = (x, y)

    def set_goal(self, x: int, y: int) -> None:
        """Mark the tile at (x, y) as the goal."""
        if not self._contains(x, y):
            raise ValueError(f"Invalid goal position ({x}, {y})")
        self._grid[y][x].type = TileType.GOAL
        self._goal = (x, y)

    @property
    def grid(self) -> list[list[Tile]]:
        """The tiles, row by row."""
        return self._grid

    @property
    def start(self) -> tuple[int, int] | None:
        return self._start

    @property
    def goal(self) -> tuple[int, int] | None:
        return self._goal