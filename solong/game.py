"""Game state: the tile grid, player, exit and enemy positions, move counter."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

TILE_SIZE = 64

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
ENEMY = "M"


@dataclass
class Enemy:
    """Grid position of one enemy."""

    x: int
    y: int


@dataclass
class Game:
    """State of one game.

    The map is a list of rows, each a list of one-character tiles. Rows may
    be given as strings; a single trailing newline on a row is dropped.
    Height is the number of rows and width starts as the first row's length.
    """

    map: list[list[str]] = field(default_factory=list)
    player_count: int = 0
    exit_count: int = 0
    collectible_count: int = 0
    enemy_count: int = 0
    player_x: int = 0
    player_y: int = 0
    exit_x: int = 0
    exit_y: int = 0
    moves_count: int = 0
    enemies: list[Enemy] = field(default_factory=list)
    width: int = field(init=False, default=0)
    height: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.map = [self._as_row(row) for row in self.map]
        self.height = len(self.map)
        self.width = len(self.map[0]) if self.map else 0

    @staticmethod
    def _as_row(row: str | Sequence[str] | Iterable[str]) -> list[str]:
        if isinstance(row, str):
            return list(row.removesuffix("\n"))
        return list(row)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= y < self.height and 0 <= x < len(self.map[y])):
            raise IndexError(f"position ({x}, {y}) is outside the map")

    def tile(self, x: int, y: int) -> str:
        """Return the tile at column x, row y."""
        self._check(x, y)
        return self.map[y][x]

    def set_tile(self, x: int, y: int, tile: str) -> None:
        """Replace the tile at column x, row y."""
        if len(tile) != 1:
            raise ValueError(f"a tile is a single character, got {tile!r}")
        self._check(x, y)
        self.map[y][x] = tile

    def find_exit(self) -> tuple[int, int] | None:
        """Record the position of the first exit tile, scanning row by row.

        Returns that position, or None (leaving the stored one unchanged)
        when the map holds no exit.
        """
        for y, row in enumerate(self.map):
            for x, tile in enumerate(row):
                if tile == EXIT:
                    self.exit_x, self.exit_y = x, y
                    return x, y
        return None

    def locate_enemies(self) -> list[Enemy]:
        """Collect every enemy tile within the map width, row by row."""
        self.enemies = [
            Enemy(x, y)
            for y, row in enumerate(self.map)
            for x, tile in enumerate(row[: self.width])
            if tile == ENEMY
        ]
        return self.enemies