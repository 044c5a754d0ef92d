"""Loading and validating .ber map files."""

from __future__ import annotations

import os

from .game import COLLECTIBLE, ENEMY, EXIT, PLAYER, WALL, Game
from .libft.reader import read_lines

VALID_TILES = frozenset("01CEPM")
_FILLED = "F"
_BLOCKING = frozenset({WALL, _FILLED, EXIT, ENEMY})


class MapError(ValueError):
    """A map file could not be loaded or is not a valid map."""


def has_valid_extension(filename: str | os.PathLike[str]) -> bool:
    """True when the name has at least one character before a ".ber" suffix."""
    name = os.fspath(filename)
    return len(name) >= 5 and name.endswith(".ber")


def read_map_lines(filename: str | os.PathLike[str]) -> list[str]:
    """Read the map file's lines, newlines kept; raise MapError if none."""
    try:
        lines = read_lines(filename)
    except OSError as exc:
        raise MapError("Failed to read map") from exc
    if not lines:
        raise MapError("Failed to read map")
    return lines


def is_rectangular(game: Game) -> bool:
    """All rows share one length, and the map is not square.

    Sets the game's width to the common row length.
    """
    if not game.map:
        return False
    expected = len(game.map[0])
    if any(len(row) != expected for row in game.map[1:]):
        return False
    game.width = expected
    return game.width != game.height


def has_only_valid_chars(game: Game) -> bool:
    """Every tile is one of 0, 1, C, E, P or M."""
    return all(tile in VALID_TILES for row in game.map for tile in row)


def has_required_elements(game: Game) -> bool:
    """Count the pieces; exactly one player, one exit and a collectible.

    Stores the counts and the player position (the last player found).
    """
    game.player_count = game.exit_count = 0
    game.collectible_count = game.enemy_count = 0
    for y, row in enumerate(game.map):
        for x, tile in enumerate(row):
            if tile == PLAYER:
                game.player_count += 1
                game.player_x, game.player_y = x, y
            elif tile == EXIT:
                game.exit_count += 1
            elif tile == COLLECTIBLE:
                game.collectible_count += 1
            elif tile == ENEMY:
                game.enemy_count += 1
    return (
        game.player_count == 1
        and game.exit_count == 1
        and game.collectible_count >= 1
    )


def is_surrounded_by_walls(game: Game) -> bool:
    """The first and last rows and columns are walls throughout."""
    if game.width <= 0 or not game.map:
        return False
    top, bottom = game.map[0], game.map[-1]
    if any(top[x] != WALL or bottom[x] != WALL for x in range(game.width)):
        return False
    return all(row[0] == WALL and row[game.width - 1] == WALL for row in game.map)


def _flood_fill(grid: list[list[str]], start_x: int, start_y: int, game: Game) -> None:
    stack = [(start_x, start_y)]
    while stack:
        x, y = stack.pop()
        if x < 0 or y < 0 or y >= game.height or x >= game.width:
            continue
        if grid[y][x] in _BLOCKING:
            continue
        grid[y][x] = _FILLED
        stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))


def _exit_reachable(grid: list[list[str]], x: int, y: int, game: Game) -> bool:
    if grid[y][x] != EXIT:
        return False
    return (
        (y > 0 and grid[y - 1][x] == _FILLED)
        or (y < game.height - 1 and grid[y + 1][x] == _FILLED)
        or (x > 0 and grid[y][x - 1] == _FILLED)
        or (x < game.width - 1 and grid[y][x + 1] == _FILLED)
    )


def is_solvable(game: Game) -> bool:
    """Every collectible and the exit can be reached from the player.

    Walls, enemies and the exit itself stop the walk; the exit counts as
    reached when it borders a reached tile.
    """
    grid = [row[:] for row in game.map]
    _flood_fill(grid, game.player_x, game.player_y, game)
    found_exit = False
    for y in range(game.height):
        for x in range(game.width):
            if grid[y][x] == COLLECTIBLE:
                return False
            if _exit_reachable(grid, x, y, game):
                found_exit = True
    return found_exit


def parse_map(filename: str | os.PathLike[str]) -> Game:
    """Load and validate a map file, returning the ready game state.

    Raises MapError describing the first check that fails.
    """
    if not has_valid_extension(filename):
        raise MapError("Invalid file extension")
    game = Game(read_map_lines(filename))
    if not is_rectangular(game):
        raise MapError("Map is not rectangular")
    if not has_only_valid_chars(game):
        raise MapError("Map contains invalid characters")
    if not has_required_elements(game):
        raise MapError("Map must have 1P, 1E and ≥1C")
    if not is_surrounded_by_walls(game):
        raise MapError("Map is not closed by walls")
    if not is_solvable(game):
        raise MapError("Map is not solvable")
    if game.enemy_count > 0:
        game.locate_enemies()
    game.find_exit()
    return game