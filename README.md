# solong

The game state and map rules of a small top-down puzzle game: a player
walks a walled map, picks up every coin, keeps away from the enemies and
steps onto the exit. This package loads `.ber` map files, checks that they
describe a playable level and holds the resulting game state. It needs
nothing beyond the standard library.

## Installing

```
pip install .
```

## Map format

A map is a plain text file, one row per line, built from these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | Wall         |
| `0`  | Floor        |
| `P`  | Player start |
| `E`  | Exit         |
| `C`  | Coin         |
| `M`  | Enemy        |

`solong.mapparse.parse_map` accepts a map only if:

- the file name ends in `.ber` with at least one character before it;
- the file has at least one line;
- every row has the same length, and the map is not square;
- it contains only the characters above;
- it holds exactly one `P`, exactly one `E` and at least one `C`;
- the outer border is all walls;
- every coin can be reached from the start, and the exit borders a
  reachable tile, without crossing walls or enemies.

Example:

```
1111111111
1P0C000001
10001110E1
1C00M00001
1111111111
```

## Loading a map

```python
from solong.mapparse import MapError, parse_map

try:
    game = parse_map("levels/first.ber")
except MapError as err:
    print("Error:", err)
else:
    print(game.width, game.height, game.collectible_count)
    print(game.player_x, game.player_y, game.exit_x, game.exit_y)
    print(game.enemies)
```

`MapError` is a `ValueError` whose message names the first rule the map
broke, for example `Map is not closed by walls`. The single checks
(`has_valid_extension`, `read_map_lines`, `is_rectangular`,
`has_only_valid_chars`, `has_required_elements`, `is_surrounded_by_walls`,
`is_solvable`) are available on their own and return `True` or `False`,
except `read_map_lines`, which returns the file's lines or raises
`MapError`.

## Game state

`solong.game.Game` takes the map as a list of rows (strings or lists of
one-character tiles; one trailing newline per row is dropped). It keeps
the grid, its `width` and `height`, the piece counts, the player and exit
positions, the move counter and a list of `Enemy` positions.

- `tile(x, y)` and `set_tile(x, y, tile)` read and replace one tile,
  raising `IndexError` outside the map.
- `find_exit()` records and returns the first exit position, or `None`.
- `locate_enemies()` collects every enemy tile into `enemies`.

The module also defines the tile characters (`WALL`, `FLOOR`, `PLAYER`,
`EXIT`, `COLLECTIBLE`, `ENEMY`) and `TILE_SIZE = 64`.

## Helpers

`solong.libft` holds small general helpers used by the map loader and
available on their own:

- `chars`: ASCII classification (`is_alpha`, `is_digit`, …), case
  conversion, `atoi` and `itoa`.
- `memory`: byte operations on `bytearray` (`memset`, `memcpy`,
  `memmove`, `memcmp`, `memchr`, `bzero`, `calloc`).
- `text`: `split`, `strchr`, `strrchr`, `strlcpy`, `strlcat`, `strncmp`,
  `strnstr`, `strtrim`, `substr`, `strmapi`, `striteri` and `strjoin`.
- `lists`: `LinkedList` of `Node`s with `push_front`, `push_back`, `last`,
  `iterate`, `clear` and `map`.
- `reader`: `LineReader`, which reads a stream line by line through a
  fixed-size buffer, and `read_lines(path)`.
- `output`: `sprintf` / `printf` for `%s %c %d %i %u %x %X %p %%`,
  `format_hex`, `format_unsigned`, `format_pointer` and the `put_*`
  writers.

## What it does not do

The package has no game window, no keyboard handling and no command to
start a game. It does not move the player or decide when a game is won or
lost; it stops at loading, validating and holding the state of a map.