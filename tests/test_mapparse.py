import pytest

from solong.game import Enemy, Game
from solong.mapparse import (
    MapError,
    has_only_valid_chars,
    has_required_elements,
    has_valid_extension,
    is_rectangular,
    is_solvable,
    is_surrounded_by_walls,
    parse_map,
    read_map_lines,
)

GOOD = ["1111111", "1P0C0E1", "10M0001", "1111111"]


def _write(tmp_path, rows, name="map.ber", trailing=True):
    path = tmp_path / name
    text = "\n".join(rows) + ("\n" if trailing else "")
    path.write_text(text, encoding="latin-1")
    return path


def _prepared(rows):
    game = Game(rows)
    is_rectangular(game)
    has_required_elements(game)
    return game


@pytest.mark.parametrize(
    "name, expected",
    [
        ("map.ber", True),
        ("a.ber", True),
        (".ber", False),
        ("map.txt", False),
        ("map.ber.txt", False),
    ],
)
def test_has_valid_extension(name, expected):
    assert has_valid_extension(name) is expected


def test_read_map_lines_keeps_newlines(tmp_path):
    path = _write(tmp_path, GOOD)
    lines = read_map_lines(path)
    assert lines == [row + "\n" for row in GOOD]


def test_read_map_lines_missing_file(tmp_path):
    with pytest.raises(MapError, match="Failed to read map"):
        read_map_lines(tmp_path / "absent.ber")


def test_read_map_lines_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("")
    with pytest.raises(MapError, match="Failed to read map"):
        read_map_lines(path)


def test_is_rectangular_sets_width():
    game = Game(["11111\n", "1PCE1\n", "11111"])
    assert is_rectangular(game)
    assert game.width == len("11111")


def test_is_rectangular_rejects_ragged_rows():
    assert not is_rectangular(Game(["11111", "1PCE", "11111"]))


def test_is_rectangular_rejects_square():
    assert not is_rectangular(Game(["111", "1P1", "111"]))


def test_has_only_valid_chars():
    assert has_only_valid_chars(Game(GOOD))
    assert not has_only_valid_chars(Game(["11111", "1PXE1", "11111"]))


def test_has_required_elements_counts():
    game = Game(GOOD)
    assert has_required_elements(game)
    assert (game.player_x, game.player_y) == (1, 1)
    assert game.player_count == 1
    assert game.exit_count == 1
    assert game.enemy_count == 1


@pytest.mark.parametrize(
    "rows",
    [
        ["111111", "1P0CE1", "1P0001", "111111"],
        ["111111", "1P0C01", "111111"],
        ["111111", "1P00E1", "111111"],
        ["111111", "1PCEE1", "111111"],
    ],
)
def test_has_required_elements_rejects(rows):
    assert not has_required_elements(Game(rows))


def test_is_surrounded_by_walls():
    game = Game(GOOD)
    is_rectangular(game)
    assert is_surrounded_by_walls(game)


@pytest.mark.parametrize(
    "rows",
    [
        ["1110111", "1P0C0E1", "1111111"],
        ["1111111", "0P0C0E1", "1111111"],
        ["1111111", "1P0C0E0", "1111111"],
        ["1111111", "1P0C0E1", "1111101"],
    ],
)
def test_is_surrounded_by_walls_rejects_gaps(rows):
    game = Game(rows)
    is_rectangular(game)
    assert not is_surrounded_by_walls(game)


def test_is_solvable_reachable():
    assert is_solvable(_prepared(GOOD))


@pytest.mark.parametrize(
    "rows",
    [
        ["1111111", "1P1C0E1", "1111111"],
        ["1111111", "1PC01E1", "1111111"],
        ["1111111", "1PCME01", "1111111"],
    ],
)
def test_is_solvable_blocked(rows):
    assert not is_solvable(_prepared(rows))


def test_is_solvable_leaves_map_untouched():
    game = _prepared(GOOD)
    before = [row[:] for row in game.map]
    is_solvable(game)
    assert game.map == before


@pytest.mark.parametrize("trailing", [True, False])
def test_parse_map_success(tmp_path, trailing):
    game = parse_map(_write(tmp_path, GOOD, trailing=trailing))
    assert game.width == len(GOOD[0])
    assert game.height == len(GOOD)
    assert (game.player_x, game.player_y) == (1, 1)
    assert (game.exit_x, game.exit_y) == (5, 1)
    assert game.collectible_count == 1
    assert game.enemies == [Enemy(2, 2)]
    assert "".join(game.map[1]) == GOOD[1]


def test_parse_map_bad_extension_checked_first(tmp_path):
    with pytest.raises(MapError, match="Invalid file extension"):
        parse_map(tmp_path / "absent.txt")


@pytest.mark.parametrize(
    "rows, message",
    [
        (["1111111", "1P0C0E", "1111111"], "not rectangular"),
        (["1111111", "1P0X0E1", "1111111"], "invalid characters"),
        (["1111111", "1P000E1", "1111111"], "1P, 1E"),
        (["1111111", "0P0C0E1", "1111111"], "not closed by walls"),
        (["1111111", "1P1C0E1", "1111111"], "not solvable"),
    ],
)
def test_parse_map_errors(tmp_path, rows, message):
    with pytest.raises(MapError, match=message):
        parse_map(_write(tmp_path, rows))