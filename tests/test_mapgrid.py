import pytest

from cubcaster.errors import MapError
from cubcaster.identifiers import Color
from cubcaster.mapgrid import (
    Grid,
    check_borders,
    check_doors,
    load_scene,
    read_lines,
    tabs_to_spaces,
)

HEADER = (
    "NO ./textures/north.xpm\n"
    "SO ./textures/south.xpm\n"
    "WE ./textures/west.xpm\n"
    "EA ./textures/east.xpm\n"
    "\n"
    "F 220,100,0\n"
    "C 225,30,0\n"
    "\n"
)

MAP = "111111\n100001\n10N001\n111111\n"


def write(tmp_path, text, name="scene.cub"):
    path = tmp_path / name
    path.write_text(text, encoding="latin-1")
    return path


def test_load_valid_scene(tmp_path):
    scene = load_scene(write(tmp_path, HEADER + MAP))
    assert scene.types.north == "./textures/north.xpm"
    assert scene.types.floor_color == Color(220, 100, 0)
    assert scene.types.ceiling_color == Color(225, 30, 0)
    assert scene.grid.rows == ["111111", "100001", "10N001", "111111"]
    assert len(scene.grid) == 4


def test_trailing_blank_lines_are_dropped(tmp_path):
    scene = load_scene(write(tmp_path, HEADER + MAP + "\n\n   \n"))
    assert len(scene.grid) == 4


def test_wrong_extension(tmp_path):
    with pytest.raises(MapError):
        load_scene(write(tmp_path, HEADER + MAP, name="scene.txt"))


def test_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_lines(tmp_path / "absent.cub")


def test_empty_file(tmp_path):
    with pytest.raises(MapError):
        read_lines(write(tmp_path, ""))


def test_read_lines_strips_endings(tmp_path):
    assert read_lines(write(tmp_path, "a\nb\n")) == ["a", "b"]
    assert read_lines(write(tmp_path, "a\nb")) == ["a", "b"]


def test_missing_identifier(tmp_path):
    text = HEADER.replace("C 225,30,0\n", "") + MAP
    with pytest.raises(MapError):
        load_scene(write(tmp_path, text))


def test_open_border(tmp_path):
    text = HEADER + MAP.replace("100001", "100000")
    with pytest.raises(MapError):
        load_scene(write(tmp_path, text))


def test_blank_line_inside_map(tmp_path):
    text = HEADER + "111111\n100001\n\n10N001\n111111\n"
    with pytest.raises(MapError):
        load_scene(write(tmp_path, text))


def test_two_players(tmp_path):
    text = HEADER + MAP.replace("100001", "1S0001")
    with pytest.raises(MapError):
        load_scene(write(tmp_path, text))


def test_tabs_to_spaces():
    result = tabs_to_spaces(["1\t1", "\t\t"])
    assert result[0] == "1    1"
    assert all("\t" not in row for row in result)
    assert len(result[1]) == 8


def test_check_borders_accepts_enclosed():
    check_borders(["111", "101", "111"])
    assert Grid(["111", "101", "111"])[(1, 1)] == "0"


@pytest.mark.parametrize(
    "rows",
    [
        ["101", "111"],
        ["111", "10 ", "111"],
        ["111", "0 1", "111"],
        ["1111", "1001", "111"],
    ],
)
def test_check_borders_rejects_open(rows):
    with pytest.raises(MapError):
        check_borders(rows)


def test_check_doors_valid():
    rows = ["1111", "1C01", "1111"]
    check_doors(rows)
    check_doors(["111", "1O1", "101", "111"])
    assert Grid(rows)[(1, 1)] == "C"


def test_check_doors_invalid():
    with pytest.raises(MapError):
        check_doors(["11111", "10C01", "10001", "11111"])


def test_grid_get_set_and_iterate():
    grid = Grid(["111", "1C1", "111"])
    grid[(1, 1)] = "O"
    assert grid[(1, 1)] == "O"
    assert grid[1] == "1O1"
    assert list(grid) == ["111", "1O1", "111"]
    assert grid.get(5, 5) == " "
    assert grid == Grid(["111", "1O1", "111"])


def test_grid_bounds():
    grid = Grid(["11"])
    assert grid[(0, 1)] == "1"
    with pytest.raises(IndexError):
        grid[(0, 2)]
    with pytest.raises(IndexError):
        grid[(-1, 0)]
    with pytest.raises(ValueError):
        grid[(0, 0)] = "00"
    assert grid.rows == ["11"]
    assert list(grid) == ["11"]