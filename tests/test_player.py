import math

import pytest

from cubcaster.errors import MapError
from cubcaster.mapgrid import Grid
from cubcaster.player import (
    PLANE,
    STRAFE_SPEED,
    WALK_SPEED,
    MouseLook,
    Player,
)

ROOM = ["111111", "100001", "100001", "100001", "111111"]


def room_player(facing="N"):
    rows = list(ROOM)
    rows[2] = "10" + facing + "001"
    grid = Grid(rows)
    return grid, Player.from_grid(grid)


@pytest.mark.parametrize(
    "facing, expected",
    [
        ("N", (-1.0, 0.0, 0.0, PLANE)),
        ("S", (1.0, 0.0, 0.0, -PLANE)),
        ("W", (0.0, -1.0, -PLANE, 0.0)),
        ("E", (0.0, 1.0, PLANE, 0.0)),
    ],
)
def test_from_grid_directions(facing, expected):
    grid, player = room_player(facing)
    assert (player.dir_x, player.dir_y, player.plane_x, player.plane_y) == expected
    assert (player.pos_x, player.pos_y) == (2.5, 2.5)
    assert grid[(2, 2)] == "0"


def test_from_grid_without_player():
    with pytest.raises(MapError):
        Player.from_grid(Grid(["111", "101", "111"]))


def test_move_forward_and_back():
    grid, player = room_player("N")
    player.move_forward(grid)
    assert player.pos_x == pytest.approx(2.5 - WALK_SPEED)
    assert player.pos_y == pytest.approx(2.5)
    player.move_back(grid)
    assert player.pos_x == pytest.approx(2.5)


def test_strafe_left_and_right():
    grid, player = room_player("N")
    player.move_left(grid)
    assert player.pos_y == pytest.approx(2.5 - STRAFE_SPEED)
    assert player.pos_x == pytest.approx(2.5)
    player.move_right(grid)
    assert player.pos_y == pytest.approx(2.5)


def test_walls_block_movement():
    grid, player = room_player("N")
    for _ in range(50):
        player.move_forward(grid)
        player.move_left(grid)
        assert grid[(int(player.pos_x), int(player.pos_y))] != "1"
    assert player.pos_x >= 1.0
    assert player.pos_y >= 1.0


def test_rotation_round_trip():
    _, player = room_player("E")
    start = (player.dir_x, player.dir_y, player.plane_x, player.plane_y)
    player.rotate_left()
    player.rotate_right()
    after = (player.dir_x, player.dir_y, player.plane_x, player.plane_y)
    assert after == pytest.approx(start)


def test_rotation_preserves_lengths():
    _, player = room_player("S")
    for _ in range(37):
        player.rotate_right()
    assert math.hypot(player.dir_x, player.dir_y) == pytest.approx(1.0)
    assert math.hypot(player.plane_x, player.plane_y) == pytest.approx(PLANE)
    dot = player.dir_x * player.plane_x + player.dir_y * player.plane_y
    assert dot == pytest.approx(0.0)


def test_toggle_door():
    grid = Grid(["1111", "1EC1", "1111"])
    player = Player.from_grid(grid)
    player.toggle_door(grid)
    assert grid[(1, 2)] == "O"
    player.toggle_door(grid)
    assert grid[(1, 2)] == "C"


def test_toggle_door_ignores_walls():
    grid = Grid(["111", "1N1", "111"])
    player = Player.from_grid(grid)
    player.toggle_door(grid)
    assert grid.rows == ["111", "101", "111"]


def test_toggle_door_rounds_half_away_from_zero():
    grid = Grid(["111", "1C1", "101", "111"])
    player = Player(pos_x=2.5, pos_y=1.5, dir_x=-0.5, dir_y=0.0)
    player.toggle_door(grid)
    assert grid[(1, 1)] == "O"


def test_mouse_look():
    _, player = room_player("N")
    _, expected = room_player("N")
    look = MouseLook()
    look.update(10, player)
    expected.rotate_left()
    assert player == expected
    look.update(10, player)
    assert player == expected
    look.update(3, player)
    expected.rotate_right()
    assert player == expected
    assert look.past_view == 3