"""The player's position, view direction and movement on the grid."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import MapError
from .mapgrid import Grid

WALK_SPEED = 0.15
STRAFE_SPEED = 0.12
ROT_SPEED = 0.06
PLANE = 0.66
WALL = "1"
CLOSED_DOOR = "C"
OPEN_DOOR = "O"

# facing -> (dir_x, dir_y, plane_x, plane_y)
_FACINGS = {
    "N": (-1.0, 0.0, 0.0, PLANE),
    "S": (1.0, 0.0, 0.0, -PLANE),
    "W": (0.0, -1.0, -PLANE, 0.0),
    "E": (0.0, 1.0, PLANE, 0.0),
}


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass
class Player:
    """Position (row, column), view direction and camera plane."""

    pos_x: float
    pos_y: float
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0

    @classmethod
    def from_grid(cls, grid: Grid) -> "Player":
        """Place the player at the first start cell and clear that cell."""
        for r, row in enumerate(grid):
            for c, ch in enumerate(row):
                if ch in _FACINGS:
                    dir_x, dir_y, plane_x, plane_y = _FACINGS[ch]
                    grid[(r, c)] = "0"
                    return cls(r + 0.5, c + 0.5, dir_x, dir_y, plane_x, plane_y)
        raise MapError("Invalid map(no player)!")

    def _step(self, grid: Grid, dx: float, dy: float) -> None:
        new_x = self.pos_x + dx
        new_y = self.pos_y + dy
        if grid[(int(new_x), int(self.pos_y))] != WALL:
            self.pos_x = new_x
        if grid[(int(self.pos_x), int(new_y))] != WALL:
            self.pos_y = new_y

    def move_forward(self, grid: Grid) -> None:
        """Walk along the view direction unless a wall is in the way."""
        self._step(grid, self.dir_x * WALK_SPEED, self.dir_y * WALK_SPEED)

    def move_back(self, grid: Grid) -> None:
        """Walk against the view direction unless a wall is in the way."""
        self._step(grid, -self.dir_x * WALK_SPEED, -self.dir_y * WALK_SPEED)

    def move_left(self, grid: Grid) -> None:
        """Strafe to the left."""
        self._step(grid, -self.dir_y * STRAFE_SPEED, self.dir_x * STRAFE_SPEED)

    def move_right(self, grid: Grid) -> None:
        """Strafe to the right."""
        self._step(grid, self.dir_y * STRAFE_SPEED, -self.dir_x * STRAFE_SPEED)

    def _rotate(self, angle: float) -> None:
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def rotate_left(self) -> None:
        """Turn by one rotation step in the negative direction."""
        self._rotate(-ROT_SPEED)

    def rotate_right(self) -> None:
        """Turn by one rotation step in the positive direction."""
        self._rotate(ROT_SPEED)

    def toggle_door(self, grid: Grid) -> None:
        """Open or close the door in the cell the player faces."""
        x = int(self.pos_x) + _round_half_away(self.dir_x)
        y = int(self.pos_y) + _round_half_away(self.dir_y)
        cell = grid[(x, y)]
        if cell == CLOSED_DOOR:
            grid[(x, y)] = OPEN_DOOR
        elif cell == OPEN_DOOR:
            grid[(x, y)] = CLOSED_DOOR


@dataclass
class MouseLook:
    """Turns the player as the mouse moves horizontally."""

    past_view: int = 0

    def update(self, x: int, player: Player) -> None:
        """Rotate ``player`` according to the move from the last x position."""
        if x < self.past_view:
            player.rotate_right()
        elif x > self.past_view:
            player.rotate_left()
        self.past_view = x