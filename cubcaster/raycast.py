"""Casting one ray per screen column through the map grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from .mapgrid import Grid
from .player import Player

TEX_WIDTH = 64
TEX_HEIGHT = 64
FAR = 1e30
_MAX_LINE = 2**31 - 1


class Hit(IntEnum):
    """What a ray stopped on."""

    NONE = 0
    WALL = 1
    CLOSED_DOOR = 2
    OPEN_DOOR = 3


_HIT_CELLS = {"1": Hit.WALL, "C": Hit.CLOSED_DOOR, "O": Hit.OPEN_DOOR}


@dataclass
class Ray:
    """The state of a ray after it has been cast."""

    camera_x: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    map_x: int = 0
    map_y: int = 0
    step_x: int = 0
    step_y: int = 0
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    delta_dist_x: float = 0.0
    delta_dist_y: float = 0.0
    side: int = 0
    hit: Hit = Hit.NONE
    wall_dist: float = 0.0


@dataclass(frozen=True)
class TextureSlice:
    """Where a wall column is drawn on screen and how it maps to its texture."""

    tex_x: int
    draw_start: int
    draw_end: int
    line_height: int
    step: float
    tex_pos: float


def cast_ray(grid: Grid, player: Player, x: int, width: int) -> Ray:
    """Cast the ray for screen column ``x`` until it hits a wall or door."""
    camera_x = 2 * x / width - 1
    ray = Ray(
        camera_x=camera_x,
        dir_x=player.dir_x + player.plane_x * camera_x,
        dir_y=player.dir_y + player.plane_y * camera_x,
        map_x=int(player.pos_x),
        map_y=int(player.pos_y),
    )
    ray.delta_dist_x = FAR if ray.dir_x == 0 else abs(1 / ray.dir_x)
    ray.delta_dist_y = FAR if ray.dir_y == 0 else abs(1 / ray.dir_y)

    if ray.dir_x < 0:
        ray.step_x = -1
        ray.side_dist_x = (player.pos_x - ray.map_x) * ray.delta_dist_x
    else:
        ray.step_x = 1
        ray.side_dist_x = (ray.map_x + 1.0 - player.pos_x) * ray.delta_dist_x
    if ray.dir_y < 0:
        ray.step_y = -1
        ray.side_dist_y = (player.pos_y - ray.map_y) * ray.delta_dist_y
    else:
        ray.step_y = 1
        ray.side_dist_y = (ray.map_y + 1.0 - player.pos_y) * ray.delta_dist_y

    while ray.hit == Hit.NONE:
        if ray.side_dist_x < ray.side_dist_y:
            ray.side_dist_x += ray.delta_dist_x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.side_dist_y += ray.delta_dist_y
            ray.map_y += ray.step_y
            ray.side = 1
        ray.hit = _HIT_CELLS.get(grid[(ray.map_x, ray.map_y)], Hit.NONE)

    if ray.side == 0:
        ray.wall_dist = ray.side_dist_x - ray.delta_dist_x
    else:
        ray.wall_dist = ray.side_dist_y - ray.delta_dist_y
    return ray


def texture_slice(ray: Ray, player: Player, screen_height: int) -> TextureSlice:
    """Work out the screen span and texture column for a cast ray."""
    height = screen_height
    half = height // 2
    line_height = int(height / ray.wall_dist) if ray.wall_dist > 0 else _MAX_LINE
    draw_start = max(-(line_height // 2) + half, 0)
    draw_end = line_height // 2 + half
    if draw_end >= height:
        draw_end = height - 1

    if ray.side == 0:
        wall_x = player.pos_y + ray.wall_dist * ray.dir_y
    else:
        wall_x = player.pos_x + ray.wall_dist * ray.dir_x
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * TEX_WIDTH)
    if (ray.side == 0 and ray.dir_x > 0) or (ray.side == 1 and ray.dir_y < 0):
        tex_x = TEX_WIDTH - tex_x - 1

    step = TEX_HEIGHT / line_height if line_height else math.inf
    tex_pos = (draw_start - half + line_height // 2) * step
    return TextureSlice(tex_x, draw_start, draw_end, line_height, step, tex_pos)