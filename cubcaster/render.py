"""Drawing a frame: background, textured walls, minimap and weapon."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Protocol, Sequence

from .mapgrid import Grid
from .player import Player
from .raycast import TEX_HEIGHT, Hit, Ray, TextureSlice, cast_ray, texture_slice
from .xpm import TRANSPARENT

TILE_SIZE = 10
_HALF_TILE = TILE_SIZE // 2
_MINIMAP_OFFSET = 10
GUN_FRAMES = 5


class Image(Protocol):
    width: int
    height: int

    def pixel(self, x: int, y: int) -> int: ...


class Textures(Protocol):
    north: Image
    south: Image
    east: Image
    west: Image
    closed_door: Image
    open_door: Image
    guns: Sequence[Image]


def create_rgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and colour components into one integer."""
    return t << 24 | r << 16 | g << 8 | b


_MINIMAP_COLORS = {
    "1": create_rgb(0, 0, 0, 153),
    "0": create_rgb(0, 153, 204, 255),
    "C": create_rgb(0, 0, 204, 204),
    "O": create_rgb(0, 102, 255, 178),
}
_PLAYER_COLOR = create_rgb(0, 255, 255, 0)


@dataclass
class Frame:
    """An off-screen image of 32-bit pixels stored row after row."""

    width: int
    height: int
    pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("a frame needs a positive size")
        self.pixels = [0] * (self.width * self.height)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y); positions address the buffer linearly."""
        index = y * self.width + x
        if 0 <= index < len(self.pixels):
            self.pixels[index] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        return self.pixels[y * self.width + x]


def texture_color(image: Image, x: int, y: int) -> int:
    """Read a texture pixel; outside the image or transparent gives 0."""
    if 0 <= x < image.width and 0 <= y < image.height:
        color = image.pixel(x, y)
        return 0 if color == TRANSPARENT else color
    return 0


def choose_texture(ray: Ray, textures: Textures) -> Image:
    """Pick the texture for the surface a ray hit."""
    if ray.hit == Hit.CLOSED_DOOR:
        return textures.closed_door
    if ray.hit == Hit.OPEN_DOOR:
        return textures.open_door
    if ray.side == 1 and ray.dir_y <= 0:
        return textures.north
    if ray.side == 0 and ray.dir_x > 0:
        return textures.south
    if ray.side == 0:
        return textures.east
    return textures.west


def draw_wall(
    frame: Frame, ray: Ray, tex: TextureSlice, x: int, textures: Textures
) -> None:
    """Draw one textured wall column."""
    image = choose_texture(ray, textures)
    pos = tex.tex_pos
    for y in range(tex.draw_start + 1, tex.draw_end):
        tex_y = int(pos) & (TEX_HEIGHT - 1)
        pos += tex.step
        frame.put_pixel(x, y, texture_color(image, tex.tex_x, tex_y))


def fill_background(frame: Frame, ceiling: int, floor: int) -> None:
    """Fill the top half with the ceiling colour and the bottom with the floor."""
    half = frame.width * frame.height // 2
    frame.pixels[:half] = [ceiling & 0xFFFFFFFF] * half
    frame.pixels[half:2 * half] = [floor & 0xFFFFFFFF] * half


def draw_square(frame: Frame, i: float, j: float, color: int) -> None:
    """Draw the minimap tile for grid cell (i, j)."""
    rows = range(int(i * TILE_SIZE - _HALF_TILE), math.ceil(i * TILE_SIZE + _HALF_TILE))
    cols = range(int(j * TILE_SIZE - _HALF_TILE), math.ceil(j * TILE_SIZE + _HALF_TILE))
    for k in rows:
        for col in cols:
            frame.put_pixel(col + _MINIMAP_OFFSET, k + _MINIMAP_OFFSET, color)


def draw_minimap(frame: Frame, grid: Grid, player: Player) -> None:
    """Draw the map cells and the player in the top-left corner."""
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            color = _MINIMAP_COLORS.get(cell)
            if color is not None:
                draw_square(frame, i, j, color)
    draw_square(frame, player.pos_x - 0.5, player.pos_y - 0.5, _PLAYER_COLOR)


def draw_gun(frame: Frame, image: Image) -> None:
    """Draw a weapon sprite at the bottom centre, skipping empty pixels."""
    left = frame.width // 2 - image.width // 2
    right = frame.width // 2 + image.width // 2
    top = frame.height - image.height
    for px, x in enumerate(range(left, right)):
        for py, y in enumerate(range(top, frame.height)):
            color = texture_color(image, px, py)
            if color != 0:
                frame.put_pixel(x, y, color)


@dataclass
class GunAnimation:
    """Steps through the firing frames once each time the gun is fired."""

    playing: bool = False
    index: int = 0

    def fire(self) -> None:
        """Start the firing animation."""
        self.playing = True

    def draw(self, frame: Frame, guns: Sequence[Image]) -> None:
        """Draw the current weapon frame and advance the animation."""
        if self.playing:
            draw_gun(frame, guns[self.index])
            self.index += 1
            if self.index == GUN_FRAMES:
                self.index = 0
                self.playing = False
        else:
            draw_gun(frame, guns[0])


def render_frame(
    frame: Frame,
    grid: Grid,
    player: Player,
    textures: Textures,
    gun_anim: GunAnimation,
    ceiling: int,
    floor: int,
) -> None:
    """Render a whole frame into ``frame``."""
    fill_background(frame, ceiling, floor)
    for x in range(frame.width):
        ray = cast_ray(grid, player, x, frame.width)
        draw_wall(frame, ray, texture_slice(ray, player, frame.height), x, textures)
    draw_minimap(frame, grid, player)
    gun_anim.draw(frame, textures.guns)