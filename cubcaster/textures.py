"""Loading the wall, door and weapon textures of a scene."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from .errors import TextureError
from .identifiers import SceneTypes
from .xpm import XpmError, XpmImage, load_xpm

TEXTURE_SIZE = 64
CLOSED_DOOR_FILE = "textures/CloseDoor.xpm"
OPEN_DOOR_FILE = "textures/OpenDoor.xpm"
GUN_FILES = tuple(f"textures/{number}.xpm" for number in range(1, 6))

WALL_ERROR = "Coudn't open wall textures"
DOOR_ERROR = "Coudn't open door textures"
GUN_ERROR = "Couldn't open texture!"


@dataclass(frozen=True)
class TextureSet:
    """Every image the renderer needs."""

    north: XpmImage
    south: XpmImage
    west: XpmImage
    east: XpmImage
    closed_door: XpmImage
    open_door: XpmImage
    guns: tuple[XpmImage, ...]


def _load(path: str | PathLike[str], message: str, square: bool) -> XpmImage:
    try:
        image = load_xpm(path)
    except XpmError as exc:
        raise TextureError(message) from exc
    if square and (image.width, image.height) != (TEXTURE_SIZE, TEXTURE_SIZE):
        raise TextureError(message)
    return image


def load_wall_texture(path: str | PathLike[str]) -> XpmImage:
    """Load a wall texture, which must be 64 by 64 pixels."""
    return _load(path, WALL_ERROR, square=True)


def _wall(base: Path, path: str | None) -> XpmImage:
    if path is None:
        raise TextureError(WALL_ERROR)
    return load_wall_texture(base / path)


def load_textures(types: SceneTypes, base_dir: str | PathLike[str] = ".") -> TextureSet:
    """Load the scene's wall textures and the fixed door and weapon images.

    Relative paths are taken from ``base_dir``.
    """
    base = Path(base_dir)
    south = _wall(base, types.south)
    north = _wall(base, types.north)
    west = _wall(base, types.west)
    east = _wall(base, types.east)
    closed_door = _load(base / CLOSED_DOOR_FILE, DOOR_ERROR, square=True)
    open_door = _load(base / OPEN_DOOR_FILE, DOOR_ERROR, square=True)
    guns = tuple(_load(base / name, GUN_ERROR, square=False) for name in GUN_FILES)
    return TextureSet(
        north=north,
        south=south,
        west=west,
        east=east,
        closed_door=closed_door,
        open_door=open_door,
        guns=guns,
    )