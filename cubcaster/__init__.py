"""Textured raycasting engine that loads, validates and plays .cub scene files."""

__version__ = "0.1.0"
__all__ = [
    "errors",
    "game",
    "identifiers",
    "mapgrid",
    "player",
    "raycast",
    "render",
    "textures",
    "textutil",
    "xpm",
]