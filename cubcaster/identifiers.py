"""Parsing of scene type identifiers and the first checks on map lines."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import dropwhile
from typing import Callable, Iterable

from .errors import MapError
from .textutil import count_fields, is_space, parse_component, split_fields, split_words

MAP_CHARS = "10NSWEOC"
PLAYER_CHARS = "NSWE"
FLOOR_CHARS = "10OC"

_IDENTIFIER_MARKERS = ("NO", "SO", "WE", "EA", "F", "C")
_HEADER_WORDS = ("north", "south", "west", "east", "F", "C")
_COLOR_KEYS = ("F", "C")

_TYPE_ERROR = "Type identifier error!"


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..255."""

    r: int
    g: int
    b: int

    def to_int(self) -> int:
        """Return the colour packed as 0x00RRGGBB."""
        return (self.r << 16) | (self.g << 8) | self.b


@dataclass
class SceneTypes:
    """Texture paths and colours declared at the top of a scene file."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor_color: Color | None = None
    ceiling_color: Color | None = None

    def is_complete(self) -> bool:
        """Return True when every identifier has been given."""
        return all(
            value is not None
            for value in (
                self.north,
                self.south,
                self.west,
                self.east,
                self.floor_color,
                self.ceiling_color,
            )
        )


def type_name_matches(key: str, expected: str, value: str) -> bool:
    """Check that ``key`` is ``expected`` and ``value`` has the right shape.

    Colour identifiers need three comma-separated fields with no empty one;
    texture identifiers need a path ending in ``.xpm``.
    """
    if key != expected:
        return False
    if expected in _COLOR_KEYS:
        return count_fields(value, ",") == 3 and ",," not in value
    return value.endswith(".xpm")


def parse_color(text: str) -> Color:
    """Parse ``R,G,B`` into a Color, raising ValueError when invalid."""
    fields = split_fields(text, ",")
    if len(fields) != 3:
        raise ValueError(f"expected three colour components in {text!r}")
    r, g, b = (parse_component(field) for field in fields)
    return Color(r, g, b)


def has_map_char(line: str) -> bool:
    """Return True if ``line`` holds any map character."""
    return any(ch in line for ch in MAP_CHARS)


def _is_content(line: str) -> bool:
    return has_map_char(line) or any(word in line for word in _HEADER_WORDS)


def drop_leading_blank_lines(lines: Iterable[str]) -> list[str]:
    """Drop lines at the start that carry neither map nor header content."""
    return list(dropwhile(lambda line: not _is_content(line), lines))


def drop_trailing_blank_lines(lines: Iterable[str]) -> list[str]:
    """Cut the map at the first line without map characters.

    The first line is never inspected. A line with map characters after a
    blank one is an error.
    """
    lines = list(lines)
    for index, line in enumerate(lines[1:], start=1):
        if not has_map_char(line):
            if any(has_map_char(rest) for rest in lines[index + 1:]):
                raise MapError("Invalid map(free line in map)")
            return lines[:index]
    return lines


def check_valid_chars(lines: Iterable[str]) -> tuple[int, int]:
    """Check that the map holds only allowed characters and one player.

    Returns the (row, column) of the player's start.
    """
    player: tuple[int, int] | None = None
    for row, line in enumerate(lines):
        for col, ch in enumerate(line):
            if is_space(ch) or ch in FLOOR_CHARS:
                continue
            if ch in PLAYER_CHARS and player is None:
                player = (row, col)
                continue
            raise MapError("Invalid map(unacceptable char)!")
    if player is None:
        raise MapError("Invalid map(no player)!")
    return player


_IDENTIFIERS: tuple[tuple[str, str, Callable[[str], object]], ...] = (
    ("NO", "north", str),
    ("SO", "south", str),
    ("WE", "west", str),
    ("EA", "east", str),
    ("F", "floor_color", parse_color),
    ("C", "ceiling_color", parse_color),
)


def _apply_identifier(types: SceneTypes, line: str) -> None:
    words = split_words(line)
    if len(words) != 2:
        raise MapError("Type identifier error")
    key, value = words
    for expected, attr, convert in _IDENTIFIERS:
        if type_name_matches(key, expected, value) and getattr(types, attr) is None:
            try:
                setattr(types, attr, convert(value))
            except ValueError as exc:
                raise MapError(_TYPE_ERROR) from exc
            return
    raise MapError(_TYPE_ERROR)


def parse_identifiers(lines: Iterable[str]) -> tuple[SceneTypes, list[str]]:
    """Read the identifier lines at the head of a scene.

    Returns the collected types and the lines that follow them.
    """
    types = SceneTypes()
    remaining = list(lines)
    while remaining:
        remaining = drop_leading_blank_lines(remaining)
        if not remaining or not any(m in remaining[0] for m in _IDENTIFIER_MARKERS):
            break
        _apply_identifier(types, remaining[0])
        remaining = remaining[1:]
    return types, remaining