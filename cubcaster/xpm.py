"""Reading of XPM images used as wall, door and weapon textures."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable, Optional

TRANSPARENT = 0xFF000000
"""Pixel value stored for the colour ``None``."""

_WORD_RUN = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_DECIMAL_PREFIX = re.compile(r"\s*([+-]?\d+)")

_COLOR_NAMES = {
    "none": -1,
    "black": 0x000000,
    "white": 0xFFFFFF,
    "red": 0xFF0000,
    "green": 0x00FF00,
    "blue": 0x0000FF,
    "yellow": 0xFFFF00,
    "cyan": 0x00FFFF,
    "magenta": 0xFF00FF,
    "gray": 0xBEBEBE,
    "grey": 0xBEBEBE,
    "light gray": 0xD3D3D3,
    "light grey": 0xD3D3D3,
    "lightgray": 0xD3D3D3,
    "lightgrey": 0xD3D3D3,
    "dark gray": 0xA9A9A9,
    "dark grey": 0xA9A9A9,
    "darkgray": 0xA9A9A9,
    "darkgrey": 0xA9A9A9,
    "dim gray": 0x696969,
    "dimgray": 0x696969,
    "navy": 0x000080,
    "orange": 0xFFA500,
    "brown": 0xA52A2A,
    "purple": 0xA020F0,
    "pink": 0xFFC0CB,
    "gold": 0xFFD700,
    "maroon": 0xB03060,
    "violet": 0xEE82EE,
    "tan": 0xD2B48C,
    "khaki": 0xF0E68C,
    "beige": 0xF5F5DC,
    "dark red": 0x8B0000,
    "darkred": 0x8B0000,
    "dark green": 0x006400,
    "darkgreen": 0x006400,
    "dark blue": 0x00008B,
    "darkblue": 0x00008B,
}


class XpmError(Exception):
    """The XPM data is malformed or the file cannot be read."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: rows of 32-bit pixel values."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self.pixels[y][x]


def split_xpm_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs."""
    return [word for word in _WORD_RUN.split(text) if word]


def _find_unquoted(text: str, pattern: str, start: int = 0) -> int:
    quoted = False
    for index in range(start, len(text)):
        if text[index] == '"':
            quoted = not quoted
        if not quoted and text.startswith(pattern, index):
            return index
    return -1


def _blank_comments(text: str, opener: str, closer: str, keep_closer: bool) -> str:
    start = 0
    while (begin := _find_unquoted(text, opener, start)) != -1:
        end = text.find(closer, begin + len(opener))
        stop = len(text) if end == -1 else end + (len(closer) if keep_closer else 1)
        text = text[:begin] + " " * (stop - begin) + text[stop:]
        start = begin
    return text


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces."""
    text = _blank_comments(text, "/*", "*/", True)
    return _blank_comments(text, "//", "\n", False)


def _strtol_hex(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    if not match or not match.group(2):
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def _atoi(text: str) -> int:
    match = _DECIMAL_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def color_from_text(name: str, extra: Optional[str] = None) -> int:
    """Turn an XPM colour spec into an RGB value.

    ``#RRGGBB`` is read as hex; otherwise ``name`` (joined with ``extra``
    when given) is looked up by name. ``None`` gives -1, unknown names 0.
    """
    if name.startswith("#"):
        return _strtol_hex(name[1:])
    if extra is not None:
        name = f"{name} {extra}"
    return _COLOR_NAMES.get(name.lower(), 0)


def _pixel_value(color: int) -> int:
    if color == -1:
        return TRANSPARENT
    return color & 0xFFFFFFFF


def _next_line(lines, what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM data given as its quoted strings, in order."""
    it = iter(lines)
    header = split_xpm_words(_next_line(it, "header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("invalid XPM header")

    direct = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(it, "colour line")
        words = split_xpm_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError as exc:
            raise XpmError(f"no colour key in {line!r}") from exc
        if index + 1 >= len(words):
            raise XpmError(f"no colour value in {line!r}")
        extra = words[index + 2] if index + 2 < len(words) else None
        rgb = color_from_text(words[index + 1], extra)
        key = line[:cpp]
        if direct:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    rows = []
    for _ in range(height):
        line = _next_line(it, "pixel row")
        rows.append(
            tuple(
                _pixel_value(colors.get(line[cpp * x:cpp * (x + 1)], 0))
                for x in range(width)
            )
        )
    return XpmImage(width, height, tuple(rows))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    return parse_xpm(_QUOTED.findall(strip_comments(text)))