"""Reading a scene file and validating its map grid."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable, Iterator, Sequence, Union

from .errors import MapError
from .identifiers import (
    SceneTypes,
    check_valid_chars,
    drop_leading_blank_lines,
    drop_trailing_blank_lines,
    parse_identifiers,
)
from .textutil import has_cub_extension, is_space

TAB_WIDTH = 4
WALL = "1"
OPEN_CHARS = "0NSEWOC"
DOOR_CHARS = "OC"

_NEIGHBOURS = ((-1, 0), (0, -1), (1, 0), (0, 1))

GridKey = Union[int, "tuple[int, int]"]


class Grid:
    """A mutable grid of map cells addressed by (row, column)."""

    def __init__(self, rows: Iterable[str]) -> None:
        self._rows: list[list[str]] = [list(row) for row in rows]

    def _check(self, row: int, col: int | None = None) -> None:
        if not 0 <= row < len(self._rows):
            raise IndexError(f"row {row} is outside the map")
        if col is not None and not 0 <= col < len(self._rows[row]):
            raise IndexError(f"column {col} is outside row {row}")

    def __getitem__(self, key: GridKey) -> str:
        """Return the cell at ``(row, col)``, or a whole row for an int key."""
        if isinstance(key, tuple):
            row, col = key
            self._check(row, col)
            return self._rows[row][col]
        self._check(key)
        return "".join(self._rows[key])

    def __setitem__(self, key: tuple[int, int], value: str) -> None:
        """Replace the cell at ``(row, col)`` with a single character."""
        if len(value) != 1:
            raise ValueError(f"a cell holds one character, not {value!r}")
        row, col = key
        self._check(row, col)
        self._rows[row][col] = value

    def __iter__(self) -> Iterator[str]:
        """Yield each row as a string."""
        for row in self._rows:
            yield "".join(row)

    def __len__(self) -> int:
        """Return the number of rows."""
        return len(self._rows)

    def get(self, row: int, col: int, default: str = " ") -> str:
        """Return the cell at ``(row, col)`` or ``default`` when off the map."""
        try:
            return self[(row, col)]
        except IndexError:
            return default

    @property
    def rows(self) -> list[str]:
        """The rows as a list of strings."""
        return list(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Grid({self.rows!r})"


@dataclass
class Scene:
    """A parsed scene: its type identifiers and its map."""

    types: SceneTypes
    grid: Grid


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Read the lines of a ``.cub`` file without their line endings."""
    if not has_cub_extension(str(path)):
        raise MapError("Invalid map!")
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapError("Invalid map!") from exc
    if not data:
        raise MapError("Invalid map")
    lines = data.decode("latin-1").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def tabs_to_spaces(rows: Iterable[str]) -> list[str]:
    """Replace every tab in the rows with four spaces."""
    return [row.replace("\t", " " * TAB_WIDTH) for row in rows]


def _is_open(rows: Sequence[str], row: int, col: int) -> bool:
    if not 0 <= row < len(rows) or not 0 <= col < len(rows[row]):
        return True
    return is_space(rows[row][col])


def _is_wall(rows: Sequence[str], row: int, col: int) -> bool:
    return 0 <= row < len(rows) and 0 <= col < len(rows[row]) and rows[row][col] == WALL


def check_borders(rows: Sequence[str]) -> None:
    """Raise MapError if any walkable cell touches empty space or the edge."""
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch in OPEN_CHARS and any(
                _is_open(rows, r + dr, c + dc) for dr, dc in _NEIGHBOURS
            ):
                raise MapError("Invalid map(invalid borders)")


def check_doors(rows: Sequence[str]) -> None:
    """Raise MapError unless every door sits between two walls."""
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch not in DOOR_CHARS:
                continue
            vertical = _is_wall(rows, r - 1, c) and _is_wall(rows, r + 1, c)
            horizontal = _is_wall(rows, r, c - 1) and _is_wall(rows, r, c + 1)
            if not (vertical or horizontal):
                raise MapError("Invalid map(invalid doors)")


def load_scene(path: str | PathLike[str]) -> Scene:
    """Read and validate a scene file."""
    lines = read_lines(path)
    types, rest = parse_identifiers(lines)
    if not types.is_complete():
        raise MapError("Invalid map(missing types)")
    check_valid_chars(rest)
    rest = drop_leading_blank_lines(rest)
    rest = drop_trailing_blank_lines(rest)
    if not rest:
        raise MapError("Invalid map!")
    rows = tabs_to_spaces(rest)
    check_borders(rows)
    check_doors(rows)
    return Scene(types=types, grid=Grid(rows))