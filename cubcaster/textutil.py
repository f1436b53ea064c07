"""Small text helpers used by the scene-file parser."""

from __future__ import annotations

import re

WHITESPACE = " \n\t\f\r\v"
DIGITS = "0123456789"
MAX_COMPONENT = 255

_WHITESPACE_RUN = re.compile(r"[ \n\t\f\r\v]+")


def is_space(ch: str) -> bool:
    """Return True if ``ch`` is a single whitespace character."""
    return len(ch) == 1 and ch in WHITESPACE


def split_words(text: str | None) -> list[str]:
    """Split ``text`` on runs of whitespace, dropping empty words."""
    if not text:
        return []
    return [word for word in _WHITESPACE_RUN.split(text) if word]


def words_count(text: str | None) -> int:
    """Return the number of whitespace-separated words in ``text``."""
    return len(split_words(text))


def split_fields(text: str | None, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    if not text:
        return []
    return [field for field in text.split(sep) if field]


def count_fields(text: str | None, sep: str) -> int:
    """Return the number of non-empty fields of ``text`` separated by ``sep``."""
    return len(split_fields(text, sep))


def parse_component(text: str) -> int:
    """Parse a colour component: plain decimal digits in the range 0..255.

    An empty string reads as 0. Anything else raises ValueError.
    """
    if any(ch not in DIGITS for ch in text):
        raise ValueError(f"not a colour component: {text!r}")
    value = int(text) if text else 0
    if value > MAX_COMPONENT:
        raise ValueError(f"colour component out of range: {text!r}")
    return value


def has_cub_extension(path: str) -> bool:
    """Return True if ``path`` names a ``.cub`` scene file."""
    return path.endswith(".cub")