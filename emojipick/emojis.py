"""Emoji records, JSON loading, grid layout and name search."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

GRID_COLUMNS = 8


@dataclass(frozen=True)
class Emoji:
    """A single emoji: the character(s) to insert and its descriptive name."""

    symbol: str
    name: str


@dataclass(frozen=True)
class GridPosition:
    """Cell occupied by a button in an emoji grid."""

    column: int
    row: int
    width: int = 1
    height: int = 1


def _emoji_from_record(record: object, position: int) -> Emoji:
    if not isinstance(record, dict):
        raise ValueError(f"emoji entry {position} is not an object")
    fields = {}
    for key in ("symbol", "name"):
        if key not in record:
            raise ValueError(f"emoji entry {position} is missing field {key!r}")
        value = record[key]
        if not isinstance(value, str):
            raise ValueError(
                f"emoji entry {position} has a non-string {key!r} field"
            )
        fields[key] = value
    return Emoji(**fields)


def parse_emojis(text: str) -> list[Emoji]:
    """Parse a JSON array of ``{"symbol": ..., "name": ...}`` objects.

    Unknown fields are ignored. Raises ValueError on malformed data.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"failed to deserialize emoji list: {exc}") from exc
    if not isinstance(data, list):
        raise ValueError("emoji list must be a JSON array")
    return [_emoji_from_record(record, i) for i, record in enumerate(data)]


def load_emoji_file(path: str | PathLike[str]) -> list[Emoji]:
    """Read and parse an emoji JSON file."""
    return parse_emojis(Path(path).read_text(encoding="utf-8"))


def grid_position(index: int, columns: int = GRID_COLUMNS) -> GridPosition:
    """Return the grid cell for the button at ``index``, filling rows left to right."""
    if columns <= 0:
        raise ValueError("columns must be positive")
    if index < 0:
        raise ValueError("index must not be negative")
    row, column = divmod(index, columns)
    return GridPosition(column=column, row=row)


def search_emojis(emojis: Iterable[Emoji], text: str) -> list[Emoji]:
    """Return the emojis whose name contains ``text`` (case-sensitive), in order."""
    return [emoji for emoji in emojis if text in emoji.name]


class EmojiIndex:
    """A searchable collection of emojis."""

    def __init__(self, emojis: Iterable[Emoji]) -> None:
        self._emojis = list(emojis)

    def __iter__(self) -> Iterator[Emoji]:
        return iter(self._emojis)

    def __len__(self) -> int:
        return len(self._emojis)

    def search(self, text: str) -> list[Emoji]:
        """Return the emojis whose name contains ``text``."""
        return search_emojis(self._emojis, text)