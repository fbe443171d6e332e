"""A bounded, score-sorted leaderboard stored as ``name,score`` lines."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from dataclasses import dataclass

NAME_LEN = 64
MAX_ENTRIES = 100
DEFAULT_PATH = os.path.join("data", "leaderboard.csv")

_LINE_BUFFER = 256
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


@dataclass(frozen=True)
class Entry:
    """One leaderboard row."""

    name: str
    score: int


class LeaderboardFullError(Exception):
    """Raised when adding to a leaderboard that already holds MAX_ENTRIES."""


def _clip_name(name: str) -> str:
    return name[: NAME_LEN - 1]


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _read_chunks(lines: Iterator[str]) -> Iterator[str]:
    """Yield lines split into pieces no longer than the read buffer allows."""
    limit = _LINE_BUFFER - 1
    for line in lines:
        while len(line) > limit:
            yield line[:limit]
            line = line[limit:]
        if line:
            yield line


class Leaderboard:
    """Scores kept in descending order, at most MAX_ENTRIES of them."""

    def __init__(self) -> None:
        self._entries: list[Entry] = []

    def _sort(self) -> None:
        self._entries.sort(key=lambda e: e.score, reverse=True)

    def load(self, path: str | os.PathLike[str] | None = None) -> None:
        """Replace the entries with those read from ``path``.

        Lines without a comma are skipped; the score is the leading integer
        after the first comma, or 0. Raises OSError if the file cannot be read.
        """
        path = DEFAULT_PATH if path is None else path
        with open(path, "r", encoding="utf-8") as fh:
            self._entries = []
            for chunk in _read_chunks(fh):
                if len(self._entries) >= MAX_ENTRIES:
                    break
                name, sep, rest = chunk.partition(",")
                if not sep:
                    continue
                self._entries.append(Entry(_clip_name(name), _leading_int(rest)))
        self._sort()

    def save(self, path: str | os.PathLike[str] | None = None) -> None:
        """Write all entries to ``path``. Raises OSError on failure."""
        path = DEFAULT_PATH if path is None else path
        with open(path, "w", encoding="utf-8") as fh:
            fh.writelines(f"{e.name},{e.score}\n" for e in self._entries)

    def add(self, name: str, score: int) -> None:
        """Insert a score, keeping the order; raise LeaderboardFullError if full."""
        if len(self._entries) >= MAX_ENTRIES:
            raise LeaderboardFullError(f"leaderboard holds {MAX_ENTRIES} entries")
        self._entries.append(Entry(_clip_name(name), score))
        self._sort()

    def reset(self, path: str | os.PathLike[str] | None = None) -> None:
        """Drop all entries and truncate ``path``. Raises OSError on failure."""
        self._entries = []
        path = DEFAULT_PATH if path is None else path
        with open(path, "w", encoding="utf-8"):
            pass

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(tuple(self._entries))

    def entries(self) -> tuple[Entry, ...]:
        """Return the entries, highest score first."""
        return tuple(self._entries)