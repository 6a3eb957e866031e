"""Data models for the crossword generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


class Direction(Enum):
    ACROSS = "across"
    DOWN = "down"


@dataclass(frozen=True)
class WordEntry:
    """A word/clue pair from the word list. ``text`` may be mixed case."""

    id: str
    text: str
    clue: str
    created_at: str = ""


@dataclass(frozen=True)
class PlacedWord:
    """A word that has been assigned a position on the grid."""

    id: str
    text: str  # uppercase
    clue: str
    direction: Direction = Direction.ACROSS
    start_x: int = 0
    start_y: int = 0
    number: int = 0

    def cells(self) -> Iterator[tuple[int, int, str]]:
        """Yield ``(x, y, letter)`` for every letter of the word."""
        dx = 1 if self.direction == Direction.ACROSS else 0
        dy = 1 if self.direction == Direction.DOWN else 0
        for i, letter in enumerate(self.text):
            yield self.start_x + dx * i, self.start_y + dy * i, letter


@dataclass
class CrosswordGrid:
    """A trimmed crossword: ``cells[y][x]`` holds a letter or None (blocked)."""

    cells: list[list[Optional[str]]] = field(default_factory=list)
    words: list[PlacedWord] = field(default_factory=list)
    width: int = 0
    height: int = 0

    def letter_at(self, x: int, y: int) -> Optional[str]:
        if 0 <= y < self.height and 0 <= x < self.width:
            return self.cells[y][x]
        return None


@dataclass(frozen=True)
class NumberedClue:
    """A clue with its display number."""

    number: int
    clue_text: str
    answer: str
    direction: Direction


class CrosswordError(Exception):
    """Fatal error during crossword generation."""
