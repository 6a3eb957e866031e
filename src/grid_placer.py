"""Crossword word placement: longest-first seed, first-fit perpendicular crossings, trim."""

from __future__ import annotations

from collections import namedtuple
from typing import Optional

from models import CrosswordGrid, Direction, PlacedWord, WordEntry

GRID_SIZE = 20

Bounds = namedtuple("Bounds", ["min_x", "min_y", "max_x", "max_y"])
WorkingGrid = list[list[Optional[str]]]


def generate_crossword(
    words: list[WordEntry],
    grid_size: int = GRID_SIZE,
) -> CrosswordGrid | None:
    """Lay out *words* on a grid and return the trimmed result.

    Returns None for an empty word list. Words that cannot cross any
    already-placed word are dropped; the input list is not modified.
    """
    if not words:
        return None

    # Longest first; sorted() is stable so equal lengths keep input order
    sorted_words = sorted(words, key=lambda w: len(w.text), reverse=True)

    size = max(grid_size, len(sorted_words[0].text.upper()))
    working: WorkingGrid = [[None] * size for _ in range(size)]
    placed: list[PlacedWord] = []

    # ── Seed: longest word across the middle ──
    first = sorted_words[0]
    first_text = first.text.upper()
    start_x = (size - len(first_text)) // 2
    start_y = size // 2
    _place_on_grid(first_text, start_x, start_y, Direction.ACROSS, working)
    placed.append(_placed_word(first, first_text, Direction.ACROSS, start_x, start_y, 1))

    # ── Remaining words: first valid crossing wins ──
    for entry in sorted_words[1:]:
        text = entry.text.upper()
        fit = _find_placement(text, placed, working, size)
        if fit is None:
            continue
        direction, x, y = fit
        _place_on_grid(text, x, y, direction, working)
        placed.append(_placed_word(entry, text, direction, x, y, len(placed) + 1))

    return _trim(working, placed, size)


def _placed_word(
    entry: WordEntry, text: str, direction: Direction, x: int, y: int, number: int,
) -> PlacedWord:
    return PlacedWord(
        id=entry.id, text=text, clue=entry.clue,
        direction=direction, start_x=x, start_y=y, number=number,
    )


# ── Candidate search ──────────────────────────────────────────────────

def _find_placement(
    text: str, placed: list[PlacedWord], working: WorkingGrid, size: int,
) -> tuple[Direction, int, int] | None:
    """Scan placed words, then candidate letters, then placed letters; first valid fit wins."""
    for other in placed:
        direction = Direction.DOWN if other.direction == Direction.ACROSS else Direction.ACROSS
        for j, letter in enumerate(text):
            for k, other_letter in enumerate(other.text):
                if letter != other_letter:
                    continue
                if direction == Direction.DOWN:
                    x, y = other.start_x + k, other.start_y - j
                else:
                    x, y = other.start_x - j, other.start_y + k
                if _is_valid_placement(text, x, y, direction, working, size):
                    return direction, x, y
    return None


# ── Validation ────────────────────────────────────────────────────────

def _is_valid_placement(
    text: str, x: int, y: int, direction: Direction,
    working: WorkingGrid, size: int,
) -> bool:
    """Check bounds, matching letters, no run-on ends, no parallel neighbours."""
    length = len(text)
    dx = 1 if direction == Direction.ACROSS else 0
    dy = 1 if direction == Direction.DOWN else 0

    if x < 0 or y < 0:
        return False
    if x + dx * (length - 1) >= size or y + dy * (length - 1) >= size:
        return False
    # A zero-length word still has to start on the grid
    if x >= size or y >= size:
        return False

    # Cell before start must be empty/edge
    if _occupied(working, size, x - dx, y - dy):
        return False

    # Cell after end must be empty/edge
    if _occupied(working, size, x + dx * length, y + dy * length):
        return False

    # Perpendicular offsets
    px, py = dy, dx

    for i, letter in enumerate(text):
        cx = x + dx * i
        cy = y + dy * i
        existing = working[cy][cx]

        if existing is not None:
            if existing != letter:
                return False
        elif (_occupied(working, size, cx + px, cy + py)
              or _occupied(working, size, cx - px, cy - py)):
            return False

    return True


def _occupied(working: WorkingGrid, size: int, x: int, y: int) -> bool:
    return 0 <= x < size and 0 <= y < size and working[y][x] is not None


# ── Grid manipulation ─────────────────────────────────────────────────

def _place_on_grid(
    text: str, x: int, y: int, direction: Direction, working: WorkingGrid,
) -> None:
    dx = 1 if direction == Direction.ACROSS else 0
    dy = 1 if direction == Direction.DOWN else 0
    for i, letter in enumerate(text):
        working[y + dy * i][x + dx * i] = letter


def _bounds(placed: list[PlacedWord], size: int) -> Bounds:
    """Bounding box of all placed words, padded by one cell where the grid allows."""
    min_x = min_y = size
    max_x = max_y = 0
    for word in placed:
        min_x = min(min_x, word.start_x)
        min_y = min(min_y, word.start_y)
        if word.direction == Direction.ACROSS:
            max_x = max(max_x, word.start_x + len(word.text) - 1)
            max_y = max(max_y, word.start_y)
        else:
            max_x = max(max_x, word.start_x)
            max_y = max(max_y, word.start_y + len(word.text) - 1)

    return Bounds(
        min_x=max(0, min_x - 1),
        min_y=max(0, min_y - 1),
        max_x=min(size - 1, max_x + 1),
        max_y=min(size - 1, max_y + 1),
    )


def _trim(working: WorkingGrid, placed: list[PlacedWord], size: int) -> CrosswordGrid:
    """Copy the padded bounding box out and shift word coordinates to its origin."""
    box = _bounds(placed, size)
    cells = [
        working[y][box.min_x:box.max_x + 1]
        for y in range(box.min_y, box.max_y + 1)
    ]
    words = [
        PlacedWord(
            id=w.id, text=w.text, clue=w.clue, direction=w.direction,
            start_x=w.start_x - box.min_x, start_y=w.start_y - box.min_y,
            number=w.number,
        )
        for w in placed
    ]
    return CrosswordGrid(
        cells=cells,
        words=words,
        width=box.max_x - box.min_x + 1,
        height=box.max_y - box.min_y + 1,
    )
