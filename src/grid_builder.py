"""Rebuild and check grid cells from placed words, number start cells, build clue lists."""

from __future__ import annotations

from typing import Optional

from models import CrosswordGrid, Direction, NumberedClue, PlacedWord


def build_cells(
    words: list[PlacedWord], width: int, height: int
) -> list[list[Optional[str]]]:
    """Create a width x height matrix and write letters from each PlacedWord."""
    cells: list[list[Optional[str]]] = [[None] * width for _ in range(height)]

    for word in words:
        for x, y, letter in word.cells():
            if not (0 <= x < width and 0 <= y < height):
                raise ValueError(
                    f"Word '{word.text}' leaves the {width}x{height} grid at ({x},{y})"
                )
            existing = cells[y][x]
            if existing is not None and existing != letter:
                raise ValueError(
                    f"Letter conflict at ({x},{y}): existing '{existing}' vs '{letter}'"
                )
            cells[y][x] = letter

    return cells


def validate_grid(grid: CrosswordGrid) -> None:
    """Raise ValueError unless every word reads back from ``grid.cells``.

    Also checks that the matrix matches ``width``/``height`` and that no two
    words disagree on a shared cell.
    """
    if len(grid.cells) != grid.height or any(len(row) != grid.width for row in grid.cells):
        raise ValueError(
            f"Cell matrix does not match declared size {grid.width}x{grid.height}"
        )

    rebuilt = build_cells(grid.words, grid.width, grid.height)

    for word in grid.words:
        for x, y, letter in word.cells():
            if grid.cells[y][x] != letter:
                raise ValueError(
                    f"Word '{word.text}' does not read back at ({x},{y}): "
                    f"found {grid.cells[y][x]!r}, expected '{letter}'"
                )

    for y in range(grid.height):
        for x in range(grid.width):
            if grid.cells[y][x] is not None and rebuilt[y][x] is None:
                raise ValueError(f"Stray letter at ({x},{y}) belongs to no word")


def number_cells(grid: CrosswordGrid) -> dict[tuple[int, int], int]:
    """Map each word's start cell to the number shown there.

    When an across and a down word share a start cell, the one placed first
    keeps the cell.
    """
    numbers: dict[tuple[int, int], int] = {}
    for word in grid.words:
        numbers.setdefault((word.start_x, word.start_y), word.number)
    return numbers


def build_clue_lists(
    grid: CrosswordGrid,
) -> tuple[list[NumberedClue], list[NumberedClue]]:
    """Map each PlacedWord to a NumberedClue, return sorted across/down lists."""
    across: list[NumberedClue] = []
    down: list[NumberedClue] = []

    for word in grid.words:
        clue = NumberedClue(
            number=word.number,
            clue_text=word.clue,
            answer=word.text,
            direction=word.direction,
        )
        if word.direction == Direction.ACROSS:
            across.append(clue)
        else:
            down.append(clue)

    across.sort(key=lambda c: c.number)
    down.sort(key=lambda c: c.number)
    return across, down
