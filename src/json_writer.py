"""Serialize a CrosswordGrid to the JSON shape the game page consumes."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from grid_builder import number_cells
from models import CrosswordGrid


def crossword_to_dict(grid: CrosswordGrid) -> dict[str, Any]:
    """``{"grid", "words", "numbers", "width", "height"}`` with camelCase word coordinates.

    ``numbers`` lists the label drawn in each word's start cell.
    """
    return {
        "grid": [list(row) for row in grid.cells],
        "words": [
            {
                "id": w.id,
                "word": w.text,
                "clue": w.clue,
                "direction": w.direction.value,
                "startX": w.start_x,
                "startY": w.start_y,
                "number": w.number,
            }
            for w in grid.words
        ],
        "numbers": [
            {"x": x, "y": y, "number": number}
            for (x, y), number in number_cells(grid).items()
        ],
        "width": grid.width,
        "height": grid.height,
    }


def write_crossword_json(grid: CrosswordGrid, output_path: str | Path) -> None:
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(crossword_to_dict(grid), f, indent=2)
        f.write("\n")
