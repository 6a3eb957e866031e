#!/usr/bin/env python3
"""CLI entry point for crossword generation.

Reads the XLSX word list, lays the words out, validates the grid and writes
the JSON grid plus an XLSX clue sheet into an 'output' folder. With --add or
--delete it edits the word list instead.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from grid_placer import GRID_SIZE
from models import CrosswordError, CrosswordGrid, WordEntry


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Generate a crossword grid from a word list."
    )
    p.add_argument("input",
                   help="Path to XLSX word list (id, word, clue); created by --add if missing")
    p.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output JSON path (default: input with .json extension)",
    )
    p.add_argument("--grid-size", type=int, default=GRID_SIZE,
                   help=f"Working grid size NxN (default: {GRID_SIZE})")
    edit = p.add_mutually_exclusive_group()
    edit.add_argument("--add", nargs=2, metavar=("WORD", "CLUE"),
                      help="Add a word to the word list instead of generating")
    edit.add_argument("--delete", metavar="ID",
                      help="Delete the word with this id instead of generating")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    if args.grid_size < 1:
        parser.error("--grid-size must be positive")

    t0 = time.time()

    try:
        if args.add or args.delete is not None:
            _run_edit_mode(args)
        else:
            _run(args, t0)
    except CrosswordError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _run_edit_mode(args) -> None:
    """Add or delete one word list entry."""
    from word_store import WordStore

    store = WordStore(args.input)
    if args.add:
        entry = store.add(*args.add)
        print(f"Added '{entry.text}' (id {entry.id})", file=sys.stderr)
    else:
        store.delete(args.delete)
        print(f"Deleted id {args.delete}", file=sys.stderr)
    print(f"{len(store.words())} words in {args.input}", file=sys.stderr)


def _output_all(
    grid: CrosswordGrid,
    output_path: str,
    unplaced: list[WordEntry] | None = None,
) -> None:
    """Generate all output files in an 'output' folder: JSON grid, XLSX clues."""
    from grid_builder import build_clue_lists
    from json_writer import write_crossword_json
    from xlsx_writer import write_clues_xlsx

    stem = Path(output_path).stem
    out_dir = Path(output_path).parent / "output"
    out_dir.mkdir(exist_ok=True)

    json_path = str(out_dir / f"{stem}.json")
    xlsx_path = str(out_dir / f"{stem}_clues.xlsx")

    across, down = build_clue_lists(grid)
    write_crossword_json(grid, json_path)
    write_clues_xlsx(across, down, xlsx_path, unplaced=unplaced)

    print(f"Output: {json_path}", file=sys.stderr)
    print(f"Output: {xlsx_path}", file=sys.stderr)


def _run(args, t0: float) -> None:
    """Generate a crossword from the XLSX word list."""
    from word_store import WordStore
    from grid_placer import generate_crossword
    from grid_builder import validate_grid

    input_path = Path(args.input)
    if not input_path.exists():
        raise CrosswordError(f"File not found: {input_path}")
    output_path = args.output or str(input_path.with_suffix(".json"))

    store = WordStore(input_path)
    words = store.words()
    print(f"Read {len(words)} words", file=sys.stderr)

    grid = generate_crossword(words, grid_size=args.grid_size)
    if grid is None:
        raise CrosswordError("No words available. Add words to the word list first.")

    try:
        validate_grid(grid)
    except ValueError as e:
        raise CrosswordError(f"Failed to generate crossword: {e}") from e

    placed_ids = {w.id for w in grid.words}
    unplaced = [w for w in words if w.id not in placed_ids]
    for entry in unplaced:
        print(f"Warning: could not place '{entry.text}'", file=sys.stderr)

    _output_all(grid, output_path, unplaced=unplaced)

    elapsed = time.time() - t0
    print(
        f"Placed {len(grid.words)}/{len(words)} words, "
        f"grid {grid.width}x{grid.height}, "
        f"time {elapsed:.1f}s",
        file=sys.stderr,
    )


if __name__ == "__main__":
    main()
