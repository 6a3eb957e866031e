"""Read the crossword word list from an XLSX workbook."""

from __future__ import annotations

import sys
import uuid
from pathlib import Path

import openpyxl

from models import CrosswordError, WordEntry

HEADER_NAMES = {"id", "word", "text", "answer", "clue"}


def read_words(path: str | Path) -> list[WordEntry]:
    """Open *path*, skip the header, parse ``id | word | clue | created_at`` rows.

    An empty word list is a valid result; callers decide what it means.
    """
    path = Path(path)
    if not path.exists():
        raise CrosswordError(f"File not found: {path}")

    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    ws = wb.active

    first_row = _detect_header_row(ws) + 1
    entries: list[WordEntry] = []

    for row in ws.iter_rows(min_row=first_row, values_only=True):
        row = tuple(row) + (None,) * (4 - len(row))
        raw_id, raw_word, raw_clue, raw_created = row[:4]
        if raw_word is None and raw_clue is None:
            continue
        text = normalize_word(str(raw_word) if raw_word is not None else "")
        clue = str(raw_clue).strip() if raw_clue is not None else ""
        if not text or not clue:
            print(
                f"Warning: skipping row with word {raw_word!r} (word and clue are required)",
                file=sys.stderr,
            )
            continue
        word_id = str(raw_id).strip() if raw_id is not None else ""
        entries.append(WordEntry(
            id=word_id or str(uuid.uuid4()),
            text=text,
            clue=clue,
            created_at=str(raw_created) if raw_created is not None else "",
        ))

    wb.close()
    return _dedupe_ids(entries)


def _detect_header_row(sheet) -> int:
    """Return the number of header rows: 1 if row 1 holds column names, else 0."""
    for row in sheet.iter_rows(min_row=1, max_row=1, values_only=True):
        names = {str(v).strip().lower() for v in row if v is not None}
        if names & HEADER_NAMES:
            return 1
    return 0


def normalize_word(raw: str) -> str:
    """Trim surrounding whitespace and lowercase; inner characters are kept."""
    return raw.strip().lower()


def _dedupe_ids(entries: list[WordEntry]) -> list[WordEntry]:
    """Keep the first entry for each id."""
    seen_ids: set[str] = set()
    result: list[WordEntry] = []

    for entry in entries:
        if entry.id in seen_ids:
            print(
                f"Warning: duplicate id '{entry.id}' for '{entry.text}', skipping",
                file=sys.stderr,
            )
            continue
        seen_ids.add(entry.id)
        result.append(entry)

    return result
