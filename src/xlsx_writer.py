"""Write crossword clue sheets and word lists to XLSX files."""

from __future__ import annotations

from pathlib import Path

import openpyxl
from openpyxl.styles import Font

from models import NumberedClue, WordEntry

WORD_LIST_HEADER = ("id", "word", "clue", "created_at")


def write_clues_xlsx(
    across: list[NumberedClue],
    down: list[NumberedClue],
    output_path: str | Path,
    unplaced: list[WordEntry] | None = None,
) -> None:
    """Write across and down clues to an Excel workbook.

    Numbering is embedded in the clue cell: '1. Clue text'.
    Answers are in column B.
    If *unplaced* is provided, a second sheet lists words that didn't fit.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Clues"

    header_font = Font(bold=True, size=12)
    row = 1

    for title, clues in (("ACROSS", across), ("DOWN", down)):
        ws.cell(row=row, column=1, value=title).font = header_font
        row += 1
        for clue in clues:
            ws.cell(row=row, column=1, value=f"{clue.number}. {clue.clue_text}")
            ws.cell(row=row, column=2, value=clue.answer)
            row += 1
        # Blank separator
        row += 1

    ws.column_dimensions["A"].width = 60
    ws.column_dimensions["B"].width = 15

    if unplaced:
        ws2 = wb.create_sheet(title="Not placed")
        ws2.cell(row=1, column=1, value="Clue").font = header_font
        ws2.cell(row=1, column=2, value="Answer").font = header_font
        for i, entry in enumerate(unplaced, start=2):
            ws2.cell(row=i, column=1, value=entry.clue)
            ws2.cell(row=i, column=2, value=entry.text.upper())
        ws2.column_dimensions["A"].width = 60
        ws2.column_dimensions["B"].width = 15

    wb.save(output_path)


def write_words_xlsx(words: list[WordEntry], output_path: str | Path) -> None:
    """Write a word list in the layout ``read_words`` expects."""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Words"

    header_font = Font(bold=True)
    for col, name in enumerate(WORD_LIST_HEADER, start=1):
        ws.cell(row=1, column=col, value=name).font = header_font

    for row, entry in enumerate(words, start=2):
        ws.cell(row=row, column=1, value=entry.id)
        ws.cell(row=row, column=2, value=entry.text)
        ws.cell(row=row, column=3, value=entry.clue)
        ws.cell(row=row, column=4, value=entry.created_at or None)

    ws.column_dimensions["A"].width = 38
    ws.column_dimensions["C"].width = 60

    wb.save(output_path)
