"""Shared fixtures: word list workbooks built on the fly."""

import openpyxl
import pytest


@pytest.fixture
def make_words_xlsx(tmp_path):
    """Return a factory writing *rows* (after an optional header) to an XLSX file."""

    def _make(rows, header=("id", "word", "clue", "created_at"), name="words.xlsx"):
        wb = openpyxl.Workbook()
        ws = wb.active
        if header:
            ws.append(list(header))
        for row in rows:
            ws.append(list(row))
        path = tmp_path / name
        wb.save(path)
        return path

    return _make
