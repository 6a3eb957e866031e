"""Word list handle: loads the XLSX word list once and persists edits."""

from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path

from models import CrosswordError, WordEntry
from xlsx_reader import normalize_word, read_words
from xlsx_writer import write_words_xlsx


class WordStore:
    """Shared handle on one word list file.

    Construct once and pass it to every consumer. ``words()`` loads the file
    on first use; concurrent first callers wait on the same lock and the
    file is read once.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._words: list[WordEntry] | None = None

    def words(self) -> list[WordEntry]:
        with self._lock:
            return list(self._get_or_load())

    def add(self, text: str, clue: str) -> WordEntry:
        text = normalize_word(text or "")
        clue = (clue or "").strip()
        if not text or not clue:
            raise CrosswordError("Word and clue are required")

        entry = WordEntry(
            id=str(uuid.uuid4()),
            text=text,
            clue=clue,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        with self._lock:
            self._save(self._get_or_load() + [entry])
        return entry

    def delete(self, word_id: str) -> None:
        """Remove the word with *word_id*; unknown ids are ignored."""
        if not word_id:
            raise CrosswordError("ID is required")
        with self._lock:
            words = self._get_or_load()
            remaining = [w for w in words if w.id != word_id]
            if len(remaining) == len(words):
                return
            self._save(remaining)

    def _get_or_load(self) -> list[WordEntry]:
        # Caller holds self._lock
        if self._words is None:
            self._words = read_words(self.path) if self.path.exists() else []
        return self._words

    def _save(self, words: list[WordEntry]) -> None:
        # Caller holds self._lock; the cache only changes once the file is written
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            write_words_xlsx(words, self.path)
        except OSError as e:
            raise CrosswordError(f"Failed to save word list {self.path}: {e}") from e
        self._words = words
