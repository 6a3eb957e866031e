"""Tests for grid_placer.py."""

import pytest

from models import CrosswordGrid, Direction, PlacedWord, WordEntry
from grid_placer import GRID_SIZE, generate_crossword, _bounds, _is_valid_placement


_SHORT_WORD_LIST = [
    "cat", "dog", "sun", "hat", "pen", "cup", "tree", "lamp",
    "bird", "fish", "moon", "star", "rain", "wind", "book", "ring",
    "milk", "apple", "water", "house",
]


def _make_words(texts: list[str]) -> list[WordEntry]:
    """Helper to create WordEntry list from word strings."""
    return [WordEntry(str(i + 1), t, f"Clue for {t}") for i, t in enumerate(texts)]


def _by_text(grid: CrosswordGrid) -> dict[str, PlacedWord]:
    return {w.text: w for w in grid.words}


def _assert_layout_rules(grid: CrosswordGrid) -> None:
    """Every word reads back, ends are free, untouched letters have free sides."""
    owners: dict[tuple[int, int], list[PlacedWord]] = {}
    for word in grid.words:
        for x, y, letter in word.cells():
            assert grid.cells[y][x] == letter
            owners.setdefault((x, y), []).append(word)

    for word in grid.words:
        dx = 1 if word.direction == Direction.ACROSS else 0
        dy = 1 - dx
        n = len(word.text)
        assert grid.letter_at(word.start_x - dx, word.start_y - dy) is None
        assert grid.letter_at(word.start_x + dx * n, word.start_y + dy * n) is None
        for x, y, _ in word.cells():
            if len(owners[(x, y)]) > 1:
                continue
            assert grid.letter_at(x + dy, y + dx) is None
            assert grid.letter_at(x - dy, y - dx) is None


class TestGenerateCrossword:
    def test_empty_input(self):
        assert generate_crossword([]) is None

    def test_single_word(self):
        grid = generate_crossword([WordEntry("1", "cat", "pet")])
        assert grid is not None
        assert len(grid.words) == 1
        word = grid.words[0]
        assert word.direction == Direction.ACROSS
        assert word.text == "CAT"
        assert (word.start_x, word.start_y) == (1, 1)
        assert (grid.width, grid.height) == (5, 3)
        assert grid.cells[1] == [None, "C", "A", "T", None]
        assert grid.cells[0] == [None] * 5
        assert grid.cells[2] == [None] * 5

    def test_shared_letter(self):
        grid = generate_crossword(_make_words(["cat", "car"]))
        words = _by_text(grid)
        assert set(words) == {"CAT", "CAR"}
        assert words["CAT"].direction == Direction.ACROSS
        assert words["CAR"].direction == Direction.DOWN
        # Cross at the shared C
        assert (words["CAR"].start_x, words["CAR"].start_y) == (1, 1)
        assert (grid.width, grid.height) == (5, 5)
        assert [row[1] for row in grid.cells[1:4]] == ["C", "A", "R"]

    def test_no_shared_letter_dropped(self):
        grid = generate_crossword(_make_words(["xyz", "abc"]))
        assert [w.text for w in grid.words] == ["XYZ"]

    def test_longest_word_seeds(self):
        grid = generate_crossword(_make_words(["ab", "abcde", "abc"]))
        first = grid.words[0]
        assert first.text == "ABCDE"
        assert first.number == 1
        assert first.direction == Direction.ACROSS

    def test_equal_lengths_keep_input_order(self):
        grid = generate_crossword(_make_words(["dog", "cat"]))
        assert grid.words[0].text == "DOG"

    def test_first_matching_letter_wins(self):
        grid = generate_crossword(_make_words(["hello", "low"]))
        words = _by_text(grid)
        # HELLO at x 1..5; LOW hangs from the first L, not the second
        assert (words["HELLO"].start_x, words["HELLO"].start_y) == (1, 1)
        assert words["LOW"].direction == Direction.DOWN
        assert (words["LOW"].start_x, words["LOW"].start_y) == (3, 1)

    def test_rejected_crossing_tries_next_pair(self):
        # QC cannot hang from the first C (Q would touch X) so it uses the second C
        grid = generate_crossword(_make_words(["abcdc", "xb", "qc"]))
        words = _by_text(grid)
        assert (words["ABCDC"].start_x, words["ABCDC"].start_y) == (1, 2)
        assert (words["XB"].start_x, words["XB"].start_y) == (2, 1)
        assert (words["QC"].start_x, words["QC"].start_y) == (5, 1)
        assert words["QC"].direction == Direction.DOWN
        assert words["QC"].number == 3
        assert (grid.width, grid.height) == (7, 4)

    def test_adjacent_placement_dropped(self):
        grid = generate_crossword(_make_words(["abcdefg", "xb", "yc"]))
        assert [w.text for w in grid.words] == ["ABCDEFG", "XB"]

    def test_case_insensitive(self):
        grid = generate_crossword(_make_words(["Cat", "cAR"]))
        assert {w.text for w in grid.words} == {"CAT", "CAR"}

    def test_numbers_follow_placement_order(self):
        grid = generate_crossword(_make_words(_SHORT_WORD_LIST))
        assert [w.number for w in grid.words] == list(range(1, len(grid.words) + 1))

    def test_many_words_respect_rules(self):
        words = _make_words(_SHORT_WORD_LIST)
        grid = generate_crossword(words)
        assert 1 < len(grid.words) <= len(words)
        assert len(grid.cells) == grid.height
        assert all(len(row) == grid.width for row in grid.cells)
        _assert_layout_rules(grid)

    def test_bounding_box_is_padded_extent(self):
        grid = generate_crossword(_make_words(["cat", "car"]))
        xs = [x for w in grid.words for x, _, _ in w.cells()]
        ys = [y for w in grid.words for _, y, _ in w.cells()]
        # Exactly one padding row/column on each side
        assert (min(xs), min(ys)) == (1, 1)
        assert max(xs) == grid.width - 2
        assert max(ys) == grid.height - 2

    def test_padding_empty_on_every_side(self):
        grid = generate_crossword(_make_words(["hello", "low", "old"]))
        assert all(c is None for c in grid.cells[0] + grid.cells[-1])
        assert all(row[0] is None and row[-1] is None for row in grid.cells)
        assert any(c is not None for c in grid.cells[1])
        assert any(row[1] is not None for row in grid.cells)
        assert any(c is not None for c in grid.cells[-2])
        assert any(row[-2] is not None for row in grid.cells)

    def test_determinism(self):
        words = _make_words(_SHORT_WORD_LIST)
        assert generate_crossword(words) == generate_crossword(words)

    def test_input_not_modified(self):
        words = _make_words(["cat", "car", "tar"])
        snapshot = list(words)
        generate_crossword(words)
        assert words == snapshot

    def test_ids_and_clues_carried(self):
        grid = generate_crossword([WordEntry("w-1", "cat", "Feline")])
        assert grid.words[0].id == "w-1"
        assert grid.words[0].clue == "Feline"

    def test_word_longer_than_grid(self):
        text = "a" * (GRID_SIZE + 5)
        grid = generate_crossword([WordEntry("1", text, "long")])
        assert grid.words[0].start_x == 0
        # No room left for padding at either end
        assert grid.width == GRID_SIZE + 5
        assert "".join(grid.cells[grid.words[0].start_y]) == text.upper()

    def test_seed_at_edge_is_clipped(self):
        grid = generate_crossword([WordEntry("1", "abcd", "x")], grid_size=4)
        assert grid.words[0].start_x == 0
        assert grid.width == 4
        assert grid.height == 3

    def test_degenerate_inputs_do_not_raise(self):
        words = [
            WordEntry("1", "", "empty"),
            WordEntry("1", "cat", "duplicate id"),
            WordEntry("2", "c-t", "punctuation"),
        ]
        grid = generate_crossword(words)
        assert grid is not None
        assert grid.words[0].text in ("CAT", "C-T")


class TestIsValidPlacement:
    def _working(self, size=10):
        return [[None] * size for _ in range(size)]

    def test_out_of_bounds(self):
        working = self._working()
        assert not _is_valid_placement("HELLO", 6, 0, Direction.ACROSS, working, 10)
        assert not _is_valid_placement("HELLO", 0, 6, Direction.DOWN, working, 10)
        assert not _is_valid_placement("HELLO", -1, 0, Direction.ACROSS, working, 10)

    def test_fits_at_edge(self):
        working = self._working()
        assert _is_valid_placement("HELLO", 5, 9, Direction.ACROSS, working, 10)

    def test_letter_conflict(self):
        working = self._working()
        working[0][0] = "X"
        assert not _is_valid_placement("HELLO", 0, 0, Direction.ACROSS, working, 10)

    def test_letter_match(self):
        working = self._working()
        working[0][0] = "H"
        assert _is_valid_placement("HELLO", 0, 0, Direction.ACROSS, working, 10)

    def test_no_extension_after(self):
        working = self._working()
        working[0][5] = "X"  # right after HELLO (cols 0-4)
        assert not _is_valid_placement("HELLO", 0, 0, Direction.ACROSS, working, 10)

    def test_no_extension_before(self):
        working = self._working()
        working[0][2] = "X"
        assert not _is_valid_placement("HELLO", 3, 0, Direction.ACROSS, working, 10)

    def test_parallel_neighbour(self):
        working = self._working()
        working[1][2] = "X"  # below the L of HELLO
        assert not _is_valid_placement("HELLO", 0, 0, Direction.ACROSS, working, 10)

    def test_neighbour_beside_shared_cell_allowed(self):
        working = self._working()
        working[3][2] = "L"
        working[3][1] = "A"
        # DOWN through the existing L; the A next to it is not checked
        assert _is_valid_placement("HELLO", 2, 1, Direction.DOWN, working, 10)


class TestBounds:
    def test_padding_clipped_to_grid(self):
        placed = [PlacedWord("1", "ABC", "", Direction.ACROSS, 0, 0, 1)]
        box = _bounds(placed, 10)
        assert (box.min_x, box.min_y, box.max_x, box.max_y) == (0, 0, 3, 1)

    def test_down_word_extent(self):
        placed = [PlacedWord("1", "ABC", "", Direction.DOWN, 4, 4, 1)]
        box = _bounds(placed, 10)
        assert (box.min_x, box.min_y, box.max_x, box.max_y) == (3, 3, 5, 7)
