import os
import sys
import random

# Add project root to sys.path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from nonogram_clues import (
    ClueCache,
    derive_clues,
    derive_column_clues,
    derive_row_clues,
    line_clues,
)


@pytest.mark.parametrize("line, expected", [
    ([], [0]),
    ([False, False], [0]),
    ([True], [1]),
    ([True, True, False, True], [2, 1]),
    ([False, True, False, False, True, True], [1, 2]),
    ([True, True, True], [3]),
])
def test_line_clues(line, expected):
    assert line_clues(line) == expected


def test_three_by_two_example():
    # cells[x][y]; filled (0,0), (1,0), (1,1)
    cells = [[True, False], [True, True], [False, False]]
    assert derive_column_clues(cells) == [[1], [2], [0]]
    assert derive_row_clues(cells) == [[2], [1]]


def test_derive_does_not_mutate_input():
    cells = [[True, False], [True, True]]
    before = [col[:] for col in cells]
    derive_clues(cells)
    assert cells == before


def test_clue_sums_match_filled_cells():
    rng = random.Random(1234)
    for _ in range(50):
        w, h = rng.randint(1, 12), rng.randint(1, 12)
        cells = [[rng.random() < 0.45 for _ in range(h)] for _ in range(w)]
        clues = derive_clues(cells)

        assert len(clues.columns) == w
        assert len(clues.rows) == h
        for x, clue in enumerate(clues.columns):
            filled = sum(cells[x])
            if filled == 0:
                assert clue == [0]
            else:
                assert sum(clue) == filled
                assert all(v > 0 for v in clue)
        for y, clue in enumerate(clues.rows):
            filled = sum(cells[x][y] for x in range(w))
            if filled == 0:
                assert clue == [0]
            else:
                assert sum(clue) == filled


def test_cache_reuses_until_grid_changes():
    cache = ClueCache()
    cells = [[False, True], [False, False]]
    first = cache.get(cells)
    assert cache.get(cells) is first

    cells[1][0] = True
    second = cache.get(cells)
    assert second is not first
    assert second.rows == [[1], [2]]
