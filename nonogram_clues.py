from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

Clue = List[int]


@dataclass
class PuzzleClues:
    columns: List[Clue]  # one per x, read top to bottom
    rows: List[Clue]     # one per y, read left to right


def line_clues(line: Iterable[bool]) -> Clue:
    """Run lengths of consecutive filled cells; [0] for an empty line."""
    clues: Clue = []
    count = 0
    for cell in line:
        if cell:
            count += 1
        elif count > 0:
            clues.append(count)
            count = 0
    if count > 0:
        clues.append(count)
    return clues if clues else [0]


def derive_column_clues(cells: List[List[bool]]) -> List[Clue]:
    return [line_clues(col) for col in cells]


def derive_row_clues(cells: List[List[bool]]) -> List[Clue]:
    if not cells:
        return []
    height = len(cells[0])
    return [line_clues(col[y] for col in cells) for y in range(height)]


def derive_clues(cells: List[List[bool]]) -> PuzzleClues:
    return PuzzleClues(columns=derive_column_clues(cells), rows=derive_row_clues(cells))


class ClueCache:
    """Keeps the last derived clues and reuses them while the grid is unchanged."""

    def __init__(self) -> None:
        self._key: Optional[Tuple[Tuple[bool, ...], ...]] = None
        self._clues: Optional[PuzzleClues] = None

    def get(self, cells: List[List[bool]]) -> PuzzleClues:
        key = tuple(tuple(col) for col in cells)
        if self._clues is None or key != self._key:
            self._key = key
            self._clues = derive_clues(cells)
        return self._clues
