from typing import List, Dict

# ----------------------------
# Domain model
# ----------------------------

DEFAULT_SIZE = 8

Cells = List[List[bool]]


def blank_cells(width: int, height: int) -> Cells:
    """All-false matrix indexed [x][y]."""
    return [[False for _ in range(height)] for _ in range(width)]


class GridModel:
    """Owns the painted cells of one puzzle.

    Cells are indexed ``cells[x][y]``: there are ``width`` columns, each holding
    ``height`` booleans.
    """

    def __init__(self, width: int = DEFAULT_SIZE, height: int = DEFAULT_SIZE) -> None:
        self.width = width
        self.height = height
        self.cells: Cells = blank_cells(width, height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_filled(self, x: int, y: int) -> bool:
        return self.cells[x][y]

    def filled_count(self) -> int:
        return sum(1 for col in self.cells for v in col if v)

    def resize(self, width: int, height: int) -> None:
        """Reallocate to width x height, keeping the overlapping region."""
        if width == self.width and height == self.height:
            return
        new_cells = blank_cells(width, height)
        for x in range(min(self.width, width)):
            for y in range(min(self.height, height)):
                new_cells[x][y] = self.cells[x][y]
        self.cells = new_cells
        self.width = width
        self.height = height

    def toggle(self, x: int, y: int) -> bool:
        # Pointer drift past the edges lands here; ignore it.
        if not self.in_bounds(x, y):
            return False
        self.cells[x][y] = not self.cells[x][y]
        return True

    def clear(self) -> None:
        self.cells = blank_cells(self.width, self.height)

    def load_cells(self, cells: Cells) -> None:
        if not cells or not cells[0]:
            raise ValueError("Grid must be at least 1x1.")
        height = len(cells[0])
        if any(len(col) != height for col in cells):
            raise ValueError("Ragged grid: all columns must have the same height.")
        self.cells = [[bool(v) for v in col] for col in cells]
        self.width = len(cells)
        self.height = height

    def snapshot(self) -> Dict[str, object]:
        """Return a self-contained copy of the grid (plain lists, pickle-friendly)."""
        return {
            "width": self.width,
            "height": self.height,
            "cells": [col[:] for col in self.cells],
        }

    def restore(self, state: Dict[str, object]) -> None:
        """Restore a state previously produced by snapshot()."""
        cells = state.get("cells")
        if not isinstance(cells, list):
            raise ValueError("Invalid snapshot: missing/invalid 'cells'.")
        self.load_cells(cells)
        if (self.width, self.height) != (state.get("width"), state.get("height")):
            raise ValueError("Invalid snapshot: dimensions do not match cells.")


class PaintStroke:
    """Cells already toggled during one press-move-release gesture.

    Each cell flips at most once per stroke no matter how many motion events
    land on it.
    """

    def __init__(self) -> None:
        self.touched: Cells = []

    def begin(self, width: int, height: int) -> None:
        self.touched = blank_cells(width, height)

    def fit(self, width: int, height: int) -> None:
        """Follow a mid-stroke resize; marks outside the new bounds are dropped."""
        fitted = blank_cells(width, height)
        for x, col in enumerate(self.touched[:width]):
            for y, v in enumerate(col[:height]):
                fitted[x][y] = v
        self.touched = fitted

    def paint(self, model: GridModel, x: int, y: int) -> bool:
        if not model.in_bounds(x, y):
            return False
        if not self.touched or len(self.touched) != model.width or len(self.touched[0]) != model.height:
            self.fit(model.width, model.height)
        if self.touched[x][y]:
            return False
        model.toggle(x, y)
        self.touched[x][y] = True
        return True
