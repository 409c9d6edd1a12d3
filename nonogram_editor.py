import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple, Any, List, Dict

from nonogram_model import GridModel, PaintStroke, DEFAULT_SIZE
from nonogram_clues import ClueCache, PuzzleClues
from nonogram_codec import DecodeError, MAX_GRID_SIZE, export_puzzle, import_puzzle
from nonogram_config import PuzzleConfig
from nonogram_drawing import Camera, pick_cell, clamp_int

logger = logging.getLogger("nonogram.editor")

BUTTON_PAINT = 1  # left
BUTTON_PAN = 3    # right

INVALID_INPUT_MSG = "Invalid input specified!"

MAX_UNDO = 200


@dataclass
class InputState:
    is_drawing: bool = False
    is_dragging: bool = False
    last_mouse: Tuple[float, float] = (-1, -1)
    stroke: PaintStroke = field(default_factory=PaintStroke)


def parse_dimension(value: Any, default: int = DEFAULT_SIZE) -> int:
    """Width/height field value -> 1..255, falling back to the default on junk."""
    try:
        n = int(str(value).strip())
    except ValueError:
        return default
    if n < 1:
        return default
    return clamp_int(n, 1, MAX_GRID_SIZE)


class PuzzleEditor:
    """Application context: one grid, one camera, one gesture in flight."""

    def __init__(self, config: Optional[PuzzleConfig] = None) -> None:
        self.config = config or PuzzleConfig()
        self.model = GridModel(
            parse_dimension(self.config.width),
            parse_dimension(self.config.height),
        )
        self.camera = Camera(cell_size=self.config.cell_size)
        self.input = InputState()
        self.clue_cache = ClueCache()
        self.hide_answer = False
        self.undo_stack: List[Dict[str, object]] = []

    # ---- grid ----

    def set_dimensions(self, width: Any, height: Any) -> Tuple[int, int]:
        # A half-typed field keeps the current size.
        w = parse_dimension(width, self.model.width)
        h = parse_dimension(height, self.model.height)
        if (w, h) != (self.model.width, self.model.height):
            self.model.resize(w, h)
            self.input.stroke.fit(w, h)
            logger.debug("Resized grid to %dx%d.", w, h)
        return w, h

    def clear_all(self) -> None:
        self.push_undo()
        self.model.clear()

    def push_undo(self, snap: Optional[Dict[str, object]] = None) -> None:
        self.undo_stack.append(snap if snap is not None else self.model.snapshot())
        if len(self.undo_stack) > MAX_UNDO:
            del self.undo_stack[:20]

    def undo(self) -> bool:
        """Restore the grid as it was before the last stroke, clear or import."""
        if not self.undo_stack:
            return False
        self.mouse_up()
        self.model.restore(self.undo_stack.pop())
        return True

    def clues(self) -> PuzzleClues:
        return self.clue_cache.get(self.model.cells)

    # ---- viewport ----

    def center(self, view_w: float, view_h: float) -> None:
        self.camera.center(
            self.model.width * self.camera.cell_size,
            self.model.height * self.camera.cell_size,
            view_w,
            view_h,
        )

    def wheel(self, pos: Tuple[float, float], direction: float) -> None:
        self.camera.zoom_at(pos, direction, self.config.zoom_speed)

    # ---- pointer gestures ----

    def mouse_down(self, button: int, pos: Tuple[float, float]) -> None:
        if self.input.is_drawing or self.input.is_dragging:
            return
        if button == BUTTON_PAINT:
            self.push_undo()
            self.input.is_drawing = True
            self.input.stroke.begin(self.model.width, self.model.height)
            self._paint_at(pos)
        elif button == BUTTON_PAN:
            self.input.is_dragging = True
            self.input.last_mouse = pos

    def mouse_move(self, pos: Tuple[float, float]) -> None:
        if self.input.is_drawing:
            self._paint_at(pos)
        if self.input.is_dragging:
            lx, ly = self.input.last_mouse
            self.camera.pan(pos[0] - lx, pos[1] - ly)
            self.input.last_mouse = pos

    def mouse_up(self) -> None:
        self.input.is_drawing = False
        self.input.is_dragging = False

    mouse_leave = mouse_up

    def _paint_at(self, pos: Tuple[float, float]) -> None:
        cell = pick_cell(self.model, self.camera, pos)
        if cell is not None:
            self.input.stroke.paint(self.model, *cell)

    # ---- share text ----

    def export_text(self) -> str:
        return export_puzzle(self.model)

    def import_text(self, text: str) -> Tuple[bool, str]:
        snap = self.model.snapshot()
        try:
            import_puzzle(self.model, text)
        except DecodeError as e:
            logger.warning("Import failed: %s", e)
            return False, INVALID_INPUT_MSG
        self.push_undo(snap)
        self.mouse_up()
        return True, f"Imported {self.model.width}x{self.model.height} puzzle."
