import os
import sys

# Add project root to sys.path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from nonogram_config import PuzzleConfig
from nonogram_editor import (
    BUTTON_PAINT,
    BUTTON_PAN,
    INVALID_INPUT_MSG,
    PuzzleEditor,
    parse_dimension,
)


def cell_center(editor, x, y):
    sx, sy = editor.camera.cell_to_screen(x + 0.5, y + 0.5)
    return (sx, sy)


@pytest.fixture
def editor():
    return PuzzleEditor(PuzzleConfig(width=4, height=3, cell_size=10))


def test_defaults():
    ed = PuzzleEditor()
    assert (ed.model.width, ed.model.height) == (8, 8)
    assert ed.camera.cell_size == 64


def test_stroke_paints_each_cell_once(editor):
    editor.mouse_down(BUTTON_PAINT, cell_center(editor, 1, 1))
    assert editor.model.cells[1][1] is True

    # more motion inside the same cell
    sx, sy = cell_center(editor, 1, 1)
    editor.mouse_move((sx + 2, sy + 1))
    editor.mouse_move((sx - 2, sy))
    assert editor.model.cells[1][1] is True

    editor.mouse_move(cell_center(editor, 2, 1))
    editor.mouse_move(cell_center(editor, 1, 1))
    editor.mouse_up()
    assert editor.model.cells[1][1] is True
    assert editor.model.cells[2][1] is True


def test_second_stroke_toggles_back(editor):
    pos = cell_center(editor, 0, 2)
    editor.mouse_down(BUTTON_PAINT, pos)
    editor.mouse_up()
    editor.mouse_down(BUTTON_PAINT, pos)
    editor.mouse_leave()
    assert editor.model.cells[0][2] is False


def test_painting_off_grid_is_ignored(editor):
    editor.mouse_down(BUTTON_PAINT, (-100, -100))
    editor.mouse_move((10_000, 10_000))
    editor.mouse_up()
    assert editor.model.filled_count() == 0


def test_move_without_button_does_nothing(editor):
    editor.mouse_move(cell_center(editor, 0, 0))
    assert editor.model.filled_count() == 0


def test_right_drag_pans(editor):
    x0, y0 = editor.camera.offset_x, editor.camera.offset_y
    editor.mouse_down(BUTTON_PAN, (100, 100))
    editor.mouse_move((110, 95))
    editor.mouse_move((130, 90))
    editor.mouse_up()
    editor.mouse_move((500, 500))
    assert editor.camera.offset_x == x0 + 30
    assert editor.camera.offset_y == y0 - 10
    assert editor.model.filled_count() == 0


def test_second_button_ignored_during_gesture(editor):
    editor.mouse_down(BUTTON_PAN, (0, 0))
    editor.mouse_down(BUTTON_PAINT, cell_center(editor, 0, 0))
    assert editor.input.is_dragging and not editor.input.is_drawing
    assert editor.model.filled_count() == 0


def test_wheel_zooms_toward_cursor(editor):
    before = editor.camera.screen_to_world(40, 25)
    editor.wheel((40, 25), 1)
    assert editor.camera.zoom > 1.0
    after = editor.camera.screen_to_world(40, 25)
    assert after == pytest.approx(before)


def test_center(editor):
    editor.center(200, 100)
    assert editor.camera.offset_x == pytest.approx(80)
    assert editor.camera.offset_y == pytest.approx(35)


@pytest.mark.parametrize("value, expected", [
    ("12", 12), (" 5 ", 5), ("", 7), ("abc", 7), ("0", 7), ("-3", 7), ("300", 255), (9, 9),
])
def test_parse_dimension(value, expected):
    assert parse_dimension(value, 7) == expected


def test_set_dimensions_keeps_cells(editor):
    editor.model.toggle(0, 0)
    assert editor.set_dimensions("6", "") == (6, 3)
    assert (editor.model.width, editor.model.height) == (6, 3)
    assert editor.model.cells[0][0] is True


def test_clues_follow_edits(editor):
    editor.model.toggle(0, 0)
    editor.model.toggle(1, 0)
    assert editor.clues().rows[0] == [2]
    editor.clear_all()
    assert editor.clues().rows[0] == [0]


def test_export_import_round_trip(editor):
    editor.model.toggle(3, 2)
    text = editor.export_text()

    other = PuzzleEditor()
    ok, msg = other.import_text(text)
    assert ok
    assert "4x3" in msg
    assert other.model.cells == editor.model.cells


def test_bad_import_reports_invalid_input(editor):
    editor.model.toggle(1, 2)
    before = editor.model.snapshot()
    ok, msg = editor.import_text("definitely not a puzzle")
    assert not ok
    assert msg == INVALID_INPUT_MSG
    assert editor.model.snapshot() == before


def test_oversized_config_grid_is_clamped_and_exportable():
    # PuzzleConfig itself does not validate; the editor keeps the grid packable
    ed = PuzzleEditor(PuzzleConfig(width=300, height=0))
    assert (ed.model.width, ed.model.height) == (255, 8)
    ed.export_text()


def test_resize_during_stroke_allows_repainting(editor):
    editor.mouse_down(BUTTON_PAINT, cell_center(editor, 3, 2))
    editor.set_dimensions("2", "2")
    editor.set_dimensions("4", "3")
    assert editor.model.cells[3][2] is False
    editor.mouse_move(cell_center(editor, 3, 2))
    assert editor.model.cells[3][2] is True


def test_undo_reverts_stroke(editor):
    editor.mouse_down(BUTTON_PAINT, cell_center(editor, 0, 0))
    editor.mouse_move(cell_center(editor, 1, 0))
    editor.mouse_up()
    assert editor.model.filled_count() == 2

    assert editor.undo()
    assert editor.model.filled_count() == 0
    assert not editor.undo()


def test_undo_reverts_clear_and_import(editor):
    editor.model.toggle(2, 1)
    editor.clear_all()
    assert editor.model.filled_count() == 0

    ok, _ = editor.import_text("AwIN")
    assert ok
    assert (editor.model.width, editor.model.height) == (3, 2)

    assert editor.undo()
    assert (editor.model.width, editor.model.height) == (4, 3)
    assert editor.model.filled_count() == 0
    assert editor.undo()
    assert editor.model.cells[2][1] is True


def test_failed_import_does_not_push_undo(editor):
    ok, _ = editor.import_text("%%%")
    assert not ok
    assert editor.undo_stack == []


def test_undo_stack_is_bounded(editor):
    for _ in range(250):
        editor.push_undo()
    assert len(editor.undo_stack) <= 200
