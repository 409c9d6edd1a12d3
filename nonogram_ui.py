"""
Nonogram Editor (Pygame)

Features:
- Paint cells on a grid; row and column clues are derived live.
- Export the grid as a short share string, import one back.
- Save the grid with its clues as a PNG, optionally with the answer hidden.

Controls:
- Left drag: paint (each cell flips at most once per stroke)
- Right drag: pan
- Mouse wheel: zoom toward the cursor
- Width/Height fields: resize the grid (existing cells are kept)
"""

import argparse
import logging
import sys
from typing import Optional, Tuple, List

import pygame
import pygame_gui

from nonogram_config import PuzzleConfig, load_config
from nonogram_drawing import draw_puzzle, load_font, save_puzzle_image
from nonogram_editor import PuzzleEditor, BUTTON_PAINT, BUTTON_PAN
from logging_config import setup_logging
import grid_style

logger = logging.getLogger("nonogram.ui")


# ----------------------------
# Helpers
# ----------------------------

def html_escape(s: str) -> str:
    return (
        s.replace("&", "&amp;")
         .replace("<", "&lt;")
         .replace(">", "&gt;")
         .replace('"', "&quot;")
         .replace("'", "&#39;")
    )


# ----------------------------
# Main
# ----------------------------

def run(config: Optional[PuzzleConfig] = None) -> None:
    config = config or PuzzleConfig()

    pygame.init()
    pygame.display.set_caption("Nonogram Editor")

    screen = pygame.display.set_mode((1200, 800), pygame.RESIZABLE)
    clock = pygame.time.Clock()

    font = load_font(config)
    small_font = pygame.font.SysFont("arial", 14)

    ui_manager = pygame_gui.UIManager(screen.get_size())

    controls_win = pygame_gui.elements.UIWindow(
        pygame.Rect(20, 20, 260, 420),
        ui_manager,
        window_display_title="Controls",
        resizable=True
    )
    controls_win.close_window_button.hide()
    share_win = pygame_gui.elements.UIWindow(
        pygame.Rect(300, 20, 420, 200),
        ui_manager,
        window_display_title="Share",
        resizable=True
    )
    share_win.close_window_button.hide()
    log_win = pygame_gui.elements.UIWindow(
        pygame.Rect(20, 460, 520, 260),
        ui_manager,
        window_display_title="Log",
        resizable=True
    )
    log_win.close_window_button.hide()

    controls_win.set_minimum_dimensions((260, 420))
    share_win.set_minimum_dimensions((420, 200))
    log_win.set_minimum_dimensions((520, 200))

    pygame_gui.elements.UILabel(pygame.Rect(10, 10, 60, 26), "Width:", ui_manager, container=controls_win)
    inp_width = pygame_gui.elements.UITextEntryLine(pygame.Rect(70, 10, 50, 26), ui_manager, container=controls_win)
    inp_width.set_text(str(config.width))
    pygame_gui.elements.UILabel(pygame.Rect(125, 10, 60, 26), "Height:", ui_manager, container=controls_win)
    inp_height = pygame_gui.elements.UITextEntryLine(pygame.Rect(185, 10, 50, 26), ui_manager, container=controls_win)
    inp_height.set_text(str(config.height))

    btn_reset_pos = pygame_gui.elements.UIButton(pygame.Rect(10, 46, 240, 36), "Reset Position", ui_manager, container=controls_win)
    btn_clear_all = pygame_gui.elements.UIButton(pygame.Rect(10, 92, 240, 36), "Clear All", ui_manager, container=controls_win)
    btn_hide = pygame_gui.elements.UIButton(pygame.Rect(10, 138, 240, 36), "Hide Answer", ui_manager, container=controls_win)

    inp_png = pygame_gui.elements.UITextEntryLine(pygame.Rect(10, 184, 240, 30), ui_manager, container=controls_win)
    inp_png.set_text("puzzle.png")
    btn_save_png = pygame_gui.elements.UIButton(pygame.Rect(10, 218, 240, 36), "Save PNG", ui_manager, container=controls_win)
    btn_undo = pygame_gui.elements.UIButton(pygame.Rect(10, 264, 240, 36), "Undo", ui_manager, container=controls_win)

    pygame_gui.elements.UILabel(
        pygame.Rect(10, 310, 240, 60),
        "Paint: drag with LMB\nPan: drag with RMB\nZoom: mouse wheel",
        ui_manager,
        container=controls_win
    )

    inp_export = pygame_gui.elements.UITextEntryLine(
        pygame.Rect(10, 10, 280, 30),
        ui_manager,
        container=share_win,
        anchors={"left": "left", "right": "right", "top": "top"}
    )
    btn_export = pygame_gui.elements.UIButton(pygame.Rect(300, 10, 100, 30), "Export", ui_manager, container=share_win)
    inp_import = pygame_gui.elements.UITextEntryLine(
        pygame.Rect(10, 50, 280, 30),
        ui_manager,
        container=share_win,
        anchors={"left": "left", "right": "right", "top": "top"}
    )
    btn_import = pygame_gui.elements.UIButton(pygame.Rect(300, 50, 100, 30), "Import", ui_manager, container=share_win)

    log_box = pygame_gui.elements.UITextBox(
        html_text="",
        relative_rect=pygame.Rect(10, 10, 500, 160),
        manager=ui_manager,
        container=log_win,
        anchors={"left": "left", "right": "right", "top": "top", "bottom": "bottom"}
    )
    btn_clear_log = pygame_gui.elements.UIButton(
        pygame.Rect(10, -40, 120, 30),
        "Clear",
        ui_manager,
        container=log_win,
        anchors={"left": "left", "bottom": "bottom"}
    )

    editor = PuzzleEditor(config)
    editor.center(*screen.get_size())

    log_lines: List[str] = []

    def log_append(msg: str) -> None:
        if not msg:
            return
        logger.info(msg)
        for line in msg.splitlines():
            line = line.strip()
            if line:
                log_lines.append(line)

        # Keep a reasonable history
        max_log_lines = 100
        if len(log_lines) > max_log_lines:
            del log_lines[0:len(log_lines) - max_log_lines]

        log_box.set_text("<br>".join(html_escape(ln) for ln in log_lines))
        if log_box.scroll_bar is not None:
            log_box.scroll_bar.set_scroll_from_start_percentage(1.0)

    def log_clear() -> None:
        log_lines.clear()
        log_box.set_text("")

    def is_over_ui(pos: Tuple[int, int]) -> bool:
        for w in (controls_win, share_win, log_win):
            if w.visible and w.get_abs_rect().collidepoint(pos):
                return True
        return False

    log_append("Ready.")

    running = True
    while running:
        time_delta = clock.tick(60) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break

            if event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                ui_manager.set_window_resolution(event.size)

            ui_manager.process_events(event)

            if event.type == pygame_gui.UI_BUTTON_PRESSED:
                if event.ui_element == btn_clear_log:
                    log_clear()

                elif event.ui_element == btn_reset_pos:
                    editor.center(*screen.get_size())

                elif event.ui_element == btn_undo:
                    if editor.undo():
                        inp_width.set_text(str(editor.model.width))
                        inp_height.set_text(str(editor.model.height))
                        log_append("Undone.")
                    else:
                        log_append("Nothing to undo.")

                elif event.ui_element == btn_clear_all:
                    editor.clear_all()
                    log_append("Grid cleared.")

                elif event.ui_element == btn_hide:
                    editor.hide_answer = not editor.hide_answer
                    btn_hide.set_text("Show Answer" if editor.hide_answer else "Hide Answer")

                elif event.ui_element == btn_export:
                    text = editor.export_text()
                    inp_export.set_text(text)
                    log_append(f"Exported {editor.model.width}x{editor.model.height}: {text}")

                elif event.ui_element == btn_import:
                    ok, msg = editor.import_text(inp_import.get_text())
                    if ok:
                        inp_width.set_text(str(editor.model.width))
                        inp_height.set_text(str(editor.model.height))
                    log_append(msg)

                elif event.ui_element == btn_save_png:
                    path = inp_png.get_text().strip()
                    if not path:
                        log_append("Save failed: Filename cannot be empty.")
                    else:
                        try:
                            save_puzzle_image(path, editor.model, config, font, hide_answer=editor.hide_answer)
                            log_append(f"Image saved to {path}")
                        except (pygame.error, OSError) as e:
                            log_append(f"Save failed: {e}")

            if event.type == pygame.MOUSEWHEEL:
                pos = pygame.mouse.get_pos()
                if not is_over_ui(pos):
                    editor.wheel(pos, event.y)

            if event.type == pygame.MOUSEBUTTONDOWN:
                if event.button in (BUTTON_PAINT, BUTTON_PAN) and not is_over_ui(event.pos):
                    editor.mouse_down(event.button, event.pos)

            if event.type == pygame.MOUSEMOTION:
                editor.mouse_move(event.pos)

            if event.type == pygame.MOUSEBUTTONUP:
                if event.button in (BUTTON_PAINT, BUTTON_PAN):
                    editor.mouse_up()

            if event.type == pygame.WINDOWLEAVE:
                editor.mouse_leave()

        editor.set_dimensions(inp_width.get_text(), inp_height.get_text())

        if editor.input.is_dragging:
            pygame.mouse.set_cursor(pygame.SYSTEM_CURSOR_SIZEALL)
        else:
            pygame.mouse.set_cursor(pygame.SYSTEM_CURSOR_ARROW)

        ui_manager.update(time_delta)

        screen.fill(config.background_color)
        draw_puzzle(screen, editor.model, editor.clues(), editor.camera, config, font, hide_answer=editor.hide_answer)
        ui_manager.draw_ui(screen)

        help_surf = small_font.render(
            f"{editor.model.width}x{editor.model.height}  zoom {editor.camera.zoom:.2f}",
            True, grid_style.COLOR_HELP_TEXT
        )
        screen.blit(help_surf, (screen.get_width() - help_surf.get_width() - 12, 12))

        pygame.display.flip()

    pygame.quit()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Interactive nonogram editor.")
    parser.add_argument("--config", help="JSON file overriding grid size and display options.")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_config(args.config) if args.config else PuzzleConfig()
    except (OSError, ValueError) as e:
        print(f"Error loading config: {e}")
        return 1

    run(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
