import math
import pygame
from dataclasses import dataclass
from typing import Tuple, Optional

from nonogram_model import GridModel
from nonogram_clues import PuzzleClues, derive_clues
from nonogram_config import PuzzleConfig

MIN_ZOOM = 0.025
MAX_ZOOM = 10.0


@dataclass
class Camera:
    """Pan/zoom state: screen = cell * cell_size * zoom + offset."""
    offset_x: float = 16.0
    offset_y: float = 16.0
    zoom: float = 1.0
    cell_size: float = 64.0

    @property
    def scaled_cell_size(self) -> float:
        return self.cell_size * self.zoom

    def screen_to_world(self, sx: float, sy: float) -> Tuple[float, float]:
        return (sx - self.offset_x) / self.zoom, (sy - self.offset_y) / self.zoom

    def world_to_screen(self, wx: float, wy: float) -> Tuple[float, float]:
        return wx * self.zoom + self.offset_x, wy * self.zoom + self.offset_y

    def screen_to_cell(self, sx: float, sy: float) -> Tuple[int, int]:
        # May fall outside the grid; callers bounds-check.
        size = self.scaled_cell_size
        return (
            int(math.floor((sx - self.offset_x) / size)),
            int(math.floor((sy - self.offset_y) / size)),
        )

    def cell_to_screen(self, cx: float, cy: float) -> Tuple[float, float]:
        return self.world_to_screen(cx * self.cell_size, cy * self.cell_size)

    def pan(self, dx: float, dy: float) -> None:
        self.offset_x += dx
        self.offset_y += dy

    def center(self, grid_w: float, grid_h: float, view_w: float, view_h: float) -> None:
        """Center a grid of grid_w x grid_h unzoomed pixels in the view."""
        self.offset_x = (view_w - grid_w * self.zoom) * 0.5
        self.offset_y = (view_h - grid_h * self.zoom) * 0.5

    def zoom_at(self, mouse_pos: Tuple[float, float], sign: float, zoom_speed: float) -> None:
        step = (sign > 0) - (sign < 0)
        if step == 0:
            return
        mx, my = mouse_pos
        wx, wy = self.screen_to_world(mx, my)

        new_zoom = self.zoom * math.sqrt(math.exp(step * zoom_speed))
        new_zoom = max(MIN_ZOOM, min(MAX_ZOOM, new_zoom))
        if abs(new_zoom - self.zoom) < 1e-12:
            return

        self.zoom = new_zoom
        self.offset_x = mx - wx * self.zoom
        self.offset_y = my - wy * self.zoom


def clamp_int(v: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, v))


def pick_cell(model: GridModel, camera: Camera, mouse_pos: Tuple[float, float]) -> Optional[Tuple[int, int]]:
    x, y = camera.screen_to_cell(*mouse_pos)
    if model.in_bounds(x, y):
        return (x, y)
    return None


def load_font(config: PuzzleConfig) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.SysFont(config.font, config.font_size)


def draw_puzzle(
    screen: pygame.Surface,
    model: GridModel,
    clues: PuzzleClues,
    camera: Camera,
    config: PuzzleConfig,
    font: pygame.font.Font,
    hide_answer: bool = False
) -> None:
    cols, rows = model.width, model.height
    cell_size = camera.scaled_cell_size

    sw, sh = screen.get_size()

    # cells (only the visible window)
    c0, r0 = camera.screen_to_cell(-cell_size, -cell_size)
    c1, r1 = camera.screen_to_cell(sw + cell_size, sh + cell_size)
    c0, c1 = clamp_int(c0, 0, cols - 1), clamp_int(c1, 0, cols - 1)
    r0, r1 = clamp_int(r0, 0, rows - 1), clamp_int(r1, 0, rows - 1)

    for x in range(c0, c1 + 1):
        for y in range(r0, r1 + 1):
            sx0, sy0 = camera.cell_to_screen(x, y)
            sx1, sy1 = camera.cell_to_screen(x + 1, y + 1)
            left, top = int(math.floor(sx0)), int(math.floor(sy0))
            rect = pygame.Rect(left, top, int(math.floor(sx1)) - left, int(math.floor(sy1)) - top)
            if model.is_filled(x, y) and not hide_answer:
                pygame.draw.rect(screen, config.filled_color, rect)
            else:
                pygame.draw.rect(screen, config.empty_color, rect)

    # grid lines
    gx0, gy0 = camera.cell_to_screen(0, 0)
    gx1, gy1 = camera.cell_to_screen(cols, rows)
    for x in range(cols + 1):
        lx, _ = camera.cell_to_screen(x, 0)
        pygame.draw.line(screen, config.line_color, (lx, gy0), (lx, gy1), config.line_thickness)
    for y in range(rows + 1):
        _, ly = camera.cell_to_screen(0, y)
        pygame.draw.line(screen, config.line_color, (gx0, ly), (gx1, ly), config.line_thickness)

    # column clues: stacked above the grid, nearest run lowest
    line_h = font.get_linesize()
    for x, clue in enumerate(clues.columns):
        cx, _ = camera.cell_to_screen(x + 0.5, 0)
        bottom = gy0 - config.text_padding
        for j, run in enumerate(reversed(clue)):
            surf = font.render(str(run), True, config.line_color)
            screen.blit(surf, (cx - surf.get_width() // 2, bottom - (j + 1) * line_h))

    # row clues: one right-aligned line left of the grid
    for y, clue in enumerate(clues.rows):
        _, cy = camera.cell_to_screen(0, y + 0.5)
        surf = font.render(" ".join(str(v) for v in clue), True, config.line_color)
        screen.blit(surf, (gx0 - config.text_padding - surf.get_width(), cy - surf.get_height() // 2))


def render_puzzle_image(
    model: GridModel,
    config: PuzzleConfig,
    font: pygame.font.Font,
    hide_answer: bool = False
) -> pygame.Surface:
    """Off-screen surface holding the whole grid with its clue margins."""
    clues = derive_clues(model.cells)
    pad = config.text_padding

    line_h = font.get_linesize()
    top = pad * 2 + line_h * max(len(c) for c in clues.columns)
    left = pad * 2 + max(font.size(" ".join(str(v) for v in c))[0] for c in clues.rows)

    w = left + model.width * config.cell_size + pad + config.line_thickness
    h = top + model.height * config.cell_size + pad + config.line_thickness
    surface = pygame.Surface((w, h))
    surface.fill(config.background_color)

    camera = Camera(offset_x=left, offset_y=top, zoom=1.0, cell_size=config.cell_size)
    draw_puzzle(surface, model, clues, camera, config, font, hide_answer=hide_answer)
    return surface


def save_puzzle_image(path: str, model: GridModel, config: PuzzleConfig, font: pygame.font.Font, hide_answer: bool = False) -> None:
    pygame.image.save(render_puzzle_image(model, config, font, hide_answer), path)
