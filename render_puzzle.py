import argparse
import logging
import sys

import pygame

from nonogram_model import GridModel
from nonogram_clues import derive_clues
from nonogram_codec import DecodeError, import_puzzle
from nonogram_config import PuzzleConfig, load_config
from nonogram_drawing import load_font, save_puzzle_image
from logging_config import setup_logging

logger = logging.getLogger("nonogram.render")


def format_clues(model: GridModel) -> str:
    clues = derive_clues(model.cells)
    lines = [f"Grid {model.width}x{model.height}", "Columns:"]
    for x, clue in enumerate(clues.columns):
        lines.append(f"  {x:>3}: {' '.join(str(v) for v in clue)}")
    lines.append("Rows:")
    for y, clue in enumerate(clues.rows):
        lines.append(f"  {y:>3}: {' '.join(str(v) for v in clue)}")
    return "\n".join(lines)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Render a nonogram share string to a PNG image.")
    parser.add_argument("text", help="Share string produced by the editor's Export button.")
    parser.add_argument("-o", "--output", default="puzzle.png", help="PNG file to write (default: puzzle.png).")
    parser.add_argument("--hide-answer", action="store_true", help="Draw every cell empty, keep the clues.")
    parser.add_argument("--clues", action="store_true", help="Print the clues instead of writing an image.")
    parser.add_argument("--config", help="JSON file overriding display options.")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_config(args.config) if args.config else PuzzleConfig()
    except (OSError, ValueError) as e:
        print(f"Error loading config: {e}")
        return 1

    model = GridModel(config.width, config.height)
    try:
        import_puzzle(model, args.text)
    except DecodeError as e:
        print(f"Invalid input specified! ({e})")
        return 1

    if args.clues:
        print(format_clues(model))
        return 0

    pygame.font.init()
    try:
        save_puzzle_image(args.output, model, config, load_font(config), hide_answer=args.hide_answer)
    finally:
        pygame.font.quit()
    logger.info("Image saved to %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
