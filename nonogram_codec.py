"""
Share-string codec.

Binary layout: [width][height][cell bits...]. Bits are packed eight per byte,
least-significant bit first, walking x in the outer loop and y in the inner
loop (column 0 row 0, column 0 row 1, ..., column 1 row 0, ...). The text form
is standard base64 of those bytes.
"""

import base64
import binascii
import logging
from typing import List

from nonogram_model import GridModel

logger = logging.getLogger("nonogram.codec")

MAX_GRID_SIZE = 255
HEADER_SIZE = 2


class DecodeError(ValueError):
    """Share text or buffer that cannot be turned back into a grid."""


def packed_size(width: int, height: int) -> int:
    return HEADER_SIZE + (width * height + 7) // 8


def pack(cells: List[List[bool]]) -> bytes:
    width = len(cells)
    height = len(cells[0]) if cells else 0
    if not (1 <= width <= MAX_GRID_SIZE and 1 <= height <= MAX_GRID_SIZE):
        raise ValueError(
            f"Grid {width}x{height} cannot be packed: each side must be 1..{MAX_GRID_SIZE}."
        )

    out = bytearray(packed_size(width, height))
    out[0] = width
    out[1] = height

    bit_index = 0
    for x in range(width):
        for y in range(height):
            if cells[x][y]:
                out[HEADER_SIZE + bit_index // 8] |= 1 << (bit_index % 8)
            bit_index += 1
    return bytes(out)


def unpack(data: bytes) -> List[List[bool]]:
    if len(data) < HEADER_SIZE:
        raise DecodeError(f"Buffer too short for header: {len(data)} byte(s).")
    width, height = data[0], data[1]
    if width == 0 or height == 0:
        raise DecodeError(f"Invalid grid size {width}x{height}.")
    needed = packed_size(width, height)
    if len(data) < needed:
        raise DecodeError(
            f"Truncated buffer: {width}x{height} needs {needed} bytes, got {len(data)}."
        )

    cells = [[False] * height for _ in range(width)]
    bit_index = 0
    for x in range(width):
        for y in range(height):
            byte = data[HEADER_SIZE + bit_index // 8]
            cells[x][y] = (byte >> (bit_index % 8)) & 1 == 1
            bit_index += 1
    return cells


def to_text(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def from_text(text: str) -> bytes:
    try:
        return base64.b64decode(text.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Not valid base64: {e}") from e


def export_puzzle(model: GridModel) -> str:
    text = to_text(pack(model.cells))
    logger.debug("Exported %dx%d grid (%d chars).", model.width, model.height, len(text))
    return text


def decode_puzzle(text: str) -> List[List[bool]]:
    return unpack(from_text(text))


def import_puzzle(model: GridModel, text: str) -> None:
    """Replace the model's grid with the decoded share text.

    Decoding finishes before the model is touched, so a DecodeError leaves the
    current grid as it was.
    """
    cells = decode_puzzle(text)
    model.load_cells(cells)
    logger.info("Imported %dx%d grid.", model.width, model.height)
