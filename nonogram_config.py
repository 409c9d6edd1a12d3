import json
from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple

import grid_style
from nonogram_model import DEFAULT_SIZE
from nonogram_codec import MAX_GRID_SIZE

Color = Tuple[int, int, int]


@dataclass
class PuzzleConfig:
    width: int = DEFAULT_SIZE
    height: int = DEFAULT_SIZE

    cell_size: int = 64
    zoom_speed: float = 0.2
    font: str = "Noto Sans Mono"
    font_size: int = 32
    text_padding: int = 16
    line_thickness: int = 2

    line_color: Color = grid_style.COLOR_GRID_LINES
    filled_color: Color = grid_style.COLOR_FILLED
    empty_color: Color = grid_style.COLOR_EMPTY
    background_color: Color = grid_style.COLOR_BG


_POSITIVE_INT_FIELDS = ("width", "height", "cell_size", "font_size", "line_thickness")
_COLOR_FIELDS = ("line_color", "filled_color", "empty_color", "background_color")


def parse_color(value: Any) -> Color:
    """Accept '#rrggbb' or an [r, g, b] list."""
    if isinstance(value, str):
        s = value.strip().lstrip("#")
        if len(s) != 6:
            raise ValueError(f"Bad color: {value!r}")
        try:
            return (int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))
        except ValueError:
            raise ValueError(f"Bad color: {value!r}")
    if isinstance(value, (list, tuple)) and len(value) == 3:
        try:
            rgb = tuple(int(v) for v in value)
        except (TypeError, ValueError):
            raise ValueError(f"Bad color: {value!r}")
        if all(0 <= v <= 255 for v in rgb):
            return rgb  # type: ignore[return-value]
    raise ValueError(f"Bad color: {value!r}")


def config_from_dict(data: Dict[str, Any]) -> PuzzleConfig:
    known = {f.name for f in fields(PuzzleConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config key(s): {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for key, value in data.items():
        if key in _COLOR_FIELDS:
            values[key] = parse_color(value)
        elif key in _POSITIVE_INT_FIELDS:
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"'{key}' must be a positive integer, got {value!r}")
            if key in ("width", "height") and value > MAX_GRID_SIZE:
                raise ValueError(f"'{key}' must be at most {MAX_GRID_SIZE}, got {value}")
            values[key] = value
        elif key == "text_padding":
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"'text_padding' must be a non-negative integer, got {value!r}")
            values[key] = value
        elif key == "font":
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"'font' must be a font name, got {value!r}")
            values[key] = value
        elif key == "zoom_speed":
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise ValueError(f"'zoom_speed' must be positive, got {value!r}")
            values[key] = float(value)
    return PuzzleConfig(**values)


def load_config(path: str) -> PuzzleConfig:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("Config file must contain a JSON object.")
    return config_from_dict(data)
