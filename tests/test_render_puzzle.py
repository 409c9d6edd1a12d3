import os
import sys

# Add project root to sys.path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pygame

import render_puzzle


def test_prints_clues(capsys):
    assert render_puzzle.main(["AwIN", "--clues"]) == 0
    out = capsys.readouterr().out
    assert "Grid 3x2" in out
    assert "  0: 1" in out
    assert "  2: 0" in out
    assert "  0: 2" in out


def test_invalid_text_exits_with_error(capsys):
    assert render_puzzle.main(["@@not-a-puzzle@@", "--clues"]) == 1
    assert "Invalid input specified!" in capsys.readouterr().out


def test_writes_png(tmp_path, monkeypatch):
    # SysFont may not find the configured font; the default font is enough here.
    monkeypatch.setattr(render_puzzle, "load_font", lambda config: pygame.font.Font(None, config.font_size))
    out = tmp_path / "p.png"
    assert render_puzzle.main(["AwIN", "-o", str(out), "--hide-answer"]) == 0
    assert out.exists()


def test_bad_config_exits_with_error(tmp_path, capsys):
    cfg = tmp_path / "cfg.json"
    cfg.write_text('{"text_padding": "wide"}', encoding="utf-8")
    assert render_puzzle.main(["AwIN", "-o", str(tmp_path / "p.png"), "--config", str(cfg)]) == 1
    assert "Error loading config" in capsys.readouterr().out
    assert not (tmp_path / "p.png").exists()
