"""Tests for text/SVG export and display helpers."""

from __future__ import annotations

import pytest

from ascii_art.config import DEFAULT_DISPLAY_COLOR
from ascii_art.render.color import DISPLAY_COLORS, display_color, rgb_hex
from ascii_art.render.export import save_svg, save_text, svg_text_export
from ascii_art.utils.fonts import load_mono_font, measure_char_cell, preview_font_px


def test_save_text_is_verbatim(tmp_path):
    art = " @\n@ \n"
    path = save_text(art, tmp_path / "ascii-art.txt")
    with open(path, encoding="utf-8", newline="") as f:
        assert f.read() == art


def test_save_text_adds_extension(tmp_path):
    path = save_text("ab\n", tmp_path / "out")
    assert path.endswith("out.txt")


def test_svg_text_export():
    svg = svg_text_export(["<&>", "ab"], fg_rgb=(74, 222, 128), font_size_px=12, char_w=7, line_h=14)
    assert svg.startswith("<svg")
    assert svg.count("<text ") == 2
    assert "&lt;&amp;&gt;" in svg
    assert 'fill="#4ade80"' in svg


def test_svg_text_export_needs_lines():
    with pytest.raises(ValueError):
        svg_text_export([], fg_rgb=(0, 0, 0), font_size_px=12, char_w=7, line_h=14)


def test_display_colors():
    assert DISPLAY_COLORS["green"].label == "Matrix Green"
    assert display_color("nope") is DISPLAY_COLORS[DEFAULT_DISPLAY_COLOR]
    assert rgb_hex((255, 0, 16)) == "#ff0010"


@pytest.mark.parametrize("width,px", [(200, 6.0), (80, 7.5), (60, 10.0), (10, 10.0)])
def test_preview_font_px(width, px):
    assert preview_font_px(width) == px


def test_render_lines_to_rgba():
    pytest.importorskip("PySide6")
    from ascii_art.render.rendering import render_lines_to_rgba

    font = load_mono_font(12)
    cw, ch = measure_char_cell(font)
    img = render_lines_to_rgba(["@ @", "   "], font, (255, 255, 255))
    assert img.size == (3 * cw, 2 * ch)
    assert img.getpixel((0, 0))[3] == 255


def test_save_svg_adds_extension(tmp_path):
    svg = svg_text_export(["@ "], fg_rgb=(255, 255, 255), font_size_px=12, char_w=7, line_h=14)
    path = save_svg(svg, tmp_path / "art")
    assert path.endswith("art.svg")
    with open(path, encoding="utf-8") as f:
        assert f.read() == svg
