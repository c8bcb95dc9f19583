from typing import List
from PIL import Image, ImageDraw, ImageFont
from PySide6 import QtGui

from ascii_art.render.color import OUTPUT_BG_RGB, RGB
from ascii_art.utils.fonts import measure_char_cell


def render_lines_to_rgba(lines: List[str],
                         font: ImageFont.ImageFont,
                         fg_rgb: RGB,
                         transparent_bg: bool = False,
                         bg_rgb: RGB = OUTPUT_BG_RGB) -> Image.Image:
    if not lines:
        raise ValueError("No lines to render.")
    char_w, char_h = measure_char_cell(font)
    w_chars = max(len(l) for l in lines)
    h_chars = len(lines)

    fill_bg = (0, 0, 0, 0) if transparent_bg else (*bg_rgb, 255)
    out = Image.new("RGBA", (w_chars * char_w, h_chars * char_h), fill_bg)

    draw = ImageDraw.Draw(out, "RGBA")
    fill = (*fg_rgb, 255)
    # One draw call per cell keeps columns on the grid even for fonts that kern.
    for y, line in enumerate(lines):
        for x, ch in enumerate(line):
            if ch != " ":
                draw.text((x * char_w, y * char_h), ch, fill=fill, font=font)
    return out


def pil_to_qimage(img: Image.Image) -> QtGui.QImage:
    rgba = img.convert("RGBA")
    data = rgba.tobytes("raw", "RGBA")
    qimg = QtGui.QImage(data, rgba.size[0], rgba.size[1], QtGui.QImage.Format_RGBA8888)
    return qimg.copy()
