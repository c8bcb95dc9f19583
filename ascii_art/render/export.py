import logging
import os
from typing import List, Union
from PIL import Image
from xml.sax.saxutils import escape as xml_escape

from ascii_art.render.color import OUTPUT_BG_RGB, RGB, rgb_hex
from ascii_art.utils.fonts import MONO_FONT_FAMILY

logger = logging.getLogger(__name__)


def save_text(art: str, path: Union[str, os.PathLike]) -> str:
    """Write the text block as-is: no header, no trailing framing."""
    path = os.fspath(path)
    if not path.lower().endswith(".txt"):
        path += ".txt"
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(art)
    logger.info("saved %d characters to %s", len(art), path)
    return path


def save_png(img: Image.Image, path: Union[str, os.PathLike]) -> str:
    path = os.fspath(path)
    if not path.lower().endswith(".png"):
        path += ".png"
    img.save(path, format="PNG")
    return path


def save_svg(svg: str, path: Union[str, os.PathLike]) -> str:
    path = os.fspath(path)
    if not path.lower().endswith(".svg"):
        path += ".svg"
    with open(path, "w", encoding="utf-8") as f:
        f.write(svg)
    return path


def svg_text_export(lines: List[str],
                    fg_rgb: RGB,
                    font_size_px: int,
                    char_w: int,
                    line_h: int,
                    transparent_bg: bool = False,
                    bg_rgb: RGB = OUTPUT_BG_RGB) -> str:
    if not lines:
        raise ValueError("No text")
    pad = 2
    w_chars = max(len(l) for l in lines)
    width_px = w_chars * char_w + 2 * pad
    height_px = len(lines) * line_h + 2 * pad

    style = f"""
    <style>
      text {{
        font-family: {xml_escape(MONO_FONT_FAMILY)};
        font-size: {font_size_px}px;
        white-space: pre;
        font-variant-ligatures: none;
      }}
    </style>
    """

    out = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{width_px}" height="{height_px}" viewBox="0 0 {width_px} {height_px}">',
           style.strip()]
    if not transparent_bg:
        out.append(f'<rect width="100%" height="100%" fill="{rgb_hex(bg_rgb)}"/>')

    fg_hex = rgb_hex(fg_rgb)
    for y, line in enumerate(lines):
        y_px = pad + y * line_h
        out.append(f'<text x="{pad}" y="{y_px}" fill="{fg_hex}" dominant-baseline="hanging" xml:space="preserve">{xml_escape(line)}</text>')
    out.append('</svg>')
    return "\n".join(out)
