# ascii_art/utils/fonts.py
import logging
from typing import Dict, Tuple
from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger(__name__)

# Tried in order; Pillow resolves bare file names against the system font dirs.
MONO_FONT_FILES = ("DejaVuSansMono.ttf", "consola.ttf", "CascadiaMono.ttf", "Menlo.ttc", "cour.ttf")
MONO_FONT_FAMILY = 'Monaco, "Cascadia Code", "Roboto Mono", Consolas, "Courier New", monospace'

_FONT_CACHE: Dict[int, ImageFont.ImageFont] = {}


def preview_font_px(width_chars: int) -> float:
    """Text size for the on-screen output: narrower grids get bigger glyphs, within 6..10px."""
    return max(6.0, min(10.0, 600.0 / max(1, int(width_chars))))


def load_mono_font(size: int):
    size = int(size)
    if size in _FONT_CACHE:
        return _FONT_CACHE[size]
    font = None
    for name in MONO_FONT_FILES:
        try:
            font = ImageFont.truetype(name, size=size)
            break
        except OSError:
            continue
    if font is None:
        logger.warning("no monospace TrueType font found; using Pillow's default font")
        font = ImageFont.load_default()
    _FONT_CACHE[size] = font
    return font


def measure_char_cell(font) -> Tuple[int, int]:
    """
    Width from getlength('M') when available,
    height from ascent+descent when available.
    """
    if hasattr(font, "getlength"):
        char_w = int(round(font.getlength("M")))
    else:
        d = ImageDraw.Draw(Image.new("RGB", (80, 80)))
        bbox = d.textbbox((0, 0), "M", font=font)
        char_w = bbox[2] - bbox[0]

    if hasattr(font, "getmetrics"):
        ascent, descent = font.getmetrics()
        char_h = int(ascent + descent)
    else:
        d = ImageDraw.Draw(Image.new("RGB", (80, 80)))
        bbox = d.textbbox((0, 0), "Hg", font=font)  # includes descenders
        char_h = bbox[3] - bbox[1]

    return max(1, char_w), max(1, char_h)
