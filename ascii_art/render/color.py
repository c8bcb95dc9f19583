from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from ascii_art.config import DEFAULT_DISPLAY_COLOR

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class DisplayColor:
    label: str
    text_rgb: RGB
    border_rgb: RGB


# Display-only tint for the text block; never feeds into glyph selection.
DISPLAY_COLORS: Mapping[str, DisplayColor] = MappingProxyType({
    "green":  DisplayColor("Matrix Green", (74, 222, 128), (22, 101, 52)),
    "blue":   DisplayColor("Cyber Blue", (96, 165, 250), (30, 64, 175)),
    "purple": DisplayColor("Neon Purple", (192, 132, 252), (107, 33, 168)),
    "orange": DisplayColor("Retro Orange", (251, 146, 60), (154, 52, 18)),
    "red":    DisplayColor("Terminal Red", (248, 113, 113), (153, 27, 27)),
    "white":  DisplayColor("Classic White", (255, 255, 255), (75, 85, 99)),
})

OUTPUT_BG_RGB: RGB = (0, 0, 0)


def display_color(name: str) -> DisplayColor:
    return DISPLAY_COLORS.get(name, DISPLAY_COLORS[DEFAULT_DISPLAY_COLOR])


def rgb_hex(rgb: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(int(rgb[0]), int(rgb[1]), int(rgb[2]))
