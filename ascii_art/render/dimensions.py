import enum
import math
import re
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from ascii_art.config import DEFAULT_DIMENSION, MAX_DIMENSION, MIN_DIMENSION

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


class Driver(enum.Enum):
    """The output dimension the user just edited."""
    WIDTH = "width"
    HEIGHT = "height"


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _parse_dimension(value) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    m = _INT_PREFIX.match(str(value or ""))
    return int(m.group(1)) if m else 0


def clamp_dimension(value: Union[int, float, str, None]) -> int:
    """
    Sanitise a raw width/height entry.
    Anything that does not parse to a non-zero integer becomes DEFAULT_DIMENSION;
    the result always lies in [MIN_DIMENSION, MAX_DIMENSION].
    """
    n = _parse_dimension(value) or DEFAULT_DIMENSION
    return max(MIN_DIMENSION, min(MAX_DIMENSION, n))


def aspect_ratio_of(width: int, height: int) -> float:
    if width <= 0 or height <= 0:
        raise ValueError(f"Image size must be positive, got {width}x{height}")
    return width / height


def ratio_label(ratio: Optional[float]) -> str:
    return f"Aspect ratio: {ratio:.2f}:1" if ratio else ""


def resolve_dimensions(proposed,
                       driver: Driver,
                       current: Tuple[int, int],
                       locked: bool,
                       ratio: Optional[float]) -> Tuple[int, int]:
    value = clamp_dimension(proposed)
    width, height = current

    if not locked or not ratio:
        if driver is Driver.WIDTH:
            return value, height
        return width, value

    # Derived side is clamped here too: round(200 / 0.5) would be 400.
    if driver is Driver.WIDTH:
        return value, clamp_dimension(_round_half_up(value / ratio))
    return clamp_dimension(_round_half_up(value * ratio)), value


def dimensions_for_new_image(current: Tuple[int, int],
                             locked: bool,
                             ratio: float) -> Tuple[int, int]:
    width, height = current
    if not locked:
        return width, height
    return width, clamp_dimension(_round_half_up(width / ratio))


@dataclass(frozen=True)
class DimensionState:
    width: int = DEFAULT_DIMENSION
    height: int = DEFAULT_DIMENSION
    locked: bool = True
    ratio: Optional[float] = None

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def edit(self, value, driver: Driver) -> "DimensionState":
        w, h = resolve_dimensions(value, driver, self.size, self.locked, self.ratio)
        return replace(self, width=w, height=h)

    def set_locked(self, locked: bool) -> "DimensionState":
        return replace(self, locked=bool(locked))

    def image_loaded(self, image_width: int, image_height: int) -> "DimensionState":
        ratio = aspect_ratio_of(image_width, image_height)
        w, h = dimensions_for_new_image(self.size, self.locked, ratio)
        return replace(self, width=w, height=h, ratio=ratio)
