import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np

from ascii_art.render.errors import ConversionCancelled, ImageDecodeError

logger = logging.getLogger(__name__)

# BT.601 luma weights, per mille, so patch sums stay exact integers.
LUMA_WEIGHTS = (299, 587, 114)
LUMA_SCALE = 1000


@dataclass(frozen=True, eq=False)
class SourceImage:
    width: int
    height: int
    pixels: np.ndarray  # (height, width, 4) uint8, RGBA

    def __post_init__(self):
        w, h = int(self.width), int(self.height)
        if w < 1 or h < 1:
            raise ImageDecodeError(f"Image size must be positive, got {w}x{h}")
        try:
            arr = np.asarray(self.pixels)
        except (TypeError, ValueError) as e:
            raise ImageDecodeError(f"Unreadable pixel buffer: {e}") from e
        if arr.shape != (h, w, 4):
            raise ImageDecodeError(f"Expected RGBA buffer of shape {(h, w, 4)}, got {arr.shape}")
        if arr.dtype != np.uint8:
            if not np.issubdtype(arr.dtype, np.number) or np.issubdtype(arr.dtype, np.complexfloating):
                raise ImageDecodeError("RGBA samples must be numbers in 0..255")
            # NaN compares False against any bound; check finiteness and whole values first.
            if not np.all(np.isfinite(arr)) or np.any(arr != np.floor(arr)):
                raise ImageDecodeError("RGBA samples must be whole numbers in 0..255")
            if arr.min() < 0 or arr.max() > 255:
                raise ImageDecodeError("RGBA samples must be numbers in 0..255")
            arr = arr.astype(np.uint8)
        arr = arr.copy()
        arr.flags.writeable = False
        object.__setattr__(self, "width", w)
        object.__setattr__(self, "height", h)
        object.__setattr__(self, "pixels", arr)

    @classmethod
    def from_buffer(cls, width: int, height: int, data) -> "SourceImage":
        """Build from a flat row-major RGBA sequence (canvas ImageData layout)."""
        flat = np.frombuffer(data, dtype=np.uint8) if isinstance(data, (bytes, bytearray, memoryview)) \
            else np.asarray(data)
        if flat.size != width * height * 4:
            raise ImageDecodeError(f"Expected {width * height * 4} RGBA samples, got {flat.size}")
        return cls(width, height, flat.reshape(height, width, 4))


def patch_edges(source_len: int, out_len: int) -> np.ndarray:
    """
    Pixel boundaries of the out_len patches along one axis.
    Patch i covers [edges[i], edges[i + 1]); consecutive patches share an edge
    and the last edge is always source_len.
    """
    i = np.arange(out_len + 1, dtype=np.int64)
    return np.minimum((i * source_len) // out_len, source_len)


def luma_table(pixels: np.ndarray) -> np.ndarray:
    """Summed-area table of scaled luma; alpha is ignored."""
    rgb = pixels[..., :3].astype(np.int64)
    luma = rgb[..., 0] * LUMA_WEIGHTS[0] + rgb[..., 1] * LUMA_WEIGHTS[1] + rgb[..., 2] * LUMA_WEIGHTS[2]
    h, w = luma.shape
    table = np.zeros((h + 1, w + 1), dtype=np.int64)
    table[1:, 1:] = luma.cumsum(axis=0).cumsum(axis=1)
    return table


def glyph_indices(avg_gray, ramp_len: int) -> np.ndarray:
    n = ramp_len - 1
    idx = np.floor(np.asarray(avg_gray, dtype=np.float64) / 255.0 * n).astype(np.int64)
    return np.clip(idx, 0, n)


def _check_request(out_w: int, out_h: int, ramp: str):
    # Grid bounds are the resolver's job; any positive grid converts.
    for name, v in (("width", out_w), ("height", out_h)):
        if isinstance(v, bool) or not isinstance(v, (int, np.integer)) or v < 1:
            raise ValueError(f"Output {name} must be a positive int, got {v!r}")
    if not ramp or len(ramp) < 2:
        raise ValueError("Glyph ramp needs at least two characters.")


def row_gray_levels(table: np.ndarray, ys: int, ye: int, xs: np.ndarray, xe: np.ndarray) -> np.ndarray:
    """Average gray (0..255) of every patch in one output row; empty patches read as 0."""
    sums = table[ye, xe] - table[ys, xe] - table[ye, xs] + table[ys, xs]
    counts = (ye - ys) * (xe - xs)
    out = np.zeros(sums.shape, dtype=np.float64)
    np.divide(sums, counts * float(LUMA_SCALE), out=out, where=counts > 0)
    return out


def make_ascii_lines(source: SourceImage,
                     out_w: int,
                     out_h: int,
                     ramp: str,
                     should_cancel: Optional[Callable[[], bool]] = None) -> List[str]:
    _check_request(out_w, out_h, ramp)
    logger.debug("converting %dx%d source to %dx%d grid (ramp of %d glyphs)",
                 source.width, source.height, out_w, out_h, len(ramp))

    table = luma_table(source.pixels)
    ex = patch_edges(source.width, out_w)
    ey = patch_edges(source.height, out_h)
    xs, xe = ex[:-1], ex[1:]

    lines = []
    for y in range(out_h):
        if should_cancel is not None and should_cancel():
            raise ConversionCancelled(f"Cancelled at row {y} of {out_h}")
        gray = row_gray_levels(table, int(ey[y]), int(ey[y + 1]), xs, xe)
        lines.append("".join(ramp[i] for i in glyph_indices(gray, len(ramp))))
    return lines


def convert_to_ascii(source: SourceImage,
                     out_w: int,
                     out_h: int,
                     ramp: str,
                     should_cancel: Optional[Callable[[], bool]] = None) -> str:
    lines = make_ascii_lines(source, out_w, out_h, ramp, should_cancel)
    return "".join(line + "\n" for line in lines)
