"""Shared test fixtures."""

from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image

from ascii_art.render.ascii import SourceImage

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def solid_image(width: int, height: int, rgba=WHITE) -> SourceImage:
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[...] = rgba
    return SourceImage(width, height, pixels)


@pytest.fixture
def checker_2x2() -> SourceImage:
    pixels = np.array([[WHITE, BLACK],
                       [BLACK, WHITE]], dtype=np.uint8)
    return SourceImage(2, 2, pixels)


@pytest.fixture
def noise_image() -> SourceImage:
    rng = np.random.default_rng(7)
    pixels = rng.integers(0, 256, size=(48, 64, 4), dtype=np.uint8)
    return SourceImage(64, 48, pixels)


@pytest.fixture
def gradient_image() -> SourceImage:
    """256 columns, left black to right white."""
    ramp = np.arange(256, dtype=np.uint8)
    pixels = np.empty((16, 256, 4), dtype=np.uint8)
    pixels[..., 0] = ramp
    pixels[..., 1] = ramp
    pixels[..., 2] = ramp
    pixels[..., 3] = 255
    return SourceImage(256, 16, pixels)


@pytest.fixture
def png_bytes() -> bytes:
    """40x20 PNG: left half black, right half white."""
    img = Image.new("RGB", (40, 20), (255, 255, 255))
    img.paste((0, 0, 0), (0, 0, 20, 20))
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def png_path(tmp_path, png_bytes):
    path = tmp_path / "halves.png"
    path.write_bytes(png_bytes)
    return path
