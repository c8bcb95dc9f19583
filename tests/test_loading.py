"""Tests for decoding images into pixel buffers."""

from __future__ import annotations

import io

import pytest
from PIL import Image

from ascii_art.render.ascii import convert_to_ascii
from ascii_art.render.errors import ImageDecodeError
from ascii_art.render.loading import load_source_image, source_from_pil


def test_load_from_bytes(png_bytes):
    src = load_source_image(png_bytes)
    assert (src.width, src.height) == (40, 20)
    assert src.pixels.shape == (20, 40, 4)


def test_load_from_path(png_path):
    src = load_source_image(png_path)
    assert (src.width, src.height) == (40, 20)
    assert convert_to_ascii(src, 2, 1, "@ ") == "@ \n"


def test_grayscale_image_becomes_rgba():
    src = source_from_pil(Image.new("L", (3, 2), 128))
    assert src.pixels.shape == (2, 3, 4)
    assert src.pixels[0, 0].tolist() == [128, 128, 128, 255]


def test_pil_image_is_accepted():
    src = load_source_image(Image.new("RGB", (5, 7), (10, 20, 30)))
    assert (src.width, src.height) == (5, 7)


def test_garbage_bytes_fail():
    with pytest.raises(ImageDecodeError):
        load_source_image(b"definitely not an image")


def test_missing_file_fails(tmp_path):
    with pytest.raises(ImageDecodeError):
        load_source_image(tmp_path / "missing.png")


def test_oversized_image_fails_as_decode_error(monkeypatch):
    buf = io.BytesIO()
    Image.new("RGB", (100, 100), (0, 0, 0)).save(buf, format="PNG")
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)
    with pytest.raises(ImageDecodeError):
        load_source_image(buf.getvalue())
