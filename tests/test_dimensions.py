"""Tests for output-size reconciliation."""

from __future__ import annotations

import dataclasses

import pytest

from ascii_art.render.dimensions import (
    DimensionState,
    Driver,
    aspect_ratio_of,
    clamp_dimension,
    dimensions_for_new_image,
    ratio_label,
    resolve_dimensions,
)


@pytest.mark.parametrize("raw,expected", [
    (150, 150),
    ("150", 150),
    (" 150px", 150),
    (42.9, 42),
    (5, 10),
    ("999", 200),
    (-5, 10),
    ("abc", 200),
    ("", 200),
    (None, 200),
    ("0", 200),
    (float("nan"), 200),
])
def test_clamp_dimension(raw, expected):
    assert clamp_dimension(raw) == expected


def test_unlocked_dimensions_are_independent():
    assert resolve_dimensions(80, Driver.WIDTH, (120, 60), False, 2.0) == (80, 60)
    assert resolve_dimensions(33, Driver.HEIGHT, (120, 60), False, 2.0) == (120, 33)


def test_locked_without_ratio_is_independent():
    assert resolve_dimensions(80, Driver.WIDTH, (120, 60), True, None) == (80, 60)


def test_locked_ratio_round_trip():
    w, h = resolve_dimensions(100, Driver.WIDTH, (200, 200), True, 2.0)
    assert (w, h) == (100, 50)
    assert resolve_dimensions(50, Driver.HEIGHT, (w, h), True, 2.0) == (100, 50)


def test_height_drives_width():
    assert resolve_dimensions(40, Driver.HEIGHT, (100, 50), True, 2.0) == (80, 40)


def test_only_driver_is_used():
    # both fields differ from stored state; the driver alone decides
    assert resolve_dimensions(60, Driver.WIDTH, (11, 99), True, 1.5) == (60, 40)
    assert resolve_dimensions(60, Driver.HEIGHT, (11, 99), True, 1.5) == (90, 60)


def test_rounds_half_up():
    assert resolve_dimensions(25, Driver.WIDTH, (200, 200), True, 2.0) == (25, 13)


def test_derived_dimension_is_clamped():
    # tall image: 200 / 0.5 would be 400
    assert resolve_dimensions(200, Driver.WIDTH, (10, 10), True, 0.5) == (200, 200)
    # wide image: 50 / 10 would be 5
    assert resolve_dimensions(50, Driver.WIDTH, (10, 10), True, 10.0) == (50, 10)


def test_proposed_value_is_sanitised():
    assert resolve_dimensions("junk", Driver.WIDTH, (50, 25), True, 2.0) == (200, 100)
    assert resolve_dimensions(3, Driver.HEIGHT, (50, 25), False, 2.0) == (50, 10)


def test_aspect_ratio_of():
    assert aspect_ratio_of(400, 200) == 2.0
    with pytest.raises(ValueError):
        aspect_ratio_of(0, 10)


def test_new_image_recomputes_height_when_locked():
    assert dimensions_for_new_image((200, 200), True, 2.0) == (200, 100)
    assert dimensions_for_new_image((200, 200), False, 2.0) == (200, 200)


def test_state_image_loaded():
    s = DimensionState().image_loaded(640, 320)
    assert s.ratio == 2.0
    assert s.size == (200, 100)

    unlocked = DimensionState(locked=False).image_loaded(640, 320)
    assert unlocked.size == (200, 200)
    assert unlocked.ratio == 2.0


def test_state_edits_are_new_objects():
    s = DimensionState().image_loaded(400, 200)
    s2 = s.edit("100", Driver.WIDTH)
    assert s2.size == (100, 50)
    assert s.size == (200, 100)
    with pytest.raises(dataclasses.FrozenInstanceError):
        s2.width = 10


def test_state_lock_toggle():
    s = DimensionState().image_loaded(400, 200).set_locked(False)
    assert s.edit(120, Driver.WIDTH).size == (120, 100)
    assert s.set_locked(True).edit(120, Driver.WIDTH).size == (120, 60)


def test_ratio_label():
    assert ratio_label(None) == ""
    assert ratio_label(2.0) == "Aspect ratio: 2.00:1"
    assert ratio_label(DimensionState().image_loaded(640, 480).ratio) == "Aspect ratio: 1.33:1"
