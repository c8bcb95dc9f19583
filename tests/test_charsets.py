"""Tests for the glyph ramp registry."""

import pytest

from ascii_art.config import DEFAULT_RAMP
from ascii_art.render.charsets import GLYPH_RAMPS, RAMP_LABELS, get_ramp, ramp_names


def test_registry_names_in_order():
    assert ramp_names() == ["minimal", "simple", "detailed", "blocks", "comprehensive"]
    assert set(RAMP_LABELS) == set(GLYPH_RAMPS)


def test_ramps_are_usable():
    for name in ramp_names():
        assert len(get_ramp(name)) >= 2


def test_known_ramps():
    assert get_ramp("minimal") == "@%#*+=-:. "
    assert get_ramp("blocks") == "█▓▒░ "
    assert get_ramp() == get_ramp(DEFAULT_RAMP) == "@#S%?*+;:,. "


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        GLYPH_RAMPS["custom"] = "ab"


def test_unknown_ramp():
    with pytest.raises(KeyError, match="minimal"):
        get_ramp("nope")
