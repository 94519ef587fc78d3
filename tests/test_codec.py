"""Tests for HSL -> hex conversion."""

import re

from chromacle.codec import hex_to_rgb, to_hex
from chromacle.models import Color


def test_primary_colors():
    assert to_hex(Color(0, 100, 50)) == "#ff0000"
    assert to_hex(Color(120, 100, 50)) == "#00ff00"
    assert to_hex(Color(240, 100, 50)) == "#0000ff"


def test_black_and_white():
    assert to_hex(Color(0, 0, 0)) == "#000000"
    assert to_hex(Color(123, 80, 100)) == "#ffffff"


def test_mid_grey_rounds_half_up():
    assert to_hex(Color(0, 0, 50)) == "#808080"


def test_blue_sextant():
    assert to_hex(Color(200, 60, 50)) == "#3399cc"


def test_every_hue_gives_valid_hex():
    pattern = re.compile(r"^#[0-9a-f]{6}$")
    for h in range(0, 360, 7):
        for s in (0, 33, 100):
            for l in (0, 25, 50, 75, 100):
                out = to_hex(Color(h, s, l))
                assert pattern.match(out)
                assert all(0 <= c <= 255 for c in hex_to_rgb(out))
