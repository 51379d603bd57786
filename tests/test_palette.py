import pytest

from cosmogen.world.palette import build_colour_ramp, hex_to_rgb, rgb_to_hex


def test_hex_parsing():
    assert hex_to_rgb("#FFA500") == (255, 165, 0)
    assert hex_to_rgb("00ff7f") == (0, 255, 127)
    with pytest.raises(ValueError):
        hex_to_rgb("#12")


def test_rgb_to_hex_clamps():
    assert rgb_to_hex(300, -5, 127.6) == "#FF0080"


def test_ramp_ends_match_palette():
    ramp = build_colour_ramp([(0, 0, 0), (255, 255, 255)], 5)
    assert ramp == ["#000000", "#404040", "#808080", "#BFBFBF", "#FFFFFF"]


def test_single_colour_ramp():
    assert build_colour_ramp([(0, 255, 255)], 3) == ["#00FFFF"] * 3


def test_empty_palette_rejected():
    with pytest.raises(ValueError):
        build_colour_ramp([], 4)
