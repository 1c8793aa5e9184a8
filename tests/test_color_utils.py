"""color_utils 보조 함수 테스트"""
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from color_utils import normalize_color_input, rgb_to_hex, rgb_to_hsl01, rgb_to_lch


def test_normalize_color_input_accepts_rgba_string():
    rgba_value = "rgba(152.8671875, 49.98498715154452, 39.55773711622807, 1)"
    assert normalize_color_input(rgba_value) == "#993228"


def test_normalize_color_input_accepts_plain_hex_without_hash():
    assert normalize_color_input("ff6b5c") == "#FF6B5C"


def test_normalize_color_input_rejects_invalid_string():
    assert normalize_color_input("not-a-color") is None


def test_rgb_to_hex_rejects_out_of_range():
    with pytest.raises(ValueError):
        rgb_to_hex(256, 0, 0)


def test_rgb_to_lch_pure_red():
    lightness, chroma, hue = rgb_to_lch(255, 0, 0)
    assert lightness == pytest.approx(53.24, abs=0.1)
    assert chroma == pytest.approx(104.55, abs=0.2)
    assert hue == pytest.approx(40.0, abs=0.2)


@pytest.mark.parametrize(
    "rgb, expected_l",
    [((255, 255, 255), 100.0), ((0, 0, 0), 0.0)],
)
def test_rgb_to_lch_achromatic(rgb, expected_l):
    lightness, chroma, hue = rgb_to_lch(*rgb)
    assert lightness == pytest.approx(expected_l, abs=0.01)
    assert chroma < 0.1
    assert 0.0 <= hue < 360.0


def test_rgb_to_lch_hue_in_degrees():
    _, _, hue = rgb_to_lch(0, 0, 255)
    assert hue == pytest.approx(306.3, abs=0.5)


def test_rgb_to_hsl01_order():
    h, s, l = rgb_to_hsl01(255, 0, 0)
    assert (h, s, l) == pytest.approx((0.0, 1.0, 0.5))
